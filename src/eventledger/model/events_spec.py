"""
Tests for domain event models.
"""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from eventledger.model.events import (
    AccountCreated,
    AccountCreatedPayload,
    AccountPayload,
    DepositConfirmed,
    DepositConfirmedPayload,
    Event,
    EventType,
    as_typed,
    parse_event,
    parse_event_json,
)


class DescribeEvent:
    """Test base Event functionality."""

    def it_should_generate_event_id_when_omitted(self):
        event = Event(event_type="Anything", payload=AccountPayload(account_id="1"))
        assert event.event_id

    def it_should_be_immutable(self, account_created):
        event = account_created()
        with pytest.raises(ValidationError):
            event.event_id = "other"

    def it_should_expose_account_id_from_payload(self, account_created):
        assert account_created(account_id="555").account_id == "555"

    def it_should_keep_extra_payload_fields_for_unknown_types(self):
        event = parse_event(
            {
                "eventId": "9",
                "eventType": "AccountClosed",
                "payload": {"accountId": "123", "reason": "moved"},
            }
        )
        assert type(event) is Event
        assert event.to_wire()["payload"] == {"accountId": "123", "reason": "moved"}

    def it_should_serialize_every_field_of_a_typed_payload(self):
        event = Event(
            event_id="1",
            event_type="AccountCreated",
            payload=AccountCreatedPayload(account_id="123", email="olu@example.com"),
        )

        assert event.to_wire()["payload"] == {"accountId": "123", "email": "olu@example.com"}
        assert json.loads(event.to_wire_json())["payload"]["email"] == "olu@example.com"


class DescribeAccountCreated:
    def it_should_fix_event_type(self, account_created):
        assert account_created().event_type == EventType.ACCOUNT_CREATED.value

    def it_should_require_email(self):
        with pytest.raises(ValidationError):
            AccountCreatedPayload(account_id="123")

    def it_should_serialize_to_camel_case_wire_record(self, account_created):
        wire = account_created().to_wire()
        assert wire == {
            "eventId": "1",
            "eventType": "AccountCreated",
            "payload": {"accountId": "123", "email": "olu@example.com"},
        }


class DescribeDepositConfirmed:
    def it_should_parse_amount_from_number_without_float_artifacts(self):
        payload = DepositConfirmedPayload(account_id="1", email="a@b.c", amount=100.1)
        assert payload.amount == Decimal("100.1")

    def it_should_not_reject_negative_amounts(self):
        payload = DepositConfirmedPayload(account_id="1", email="a@b.c", amount="-5")
        assert payload.amount == Decimal("-5")

    def it_should_serialize_amount_as_string(self, deposit_confirmed):
        data = json.loads(deposit_confirmed(amount="100.50").to_wire_json())
        assert data["payload"]["amount"] == "100.50"

    def it_should_keep_every_digit_of_large_amounts(self):
        payload = DepositConfirmedPayload(account_id="1", email="a@b.c", amount="12345678901234567.89")
        assert payload.amount == Decimal("12345678901234567.89")

    def it_should_reject_non_numeric_amounts(self):
        with pytest.raises(ValidationError):
            DepositConfirmedPayload(account_id="1", email="a@b.c", amount="lots")


class DescribeParseEvent:
    def it_should_dispatch_on_event_type(self):
        event = parse_event(
            {
                "eventId": "2",
                "eventType": "DepositConfirmed",
                "payload": {"accountId": "1234", "email": "olu@example.com", "amount": 100},
            }
        )
        assert isinstance(event, DepositConfirmed)
        assert event.payload.amount == Decimal("100")

    def it_should_accept_snake_case_names(self):
        event = parse_event(
            {
                "event_id": "1",
                "event_type": "AccountCreated",
                "payload": {"account_id": "123", "email": "olu@example.com"},
            }
        )
        assert isinstance(event, AccountCreated)
        assert event.payload.account_id == "123"

    def it_should_round_trip_through_json(self, deposit_confirmed):
        event = deposit_confirmed()
        assert parse_event_json(event.to_wire_json()) == event

    def it_should_reject_missing_account_id(self):
        with pytest.raises(ValidationError):
            parse_event({"eventId": "1", "eventType": "AccountCreated", "payload": {"email": "x"}})

    def it_should_reject_invalid_json(self):
        with pytest.raises(ValueError):
            parse_event_json("{not json")

    def it_should_reject_records_that_are_not_objects(self):
        with pytest.raises(ValueError):
            parse_event_json("[1]")

    def it_should_reject_non_string_event_type(self):
        with pytest.raises(ValidationError):
            parse_event({"eventId": "1", "eventType": [], "payload": {"accountId": "1"}})


class DescribeAsTyped:
    def it_should_upgrade_base_events_with_known_type(self):
        event = Event(
            event_id="1",
            event_type="AccountCreated",
            payload=AccountPayload(account_id="123", email="olu@example.com"),
        )
        typed = as_typed(event)
        assert isinstance(typed, AccountCreated)
        assert typed.payload.email == "olu@example.com"

    def it_should_leave_unknown_types_alone(self):
        event = Event(event_type="Mystery", payload=AccountPayload(account_id="1"))
        assert as_typed(event) is event
