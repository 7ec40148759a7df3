"""
Domain event models for the account ledger.

Events are the source of truth: they are appended once to the event log and
never modified. Every event carries a payload with the ``account_id`` of the
aggregate it belongs to.

All events share the wire shape::

    {"eventId": "...", "eventType": "AccountCreated", "payload": {"accountId": "...", ...}}

Python attributes are snake_case; the camelCase aliases are used when
serializing and are accepted (alongside the snake_case names) when parsing.

Events whose ``eventType`` is not known to this module still parse, as the
base ``Event`` with a loosely typed payload. The projection skips them, which
keeps the log forward compatible with producers that emit newer kinds.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Type
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, field_validator
from pydantic.alias_generators import to_camel


class EventType(str, Enum):
    """Event kinds the account projection understands."""

    ACCOUNT_CREATED = "AccountCreated"
    DEPOSIT_CONFIRMED = "DepositConfirmed"


class AccountPayload(BaseModel):
    """Payload fields shared by every account event.

    Extra fields are kept so that events of unknown kinds survive a round trip
    through the log unchanged.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    account_id: str


class AccountCreatedPayload(AccountPayload):
    model_config = ConfigDict(extra="ignore")

    email: str


class DepositConfirmedPayload(AccountPayload):
    """Deposit details.

    The amount is not checked for sign; validation is the producer's job.
    """

    model_config = ConfigDict(extra="ignore")

    email: str
    amount: Decimal

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value: Any) -> Decimal:
        """Parse amount from string or number without float artifacts."""
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"not a decimal amount: {value!r}") from e


class Event(BaseModel):
    """Base event for everything stored in the event log.

    Immutable after construction. ``event_id`` is normally assigned by the
    producer; a UUID is generated when it is omitted.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    event_type: str
    payload: SerializeAsAny[AccountPayload]

    @property
    def account_id(self) -> str:
        return self.payload.account_id

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the camelCase wire record."""
        return self.model_dump(by_alias=True, mode="json")

    def to_wire_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class AccountCreated(Event):
    """Emitted once when a customer's account is opened."""

    event_type: str = Field(default=EventType.ACCOUNT_CREATED.value, frozen=True)
    payload: AccountCreatedPayload


class DepositConfirmed(Event):
    """Emitted when a deposit into the account has been confirmed."""

    event_type: str = Field(default=EventType.DEPOSIT_CONFIRMED.value, frozen=True)
    payload: DepositConfirmedPayload


# Map event types to classes for deserialization
EVENT_TYPE_MAP: Dict[str, Type[Event]] = {
    EventType.ACCOUNT_CREATED.value: AccountCreated,
    EventType.DEPOSIT_CONFIRMED.value: DepositConfirmed,
}


def parse_event(data: Dict[str, Any]) -> Event:
    """Build the most specific event class for a wire record.

    Unknown event types come back as a plain ``Event``.

    Raises:
        ValueError: if the record is not a JSON object
        pydantic.ValidationError: if the record is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"event record must be an object, got {type(data).__name__}")
    event_type = data.get("eventType", data.get("event_type"))
    # Non-string types fall through to Event, whose validation rejects them.
    event_class = EVENT_TYPE_MAP.get(event_type, Event) if isinstance(event_type, str) else Event
    return event_class.model_validate(data)


def parse_event_json(event_json: str) -> Event:
    """Parse a JSON wire record; see ``parse_event``."""
    return parse_event(json.loads(event_json))


def as_typed(event: Event) -> Event:
    """Return the event as an instance of its registered class.

    Events built directly from the base class with a known ``event_type`` are
    re-validated so handlers can rely on the typed payload.
    """
    event_class = EVENT_TYPE_MAP.get(event.event_type)
    if event_class is None or isinstance(event, event_class):
        return event
    return event_class.model_validate(event.to_wire())


__all__ = [
    "EventType",
    "AccountPayload",
    "AccountCreatedPayload",
    "DepositConfirmedPayload",
    "Event",
    "AccountCreated",
    "DepositConfirmed",
    "EVENT_TYPE_MAP",
    "parse_event",
    "parse_event_json",
    "as_typed",
]
