from .account import Account, Customer
from .events import (
    EVENT_TYPE_MAP,
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

__all__ = [
    # projection
    "Account",
    "Customer",
    # events
    "Event",
    "EventType",
    "AccountPayload",
    "AccountCreated",
    "AccountCreatedPayload",
    "DepositConfirmed",
    "DepositConfirmedPayload",
    "EVENT_TYPE_MAP",
    # parsing helpers
    "parse_event",
    "parse_event_json",
    "as_typed",
]
