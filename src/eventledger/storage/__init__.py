"""
Storage layer for the ledger.

Event log (source of truth), account store (materialized projections) and
the projection builder that derives one from the other.
"""

from eventledger.storage.account_store import (
    AccountStore,
    InMemoryAccountStore,
    SqliteAccountStore,
)
from eventledger.storage.event_log import EventLog, InMemoryEventLog, SqliteEventLog
from eventledger.storage.projection import AccountProjectionBuilder

__all__ = [
    "EventLog",
    "InMemoryEventLog",
    "SqliteEventLog",
    "AccountStore",
    "InMemoryAccountStore",
    "SqliteAccountStore",
    "AccountProjectionBuilder",
]
