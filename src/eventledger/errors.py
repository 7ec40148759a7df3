"""
Exceptions raised by the ledger.

Absence is not an error: lookups return ``None`` or an empty list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eventledger.model.events import Event


class LedgerError(Exception):
    """Base class for ledger errors."""


class ConfigError(LedgerError):
    """Raised when the workspace settings file cannot be used."""


class PartialIngestionError(LedgerError):
    """The event was appended but the projection rebuild failed.

    The event is durably stored; the account projection is stale until the
    account is rebuilt again (e.g. with ``eventledger rebuild``).
    """

    def __init__(self, event: "Event", cause: BaseException):
        self.event = event
        self.account_id = event.payload.account_id
        self.cause = cause
        super().__init__(
            f"Event {event.event_id} was stored but rebuilding account "
            f"{self.account_id!r} failed: {cause}"
        )


__all__ = ["LedgerError", "ConfigError", "PartialIngestionError"]
