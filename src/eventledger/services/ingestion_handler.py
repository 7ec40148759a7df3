"""
Event ingestion handler - the single entry point for writes.

``send`` runs two sequential, non-transactional steps:
1. append the event to the event log
2. rebuild the projection of the event's account

There is no compensation when step 2 fails: the event stays in the log and
``PartialIngestionError`` is raised. The projection lags the log until the
account is rebuilt again.

Calls for the same account are serialized with a per-account lock so that
append order and rebuild order agree. Different accounts do not block each
other. Reconciliation rebuilds (``rebuild`` and ``rebuild_all``) take the same
locks, so they cannot save a projection older than one saved by ``send``.

One lock is kept per account seen, for the lifetime of the handler.
"""
from __future__ import annotations

import logging
import threading
from typing import Dict

from eventledger.errors import PartialIngestionError
from eventledger.model.account import Account
from eventledger.model.events import Event
from eventledger.storage.event_log import EventLog
from eventledger.storage.projection import AccountProjectionBuilder

logger = logging.getLogger(__name__)


class AccountEventHandler:
    """Accepts domain events and keeps account projections current."""

    def __init__(self, event_log: EventLog, projection_builder: AccountProjectionBuilder):
        self.event_log = event_log
        self.projection_builder = projection_builder
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def send(self, event: Event) -> Account:
        """Store the event and rebuild its account.

        Args:
            event: Domain event; validation is the caller's responsibility

        Returns:
            The rebuilt account projection

        Raises:
            pydantic.ValidationError: if a known event type has a malformed
                payload; nothing is stored
            PartialIngestionError: if the rebuild failed after the append
        """
        account_id = event.payload.account_id
        with self._lock_for(account_id):
            self.event_log.append(event)
            logger.info(
                "Ingested %s event %s for account %r",
                event.event_type,
                event.event_id,
                account_id,
            )
            try:
                return self.projection_builder.rebuild(account_id)
            except Exception as e:
                logger.exception("Projection rebuild failed after storing event %s", event.event_id)
                raise PartialIngestionError(event, e) from e

    def rebuild(self, account_id: str) -> Account:
        """Rebuild one account under its lock."""
        with self._lock_for(account_id):
            return self.projection_builder.rebuild(account_id)

    def rebuild_all(self) -> int:
        """Rebuild every account in the log, one lock at a time.

        Returns:
            Number of accounts rebuilt
        """
        account_ids = self.event_log.account_ids()
        for account_id in account_ids:
            self.rebuild(account_id)
        return len(account_ids)

    def _lock_for(self, account_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(account_id)
            if lock is None:
                lock = self._locks[account_id] = threading.Lock()
            return lock


__all__ = ["AccountEventHandler"]
