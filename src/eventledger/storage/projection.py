"""
Account projection builder for event sourcing.

Rebuilds the current state of one account from the immutable event log and
persists it to the account store. The fold is deterministic: the same event
sequence always yields the same account.

Fold rules (each step overwrites id, balance and email; last event wins):
- AccountCreated: id = account_id, balance = 0, email = payload.email
- DepositConfirmed: id = account_id, balance = payload.amount, email = payload.email

Balance is assigned from the latest deposit, not summed over deposits.
Events of unrecognized types are skipped so that newer producers do not break
older projections.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Mapping

from eventledger.model.account import Account, Customer
from eventledger.model.events import (
    AccountCreated,
    DepositConfirmed,
    Event,
    EventType,
    as_typed,
)
from eventledger.storage.account_store import AccountStore
from eventledger.storage.event_log import EventLog

logger = logging.getLogger(__name__)

Handler = Callable[[Account, Event], Account]


def require_handlers(handlers: Mapping[EventType, Handler]) -> None:
    """Fail unless every EventType has a handler.

    A kind that should not affect the projection still needs an explicit
    entry (a handler that returns the account unchanged).

    Raises:
        ValueError: naming the event types without a handler
    """
    missing = [t.value for t in EventType if t not in handlers]
    if missing:
        raise ValueError(f"No projection handler for event types: {', '.join(missing)}")


class AccountProjectionBuilder:
    """Builds account projections from the event stream."""

    def __init__(self, event_log: EventLog, account_store: AccountStore):
        self.event_log = event_log
        self.account_store = account_store
        self._handlers: Dict[EventType, Handler] = {
            EventType.ACCOUNT_CREATED: self._apply_account_created,
            EventType.DEPOSIT_CONFIRMED: self._apply_deposit_confirmed,
        }
        require_handlers(self._handlers)

    def rebuild(self, account_id: str) -> Account:
        """Replay the account's events and save the resulting projection.

        A new record is saved on every call. If the account has no recognized
        events the zero-value account (``id=""``) is saved as is.

        Args:
            account_id: Aggregate to rebuild

        Returns:
            The account that was saved
        """
        events = self.event_log.find_all_by_account(account_id)
        account = self.project(events)
        self.account_store.save(account)
        logger.info(
            "Rebuilt account %r from %d events (balance=%s)",
            account_id,
            len(events),
            account.balance,
        )
        return account

    def rebuild_all(self) -> int:
        """Rebuild every account that has events in the log.

        Brings the store back in line with the log after an ingestion whose
        rebuild step failed. Takes no locks; while events are being sent, use
        ``AccountEventHandler.rebuild_all`` instead.

        Returns:
            Number of accounts rebuilt
        """
        account_ids = self.event_log.account_ids()
        for account_id in account_ids:
            self.rebuild(account_id)
        return len(account_ids)

    def project(self, events: Iterable[Event]) -> Account:
        """Fold events left to right into an account. No I/O."""
        account = Account.empty()
        for event in self._recognized(events):
            handler = self._handlers[EventType(event.event_type)]
            account = handler(account, as_typed(event))
        return account

    def _recognized(self, events: Iterable[Event]) -> List[Event]:
        known = {t.value for t in self._handlers}
        recognized = []
        for event in events:
            if event.event_type in known:
                recognized.append(event)
            else:
                logger.debug(
                    "Skipping event %s of unrecognized type %r",
                    event.event_id,
                    event.event_type,
                )
        return recognized

    def _apply_account_created(self, account: Account, event: AccountCreated) -> Account:
        return Account(
            id=event.payload.account_id,
            balance=0,
            customer=Customer(email=event.payload.email),
        )

    def _apply_deposit_confirmed(self, account: Account, event: DepositConfirmed) -> Account:
        return Account(
            id=event.payload.account_id,
            balance=event.payload.amount,
            customer=Customer(email=event.payload.email),
        )


__all__ = ["AccountProjectionBuilder", "require_handlers"]
