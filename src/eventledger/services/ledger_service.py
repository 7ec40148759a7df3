"""
Ledger service - centralized wiring of the event log, account store,
projection builder and ingestion handler.

Keeps store construction out of the CLI commands so every command gets the
same backend, paths and error information.

NO IMPORTS FROM:
- rich (console, table, prompt)
- typer

Functions return data structures or raise exceptions that the caller can
handle appropriately (e.g., display with Rich in CLI).
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from eventledger.workspace import Workspace

from eventledger.config import LedgerSettings, StorageBackend, load_settings
from eventledger.services.ingestion_handler import AccountEventHandler
from eventledger.storage.account_store import (
    AccountStore,
    InMemoryAccountStore,
    SqliteAccountStore,
)
from eventledger.storage.event_log import EventLog, InMemoryEventLog, SqliteEventLog
from eventledger.storage.projection import AccountProjectionBuilder


@dataclass
class StoreStatus:
    """Existence check result for the event log."""

    exists: bool
    path: Optional[Path]
    event_count: int = 0
    account_count: int = 0


class LedgerService:
    """
    Builds and hands out the ledger components for one workspace.

    Components are created lazily and cached, so every caller in a process
    shares the same event log and account store (required for the in-memory
    backend, harmless for SQLite).
    """

    def __init__(
        self,
        workspace: "Workspace",
        settings: Optional[LedgerSettings] = None,
    ):
        """
        Initialize the service.

        Args:
            workspace: Workspace to derive paths from
            settings: Explicit settings; read from the workspace when omitted
        """
        self.workspace = workspace
        self.settings = settings or load_settings(workspace.settings_path)
        self._event_log: Optional[EventLog] = None
        self._account_store: Optional[AccountStore] = None
        self._projection_builder: Optional[AccountProjectionBuilder] = None
        self._event_handler: Optional[AccountEventHandler] = None

    @property
    def is_persistent(self) -> bool:
        return self.settings.backend == StorageBackend.sqlite

    @property
    def event_log_path(self) -> Optional[Path]:
        return self.workspace.event_log_path if self.is_persistent else None

    @property
    def accounts_path(self) -> Optional[Path]:
        return self.workspace.accounts_path if self.is_persistent else None

    def check_store_status(self) -> StoreStatus:
        """
        Check whether the event log exists without creating it.

        Returns:
            StoreStatus with counts when the log exists
        """
        if not self.is_persistent:
            log = self.get_event_log()
            return StoreStatus(
                exists=True,
                path=None,
                event_count=log.get_latest_sequence_number(),
                account_count=len(log.account_ids()),
            )

        if not self.workspace.event_log_path.exists():
            return StoreStatus(exists=False, path=self.workspace.event_log_path)

        log = self.get_event_log()
        return StoreStatus(
            exists=True,
            path=self.workspace.event_log_path,
            event_count=log.get_latest_sequence_number(),
            account_count=len(log.account_ids()),
        )

    def get_event_log(self) -> EventLog:
        """
        Get the event log.

        Note: with the SQLite backend this CREATES the database file if it
        doesn't exist. Use check_store_status() first to avoid that.
        """
        if self._event_log is None:
            if self.is_persistent:
                self._event_log = SqliteEventLog(self.workspace.event_log_path)
            else:
                self._event_log = InMemoryEventLog()
        return self._event_log

    def get_account_store(self) -> AccountStore:
        if self._account_store is None:
            if self.is_persistent:
                self._account_store = SqliteAccountStore(self.workspace.accounts_path)
            else:
                self._account_store = InMemoryAccountStore()
        return self._account_store

    def get_projection_builder(self) -> AccountProjectionBuilder:
        if self._projection_builder is None:
            self._projection_builder = AccountProjectionBuilder(
                self.get_event_log(), self.get_account_store()
            )
        return self._projection_builder

    def get_event_handler(self) -> AccountEventHandler:
        if self._event_handler is None:
            self._event_handler = AccountEventHandler(
                self.get_event_log(), self.get_projection_builder()
            )
        return self._event_handler


__all__ = ["LedgerService", "StoreStatus"]
