"""
Append-only event log.

The event log is the single source of truth for the ledger. Events are
immutable and kept in arrival order; that order is authoritative, since
events carry no sequence number of their own.

Two implementations share the ``EventLog`` contract:
- ``InMemoryEventLog``: list backed, for tests and throwaway sessions
- ``SqliteEventLog``: local SQLite file, durable

Neither rejects a duplicate ``event_id``; ``find_by_id`` returns the first
match.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from eventledger.model.events import Event, as_typed, parse_event_json

logger = logging.getLogger(__name__)


class EventLog(ABC):
    """Contract for an append-only store of domain events."""

    @abstractmethod
    def append(self, event: Event) -> None:
        """Add an event to the tail of the log.

        A base ``Event`` of a known type is stored as its registered class,
        so every implementation reads back the same typed instance.

        Raises:
            pydantic.ValidationError: if a known type has a malformed payload;
                nothing is stored
        """

    @abstractmethod
    def find_by_id(self, event_id: str) -> Optional[Event]:
        """Return the first stored event with this id, or None."""

    @abstractmethod
    def find_all_by_account(self, account_id: str) -> List[Event]:
        """Return every event for the account, in append order."""

    @abstractmethod
    def get_all_events(self) -> List[Event]:
        """Return every event in append order."""

    def get_events_by_type(self, event_type: str) -> List[Event]:
        return [e for e in self.get_all_events() if e.event_type == event_type]

    def account_ids(self) -> List[str]:
        """Distinct account ids in the order they first appeared."""
        seen: dict[str, None] = {}
        for event in self.get_all_events():
            seen.setdefault(event.payload.account_id, None)
        return list(seen)

    def get_latest_sequence_number(self) -> int:
        """Number of events appended so far (0 for an empty log)."""
        return len(self.get_all_events())


class InMemoryEventLog(EventLog):
    """Event log kept in a Python list. Nothing survives the process."""

    def __init__(self) -> None:
        self._events: List[Event] = []

    def append(self, event: Event) -> None:
        event = as_typed(event)
        self._events.append(event)
        logger.debug("Appended event %s (%s)", event.event_id, event.event_type)

    def find_by_id(self, event_id: str) -> Optional[Event]:
        return next((e for e in self._events if e.event_id == event_id), None)

    def find_all_by_account(self, account_id: str) -> List[Event]:
        return [e for e in self._events if e.payload.account_id == account_id]

    def get_all_events(self) -> List[Event]:
        return list(self._events)


class SqliteEventLog(EventLog):
    """Append-only event log using SQLite.

    Design:
    - Append-only: rows are never updated or deleted
    - Sequential: ``sequence_number`` (AUTOINCREMENT) fixes arrival order
    - Queryable: by event id, account id, or event type
    - Local-only: a single database file, opened per operation

    Usage:
        log = SqliteEventLog("data/events.db")
        log.append(AccountCreated(...))
        events = log.find_all_by_account("123")
    """

    def __init__(self, db_path: str | Path):
        """Initialize the event log.

        Args:
            db_path: Path to SQLite database file. Created if it doesn't exist.
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _init_schema(self) -> None:
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS events (
                    sequence_number INTEGER PRIMARY KEY AUTOINCREMENT,
                    event_id TEXT NOT NULL,
                    event_type TEXT NOT NULL,
                    account_id TEXT NOT NULL,
                    event_data TEXT NOT NULL,
                    created_at TEXT DEFAULT (datetime('now'))
                )
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_events_event_id
                ON events(event_id)
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_events_account
                ON events(account_id)
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_events_type
                ON events(event_type)
            """)

            conn.commit()
        finally:
            conn.close()

    def append(self, event: Event) -> None:
        """Append an event to the store.

        The full event is stored as its JSON wire record and reads back as
        the same typed event.
        """
        event = as_typed(event)
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute(
                """
                INSERT INTO events (event_id, event_type, account_id, event_data)
                VALUES (?, ?, ?, ?)
                """,
                (
                    event.event_id,
                    event.event_type,
                    event.payload.account_id,
                    event.to_wire_json(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        logger.debug("Appended event %s (%s)", event.event_id, event.event_type)

    def find_by_id(self, event_id: str) -> Optional[Event]:
        events = self._query(
            "SELECT event_data FROM events WHERE event_id = ? "
            "ORDER BY sequence_number LIMIT 1",
            (event_id,),
        )
        return events[0] if events else None

    def find_all_by_account(self, account_id: str) -> List[Event]:
        return self._query(
            "SELECT event_data FROM events WHERE account_id = ? ORDER BY sequence_number",
            (account_id,),
        )

    def get_all_events(self) -> List[Event]:
        return self._query("SELECT event_data FROM events ORDER BY sequence_number")

    def get_events_by_type(self, event_type: str) -> List[Event]:
        return self._query(
            "SELECT event_data FROM events WHERE event_type = ? ORDER BY sequence_number",
            (event_type,),
        )

    def account_ids(self) -> List[str]:
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.execute("""
                SELECT account_id
                FROM events
                GROUP BY account_id
                ORDER BY MIN(sequence_number)
            """)
            return [account_id for (account_id,) in cursor.fetchall()]
        finally:
            conn.close()

    def get_latest_sequence_number(self) -> int:
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.execute("SELECT MAX(sequence_number) FROM events")
            result = cursor.fetchone()
            return result[0] if result[0] is not None else 0
        finally:
            conn.close()

    def _query(self, sql: str, params: tuple = ()) -> List[Event]:
        conn = sqlite3.connect(self.db_path)
        try:
            cursor = conn.execute(sql, params)
            return [parse_event_json(event_data) for (event_data,) in cursor.fetchall()]
        finally:
            conn.close()


__all__ = ["EventLog", "InMemoryEventLog", "SqliteEventLog"]
