"""
Store for materialized account projections.

The store owns projection records but not their derivation; that belongs to
the projection builder. ``save`` appends a new record every time, so each
rebuild of an account adds another row with the same id. ``find_by_id``
returns the first of them, ``find_latest_by_id`` the most recent.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from eventledger.model.account import Account


class AccountStore(ABC):
    """Contract for a keyed store of account projections."""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Append an account record. Never upserts."""

    @abstractmethod
    def get_all_accounts(self) -> List[Account]:
        """Every stored record in storage order."""

    def find_by_id(self, account_id: str) -> Optional[Account]:
        """Return the first record with this id, or None."""
        return next((a for a in self.get_all_accounts() if a.id == account_id), None)

    def find_all_by_email(self, email: str) -> List[Account]:
        return [a for a in self.get_all_accounts() if a.customer.email == email]

    def find_all_by_id(self, account_id: str) -> List[Account]:
        """Every record saved for the id, oldest first."""
        return [a for a in self.get_all_accounts() if a.id == account_id]

    def find_latest_by_id(self, account_id: str) -> Optional[Account]:
        records = self.find_all_by_id(account_id)
        return records[-1] if records else None

    def count(self) -> int:
        return len(self.get_all_accounts())


class InMemoryAccountStore(AccountStore):
    def __init__(self) -> None:
        self._accounts: List[Account] = []

    def save(self, account: Account) -> None:
        self._accounts.append(account)

    def get_all_accounts(self) -> List[Account]:
        return list(self._accounts)


class SqliteAccountStore(AccountStore):
    """Account projections in a local SQLite file.

    Balances are stored as text so Decimal values come back exactly.
    """

    def __init__(self, db_path: str | Path):
        """Initialize the store with a database path.

        Args:
            db_path: Path to SQLite database for projections
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    def _ensure_schema(self) -> None:
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS account_projections (
                    row_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    account_id TEXT NOT NULL,
                    balance TEXT NOT NULL,
                    email TEXT NOT NULL,
                    created_at TEXT DEFAULT (datetime('now'))
                )
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_account_proj_id
                ON account_projections(account_id)
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_account_proj_email
                ON account_projections(email)
            """)

            conn.commit()
        finally:
            conn.close()

    def save(self, account: Account) -> None:
        row = account.to_row()
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute(
                """
                INSERT INTO account_projections (account_id, balance, email)
                VALUES (?, ?, ?)
                """,
                (row["account_id"], row["balance"], row["email"]),
            )
            conn.commit()
        finally:
            conn.close()

    def find_by_id(self, account_id: str) -> Optional[Account]:
        accounts = self._query(
            "SELECT * FROM account_projections WHERE account_id = ? ORDER BY row_id LIMIT 1",
            (account_id,),
        )
        return accounts[0] if accounts else None

    def find_all_by_email(self, email: str) -> List[Account]:
        return self._query(
            "SELECT * FROM account_projections WHERE email = ? ORDER BY row_id",
            (email,),
        )

    def find_all_by_id(self, account_id: str) -> List[Account]:
        return self._query(
            "SELECT * FROM account_projections WHERE account_id = ? ORDER BY row_id",
            (account_id,),
        )

    def get_all_accounts(self) -> List[Account]:
        return self._query("SELECT * FROM account_projections ORDER BY row_id")

    def count(self) -> int:
        conn = sqlite3.connect(self.db_path)
        try:
            (total,) = conn.execute("SELECT COUNT(*) FROM account_projections").fetchone()
            return total
        finally:
            conn.close()

    def _query(self, sql: str, params: tuple = ()) -> List[Account]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            cursor = conn.execute(sql, params)
            return [Account.from_row(dict(row)) for row in cursor.fetchall()]
        finally:
            conn.close()


__all__ = ["AccountStore", "InMemoryAccountStore", "SqliteAccountStore"]
