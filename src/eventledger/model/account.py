from __future__ import annotations

"""
Account projection model.

An Account is derived state: it is rebuilt from the account's events and is
never the source of truth. It carries nothing that cannot be recomputed by
replaying those events in arrival order.
"""

from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str = ""


class Account(BaseModel):
    """Materialized view of one account.

    The zero value (``id=""``, balance 0, empty email) is what a rebuild
    produces when the account has no recognized events.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = ""
    balance: Decimal = Decimal("0")
    customer: Customer = Field(default_factory=Customer)

    @field_validator("balance", mode="before")
    @classmethod
    def parse_balance(cls, value: Any) -> Decimal:
        if isinstance(value, Decimal):
            return value
        return Decimal(str(value))

    @classmethod
    def empty(cls) -> "Account":
        return cls()

    def to_row(self) -> Dict[str, str]:
        """Flatten to the column layout used by the SQLite account store."""
        return {
            "account_id": self.id,
            "balance": str(self.balance),
            "email": self.customer.email,
        }

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Account":
        """Construct an Account from an account store row dict.

        Args:
            row: dict with ``account_id``, ``balance`` (string) and ``email``

        Returns:
            Account with the balance restored as a Decimal.
        """
        return cls(
            id=row["account_id"],
            balance=Decimal(row["balance"]),
            customer=Customer(email=row["email"]),
        )


__all__ = ["Account", "Customer"]
