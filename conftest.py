# Ensure the package under src/ is importable during tests without installing the package.
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from eventledger.model.events import (  # noqa: E402
    AccountCreated,
    AccountCreatedPayload,
    DepositConfirmed,
    DepositConfirmedPayload,
)


@pytest.fixture
def account_created():
    """Factory for AccountCreated events."""

    def make(account_id="123", email="olu@example.com", event_id="1"):
        return AccountCreated(
            event_id=event_id,
            payload=AccountCreatedPayload(account_id=account_id, email=email),
        )

    return make


@pytest.fixture
def deposit_confirmed():
    """Factory for DepositConfirmed events."""

    def make(account_id="123", email="olu@example.com", amount="100", event_id="2"):
        return DepositConfirmed(
            event_id=event_id,
            payload=DepositConfirmedPayload(account_id=account_id, email=email, amount=amount),
        )

    return make
