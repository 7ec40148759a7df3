"""
Service layer for the ledger.

Business logic separated from the imperative shell (CLI). Services take
their dependencies through constructors and return data or raise; they never
print.

Principles:
- No UI framework imports (Rich, Typer)
- All dependencies injected through constructors
- Fully testable with simple unit tests
"""

from eventledger.services.ingestion_handler import AccountEventHandler
from eventledger.services.ledger_service import LedgerService, StoreStatus

__all__ = [
    "AccountEventHandler",
    "LedgerService",
    "StoreStatus",
]
