from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from eventledger.errors import ConfigError
from eventledger.model.account import Account
from eventledger.services.ledger_service import LedgerService
from eventledger.workspace import Workspace

console = Console()


def fmt_amount(amt: Decimal) -> Text:
    s = f"{amt:,.2f}"
    if amt < 0:
        return Text(s, style="bold red")
    elif amt > 0:
        return Text(s, style="bold green")
    return Text(s)


def accounts_table(accounts: Iterable[Account], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Account", style="cyan")
    table.add_column("Email")
    table.add_column("Balance", justify="right")
    for account in accounts:
        table.add_row(account.id or "[dim](empty)[/dim]", account.customer.email, fmt_amount(account.balance))
    return table


def load_service(workspace: Workspace) -> Optional[LedgerService]:
    """Build the ledger service, printing config errors instead of raising."""
    try:
        return LedgerService(workspace)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        return None


def require_event_log(service: LedgerService) -> bool:
    """Print a hint and return False when nothing has been recorded yet."""
    status = service.check_store_status()
    if not status.exists:
        console.print(f"[red]Error:[/red] Event log not found: {status.path}")
        console.print("[dim]Record an event first, e.g. 'eventledger create-account'.[/dim]")
        return False
    return True
