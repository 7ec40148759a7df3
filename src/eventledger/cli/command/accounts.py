"""List account projections for a customer email."""

from __future__ import annotations

from eventledger.workspace import Workspace

from .util import accounts_table, console, load_service, require_event_log


def run(*, workspace: Workspace, email: str) -> int:
    service = load_service(workspace)
    if service is None or not require_event_log(service):
        return 1

    accounts = service.get_account_store().find_all_by_email(email)
    if not accounts:
        console.print(f"[yellow]No accounts for[/yellow] {email}")
        return 1

    console.print(accounts_table(accounts, title=f"Accounts for {email}"))
    return 0


__all__ = ["run"]
