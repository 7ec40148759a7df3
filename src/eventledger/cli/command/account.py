"""Show the projection for one account."""

from __future__ import annotations

from eventledger.workspace import Workspace

from .util import accounts_table, console, load_service, require_event_log


def run(*, workspace: Workspace, account_id: str, history: bool = False) -> int:
    """Display the most recent projection saved for the account.

    Every rebuild saves a new record; ``history`` lists all of them, oldest
    first.
    """
    service = load_service(workspace)
    if service is None or not require_event_log(service):
        return 1

    store = service.get_account_store()
    records = store.find_all_by_id(account_id)
    if not records:
        console.print(f"[yellow]No projection for account[/yellow] [bold]{account_id}[/bold]")
        return 1

    if history:
        console.print(accounts_table(records, title=f"Projection history for {account_id}"))
    else:
        console.print(accounts_table([records[-1]], title=f"Account {account_id}"))
        if len(records) > 1:
            console.print(f"[dim]{len(records)} projection records; use --history to list them[/dim]")
    return 0


__all__ = ["run"]
