"""
CLI command to rebuild account projections from the event log.

Rebuilding re-derives projections from the immutable log, so it is always
safe to run. It is how a projection catches up after an ingestion whose
rebuild step failed.

Usage:
    eventledger rebuild                   # every account in the log
    eventledger rebuild --account-id 123  # one account
"""

from __future__ import annotations

from typing import Optional

from eventledger.workspace import Workspace

from .util import accounts_table, console, load_service, require_event_log


def run(*, workspace: Workspace, account_id: Optional[str] = None) -> int:
    """Rebuild one account, or every account with events.

    Returns:
        Exit code (0 = success)
    """
    service = load_service(workspace)
    if service is None or not require_event_log(service):
        return 1

    event_log = service.get_event_log()
    handler = service.get_event_handler()

    if account_id is not None:
        if not event_log.find_all_by_account(account_id):
            console.print(f"[yellow]No events for account[/yellow] [bold]{account_id}[/bold]")
            return 1
        account = handler.rebuild(account_id)
        console.print(accounts_table([account], title="Rebuilt projection"))
        return 0

    total_events = event_log.get_latest_sequence_number()
    if total_events == 0:
        console.print("[yellow]Warning:[/yellow] Event log is empty")
        return 0

    console.print(f"[dim]Replaying {total_events} events...[/dim]")
    rebuilt = handler.rebuild_all()
    console.print(f"[green]✓[/green] Rebuilt {rebuilt} accounts")

    store = service.get_account_store()
    latest = [store.find_latest_by_id(a) for a in event_log.account_ids()]
    console.print(accounts_table([a for a in latest if a is not None], title="Accounts"))
    return 0


__all__ = ["run"]
