"""
Send domain events through the ingestion handler.

Usage:
    eventledger create-account --account-id 123 --email olu@example.com
    eventledger deposit --account-id 123 --email olu@example.com --amount 100
    eventledger send event.json
"""

from __future__ import annotations

from pathlib import Path

from eventledger.errors import PartialIngestionError
from eventledger.model.events import Event, parse_event_json
from eventledger.workspace import Workspace

from .util import accounts_table, console, load_service


def run(*, workspace: Workspace, event: Event) -> int:
    """Ingest one event and show the rebuilt account.

    Returns:
        0 on success, 1 if the event was rejected or the projection could
        not be rebuilt
    """
    service = load_service(workspace)
    if service is None:
        return 1

    handler = service.get_event_handler()
    try:
        account = handler.send(event)
    except PartialIngestionError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print("[dim]The event is stored. Run 'eventledger rebuild' to retry the projection.[/dim]")
        return 1
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid {event.event_type} event: {e}")
        return 1

    console.print(
        f"[green]✓[/green] Stored {event.event_type} event [bold]{event.event_id}[/bold]"
    )
    console.print(accounts_table([account], title="Account projection"))
    return 0


def run_file(*, workspace: Workspace, path: Path) -> int:
    """Ingest an event read from a JSON wire record.

    The record may be of any event type; unknown types are stored but do not
    change the projection.
    """
    if not path.exists():
        console.print(f"[red]Error:[/red] Event file not found: {path}")
        return 1

    try:
        event = parse_event_json(path.read_text(encoding="utf-8"))
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid event in {path}: {e}")
        return 1

    return run(workspace=workspace, event=event)


__all__ = ["run", "run_file"]
