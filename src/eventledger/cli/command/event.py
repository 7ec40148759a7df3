"""Show a stored event as its JSON wire record."""

from __future__ import annotations

import json

from rich.syntax import Syntax

from eventledger.workspace import Workspace

from .util import console, load_service, require_event_log


def run(*, workspace: Workspace, event_id: str) -> int:
    service = load_service(workspace)
    if service is None or not require_event_log(service):
        return 1

    event = service.get_event_log().find_by_id(event_id)
    if event is None:
        console.print(f"[yellow]No event with id[/yellow] [bold]{event_id}[/bold]")
        return 1

    console.print(Syntax(json.dumps(event.to_wire(), indent=2), "json"))
    return 0


__all__ = ["run"]
