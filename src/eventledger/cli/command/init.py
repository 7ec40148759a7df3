"""Initialize a new eventledger workspace directory."""

from __future__ import annotations

from eventledger.workspace import Workspace

from .util import console

_STARTER_LEDGER_YML = """\
# Ledger settings
#
# backend: sqlite keeps events and account projections in data/*.db
#          memory keeps them only for the duration of one command
# log_level: DEBUG, INFO, WARNING or ERROR (--verbose forces DEBUG)

backend: sqlite
log_level: WARNING
"""


def run(*, workspace: Workspace) -> int:
    """Create the data and config directories and a starter ledger.yml.

    Skips anything that already exists (safe to run on an existing workspace).

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    root = workspace.root
    console.print(f"[bold cyan]Initializing workspace:[/] {root}\n")

    created = []
    skipped = []

    for directory in [workspace.data_dir, workspace.config_dir]:
        if directory.exists():
            skipped.append(str(directory.relative_to(root)) + "/")
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(str(directory.relative_to(root)) + "/")

    settings_path = workspace.settings_path
    if settings_path.exists():
        skipped.append(str(settings_path.relative_to(root)))
    else:
        settings_path.write_text(_STARTER_LEDGER_YML, encoding="utf-8")
        created.append(str(settings_path.relative_to(root)))

    if created:
        console.print("[green]Created:[/]")
        for path in created:
            console.print(f"  {path}")

    if skipped:
        console.print("[dim]Already exists (skipped):[/dim]")
        for path in skipped:
            console.print(f"  [dim]{path}[/dim]")

    if not created:
        console.print("[green]Workspace already fully initialized.[/]")
    else:
        console.print(f"\n[green]Workspace ready at {root}[/]")

    return 0


__all__ = ["run"]
