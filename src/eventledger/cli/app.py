from __future__ import annotations

"""
eventledger CLI (Typer + Rich)

Event-sourced account ledger: events go in through one entry point and
account projections are rebuilt from the event log.

All paths are resolved from a single workspace root:
  --data-dir / EVENTLEDGER_DATA env var / current working directory
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from eventledger.config import DATA_DIR_ENV_VAR, DEFAULT_LOG_LEVEL, load_settings
from eventledger.errors import ConfigError
from eventledger.workspace import Workspace

APP_HELP = "Event-sourced account ledger (local-only)"
HELP_ACCOUNT_ID = "Account (aggregate) ID, e.g. 123"
HELP_EMAIL = "Customer email"
HELP_EVENT_ID = "Event ID (default: generated UUID)"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)


def _configure_logging(workspace: Workspace, verbose: bool) -> None:
    if verbose:
        level = "DEBUG"
    else:
        try:
            level = load_settings(workspace.settings_path).log_level
        except ConfigError:
            # Reported by the command itself when it loads the settings.
            level = DEFAULT_LOG_LEVEL
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=DATA_DIR_ENV_VAR,
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log ingestion and rebuild details"),
):
    """eventledger CLI: all paths resolved from a single workspace root."""
    ctx.ensure_object(dict)
    workspace = Workspace.resolve(data_dir)
    ctx.obj["workspace"] = workspace
    _configure_logging(workspace, verbose)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace with data/ and config/ledger.yml.

    Safe to run on an existing workspace; skips anything that already exists.

    Examples:
      eventledger --data-dir ~/ledger init
      eventledger init
    """
    from eventledger.cli.command import init as cmd_init

    code = cmd_init.run(workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command(name="create-account")
def create_account(
    ctx: typer.Context,
    account_id: str = typer.Option(..., "--account-id", "-a", help=HELP_ACCOUNT_ID),
    email: str = typer.Option(..., "--email", "-e", help=HELP_EMAIL),
    event_id: Optional[str] = typer.Option(None, "--event-id", help=HELP_EVENT_ID),
):
    """Send an AccountCreated event.

    Examples:
      eventledger create-account -a 123 -e olu@example.com
    """
    from eventledger.cli.command import send as cmd_send
    from eventledger.model.events import AccountCreated, AccountCreatedPayload

    fields = {"event_id": event_id} if event_id else {}
    event = AccountCreated(
        payload=AccountCreatedPayload(account_id=account_id, email=email),
        **fields,
    )
    code = cmd_send.run(workspace=_ws(ctx), event=event)
    raise typer.Exit(code=code)


@app.command()
def deposit(
    ctx: typer.Context,
    account_id: str = typer.Option(..., "--account-id", "-a", help=HELP_ACCOUNT_ID),
    email: str = typer.Option(..., "--email", "-e", help=HELP_EMAIL),
    amount: str = typer.Option(..., "--amount", help="Deposit amount, e.g. 100.00"),
    event_id: Optional[str] = typer.Option(None, "--event-id", help=HELP_EVENT_ID),
):
    """Send a DepositConfirmed event.

    The balance becomes the amount of the most recent deposit.

    Examples:
      eventledger deposit -a 123 -e olu@example.com --amount 100
    """
    from pydantic import ValidationError

    from eventledger.cli.command import send as cmd_send
    from eventledger.cli.command.util import console
    from eventledger.model.events import DepositConfirmed, DepositConfirmedPayload

    try:
        payload = DepositConfirmedPayload(account_id=account_id, email=email, amount=amount)
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid amount {amount!r}: {e.errors()[0]['msg']}")
        raise typer.Exit(code=1)

    fields = {"event_id": event_id} if event_id else {}
    event = DepositConfirmed(payload=payload, **fields)
    code = cmd_send.run(workspace=_ws(ctx), event=event)
    raise typer.Exit(code=code)


@app.command()
def send(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON file holding one event record"),
):
    """Send an event from a JSON wire record.

    Record shape: {"eventId": ..., "eventType": ..., "payload": {"accountId": ..., ...}}

    Examples:
      eventledger send deposit.json
    """
    from eventledger.cli.command import send as cmd_send

    code = cmd_send.run_file(workspace=_ws(ctx), path=path)
    raise typer.Exit(code=code)


@app.command()
def account(
    ctx: typer.Context,
    account_id: str = typer.Argument(..., help=HELP_ACCOUNT_ID),
    history: bool = typer.Option(False, "--history", help="List every projection record for the account"),
):
    """Show the account projection.

    Examples:
      eventledger account 123
      eventledger account 123 --history
    """
    from eventledger.cli.command import account as cmd_account

    code = cmd_account.run(workspace=_ws(ctx), account_id=account_id, history=history)
    raise typer.Exit(code=code)


@app.command()
def accounts(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email", "-e", help=HELP_EMAIL),
):
    """List account projections for a customer email."""
    from eventledger.cli.command import accounts as cmd_accounts

    code = cmd_accounts.run(workspace=_ws(ctx), email=email)
    raise typer.Exit(code=code)


@app.command()
def event(
    ctx: typer.Context,
    event_id: str = typer.Argument(..., help="Event ID"),
):
    """Show a stored event."""
    from eventledger.cli.command import event as cmd_event

    code = cmd_event.run(workspace=_ws(ctx), event_id=event_id)
    raise typer.Exit(code=code)


@app.command()
def rebuild(
    ctx: typer.Context,
    account_id: Optional[str] = typer.Option(None, "--account-id", "-a", help="Rebuild only this account"),
):
    """Rebuild account projections from the event log.

    Without --account-id every account in the log is rebuilt.

    Examples:
      eventledger rebuild
      eventledger rebuild -a 123
    """
    from eventledger.cli.command import rebuild as cmd_rebuild

    code = cmd_rebuild.run(workspace=_ws(ctx), account_id=account_id)
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
