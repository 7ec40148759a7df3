from __future__ import annotations

# Command implementations for the eventledger CLI.
# Each command module exposes a `run(...)` function that performs the action
# and prints to the console. Typer wrappers in eventledger.cli.app delegate here.

__all__ = [
    "init",
    "send",
    "account",
    "accounts",
    "event",
    "rebuild",
]
