"""
Workspace - centralized data path resolution for the ledger.

A Workspace is the root directory holding the event log, the account
projections and the settings file. All paths are computed relative to it.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. EVENTLEDGER_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from eventledger.config import DATA_DIR_ENV_VAR


@dataclass
class Workspace:
    """Root directory for all ledger data paths."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD.

        Args:
            explicit: Explicitly provided path (highest priority)

        Returns:
            Workspace with resolved root
        """
        if explicit is not None:
            return cls(root=explicit)
        env = os.environ.get(DATA_DIR_ENV_VAR)
        if env:
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def event_log_path(self) -> Path:
        return self.data_dir / "events.db"

    @property
    def accounts_path(self) -> Path:
        return self.data_dir / "accounts.db"

    @property
    def config_dir(self) -> Path:
        return self.root / "config"

    @property
    def settings_path(self) -> Path:
        return self.config_dir / "ledger.yml"


__all__ = ["Workspace"]
