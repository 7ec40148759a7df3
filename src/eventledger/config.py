"""
Central configuration for the ledger.

Path resolution lives in eventledger.workspace.Workspace. This module holds
the constants and the optional per-workspace settings file
(``config/ledger.yml``), loaded with PyYAML's safe loader.

A missing settings file means defaults. A file that exists but cannot be
parsed or validated raises ConfigError.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from eventledger.errors import ConfigError

DATA_DIR_ENV_VAR = "EVENTLEDGER_DATA"


class StorageBackend(str, Enum):
    sqlite = "sqlite"
    memory = "memory"


DEFAULT_BACKEND = StorageBackend.sqlite
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LedgerSettings(BaseModel):
    """Settings read from config/ledger.yml."""

    backend: StorageBackend = DEFAULT_BACKEND
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(path: Path) -> LedgerSettings:
    """Load settings from YAML, or defaults if the file is missing.

    Args:
        path: Path to ledger.yml

    Returns:
        LedgerSettings instance

    Raises:
        ConfigError: if the file is not valid YAML or has invalid values
    """
    if not path.exists():
        return LedgerSettings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return LedgerSettings.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Invalid settings file {path}: {e}") from e


def save_settings(path: Path, settings: LedgerSettings) -> None:
    """Write settings to YAML, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)

    # mode="json" so enums are written as plain strings
    data = settings.model_dump(mode="json")

    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


__all__ = [
    "DATA_DIR_ENV_VAR",
    "DEFAULT_BACKEND",
    "DEFAULT_LOG_LEVEL",
    "LedgerSettings",
    "StorageBackend",
    "load_settings",
    "save_settings",
]
