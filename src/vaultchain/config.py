"""Configuration: the AppConfig value and the logging section of ~/.vaultchain/config.json."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "config.json"


@dataclass(frozen=True)
class AppConfig:
    """
    Configuration handed to VaultChain at construction.

    Built once from the parsed command line. input and output are carried
    but nothing consumes them yet.
    """

    verbose: bool = False
    input: str | None = None
    output: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    file: str | None = None


def settings_path() -> Path:
    """Path to the user settings file (~/.vaultchain/config.json)."""
    return Path.home() / ".vaultchain" / CONFIG_FILENAME


def load_logging_settings(path: Path | None = None) -> LoggingSettings:
    """
    Read the "logging" object from the settings file.

    A missing file, bad JSON, a non-object "logging" value or a field of
    the wrong type all fall back to the defaults, field by field.
    """
    if path is None:
        path = settings_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return LoggingSettings()
    section = data.get("logging") if isinstance(data, dict) else None
    if not isinstance(section, dict):
        return LoggingSettings()

    level = section.get("level")
    log_file = section.get("file")
    return LoggingSettings(
        level=level if isinstance(level, str) and level else LoggingSettings.level,
        file=log_file if isinstance(log_file, str) and log_file else None,
    )
