"""Application configuration helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Settings:
    """Holds configuration values for the application."""

    data_dir: Path = Path("data")
    league_filename: str = "league.json"
    app_version: str = "0.1.0"
    allowed_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @property
    def league_path(self) -> Path:
        """Return the full path of the league backing file."""

        return self.data_dir / self.league_filename


def get_settings() -> Settings:
    """Provide application settings with environment overrides applied."""

    settings = Settings()
    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        settings = replace(settings, log_level=log_level.upper())

    data_dir = os.getenv("DATA_DIR")
    if data_dir:
        settings = replace(settings, data_dir=Path(data_dir).expanduser())

    return settings
