"""Logging setup shared by the entry points."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once with the application format."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
