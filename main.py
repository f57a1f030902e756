"""Command-line entry point for running the FastAPI application."""
from __future__ import annotations

import sys
from pathlib import Path


def _add_src_to_path() -> None:
    """Ensure the ``src`` directory is available on ``sys.path``."""

    project_root = Path(__file__).resolve().parent
    src_dir = project_root / "src"
    src_dir_str = str(src_dir)
    if src_dir_str not in sys.path:
        sys.path.insert(0, src_dir_str)


_add_src_to_path()

from player_scores.__main__ import main  # noqa: E402  (requires sys.path update)


if __name__ == "__main__":
    main()
