"""Command-line entry point for running the Player Scores API server."""
from __future__ import annotations

import uvicorn


def main() -> None:
    """Run the API server using Uvicorn."""

    from player_scores.main import app

    uvicorn.run(app, host="0.0.0.0", port=5000, reload=False)


if __name__ == "__main__":
    main()
