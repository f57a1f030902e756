"""Repository protocol for recording and ranking player wins."""
from __future__ import annotations

from typing import List, Protocol

from player_scores.domain.models.league import Player


class PlayerStore(Protocol):
    """Persist player wins and expose the ranked league."""

    def get_player_score(self, name: str) -> int:
        """Return the wins recorded for ``name``, ``0`` when none were recorded."""

    def record_win(self, name: str) -> None:
        """Record one more win for ``name``."""

    def get_league(self) -> List[Player]:
        """Return every player ordered by descending wins."""
