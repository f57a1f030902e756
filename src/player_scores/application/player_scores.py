"""Use cases for looking up scores, recording wins and ranking the league."""
from __future__ import annotations

from player_scores.domain.models.league import Player
from player_scores.domain.repositories.player_store import PlayerStore


class RetrievePlayerScoreUseCase:
    """Return the number of wins recorded for a player."""

    def __init__(self, store: PlayerStore) -> None:
        """Initialize the use case with its persistence dependency."""

        self._store = store

    def execute(self, name: str) -> int:
        """Return the wins for ``name``; unknown players score ``0``."""

        return self._store.get_player_score(name)


class RecordWinUseCase:
    """Record a single win for a player."""

    def __init__(self, store: PlayerStore) -> None:
        """Initialize the use case with its persistence dependency."""

        self._store = store

    def execute(self, name: str) -> None:
        """Record one more win for ``name``."""

        self._store.record_win(name)


class RetrieveLeagueUseCase:
    """Retrieve the league table ranked by wins."""

    def __init__(self, store: PlayerStore) -> None:
        """Initialize the use case with the repository dependency."""

        self._store = store

    def execute(self) -> list[Player]:
        """Return every player ordered by descending wins."""

        return list(self._store.get_league())
