"""Player store keeping the league in memory only."""
from __future__ import annotations

import threading
from typing import Iterable, List

from player_scores.domain.models.league import League, Player
from player_scores.domain.repositories.player_store import PlayerStore


class InMemoryPlayerStore(PlayerStore):
    """Record wins without durability; contents are lost with the process."""

    def __init__(self, players: Iterable[Player] = ()) -> None:
        self._league = League.from_players(players)
        self._lock = threading.Lock()

    def get_player_score(self, name: str) -> int:
        with self._lock:
            player = self._league.find(name)
        return player.wins if player is not None else 0

    def record_win(self, name: str) -> None:
        with self._lock:
            self._league = self._league.with_win(name)

    def get_league(self) -> List[Player]:
        with self._lock:
            return self._league.rank()
