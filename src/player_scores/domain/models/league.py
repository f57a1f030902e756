"""Domain models representing players and the league they compete in."""
from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Iterator, List, Optional

_NAME_KEY = "Name"
_WINS_KEY = "Wins"


class MalformedDataError(ValueError):
    """Signal that a payload is not a valid league encoding."""


@dataclass(frozen=True)
class Player:
    """Represent a single player and the number of wins recorded for them."""

    name: str
    wins: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the player."""

        return {_NAME_KEY: self.name, _WINS_KEY: self.wins}

    @classmethod
    def from_dict(cls, data: Any) -> "Player":
        """Recreate a player from its serialized representation."""

        if not isinstance(data, dict):
            raise MalformedDataError("Each league entry must be a JSON object.")
        if set(data) != {_NAME_KEY, _WINS_KEY}:
            raise MalformedDataError(
                f"League entries must contain exactly the '{_NAME_KEY}' and "
                f"'{_WINS_KEY}' fields, got {sorted(data)}."
            )

        name = data[_NAME_KEY]
        wins = data[_WINS_KEY]
        if not isinstance(name, str) or not name:
            raise MalformedDataError("Player names must be non-empty strings.")
        # bool is a subclass of int
        if isinstance(wins, bool) or not isinstance(wins, int):
            raise MalformedDataError(f"Wins for {name!r} must be an integer.")
        if wins < 0:
            raise MalformedDataError(f"Wins for {name!r} cannot be negative.")
        return cls(name=name, wins=wins)


@dataclass(frozen=True)
class League:
    """Represent every known player in insertion order."""

    players: List[Player] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for player in self.players:
            if player.name in seen:
                raise MalformedDataError(
                    f"Player {player.name!r} appears more than once in the league."
                )
            seen.add(player.name)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def find(self, name: str) -> Optional[Player]:
        """Return the player called ``name`` or ``None`` when not recorded yet."""

        for player in self.players:
            if player.name == name:
                return player
        return None

    def rank(self) -> List[Player]:
        """Return the players ordered by descending wins.

        ``sorted`` is stable, so players with equal wins keep their insertion
        order. The stored order is left untouched.
        """

        return sorted(self.players, key=lambda player: player.wins, reverse=True)

    def with_win(self, name: str) -> "League":
        """Return a copy of the league with one more win recorded for ``name``."""

        if not isinstance(name, str) or not name:
            raise MalformedDataError("Player names must be non-empty strings.")

        players = list(self.players)
        for index, player in enumerate(players):
            if player.name == name:
                players[index] = replace(player, wins=player.wins + 1)
                return League(players=players)
        players.append(Player(name=name, wins=1))
        return League(players=players)

    def to_list(self) -> list[dict[str, Any]]:
        """Return the JSON-ready representation of the league in storage order."""

        return [player.to_dict() for player in self.players]

    def encode(self) -> bytes:
        """Serialize the league as a UTF-8 JSON array."""

        return json.dumps(self.to_list(), ensure_ascii=False).encode("utf-8")

    @classmethod
    def from_players(cls, players: Iterable[Player]) -> "League":
        """Build a league from any iterable of players."""

        return cls(players=list(players))

    @classmethod
    def decode(cls, payload: bytes) -> "League":
        """Parse ``payload`` into a league, raising ``MalformedDataError`` on failure."""

        try:
            data = json.loads(payload.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as error:
            raise MalformedDataError(f"League data is not valid JSON: {error}") from error

        if not isinstance(data, list):
            raise MalformedDataError("League data must be a JSON array.")
        return cls(players=[Player.from_dict(item) for item in data])
