"""HTTP route tests for the FastAPI application."""
from __future__ import annotations

from fastapi.testclient import TestClient

from player_scores.domain.models.league import Player
from player_scores.main import create_app


class _StubPlayerStore:
    """Stub store returning preconfigured scores and capturing recorded wins."""

    def __init__(
        self,
        scores: dict[str, int] | None = None,
        league: list[Player] | None = None,
    ) -> None:
        self.scores = dict(scores or {})
        self.win_calls: list[str] = []
        self.league = list(league or [])

    def get_player_score(self, name: str) -> int:
        return self.scores.get(name, 0)

    def record_win(self, name: str) -> None:
        self.win_calls.append(name)

    def get_league(self) -> list[Player]:
        return self.league


class _FailingPlayerStore(_StubPlayerStore):
    """Stub store whose writes always fail."""

    def record_win(self, name: str) -> None:
        raise OSError("read-only file system")


def test_root_endpoint_returns_running_message() -> None:
    """The root endpoint should return the expected heartbeat payload."""

    client = TestClient(create_app(_StubPlayerStore()))

    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "RUNNING PLAYER SCORES"}


def test_status_endpoint_reports_version() -> None:
    client = TestClient(create_app(_StubPlayerStore()))

    response = client.get("/status")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_player_score_returns_score_as_text() -> None:
    """Known players get their win count as the plain response body."""

    client = TestClient(create_app(_StubPlayerStore({"Pepper": 20, "Floyd": 10})))

    pepper = client.get("/players/Pepper")
    floyd = client.get("/players/Floyd")

    assert pepper.status_code == 200
    assert pepper.text == "20"
    assert floyd.status_code == 200
    assert floyd.text == "10"


def test_get_player_score_returns_404_when_missing() -> None:
    client = TestClient(create_app(_StubPlayerStore({"Pepper": 20})))

    response = client.get("/players/Apollo")

    assert response.status_code == 404


def test_post_records_win_and_returns_accepted() -> None:
    store = _StubPlayerStore()
    client = TestClient(create_app(store))

    response = client.post("/players/Pepper")

    assert response.status_code == 202
    assert response.content == b""
    assert store.win_calls == ["Pepper"]


def test_post_returns_500_when_win_cannot_be_persisted() -> None:
    client = TestClient(create_app(_FailingPlayerStore()))

    response = client.post("/players/Pepper")

    assert response.status_code == 500
    assert response.json()["detail"] == "The win could not be recorded."


def test_league_returns_table_as_json() -> None:
    """The league endpoint returns the ranked table with a JSON content type."""

    wanted_league = [Player("Cleo", 32), Player("Chris", 20), Player("Tiest", 14)]
    client = TestClient(create_app(_StubPlayerStore(league=wanted_league)))

    response = client.get("/league")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == [
        {"Name": "Cleo", "Wins": 32},
        {"Name": "Chris", "Wins": 20},
        {"Name": "Tiest", "Wins": 14},
    ]


class _RejectingPlayerStore(_StubPlayerStore):
    """Stub store refusing every name."""

    def record_win(self, name: str) -> None:
        raise ValueError("Player names must be non-empty strings.")


def test_post_returns_400_for_rejected_name() -> None:
    client = TestClient(create_app(_RejectingPlayerStore()))

    response = client.post("/players/Pepper")

    assert response.status_code == 400
    assert response.json()["detail"] == "Player names must be non-empty strings."
