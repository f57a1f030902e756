"""Application entry point defining the HTTP API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from player_scores.application.player_scores import (
    RecordWinUseCase,
    RetrieveLeagueUseCase,
    RetrievePlayerScoreUseCase,
)
from player_scores.config.logging_config import configure_logging
from player_scores.config.settings import get_settings
from player_scores.domain.repositories.player_store import PlayerStore
from player_scores.infrastructure.repositories.file_system_player_store import (
    FileSystemPlayerStore,
)

logger = logging.getLogger(__name__)


def create_app(player_store: PlayerStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Without an injected ``player_store`` the league is opened from the
    configured backing file. A malformed file raises ``StoreInitError`` here,
    so the server refuses to start instead of discarding recorded wins.
    """

    settings = get_settings()
    configure_logging(settings.log_level)
    owned_store: FileSystemPlayerStore | None = None
    if player_store is None:
        owned_store = FileSystemPlayerStore.open(settings.league_path)
    store: PlayerStore = player_store if player_store is not None else owned_store

    score_retriever = RetrievePlayerScoreUseCase(store)
    win_recorder = RecordWinUseCase(store)
    league_retriever = RetrieveLeagueUseCase(store)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        """Release the backing file on shutdown when this app opened it."""

        yield
        if owned_store is not None:
            owned_store.close()
            logger.info("Closed league store at %s", owned_store.path)

    app = FastAPI(
        title="Player Scores API", version=settings.app_version, lifespan=lifespan
    )
    app.state.player_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", status_code=status.HTTP_200_OK)
    async def get_root() -> dict[str, str]:
        """Return a simple heartbeat response for uptime monitoring."""

        return {"message": "RUNNING PLAYER SCORES"}

    @app.get("/status", status_code=status.HTTP_200_OK)
    async def get_status() -> dict:
        """Return the operational status and version of the service."""

        return {"status": "ok", "version": settings.app_version}

    # Store calls block on file I/O, so these handlers run in the threadpool.
    @app.get("/players/{name}", response_class=PlainTextResponse)
    def get_player_score(name: str) -> PlainTextResponse:
        """Return the number of wins recorded for ``name`` as plain text."""

        score = score_retriever.execute(name)
        if score == 0:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No wins recorded for player {name!r}.",
            )
        return PlainTextResponse(str(score))

    @app.post("/players/{name}", status_code=status.HTTP_202_ACCEPTED)
    def record_win(name: str) -> Response:
        """Record a win for ``name``."""

        try:
            win_recorder.execute(name)
        except ValueError as error:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(error),
            ) from error
        except OSError as error:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="The win could not be recorded.",
            ) from error
        return Response(status_code=status.HTTP_202_ACCEPTED)

    @app.get("/league", response_class=JSONResponse)
    def get_league() -> JSONResponse:
        """Return the league table ordered by descending wins."""

        league = league_retriever.execute()
        return JSONResponse(content=[player.to_dict() for player in league])

    logger.info("Player scores API ready (version %s)", settings.app_version)
    return app


app = create_app()
