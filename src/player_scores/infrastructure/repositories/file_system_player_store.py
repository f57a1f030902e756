"""Player store persisting the league as a JSON file on disk."""
from __future__ import annotations

import io
import logging
import os
import threading
from pathlib import Path
from typing import BinaryIO, List, Optional

from player_scores.domain.models.league import League, MalformedDataError, Player
from player_scores.domain.repositories.player_store import PlayerStore

logger = logging.getLogger(__name__)

_EMPTY_LEAGUE = League().encode()


class StoreInitError(Exception):
    """Signal that the backing file could not be loaded into a league."""


class FileSystemPlayerStore(PlayerStore):
    """Keep the league in memory and rewrite the backing file on every win.

    The backing file handle stays open for the lifetime of the store. The file
    is the source of truth when the store is opened; afterwards the in-memory
    league is, and the file is rewritten in full after each recorded win.
    """

    def __init__(self, database: BinaryIO, path: Optional[Path] = None) -> None:
        """Initialize the store from an open, readable and writable binary file."""

        self._database = database
        self._path = path
        self._lock = threading.Lock()
        self._league = self._load()

    @classmethod
    def open(cls, path: Path | str) -> "FileSystemPlayerStore":
        """Open ``path`` for read and write, creating it when missing."""

        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        descriptor = os.open(file_path, os.O_RDWR | os.O_CREAT, 0o644)
        database = os.fdopen(descriptor, "r+b")
        try:
            store = cls(database, file_path)
        except Exception:
            database.close()
            raise
        logger.info("Opened league store at %s with %d players", file_path, len(store._league))
        return store

    @property
    def path(self) -> Optional[Path]:
        """Return the location of the backing file when known."""

        return self._path

    @property
    def closed(self) -> bool:
        """Return ``True`` once the backing file handle has been released."""

        return self._database.closed

    def get_player_score(self, name: str) -> int:
        """Return the wins recorded for ``name`` or ``0`` when absent."""

        with self._lock:
            player = self._league.find(name)
        return player.wins if player is not None else 0

    def record_win(self, name: str) -> None:
        """Record a win for ``name`` and rewrite the backing file.

        The in-memory league only changes once the new encoding has been
        written, so a failed write leaves both untouched and re-raises.
        """

        with self._lock:
            league = self._league.with_win(name)
            try:
                self._write(league.encode())
            except OSError:
                logger.exception("Failed to persist win for %r", name)
                raise
            self._league = league
        logger.debug("Recorded win for %r", name)

    def get_league(self) -> List[Player]:
        """Return the in-memory league ranked by descending wins."""

        with self._lock:
            return self._league.rank()

    def close(self) -> None:
        """Release the backing file handle."""

        with self._lock:
            if not self._database.closed:
                self._database.close()

    def __enter__(self) -> "FileSystemPlayerStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _load(self) -> League:
        """Read and decode the whole backing file, seeding it when empty."""

        self._database.seek(0, os.SEEK_END)
        if self._database.tell() == 0:
            logger.info("Seeding empty league store %s", self._path or self._database)
            self._write(_EMPTY_LEAGUE)

        self._database.seek(0)
        payload = self._database.read()
        try:
            return League.decode(payload)
        except MalformedDataError as error:
            logger.error("League store %s is malformed: %s", self._path or self._database, error)
            raise StoreInitError(
                f"Unable to load league from {self._path or 'backing file'}: {error}"
            ) from error

    def _write(self, payload: bytes) -> None:
        """Replace the backing file contents with ``payload``."""

        self._database.seek(0)
        self._database.truncate()
        self._database.write(payload)
        self._database.flush()
        try:
            descriptor = self._database.fileno()
        except io.UnsupportedOperation:
            # in-memory buffers have nothing to sync
            return
        os.fsync(descriptor)
