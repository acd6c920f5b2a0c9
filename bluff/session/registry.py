"""
Bluff - Session Registry

Owns the mapping from chat id to the game played in that chat. Every game is
exclusively owned by its session, and all calls into a game must hold the
session lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable

from bluff.engine.game import BluffGame

logger = logging.getLogger(__name__)


class SessionExists(Exception):
    """A game is already open in the chat."""


@dataclass
class Session:
    """A game bound to one chat."""

    session_id: int
    game: BluffGame
    title: str | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class SessionRegistry:
    """Thread-safe collection of open sessions keyed by chat id."""

    def __init__(self, game_factory: Callable[[], BluffGame] = BluffGame) -> None:
        self._game_factory = game_factory
        self._sessions: dict[int, Session] = {}
        self._lock = threading.Lock()

    def __contains__(self, session_id: int) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self, session_id: int, title: str | None = None) -> Session:
        """Open a new game in a chat.

        Raises:
            SessionExists: If a game is already open in the chat.
        """
        with self._lock:
            if session_id in self._sessions:
                raise SessionExists("There's already a game started in this chat")
            session = Session(session_id=session_id, game=self._game_factory(), title=title)
            self._sessions[session_id] = session
        logger.info("Opened session %d", session_id)
        return session

    def get(self, session_id: int) -> Session | None:
        """Return the session for a chat, or None."""
        with self._lock:
            return self._sessions.get(session_id)

    def close(self, session_id: int) -> Session | None:
        """Discard the session for a chat. Returns the removed session."""
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is not None:
            logger.info("Closed session %d", session_id)
        return session

    @property
    def active_sessions(self) -> list[int]:
        """Return list of chat ids with an open game."""
        with self._lock:
            return list(self._sessions.keys())
