"""In-memory registry of chat session tokens issued by /welcome."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from functools import lru_cache


logger = logging.getLogger(__name__)


@dataclass
class Session:
    token: str
    # Two most recent favourites; reserved for personalised suggestions.
    recommendations: list[str] = field(default_factory=lambda: ["", ""])


def new_token() -> str:
    """Random RFC 4122 version 4 UUID rendered as 32 hex digits."""

    return uuid.uuid4().hex


class SessionRegistry:
    """Thread-safe token store; lives as long as the process does."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def register(self, token: str) -> Session:
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                session = self._sessions[token] = Session(token=token)
        return session

    def issue(self) -> Session:
        session = self.register(new_token())
        logger.info("Issued session token %s...", session.token[:8])
        return session

    def get(self, token: str | None) -> Session | None:
        if not token:
            return None
        with self._lock:
            return self._sessions.get(token)

    def is_valid(self, token: str | None) -> bool:
        return self.get(token) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


@lru_cache(maxsize=1)
def get_session_registry() -> SessionRegistry:
    """Return the process-wide registry."""

    return SessionRegistry()
