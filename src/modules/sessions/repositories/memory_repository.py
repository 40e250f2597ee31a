"""In-memory implementation of the Session repository."""

from __future__ import annotations

import threading
from typing import Dict, Optional

from modules.sessions.entities import Session
from modules.sessions.repositories.interfaces import ISessionRepository


class InMemorySessionRepository(ISessionRepository):
    """Session records in a dict; removal is a set-remove, safe to repeat."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: Dict[str, Session] = {}

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def add(self, session: Session) -> Session:
        with self._lock:
            self._sessions[session.session_id] = session
        return session

    def remove(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def count(self) -> int:
        return len(self._sessions)
