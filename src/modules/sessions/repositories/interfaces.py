"""Session repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.sessions.entities import Session


class ISessionRepository(ABC):
    """Repository contract for session records, keyed by session id."""

    @abstractmethod
    def get(self, session_id: str) -> Optional[Session]:
        """Retrieve a session record, or ``None``."""

    @abstractmethod
    def add(self, session: Session) -> Session:
        """Store a new session record."""

    @abstractmethod
    def remove(self, session_id: str) -> bool:
        """Remove a session record.

        Idempotent: returns ``False`` when the record was already gone.
        """

    @abstractmethod
    def count(self) -> int:
        """Number of stored records, expired ones included."""
