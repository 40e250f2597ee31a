"""Session domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import DomainError


class SessionExpired(DomainError):
    """The session outlived its TTL; it has been evicted."""

    code = "session_expired"

    def __init__(self) -> None:
        super().__init__("Session has expired. Please log in again.")


class SessionNotFound(DomainError):
    """The token is unknown, revoked, already evicted or malformed."""

    code = "not_authenticated"

    def __init__(self) -> None:
        super().__init__("Authentication credentials were not provided or are invalid.")
