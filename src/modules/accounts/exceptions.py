"""Account domain exceptions.

Raised by ``AccountDirectory`` when registration or login rules are
violated.  The API layer translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import DomainError


class DuplicateAccount(DomainError):
    """An account with the same email (case-insensitive) already exists."""

    code = "duplicate_account"

    def __init__(self, email: str) -> None:
        super().__init__("An account with this email already exists.")
        self.email = email


class InvalidCredentials(DomainError):
    """Unknown email or wrong password.

    The two cases are reported identically.
    """

    code = "invalid_credentials"

    def __init__(self) -> None:
        super().__init__("Invalid email or password.")
