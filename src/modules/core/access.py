"""Role-gated entry point to the inventory ledger.

``AccessGate`` is the thin orchestration layer the HTTP views call:
it resolves the bearer token to an account, checks the role required by
the operation and only then delegates.  Results and domain errors from
the delegated operation pass through unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

import structlog

from modules.accounts.constants import UserRole
from modules.core.exceptions import Forbidden

if TYPE_CHECKING:
    from modules.accounts.entities import Account
    from modules.sessions.services import SessionManager

logger = structlog.get_logger(__name__)

R = TypeVar("R")


class AccessGate:
    """Authorizes each call against the session store before delegating."""

    def __init__(self, sessions: SessionManager) -> None:
        self._sessions = sessions

    def authorize(self, token: str, required_role: str) -> Account:
        """Resolve ``token`` and enforce ``required_role``.

        Raises:
            SessionExpired: the session outlived its TTL.
            SessionNotFound: the token is unknown, revoked or malformed.
            Forbidden: ADMIN is required and the account is not ADMIN.
        """
        account = self._sessions.validate(token)
        if required_role == UserRole.ADMIN and account.role != UserRole.ADMIN:
            logger.warning(
                "access.forbidden",
                account_id=account.id,
                required_role=str(required_role),
            )
            raise Forbidden(str(required_role))
        return account

    def call(
        self,
        token: str,
        required_role: str,
        operation: Callable[..., R],
        *args: Any,
        **kwargs: Any,
    ) -> R:
        """Authorize, then invoke ``operation(*args, **kwargs)``."""
        self.authorize(token, required_role)
        return operation(*args, **kwargs)
