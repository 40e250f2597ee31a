"""Session manager service layer (Use Cases).

Issues, validates and revokes bearer sessions.

Tokens are HS256 JWTs (PyJWT) signed with the server key and carrying a
random session id.  Signature alone is never enough: the session record
must also exist server-side, which makes revocation effective and the
token impossible to forge or resurrect client-side.

State machine per session:
- Active -> Expired: time-triggered, detected lazily on ``validate``.
- Active -> Revoked: explicit ``revoke``.
Both are terminal; an evicted record is never restored.
"""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING, Optional

import jwt as pyjwt
import structlog
from django.utils import timezone
from jwt.exceptions import PyJWTError

from modules.sessions.constants import SESSION_ID_BYTES, SESSION_TTL, TOKEN_ALGORITHM
from modules.sessions.entities import Session
from modules.sessions.exceptions import SessionExpired, SessionNotFound

if TYPE_CHECKING:
    from modules.accounts.entities import Account
    from modules.accounts.services import AccountDirectory
    from modules.sessions.repositories.interfaces import ISessionRepository

logger = structlog.get_logger(__name__)


class SessionManager:
    """Application service for session use-cases.

    Holds a read-only reference to the ``AccountDirectory``; it resolves
    accounts but never mutates them.
    """

    def __init__(
        self,
        repository: ISessionRepository,
        directory: AccountDirectory,
        signing_key: str,
    ) -> None:
        self._repo = repository
        self._directory = directory
        self._signing_key = signing_key

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def issue(self, account_id: str) -> Session:
        """Create a fresh session for ``account_id`` with the fixed TTL.

        Each call yields a new, independent session; earlier sessions of
        the same account stay valid.
        """
        issued_at = timezone.now()
        expires_at = issued_at + SESSION_TTL
        session_id = secrets.token_urlsafe(SESSION_ID_BYTES)
        token = pyjwt.encode(
            {
                "sub": account_id,
                "sid": session_id,
                "iat": int(issued_at.timestamp()),
                "exp": int(expires_at.timestamp()),
            },
            self._signing_key,
            algorithm=TOKEN_ALGORITHM,
        )
        session = self._repo.add(
            Session(
                session_id=session_id,
                token=token,
                account_id=account_id,
                issued_at=issued_at,
                expires_at=expires_at,
            )
        )
        logger.info("session.issued", account_id=account_id)
        return session

    def revoke(self, token: str) -> None:
        """Remove the session behind ``token``; a no-op when already gone."""
        session_id = self._session_id(token)
        if session_id is None:
            return
        if self._repo.remove(session_id):
            logger.info("session.revoked")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def validate(self, token: str) -> Account:
        """Resolve ``token`` to its owning account.

        Raises:
            SessionNotFound: token malformed, badly signed, unknown or
                already evicted, or its account no longer exists.
            SessionExpired: the TTL elapsed; the record is evicted so the
                next call raises ``SessionNotFound``.
        """
        session_id = self._session_id(token)
        if session_id is None:
            raise SessionNotFound()

        session = self._repo.get(session_id)
        if session is None or session.token != token:
            raise SessionNotFound()

        if session.is_expired(timezone.now()):
            self._repo.remove(session_id)
            logger.info("session.expired", account_id=session.account_id)
            raise SessionExpired()

        account = self._directory.find_by_id(session.account_id)
        if account is None:
            self._repo.remove(session_id)
            raise SessionNotFound()
        return account

    def active_count(self) -> int:
        return self._repo.count()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _session_id(self, token: str) -> Optional[str]:
        """Verify the signature and return the ``sid`` claim, or ``None``.

        Expiry is not checked here: the server-side record is the source
        of truth for TTL and eviction.
        """
        if not token or not isinstance(token, str):
            return None
        try:
            payload = pyjwt.decode(
                token,
                self._signing_key,
                algorithms=[TOKEN_ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sid", "sub"],
                },
            )
        except PyJWTError as exc:
            logger.warning("session.token_rejected", error=str(exc))
            return None
        return payload["sid"]
