"""Account directory service layer (Use Cases).

Orchestrates registration and login, delegating storage to the
injected ``IAccountRepository``.

Business rules enforced here:
- Email is unique, compared case-insensitively.
- New accounts are always ``USER``; roles are never changed here.
- Passwords are stored as Django password hashes and compared
  case-sensitively.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional, Union

import structlog
import uuid6
from django.contrib.auth.hashers import check_password, make_password
from django.utils import timezone

from modules.accounts.constants import UserRole
from modules.accounts.dtos import LoginDTO, RegisterAccountDTO
from modules.accounts.entities import Account
from modules.accounts.exceptions import DuplicateAccount, InvalidCredentials
from modules.core.validation import parse_dto

if TYPE_CHECKING:
    from modules.accounts.repositories.interfaces import IAccountRepository

logger = structlog.get_logger(__name__)


class AccountDirectory:
    """Application service for account use-cases.

    Receives an ``IAccountRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IAccountRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def register(
        self, data: Union[RegisterAccountDTO, Mapping[str, Any]]
    ) -> Account:
        """Register a new ``USER`` account.

        Raises:
            ValidationError: name, email or password is malformed.
            DuplicateAccount: the email is already registered.
        """
        dto = parse_dto(RegisterAccountDTO, data)
        log = logger.bind(email=dto.email)

        if self._repo.get_by_email(dto.email):
            log.warning("account.duplicate_email")
            raise DuplicateAccount(dto.email)

        account = Account(
            id=str(uuid6.uuid7()),
            name=dto.name,
            email=dto.email,
            password_hash=make_password(dto.password),
            role=UserRole.USER,
            created_at=timezone.now(),
        )
        account = self._repo.add(account)
        log.info("account.registered", account_id=account.id)
        return account

    def authenticate(self, data: Union[LoginDTO, Mapping[str, Any]]) -> Account:
        """Return the account matching the credentials.

        Raises:
            InvalidCredentials: unknown email or wrong password.
        """
        dto = parse_dto(LoginDTO, data)
        account = self._repo.get_by_email(dto.email)
        if account is None or not check_password(dto.password, account.password_hash):
            logger.warning("account.login_failed", email=dto.email)
            raise InvalidCredentials()
        logger.info("account.authenticated", account_id=account.id)
        return account

    def seed(self, fixtures: Iterable[Mapping[str, Any]]) -> None:
        """Insert fixture accounts, skipping emails already present."""
        now = timezone.now()
        for fixture in fixtures:
            if self._repo.get_by_email(fixture["email"]):
                continue
            account = Account(
                id=fixture["id"],
                name=fixture["name"],
                email=fixture["email"].lower(),
                password_hash=make_password(fixture["password"]),
                role=fixture["role"],
                created_at=now,
            )
            self._repo.add(account)
        logger.info("account.seeded", total=len(self._repo.list()))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: str) -> Optional[Account]:
        return self._repo.get_by_id(id)
