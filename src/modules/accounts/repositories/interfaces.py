"""Account repository interface.

Accounts are only ever inserted and looked up: registration needs the
atomic uniqueness guarantee of ``add`` and login needs the email
look-up.  Accounts are never updated or deleted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from modules.accounts.entities import Account


class IAccountRepository(ABC):
    """Repository contract for the Account aggregate."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Account]:
        """Retrieve an account by its primary key."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Account]:
        """Retrieve an account by email (case-insensitive)."""

    @abstractmethod
    def list(self) -> List[Account]:
        """List accounts in insertion order."""

    @abstractmethod
    def add(self, account: Account) -> Account:
        """Insert a new account.

        The uniqueness check and the insert form one atomic step.

        Raises:
            DuplicateAccount: the email is already registered.
        """
