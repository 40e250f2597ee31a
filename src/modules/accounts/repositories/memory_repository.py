"""In-memory implementation of the Account repository.

Satisfies ``IAccountRepository`` with two dict indexes (by id and by
lower-cased email) guarded by a single lock.  Follows the Null Object
pattern: look-ups return ``None`` instead of raising.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from modules.accounts.entities import Account
from modules.accounts.exceptions import DuplicateAccount
from modules.accounts.repositories.interfaces import IAccountRepository


class InMemoryAccountRepository(IAccountRepository):
    """Concrete Account repository backed by process memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_id: Dict[str, Account] = {}
        self._id_by_email: Dict[str, str] = {}

    def get_by_id(self, id: str) -> Optional[Account]:
        return self._by_id.get(id)

    def get_by_email(self, email: str) -> Optional[Account]:
        account_id = self._id_by_email.get(email.strip().lower())
        if account_id is None:
            return None
        return self._by_id.get(account_id)

    def list(self) -> List[Account]:
        with self._lock:
            return list(self._by_id.values())

    def add(self, account: Account) -> Account:
        key = account.email.lower()
        with self._lock:
            if key in self._id_by_email:
                raise DuplicateAccount(account.email)
            self._by_id[account.id] = account
            self._id_by_email[key] = account.id
        return account

