"""Account entity.

Accounts are immutable value objects; the directory never edits one
in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from modules.accounts.constants import UserRole


@dataclass(frozen=True)
class Account:
    id: str
    name: str
    email: str
    password_hash: str
    role: str
    created_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
