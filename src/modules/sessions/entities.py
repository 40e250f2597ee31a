"""Session entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Session:
    """A time-bounded credential bound to one account.

    ``session_id`` is the server-side key; ``token`` is the signed bearer
    string handed to the client and is only honoured while the record
    exists.
    """

    session_id: str
    token: str
    account_id: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
