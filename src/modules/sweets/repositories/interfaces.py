"""Sweet repository interface.

Extends ``IRepository[Sweet]`` with the per-item exclusive section the
ledger needs for atomic stock changes.
"""

from __future__ import annotations

from abc import abstractmethod
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.sweets.entities import Sweet


class ISweetRepository(IRepository["Sweet"]):
    """Repository contract for the Sweet aggregate."""

    @abstractmethod
    def locked(self, id: str) -> AbstractContextManager[Optional[Sweet]]:
        """Hold the exclusive lock of one sweet for the ``with`` block.

        Yields the current state read *after* the lock is acquired, or
        ``None`` if the sweet does not exist (or was deleted while
        waiting).  Writes for that id made inside the block are atomic
        with respect to every other ``locked`` holder of the same id;
        other ids are unaffected.  The in-memory analogue of
        ``SELECT ... FOR UPDATE``.
        """

    @abstractmethod
    def count(self) -> int:
        """Number of sweets in the catalog."""
