"""In-memory implementation of the Sweet repository.

Sweets live in an insertion-ordered dict keyed by id, each with its own
``threading.Lock``.  The registry lock only guards the dict structure
(insert, remove, lock look-up) and is never held while an item is being
mutated, so purchases of different sweets never wait on each other.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from modules.sweets.entities import Sweet
from modules.sweets.repositories.interfaces import ISweetRepository


class InMemorySweetRepository(ISweetRepository):
    """Concrete Sweet repository backed by process memory."""

    def __init__(self) -> None:
        self._registry_lock = threading.Lock()
        self._items: Dict[str, Sweet] = {}
        self._locks: Dict[str, threading.Lock] = {}

    def get_by_id(self, id: str) -> Optional[Sweet]:
        return self._items.get(id)

    def list(self) -> List[Sweet]:
        with self._registry_lock:
            return list(self._items.values())

    def count(self) -> int:
        return len(self._items)

    def save(self, entity: Sweet) -> Sweet:
        """Create or replace a sweet.

        Replacing an existing sweet keeps its position in the listing.
        """
        with self._registry_lock:
            self._locks.setdefault(entity.id, threading.Lock())
            self._items[entity.id] = entity
        return entity

    def delete(self, id: str) -> bool:
        with self._registry_lock:
            removed = self._items.pop(id, None)
            self._locks.pop(id, None)
        return removed is not None

    @contextmanager
    def locked(self, id: str) -> Iterator[Optional[Sweet]]:
        with self._registry_lock:
            lock = self._locks.get(id)
        if lock is None:
            yield None
            return
        with lock:
            yield self._items.get(id)
