"""Unit tests for InMemorySweetRepository and its per-item locking."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from modules.sweets.entities import Sweet
from modules.sweets.repositories.memory_repository import InMemorySweetRepository

pytestmark = pytest.mark.unit

_NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _sweet(id: str, quantity: int = 1) -> Sweet:
    return Sweet(
        id=id,
        name=f"Sweet {id}",
        category="candies",
        price=Decimal("1.00"),
        quantity=quantity,
        created_at=_NOW,
        updated_at=_NOW,
    )


@pytest.fixture()
def repo():
    return InMemorySweetRepository()


class TestInMemorySweetRepository:
    def test_save_and_get(self, repo):
        sweet = repo.save(_sweet("a"))
        assert repo.get_by_id("a") == sweet
        assert repo.count() == 1

    def test_save_replaces_in_place(self, repo):
        repo.save(_sweet("a"))
        repo.save(_sweet("b"))
        repo.save(_sweet("a", quantity=9))
        assert [(s.id, s.quantity) for s in repo.list()] == [("a", 9), ("b", 1)]

    def test_delete(self, repo):
        repo.save(_sweet("a"))
        assert repo.delete("a") is True
        assert repo.get_by_id("a") is None
        assert repo.delete("a") is False

    def test_locked_missing_yields_none(self, repo):
        with repo.locked("missing") as current:
            assert current is None

    def test_locked_yields_current_value(self, repo):
        repo.save(_sweet("a", quantity=4))
        with repo.locked("a") as current:
            assert current.quantity == 4

    def test_lock_on_one_item_does_not_block_another(self, repo):
        repo.save(_sweet("a"))
        repo.save(_sweet("b"))
        holding = threading.Event()
        release = threading.Event()
        other_done = threading.Event()

        def hold_a():
            with repo.locked("a"):
                holding.set()
                release.wait(timeout=5)

        def touch_b():
            with repo.locked("b") as current:
                repo.save(current)
            other_done.set()

        holder = threading.Thread(target=hold_a)
        holder.start()
        assert holding.wait(timeout=5)

        worker = threading.Thread(target=touch_b)
        worker.start()
        assert other_done.wait(timeout=5)

        release.set()
        holder.join()
        worker.join()

    def test_lock_on_one_item_serializes_its_writers(self, repo):
        repo.save(_sweet("a"))
        holding = threading.Event()
        release = threading.Event()
        second_entered = threading.Event()

        def hold_a():
            with repo.locked("a"):
                holding.set()
                release.wait(timeout=5)

        def enter_a():
            with repo.locked("a"):
                second_entered.set()

        holder = threading.Thread(target=hold_a)
        holder.start()
        assert holding.wait(timeout=5)

        waiter = threading.Thread(target=enter_a)
        waiter.start()
        assert not second_entered.wait(timeout=0.2)

        release.set()
        assert second_entered.wait(timeout=5)
        holder.join()
        waiter.join()
