"""Inventory ledger service layer (Use Cases).

The ledger is the single writer of the sweet catalog, delegating storage
to the injected ``ISweetRepository``.

Business rules enforced here:
- ``quantity >= 0`` and ``price > 0`` in every reachable state.
- Every mutation of one sweet (update, purchase, restock, delete) runs
  inside that sweet's exclusive section, so concurrent purchases cannot
  both read the same pre-decrement quantity.
- Validate, then apply: no failure path leaves a partial mutation.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional, Union

import structlog
import uuid6
from django.utils import timezone

from modules.core.exceptions import NotFound, ValidationError
from modules.core.validation import parse_dto
from modules.sweets.dtos import CreateSweetDTO, UpdateSweetDTO
from modules.sweets.entities import Sweet
from modules.sweets.exceptions import OutOfStock

if TYPE_CHECKING:
    from modules.sweets.repositories.interfaces import ISweetRepository

logger = structlog.get_logger(__name__)

ENTITY_KIND = "Sweet"


class InventoryLedger:
    """Application service for catalog and stock use-cases.

    Receives an ``ISweetRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ISweetRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, spec: Union[CreateSweetDTO, Mapping[str, Any]]) -> Sweet:
        """Add a new sweet to the catalog.

        Raises:
            ValidationError: a field is missing or out of range.
        """
        dto = parse_dto(CreateSweetDTO, spec)
        now = timezone.now()
        sweet = Sweet(
            id=str(uuid6.uuid7()),
            name=dto.name,
            category=dto.category.value,
            price=dto.price,
            quantity=dto.quantity,
            description=dto.description,
            image_url=dto.image_url,
            created_at=now,
            updated_at=now,
        )
        sweet = self._repo.save(sweet)
        logger.info("sweet.created", sweet_id=sweet.id, quantity=sweet.quantity)
        return sweet

    def update(
        self, id: str, partial_spec: Union[UpdateSweetDTO, Mapping[str, Any]]
    ) -> Sweet:
        """Apply only the supplied fields.

        Raises:
            ValidationError: a supplied field is invalid.
            NotFound: the sweet does not exist.
        """
        dto = parse_dto(UpdateSweetDTO, partial_spec)
        changes = dto.model_dump(exclude_unset=True)
        if "category" in changes:
            changes["category"] = dto.category.value

        with self._repo.locked(id) as current:
            if current is None:
                raise NotFound(ENTITY_KIND, id)
            sweet = self._repo.save(
                dataclasses.replace(current, **changes, updated_at=timezone.now())
            )

        logger.info("sweet.updated", sweet_id=id, fields=sorted(changes))
        return sweet

    def delete(self, id: str) -> None:
        """Remove a sweet permanently (no tombstone).

        Raises:
            NotFound: the sweet does not exist.
        """
        with self._repo.locked(id) as current:
            if current is None:
                raise NotFound(ENTITY_KIND, id)
            self._repo.delete(id)
        logger.info("sweet.deleted", sweet_id=id)

    def purchase(self, id: str, qty: int = 1) -> Sweet:
        """Atomically take ``qty`` units out of stock.

        Raises:
            ValidationError: ``qty`` is not a positive integer.
            NotFound: the sweet does not exist.
            OutOfStock: fewer than ``qty`` units are available.
        """
        qty = _positive_quantity(qty)
        log = logger.bind(sweet_id=id, quantity=qty)

        with self._repo.locked(id) as current:
            if current is None:
                raise NotFound(ENTITY_KIND, id)
            if current.quantity < qty:
                log.warning("sweet.out_of_stock", available=current.quantity)
                raise OutOfStock(id, requested=qty, available=current.quantity)
            sweet = self._repo.save(
                dataclasses.replace(
                    current,
                    quantity=current.quantity - qty,
                    updated_at=timezone.now(),
                )
            )

        log.info("sweet.purchased", remaining=sweet.quantity)
        return sweet

    def restock(self, id: str, qty: int) -> Sweet:
        """Atomically add ``qty`` units to stock.

        Raises:
            ValidationError: ``qty`` is not a positive integer.
            NotFound: the sweet does not exist.
        """
        qty = _positive_quantity(qty)

        with self._repo.locked(id) as current:
            if current is None:
                raise NotFound(ENTITY_KIND, id)
            sweet = self._repo.save(
                dataclasses.replace(
                    current,
                    quantity=current.quantity + qty,
                    updated_at=timezone.now(),
                )
            )

        logger.info("sweet.restocked", sweet_id=id, quantity=qty, total=sweet.quantity)
        return sweet

    def seed(self, catalog: Iterable[Mapping[str, Any]]) -> None:
        for spec in catalog:
            self.create(spec)
        logger.info("sweet.catalog_seeded", total=self._repo.count())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, id: str) -> Optional[Sweet]:
        return self._repo.get_by_id(id)

    def get_or_raise(self, id: str) -> Sweet:
        """Retrieve a sweet by id.

        Raises:
            NotFound: the sweet does not exist.
        """
        sweet = self._repo.get_by_id(id)
        if sweet is None:
            raise NotFound(ENTITY_KIND, id)
        return sweet

    def list(self) -> List[Sweet]:
        """All sweets in insertion order."""
        return self._repo.list()

    def count(self) -> int:
        return self._repo.count()


def _positive_quantity(qty: Any) -> int:
    if isinstance(qty, bool) or not isinstance(qty, int):
        raise ValidationError("quantity", "Quantity must be an integer.")
    if qty <= 0:
        raise ValidationError("quantity", "Quantity must be greater than zero.")
    return qty
