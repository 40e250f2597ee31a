"""Sweet domain exceptions."""

from __future__ import annotations

from typing import Any, Dict

from modules.core.exceptions import DomainError


class OutOfStock(DomainError):
    """Not enough units to satisfy a purchase.

    ``available`` is the quantity on hand when the purchase was refused.
    """

    code = "out_of_stock"

    def __init__(self, sweet_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Sweet {sweet_id}: requested {requested}, available {available}."
        )
        self.sweet_id = sweet_id
        self.requested = requested
        self.available = available

    @property
    def extra(self) -> Dict[str, Any]:
        return {
            "sweet_id": self.sweet_id,
            "requested": self.requested,
            "available": self.available,
        }
