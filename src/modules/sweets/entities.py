"""Sweet entity.

Sweets are immutable value objects.  The ledger applies a mutation by
storing a replacement built with ``dataclasses.replace``, so readers
observe either the previous or the next state, never a mix.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Sweet:
    id: str
    name: str
    category: str
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    image_url: Optional[str] = None

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0
