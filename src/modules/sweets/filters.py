"""Catalog search over a ledger snapshot.

Pure functions, no side effects: safe to call while the ledger is being
mutated, since they only read the immutable ``Sweet`` values they are
given.

Matching rules:
- ``name``: case-insensitive substring test (``icontains``), not a
  prefix match.
- ``category``: exact match.
- ``min_price`` / ``max_price``: inclusive bounds (``gte`` / ``lte``).
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

from modules.core.validation import parse_dto
from modules.sweets.dtos import SearchPredicate
from modules.sweets.entities import Sweet

SEARCH_PARAMS = ("name", "category", "min_price", "minPrice", "max_price", "maxPrice")


def build_predicate(params: Mapping[str, Any]) -> SearchPredicate:
    """Build a predicate from query parameters, ignoring blank values.

    Raises:
        ValidationError: a price bound is not a number or the category
            is unknown.
    """
    data = {
        key: params.get(key)
        for key in SEARCH_PARAMS
        if params.get(key) not in (None, "")
    }
    return parse_dto(SearchPredicate, data)


def matches(sweet: Sweet, predicate: SearchPredicate) -> bool:
    if predicate.name and predicate.name.lower() not in sweet.name.lower():
        return False
    if predicate.category is not None and sweet.category != predicate.category:
        return False
    if predicate.min_price is not None and sweet.price < predicate.min_price:
        return False
    if predicate.max_price is not None and sweet.price > predicate.max_price:
        return False
    return True


def filter_sweets(
    items: Iterable[Sweet], predicate: Union[SearchPredicate, Mapping[str, Any]]
) -> List[Sweet]:
    """Return the order-preserving subsequence of ``items`` matching ``predicate``."""
    predicate = parse_dto(SearchPredicate, predicate)
    return [sweet for sweet in items if matches(sweet, predicate)]
