"""Property filtering and sorting.

Constraints are AND-combined; a constraint holding its "no constraint"
value always passes. Sorting is stable, so listings with equal keys keep
their catalog order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Callable

from procv.core.market_constants import ALL
from procv.domain.models.filters import PropertyFilters, SortOrder
from procv.domain.models.property import Property

# Sort key and direction per order
_SORT_KEYS: dict[SortOrder, tuple[Callable[[Property], Any], bool]] = {
    SortOrder.PRICE_ASC: (lambda p: p.price, False),
    SortOrder.PRICE_DESC: (lambda p: p.price, True),
    SortOrder.SIZE_ASC: (lambda p: p.total_area, False),
    SortOrder.SIZE_DESC: (lambda p: p.total_area, True),
    SortOrder.OLDEST: (lambda p: p.date_added, False),
    SortOrder.NEWEST: (lambda p: p.date_added, True),
}


def matches_query(prop: Property, query: str) -> bool:
    """Case-insensitive substring match on title, location, island or features.

    An empty query matches everything.
    """
    if not query:
        return True
    q = query.lower()
    return (
        q in prop.title.lower()
        or q in prop.location.lower()
        or q in prop.island.lower()
        or any(q in feature.lower() for feature in prop.features)
    )


def matches(prop: Property, filters: PropertyFilters) -> bool:
    """Check one listing against every active constraint.

    Args:
        prop: Catalog record
        filters: Current filter state

    Returns:
        True if the listing satisfies all constraints
    """
    if not matches_query(prop, filters.search_query):
        return False

    if filters.property_type != ALL and prop.property_type.value != filters.property_type:
        return False

    if not (filters.min_price <= prop.price <= filters.max_price):
        return False

    if filters.bedrooms > 0 and prop.bedrooms < filters.bedrooms:
        return False

    if filters.bathrooms > 0 and prop.bathrooms < filters.bathrooms:
        return False

    if filters.island != ALL and prop.island != filters.island:
        return False

    if filters.listing_type != ALL and prop.listing_type.value != filters.listing_type:
        return False

    return True


def sort_properties(
    properties: Iterable[Property],
    sort_by: SortOrder = SortOrder.NEWEST,
) -> list[Property]:
    """Return a new list ordered by ``sort_by``.

    Unknown orders fall back to newest first.
    """
    key, reverse = _SORT_KEYS.get(sort_by, _SORT_KEYS[SortOrder.NEWEST])
    # sorted() is stable for reverse=True as well
    return sorted(properties, key=key, reverse=reverse)


def filter_properties(
    catalog: Sequence[Property],
    filters: PropertyFilters,
) -> list[Property]:
    """Filter then sort a catalog.

    Args:
        catalog: Full listing catalog (left untouched)
        filters: Current filter state

    Returns:
        New list of matching listings in ``filters.sort_by`` order. Empty
        when nothing matches.
    """
    result = [p for p in catalog if matches(p, filters)]
    return sort_properties(result, filters.sort_by)
