"""Search filter state.

Filter state belongs to one search session. It is updated one field at a
time and reset to defaults on clear.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from procv.core.exceptions import InvalidParameterError
from procv.core.market_constants import ALL, DEFAULT_MAX_PRICE, DEFAULT_MIN_PRICE
from procv.domain.models.property import PropertyType


class SortOrder(str, Enum):
    """Result ordering."""

    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    NEWEST = "newest"
    OLDEST = "oldest"
    SIZE_ASC = "size-asc"
    SIZE_DESC = "size-desc"


class PropertyFilters(BaseModel):
    """User-chosen constraints and sort order.

    Every constraint has a "no constraint" value: empty query, ``"all"``
    for categories, 0 for room counts. The price range is always applied;
    its defaults admit the whole catalog. ``min_price > max_price`` is
    accepted and simply matches nothing.
    """

    search_query: str = Field(default="", description="Free text, case-insensitive")
    property_type: str = Field(default=ALL, description="PropertyType value or 'all'")
    min_price: float = Field(default=DEFAULT_MIN_PRICE)
    max_price: float = Field(default=DEFAULT_MAX_PRICE)
    bedrooms: int = Field(default=0, description="Minimum bedrooms, 0 = any")
    bathrooms: int = Field(default=0, description="Minimum bathrooms, 0 = any")
    island: str = Field(default=ALL, description="Island name or 'all'")
    listing_type: Literal["buy", "rent", "all"] = Field(default=ALL)
    sort_by: SortOrder = Field(default=SortOrder.NEWEST)

    model_config = {
        "validate_assignment": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("property_type", mode="before")
    @classmethod
    def normalize_property_type(cls, v: Any) -> str:
        """Unwrap PropertyType members and lower-case free text.

        Unknown categories are kept; they match no listing.
        """
        if isinstance(v, PropertyType):
            return v.value
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("listing_type", mode="before")
    @classmethod
    def unwrap_listing_type(cls, v: Any) -> Any:
        """Accept ListingType members as well as plain strings."""
        return getattr(v, "value", v)

    @classmethod
    def field_for(cls, key: str) -> str:
        """Resolve an attribute name or camelCase alias to the attribute name.

        Raises:
            InvalidParameterError: If the key names no filter field
        """
        if key in cls.model_fields:
            return key
        for name in cls.model_fields:
            if to_camel(name) == key:
                return name
        raise InvalidParameterError(key, None, "not a filter field")

    def is_default(self) -> bool:
        """True when every field holds its default value."""
        return self == PropertyFilters()
