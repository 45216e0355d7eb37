"""Property listing data model.

A property is a single catalog record. Records are frozen once loaded;
searches derive views from the catalog and never modify it.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

_TIMESTAMP = TypeAdapter(datetime)


class PropertyType(str, Enum):
    """Listing category."""

    HOUSE = "house"
    APARTMENT = "apartment"
    VILLA = "villa"
    TOWNHOUSE = "townhouse"
    STUDIO = "studio"
    PENTHOUSE = "penthouse"
    LAND = "land"
    COMMERCIAL = "commercial"
    OFFICE = "office"
    WAREHOUSE = "warehouse"
    RETAIL = "retail"


class ListingType(str, Enum):
    """Whether a listing is for sale or for rent."""

    BUY = "buy"
    RENT = "rent"


class Property(BaseModel):
    """Catalog record for one listing.

    JSON payloads use camelCase keys (``totalArea``, ``dateAdded``...);
    attributes are snake_case.
    """

    # Identity
    id: str = Field(..., description="Unique listing identifier")
    title: str = Field(..., description="Listing headline")
    location: str = Field(..., description="Town and island, e.g. 'Santa Maria, Sal'")
    island: str = Field(..., description="Island name")
    property_type: PropertyType = Field(..., alias="type", description="Listing category")

    # Pricing & size
    price: float = Field(..., ge=0, description="Sale price or monthly rent in €")
    bedrooms: int = Field(default=0, ge=0)
    bathrooms: int = Field(default=0, ge=0)
    total_area: float = Field(default=0.0, ge=0, description="Surface in m²")

    # Presentation
    features: tuple[str, ...] = Field(default=(), description="Free-text amenities")
    images: tuple[str, ...] = Field(default=())
    is_featured: bool = Field(default=False)

    listing_type: ListingType = Field(...)
    date_added: date = Field(..., description="Listing date, used for chronological sort")

    model_config = {
        "frozen": True,
        "extra": "ignore",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Accept numeric ids from legacy feeds."""
        if isinstance(v, int):
            return str(v)
        return v

    @field_validator("date_added", mode="before")
    @classmethod
    def truncate_timestamp(cls, v):
        """Accept full ISO timestamps; only the calendar date is kept."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return _TIMESTAMP.validate_python(v).date()
        return v

    @property
    def price_per_sqm(self) -> float | None:
        """Price per m², None when the area is unknown."""
        if self.total_area <= 0:
            return None
        return self.price / self.total_area
