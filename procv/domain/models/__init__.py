"""Data models for procv."""

from .calculation import AffordabilityResult, BankOffer, BankQuote, MortgageResult
from .filters import PropertyFilters, SortOrder
from .property import ListingType, Property, PropertyType

__all__ = [
    "AffordabilityResult",
    "BankOffer",
    "BankQuote",
    "ListingType",
    "MortgageResult",
    "Property",
    "PropertyFilters",
    "PropertyType",
    "SortOrder",
]
