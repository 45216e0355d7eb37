"""Pytest fixtures for procv tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from procv.application.services.catalog import SAMPLE_CATALOG, load_catalog
from procv.domain.models.property import Property


@pytest.fixture
def sample_catalog():
    """The bundled ten-listing Cape Verde catalog."""
    return load_catalog(SAMPLE_CATALOG)


@pytest.fixture
def sample_listing_data():
    """Raw JSON-shaped data for one listing."""
    return {
        "id": "42",
        "title": "Seafront Apartment",
        "price": 210000,
        "location": "Santa Maria, Sal",
        "island": "Sal",
        "type": "apartment",
        "bedrooms": 2,
        "bathrooms": 1,
        "totalArea": 90,
        "features": ["Ocean View", "Balcony"],
        "isFeatured": False,
        "listingType": "buy",
        "dateAdded": "2024-11-30",
    }


@pytest.fixture
def make_property():
    """Factory for listings with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> Property:
        counter["n"] += 1
        data = {
            "id": f"p{counter['n']}",
            "title": f"Listing {counter['n']}",
            "price": 100000,
            "location": "Praia, Santiago",
            "island": "Santiago",
            "type": "house",
            "bedrooms": 2,
            "bathrooms": 1,
            "totalArea": 100,
            "features": [],
            "isFeatured": False,
            "listingType": "buy",
            "dateAdded": "2024-12-01",
        }
        data.update(overrides)
        return Property.model_validate(data)

    return _make
