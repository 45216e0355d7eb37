"""Catalog loading service.

Reads listing catalogs from JSON and validates every record. A catalog is
loaded once per session and never modified afterwards.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from procv.core.exceptions import CatalogLoadError
from procv.core.logging import get_logger
from procv.core.settings import get_settings
from procv.domain.models.property import Property

log = get_logger(__name__)

SAMPLE_CATALOG = Path(__file__).resolve().parent.parent.parent / "data" / "sample_properties.json"


def parse_catalog(raw_data: Any) -> tuple[Property, ...]:
    """Validate raw JSON data into an ordered catalog.

    Args:
        raw_data: A list of listing objects, or an object with a
            ``properties`` list

    Returns:
        Tuple of Property records in input order

    Raises:
        CatalogLoadError: If the payload shape is wrong, a record is
            invalid, or an id is repeated
    """
    if isinstance(raw_data, dict):
        raw_data = raw_data.get("properties")
    if not isinstance(raw_data, list):
        raise CatalogLoadError("Catalog must be a JSON array of listings")

    catalog = []
    seen: set[str] = set()
    for index, item in enumerate(raw_data):
        try:
            prop = Property.model_validate(item)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid listing at index {index}: {e}") from e
        if prop.id in seen:
            raise CatalogLoadError(f"Duplicate listing id '{prop.id}'")
        seen.add(prop.id)
        catalog.append(prop)

    return tuple(catalog)


def load_catalog(path: str | Path) -> tuple[Property, ...]:
    """Load a catalog from a JSON file.

    Args:
        path: Path to the catalog file

    Returns:
        Tuple of Property records in file order

    Raises:
        CatalogLoadError: If the file is missing, not JSON, or invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw_data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {path}") from e

    catalog = parse_catalog(raw_data)
    log.info("catalog_loaded", path=str(path), count=len(catalog))
    return catalog


def load_default_catalog() -> tuple[Property, ...]:
    """Load the configured catalog, or the bundled sample listings."""
    configured = get_settings().catalog_path
    return load_catalog(configured or SAMPLE_CATALOG)
