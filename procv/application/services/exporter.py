"""Export services for search results.

Saves result sets to JSON or CSV for sharing and analysis.
"""

import json
import os
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from procv.core.exceptions import ExportError
from procv.core.logging import get_logger
from procv.domain.models.property import Property

log = get_logger(__name__)

CSV_COLUMNS = [
    "id",
    "title",
    "location",
    "island",
    "property_type",
    "listing_type",
    "price",
    "bedrooms",
    "bathrooms",
    "total_area",
    "is_featured",
    "date_added",
]


class ResultExporter:
    """Handles exporting of search results."""

    def __init__(self, output_dir: str = "results"):
        """Initialize exporter.

        Args:
            output_dir: Directory where results will be saved.
        """
        self.output_dir = output_dir

    def _ensure_dir(self) -> None:
        try:
            os.makedirs(self.output_dir, exist_ok=True)
        except OSError as e:
            log.error("output_directory_creation_failed", path=self.output_dir, error=str(e))
            raise ExportError(f"Cannot create {self.output_dir}: {e}") from e

    def _path(self, prefix: str, extension: str) -> str:
        """Timestamped path that does not overwrite an earlier export."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = os.path.join(self.output_dir, f"{prefix}_{timestamp}.{extension}")
        counter = 1
        while os.path.exists(filepath):
            filepath = os.path.join(self.output_dir, f"{prefix}_{timestamp}_{counter}.{extension}")
            counter += 1
        return filepath

    @staticmethod
    def to_dataframe(properties: Sequence[Property]) -> pd.DataFrame:
        """Flatten listings into one row each."""
        rows = [p.model_dump(mode="json", include=set(CSV_COLUMNS)) for p in properties]
        return pd.DataFrame(rows, columns=CSV_COLUMNS)

    def save_results(
        self,
        properties: Sequence[Property],
        prefix: str = "search",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Save results to a JSON file.

        Args:
            properties: Listings to save, in display order.
            prefix: Filename prefix.
            metadata: Optional metadata (e.g. the filters used).

        Returns:
            Path to the saved file.
        """
        self._ensure_dir()
        filepath = self._path(prefix, "json")

        listings: List[Dict[str, Any]] = [
            p.model_dump(mode="json", by_alias=True) for p in properties
        ]
        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                "count": len(listings),
                **(metadata or {}),
            },
            "properties": listings,
        }

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("results_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write {filepath}: {e}") from e

        log.info("results_saved", path=filepath, count=len(listings))
        return filepath

    def save_csv(self, properties: Sequence[Property], prefix: str = "search") -> str:
        """Save results to a CSV file.

        Returns:
            Path to the saved file.
        """
        self._ensure_dir()
        filepath = self._path(prefix, "csv")
        try:
            self.to_dataframe(properties).to_csv(filepath, index=False)
        except OSError as e:
            log.error("results_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write {filepath}: {e}") from e

        log.info("results_saved", path=filepath, count=len(properties))
        return filepath
