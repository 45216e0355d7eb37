"""Summary statistics over a set of listings."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel

from procv.domain.models.property import Property


class ResultSummary(BaseModel):
    """Headline numbers for a result set."""

    count: int = 0
    average_price: float = 0.0
    median_price: float = 0.0
    average_price_per_sqm: float = 0.0
    featured_count: int = 0


def summarize(properties: Sequence[Property]) -> ResultSummary:
    """Compute headline statistics.

    Listings without a surface are left out of the price per m² average.
    An empty input yields an all-zero summary.
    """
    if not properties:
        return ResultSummary()

    prices = np.array([p.price for p in properties], dtype=float)
    per_sqm = [p.price_per_sqm for p in properties if p.price_per_sqm is not None]

    return ResultSummary(
        count=len(properties),
        average_price=float(prices.mean()),
        median_price=float(np.median(prices)),
        average_price_per_sqm=float(np.mean(per_sqm)) if per_sqm else 0.0,
        featured_count=sum(1 for p in properties if p.is_featured),
    )
