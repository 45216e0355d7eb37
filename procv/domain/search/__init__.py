"""Property search engine."""

from .filtering import filter_properties, matches, sort_properties
from .statistics import ResultSummary, summarize

__all__ = [
    "filter_properties",
    "matches",
    "sort_properties",
    "ResultSummary",
    "summarize",
]
