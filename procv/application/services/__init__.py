"""Application services."""

from .catalog import load_catalog, load_default_catalog
from .exporter import ResultExporter
from .leads import LoggingDispatcher, NotificationDispatcher, calculate_lead_score, process_inquiry
from .search_session import PropertySearchSession, SearchSnapshot, SearchState

__all__ = [
    "PropertySearchSession",
    "SearchSnapshot",
    "SearchState",
    "load_catalog",
    "load_default_catalog",
    "ResultExporter",
    "NotificationDispatcher",
    "LoggingDispatcher",
    "calculate_lead_score",
    "process_inquiry",
]
