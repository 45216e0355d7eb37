"""Session state management for Streamlit app.

Provides a centralized interface for managing Streamlit session state.
Each browser session gets its own PropertySearchSession.
"""

from __future__ import annotations

from typing import Any, TypeVar

import streamlit as st

from procv.application.services.catalog import load_default_catalog
from procv.application.services.search_session import PropertySearchSession
from procv.core.logging import get_logger
from procv.core.settings import get_settings

log = get_logger(__name__)

T = TypeVar("T")


def get_state(key: str, default: T) -> T:
    """Get a value from session state with a default.

    Args:
        key: Session state key
        default: Default value if key not present

    Returns:
        Value from session state or default
    """
    if key not in st.session_state:
        st.session_state[key] = default
    return st.session_state[key]


def set_state(key: str, value: Any) -> None:
    """Set a value in session state."""
    st.session_state[key] = value


def init_state(defaults: dict[str, Any]) -> None:
    """Initialize multiple session state values with defaults.

    Only sets values that don't already exist.
    """
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


class SessionManager:
    """Manages all session state for the app."""

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        """Calculator inputs, seeded from settings."""
        settings = get_settings()
        return {
            "mortgage_price": 300000.0,
            "mortgage_deposit": 60000.0,
            "mortgage_rate": settings.default_interest_rate_pct,
            "mortgage_term": settings.default_loan_term_years,
            "afford_income": 5000.0,
            "afford_debts": 800.0,
            "afford_deposit": 50000.0,
            "afford_rate": settings.default_interest_rate_pct,
            "afford_term": settings.default_loan_term_years,
        }

    @classmethod
    def initialize(cls) -> None:
        """Initialize all session state with defaults."""
        init_state(cls.defaults())

    @classmethod
    def get_search_session(cls) -> PropertySearchSession:
        """Get this browser session's search session, creating it on first use."""
        session = st.session_state.get("search_session")
        if session is None:
            catalog = load_default_catalog()
            session = PropertySearchSession(catalog)
            set_state("search_session", session)
            log.info("search_session_started", catalog_size=len(catalog))
        return session
