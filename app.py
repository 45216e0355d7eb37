"""Main Application Entry Point.

Run with ``streamlit run app.py``. Composes the search and calculator
pages; all business logic lives in the procv package.
"""

import os
import sys

import streamlit as st

# Add project root to path if not present (for running from a checkout)
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from procv import __version__
from procv.core.exceptions import CatalogLoadError, ConfigurationError
from procv.core.logging import get_logger
from procv.ui.pages.calculators import render_calculators_page
from procv.ui.pages.search import render_search_page
from procv.ui.state import SessionManager


def render_header() -> None:
    """Render page header."""
    st.markdown(
        """
        <h1 style="text-align: center;">
            🏝️ Cape Verde Property Finder
        </h1>
        """,
        unsafe_allow_html=True,
    )
    st.caption("Homes for sale and rent across the islands, with mortgage tools")


def main() -> None:
    """Main application entry point."""
    # Must be the first Streamlit call
    st.set_page_config(
        page_title="Cape Verde Property Finder",
        page_icon="🏝️",
        layout="wide",
    )
    log = get_logger(__name__)

    try:
        SessionManager.initialize()
    except ConfigurationError as e:
        st.error(str(e))
        st.stop()

    log.info("app_started", version=__version__)

    render_header()

    tab_search, tab_calc = st.tabs(["🏠 Properties", "🧮 Calculators"])
    with tab_search:
        try:
            render_search_page()
        except CatalogLoadError as e:
            log.error("catalog_load_failed", error=str(e))
            st.error(f"Could not load listings: {e}")
    with tab_calc:
        render_calculators_page()


if __name__ == "__main__":
    main()
