"""Search page rendering."""

from __future__ import annotations

import streamlit as st

from procv.application.services.exporter import ResultExporter
from procv.application.services.search_session import SearchSnapshot
from procv.core.exceptions import ExportError
from procv.core.logging import get_logger
from procv.core.settings import get_settings
from procv.ui.components.filters import render_search_filters
from procv.ui.components.results import render_results
from procv.ui.state import SessionManager

log = get_logger(__name__)


def render_export(snapshot: SearchSnapshot) -> None:
    """Offer the current results as a CSV download and a saved JSON file."""
    if snapshot.results_count == 0:
        return

    exporter = ResultExporter(get_settings().export_dir)
    csv = exporter.to_dataframe(snapshot.results).to_csv(index=False)
    c1, c2 = st.columns(2)
    with c1:
        st.download_button("⬇️ Download CSV", csv, file_name="properties.csv", mime="text/csv")
    with c2:
        if st.button("💾 Save results"):
            try:
                path = exporter.save_results(
                    snapshot.results,
                    metadata={"filters": snapshot.filters.model_dump(mode="json", by_alias=True)},
                )
                st.success(f"Saved to {path}")
            except ExportError as e:
                st.error(str(e))


def render_search_page() -> None:
    """Compose filters, results and export for the search tab."""
    session = SessionManager.get_search_session()

    with st.expander("🔎 Filters", expanded=True):
        render_search_filters(session)

    snapshot = session.snapshot()
    render_results(snapshot)
    render_export(snapshot)
