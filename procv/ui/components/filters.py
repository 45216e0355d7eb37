"""Filter components for property search."""

from __future__ import annotations

import asyncio
from typing import Any

import streamlit as st

from procv.application.services.search_session import PropertySearchSession
from procv.core.market_constants import ALL, ISLANDS
from procv.domain.models.filters import PropertyFilters, SortOrder
from procv.domain.models.property import Property, PropertyType

SORT_LABELS = {
    SortOrder.NEWEST: "Newest first",
    SortOrder.OLDEST: "Oldest first",
    SortOrder.PRICE_ASC: "Price: low to high",
    SortOrder.PRICE_DESC: "Price: high to low",
    SortOrder.SIZE_ASC: "Size: small to large",
    SortOrder.SIZE_DESC: "Size: large to small",
}


def _widget_key(field: str) -> str:
    return f"filter_{field}"


def get_island_options(catalog: tuple[Property, ...]) -> list[str]:
    """Known islands plus any the catalog adds, with 'all' first."""
    extra = sorted({p.island for p in catalog} - set(ISLANDS))
    return [ALL, *ISLANDS, *extra]


def _sync_widgets(filters: PropertyFilters) -> None:
    """Seed widget state from the session's filters."""
    for field, value in filters.model_dump().items():
        key = _widget_key(field)
        if key not in st.session_state:
            st.session_state[key] = value


def _on_change(session: PropertySearchSession, field: str) -> None:
    session.update_filter(field, st.session_state[_widget_key(field)])


def _on_clear(session: PropertySearchSession) -> None:
    session.clear_filters()
    for field in PropertyFilters.model_fields:
        st.session_state.pop(_widget_key(field), None)


def render_search_filters(session: PropertySearchSession) -> None:
    """Render filter controls bound to a search session.

    Args:
        session: The browser session's search session
    """
    _sync_widgets(session.filters)

    def bind(field: str) -> dict[str, Any]:
        return {"key": _widget_key(field), "on_change": _on_change, "args": (session, field)}

    st.text_input("Search", placeholder="Town, island or feature (e.g. 'Ocean View')", **bind("search_query"))

    c1, c2, c3 = st.columns(3)
    with c1:
        st.selectbox("Property type", [ALL, *(t.value for t in PropertyType)],
                     format_func=lambda v: v.title(), **bind("property_type"))
    with c2:
        st.selectbox("Island", get_island_options(session.catalog),
                     format_func=lambda v: "All islands" if v == ALL else v, **bind("island"))
    with c3:
        st.radio("Listing", ["all", "buy", "rent"], horizontal=True,
                 format_func=lambda v: v.title(), **bind("listing_type"))

    c4, c5, c6, c7 = st.columns(4)
    with c4:
        st.number_input("Min price (€)", min_value=0.0, step=10000.0, **bind("min_price"))
    with c5:
        st.number_input("Max price (€)", min_value=0.0, step=10000.0, **bind("max_price"))
    with c6:
        st.selectbox("Bedrooms", [0, 1, 2, 3, 4, 5],
                     format_func=lambda v: "Any" if v == 0 else f"{v}+", **bind("bedrooms"))
    with c7:
        st.selectbox("Bathrooms", [0, 1, 2, 3, 4],
                     format_func=lambda v: "Any" if v == 0 else f"{v}+", **bind("bathrooms"))

    st.selectbox("Sort by", list(SortOrder), format_func=lambda v: SORT_LABELS[v], **bind("sort_by"))

    b1, b2 = st.columns(2)
    with b1:
        if st.button("🔍 Search", type="primary", use_container_width=True):
            with st.spinner("Searching properties..."):
                asyncio.run(session.perform_search_async())
    with b2:
        st.button("Clear filters", on_click=_on_clear, args=(session,), use_container_width=True)
