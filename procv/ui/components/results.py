"""Listing display components for results rendering."""

from __future__ import annotations

import streamlit as st

from procv.application.services.search_session import SearchSnapshot
from procv.domain.models.property import Property
from procv.domain.search.statistics import summarize
from procv.ui.helpers import format_cve, format_euro, format_listing_price


def render_property_card(prop: Property) -> None:
    """Render a single listing card."""
    with st.container(border=True):
        if prop.images:
            st.image(prop.images[0], use_container_width=True)
        badge = " ⭐ Featured" if prop.is_featured else ""
        st.markdown(f"**{prop.title}**{badge}")
        st.caption(f"📍 {prop.location}")
        st.markdown(f"### {format_listing_price(prop.price, prop.listing_type.value)}")
        if prop.listing_type.value == "buy":
            st.caption(format_cve(prop.price))
        st.caption(
            f"🛏 {prop.bedrooms} · 🛁 {prop.bathrooms} · 📐 {prop.total_area:.0f} m² · "
            f"{prop.property_type.value.title()}"
        )
        if prop.features:
            st.caption(" · ".join(prop.features))


def render_summary(snapshot: SearchSnapshot) -> None:
    """Render headline metrics for the current results."""
    summary = summarize(snapshot.results)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Results", summary.count)
    c2.metric("Average price", format_euro(summary.average_price))
    c3.metric("Median price", format_euro(summary.median_price))
    c4.metric("Avg. price / m²", format_euro(summary.average_price_per_sqm))


def render_no_results() -> None:
    """Render empty state when a search matched nothing."""
    st.info(
        "🔍 No properties match your search.\n\n"
        "Try adjusting your criteria:\n"
        "- Widen the price range\n"
        "- Select all islands or property types\n"
        "- Lower the bedroom or bathroom minimum"
    )


def render_results(snapshot: SearchSnapshot, columns: int = 3) -> None:
    """Render the result grid.

    Distinguishes "not searched yet" from "searched, no matches".
    """
    if snapshot.is_loading:
        st.caption("Searching...")
        return

    if snapshot.search_performed:
        st.subheader(f"{snapshot.results_count} properties found")
        if snapshot.results_count == 0:
            render_no_results()
            return
    else:
        st.subheader(f"All properties ({snapshot.results_count})")

    render_summary(snapshot)

    cols = st.columns(columns)
    for i, prop in enumerate(snapshot.results):
        with cols[i % columns]:
            render_property_card(prop)
