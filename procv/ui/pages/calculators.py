"""Calculators page rendering."""

from __future__ import annotations

import streamlit as st

from procv.core.settings import get_settings
from procv.ui.components.calculators import render_affordability_calculator, render_mortgage_calculator


def render_calculators_page() -> None:
    """Compose the calculator tabs."""
    tab_mortgage, tab_afford = st.tabs(["🏦 Mortgage", "💶 Affordability"])
    with tab_mortgage:
        render_mortgage_calculator()
    with tab_afford:
        render_affordability_calculator()

    st.caption(
        f"Exchange rate: 1 EUR = {get_settings().eur_to_cve_rate} CVE (approximate, for display only). "
        "Figures are estimates, not a loan offer."
    )
