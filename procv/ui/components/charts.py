"""Chart components for visualization."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from procv.domain.models.calculation import MortgageResult


def render_amortization_chart(yearly: pd.DataFrame, key: str = "amort") -> None:
    """Render yearly principal vs interest with the remaining balance.

    Args:
        yearly: Output of summarize_schedule_by_year
        key: Unique key for the chart element
    """
    if yearly is None or yearly.empty:
        st.warning("No amortization data for these inputs.")
        return

    fig = go.Figure()
    fig.add_trace(go.Bar(x=yearly["year"], y=yearly["principal"], name="Principal", marker_color="#17a2b8"))
    fig.add_trace(go.Bar(x=yearly["year"], y=yearly["interest"], name="Interest", marker_color="#ffc107"))
    fig.add_trace(go.Scatter(
        x=yearly["year"],
        y=yearly["closing_balance"],
        name="Remaining balance",
        line=dict(color="#dc3545", width=3),
        mode="lines",
        yaxis="y2",
    ))
    fig.update_layout(
        title="Loan Amortization by Year",
        barmode="stack",
        xaxis_title="Year",
        yaxis_title="Paid (€)",
        yaxis2=dict(title="Balance (€)", overlaying="y", side="right"),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    st.plotly_chart(fig, use_container_width=True, key=f"amortization_{key}")


def render_cost_breakdown_chart(result: MortgageResult, key: str = "cost") -> None:
    """Render principal vs total interest as a donut."""
    if result.total_payment <= 0:
        return

    df = pd.DataFrame({
        "Component": ["Principal", "Interest"],
        "Amount": [result.loan_amount, result.total_interest],
    })
    fig = px.pie(
        df,
        names="Component",
        values="Amount",
        hole=0.5,
        title="Total Cost of the Loan",
        color="Component",
        color_discrete_map={"Principal": "#17a2b8", "Interest": "#ffc107"},
    )
    st.plotly_chart(fig, use_container_width=True, key=f"cost_breakdown_{key}")
