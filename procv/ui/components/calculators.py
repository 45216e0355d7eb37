"""Calculator components: mortgage, affordability and bank comparison."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from procv.core.financial import (
    calculate_affordability,
    calculate_mortgage,
    compare_bank_offers,
    generate_amortization_schedule,
    summarize_schedule_by_year,
)
from procv.core.market_constants import DEBT_TO_INCOME_CAP
from procv.ui.components.charts import render_amortization_chart, render_cost_breakdown_chart
from procv.ui.helpers import format_cve, format_euro, format_pct


def render_mortgage_calculator() -> None:
    """Render the mortgage calculator; results recompute on every input change."""
    left, right = st.columns(2)
    with left:
        st.markdown("### Mortgage Calculator")
        price = st.number_input("Property price (€)", min_value=0.0, step=5000.0, key="mortgage_price")
        deposit = st.number_input("Deposit (€)", min_value=0.0, step=5000.0, key="mortgage_deposit")
        rate = st.number_input("Interest rate (%)", min_value=0.0, max_value=30.0, step=0.1, key="mortgage_rate")
        term = st.slider("Loan term (years)", 5, 40, key="mortgage_term")

    result = calculate_mortgage(price, deposit, rate, term)

    with right:
        st.markdown("### Your results")
        st.metric("Monthly payment", format_euro(result.monthly_payment, 2))
        st.caption(format_cve(result.monthly_payment))
        c1, c2 = st.columns(2)
        c1.metric("Loan amount", format_euro(result.loan_amount))
        c2.metric("Deposit", format_pct(result.down_payment_pct))
        c3, c4 = st.columns(2)
        c3.metric("Total interest", format_euro(result.total_interest))
        c4.metric("Total repayable", format_euro(result.total_payment))

    if result.monthly_payment > 0:
        schedule = generate_amortization_schedule(result.loan_amount, rate, int(term * 12))
        c_chart, c_pie = st.columns([2, 1])
        with c_chart:
            render_amortization_chart(summarize_schedule_by_year(schedule), key="mortgage")
        with c_pie:
            render_cost_breakdown_chart(result, key="mortgage")

    render_bank_comparison(price, deposit, term)


def render_bank_comparison(price: float, deposit: float, term: int) -> None:
    """Render the same purchase priced by each Cape Verde lender."""
    quotes = compare_bank_offers(price, deposit, term)
    if not quotes or quotes[0].monthly_payment <= 0:
        return

    st.markdown("#### Cape Verde bank comparison")
    df = pd.DataFrame([
        {
            "Bank": q.bank_name,
            "Rate": format_pct(q.offer.annual_rate_pct),
            "Min. deposit": format_pct(q.offer.min_deposit_pct, 0),
            "Monthly": format_euro(q.monthly_payment, 2),
            "Total interest": format_euro(q.total_interest),
            "Eligible": "✅" if q.eligible else "❌",
        }
        for q in quotes
    ])
    st.dataframe(df, hide_index=True, use_container_width=True)


def render_affordability_calculator() -> None:
    """Render the affordability calculator."""
    left, right = st.columns(2)
    with left:
        st.markdown("### Affordability Calculator")
        income = st.number_input("Monthly income (€)", min_value=0.0, step=100.0, key="afford_income")
        debts = st.number_input("Monthly debts (€)", min_value=0.0, step=50.0, key="afford_debts")
        deposit = st.number_input("Available deposit (€)", min_value=0.0, step=5000.0, key="afford_deposit")
        rate = st.number_input("Interest rate (%)", min_value=0.0, max_value=30.0, step=0.1, key="afford_rate")
        term = st.slider("Loan term (years)", 5, 40, key="afford_term")

    result = calculate_affordability(income, debts, deposit, rate, term)

    with right:
        st.markdown("### What you can afford")
        st.metric("Maximum property price", format_euro(result.max_property_price))
        st.caption(format_cve(result.max_property_price))
        c1, c2 = st.columns(2)
        c1.metric("Maximum loan", format_euro(result.max_loan_amount))
        c2.metric("Maximum monthly payment", format_euro(result.max_monthly_payment, 2))
        st.metric("Debt-to-income ratio", format_pct(result.debt_to_income_ratio))
        st.caption(
            f"Lenders typically cap mortgage payments at {DEBT_TO_INCOME_CAP:.0%} "
            "of income left after existing debts."
        )
