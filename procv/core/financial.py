"""Financial calculation functions.

Mortgage, affordability and amortization calculations for the listings
calculators. All functions are pure: degenerate input (non-positive
principal, rate or term) yields zero-valued output instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy_financial as npf
import pandas as pd

from procv.core.market_constants import CAPE_VERDE_BANKS, DEBT_TO_INCOME_CAP, MONEY_DECIMALS
from procv.domain.models.calculation import (
    AffordabilityResult,
    BankOffer,
    BankQuote,
    MortgageResult,
)

SCHEDULE_COLUMNS = [
    "month",
    "opening_balance",
    "interest",
    "principal",
    "payment",
    "closing_balance",
]


def monthly_rate(annual_rate_pct: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate."""
    return annual_rate_pct / 100.0 / 12.0


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_months: float,
) -> float:
    """Calculate the constant monthly payment of an amortized loan.

    Args:
        principal: Loan amount in €
        annual_rate_pct: Annual interest rate as percentage (e.g., 4.5 for 4.5%)
        duration_months: Loan term in months

    Returns:
        Monthly payment in €, or 0.0 when any input is non-positive
    """
    rate = monthly_rate(annual_rate_pct)
    if principal <= 0 or rate <= 0 or duration_months <= 0:
        return 0.0

    return float(-npf.pmt(rate, duration_months, principal))


def calculate_max_loan_amount(
    monthly_payment: float,
    annual_rate_pct: float,
    duration_months: float,
) -> float:
    """Invert the amortization formula: largest loan a payment can service.

    Args:
        monthly_payment: Payment ceiling in €
        annual_rate_pct: Annual interest rate %
        duration_months: Loan term in months

    Returns:
        Loan amount in €, or 0.0 when any input is non-positive
    """
    rate = monthly_rate(annual_rate_pct)
    if monthly_payment <= 0 or rate <= 0 or duration_months <= 0:
        return 0.0

    return float(npf.pv(rate, duration_months, -monthly_payment))


def calculate_mortgage(
    property_price: float,
    deposit: float,
    annual_rate_pct: float,
    term_years: float,
) -> MortgageResult:
    """Price a mortgage for a purchase.

    Args:
        property_price: Purchase price in €
        deposit: Down payment in €
        annual_rate_pct: Annual interest rate %
        term_years: Loan term in years

    Returns:
        MortgageResult. Every monetary field is zero when the principal,
        rate or term is non-positive.
    """
    down_payment_pct = deposit / property_price * 100.0 if property_price > 0 else 0.0

    principal = property_price - deposit
    n_payments = term_years * 12
    if principal <= 0 or monthly_rate(annual_rate_pct) <= 0 or n_payments <= 0:
        return MortgageResult(down_payment_pct=down_payment_pct)

    payment = calculate_monthly_payment(principal, annual_rate_pct, n_payments)
    total_payment = payment * n_payments

    return MortgageResult(
        loan_amount=principal,
        monthly_payment=payment,
        total_payment=total_payment,
        total_interest=total_payment - principal,
        down_payment_pct=down_payment_pct,
    )


def calculate_affordability(
    monthly_income: float,
    monthly_debts: float,
    deposit: float,
    annual_rate_pct: float,
    term_years: float,
) -> AffordabilityResult:
    """Estimate the most expensive property a household can finance.

    The payment ceiling is DEBT_TO_INCOME_CAP of income left after existing
    debts; the loan is the amount that ceiling amortizes over the term.

    Args:
        monthly_income: Gross monthly income in €
        monthly_debts: Existing monthly debt service in €
        deposit: Available down payment in €
        annual_rate_pct: Annual interest rate %
        term_years: Loan term in years

    Returns:
        AffordabilityResult
    """
    available_income = monthly_income - monthly_debts
    max_monthly_payment = max(available_income, 0.0) * DEBT_TO_INCOME_CAP
    max_loan_amount = calculate_max_loan_amount(max_monthly_payment, annual_rate_pct, term_years * 12)

    if monthly_income > 0:
        dti = (monthly_debts + max_monthly_payment) / monthly_income * 100.0
    else:
        dti = 0.0

    return AffordabilityResult(
        available_income=available_income,
        max_monthly_payment=max_monthly_payment,
        max_loan_amount=max_loan_amount,
        max_property_price=max_loan_amount + deposit,
        debt_to_income_ratio=dti,
    )


def generate_amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> pd.DataFrame:
    """Generate a month-by-month amortization schedule.

    Args:
        principal: Loan amount in €
        annual_rate_pct: Annual interest rate %
        duration_months: Loan term in months

    Returns:
        DataFrame with one row per month and SCHEDULE_COLUMNS. Empty (with
        the same columns) on degenerate input.
    """
    payment = calculate_monthly_payment(principal, annual_rate_pct, duration_months)
    if payment == 0.0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    rate = monthly_rate(annual_rate_pct)
    rows = []
    balance = principal

    for month in range(1, int(duration_months) + 1):
        interest = balance * rate
        principal_payment = payment - interest
        closing = max(0.0, balance - principal_payment)
        rows.append({
            "month": month,
            "opening_balance": balance,
            "interest": interest,
            "principal": principal_payment,
            "payment": payment,
            "closing_balance": closing,
        })
        balance = closing

    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def summarize_schedule_by_year(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly schedule into loan years.

    Returns:
        DataFrame with one row per loan year (1..N): interest, principal and
        payment sums, and the closing balance of the year.
    """
    if schedule.empty:
        return pd.DataFrame(columns=["year", "interest", "principal", "payment", "closing_balance"])

    years = ((schedule["month"] - 1) // 12 + 1).rename("year")
    grouped = schedule.groupby(years)
    summary = grouped[["interest", "principal", "payment"]].sum()
    summary["closing_balance"] = grouped["closing_balance"].last()
    return summary.reset_index()


def default_bank_offers() -> list[BankOffer]:
    """Reference Cape Verde lenders."""
    return [BankOffer(**terms) for terms in CAPE_VERDE_BANKS]


def compare_bank_offers(
    property_price: float,
    deposit: float,
    term_years: float,
    offers: Iterable[BankOffer] | None = None,
) -> list[BankQuote]:
    """Price the same purchase against several lenders.

    Args:
        property_price: Purchase price in €
        deposit: Down payment in €
        term_years: Loan term in years
        offers: Lender terms to compare, defaults to CAPE_VERDE_BANKS

    Returns:
        One BankQuote per offer, cheapest monthly payment first
    """
    if offers is None:
        offers = default_bank_offers()

    quotes = []
    for offer in offers:
        mortgage = calculate_mortgage(property_price, deposit, offer.annual_rate_pct, term_years)
        quotes.append(BankQuote(
            offer=offer,
            monthly_payment=mortgage.monthly_payment,
            total_interest=mortgage.total_interest,
            eligible=mortgage.down_payment_pct >= offer.min_deposit_pct,
        ))
    return sorted(quotes, key=lambda q: q.monthly_payment)


def convert_currency(amount: float, rate: float) -> float:
    """Apply a fixed display exchange rate."""
    return amount * rate


def round_money(value: float) -> float:
    """Round to the minor currency unit."""
    return round(value, MONEY_DECIMALS)
