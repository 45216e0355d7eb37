"""Calculator result models.

Results are recomputed in full from the current inputs and never updated
in place. Monetary values are unrounded; round at display time.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class MortgageResult(BaseModel):
    """Amortized mortgage for a given price, deposit, rate and term."""

    loan_amount: float = Field(default=0.0, description="Principal borrowed in €")
    monthly_payment: float = Field(default=0.0, description="Constant monthly payment in €")
    total_payment: float = Field(default=0.0, description="Sum of all payments in €")
    total_interest: float = Field(default=0.0, description="Total interest paid in €")
    down_payment_pct: float = Field(default=0.0, description="Deposit as % of price")

    model_config = {
        "frozen": True,
    }


class AffordabilityResult(BaseModel):
    """Maximum affordable purchase under the debt-to-income cap."""

    available_income: float = Field(default=0.0, description="Monthly income minus debts in €")
    max_monthly_payment: float = Field(default=0.0, description="Payment ceiling in €")
    max_loan_amount: float = Field(default=0.0, description="Largest serviceable loan in €")
    max_property_price: float = Field(default=0.0, description="Loan plus deposit in €")
    debt_to_income_ratio: float = Field(default=0.0, description="Committed obligations as % of income")

    model_config = {
        "frozen": True,
    }


class BankOffer(BaseModel):
    """A lender's headline mortgage terms."""

    name: str
    annual_rate_pct: float = Field(..., ge=0)
    min_deposit_pct: float = Field(..., ge=0, le=100)

    model_config = {
        "frozen": True,
    }


class BankQuote(BaseModel):
    """A bank offer priced for one purchase."""

    offer: BankOffer
    monthly_payment: float
    total_interest: float
    eligible: bool = Field(..., description="Deposit meets the bank's minimum")

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def bank_name(self) -> str:
        """Name of the lender."""
        return self.offer.name
