"""Market constants for the Cape Verde listings.

Policy constants and reference data used by the calculators and filters.
Values here are business policy, not user preferences; user-tunable
defaults live in settings.
"""

from __future__ import annotations

# Share of available monthly income that may go to a mortgage payment
DEBT_TO_INCOME_CAP = 0.35

# Minor currency unit (cents)
MONEY_DECIMALS = 2

# Filter defaults
DEFAULT_MIN_PRICE = 0.0
DEFAULT_MAX_PRICE = 2_000_000.0
ALL = "all"

ISLANDS: tuple[str, ...] = (
    "Sal",
    "Boa Vista",
    "Santiago",
    "São Vicente",
    "Santo Antão",
    "Fogo",
    "Maio",
    "São Nicolau",
    "Brava",
)

# Indicative retail mortgage offers
CAPE_VERDE_BANKS: tuple[dict, ...] = (
    {"name": "Banco Comercial do Atlântico", "annual_rate_pct": 6.5, "min_deposit_pct": 20.0},
    {"name": "Caixa Económica de Cabo Verde", "annual_rate_pct": 7.0, "min_deposit_pct": 25.0},
    {"name": "Banco Cabo-verdiano de Negócios", "annual_rate_pct": 6.8, "min_deposit_pct": 20.0},
    {"name": "Banco Interatlântico", "annual_rate_pct": 6.9, "min_deposit_pct": 30.0},
    {"name": "Ecobank Cabo Verde", "annual_rate_pct": 7.2, "min_deposit_pct": 25.0},
)
