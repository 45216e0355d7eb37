"""Core settings, logging and financial engines."""

from .exceptions import (
    CatalogLoadError,
    ConfigurationError,
    ExportError,
    InvalidParameterError,
    NotificationError,
    ProCVError,
)
from .financial import (
    calculate_affordability,
    calculate_monthly_payment,
    calculate_mortgage,
    compare_bank_offers,
    generate_amortization_schedule,
)

__all__ = [
    "calculate_monthly_payment",
    "calculate_mortgage",
    "calculate_affordability",
    "compare_bank_offers",
    "generate_amortization_schedule",
    # Exceptions
    "ProCVError",
    "CatalogLoadError",
    "ConfigurationError",
    "ExportError",
    "InvalidParameterError",
    "NotificationError",
]
