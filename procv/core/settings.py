"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from procv.core.exceptions import ConfigurationError


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Currency (display-only conversion, not a live rate feed)
    eur_to_cve_rate: float = Field(default=110.265, gt=0, description="CVE per EUR")

    # Calculator defaults
    default_interest_rate_pct: float = Field(default=4.5, ge=0, le=30)
    default_loan_term_years: int = Field(default=25, ge=1, le=40)

    # Search
    search_delay_seconds: float = Field(default=0.5, ge=0, description="Simulated search latency")
    catalog_path: Optional[str] = Field(default=None, description="JSON catalog to load instead of the sample")

    # Export
    export_dir: str = Field(default="results", description="Directory for exported results")

    model_config = {
        "env_prefix": "PROCV_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings.

    Raises:
        ConfigurationError: If a PROCV_ variable does not validate
    """
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e
