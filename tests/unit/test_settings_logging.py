"""Unit tests for settings, exceptions and logging setup."""

import pytest
from pydantic import ValidationError

from procv.core.exceptions import InvalidParameterError, ProCVError
from procv.core.logging import configure_logging, get_logger
from procv.core.settings import AppSettings


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.eur_to_cve_rate == 110.265
        assert settings.default_loan_term_years == 25
        assert settings.catalog_path is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PROCV_EUR_TO_CVE_RATE", "110.5")
        monkeypatch.setenv("PROCV_LOG_LEVEL", "DEBUG")
        settings = AppSettings(_env_file=None)
        assert settings.eur_to_cve_rate == 110.5
        assert settings.log_level == "DEBUG"

    def test_rate_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("PROCV_EUR_TO_CVE_RATE", "0")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_invalid_parameter_message(self):
        err = InvalidParameterError("bedrooms", -1, "must be >= 0")
        assert str(err) == "Invalid parameter 'bedrooms': -1 - must be >= 0"
        assert isinstance(err, ProCVError)

    def test_invalid_parameter_without_reason(self):
        assert str(InvalidParameterError("island", "Atlantis")) == "Invalid parameter 'island': Atlantis"


class TestLogging:
    """Tests for structlog configuration."""

    def test_get_logger_binds_name(self):
        log = get_logger("procv.test")
        assert log._context["logger_name"] == "procv.test"
        log.debug("test_event", value=1)

    def test_configure_is_idempotent(self):
        first = configure_logging(level="DEBUG")
        second = configure_logging(level="ERROR")
        assert type(first) is type(second)


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_invalid_env_raises_configuration_error(self, monkeypatch):
        from procv.core.exceptions import ConfigurationError
        from procv.core.settings import get_settings

        monkeypatch.setenv("PROCV_DEFAULT_LOAN_TERM_YEARS", "99")
        get_settings.cache_clear()
        try:
            with pytest.raises(ConfigurationError):
                get_settings()
        finally:
            get_settings.cache_clear()
