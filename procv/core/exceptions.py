"""Custom exceptions for procv.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class ProCVError(Exception):
    """Base exception for all procv errors."""
    pass


# --- Data Errors ---

class CatalogLoadError(ProCVError):
    """Failed to load or parse the property catalog."""
    pass


class ExportError(ProCVError):
    """Failed to write exported results."""
    pass


# --- Parameter Errors ---

class InvalidParameterError(ProCVError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Notification Errors ---

class NotificationError(ProCVError):
    """A notification could not be dispatched."""
    pass


# --- Configuration Errors ---

class ConfigurationError(ProCVError):
    """Error in application configuration."""
    pass
