"""Core module - configuration, errors, logging and the value model."""

from datacheck.core.config import Settings, get_settings
from datacheck.core.errors import ConfigurationError, SuiteLoadError, ValidationFailedError
from datacheck.core.models.base import InferredType, ValueType, classify_value

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ConfigurationError",
    "SuiteLoadError",
    "ValidationFailedError",
    # Value model
    "InferredType",
    "ValueType",
    "classify_value",
]
