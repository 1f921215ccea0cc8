"""
Core infrastructure modules for ClipDeck.

Provides common utilities used across the application:
- exceptions: Standardized exception hierarchy
- logging: structlog configuration
"""

from clipdeck.core.exceptions import (
    ClipDeckError,
    RetryableError,
    PermanentError,
    SearchValidationError,
    UpstreamError,
    UpstreamUnreachableError,
    UpstreamRejectedError,
    ProxyRequestError,
    StorageError,
    ConfigurationError,
)
from clipdeck.core.logging import configure_logging

__all__ = [
    # Exceptions
    "ClipDeckError",
    "RetryableError",
    "PermanentError",
    "SearchValidationError",
    "UpstreamError",
    "UpstreamUnreachableError",
    "UpstreamRejectedError",
    "ProxyRequestError",
    "StorageError",
    "ConfigurationError",
    # Logging
    "configure_logging",
]
