"""
Core exception hierarchy for ClipDeck.

Provides standardized exception types with categorization.
All components should use these exceptions instead of generic Exception.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class ClipDeckError(Exception):
    """Base exception for all ClipDeck errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RetryableError(ClipDeckError):
    """
    Transient errors that a later attempt may not hit.

    ClipDeck never retries on its own; callers decide.
    """

    pass


class PermanentError(ClipDeckError):
    """
    Errors that won't be fixed by trying again.

    Examples: Invalid input, upstream rejecting the query.
    """

    pass


# =============================================================================
# Validation Errors
# =============================================================================


class SearchValidationError(PermanentError):
    """Raised when search input is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        details = {"field": field} if field else None
        super().__init__(message, details)


# =============================================================================
# Upstream Errors
# =============================================================================


class UpstreamError(ClipDeckError):
    """Base exception for upstream search provider errors."""

    def __init__(
        self,
        provider: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.provider = provider
        super().__init__(f"[{provider}] {message}", details)


class UpstreamUnreachableError(UpstreamError, RetryableError):
    """Raised when the upstream answers with a non-success HTTP status."""

    def __init__(self, provider: str, status_code: int):
        self.status_code = status_code
        super().__init__(
            provider,
            f"Upstream responded with HTTP {status_code}",
            {"status_code": status_code},
        )


class UpstreamRejectedError(UpstreamError, PermanentError):
    """Raised when the upstream is reachable but reports a logical error."""

    def __init__(self, provider: str, upstream_message: Optional[str] = None, code: Any = None):
        self.upstream_message = upstream_message
        self.code = code
        super().__init__(
            provider,
            upstream_message or "Upstream rejected the request",
            {"code": code},
        )


# =============================================================================
# Client Errors
# =============================================================================


class ProxyRequestError(RetryableError):
    """Raised by the proxy client when the search route fails or answers garbage."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        details = {"status_code": status_code} if status_code is not None else None
        super().__init__(message, details)


# =============================================================================
# Storage Errors
# =============================================================================


class StorageError(ClipDeckError):
    """Raised when a blob store slot cannot be read or written."""

    def __init__(self, slot: str, message: str):
        self.slot = slot
        super().__init__(f"[{slot}] {message}", {"slot": slot})


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PermanentError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)
