"""Exceptions - the error hierarchy shared by every trellokit module.

Validation failures are raised before any network call is made. Transport
and service failures are raised by the REST client and delivered to callers
unchanged through the request processor.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class TrelloError(Exception):
    """Base exception for all trellokit errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigError(TrelloError):
    """Raised when the configuration file cannot be read or is invalid."""


# =============================================================================
# Validation
# =============================================================================


class TrelloValidationError(TrelloError):
    """Raised when a value fails one or more validation rules."""

    def __init__(self, value: Any, errors: list[str]):
        self.value = value
        self.errors = list(errors)
        super().__init__(
            f"Invalid value {value!r}",
            "; ".join(self.errors) if self.errors else None,
        )


# =============================================================================
# Request / Transport Errors
# =============================================================================


class TrelloRequestError(TrelloError):
    """Base exception for failures while talking to the Trello service."""


class TrelloTimeoutError(TrelloRequestError):
    """Raised when a request to the service times out."""

    def __init__(self, url: str, timeout: float | None):
        self.url = url
        self.timeout = timeout
        super().__init__(
            f"Request to {url} timed out",
            f"No response after {timeout} seconds." if timeout else None,
        )


class TrelloConnectionError(TrelloRequestError):
    """Raised when the service cannot be reached."""

    def __init__(self, url: str, original_error: Exception):
        self.url = url
        self.original_error = original_error
        super().__init__(
            f"Failed to connect to {url}",
            f"Network error: {original_error}. Check your internet connection.",
        )


class TrelloInteractionError(TrelloRequestError):
    """Raised when the service answers with an HTTP error status."""

    STATUS_MESSAGES = {
        400: "Bad request - the service rejected the parameters",
        401: "Unauthorized - the app key or user token is invalid",
        403: "Forbidden - the token does not grant access to this resource",
        404: "Not found - the resource does not exist or is not visible",
        429: "Rate limited - too many requests, try again later",
        500: "Server error - the service is experiencing issues",
        502: "Bad gateway - the service may be temporarily unavailable",
        503: "Service unavailable - the service is temporarily unavailable",
    }

    def __init__(
        self,
        status_code: int,
        method: str,
        resource: str,
        response_body: str | None = None,
    ):
        self.status_code = status_code
        self.method = method
        self.resource = resource
        self.response_body = response_body
        description = self.STATUS_MESSAGES.get(status_code, f"HTTP error {status_code}")
        super().__init__(f"{method} {resource} failed: {description}", response_body or None)


class RequestProcessorShutDownError(TrelloRequestError):
    """Raised when a request is submitted after the processor was shut down."""

    def __init__(self) -> None:
        super().__init__("The request processor has been shut down")


# =============================================================================
# Entity State
# =============================================================================


class ObjectDeletedError(TrelloError):
    """Raised when modifying an entity that was deleted through this library."""

    def __init__(self, entity_type: str, entity_id: str | None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} {entity_id} has been deleted and cannot be modified")
