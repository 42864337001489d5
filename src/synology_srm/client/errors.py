"""Custom exceptions for the synology-srm HTTP client."""

from __future__ import annotations

from dataclasses import dataclass


class SRMError(Exception):
    """Base exception for all synology-srm errors."""


class SRMConfigError(SRMError):
    """Raised when the client configuration is missing or malformed."""


class SRMValidationError(SRMError):
    """Raised when an argument is rejected locally, before any request is sent.

    Attributes:
        field: Name of the offending argument or configuration key.
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Invalid {field}")


class SRMAuthError(SRMError):
    """Raised when credentials are missing or the router returns no session."""


class SRMNotFoundError(SRMError):
    """Raised when a requested entity does not exist on the router."""


class SRMRequestError(SRMError):
    """Raised when a network-level error occurs (connection refused, reset, DNS)."""

    def __init__(self, url: str, cause: Exception, message: str | None = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message or f"Request to {url!r} failed: {cause}")


class SRMTimeoutError(SRMRequestError):
    """Raised when the router does not answer within the configured timeout."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(url, cause, message="Request timeout")


class SRMResponseError(SRMError):
    """Raised when the router returns an HTTP status outside 200-299."""

    def __init__(self, status_code: int, reason: str | None, url: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"{status_code} {reason}")


class SRMParseError(SRMError):
    """Raised when the response body is not a valid SRM JSON envelope."""


@dataclass
class SRMApiError(SRMError):
    """Raised when the router answers with ``success: false``.

    Attributes:
        code: Vendor error code, or ``None`` when the envelope carries none.
        message: Human-readable message resolved from the error-code table.
        endpoint: API path the request was sent to.
        payload: The raw ``error`` object from the envelope, if any.
    """

    code: int | None
    message: str
    endpoint: str
    payload: dict[str, object] | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
