"""Custom exception classes for the fan club API.

Each exception maps to an error code in errors.py and carries the HTTP
status it should be returned with. Field-scoped problems travel in
``field_errors`` keyed by the camelCase name the client sent.
"""

from typing import Any


class FanClubError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "REM_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return
        field_errors: Mapping of field name to user-facing messages
    """

    default_code = "SYS_001"
    default_status = 500

    def __init__(
        self,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        http_status: int | None = None,
        field_errors: dict[str, list[str]] | None = None,
    ):
        """Initialize the exception.

        Args:
            error_code: Error code from errors.py (class default when omitted)
            details: Additional error context (not shown to users)
            http_status: HTTP status code (class default when omitted)
            field_errors: Field-scoped messages shown to the user
        """
        self.error_code = error_code or self.default_code
        self.details = details or {}
        self.http_status = http_status or self.default_status
        self.field_errors = field_errors or {}
        super().__init__(self.error_code)


class InvalidInputError(FanClubError):
    """Raised when request data is missing, malformed or breaks a business rule."""

    default_code = "VAL_001"
    default_status = 400


class UnauthenticatedError(FanClubError):
    """Raised when credentials are wrong or no session can be resolved."""

    default_code = "AUTH_002"
    default_status = 401


class NotFoundError(FanClubError):
    """Raised when a resource is absent or not owned by the caller.

    Both cases share this error so ownership is never revealed.
    """

    default_code = "REM_001"
    default_status = 404


class ConflictError(FanClubError):
    """Raised when a uniqueness rule would be violated."""

    default_code = "REM_002"
    default_status = 409


class UpstreamTimeoutError(FanClubError):
    """Raised when the football data provider does not answer in time."""

    default_code = "EXT_001"
    default_status = 504


class UnavailableError(FanClubError):
    """Raised when the football data provider or the store fails."""

    default_code = "EXT_002"
    default_status = 502


class UpstreamError(FanClubError):
    """Raised when the football data provider answers with a meaningful error status.

    The upstream status (403, 404, 429) is passed through to the client.
    """

    default_code = "EXT_002"
    default_status = 502
