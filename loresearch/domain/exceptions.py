"""Domain exceptions for loresearch.

Defines domain-level exceptions independent of infrastructure concerns.
The search core itself raises none of these for ordinary input: a blank
query is an empty result and a malformed attribute is a non-match. The
presentation layer maps these exceptions to HTTP responses in the
exception handlers.
"""

from typing import Any


class LoreSearchException(Exception):
    """Base exception for all loresearch errors.

    All custom exceptions should inherit from this class so handlers can
    render a consistent error body. Presentation layer maps these to HTTP
    responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, path).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the failure body sent to clients (`success` is always False)."""
        return {
            "success": False,
            "error": self.message,
            "errorCode": self.error_code,
            "details": self.details,
        }


class ValidationException(LoreSearchException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)
