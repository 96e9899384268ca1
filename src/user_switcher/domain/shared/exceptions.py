"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
whole package. All domain exceptions inherit from DomainException so that
callers can handle them in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for programmatic handling."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_RESOURCE_ID = "INVALID_RESOURCE_ID"

    # Not Found Errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Programming Errors
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
    ILLEGAL_STATE = "ILLEGAL_STATE"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context (for logs, never shown to end users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidResourceIdError(ValidationError):
    """Raised when a resource identifier is malformed."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid resource id {value!r}: {reason}",
            ErrorCode.INVALID_RESOURCE_ID,
            {"value": value},
        )


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ResourceNotFoundError(EntityNotFoundError):
    """Raised when a resource id has no value in the resource system."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details)


class InvariantViolation(DomainException):  # NOQA: N818
    """Raised when a caller breaks a precondition.

    Signals a logic error at the call site, not a runtime fault.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.INVARIANT_VIOLATION, details)


class IllegalStateError(DomainException):
    """Raised when a branch that should be unreachable is reached."""

    def __init__(
        self,
        message: str = "This should never happen!",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.ILLEGAL_STATE, details)
