"""Shared domain components.

This module exports the exception hierarchy used across the package.
"""

from user_switcher.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    IllegalStateError,
    InvalidResourceIdError,
    InvariantViolation,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "InvalidResourceIdError",
    "EntityNotFoundError",
    "ResourceNotFoundError",
    "InvariantViolation",
    "IllegalStateError",
]
