"""Public error API for ULID handling."""

from . import codes
from .exceptions import (
    EntropyUnavailable,
    InvalidLength,
    InvalidTimestamp,
    InvalidULID,
    UlidError,
)
from .factories import dependency_error, internal_error, validation_error
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail

__all__ = [
    "EntropyUnavailable",
    "ErrorCategory",
    "ErrorDetail",
    "InvalidLength",
    "InvalidTimestamp",
    "InvalidULID",
    "UlidError",
    "codes",
    "dependency_error",
    "exception_to_error",
    "internal_error",
    "validation_error",
]
