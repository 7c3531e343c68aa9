"""Tests for ULID error types and structured error normalization."""

from __future__ import annotations

from packages.ulid_shared.errors import (
    EntropyUnavailable,
    ErrorCategory,
    InvalidLength,
    InvalidTimestamp,
    InvalidULID,
    UlidError,
    codes,
    exception_to_error,
)


def test_error_hierarchy() -> None:
    """Input failures are ValueErrors; length failures are malformed ULIDs."""
    assert issubclass(InvalidLength, InvalidULID)
    assert issubclass(InvalidULID, UlidError)
    assert issubclass(InvalidTimestamp, UlidError)
    assert issubclass(UlidError, ValueError)
    assert not issubclass(EntropyUnavailable, ValueError)


def test_codec_errors_keep_their_codes() -> None:
    """Each codec exception maps to its own validation code."""
    length = exception_to_error(InvalidLength("bad length"))
    timestamp = exception_to_error(InvalidTimestamp("bad timestamp"))
    malformed = exception_to_error(InvalidULID("bad input"))

    assert (length.code, length.category) == (codes.INVALID_LENGTH, ErrorCategory.VALIDATION)
    assert timestamp.code == codes.INVALID_TIMESTAMP
    assert malformed.code == codes.INVALID_ULID
    assert length.message == "bad length"
    assert length.metadata == {"exception_type": "InvalidLength"}
    assert not length.retryable


def test_entropy_failure_is_dependency_error() -> None:
    """Random-source failures are reported as a dependency problem."""
    detail = exception_to_error(EntropyUnavailable("secure random source unavailable"))

    assert detail.category == ErrorCategory.DEPENDENCY
    assert detail.code == codes.ENTROPY_UNAVAILABLE


def test_other_exceptions_fall_back_to_generic_codes() -> None:
    """Non-codec exceptions keep conservative generic mappings."""
    assert exception_to_error(ValueError("nope")).code == codes.INVALID_ARGUMENT
    internal = exception_to_error(RuntimeError())

    assert internal.category == ErrorCategory.INTERNAL
    assert internal.code == codes.UNEXPECTED_EXCEPTION
    assert internal.message == "unexpected exception"
