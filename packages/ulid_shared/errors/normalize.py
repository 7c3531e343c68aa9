"""Exception normalization into structured error details."""

from __future__ import annotations

from . import codes
from .exceptions import EntropyUnavailable, UlidError
from .factories import dependency_error, internal_error, validation_error
from .types import ErrorDetail


def exception_to_error(exc: Exception) -> ErrorDetail:
    """Normalize a Python exception into an ``ErrorDetail``.

    Codec exceptions keep their own code; other ``ValueError`` instances map to
    a generic invalid-argument detail and anything else is internal.
    """
    metadata = {"exception_type": type(exc).__name__}

    if isinstance(exc, UlidError):
        return validation_error(str(exc), code=exc.code, metadata=metadata)

    if isinstance(exc, EntropyUnavailable):
        return dependency_error(
            str(exc) or "secure random source unavailable",
            code=exc.code,
            metadata=metadata,
        )

    if isinstance(exc, ValueError):
        return validation_error(str(exc), code=codes.INVALID_ARGUMENT, metadata=metadata)

    return internal_error(
        str(exc) or "unexpected exception",
        code=codes.UNEXPECTED_EXCEPTION,
        metadata=metadata,
    )
