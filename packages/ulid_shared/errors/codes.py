"""Stable error code constants for ULID handling.

Codec-specific codes sit beside the generic ones so callers outside this
package can branch on one machine-readable string per failure kind.
"""

# Codec input
INVALID_ULID = "INVALID_ULID"
INVALID_LENGTH = "INVALID_LENGTH"
INVALID_TIMESTAMP = "INVALID_TIMESTAMP"

# Entropy
ENTROPY_UNAVAILABLE = "ENTROPY_UNAVAILABLE"

# Generic validation
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"

# Internal
INTERNAL_ERROR = "INTERNAL_ERROR"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"
