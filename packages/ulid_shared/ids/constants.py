"""Bit widths, lengths, and alphabet shared by every ULID representation.

A ULID is 128 bits: a 48-bit millisecond timestamp followed by 80 random bits.
Each half is base32-encoded on its own. 80 bits fill 16 characters exactly;
48 bits need 10 characters, the top two bits of the first one always zero.
"""

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

TIMESTAMP_BITS = 48
RANDOM_BITS = 80
ULID_BITS = TIMESTAMP_BITS + RANDOM_BITS

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_RANDOM = (1 << RANDOM_BITS) - 1

TIMESTAMP_CHARS = -(-TIMESTAMP_BITS // 5)
RANDOM_CHARS = -(-RANDOM_BITS // 5)
CANONICAL_LENGTH = TIMESTAMP_CHARS + RANDOM_CHARS

RANDOM_BYTES = RANDOM_BITS // 8
BINARY_LENGTH = ULID_BITS // 8
