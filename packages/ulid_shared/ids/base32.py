"""Crockford base32 primitives used by the canonical ULID codec."""

from __future__ import annotations

import re

from packages.ulid_shared.errors import InvalidULID

from .constants import CROCKFORD_ALPHABET

_DECODE_TABLE = {char: index for index, char in enumerate(CROCKFORD_ALPHABET)}
_NON_ALPHABET = re.compile(f"[^{CROCKFORD_ALPHABET}{CROCKFORD_ALPHABET.lower()}]")


def normalize(text: str) -> str:
    """Drop every character outside the alphabet, then uppercase what remains.

    Separators such as dashes or spaces and any other decoration vanish, so
    ``"01b3z3a7gq-6627fzpdqhqp87pm"`` normalizes to the canonical form. Only
    ASCII letters survive the strip, so characters like ``ß`` never uppercase
    into alphabet letters.
    """
    return _NON_ALPHABET.sub("", text).upper()


def encode_base32(number: int, width: int) -> str:
    """Encode ``number`` as exactly ``width`` characters, zero padded."""
    if number < 0 or number >> (5 * width):
        raise InvalidULID(f"{number} does not fit in {width} base32 characters")

    chars: list[str] = []
    for _ in range(width):
        number, remainder = divmod(number, 32)
        chars.append(CROCKFORD_ALPHABET[remainder])
    return "".join(reversed(chars))


def decode_base32(text: str) -> int:
    """Decode already-normalized base32 ``text`` into an unsigned integer."""
    number = 0
    for char in text:
        index = _DECODE_TABLE.get(char)
        if index is None:
            raise InvalidULID(f"Invalid ULID character: {char!r}")
        number = (number << 5) | index
    return number
