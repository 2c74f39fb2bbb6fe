"""Luhn checksum validation for numeric identification codes.

A code is checked in three steps:

1. Every plain space character is removed. Other whitespace is kept and
   makes the code invalid.
2. The remaining string must hold at least two characters, all of them
   ASCII digits ``0``-``9``.
3. Counting from the rightmost digit (position 0), digits at odd positions
   are doubled, with 9 subtracted when the double exceeds 9. The code is
   valid when the sum of all digits is a multiple of 10.

Malformed input is never an error here: it is simply not a valid code.
"""

from __future__ import annotations

ASCII_DIGITS = frozenset("0123456789")
MIN_CODE_LENGTH = 2


def normalize(code: str) -> str:
    """Return code with every space character removed."""
    return code.replace(" ", "")


def is_structurally_valid(normalized: str) -> bool:
    """Return True if normalized is long enough and made of ASCII digits only."""
    if len(normalized) < MIN_CODE_LENGTH:
        return False
    # str.isdigit() would also accept "²" or Arabic-Indic digits
    return all(ch in ASCII_DIGITS for ch in normalized)


def transform_digit(position: int, digit: int) -> int:
    """Return the Luhn contribution of digit at position (0 = rightmost)."""
    if position % 2 == 0:
        return digit
    doubled = digit * 2
    if doubled > 9:
        doubled -= 9
    return doubled


def checksum_total(normalized: str) -> int:
    """Return the sum of transformed digits of a structurally valid code."""
    total = 0
    for position, ch in enumerate(reversed(normalized)):
        total += transform_digit(position, ord(ch) - ord("0"))
    return total


def is_valid(code: str) -> bool:
    """Return True if code passes the Luhn checksum."""
    normalized = normalize(code)
    if not is_structurally_valid(normalized):
        return False
    return checksum_total(normalized) % 10 == 0
