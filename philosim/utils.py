"""Small helpers: wall-clock milliseconds and lenient integer parsing."""

from __future__ import annotations

import time

_LEADING_SPACE = " \f\n\r\t\v"
_INT_BITS = 32


def current_millis() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def parse_int(text: str) -> int:
    """Parse a leading integer from ``text`` the lenient way.

    Leading whitespace is skipped, a single optional sign is accepted and
    digits are read until the first non-digit. Text without digits yields 0.
    The result wraps like a signed 32-bit integer.
    """
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(value * sign)