"""Free-format decoding of integers from a string."""

import enum
import string as _string
from dataclasses import dataclass
from typing import Optional, Tuple

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)

_WHITESPACE = " \t\n\v\f\r"
_BLANK = " \t"
_DIGITS = "0123456789"
_SKIPPABLE = _BLANK + _string.ascii_letters + "+"


class IntinFlag(enum.IntEnum):
    """Outcome of decoding one field."""

    NEGATIVE = -1
    POSITIVE = 0
    NULL = 1
    ERROR = 2


@dataclass(frozen=True)
class IntinResult:
    """One decoded field.

    ``value`` is None when no number was found.  On overflow the flag is
    ``ERROR`` and ``value`` is clamped to the 64-bit signed range.
    ``nstrt`` is the 1-based position at which decoding of the next
    field should start.
    """

    value: Optional[int]
    nstrt: int
    flag: IntinFlag


def _strtol(text: str, start: int) -> Tuple[Optional[int], int, bool, bool]:
    """Parse like C strtol: returns (value, end, negative_sign, overflow)."""
    n = len(text)
    i = start
    while i < n and text[i] in _WHITESPACE:
        i += 1
    negative = False
    if i < n and text[i] in "+-":
        negative = text[i] == "-"
        i += 1
    j = i
    while j < n and text[j] in _DIGITS:
        j += 1
    if j == i:
        return None, start, False, False
    value = int(text[i:j])
    if negative:
        value = -value
    if value > _LONG_MAX:
        return _LONG_MAX, j, negative, True
    if value < _LONG_MIN:
        return _LONG_MIN, j, negative, True
    return value, j, negative, False


def intin(string: str, nstrt: int) -> IntinResult:
    """Decode an integer from ``string`` starting at 1-based position ``nstrt``.

    Leading spaces are skipped, a comma directly after the number is
    consumed, and so are any blanks after the number.  When no number
    is found, blanks, letters and "+" signs are stepped over so that a
    following call can proceed.  A "-0" is reported as negative.
    """
    text = string.split("\0", 1)[0]
    if nstrt < 1 or nstrt > len(text) + 1:
        raise ValueError(f"start position {nstrt} is outside 1-{len(text) + 1}")

    start = nstrt - 1
    value, end, negative, overflow = _strtol(text, start)

    if value is None:
        flag = IntinFlag.NULL
        while end < len(text) and text[end] in _SKIPPABLE:
            end += 1
    elif overflow:
        flag = IntinFlag.ERROR
    elif value < 0 or negative:
        flag = IntinFlag.NEGATIVE
    else:
        flag = IntinFlag.POSITIVE

    if end < len(text) and text[end] == ",":
        end += 1
    else:
        while end < len(text) and text[end] in _BLANK:
            end += 1

    return IntinResult(value=value, nstrt=end + 1, flag=flag)