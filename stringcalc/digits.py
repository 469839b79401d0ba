"""Decimal conversions that work for integers of any length.

int(str) and str(int) refuse numbers with more digits than
sys.get_int_max_str_digits() allows. These helpers convert in fixed-size
chunks so a very long token still parses, and still prints in messages.
"""

from __future__ import annotations

from typing import Iterable

# Well under the interpreter's conversion limit (4300 by default).
_CHUNK = 1000
_CHUNK_BASE = 10 ** _CHUNK


def to_int(digits: str) -> int:
    """Convert a string of ASCII digits (no sign) to an int."""
    value = 0
    for start in range(0, len(digits), _CHUNK):
        chunk = digits[start:start + _CHUNK]
        value = value * 10 ** len(chunk) + int(chunk, 10)
    return value


def to_text(n: int) -> str:
    """Render *n* in base 10."""
    if n < 0:
        return "-" + to_text(-n)
    if n < _CHUNK_BASE:
        return str(n)
    parts: list[str] = []
    while n >= _CHUNK_BASE:
        n, rest = divmod(n, _CHUNK_BASE)
        parts.append(str(rest).zfill(_CHUNK))
    parts.append(str(n))
    return "".join(reversed(parts))


def join(values: Iterable[int], sep: str = ", ") -> str:
    return sep.join(to_text(v) for v in values)
