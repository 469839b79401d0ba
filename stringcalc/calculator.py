"""String calculator — sums a delimited list of numbers.

Data flow per call:
1. Empty or whitespace-only input → 0
2. Detect a `//<delimiter>\\n` declaration, otherwise comma or newline
3. Split on the delimiter, trim tokens, drop empty ones
4. Parse each token as a base-10 integer
5. Reject negatives (all of them reported together)
6. Drop values above MAX_VALUE from the sum
7. Sum what's left

Every function here is pure: no I/O, no shared state.
"""

from __future__ import annotations

from typing import Optional

from stringcalc import digits
from stringcalc.errors import (
    CalculatorError,
    DelimiterError,
    InvalidNumberError,
    NegativeNumbersError,
)
from stringcalc.models import Breakdown, Outcome

DEFAULT_DELIMITERS = (",", "\n")
CUSTOM_DELIMITER_MARKER = "//"
MAX_VALUE = 1000


def parse_delimiter(numbers: str) -> tuple[Optional[str], str]:
    """Split a custom delimiter declaration off the input.

    Returns (delimiter, body). The delimiter is None when the input has no
    `//` marker, meaning the default comma-or-newline set applies.

    Raises:
        DelimiterError: the declaration has no terminating newline, or
            declares an empty delimiter.
    """
    if not numbers.startswith(CUSTOM_DELIMITER_MARKER):
        return None, numbers

    end = numbers.find("\n")
    if end == -1:
        raise DelimiterError("Custom delimiter declaration must end with a newline")

    delimiter = numbers[len(CUSTOM_DELIMITER_MARKER):end]
    if not delimiter:
        raise DelimiterError("Custom delimiter must not be empty")
    return delimiter, numbers[end + 1:]


def _split_default(body: str) -> list[str]:
    """Split on any comma or newline, each one a separator on its own."""
    parts: list[str] = []
    current: list[str] = []
    for char in body:
        if char in DEFAULT_DELIMITERS:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def tokenize(body: str, delimiter: Optional[str] = None) -> list[str]:
    """Split *body* into trimmed, non-empty tokens.

    A custom delimiter is matched as a literal substring; characters such
    as `*`, `.` or `|` have no special meaning.
    """
    if delimiter is None:
        parts = _split_default(body)
    else:
        parts = body.split(delimiter)
    tokens = (p.strip() for p in parts)
    return [t for t in tokens if t]


def parse_number(token: str) -> int:
    """Parse a token as a base-10 integer.

    Accepts an optional sign followed by ASCII digits only. Decimal points,
    digit separators and trailing garbage are rejected. There is no upper
    limit on the number of digits.
    """
    magnitude = token[1:] if token[:1] in ("+", "-") else token
    if not magnitude or not (magnitude.isascii() and magnitude.isdigit()):
        raise InvalidNumberError(token)
    value = digits.to_int(magnitude)
    return -value if token.startswith("-") else value


def explain(numbers: str) -> Breakdown:
    """Run every step of the calculation and return the intermediate values.

    Unlike add(), negatives are collected but not raised, so callers can
    show the full picture. Parse and delimiter errors still raise.
    """
    if not numbers or not numbers.strip():
        return Breakdown(delimiter=None, body=numbers)

    delimiter, body = parse_delimiter(numbers)
    tokens = tokenize(body, delimiter)
    parsed = [parse_number(t) for t in tokens]

    negatives = [n for n in parsed if n < 0]
    ignored = [n for n in parsed if n > MAX_VALUE]
    counted = [n for n in parsed if 0 <= n <= MAX_VALUE]

    return Breakdown(
        delimiter=delimiter,
        body=body,
        tokens=tokens,
        numbers=parsed,
        negatives=negatives,
        ignored=ignored,
        counted=counted,
        total=sum(counted),
    )


def add(numbers: str) -> int:
    """Return the sum of the numbers in *numbers*.

    Args:
        numbers: Raw input, e.g. "1,2\\n3" or "//;\\n1;2".

    Returns:
        Sum of all parsed values no greater than MAX_VALUE.

    Raises:
        NegativeNumbersError: one or more values are negative.
        InvalidNumberError: a token is not an integer.
        DelimiterError: the custom delimiter declaration is malformed.
    """
    breakdown = explain(numbers)
    if breakdown.negatives:
        raise NegativeNumbersError(breakdown.negatives)
    return breakdown.total


def evaluate(numbers: str) -> Outcome:
    """Compute add() and fold calculator errors into an Outcome."""
    try:
        return Outcome(input=numbers, result=add(numbers))
    except CalculatorError as e:
        return Outcome(input=numbers, error=e.message, error_code=e.code)
