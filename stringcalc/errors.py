"""Error hierarchy for the string calculator.

Every failure the calculator can report derives from CalculatorError and
carries a short machine-readable code, so callers can branch on the kind
of error without parsing message text.
"""

from __future__ import annotations

from stringcalc import digits


class CalculatorError(Exception):
    """Base exception for all calculator failures."""

    code = "calculator_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NegativeNumbersError(CalculatorError):
    """Raised when the input contains one or more negative numbers.

    Holds every negative value in input order, not just the first.
    """

    code = "negative_numbers"

    def __init__(self, values: list[int]):
        self.values = list(values)
        super().__init__(f"Negative numbers not allowed: {digits.join(self.values)}")


class InvalidNumberError(CalculatorError):
    """Raised when a token is not a base-10 integer."""

    code = "invalid_number"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid number: {token!r}")


class DelimiterError(CalculatorError):
    """Raised for a malformed //<delimiter> declaration."""

    code = "invalid_delimiter"
