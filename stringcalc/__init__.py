"""stringcalc — sum a delimited list of numbers from a string.

Numbers are separated by commas or newlines, or by a custom delimiter
declared up front as `//<delimiter>\\n`. Negative numbers are rejected (all
of them listed in the error) and numbers above 1000 are left out of the sum.

Usage:
    >>> from stringcalc import add
    >>> add("1,2\\n3")
    6
    >>> add("//;\\n1;2")
    3

    python -m stringcalc add "1,2,3"
"""

from stringcalc.calculator import add, evaluate, explain
from stringcalc.errors import (
    CalculatorError,
    DelimiterError,
    InvalidNumberError,
    NegativeNumbersError,
)
from stringcalc.models import Breakdown, Outcome, Status

__all__ = [
    "add",
    "evaluate",
    "explain",
    "Breakdown",
    "Outcome",
    "Status",
    "CalculatorError",
    "DelimiterError",
    "InvalidNumberError",
    "NegativeNumbersError",
]
