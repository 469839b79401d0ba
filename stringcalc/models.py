"""Data models for the string calculator.

Breakdown traces one computation step by step; Outcome is the
success-or-failure value a presentation layer displays.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Status(str, Enum):
    """Outcome states. Mutually exclusive."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class Breakdown:
    """Intermediate values of a single calculation.

    Built without raising on negatives so the whole input can be shown;
    `negatives` is non-empty exactly when add() would fail.
    """

    delimiter: Optional[str]
    body: str
    tokens: list[str] = field(default_factory=list)
    numbers: list[int] = field(default_factory=list)
    negatives: list[int] = field(default_factory=list)
    ignored: list[int] = field(default_factory=list)
    counted: list[int] = field(default_factory=list)
    total: int = 0

    @property
    def delimiter_label(self) -> str:
        if self.delimiter is None:
            return "comma or newline"
        return repr(self.delimiter)


@dataclass
class Outcome:
    """Result of evaluating one input: either a sum or an error message."""

    input: str
    result: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of result or error")

    @property
    def status(self) -> Status:
        if self.error is not None:
            return Status.FAILURE
        return Status.SUCCESS

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d = {
            "input": self.input,
            "status": self.status.value,
        }
        if self.ok:
            d["result"] = self.result
        else:
            d["error"] = self.error
            d["error_code"] = self.error_code
        return d
