"""Settings for the stringcalc command line, read from the environment.

STRINGCALC_ESCAPES: turn a typed `\\n` into a newline (default: on)
STRINGCALC_OUTPUT: "text" or "json" (default: text)

The calculator itself takes no configuration; these only shape the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

OUTPUT_FORMATS = ("text", "json")

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """CLI settings."""

    escapes: bool = True
    output: str = "text"

    @property
    def json_output(self) -> bool:
        return self.output == "json"


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from *env* (defaults to os.environ).

    Unknown output formats fall back to "text".
    """
    env = os.environ if env is None else env
    output = env.get("STRINGCALC_OUTPUT", "text").strip().lower()
    if output not in OUTPUT_FORMATS:
        output = "text"
    return Settings(
        escapes=_flag(env.get("STRINGCALC_ESCAPES"), default=True),
        output=output,
    )


def unescape(text: str) -> str:
    """Replace the two-character sequences `\\n` and `\\\\` typed in a shell.

    Any other backslash is kept as-is.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\" and i + 1 < len(text):
            nxt = text[i + 1]
            if nxt == "n":
                out.append("\n")
                i += 2
                continue
            if nxt == "\\":
                out.append("\\")
                i += 2
                continue
        out.append(char)
        i += 1
    return "".join(out)
