"""Lenient number parsing: the longest numeric prefix counts, anything else is zero."""

from __future__ import annotations

import re

_SPACE = " \t\n\v\f\r"

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def atoi(text: str) -> int:
    """Parse the integer at the start of ``text``; return 0 when there is none."""
    match = _INT_PREFIX.match(text.lstrip(_SPACE))
    return int(match.group()) if match else 0


def atof(text: str) -> float:
    """Parse the decimal number at the start of ``text``; return 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text.lstrip(_SPACE))
    return float(match.group()) if match else 0.0