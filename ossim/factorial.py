"""Factorials of small numbers, as shown by the factorial calculator."""

from __future__ import annotations

import math

from ossim.textnum import atoi

MAX_N = 20


def _factorial(n: int) -> int:
    if n < 0:
        raise ValueError("Error: Negative number!")
    if n > MAX_N:
        raise ValueError("Error: Number too large!")
    return math.factorial(n)


def factorial_message(text: str) -> str:
    """Return the result line for the number typed in ``text``."""
    n = atoi(text)
    try:
        value = _factorial(n)
    except ValueError as exc:
        return str(exc)
    return f"{n}! = {value}"