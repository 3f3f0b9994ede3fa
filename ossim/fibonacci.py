"""Fibonacci numbers up to a limit."""

from __future__ import annotations

from ossim.textnum import atoi

MAX_LIMIT = 1000


def fibonacci_series(limit: int) -> list[int]:
    """Return the Fibonacci numbers not above ``limit``, which must be 0 to 1000."""
    if limit < 0:
        raise ValueError("Error: Please enter positive number")
    if limit > MAX_LIMIT:
        raise ValueError("Error: Number too large (max 1000)")
    if limit == 0:
        return [0]
    series = [0, 1]
    a, b = 0, 1
    while (c := a + b) <= limit:
        series.append(c)
        a, b = b, c
    return series


def fibonacci_message(text: str) -> str:
    """Return the result line for the limit typed in ``text``."""
    try:
        series = fibonacci_series(atoi(text))
    except ValueError as exc:
        return str(exc)
    return "Fibonacci series: " + ", ".join(map(str, series))