"""Two-operation pocket calculator state."""

from __future__ import annotations

import operator
from typing import Callable

from ossim.textnum import atof

DISPLAY_LIMIT = 255

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
}


class Calculator:
    """Display text plus the pending first operand and operation."""

    def __init__(self) -> None:
        self.display = ""
        self.first_number = 0.0
        self.operation: str | None = None

    def press_digit(self, digit: str) -> str:
        """Append a digit to the display and return the display."""
        self.display = (self.display + digit)[:DISPLAY_LIMIT]
        return self.display

    def press_operation(self, operation: str) -> None:
        """Store the displayed number and the operation, then clear the display."""
        if operation not in _OPERATIONS:
            raise ValueError(f"unsupported operation: {operation!r}")
        self.first_number = atof(self.display)
        self.operation = operation
        self.display = ""

    def press_equals(self) -> str:
        """Apply the pending operation and show the result with two decimals."""
        second_number = atof(self.display)
        apply = _OPERATIONS.get(self.operation or "")
        result = apply(self.first_number, second_number) if apply else 0.0
        self.display = f"{result:.2f}"
        return self.display

    def clear(self) -> None:
        """Reset the display and forget the pending operation."""
        self.display = ""
        self.first_number = 0.0
        self.operation = None