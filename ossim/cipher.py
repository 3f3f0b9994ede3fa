"""Toy password cipher: reverse the text and shift each character by four."""

from __future__ import annotations

SHIFT = 4


def _shift(text: str, offset: int) -> str:
    try:
        return "".join(chr(ord(char) + offset) for char in reversed(text))
    except ValueError as exc:
        raise ValueError(f"cannot shift {text!r} by {offset}") from exc


def encrypt(text: str) -> str:
    """Reverse ``text`` and move each character four code points up."""
    return _shift(text, SHIFT)


def decrypt(text: str) -> str:
    """Undo :func:`encrypt`; raise ValueError if a character cannot move down."""
    return _shift(text, -SHIFT)