"""Two-player tic-tac-toe on a 3x3 board."""

from __future__ import annotations

from typing import Sequence

EMPTY = " "
TIE = "T"

_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def check_winner(board: Sequence[str]) -> str | None:
    """Return the winning mark, "T" for a full board without one, or None while play goes on."""
    if len(board) != 9:
        raise ValueError("a board has nine cells")
    for a, b, c in _LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return board[a]
    if EMPTY in board:
        return None
    return TIE


class TicTacToe:
    """Board state and whose turn it is; X moves first."""

    def __init__(self) -> None:
        self.board: list[str] = [EMPTY] * 9
        self.x_turn = True

    def winner(self) -> str | None:
        """Return the outcome so far, as :func:`check_winner` does."""
        return check_winner(self.board)

    def play(self, position: int) -> str | None:
        """Place the current mark; return it, or None if the cell is taken or play is over."""
        if position not in range(9):
            raise ValueError(f"position must be 0 to 8, not {position!r}")
        if self.board[position] != EMPTY or self.winner() is not None:
            return None
        mark = "X" if self.x_turn else "O"
        self.board[position] = mark
        self.x_turn = not self.x_turn
        return mark

    def reset(self) -> None:
        """Clear the board and give the first move to X."""
        self.board = [EMPTY] * 9
        self.x_turn = True