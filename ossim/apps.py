"""Console front ends for the desktop's small programs."""

from __future__ import annotations

import argparse
import string
import sys
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from ossim.age import age_message
from ossim.calculator import Calculator
from ossim.cipher import decrypt, encrypt
from ossim.clockface import calendar_text, clock_text
from ossim.factorial import factorial_message
from ossim.fibonacci import fibonacci_message
from ossim.fileops import (
    FileOperationError,
    copy_file,
    create_file,
    delete_file,
    move_file,
    save_note,
)
from ossim.guessing import GuessingGame
from ossim.tictactoe import TIE, TicTacToe

BEEP_DELAY = 0.1
BEEP_DURATION = 5


def _read(prompt: str = "") -> str | None:
    """Read one line, or return None at the end of input."""
    try:
        return input(prompt)
    except EOFError:
        print()
        return None


def _lines(prompt: str = "") -> Iterator[str]:
    """Yield lines typed by the user until the input ends."""
    while (line := _read(prompt)) is not None:
        yield line


def _beep() -> int:
    print("Playing beep for 5 seconds...", flush=True)
    time.sleep(BEEP_DELAY)
    sys.stdout.write("\a")
    sys.stdout.flush()
    time.sleep(BEEP_DURATION)
    return 0


def _age_calculator() -> int:
    print("Enter your date of birth:")
    while True:
        day = _read("Day: ")
        if day is None:
            break
        month = _read("Month: ")
        if month is None:
            break
        year = _read("Year: ")
        if year is None:
            break
        print(age_message(day, month, year))
    return 0


def _calculator() -> int:
    print("Calculator running")
    calc = Calculator()
    for line in _lines("> "):
        for key in line.replace(" ", ""):
            if key in string.digits:
                calc.press_digit(key)
            elif key in "+-":
                calc.press_operation(key)
            elif key == "=":
                calc.press_equals()
            elif key in "Cc":
                calc.clear()
            else:
                print(f"Unknown key: {key}")
        print(calc.display)
    print("Calculator exiting")
    return 0


def _calendar() -> int:
    print(calendar_text(), end="")
    return 0


def _clock() -> int:
    try:
        while True:
            print(clock_text(), flush=True)
            time.sleep(1)
    except KeyboardInterrupt:
        return 0


def _copy_file() -> int:
    while True:
        source = _read("Source File: ")
        if source is None:
            break
        destination = _read("Destination File: ")
        if destination is None:
            break
        try:
            copy_file(source, destination)
        except (ValueError, FileOperationError) as exc:
            print(exc)
        else:
            print("File copied successfully!")
    return 0


def _delete_file() -> int:
    for filename in _lines("Filename to delete: "):
        try:
            if delete_file(filename):
                print(f"Deleted file: {filename}")
        except FileOperationError as exc:
            print(exc)
    return 0


def _move_file() -> int:
    while True:
        source = _read("Source File: ")
        if source is None:
            break
        destination = _read("Destination: ")
        if destination is None:
            break
        try:
            move_file(source, destination)
        except (ValueError, FileOperationError) as exc:
            print(exc)
        else:
            print(f"Moved '{source}' to '{destination}'")
    return 0


def _file_creator() -> int:
    for filename in _lines("Enter filename: "):
        try:
            create_file(filename)
        except FileOperationError as exc:
            print(exc)
        else:
            print(f"File created successfully: {filename}")
    return 0


def _notepad() -> int:
    print("Type your text here:")
    for text in _lines():
        try:
            save_note(text)
        except FileOperationError as exc:
            print(exc)
        else:
            print("Text saved to file.")
    return 0


def _num_guess() -> int:
    game = GuessingGame()
    print("Think of a number from 1 to 30.")
    print("Answer h (higher), l (lower), c (correct), n (new game) or q (quit).")
    print(game.question)
    actions: dict[str, Callable[[], str]] = {
        "h": game.higher,
        "l": game.lower,
        "c": game.correct,
        "n": game.reset,
    }
    for answer in _lines("> "):
        choice = answer.strip().lower()[:1]
        if choice == "q":
            break
        action = actions.get(choice)
        if action is None:
            print("Please answer h, l, c, n or q.")
            continue
        try:
            print(action())
        except RuntimeError:
            print("Press n for a new game.")
    return 0


def _board_text(board: Sequence[str]) -> str:
    rows = (" | ".join(board[start:start + 3]) for start in (0, 3, 6))
    return "\n---------\n".join(rows)


def _tic_tac() -> int:
    game = TicTacToe()
    print(_board_text(game.board))
    for answer in _lines("Square (1-9, r to reset): "):
        choice = answer.strip().lower()
        if choice == "r":
            game.reset()
            print(_board_text(game.board))
            continue
        if choice not in {str(n) for n in range(1, 10)}:
            print("Enter a square from 1 to 9.")
            continue
        if game.play(int(choice) - 1) is None:
            print("That square cannot be played.")
            continue
        print(_board_text(game.board))
        winner = game.winner()
        if winner == TIE:
            print("It's a tie!")
        elif winner is not None:
            print(f"{winner} wins!")
    return 0


def _line_filter(prompt: str, transform: Callable[[str], str]) -> Callable[[], int]:
    def run() -> int:
        print(prompt)
        for line in _lines():
            try:
                print(transform(line))
            except ValueError as exc:
                print(exc)
        return 0

    return run


@dataclass(frozen=True)
class _App:
    title: str
    run: Callable[[], int]


_APPS: dict[str, _App] = {
    "age_calculator": _App("Age Calculator", _age_calculator),
    "beep": _App("Beep Player", _beep),
    "calculator": _App("Simple Calculator", _calculator),
    "calendar": _App("Calendar", _calendar),
    "clock": _App("Clock", _clock),
    "copy_file": _App("File Copier", _copy_file),
    "decrypt": _App(
        "Password Decryption",
        _line_filter("Enter a Password to Decrypt:", decrypt),
    ),
    "delete_file": _App("Delete File", _delete_file),
    "encrypt": _App(
        "Password Encryption",
        _line_filter("Enter a Password to encrypt:", encrypt),
    ),
    "factorial": _App(
        "Factorial Calculator",
        _line_filter("Enter a number (0-20):", factorial_message),
    ),
    "fibonacci": _App(
        "Fibonacci Series Generator",
        _line_filter("Enter upper limit for Fibonacci series:", fibonacci_message),
    ),
    "file_creator": _App("File Creator", _file_creator),
    "move_file": _App("File Mover", _move_file),
    "notepad": _App("Notepad", _notepad),
    "num_guess": _App("Number Guessing Game", _num_guess),
    "tic_tac": _App("Tic Tac Toe", _tic_tac),
}


def app_names() -> tuple[str, ...]:
    """Return the names of the programs that can be run, sorted."""
    return tuple(sorted(_APPS))


def run_app(name: str) -> int:
    """Run the named program on standard input and output; return its exit status."""
    try:
        app = _APPS[name]
    except KeyError:
        raise ValueError(f"unknown program: {name!r}") from None
    print(f"== {app.title} ==")
    return app.run()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: run one program by name."""
    parser = argparse.ArgumentParser(
        prog="ossim-app", description="Run one of the simulator's programs."
    )
    parser.add_argument("name", choices=app_names(), help="program to run")
    args = parser.parse_args(argv)
    return run_app(args.name)


if __name__ == "__main__":
    sys.exit(main())