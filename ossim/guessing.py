"""Number guessing game in which the computer guesses a number from 1 to 30."""

from __future__ import annotations

LOWEST = 1
HIGHEST = 30
FIRST_GUESS = 15
OPENING_QUESTION = "Is your number between 15 and 30?"
IMPOSSIBLE = "That's not possible! Let's try again."


class GuessingGame:
    """Narrows the range of candidates from the player's higher/lower answers."""

    def __init__(self) -> None:
        self.min_range = LOWEST
        self.max_range = HIGHEST
        self.current_guess = FIRST_GUESS
        self.is_higher_phase = True
        self.active = True
        self.question = OPENING_QUESTION
        self.reset()

    def _ask(self) -> str:
        if self.is_higher_phase:
            self.question = OPENING_QUESTION
        else:
            self.question = f"Is your number {self.current_guess}?"
        return self.question

    def _guess(self) -> str:
        self.current_guess = (self.min_range + self.max_range) // 2
        return self._ask()

    def _require_active(self) -> None:
        if not self.active:
            raise RuntimeError("the game is over; start a new one")

    def _narrowed(self) -> str:
        if self.min_range > self.max_range:
            # The answers contradict each other: start again from scratch.
            self.question = IMPOSSIBLE
            return self.reset()
        return self._guess()

    def reset(self) -> str:
        """Start a new game and return the opening question."""
        self.min_range = LOWEST
        self.max_range = HIGHEST
        self.current_guess = FIRST_GUESS
        self.is_higher_phase = True
        self.active = True
        return self._ask()

    def higher(self) -> str:
        """Answer that the number is higher (or in the upper half); return the next question."""
        self._require_active()
        if self.is_higher_phase:
            self.min_range = FIRST_GUESS + 1
            self.is_higher_phase = False
        else:
            self.min_range = self.current_guess + 1
        return self._narrowed()

    def lower(self) -> str:
        """Answer that the number is lower (or in the lower half); return the next question."""
        self._require_active()
        if self.is_higher_phase:
            self.max_range = FIRST_GUESS
            self.is_higher_phase = False
        else:
            self.max_range = self.current_guess - 1
        return self._narrowed()

    def correct(self) -> str:
        """Confirm the current guess and end the game."""
        self._require_active()
        self.question = f"I guessed it! Your number is {self.current_guess}."
        self.active = False
        return self.question