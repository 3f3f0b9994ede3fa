import pytest

from ossim.guessing import GuessingGame, OPENING_QUESTION


def _play(secret: int) -> str:
    game = GuessingGame()
    if secret > 15:
        game.higher()
    else:
        game.lower()
    for _ in range(10):
        if secret == game.current_guess:
            return game.correct()
        if secret > game.current_guess:
            game.higher()
        else:
            game.lower()
    raise AssertionError("too many questions")


def test_opening_question():
    game = GuessingGame()
    assert game.question == "Is your number between 15 and 30?"
    assert (game.min_range, game.max_range, game.current_guess) == (1, 30, 15)


def test_guess_stays_within_range_after_answer():
    game = GuessingGame()
    question = game.higher()
    assert game.min_range == 16
    assert game.min_range <= game.current_guess <= game.max_range
    assert question == f"Is your number {game.current_guess}?"


def test_lower_in_opening_caps_range():
    game = GuessingGame()
    game.lower()
    assert game.max_range == 15
    assert not game.is_higher_phase
    assert game.min_range <= game.current_guess <= game.max_range


@pytest.mark.parametrize("secret", range(1, 31))
def test_finds_every_number(secret):
    assert _play(secret) == f"I guessed it! Your number is {secret}."


def test_contradiction_resets_game():
    game = GuessingGame()
    for _ in range(5):
        question = game.lower()
    assert question == OPENING_QUESTION
    assert (game.min_range, game.max_range) == (1, 30)
    assert game.is_higher_phase


def test_correct_ends_game():
    game = GuessingGame()
    game.correct()
    assert game.active is False
    with pytest.raises(RuntimeError):
        game.higher()
    with pytest.raises(RuntimeError):
        game.lower()
    with pytest.raises(RuntimeError):
        game.correct()


def test_reset_after_finish():
    game = GuessingGame()
    game.higher()
    game.correct()
    assert game.reset() == OPENING_QUESTION
    assert game.active is True
    assert game.current_guess == 15