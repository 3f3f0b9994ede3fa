import pytest

from ossim.factorial import factorial_message


def _value(n):
    message = factorial_message(str(n))
    prefix = f"{n}! = "
    assert message.startswith(prefix)
    return int(message[len(prefix):])


def test_small_value():
    assert factorial_message("5") == "5! = 120"


def test_largest_allowed():
    assert factorial_message("20") == "20! = 2432902008176640000"


def test_zero_and_junk():
    assert factorial_message("abc") == "0! = 1"
    assert factorial_message("0") == factorial_message("abc")


@pytest.mark.parametrize("n", range(1, 21))
def test_recurrence(n):
    assert _value(n) == n * _value(n - 1)


@pytest.mark.parametrize("text", ["-1", "-3", " -100"])
def test_negative(text):
    assert factorial_message(text) == "Error: Negative number!"


@pytest.mark.parametrize("text", ["21", "100", "99999"])
def test_too_large(text):
    assert factorial_message(text) == "Error: Number too large!"