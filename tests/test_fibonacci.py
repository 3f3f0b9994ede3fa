import pytest

from ossim.fibonacci import fibonacci_message, fibonacci_series


def test_zero_limit():
    assert fibonacci_series(0) == [0]
    assert fibonacci_message("0") == "Fibonacci series: 0"


def test_small_limit():
    assert fibonacci_series(10) == [0, 1, 1, 2, 3, 5, 8]


@pytest.mark.parametrize("limit", [1, 2, 7, 100, 500, 1000])
def test_series_invariants(limit):
    series = fibonacci_series(limit)
    assert series[:2] == [0, 1]
    assert all(c == a + b for a, b, c in zip(series, series[1:], series[2:]))
    assert max(series) <= limit
    assert series[-1] + series[-2] > limit


def test_message_joins_series():
    series = fibonacci_series(100)
    assert fibonacci_message("100") == "Fibonacci series: " + ", ".join(map(str, series))


def test_negative_limit():
    with pytest.raises(ValueError):
        fibonacci_series(-1)
    assert fibonacci_message("-1") == "Error: Please enter positive number"


def test_too_large_limit():
    with pytest.raises(ValueError):
        fibonacci_series(1001)
    assert fibonacci_message("1001") == "Error: Number too large (max 1000)"