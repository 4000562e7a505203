import pytest

from tinyspec import reset_default_session


def fizzbuzz(number: int):
    if number % 15 == 0:
        return "FizzBuzz"
    if number % 3 == 0:
        return "Fizz"
    if number % 5 == 0:
        return "Buzz"
    return number


@pytest.fixture(autouse=True)
def fresh_default_session() -> None:
    """Give every test its own process-scoped session."""

    reset_default_session()


@pytest.fixture
def fizz():
    return fizzbuzz
