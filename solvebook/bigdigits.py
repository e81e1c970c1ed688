"""Digit arithmetic on numbers too large for machine words."""

from collections.abc import Iterable
from math import factorial

_CHUNK = 10**18


def _digit_sum(number: int) -> int:
    """Return the sum of the decimal digits of a non-negative number."""
    total = 0
    while number:
        number, chunk = divmod(number, _CHUNK)
        total += sum(int(ch) for ch in str(chunk))
    return total


def _parse_number(value: int | str) -> int:
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"numbers must be non-negative, got {value}")
        return value
    text = value.strip()
    if not text.isdigit():
        raise ValueError(f"not a decimal number: {value!r}")
    return int(text)


def large_sum_prefix(numbers: Iterable[int | str], digits: int = 10) -> str:
    """Return the first digits decimal digits of the sum of numbers."""
    if digits < 1:
        raise ValueError(f"digit count must be positive, got {digits}")
    total = sum(_parse_number(value) for value in numbers)
    return str(total)[:digits]


def power_digit_sum(exponent: int = 1000) -> int:
    """Return the sum of the decimal digits of 2 ** exponent."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return _digit_sum(2**exponent)


def factorial_digit_sum(n: int = 100) -> int:
    """Return the sum of the decimal digits of n!."""
    if n < 0:
        raise ValueError(f"factorial is defined for non-negative numbers, got {n}")
    return _digit_sum(factorial(n))


def first_fibonacci_with_digits(digits: int = 1000) -> int:
    """Return the index of the first Fibonacci term (F1 = F2 = 1) with digits digits."""
    if digits < 1:
        raise ValueError(f"digit count must be positive, got {digits}")
    threshold = 10 ** (digits - 1)
    index = 1
    current, following = 1, 1
    while current < threshold:
        current, following = following, current + following
        index += 1
    return index