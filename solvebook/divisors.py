"""Proper divisors, amicable pairs and abundant numbers."""

from math import isqrt


def proper_divisors(number: int) -> list[int]:
    """Return the divisors of number smaller than number itself, ascending."""
    if number < 1:
        raise ValueError(f"divisors are defined for positive numbers, got {number}")
    small = [d for d in range(1, isqrt(number) + 1) if number % d == 0]
    divisors = set(small) | {number // d for d in small}
    divisors.discard(number)
    return sorted(divisors)


def proper_divisor_sum(number: int) -> int:
    """Return the sum of the proper divisors of number."""
    return sum(proper_divisors(number))


def _divisor_sums(limit: int) -> list[int]:
    """Return a list whose n-th entry is the proper divisor sum of n, for n <= limit."""
    sums = [0] * (limit + 1)
    for divisor in range(1, limit // 2 + 1):
        for multiple in range(2 * divisor, limit + 1, divisor):
            sums[multiple] += divisor
    return sums


def amicable_sum(limit: int = 10000) -> int:
    """Return the sum of all amicable numbers below limit whose partner is also below limit."""
    if limit < 2:
        return 0
    sums = _divisor_sums(limit - 1)
    return sum(
        number
        for number in range(2, limit)
        if (partner := sums[number]) != number and partner < limit and sums[partner] == number
    )


def non_abundant_sum(limit: int = 29000) -> int:
    """Return the sum of the numbers 1..limit that are not a sum of two abundant numbers."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    sums = _divisor_sums(limit)
    abundant = [n for n in range(1, limit + 1) if sums[n] > n]
    mask = 0
    for number in abundant:
        mask |= 1 << number
    expressible = 0
    for number in abundant:
        expressible |= mask << number
    bits = bin(expressible)[2:][::-1]
    return sum(
        n for n in range(1, limit + 1) if n >= len(bits) or bits[n] == "0"
    )