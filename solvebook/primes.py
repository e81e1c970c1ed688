"""Prime sieves, factorisation and divisor counting."""

from collections.abc import Iterator
from math import isqrt, log


def sieve(limit: int) -> list[int]:
    """Return every prime p with 2 <= p <= limit, in ascending order."""
    if limit < 2:
        return []
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for candidate in range(2, isqrt(limit) + 1):
        if flags[candidate]:
            start = candidate * candidate
            flags[start::candidate] = bytes(len(range(start, limit + 1, candidate)))
    return [value for value, is_prime in enumerate(flags) if is_prime]


def sum_primes(limit: int = 2_000_000) -> int:
    """Return the sum of all primes not greater than limit."""
    return sum(sieve(limit))


def nth_prime(n: int = 10001) -> int:
    """Return the n-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"prime index must be positive, got {n}")
    # The prime number theorem keeps the n-th prime below n * (ln n + 2).
    bound = int(n * (log(n) + 2))
    primes = sieve(bound)
    if len(primes) < n:
        raise ValueError(f"no {n}-th prime below {bound}")
    return primes[n - 1]


def _factorise(number: int) -> Iterator[tuple[int, int]]:
    """Yield (prime, exponent) pairs of number in ascending order."""
    remaining = number
    factor = 2
    while factor * factor <= remaining:
        exponent = 0
        while remaining % factor == 0:
            remaining //= factor
            exponent += 1
        if exponent:
            yield factor, exponent
        factor += 1 if factor == 2 else 2
    if remaining > 1:
        yield remaining, 1


def largest_prime_factor(number: int = 600851475143) -> int:
    """Return the largest prime dividing number."""
    if number < 2:
        raise ValueError(f"{number} has no prime factors")
    return max(prime for prime, _ in _factorise(number))


def primes_in_range(start: int, end: int) -> list[int]:
    """Return the primes p with start <= p <= end, using a segmented sieve."""
    if end < 2 or end < start:
        return []
    low = max(start, 2)
    flags = bytearray([1]) * (end - low + 1)
    for prime in sieve(isqrt(end)):
        first = max(prime * prime, -(-low // prime) * prime)
        if first <= end:
            flags[first - low :: prime] = bytes(len(range(first, end + 1, prime)))
    return [low + offset for offset, is_prime in enumerate(flags) if is_prime]


def count_divisors(number: int) -> int:
    """Return how many positive integers divide number."""
    if number < 1:
        raise ValueError(f"divisors are counted for positive numbers, got {number}")
    count = 1
    for _, exponent in _factorise(number):
        count *= exponent + 1
    return count


def triangle_numbers_with_divisors(threshold: int, limit: int = 100000) -> Iterator[int]:
    """Yield triangle numbers i*(i+1)/2, 3 <= i < limit, with more than threshold divisors."""
    for index in range(3, limit):
        triangle = index * (index + 1) // 2
        if count_divisors(triangle) > threshold:
            yield triangle