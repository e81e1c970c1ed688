"""Recurring decimal cycles and prime-producing quadratics."""

from math import isqrt

from solvebook.primes import sieve


def recurring_cycle_length(n: int) -> int:
    """Return the length of the recurring cycle in the decimal expansion of 1/n, 0 if it ends."""
    if n < 1:
        raise ValueError(f"denominator must be positive, got {n}")
    seen: dict[int, int] = {}
    remainder = 1 % n
    position = 0
    while remainder and remainder not in seen:
        seen[remainder] = position
        remainder = remainder * 10 % n
        position += 1
    return position - seen[remainder] if remainder else 0


def longest_recurring_cycle(limit: int = 1000) -> tuple[int, int]:
    """Return (d, length) for the d < limit whose 1/d has the longest cycle, smallest d on ties."""
    if limit < 3:
        raise ValueError(f"limit must be at least 3, got {limit}")
    best = max(range(2, limit), key=recurring_cycle_length)
    return best, recurring_cycle_length(best)


def _is_prime(value: int) -> bool:
    if value < 2:
        return False
    if value % 2 == 0:
        return value == 2
    return all(value % factor for factor in range(3, isqrt(value) + 1, 2))


def quadratic_prime_run(a: int, b: int) -> int:
    """Count consecutive n from 0 for which n*n + a*n + b is prime."""
    n = 0
    while _is_prime(n * n + a * n + b):
        n += 1
    return n


def best_quadratic(limit: int = 1000) -> tuple[int, int, int]:
    """Return (a, b, run) with -limit <= a, b < limit giving the longest prime run.

    The first pair found wins on ties, scanning a then b in ascending order.
    """
    # At n = 0 the value is b itself, so only prime b can start a run.
    candidates = sieve(limit - 1)
    best: tuple[int, int, int] | None = None
    for a in range(-limit, limit):
        for b in candidates:
            run = quadratic_prime_run(a, b)
            if run > (best[2] if best else 0):
                best = (a, b, run)
    if best is None:
        raise ValueError(f"no quadratic yields a prime for limit {limit}")
    return best