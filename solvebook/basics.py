"""Small number puzzles: multiples, Fibonacci, palindromes and friends."""

from itertools import combinations, permutations
from math import lcm, prod

from solvebook.primes import largest_prime_factor

_DIGITS = frozenset("0123456789")


def multiples_sum(divisor: int, limit: int) -> int:
    """Return the sum of the positive multiples of divisor below limit."""
    if divisor < 1:
        raise ValueError(f"divisor must be positive, got {divisor}")
    return sum(range(divisor, limit, divisor))


def sum_multiples_3_or_5(limit: int = 1000) -> int:
    """Return the sum of the numbers below limit divisible by 3 or 5."""
    return multiples_sum(3, limit) + multiples_sum(5, limit) - multiples_sum(15, limit)


def even_fibonacci_sum(limit: int = 4_000_000) -> int:
    """Return the sum of even Fibonacci terms (1, 2, 3, 5, ...) below limit."""
    total = 0
    previous, current = 1, 2
    while current < limit:
        if current % 2 == 0:
            total += current
        previous, current = current, previous + current
    return total


def is_palindrome(number: int) -> bool:
    """Tell whether the decimal digits of number read the same both ways."""
    text = str(number)
    return text == text[::-1]


def largest_palindrome_product(limit: int = 999) -> int:
    """Return the largest palindrome i*j with limit >= i >= j > i // 10."""
    best = None
    for first in range(limit, 0, -1):
        if best is not None and first * first <= best:
            break
        for second in range(first, first // 10, -1):
            product = first * second
            if best is not None and product <= best:
                break
            if is_palindrome(product):
                best = product
    if best is None:
        raise ValueError(f"no palindromic product for limit {limit}")
    return best


def smallest_multiple(n: int = 20) -> int:
    """Return the smallest number divisible by every integer from 1 to n."""
    return lcm(*range(1, n + 1))


def sum_square_difference(limit: int = 100) -> int:
    """Return (1 + ... + limit)^2 minus the sum of the squares up to limit."""
    return sum(2 * i * j for i, j in combinations(range(1, limit + 1), 2))


def largest_digit_product(digits: str, span: int = 13) -> int:
    """Return the greatest product of span adjacent digits in digits."""
    if not set(digits) <= _DIGITS:
        raise ValueError("digits must contain only decimal digits")
    if not 1 <= span <= len(digits):
        raise ValueError(f"span {span} does not fit in {len(digits)} digits")
    values = [int(ch) for ch in digits]
    return max(prod(values[start : start + span]) for start in range(len(values) - span + 1))


def pythagorean_triplet(total: int = 1000) -> tuple[int, int, int]:
    """Return (a, b, c) with a + b + c == total and a^2 + b^2 == c^2."""
    for c in range(total - 3, 1, -1):
        for b in range(1, total - c - 1):
            a = total - b - c
            if a * a + b * b == c * c:
                return a, b, c
    raise ValueError(f"no Pythagorean triplet sums to {total}")


def spiral_diagonal_sum(size: int = 1001) -> int:
    """Return the sum of both diagonals of a size x size number spiral."""
    if size < 1 or size % 2 == 0:
        raise ValueError(f"spiral size must be a positive odd number, got {size}")
    total = 1
    corner = 1
    for side in range(3, size + 1, 2):
        for _ in range(4):
            corner += side - 1
            total += corner
    return total


def largest_pandigital_prime() -> int:
    """Return the largest prime using each digit 1..n exactly once."""
    for n in range(9, 0, -1):
        # A digit sum divisible by 3 makes every arrangement divisible by 3.
        if n * (n + 1) // 2 % 3 == 0:
            continue
        for arrangement in permutations("987654321"[9 - n :]):
            candidate = int("".join(arrangement))
            if candidate > 1 and largest_prime_factor(candidate) == candidate:
                return candidate
    raise LookupError("no pandigital prime exists")