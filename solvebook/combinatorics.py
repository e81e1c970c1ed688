"""Counting puzzles: powers, digit sums, coin change, pandigitals and cubes."""

from collections import defaultdict
from collections.abc import Iterable

UK_COINS = (1, 2, 5, 10, 20, 50, 100, 200)
_PANDIGITAL = frozenset("123456789")


def distinct_powers(limit: int = 100) -> int:
    """Count the distinct values a**b for 2 <= a, b <= limit."""
    return len({a**b for a in range(2, limit + 1) for b in range(2, limit + 1)})


def _digit_power_limit(power: int) -> int:
    """Return an exclusive bound beyond which no number equals its digit-power sum."""
    top = 9**power
    digits = 1
    while 10 ** (digits - 1) <= digits * top:
        digits += 1
    return (digits - 1) * top + 1


def digit_power_numbers(power: int = 5, limit: int | None = None) -> list[int]:
    """Return the numbers 2 <= n < limit equal to the sum of power-th powers of their digits."""
    if power < 1:
        raise ValueError(f"power must be positive, got {power}")
    if limit is None:
        limit = _digit_power_limit(power)
    powers = {str(d): d**power for d in range(10)}
    return [
        number
        for number in range(2, limit)
        if sum(powers[ch] for ch in str(number)) == number
    ]


def coin_combinations(target: int = 200, coins: Iterable[int] = UK_COINS) -> int:
    """Count the ways to make target from any number of the given coin values."""
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    values = sorted(set(coins))
    if any(value < 1 for value in values):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def pandigital_products_sum() -> int:
    """Return the sum of products p with a * b = p using digits 1-9 exactly once."""
    products = set()
    # With a < b, the multiplicand has at most two digits.
    for first in range(1, 100):
        for second in range(first + 1, 10000):
            product = first * second
            text = f"{first}{second}{product}"
            if len(text) > 9:
                break
            if len(text) == 9 and set(text) == _PANDIGITAL:
                products.add(product)
    return sum(products)


def smallest_permuted_cube(count: int = 5) -> int:
    """Return the smallest cube whose digits can be permuted into exactly count cubes."""
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    groups: dict[str, list[int]] = defaultdict(list)
    for base in range(2, 10001):
        cube = base**3
        key = "".join(sorted(str(cube)))
        groups[key].append(cube)
        if len(groups[key]) == count:
            return groups[key][0]
    raise LookupError(f"no cube with {count} digit permutations among bases up to 10000")