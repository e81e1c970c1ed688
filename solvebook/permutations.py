"""Lexicographic permutations."""

from collections.abc import Sequence
from math import factorial
from typing import TypeVar

T = TypeVar("T")


def next_permutation(items: Sequence[T]) -> list[T] | None:
    """Return the lexicographically next arrangement of items, or None if it is the last one."""
    values = list(items)
    pivot = next(
        (i for i in range(len(values) - 2, -1, -1) if values[i] < values[i + 1]),
        None,
    )
    if pivot is None:
        return None
    successor = max(i for i in range(pivot + 1, len(values)) if values[pivot] < values[i])
    values[pivot], values[successor] = values[successor], values[pivot]
    values[pivot + 1 :] = reversed(values[pivot + 1 :])
    return values


def nth_permutation(symbols: Sequence[T] | str = "0123456789", index: int = 1_000_000):
    """Return the index-th (1-based) lexicographic permutation of distinct symbols.

    A string is returned for string input, a list otherwise.
    """
    pool = sorted(symbols)
    if len(set(pool)) != len(pool):
        raise ValueError("symbols must be distinct")
    total = factorial(len(pool))
    if not 1 <= index <= total:
        raise ValueError(f"index must be between 1 and {total}, got {index}")
    rank = index - 1
    chosen = []
    for remaining in range(len(pool) - 1, -1, -1):
        position, rank = divmod(rank, factorial(remaining))
        chosen.append(pool.pop(position))
    return "".join(chosen) if isinstance(symbols, str) else chosen