"""Collatz chain lengths with a shared cache."""


class CollatzCounter:
    """Computes Collatz chain lengths, remembering every length it has seen."""

    def __init__(self) -> None:
        self._lengths: dict[int, int] = {}
        self.hits = 0

    @property
    def cache_size(self) -> int:
        """Number of starting values whose chain length is cached."""
        return len(self._lengths)

    def length(self, number: int) -> int:
        """Return how many terms the chain from number to 1 has, both included."""
        if number < 1:
            raise ValueError(f"Collatz chains start from positive numbers, got {number}")
        path = []
        current = number
        while current != 1 and current not in self._lengths:
            path.append(current)
            current = current // 2 if current % 2 == 0 else 3 * current + 1
        if current == 1:
            steps = 1
        else:
            steps = self._lengths[current]
            self.hits += 1
        for value in reversed(path):
            steps += 1
            self._lengths[value] = steps
        return steps


def longest_collatz(limit: int = 1_000_000) -> tuple[int, int]:
    """Return (start, length) of the longest chain starting below limit."""
    if limit < 2:
        raise ValueError(f"limit must be at least 2, got {limit}")
    counter = CollatzCounter()
    start = max(range(1, limit), key=counter.length)
    return start, counter.length(start)