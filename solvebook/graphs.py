"""Shortest paths in weighted undirected graphs."""

import heapq
import math
from collections.abc import Iterable, Sequence

# Distance reported for a city that cannot be reached.
UNREACHABLE = 10**15


def _dijkstra(
    adjacency: Sequence[Iterable[tuple[int, int]]],
    source: int,
    target: int | None = None,
) -> tuple[list[float], list[int | None]]:
    if not 0 <= source < len(adjacency):
        raise ValueError(f"source {source} is not a vertex")
    distances: list[float] = [math.inf] * len(adjacency)
    previous: list[int | None] = [None] * len(adjacency)
    distances[source] = 0
    queue = [(0, source)]
    while queue:
        distance, node = heapq.heappop(queue)
        if distance > distances[node]:
            continue
        if node == target:
            break
        for neighbour, cost in adjacency[node]:
            candidate = distance + cost
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                previous[neighbour] = node
                heapq.heappush(queue, (candidate, neighbour))
    return distances, previous


def shortest_distances(
    adjacency: Sequence[Iterable[tuple[int, int]]],
    source: int,
    target: int | None = None,
) -> list[float]:
    """Return distances from source over (neighbour, cost) adjacency lists.

    Unreachable vertices get math.inf. With a target, the search stops once the
    target is settled, so only its distance is then guaranteed final.
    """
    return _dijkstra(adjacency, source, target)[0]


def shortest_path(node_count: int, edges: Iterable[tuple[int, int, int]]) -> list[int] | None:
    """Return the vertices of a shortest path from 1 to node_count over undirected edges.

    Vertices are numbered from 1. None is returned when no path of at least one
    edge leads from vertex 1 to vertex node_count.
    """
    if node_count < 1:
        raise ValueError(f"graph needs at least one vertex, got {node_count}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(node_count)]
    for a, b, weight in edges:
        if not (1 <= a <= node_count and 1 <= b <= node_count):
            raise ValueError(f"edge {a}-{b} leaves the graph of {node_count} vertices")
        adjacency[a - 1].append((b - 1, weight))
        adjacency[b - 1].append((a - 1, weight))
    _, previous = _dijkstra(adjacency, 0)
    if previous[node_count - 1] is None:
        return None
    path = []
    node: int | None = node_count - 1
    while node is not None:
        path.append(node + 1)
        node = previous[node]
    return path[::-1]


class _Tokens:
    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


def solve_city_routes(text: str) -> str:
    """Answer route-cost queries between named cities.

    The input holds the number of tests; per test the city count, then for each
    city its name, neighbour count and (neighbour, cost) pairs, then the query
    count and the pairs of city names. Answers come one per line, tests apart by
    a blank line.
    """
    tokens = _Tokens(text)
    blocks = []
    for _ in range(tokens.number()):
        count = tokens.number()
        adjacency: list[list[tuple[int, int]]] = [[] for _ in range(count)]
        names: dict[str, int] = {}
        for city in range(count):
            name = tokens.word()
            for _ in range(tokens.number()):
                neighbour = tokens.number() - 1
                cost = tokens.number()
                if not 0 <= neighbour < count:
                    raise ValueError(f"city {name} names neighbour {neighbour + 1} out of range")
                adjacency[city].append((neighbour, cost))
                adjacency[neighbour].append((city, cost))
            names.setdefault(name, city)
        answers = []
        for _ in range(tokens.number()):
            start, finish = tokens.word(), tokens.word()
            try:
                source, target = names[start], names[finish]
            except KeyError as error:
                raise ValueError(f"unknown city {error.args[0]!r}") from None
            distance = shortest_distances(adjacency, source, target)[target]
            answers.append(str(UNREACHABLE if math.isinf(distance) else distance))
        blocks.append("".join(f"{answer}\n" for answer in answers))
    return "\n".join(blocks)


def solve_path_query(text: str) -> str:
    """Answer a shortest-path query given as 'n m' followed by m lines 'a b w'.

    Returns the path's vertices separated by spaces, or '-1' when there is none.
    """
    tokens = _Tokens(text)
    node_count = tokens.number()
    edge_count = tokens.number()
    edges = [(tokens.number(), tokens.number(), tokens.number()) for _ in range(edge_count)]
    path = shortest_path(node_count, edges)
    return "-1" if path is None else " ".join(map(str, path))