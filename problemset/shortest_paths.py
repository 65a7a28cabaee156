"""Shortest and longest path problems on weighted graphs with nodes 1..n."""

import heapq
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from math import inf

__all__ = [
    "dijkstra",
    "negative_cycle",
    "flight_discount",
    "k_cheapest_routes",
    "high_score",
    "shortest_routes",
    "all_pairs_shortest",
]

WeightedEdge = tuple[int, int, int]
Adjacency = list[list[tuple[int, int]]]


def _check_nodes(n: int) -> None:
    if n < 1:
        raise ValueError("a graph needs at least one node")


def _edges(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    _check_nodes(n)
    checked = []
    for a, b, w in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        checked.append((a, b, w))
    return checked


def _adjacency(
    n: int, edges: Iterable[WeightedEdge], reverse: bool = False
) -> Adjacency:
    adjacency: Adjacency = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        if reverse:
            adjacency[b].append((a, w))
        else:
            adjacency[a].append((b, w))
    return adjacency


def _reach(adjacency: Adjacency, starts: Iterable[int]) -> set[int]:
    """Return the start nodes and every node reachable from them."""
    seen = set(starts)
    queue = deque(seen)
    while queue:
        u = queue.popleft()
        for v, _ in adjacency[u]:
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return seen


def dijkstra(
    n: int,
    adjacency: Mapping[int, Iterable[tuple[int, int]]] | Sequence[Iterable[tuple[int, int]]],
    source: int,
) -> dict[int, int]:
    """Return the shortest distance from ``source`` to every reachable node.

    ``adjacency`` maps each node to its ``(neighbour, weight)`` pairs; a list
    indexed by node works as well. Weights must not be negative.
    """
    _check_nodes(n)
    if not 1 <= source <= n:
        raise ValueError(f"source {source} outside 1..{n}")

    def neighbours(u: int) -> Iterable[tuple[int, int]]:
        if isinstance(adjacency, Mapping):
            return adjacency.get(u, ())
        return adjacency[u]

    distance = {source: 0}
    done: set[int] = set()
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if u in done:
            continue
        done.add(u)
        for v, w in neighbours(u):
            if w < 0:
                raise ValueError(f"edge ({u}, {v}) has negative weight {w}")
            if not 1 <= v <= n:
                raise ValueError(f"node {v} outside 1..{n}")
            candidate = d + w
            if v not in distance or candidate < distance[v]:
                distance[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return distance


def shortest_routes(n: int, flights: Iterable[WeightedEdge]) -> list[int | None]:
    """Return the shortest distance from node 1 to each node, ``None`` if unreachable."""
    edges = _edges(n, flights)
    distance = dijkstra(n, _adjacency(n, edges), 1)
    return [distance.get(v) for v in range(1, n + 1)]


def flight_discount(n: int, flights: Iterable[WeightedEdge]) -> int | None:
    """Return the cheapest trip from 1 to ``n`` when one flight's price is halved.

    The halved price is rounded down. Returns ``None`` when ``n`` is unreachable.
    """
    edges = _edges(n, flights)
    from_start = dijkstra(n, _adjacency(n, edges), 1)
    to_end = dijkstra(n, _adjacency(n, edges, reverse=True), n)
    costs = (
        from_start[a] + to_end[b] + w // 2
        for a, b, w in edges
        if a in from_start and b in to_end
    )
    return min(costs, default=None)


def k_cheapest_routes(n: int, flights: Iterable[WeightedEdge], k: int) -> list[int]:
    """Return the prices of the ``k`` cheapest routes from 1 to ``n``, ascending.

    Routes may revisit cities; fewer than ``k`` prices come back when fewer
    routes exist.
    """
    if k < 1:
        raise ValueError("k must be positive")
    edges = _edges(n, flights)
    if any(w < 0 for _, _, w in edges):
        raise ValueError("flight prices must not be negative")
    adjacency = _adjacency(n, edges)

    found: list[list[int]] = [[] for _ in range(n + 1)]
    heap = [(0, 1)]
    while heap:
        price, u = heapq.heappop(heap)
        if len(found[u]) >= k:
            continue
        found[u].append(price)
        for v, w in adjacency[u]:
            if len(found[v]) < k:
                heapq.heappush(heap, (price + w, v))
    return found[n]


def negative_cycle(n: int, edges: Iterable[WeightedEdge]) -> list[int] | None:
    """Return a cycle of negative total weight, first node repeated at the end.

    Cycles are found anywhere in the graph, not only where node 1 reaches.
    Returns ``None`` when there is none.
    """
    checked = _edges(n, edges)
    distance = [0] * (n + 1)
    parent = [0] * (n + 1)
    last: int | None = None
    for _ in range(n):
        last = None
        for a, b, w in checked:
            if distance[a] + w < distance[b]:
                distance[b] = distance[a] + w
                parent[b] = a
                last = a
    if last is None:
        return None

    node = last
    for _ in range(n):
        node = parent[node]

    cycle = [node]
    current = parent[node]
    while current != node:
        cycle.append(current)
        current = parent[current]
    cycle.append(node)
    cycle.reverse()
    return cycle


def high_score(n: int, tunnels: Iterable[WeightedEdge]) -> int | None:
    """Return the largest score of a walk from room 1 to room ``n``.

    Returns ``None`` when the score can be made arbitrarily large; raises
    ``ValueError`` when room ``n`` cannot be reached.
    """
    edges = _edges(n, tunnels)
    score = [-inf] * (n + 1)
    score[1] = 0
    for _ in range(n - 1):
        for a, b, x in edges:
            if score[a] + x > score[b]:
                score[b] = score[a] + x

    looping: set[int] = set()
    for a, b, x in edges:
        if score[a] + x > score[b]:
            looping.update((a, b))

    if score[n] == -inf:
        raise ValueError(f"room {n} cannot be reached from room 1")

    if looping:
        forward = _adjacency(n, edges)
        backward = _adjacency(n, edges, reverse=True)
        from_start = _reach(forward, (v for v, _ in forward[1]))
        to_end = _reach(backward, (n,))
        if looping & from_start & to_end:
            return None
    return int(score[n])


def all_pairs_shortest(n: int, roads: Iterable[WeightedEdge]) -> list[list[int | None]]:
    """Return shortest distances between all pairs over two-way roads.

    Entry ``[a - 1][b - 1]`` holds the distance between nodes ``a`` and ``b``,
    or ``None`` when they are not connected.
    """
    edges = _edges(n, roads)
    distance: list[list[float]] = [[inf] * n for _ in range(n)]
    for i, row in enumerate(distance):
        row[i] = 0
    for a, b, w in edges:
        i, j = a - 1, b - 1
        best = min(distance[i][j], w)
        distance[i][j] = distance[j][i] = best

    for k in range(n):
        through = distance[k]
        for u, row in enumerate(distance):
            to_k = row[k]
            if to_k == inf:
                continue
            distance[u] = [min(direct, to_k + onward) for direct, onward in zip(row, through)]

    return [[None if d == inf else int(d) for d in row] for row in distance]