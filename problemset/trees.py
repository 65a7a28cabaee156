"""Problems on rooted and unrooted trees with nodes numbered from 1."""

from collections import deque
from collections.abc import Iterable, Sequence

__all__ = [
    "count_subordinates",
    "tree_diameter",
    "max_distances",
    "distance_sums",
    "max_matching",
]


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        adjacency[a].append(b)
        adjacency[b].append(a)
        count += 1
    if count != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {count}")
    return adjacency


def _rooted(adjacency: list[list[int]]) -> tuple[list[int], list[int]]:
    """Return the breadth-first order from node 1 and each node's parent."""
    parent = [0] * len(adjacency)
    seen = [False] * len(adjacency)
    seen[1] = True
    order = [1]
    for u in order:
        for v in adjacency[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                order.append(v)
    if len(order) != len(adjacency) - 1:
        raise ValueError("edges do not connect every node")
    return order, parent


def _distances(adjacency: list[list[int]], source: int) -> list[int]:
    distance = [-1] * len(adjacency)
    distance[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if distance[v] < 0:
                distance[v] = distance[u] + 1
                queue.append(v)
    return distance


def _farthest(distance: list[int]) -> int:
    return max(range(1, len(distance)), key=distance.__getitem__)


def _tree(n: int, edges: Iterable[tuple[int, int]]):
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency)
    return adjacency, order, parent


def count_subordinates(bosses: Sequence[int]) -> list[int]:
    """Return each employee's number of subordinates.

    ``bosses[k]`` is the direct boss of employee ``k + 2``; employee 1 is the
    head of the company.
    """
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, 2):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} outside 1..{n}")
        children[boss].append(employee)

    order = [1]
    for u in order:
        order.extend(children[u])
    if len(order) != n:
        raise ValueError("not every employee reports to employee 1")

    counts = [0] * (n + 1)
    for u in reversed(order):
        for v in children[u]:
            counts[u] += counts[v] + 1
    return counts[1:]


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path of the tree."""
    adjacency, _, _ = _tree(n, edges)
    end = _farthest(_distances(adjacency, 1))
    return max(_distances(adjacency, end)[1:])


def max_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each node, the distance to the node farthest from it."""
    adjacency, _, _ = _tree(n, edges)
    first = _farthest(_distances(adjacency, 1))
    from_first = _distances(adjacency, first)
    second = _farthest(from_first)
    from_second = _distances(adjacency, second)
    return [max(a, b) for a, b in zip(from_first[1:], from_second[1:])]


def distance_sums(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each node, the sum of distances to all other nodes."""
    _, order, parent = _tree(n, edges)
    size = [1] * (n + 1)
    below = [0] * (n + 1)
    for u in reversed(order[1:]):
        p = parent[u]
        size[p] += size[u]
        below[p] += below[u] + size[u]

    total = [0] * (n + 1)
    total[1] = below[1]
    for u in order[1:]:
        total[u] = total[parent[u]] + n - 2 * size[u]
    return total[1:]


def max_matching(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of node-disjoint edges in the tree."""
    adjacency, order, parent = _tree(n, edges)
    unmatched = [0] * (n + 1)
    matched = [0] * (n + 1)
    for u in reversed(order):
        children = [v for v in adjacency[u] if v != parent[u]]
        total = sum(max(unmatched[v], matched[v]) for v in children)
        unmatched[u] = total
        matched[u] = max(
            (total + 1 + unmatched[v] - max(unmatched[v], matched[v]) for v in children),
            default=0,
        )
    return max(unmatched[1], matched[1])