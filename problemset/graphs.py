"""Problems on graphs whose nodes are numbered from 1 to ``n``."""

from collections import deque
from collections.abc import Hashable, Iterable

__all__ = [
    "DisjointSet",
    "new_roads",
    "build_teams",
    "course_order",
    "message_route",
    "round_trip",
    "directed_round_trip",
    "longest_flight_route",
]

Edge = tuple[int, int]


class DisjointSet:
    """Union-find over arbitrary hashable items, created on first use."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {item: item for item in items}

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of ``item``'s set, compressing the path."""
        parent = self._parent
        root = parent.setdefault(item, item)
        while parent[root] != root:
            root = parent[root]
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, first: Hashable, second: Hashable) -> bool:
        """Merge the sets of both items; return whether they were apart."""
        a = self.find(first)
        b = self.find(second)
        if a == b:
            return False
        self._parent[a] = b
        return True


def _check_nodes(n: int) -> None:
    if n < 1:
        raise ValueError("a graph needs at least one node")


def _adjacency(n: int, edges: Iterable[Edge], directed: bool) -> list[list[int]]:
    _check_nodes(n)
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a node outside 1..{n}")
        adjacency[a].append(b)
        if not directed:
            adjacency[b].append(a)
    return adjacency


def new_roads(n: int, roads: Iterable[Edge]) -> list[Edge]:
    """Return the fewest new roads that connect every city.

    Each new road joins the representatives of two neighbouring components
    once representatives are sorted.
    """
    _check_nodes(n)
    cities = DisjointSet(range(1, n + 1))
    for a, b in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) has a city outside 1..{n}")
        cities.union(a, b)

    roots = sorted(cities.find(city) for city in range(1, n + 1))
    built = []
    last = roots[0]
    for root in roots[1:]:
        if root != last:
            built.append((last, root))
            last = root
    return built


def build_teams(n: int, friendships: Iterable[Edge]) -> list[int] | None:
    """Split pupils into teams 1 and 2 so no friends share a team.

    Returns each pupil's team in order, or ``None`` when no split exists.
    """
    graph = _adjacency(n, friendships, directed=False)
    team = [0] * (n + 1)
    for start in range(1, n + 1):
        if team[start]:
            continue
        team[start] = 1
        queue = deque([start])
        while queue:
            a = queue.popleft()
            other = 2 if team[a] == 1 else 1
            for b in graph[a]:
                if team[b] == team[a]:
                    return None
                if not team[b]:
                    team[b] = other
                    queue.append(b)
    return team[1:]


def course_order(n: int, requirements: Iterable[Edge]) -> list[int] | None:
    """Order courses so that for each ``(a, b)`` course ``a`` precedes ``b``.

    Returns ``None`` when the requirements are cyclic.
    """
    prerequisites = _adjacency(n, ((b, a) for a, b in requirements), directed=True)
    state = [0] * (n + 1)
    order: list[int] = []
    for start in range(1, n + 1):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(prerequisites[start]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if state[v] == 1:
                    return None
                if state[v] == 0:
                    state[v] = 1
                    stack.append((v, iter(prerequisites[v])))
                    break
            else:
                state[u] = 2
                order.append(u)
                stack.pop()
    return order


def message_route(n: int, connections: Iterable[Edge]) -> list[int] | None:
    """Return a shortest route of computers from 1 to ``n``, or ``None``."""
    graph = _adjacency(n, connections, directed=False)
    parent: list[int | None] = [None] * (n + 1)
    visited = [False] * (n + 1)
    visited[1] = True
    queue = deque([1])
    while queue:
        a = queue.popleft()
        if a == n:
            break
        for b in graph[a]:
            if not visited[b]:
                visited[b] = True
                parent[b] = a
                queue.append(b)
    else:
        return None

    route = []
    node: int | None = n
    while node is not None:
        route.append(node)
        node = parent[node]
    route.reverse()
    return route


def _close_cycle(parent: list[int], u: int, v: int) -> list[int]:
    """Build the cycle found by the edge from ``u`` back to its ancestor ``v``."""
    cycle = [v]
    node = u
    while node != v:
        cycle.append(node)
        node = parent[node]
    cycle.append(v)
    cycle.reverse()
    return cycle


def round_trip(n: int, roads: Iterable[Edge]) -> list[int] | None:
    """Return a cycle in an undirected graph, first city repeated at the end."""
    graph = _adjacency(n, roads, directed=False)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, 0, iter(graph[start]))]
        while stack:
            u, came_from, pending = stack[-1]
            for v in pending:
                if v == came_from:
                    continue
                if visited[v]:
                    return _close_cycle(parent, u, v)
                visited[v] = True
                parent[v] = u
                stack.append((v, u, iter(graph[v])))
                break
            else:
                stack.pop()
    return None


def directed_round_trip(n: int, flights: Iterable[Edge]) -> list[int] | None:
    """Return a cycle following flight directions, first city repeated at the end."""
    graph = _adjacency(n, flights, directed=True)
    state = [0] * (n + 1)
    parent = [0] * (n + 1)
    for start in range(1, n + 1):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(graph[start]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if state[v] == 0:
                    state[v] = 1
                    parent[v] = u
                    stack.append((v, iter(graph[v])))
                    break
                if state[v] == 1:
                    return _close_cycle(parent, u, v)
            else:
                state[u] = 2
                stack.pop()
    return None


def longest_flight_route(n: int, flights: Iterable[Edge]) -> list[int] | None:
    """Return the route from 1 to ``n`` visiting the most cities in an acyclic graph.

    Returns ``None`` when ``n`` cannot be reached from 1.
    """
    graph = _adjacency(n, flights, directed=True)
    visited = [False] * (n + 1)
    finished: list[int] = []
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(graph[v])))
                    break
            else:
                finished.append(u)
                stack.pop()

    length: list[int | None] = [None] * (n + 1)
    previous = [0] * (n + 1)
    length[1] = 0
    for u in reversed(finished):
        if length[u] is None:
            continue
        for v in graph[u]:
            if length[v] is None or length[u] + 1 > length[v]:
                length[v] = length[u] + 1
                previous[v] = u

    if length[n] is None:
        return None
    route = []
    node = n
    while node:
        route.append(node)
        node = previous[node]
    route.reverse()
    return route