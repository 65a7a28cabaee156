"""Breadth-first search problems on rectangular character grids."""

from collections import deque
from collections.abc import Iterable, Sequence

__all__ = ["count_rooms", "labyrinth_path", "monsters_escape"]

WALL = "#"

# Neighbour offset and the move that leads from that neighbour back here,
# in the order in which path reconstruction prefers them.
_BACK_STEPS = ((-1, 0, "D"), (1, 0, "U"), (0, -1, "R"), (0, 1, "L"))

Cell = tuple[int, int]


def _rows(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _find(rows: list[str], mark: str) -> list[Cell]:
    return [
        (x, y) for x, row in enumerate(rows) for y, cell in enumerate(row) if cell == mark
    ]


def _neighbours(rows: list[str], x: int, y: int):
    height, width = len(rows), len(rows[0])
    for dx, dy, _ in _BACK_STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < height and 0 <= ny < width:
            yield nx, ny


def _distances(rows: list[str], sources: Iterable[Cell]) -> list[list[int | None]]:
    """Return the step distance from the nearest source to every open cell."""
    distance: list[list[int | None]] = [[None] * len(rows[0]) for _ in rows]
    queue: deque[Cell] = deque()
    for x, y in sources:
        if distance[x][y] is None:
            distance[x][y] = 0
            queue.append((x, y))
    while queue:
        x, y = queue.popleft()
        step = distance[x][y] + 1
        for nx, ny in _neighbours(rows, x, y):
            if distance[nx][ny] is None and rows[nx][ny] != WALL:
                distance[nx][ny] = step
                queue.append((nx, ny))
    return distance


def _trace(distance: list[list[int | None]], end: Cell) -> str:
    """Walk back from ``end`` to distance zero and return the forward moves."""
    height, width = len(distance), len(distance[0])
    x, y = end
    remaining = distance[x][y]
    moves = []
    while remaining > 0:
        remaining -= 1
        for dx, dy, move in _BACK_STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < height and 0 <= ny < width and distance[nx][ny] == remaining:
                moves.append(move)
                x, y = nx, ny
                break
    moves.reverse()
    return "".join(moves)


def count_rooms(grid: Sequence[str]) -> int:
    """Return the number of 4-connected regions of non-wall cells."""
    rows = _rows(grid)
    seen: set[Cell] = set()
    rooms = 0
    for x, row in enumerate(rows):
        for y, cell in enumerate(row):
            if cell == WALL or (x, y) in seen:
                continue
            rooms += 1
            seen.add((x, y))
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for nx, ny in _neighbours(rows, cx, cy):
                    if rows[nx][ny] != WALL and (nx, ny) not in seen:
                        seen.add((nx, ny))
                        stack.append((nx, ny))
    return rooms


def labyrinth_path(grid: Sequence[str]) -> str | None:
    """Return a shortest move string (U/D/L/R) from ``A`` to ``B``, or ``None``."""
    rows = _rows(grid)
    starts = _find(rows, "A")
    ends = _find(rows, "B")
    if not starts:
        raise ValueError("grid has no start cell 'A'")
    if not ends:
        raise ValueError("grid has no end cell 'B'")
    distance = _distances(rows, [starts[-1]])
    bx, by = ends[-1]
    if distance[bx][by] is None:
        return None
    return _trace(distance, (bx, by))


def monsters_escape(grid: Sequence[str]) -> str | None:
    """Return moves taking ``A`` to a border cell safely from every ``M``.

    An exit is a border floor cell that the player reaches strictly before any
    monster can. Returns an empty string when the player already stands on the
    border and ``None`` when no exit is safe.
    """
    rows = _rows(grid)
    players = _find(rows, "A")
    if not players:
        raise ValueError("grid has no player cell 'A'")
    player = players[0]
    height, width = len(rows), len(rows[0])

    def on_border(x: int, y: int) -> bool:
        return x in (0, height - 1) or y in (0, width - 1)

    if on_border(*player):
        return ""

    exits = [
        (x, y)
        for x, row in enumerate(rows)
        for y, cell in enumerate(row)
        if cell == "." and on_border(x, y)
    ]
    monster_distance = _distances(rows, _find(rows, "M"))
    player_distance = _distances(rows, [player])

    for x, y in exits:
        mine = player_distance[x][y]
        theirs = monster_distance[x][y]
        if mine is None or (theirs is not None and mine >= theirs):
            continue
        return _trace(player_distance, (x, y))
    return None