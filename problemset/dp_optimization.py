"""Optimisation problems solved by dynamic programming."""

from collections.abc import Iterable, Sequence
from itertools import chain
from math import inf

__all__ = [
    "max_pages",
    "edit_distance",
    "longest_common_subsequence",
    "min_coins",
    "min_rectangle_cuts",
    "min_digit_removals",
    "minimal_grid_path",
]


def max_pages(budget: int, prices: Iterable[int], pages: Iterable[int]) -> int:
    """Return the most pages obtainable by buying each book at most once."""
    prices = list(prices)
    pages = list(pages)
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("budget must not be negative")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")

    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        # Spending from high to low keeps every book usable only once.
        for spend in range(budget, price - 1, -1):
            candidate = best[spend - price] + count
            if candidate > best[spend]:
                best[spend] = candidate
    return best[budget]


def edit_distance(first: str, second: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, 1):
        current = [i]
        for j, b in enumerate(second, 1):
            current.append(
                min(current[j - 1] + 1, previous[j] + 1, previous[j - 1] + (a != b))
            )
        previous = current
    return previous[-1]


def longest_common_subsequence(first: Sequence, second: Sequence) -> list:
    """Return one longest sequence that is a subsequence of both inputs."""
    first = list(first)
    second = list(second)
    table = [[0] * (len(second) + 1)]
    for a in first:
        above = table[-1]
        row = [0]
        for j, b in enumerate(second, 1):
            row.append(max(above[j], row[j - 1], above[j - 1] + (a == b)))
        table.append(row)

    i, j = len(first), len(second)
    common = []
    while i and j:
        if first[i - 1] == second[j - 1]:
            common.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    common.reverse()
    return common


def min_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or ``None`` if impossible."""
    coins = list(coins)
    if any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive")
    if target < 1:
        raise ValueError("target must be positive")

    best = [inf] * (target + 1)
    for coin in coins:
        if coin <= target:
            best[coin] = 1
    for total in range(1, target + 1):
        for coin in coins:
            if coin < total:
                best[total] = min(best[total], best[total - coin] + 1)
    return None if best[target] == inf else int(best[target])


def min_rectangle_cuts(width: int, height: int) -> int:
    """Return the fewest straight cuts splitting a rectangle into squares."""
    if width < 1 or height < 1:
        raise ValueError("sides must be positive")

    cuts = [[0] * (height + 1) for _ in range(width + 1)]
    for i in range(1, width + 1):
        for j in range(1, height + 1):
            if i == j:
                continue
            across = (cuts[i][k] + cuts[i][j - k] for k in range(1, j // 2 + 1))
            along = (cuts[k][j] + cuts[i - k][j] for k in range(1, i // 2 + 1))
            cuts[i][j] = 1 + min(chain(across, along))
    return cuts[width][height]


def min_digit_removals(number: int) -> int:
    """Return the fewest steps to reach zero by subtracting one of the digits."""
    if number < 1:
        raise ValueError("number must be positive")
    steps = [0] * (number + 1)
    for value in range(1, number + 1):
        steps[value] = 1 + min(
            steps[value - int(digit)] for digit in str(value) if digit != "0"
        )
    return steps[number]


def minimal_grid_path(grid: Sequence[str]) -> str:
    """Return the smallest string read along a right/down path of a square grid."""
    size = len(grid)
    if size == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")

    frontier = {(0, 0)}
    letters = [grid[0][0]]
    for _ in range(2 * size - 2):
        candidates = {
            (x + dx, y + dy)
            for x, y in frontier
            for dx, dy in ((1, 0), (0, 1))
            if x + dx < size and y + dy < size
        }
        smallest = min(grid[x][y] for x, y in candidates)
        frontier = {(x, y) for x, y in candidates if grid[x][y] == smallest}
        letters.append(smallest)
    return "".join(letters)