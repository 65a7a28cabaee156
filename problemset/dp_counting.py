"""Counting problems solved by dynamic programming, modulo a large prime."""

from collections import deque
from collections.abc import Iterable, Sequence

__all__ = [
    "MOD",
    "count_array_descriptions",
    "count_ordered_coin_ways",
    "count_coin_combinations",
    "count_towers",
    "count_dice_combinations",
    "count_grid_paths",
    "money_sums",
]

MOD = 1_000_000_007
MAX_TOWER_HEIGHT = 1_000_000


def count_array_descriptions(values: Iterable[int], upper: int) -> int:
    """Count arrays matching ``values`` where unknown entries are ``0``.

    Every entry lies in ``1..upper`` and adjacent entries differ by at most one.
    """
    values = list(values)
    if not values:
        raise ValueError("the array must not be empty")
    if upper < 1:
        raise ValueError("upper bound must be positive")
    for value in values:
        if not 0 <= value <= upper:
            raise ValueError(f"value {value} outside 0..{upper}")

    # Index 0 and upper + 1 are padding that always stays zero.
    first = values[0]
    ways = [0] * (upper + 2)
    if first:
        ways[first] = 1
    else:
        ways[1 : upper + 1] = [1] * upper

    for value in values[1:]:
        nxt = [0] * (upper + 2)
        candidates = range(1, upper + 1) if value == 0 else (value,)
        for j in candidates:
            nxt[j] = (ways[j - 1] + ways[j] + ways[j + 1]) % MOD
        ways = nxt

    last = values[-1]
    return sum(ways) % MOD if last == 0 else ways[last]


def _check_coins(coins: Iterable[int]) -> list[int]:
    coins = list(coins)
    if any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive")
    return coins


def count_ordered_coin_ways(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``."""
    coins = _check_coins(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - coin] for coin in coins if coin <= total) % MOD
    return ways[target]


def count_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count unordered multisets of coins summing to ``target``."""
    coins = _check_coins(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [1] + [0] * target
    for coin in coins:
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def count_towers(height: int) -> int:
    """Count ways to build a tower of width 2 and the given height from blocks."""
    if not 1 <= height <= MAX_TOWER_HEIGHT:
        raise ValueError(f"height must be in 1..{MAX_TOWER_HEIGHT}")
    split, joined = 1, 1
    for _ in range(height - 1):
        split, joined = (4 * split + joined) % MOD, (split + 2 * joined) % MOD
    return (split + joined) % MOD


def count_dice_combinations(total: int) -> int:
    """Count ordered sequences of die throws (1..6) summing to ``total``."""
    if total < 1:
        raise ValueError("total must be positive")
    window = deque([1, 2, 4, 8, 16, 32], maxlen=6)
    if total <= 6:
        return window[total - 1]
    current = 0
    for _ in range(7, total + 1):
        current = sum(window) % MOD
        window.append(current)
    return current


def count_grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths across a square grid avoiding ``*`` traps."""
    size = len(grid)
    if size == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")

    above = [0] * size
    for i, row in enumerate(grid):
        current = []
        left = 0
        for j, (cell, up) in enumerate(zip(row, above)):
            if cell == "*":
                value = 0
            elif i == 0 and j == 0:
                value = 1
            else:
                value = (left + up) % MOD
            current.append(value)
            left = value
        above = current
    return above[-1]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Return, in increasing order, every positive sum a subset of coins makes."""
    reachable = 1
    for coin in coins:
        if coin < 0:
            raise ValueError("coin values must not be negative")
        reachable |= reachable << coin
    return [total for total in range(1, reachable.bit_length()) if reachable >> total & 1]