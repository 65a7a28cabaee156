"""Command line entry point: solve one problem from whitespace separated input."""

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from problemset.dp_counting import (
    count_array_descriptions,
    count_coin_combinations,
    count_dice_combinations,
    count_grid_paths,
    count_ordered_coin_ways,
    count_towers,
    money_sums,
)
from problemset.dp_optimization import (
    edit_distance,
    longest_common_subsequence,
    max_pages,
    min_coins,
    min_digit_removals,
    min_rectangle_cuts,
    minimal_grid_path,
)
from problemset.graphs import (
    build_teams,
    course_order,
    directed_round_trip,
    longest_flight_route,
    message_route,
    new_roads,
    round_trip,
)
from problemset.grids import count_rooms, labyrinth_path, monsters_escape
from problemset.shortest_paths import (
    all_pairs_shortest,
    flight_discount,
    high_score,
    k_cheapest_routes,
    negative_cycle,
    shortest_routes,
)
from problemset.sorting import count_apartment_matches, count_distinct
from problemset.trees import (
    count_subordinates,
    distance_sums,
    max_distances,
    max_matching,
    tree_diameter,
)

__all__ = ["main"]


class _Tokens:
    """Whitespace separated input, consumed one token at a time."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]

    def triples(self, count: int) -> list[tuple[int, int, int]]:
        return [(self.number(), self.number(), self.number()) for _ in range(count)]

    def grid(self, height: int, width: int) -> list[str]:
        rows = self.words(height)
        for row in rows:
            if len(row) != width:
                raise ValueError(f"grid row {row!r} does not have {width} cells")
        return rows


Handler = Callable[[_Tokens], Iterable[str]]
_PROBLEMS: dict[str, Handler] = {}


def _problem(name: str) -> Callable[[Handler], Handler]:
    def register(handler: Handler) -> Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


def _joined(values: Iterable) -> str:
    return " ".join(str(value) for value in values)


def _counted(values: list | None, missing: str) -> list[str]:
    """Output a sequence as its length followed by its items."""
    if values is None:
        return [missing]
    return [str(len(values)), _joined(values)]


def _tree_edges(tokens: _Tokens) -> tuple[int, list[tuple[int, int]]]:
    n = tokens.number()
    return n, tokens.pairs(max(n - 1, 0))


def _graph(tokens: _Tokens) -> tuple[int, list[tuple[int, int]]]:
    n, m = tokens.numbers(2)
    return n, tokens.pairs(m)


def _weighted_graph(tokens: _Tokens) -> tuple[int, list[tuple[int, int, int]]]:
    n, m = tokens.numbers(2)
    return n, tokens.triples(m)


@_problem("apartments")
def _apartments(tokens: _Tokens) -> list[str]:
    n, m, k = tokens.numbers(3)
    applicants = tokens.numbers(n)
    apartments = tokens.numbers(m)
    return [str(count_apartment_matches(applicants, apartments, k))]


@_problem("distinct-numbers")
def _distinct_numbers(tokens: _Tokens) -> list[str]:
    n = tokens.number()
    return [str(count_distinct(tokens.numbers(n)))]


@_problem("array-description")
def _array_description(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    return [str(count_array_descriptions(tokens.numbers(n), m))]


@_problem("coin-combinations-i")
def _coin_combinations_i(tokens: _Tokens) -> list[str]:
    n, x = tokens.numbers(2)
    return [str(count_ordered_coin_ways(tokens.numbers(n), x))]


@_problem("coin-combinations-ii")
def _coin_combinations_ii(tokens: _Tokens) -> list[str]:
    n, x = tokens.numbers(2)
    return [str(count_coin_combinations(tokens.numbers(n), x))]


@_problem("counting-towers")
def _counting_towers(tokens: _Tokens) -> list[str]:
    t = tokens.number()
    return [str(count_towers(height)) for height in tokens.numbers(t)]


@_problem("dice-combinations")
def _dice_combinations(tokens: _Tokens) -> list[str]:
    return [str(count_dice_combinations(tokens.number()))]


@_problem("grid-paths-i")
def _grid_paths(tokens: _Tokens) -> list[str]:
    n = tokens.number()
    return [str(count_grid_paths(tokens.grid(n, n)))]


@_problem("money-sums")
def _money_sums(tokens: _Tokens) -> list[str]:
    n = tokens.number()
    return _counted(money_sums(tokens.numbers(n)), "")


@_problem("book-shop")
def _book_shop(tokens: _Tokens) -> list[str]:
    n, x = tokens.numbers(2)
    prices = tokens.numbers(n)
    pages = tokens.numbers(n)
    return [str(max_pages(x, prices, pages))]


@_problem("edit-distance")
def _edit_distance(tokens: _Tokens) -> list[str]:
    first, second = tokens.words(2)
    return [str(edit_distance(first, second))]


@_problem("longest-common-subsequence")
def _longest_common_subsequence(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    first = tokens.numbers(n)
    second = tokens.numbers(m)
    return _counted(longest_common_subsequence(first, second), "")


@_problem("minimizing-coins")
def _minimizing_coins(tokens: _Tokens) -> list[str]:
    n, x = tokens.numbers(2)
    best = min_coins(tokens.numbers(n), x)
    return [str(-1 if best is None else best)]


@_problem("rectangle-cutting")
def _rectangle_cutting(tokens: _Tokens) -> list[str]:
    a, b = tokens.numbers(2)
    return [str(min_rectangle_cuts(a, b))]


@_problem("removing-digits")
def _removing_digits(tokens: _Tokens) -> list[str]:
    return [str(min_digit_removals(tokens.number()))]


@_problem("minimal-grid-path")
def _minimal_grid_path(tokens: _Tokens) -> list[str]:
    n = tokens.number()
    return [minimal_grid_path(tokens.grid(n, n))]


@_problem("subordinates")
def _subordinates(tokens: _Tokens) -> list[str]:
    n = tokens.number()
    return [_joined(count_subordinates(tokens.numbers(max(n - 1, 0))))]


@_problem("tree-diameter")
def _tree_diameter(tokens: _Tokens) -> list[str]:
    return [str(tree_diameter(*_tree_edges(tokens)))]


@_problem("tree-distances-i")
def _tree_distances_i(tokens: _Tokens) -> list[str]:
    return [_joined(max_distances(*_tree_edges(tokens)))]


@_problem("tree-distances-ii")
def _tree_distances_ii(tokens: _Tokens) -> list[str]:
    return [_joined(distance_sums(*_tree_edges(tokens)))]


@_problem("tree-matching")
def _tree_matching(tokens: _Tokens) -> list[str]:
    return [str(max_matching(*_tree_edges(tokens)))]


@_problem("counting-rooms")
def _counting_rooms(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    return [str(count_rooms(tokens.grid(n, m)))]


@_problem("labyrinth")
def _labyrinth(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    path = labyrinth_path(tokens.grid(n, m))
    if path is None:
        return ["NO"]
    return ["YES", str(len(path)), path]


@_problem("monsters")
def _monsters(tokens: _Tokens) -> list[str]:
    n, m = tokens.numbers(2)
    path = monsters_escape(tokens.grid(n, m))
    if path is None:
        return ["NO"]
    return ["YES", str(len(path))] + ([path] if path else [])


@_problem("building-roads")
def _building_roads(tokens: _Tokens) -> list[str]:
    roads = new_roads(*_graph(tokens))
    return [str(len(roads))] + [f"{a} {b}" for a, b in roads]


@_problem("building-teams")
def _building_teams(tokens: _Tokens) -> list[str]:
    teams = build_teams(*_graph(tokens))
    return ["IMPOSSIBLE"] if teams is None else [_joined(teams)]


@_problem("course-schedule")
def _course_schedule(tokens: _Tokens) -> list[str]:
    order = course_order(*_graph(tokens))
    return ["IMPOSSIBLE"] if order is None else [_joined(order)]


@_problem("message-route")
def _message_route(tokens: _Tokens) -> list[str]:
    return _counted(message_route(*_graph(tokens)), "IMPOSSIBLE")


@_problem("round-trip")
def _round_trip(tokens: _Tokens) -> list[str]:
    return _counted(round_trip(*_graph(tokens)), "IMPOSSIBLE")


@_problem("round-trip-ii")
def _round_trip_ii(tokens: _Tokens) -> list[str]:
    return _counted(directed_round_trip(*_graph(tokens)), "IMPOSSIBLE")


@_problem("longest-flight-route")
def _longest_flight_route(tokens: _Tokens) -> list[str]:
    return _counted(longest_flight_route(*_graph(tokens)), "IMPOSSIBLE")


@_problem("cycle-finding")
def _cycle_finding(tokens: _Tokens) -> list[str]:
    cycle = negative_cycle(*_weighted_graph(tokens))
    return ["NO"] if cycle is None else ["YES", _joined(cycle)]


@_problem("flight-discount")
def _flight_discount(tokens: _Tokens) -> list[str]:
    n, flights = _weighted_graph(tokens)
    cost = flight_discount(n, flights)
    if cost is None:
        raise ValueError(f"city {n} cannot be reached from city 1")
    return [str(cost)]


@_problem("flight-routes")
def _flight_routes(tokens: _Tokens) -> list[str]:
    n, m, k = tokens.numbers(3)
    return [_joined(k_cheapest_routes(n, tokens.triples(m), k))]


@_problem("high-score")
def _high_score(tokens: _Tokens) -> list[str]:
    score = high_score(*_weighted_graph(tokens))
    return [str(-1 if score is None else score)]


@_problem("shortest-routes-i")
def _shortest_routes_i(tokens: _Tokens) -> list[str]:
    distances = shortest_routes(*_weighted_graph(tokens))
    return [_joined(-1 if d is None else d for d in distances)]


@_problem("shortest-routes-ii")
def _shortest_routes_ii(tokens: _Tokens) -> list[str]:
    n, m, q = tokens.numbers(3)
    distance = all_pairs_shortest(n, tokens.triples(m))
    answers = []
    for a, b in tokens.pairs(q):
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"query ({a}, {b}) has a node outside 1..{n}")
        d = distance[a - 1][b - 1]
        answers.append(str(-1 if d is None else d))
    return answers


def main(argv: list[str] | None = None) -> int:
    """Solve the named problem from standard input or a file; return the exit code."""
    parser = argparse.ArgumentParser(
        prog="problemset",
        description="Read a problem's input and print its answer.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    parser.add_argument("-i", "--input", help="read input from this file instead of stdin")
    args = parser.parse_args(argv)

    try:
        if args.input:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
        lines = list(_PROBLEMS[args.problem](_Tokens(text)))
    except (OSError, ValueError) as error:
        print(f"{parser.prog}: error: {error}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0