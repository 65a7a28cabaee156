# problemset

Solutions to classic algorithmic problems, written as plain Python functions
that take ordinary lists, tuples and strings and return the answer, plus a
`problemset` command that reads a problem's whitespace separated input and
prints its answer.

The package has no dependencies beyond the standard library.

## Modules

- `problemset.sorting` – two-pointer matching and counting distinct values
  (`count_apartment_matches`, `count_distinct`).
- `problemset.dp_counting` – counting problems solved with dynamic
  programming; large counts are taken modulo `MOD` (10^9 + 7)
  (`count_array_descriptions`, `count_ordered_coin_ways`,
  `count_coin_combinations`, `count_towers`, `count_dice_combinations`,
  `count_grid_paths`, `money_sums`).
- `problemset.dp_optimization` – knapsack, edit distance, longest common
  subsequence and other minimisation or maximisation problems
  (`max_pages`, `edit_distance`, `longest_common_subsequence`, `min_coins`,
  `min_rectangle_cuts`, `min_digit_removals`, `minimal_grid_path`).
- `problemset.trees` – subordinate counts, diameter, distances and maximum
  matching on trees (`count_subordinates`, `tree_diameter`, `max_distances`,
  `distance_sums`, `max_matching`).
- `problemset.grids` – breadth-first search on character grids where `#` is a
  wall (`count_rooms`, `labyrinth_path`, `monsters_escape`).
- `problemset.graphs` – union-find, bipartite split, topological order,
  shortest hop route, cycles and longest route in an acyclic graph
  (`DisjointSet`, `new_roads`, `build_teams`, `course_order`,
  `message_route`, `round_trip`, `directed_round_trip`,
  `longest_flight_route`).
- `problemset.shortest_paths` – Dijkstra, Bellman–Ford and Floyd–Warshall
  based problems (`dijkstra`, `negative_cycle`, `flight_discount`,
  `k_cheapest_routes`, `high_score`, `shortest_routes`,
  `all_pairs_shortest`).
- `problemset.cli` – the command line entry point (`main`).

Nodes of graphs and trees are numbered from 1 to `n`. Edges are tuples of node
numbers, with the weight as the last element where the problem has one.
Functions return `None` where no answer exists (no route, no cycle, no valid
split) and raise `ValueError` on malformed input, such as a node outside
`1..n` or a grid with rows of different lengths.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from problemset.sorting import count_distinct
from problemset.dp_counting import count_dice_combinations
from problemset.dp_optimization import edit_distance
from problemset.trees import tree_diameter

count_distinct([2, 3, 2, 2, 3])                          # 2
count_dice_combinations(3)                                # 4
edit_distance("LOVE", "MOVIE")                            # 2
tree_diameter(5, [(1, 2), (1, 3), (3, 4), (3, 5)])        # 3
```

`DisjointSet` works on any hashable items and creates them on first use:

```python
from problemset.graphs import DisjointSet

sets = DisjointSet()
sets.union("a", "b")        # True: the two were in different sets
sets.union("b", "a")        # False: already together
sets.find("a") == sets.find("b")   # True
```

## Command line

```
problemset PROBLEM [-i FILE]
```

The command reads the problem's input from standard input, or from `FILE`
with `-i`/`--input`, and prints the answer line by line. Input is a stream of
whitespace separated tokens: counts first, then the values, edges or grid rows
they announce. For example:

```
$ echo "5 2 3 2 2 3" | problemset distinct-numbers
2
```

`PROBLEM` is one of:

`apartments`, `array-description`, `book-shop`, `building-roads`,
`building-teams`, `coin-combinations-i`, `coin-combinations-ii`,
`counting-rooms`, `counting-towers`, `course-schedule`, `cycle-finding`,
`dice-combinations`, `distinct-numbers`, `edit-distance`, `flight-discount`,
`flight-routes`, `grid-paths-i`, `high-score`, `labyrinth`,
`longest-common-subsequence`, `longest-flight-route`, `message-route`,
`minimal-grid-path`, `minimizing-coins`, `money-sums`, `monsters`,
`rectangle-cutting`, `removing-digits`, `round-trip`, `round-trip-ii`,
`shortest-routes-i`, `shortest-routes-ii`, `subordinates`, `tree-diameter`,
`tree-distances-i`, `tree-distances-ii`, `tree-matching`.

Where a problem has no answer the command prints `IMPOSSIBLE`, `NO` or `-1`,
as suits the problem. On malformed input, or a file that cannot be read, it
prints an error to standard error and exits with status 1.