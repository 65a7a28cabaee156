import pytest

from problemset.trees import (
    count_subordinates,
    distance_sums,
    max_distances,
    max_matching,
    tree_diameter,
)

EXAMPLE_EDGES = [(1, 2), (1, 3), (3, 4), (3, 5)]


def _path(n):
    return [(i, i + 1) for i in range(1, n)]


def _star(n):
    return [(1, i) for i in range(2, n + 1)]


def _relabel(n, edges):
    return [(n + 1 - a, n + 1 - b) for a, b in edges]


def test_subordinates_example():
    assert count_subordinates([1, 1, 2, 3]) == [4, 1, 1, 0, 0]


@pytest.mark.parametrize("n", [1, 2, 6])
def test_subordinates_chain(n):
    bosses = list(range(1, n))
    assert count_subordinates(bosses) == list(range(n - 1, -1, -1))


def test_subordinates_flat():
    result = count_subordinates([1] * 7)
    assert result[0] == 7
    assert result[1:] == [0] * 7


def test_subordinates_rejects_unknown_boss():
    with pytest.raises(ValueError):
        count_subordinates([1, 9])


def test_subordinates_rejects_cycle():
    with pytest.raises(ValueError):
        count_subordinates([3, 2])


def test_diameter_example():
    assert tree_diameter(5, EXAMPLE_EDGES) == 3


@pytest.mark.parametrize("n", [1, 2, 7])
def test_diameter_path(n):
    assert tree_diameter(n, _path(n)) == n - 1


def test_diameter_relabel_invariant():
    assert tree_diameter(5, _relabel(5, EXAMPLE_EDGES)) == tree_diameter(5, EXAMPLE_EDGES)


def test_diameter_rejects_wrong_edge_count():
    with pytest.raises(ValueError):
        tree_diameter(4, [(1, 2)])


def test_diameter_rejects_node_out_of_range():
    with pytest.raises(ValueError):
        tree_diameter(3, [(1, 2), (2, 4)])


def test_diameter_rejects_disconnected():
    with pytest.raises(ValueError):
        tree_diameter(4, [(1, 2), (2, 1), (3, 4)])


@pytest.mark.parametrize("edges,n", [(EXAMPLE_EDGES, 5), (_path(6), 6), (_star(5), 5)])
def test_max_distances_peak_is_diameter(edges, n):
    result = max_distances(n, edges)
    assert len(result) == n
    assert max(result) == tree_diameter(n, edges)
    assert 2 * min(result) >= max(result)


def test_max_distances_path():
    n = 6
    assert max_distances(n, _path(n)) == [max(i - 1, n - i) for i in range(1, n + 1)]


def test_max_distances_single_node():
    assert max_distances(1, []) == [0]


def test_distance_sums_example():
    assert distance_sums(5, EXAMPLE_EDGES) == [6, 9, 5, 8, 8]


def test_distance_sums_relabel():
    n = 5
    original = distance_sums(n, EXAMPLE_EDGES)
    assert distance_sums(n, _relabel(n, EXAMPLE_EDGES)) == original[::-1]


def test_distance_sums_star():
    n = 6
    result = distance_sums(n, _star(n))
    assert result[0] == n - 1
    assert result[1:] == [1 + 2 * (n - 2)] * (n - 1)


def test_distance_sums_total_is_even_and_bounded():
    n = 7
    result = distance_sums(n, _path(n))
    assert sum(result) % 2 == 0
    assert all(value >= n - 1 for value in result)


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_matching_path(n):
    assert max_matching(n, _path(n)) == n // 2


def test_matching_star():
    assert max_matching(6, _star(6)) == 1


def test_matching_bounded():
    assert max_matching(5, EXAMPLE_EDGES) <= 5 // 2
    assert max_matching(5, EXAMPLE_EDGES) == max_matching(5, _relabel(5, EXAMPLE_EDGES))


def test_matching_rejects_zero_nodes():
    with pytest.raises(ValueError):
        max_matching(0, [])