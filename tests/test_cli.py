import io

import pytest

from problemset.cli import main
from problemset.dp_counting import count_dice_combinations, count_towers, money_sums
from problemset.dp_optimization import edit_distance, min_coins
from problemset.graphs import build_teams
from problemset.grids import labyrinth_path
from problemset.shortest_paths import all_pairs_shortest
from problemset.sorting import count_apartment_matches, count_distinct


def run(problem, text, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([problem])
    captured = capsys.readouterr()
    return code, captured.out.splitlines(), captured.err


def test_apartments_matches_library(monkeypatch, capsys):
    code, lines, _ = run("apartments", "4 3 5\n60 45 80 60\n30 60 75\n", monkeypatch, capsys)
    assert code == 0
    assert lines == [str(count_apartment_matches([60, 45, 80, 60], [30, 60, 75], 5))]


def test_distinct_numbers(monkeypatch, capsys):
    code, lines, _ = run("distinct-numbers", "5\n2 3 2 2 3\n", monkeypatch, capsys)
    assert code == 0
    assert lines == [str(count_distinct([2, 3, 2, 2, 3]))]


def test_dice_combinations(monkeypatch, capsys):
    code, lines, _ = run("dice-combinations", "10\n", monkeypatch, capsys)
    assert code == 0
    assert lines == [str(count_dice_combinations(10))]


def test_counting_towers_answers_each_query(monkeypatch, capsys):
    code, lines, _ = run("counting-towers", "3\n2\n6\n1337\n", monkeypatch, capsys)
    assert code == 0
    assert lines == [str(count_towers(h)) for h in (2, 6, 1337)]


def test_money_sums_count_matches_listing(monkeypatch, capsys):
    code, lines, _ = run("money-sums", "4\n4 2 5 2\n", monkeypatch, capsys)
    assert code == 0
    sums = money_sums([4, 2, 5, 2])
    assert lines[0] == str(len(sums))
    assert lines[1].split() == [str(s) for s in sums]


def test_minimizing_coins_impossible_prints_minus_one(monkeypatch, capsys):
    code, lines, _ = run("minimizing-coins", "1 3\n2\n", monkeypatch, capsys)
    assert code == 0
    assert min_coins([2], 3) is None
    assert lines == ["-1"]


def test_edit_distance(monkeypatch, capsys):
    code, lines, _ = run("edit-distance", "LOVE\nMOVIE\n", monkeypatch, capsys)
    assert code == 0
    assert lines == [str(edit_distance("LOVE", "MOVIE"))]


def test_building_teams_impossible(monkeypatch, capsys):
    code, lines, _ = run("building-teams", "3 3\n1 2\n2 3\n3 1\n", monkeypatch, capsys)
    assert code == 0
    assert lines == ["IMPOSSIBLE"]


def test_building_teams_split(monkeypatch, capsys):
    text = "5 3\n1 2\n1 3\n4 5\n"
    code, lines, _ = run("building-teams", text, monkeypatch, capsys)
    assert code == 0
    expected = build_teams(5, [(1, 2), (1, 3), (4, 5)])
    assert lines[0].split() == [str(t) for t in expected]


def test_round_trip_prints_closed_cycle(monkeypatch, capsys):
    text = "5 6\n1 3\n1 2\n5 3\n1 5\n2 4\n4 5\n"
    code, lines, _ = run("round-trip", text, monkeypatch, capsys)
    assert code == 0
    cities = lines[1].split()
    assert int(lines[0]) == len(cities)
    assert cities[0] == cities[-1]
    assert len(cities) >= 4


def test_labyrinth_no_path(monkeypatch, capsys):
    code, lines, _ = run("labyrinth", "3 3\nA#.\n###\n..B\n", monkeypatch, capsys)
    assert code == 0
    assert lines == ["NO"]


def test_labyrinth_path(monkeypatch, capsys):
    grid = ["A..", ".#.", "..B"]
    code, lines, _ = run("labyrinth", "3 3\n" + "\n".join(grid) + "\n", monkeypatch, capsys)
    assert code == 0
    path = labyrinth_path(grid)
    assert lines == ["YES", str(len(path)), path]


def test_monsters_player_on_border(monkeypatch, capsys):
    code, lines, _ = run("monsters", "2 2\nA.\n.M\n", monkeypatch, capsys)
    assert code == 0
    assert lines == ["YES", "0"]


def test_cycle_finding_without_negative_cycle(monkeypatch, capsys):
    code, lines, _ = run("cycle-finding", "3 2\n1 2 5\n2 3 1\n", monkeypatch, capsys)
    assert code == 0
    assert lines == ["NO"]


def test_high_score_unbounded(monkeypatch, capsys):
    text = "3 3\n1 2 1\n2 1 1\n2 3 1\n"
    code, lines, _ = run("high-score", text, monkeypatch, capsys)
    assert code == 0
    assert lines == ["-1"]


def test_shortest_routes_ii_queries(monkeypatch, capsys):
    text = "4 3 3\n1 2 5\n1 3 9\n2 3 3\n1 3\n3 1\n1 4\n"
    code, lines, _ = run("shortest-routes-ii", text, monkeypatch, capsys)
    assert code == 0
    table = all_pairs_shortest(4, [(1, 2, 5), (1, 3, 9), (2, 3, 3)])
    assert lines[:2] == [str(table[0][2]), str(table[2][0])]
    assert lines[2] == "-1"


def test_input_file_option(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("5\n2 3 2 2 3\n", encoding="utf-8")
    assert main(["distinct-numbers", "--input", str(source)]) == 0
    assert capsys.readouterr().out.splitlines() == [str(count_distinct([2, 3, 2, 2, 3]))]


def test_missing_input_file(tmp_path, capsys):
    assert main(["distinct-numbers", "-i", str(tmp_path / "absent.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_truncated_input_is_an_error(monkeypatch, capsys):
    code, lines, err = run("apartments", "4 3 5\n60 45\n", monkeypatch, capsys)
    assert code == 1
    assert lines == []
    assert "end of input" in err


def test_non_integer_is_an_error(monkeypatch, capsys):
    code, _, err = run("dice-combinations", "ten\n", monkeypatch, capsys)
    assert code == 1
    assert "'ten'" in err


def test_invalid_grid_row_is_an_error(monkeypatch, capsys):
    code, _, err = run("counting-rooms", "2 3\n...\n..\n", monkeypatch, capsys)
    assert code == 1
    assert "grid row" in err


def test_unknown_problem_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-problem"])
    assert excinfo.value.code == 2