import pytest

from yulepuzzles import day01, day06, day15
from yulepuzzles.cli import main, run_day

DAY1 = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"

DAY15 = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

DAY6 = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_run_day_one_reports_both_parts():
    assert list(run_day(1, DAY1)) == [
        ("Day 1 Distance", day01.part1(DAY1)),
        ("Day 1 Similarity", day01.part2(DAY1)),
    ]


def test_run_day_six_reports_only_first_part():
    assert list(run_day(6, DAY6)) == [("Day 6 Guard Map", day06.part1(DAY6))]


def test_run_day_fifteen_labels():
    assert list(run_day(15, DAY15)) == [
        ("Day 15 Warehouse Woes", day15.part1(DAY15)),
        ("Day 15 Widen Warehouse Woes", day15.part2(DAY15)),
    ]


def test_run_day_unknown_day():
    with pytest.raises(ValueError, match="day 16"):
        run_day(16, "")


def test_main_prints_answers_from_cached_input(tmp_path, capsys):
    (tmp_path / "day01.txt").write_text(DAY1, encoding="utf-8")
    assert main(["1", "--inputs", str(tmp_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"Day 1 Distance: {day01.part1(DAY1)}",
        f"Day 1 Similarity: {day01.part2(DAY1)}",
    ]


def test_main_reports_bad_input(tmp_path, capsys):
    (tmp_path / "day01.txt").write_text("a b\n", encoding="utf-8")
    assert main(["1", "--inputs", str(tmp_path)]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_rejects_unknown_day():
    with pytest.raises(SystemExit) as excinfo:
        main(["16"])
    assert excinfo.value.code == 2