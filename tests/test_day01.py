import pytest

from yulepuzzles import day01

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_lists():
    left, right = day01.parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_part1_example():
    assert day01.part1(EXAMPLE) == 11


def test_part2_example():
    assert day01.part2(EXAMPLE) == 31


def test_identical_lists_have_no_distance():
    assert day01.part1("5 5\n8 8\n") == 0


def test_short_and_blank_lines_are_skipped():
    assert day01.part1("3 4\n7\n\n4 3\n") == day01.part1("3 4\n4 3\n")
    assert day01.parse_lists("7\n\n") == ([], [])


def test_distance_is_symmetric():
    swapped = "\n".join(
        " ".join(reversed(line.split())) for line in EXAMPLE.splitlines()
    )
    assert day01.part1(swapped) == day01.part1(EXAMPLE)


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        day01.part1("a b\n")