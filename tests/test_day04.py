import pytest

from yulepuzzles import day04

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def _mirror(text):
    return "\n".join(line[::-1] for line in text.splitlines())


def _transpose(text):
    return "\n".join("".join(column) for column in zip(*text.splitlines()))


def test_part1_example():
    assert day04.part1(EXAMPLE) == 18


def test_part2_example():
    assert day04.part2(EXAMPLE) == 9


def test_part1_mirror_invariant():
    assert day04.part1(_mirror(EXAMPLE)) == day04.part1(EXAMPLE)


def test_part1_transpose_invariant():
    assert day04.part1(_transpose(EXAMPLE)) == day04.part1(EXAMPLE)


def test_part2_transpose_invariant():
    assert day04.part2(_transpose(EXAMPLE)) == day04.part2(EXAMPLE)


def test_forward_and_backward_word():
    assert day04.part1("XMAS") == day04.part1("SAMX")


def test_part1_empty_grid_raises():
    with pytest.raises(ValueError):
        day04.part1("")


def test_part2_empty_grid():
    assert day04.part2("") == 0