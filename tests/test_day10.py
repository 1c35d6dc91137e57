from yulepuzzles.day10 import parse_grid, part1, part2, trailheads

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""

LINEAR = "0123456789"

FAN = "\n".join(
    "".join(str(min(r + c, 9)) for c in range(10)) for r in range(10)
)


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_part2_at_least_part1():
    for text in (EXAMPLE, LINEAR, FAN):
        assert part2(text) >= part1(text)


def test_many_paths_to_same_nines():
    assert part2(FAN) > part1(FAN)


def test_single_straight_trail():
    heads = trailheads(parse_grid(LINEAR))
    assert part1(LINEAR) == len(heads)
    assert part2(LINEAR) == part1(LINEAR)


def test_trail_without_summit_scores_nothing():
    assert part1("012345678") == 0
    assert part2("012345678") == part1("012345678")


def test_trailheads_are_zeros():
    grid = parse_grid(EXAMPLE)
    heads = trailheads(grid)
    assert len(heads) == EXAMPLE.count("0")
    assert all(grid[r][c] == 0 for r, c in heads)


def test_parse_grid_drops_non_digits():
    assert parse_grid("1.2\n34\n") == [[1, 2], [3, 4]]


def test_empty_map():
    assert parse_grid("") == []
    assert part1("") == part2("")