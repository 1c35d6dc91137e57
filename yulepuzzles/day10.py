"""Hoof It: scoring hiking trails on a topographic map."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

Grid = list[list[int]]
Position = tuple[int, int]


def parse_grid(text: str) -> Grid:
    """Read each line's digits as heights; other characters are dropped."""
    return [[int(ch) for ch in line if ch.isdecimal()] for line in text.splitlines()]


def trailheads(grid: Grid) -> list[Position]:
    """Every position of height 0, row by row."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
        if height == 0
    ]


def _neighbors(pos: Position, grid: Grid) -> Iterator[Position]:
    row, col = pos
    if row > 0:
        yield row - 1, col
    if col > 0:
        yield row, col - 1
    if row < len(grid) - 1:
        yield row + 1, col
    if col < len(grid[0]) - 1:
        yield row, col + 1


def _uphill(pos: Position, grid: Grid) -> Iterator[Position]:
    height = grid[pos[0]][pos[1]]
    for nr, nc in _neighbors(pos, grid):
        if grid[nr][nc] == height + 1:
            yield nr, nc


def _reachable_nines(grid: Grid, start: Position) -> int:
    nines: set[Position] = set()
    visited: set[Position] = set()
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        if grid[current[0]][current[1]] == 9:
            nines.add(current)
            continue
        queue.extend(_uphill(current, grid))
    return len(nines)


def _distinct_trails(grid: Grid, pos: Position) -> int:
    if grid[pos[0]][pos[1]] == 9:
        return 1
    return sum(_distinct_trails(grid, nxt) for nxt in _uphill(pos, grid))


def part1(text: str) -> int:
    """Sum over trailheads of how many height-9 cells each can reach."""
    grid = parse_grid(text)
    return sum(_reachable_nines(grid, head) for head in trailheads(grid))


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct trails to height 9."""
    grid = parse_grid(text)
    return sum(_distinct_trails(grid, head) for head in trailheads(grid))