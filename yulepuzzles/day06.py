"""Guard patrol on a grid of obstacles."""

from __future__ import annotations

from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    """Heading of the guard as a (row, column) step."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    def turn_right(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]


_GUARD_SYMBOLS = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}


def _find_guard(grid: list[str], symbols: str) -> Position:
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell in symbols:
                return r, c
    raise ValueError("guard not found")


def _in_bounds(pos: Position, grid: list[str]) -> bool:
    return 0 <= pos[0] < len(grid) and 0 <= pos[1] < len(grid[0])


def _ahead(pos: Position, direction: Direction) -> Position:
    dr, dc = direction.value
    return pos[0] + dr, pos[1] + dc


def part1(text: str) -> int:
    """Number of distinct cells the guard visits before leaving the map."""
    grid = text.splitlines()
    pos = _find_guard(grid, "^")
    direction = _GUARD_SYMBOLS[grid[pos[0]][pos[1]]]
    visited = {pos}
    while True:
        nxt = _ahead(pos, direction)
        if not _in_bounds(nxt, grid):
            return len(visited)
        if grid[nxt[0]][nxt[1]] == "#":
            direction = direction.turn_right()
        else:
            pos = nxt
            visited.add(pos)


def _creates_loop(
    grid: list[str], start: Position, direction: Direction, obstacle: Position
) -> bool:
    pos = start
    seen = {(pos, direction)}
    while True:
        nxt = _ahead(pos, direction)
        if not _in_bounds(nxt, grid):
            return False
        if nxt == obstacle or grid[nxt[0]][nxt[1]] == "#":
            direction = direction.turn_right()
        else:
            pos = nxt
        state = (pos, direction)
        if state in seen:
            return True
        seen.add(state)


def part2(text: str) -> int:
    """Number of empty cells where one new obstacle traps the guard in a loop."""
    grid = text.splitlines()
    start = _find_guard(grid, "^v<>")
    direction = _GUARD_SYMBOLS[grid[start[0]][start[1]]]
    return sum(
        1
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "." and (r, c) != start and _creates_loop(grid, start, direction, (r, c))
    )