"""Garden groups: fence prices by perimeter and by number of sides."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def regions(grid: Sequence[str]) -> list[set[Position]]:
    """Connected same-plant regions as sets of (row, column), in reading order."""
    cells = {(r, c): ch for r, row in enumerate(grid) for c, ch in enumerate(row)}
    seen: set[Position] = set()
    found: list[set[Position]] = []
    for start, plant in cells.items():
        if start in seen:
            continue
        region: set[Position] = set()
        stack = [start]
        while stack:
            pos = stack.pop()
            if pos in region or cells.get(pos) != plant:
                continue
            region.add(pos)
            stack.extend((pos[0] + dr, pos[1] + dc) for dr, dc in _STEPS)
        seen |= region
        found.append(region)
    return found


def _perimeter(region: set[Position]) -> int:
    return sum(
        1
        for r, c in region
        for dr, dc in _STEPS
        if (r + dr, c + dc) not in region
    )


def _sides(region: set[Position]) -> int:
    corners = 0
    for r, c in region:
        for dr in (-1, 1):
            for dc in (-1, 1):
                vertical = (r + dr, c) in region
                horizontal = (r, c + dc) in region
                if not vertical and not horizontal:
                    corners += 1
                elif not horizontal and vertical and (r + dr, c + dc) in region:
                    corners += 1
    return corners


def part1(text: str) -> int:
    """Total price using area times perimeter."""
    return sum(len(region) * _perimeter(region) for region in regions(text.splitlines()))


def part2(text: str) -> int:
    """Total price using area times number of sides."""
    return sum(len(region) * _sides(region) for region in regions(text.splitlines()))