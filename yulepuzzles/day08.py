"""Resonant collinearity: antinodes of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from itertools import combinations

Position = tuple[int, int]


def _collinear(p1: Position, p2: Position, p3: Position) -> bool:
    (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
    return (y2 - y1) * (x3 - x1) == (y3 - y1) * (x2 - x1)


@dataclass
class AntennaMap:
    """Antenna positions by frequency on a map of a given size."""

    antennas: dict[str, list[Position]] = field(default_factory=dict)
    width: int = 0
    height: int = 0

    @classmethod
    def parse(cls, text: str) -> AntennaMap:
        """Read a map where every character other than '.' is an antenna."""
        lines = text.splitlines()
        antennas: defaultdict[str, list[Position]] = defaultdict(list)
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch != ".":
                    antennas[ch].append((r, c))
        width = len(lines[-1]) if lines else 0
        return cls(dict(antennas), width, len(lines))

    def in_bounds(self, pos: Position) -> bool:
        """True when the (row, column) position lies on the map."""
        return 0 <= pos[0] < self.height and 0 <= pos[1] < self.width

    def antinodes(self) -> set[Position]:
        """Points beyond each antenna pair at the pair's own spacing."""
        found: set[Position] = set()
        for positions in self.antennas.values():
            for p1, p2 in combinations(positions, 2):
                dr, dc = p2[0] - p1[0], p2[1] - p1[1]
                for candidate in ((p1[0] - dr, p1[1] - dc), (p2[0] + dr, p2[1] + dc)):
                    if self.in_bounds(candidate):
                        found.add(candidate)
        return found

    def resonant_antinodes(self) -> set[Position]:
        """Every map point in line with at least one same-frequency pair."""
        found: set[Position] = set()
        points = [(r, c) for r in range(self.height) for c in range(self.width)]
        for positions in self.antennas.values():
            if len(positions) < 2:
                continue
            found.update(positions)
            pairs = list(combinations(positions, 2))
            found.update(
                point
                for point in points
                if any(_collinear(p1, p2, point) for p1, p2 in pairs)
            )
        return found


def part1(text: str) -> int:
    """Number of distinct antinode locations on the map."""
    return len(AntennaMap.parse(text).antinodes())


def part2(text: str) -> int:
    """Number of distinct resonant antinode locations on the map."""
    return len(AntennaMap.parse(text).resonant_antinodes())