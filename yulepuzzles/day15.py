"""Warehouse woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

Position = tuple[int, int]

DIRECTIONS: dict[str, Position] = {
    ">": (1, 0),
    "<": (-1, 0),
    "^": (0, -1),
    "v": (0, 1),
}

_WIDE = {"#": "##", "@": "@.", "O": "[]", ".": ".."}
_SOLID = frozenset("#O[]")


def parse_input(text: str) -> tuple[list[str], str]:
    """Split the text into map rows and one string of move instructions."""
    rows: list[str] = []
    moves: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if stripped[0] in DIRECTIONS:
            moves.append(stripped)
        else:
            rows.append(stripped)
    return rows, "".join(moves)


def widen(rows: Iterable[str]) -> list[str]:
    """Double every tile's width; boxes become ``[]`` pairs."""
    return ["".join(_WIDE.get(ch, "..") for ch in row) for row in rows]


def _box_halves(pos: Position, piece: str) -> set[Position]:
    partner = pos[0] + 1 if piece == "[" else pos[0] - 1
    return {pos, (partner, pos[1])}


@dataclass
class Warehouse:
    """Walls and boxes by (x, y) position, and where the robot stands."""

    cells: dict[Position, str]
    robot: Position

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Warehouse:
        """Read map rows with exactly one robot marked '@'."""
        cells: dict[Position, str] = {}
        robot: Position | None = None
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch == "@":
                    if robot is not None:
                        raise ValueError("multiple robots found")
                    robot = (x, y)
                elif ch in _SOLID:
                    cells[(x, y)] = ch
        if robot is None:
            raise ValueError("no robot found")
        return cls(cells, robot)

    def move(self, instruction: str) -> bool:
        """Try one move, pushing boxes ahead; return whether the robot moved."""
        try:
            dx, dy = DIRECTIONS[instruction]
        except KeyError:
            raise ValueError(f"invalid direction {instruction!r}") from None
        ahead = (self.robot[0] + dx, self.robot[1] + dy)
        piece = self.cells.get(ahead)
        boxes: Iterable[Position] | None
        if piece is None:
            boxes = ()
        elif piece == "O":
            boxes = self._chain(ahead, dx, dy, "O")
        elif piece in ("[", "]"):
            boxes = self._chain(ahead, dx, dy, "[]") if dy == 0 else self._stack(ahead, dy)
        else:
            boxes = None
        if boxes is None:
            return False
        moved = {
            (x + dx, y + dy): self.cells.pop((x, y))
            for x, y in boxes
            if (x, y) in self.cells
        }
        self.cells.update(moved)
        self.robot = ahead
        return True

    def _chain(self, start: Position, dx: int, dy: int, pieces: str) -> list[Position] | None:
        boxes: list[Position] = []
        pos = start
        while (piece := self.cells.get(pos)) is not None:
            if piece in pieces:
                boxes.append(pos)
            elif piece == "#":
                return None
            pos = (pos[0] + dx, pos[1] + dy)
        return boxes

    def _stack(self, start: Position, dy: int) -> set[Position] | None:
        frontier = _box_halves(start, self.cells[start])
        boxes = set(frontier)
        while frontier:
            following: set[Position] = set()
            for x, y in frontier:
                beyond = (x, y + dy)
                piece = self.cells.get(beyond)
                if piece == "#":
                    return None
                if piece in ("[", "]"):
                    following |= _box_halves(beyond, piece)
            boxes |= following
            frontier = following
        return boxes

    def gps_total(self) -> int:
        """Sum of 100 * y + x over every box (its left edge when wide)."""
        return sum(
            100 * y + x for (x, y), piece in self.cells.items() if piece in ("O", "[")
        )


def _run(rows: list[str], moves: str) -> int:
    warehouse = Warehouse.from_rows(rows)
    for instruction in moves:
        warehouse.move(instruction)
    return warehouse.gps_total()


def part1(text: str) -> int:
    """GPS total after every move in the warehouse as drawn."""
    rows, moves = parse_input(text)
    return _run(rows, moves)


def part2(text: str) -> int:
    """GPS total after every move in the widened warehouse."""
    rows, moves = parse_input(text)
    return _run(widen(rows), moves)