"""Word search: counting XMAS and X-shaped MAS."""

from __future__ import annotations

_WORD = "XMAS"
_DIRECTIONS = (
    (0, 1),
    (1, 0),
    (1, 1),
    (-1, 1),
    (0, -1),
    (-1, 0),
    (-1, -1),
    (1, -1),
)
_X_PATTERNS = (
    ("M.M", ".A.", "S.S"),
    ("S.M", ".A.", "S.M"),
    ("S.S", ".A.", "M.M"),
    ("M.S", ".A.", "M.S"),
)


def _cells(lines: list[str]) -> dict[tuple[int, int], str]:
    return {(r, c): ch for r, line in enumerate(lines) for c, ch in enumerate(line)}


def part1(text: str) -> int:
    """Count XMAS in every direction, including backwards and diagonals."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty grid")
    rows, cols = len(lines), len(lines[0])
    cells = _cells(lines)

    def spells(r: int, c: int, dr: int, dc: int) -> bool:
        for i, target in enumerate(_WORD):
            rr, cc = r + i * dr, c + i * dc
            if not (0 <= rr < rows and 0 <= cc < cols):
                return False
            if cells.get((rr, cc)) != target:
                return False
        return True

    return sum(
        1
        for r in range(rows)
        for c in range(cols)
        for dr, dc in _DIRECTIONS
        if spells(r, c, dr, dc)
    )


def part2(text: str) -> int:
    """Count two MAS crossing in an X."""
    cells = _cells(text.splitlines())

    def fits(r: int, c: int, pattern: tuple[str, ...]) -> bool:
        return all(
            cells.get((r + dy, c + dx)) == ch
            for dy, row in enumerate(pattern)
            for dx, ch in enumerate(row)
            if ch != "."
        )

    return sum(1 for r, c in cells for pattern in _X_PATTERNS if fits(r, c, pattern))