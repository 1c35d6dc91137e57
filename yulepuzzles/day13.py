"""Claw contraption: fewest tokens to reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass

PART2_OFFSET = 10000000000000

Vector = tuple[int, int]

_BUTTON_A = re.compile(r"Button A: X\+([0-9]+), Y\+([0-9]+)")
_BUTTON_B = re.compile(r"Button B: X\+([0-9]+), Y\+([0-9]+)")
_PRIZE = re.compile(r"Prize: X=([0-9]+), Y=([0-9]+)")


@dataclass(frozen=True)
class Machine:
    """A claw machine: two button moves and the prize location."""

    button_a: Vector
    button_b: Vector
    prize: Vector

    def tokens(self, offset: int = 0) -> int | None:
        """Tokens to win (3 per A press, 1 per B press), or None if impossible."""
        x1, y1 = self.button_a
        x2, y2 = self.button_b
        px, py = self.prize[0] + offset, self.prize[1] + offset
        denominator = x2 * y1 - x1 * y2
        if denominator == 0 or x1 == 0:
            return None
        numerator = px * y1 - py * x1
        if numerator % denominator:
            return None
        b_presses = numerator // denominator
        rest = px - b_presses * x2
        if rest % x1:
            return None
        a_presses = rest // x1
        return 3 * a_presses + b_presses


def _pair(match: re.Match[str]) -> Vector:
    return int(match[1]), int(match[2])


def parse_machines(text: str) -> list[Machine]:
    """Read machine descriptions; a prize line closes a machine."""
    machines: list[Machine] = []
    button_a: Vector | None = None
    button_b: Vector | None = None
    for line in text.splitlines():
        if not line.strip():
            continue
        if match := _BUTTON_A.search(line):
            button_a = _pair(match)
        elif match := _BUTTON_B.search(line):
            button_b = _pair(match)
        elif match := _PRIZE.search(line):
            if button_a is not None and button_b is not None:
                machines.append(Machine(button_a, button_b, _pair(match)))
            button_a = button_b = None
    return machines


def _total(text: str, offset: int) -> int:
    return sum(
        cost for machine in parse_machines(text)
        if (cost := machine.tokens(offset)) is not None
    )


def part1(text: str) -> int:
    """Total tokens to win every winnable prize."""
    return _total(text, 0)


def part2(text: str) -> int:
    """Total tokens with the prizes moved far away."""
    return _total(text, PART2_OFFSET)