"""Corrupted memory: summing well-formed multiplication instructions."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(
    r"mul\((?P<a>[0-9]{1,3}),(?P<b>[0-9]{1,3})\)|(?P<do>do\(\))|(?P<dont>don't\(\))"
)


def part1(text: str) -> int:
    """Sum of the products of every ``mul(a,b)`` instruction."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part2(text: str) -> int:
    """Like part 1, but ``don't()`` disables and ``do()`` re-enables products."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match["do"]:
            enabled = True
        elif match["dont"]:
            enabled = False
        elif enabled:
            total += int(match["a"]) * int(match["b"])
    return total