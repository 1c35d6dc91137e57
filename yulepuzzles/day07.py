"""Bridge repair: finding operators that make calibration equations true."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from itertools import product


class Operator(Enum):
    """An operator placed between two numbers, always applied left to right."""

    ADD = "+"
    MULTIPLY = "*"
    CONCAT = "||"


def _concat(left: int, right: int) -> int:
    return int(f"{left}{right}")


_APPLY: dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: operator.add,
    Operator.MULTIPLY: operator.mul,
    Operator.CONCAT: _concat,
}


def parse_equation(line: str) -> tuple[int, list[int]]:
    """Split ``target: n1 n2 ...`` into the target and its numbers."""
    target, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in equation {line!r}")
    numbers = [int(field) for field in rest.split()]
    if not numbers:
        raise ValueError(f"equation {line!r} has no numbers")
    return int(target.strip()), numbers


def evaluate(numbers: Sequence[int], operators: Iterable[Operator]) -> int:
    """Apply the operators to the numbers strictly from left to right."""
    operators = list(operators)
    if not numbers:
        raise ValueError("no numbers to evaluate")
    if len(operators) >= len(numbers):
        raise ValueError("more operators than gaps between numbers")
    result = numbers[0]
    for op, number in zip(operators, numbers[1:]):
        result = _APPLY[op](result, number)
    return result


def _calibration_total(text: str, operators: Sequence[Operator]) -> int:
    total = 0
    for line in text.splitlines():
        target, numbers = parse_equation(line)
        combinations = product(operators, repeat=len(numbers) - 1)
        if any(evaluate(numbers, combo) == target for combo in combinations):
            total += target
    return total


def part1(text: str) -> int:
    """Sum of targets reachable with addition and multiplication."""
    return _calibration_total(text, (Operator.ADD, Operator.MULTIPLY))


def part2(text: str) -> int:
    """Sum of targets reachable with addition, multiplication and concatenation."""
    return _calibration_total(
        text, (Operator.ADD, Operator.MULTIPLY, Operator.CONCAT)
    )