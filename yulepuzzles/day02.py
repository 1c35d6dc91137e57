"""Reactor reports: counting safe level sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def is_safe(levels: Iterable[int]) -> bool:
    """True when levels move steadily in one direction by 1 to 3 each step."""
    levels = list(levels)
    if len(levels) < 2:
        return False
    diffs = [b - a for a, b in zip(levels, levels[1:])]
    if diffs[0] == 0:
        return False
    increasing = diffs[0] > 0
    return all(1 <= abs(d) <= 3 and (d > 0) == increasing for d in diffs)


def _reports(text: str) -> Iterator[list[int]]:
    for line in text.splitlines():
        if line.strip():
            yield [int(field) for field in line.split()]


def _safe_with_dampener(levels: list[int]) -> bool:
    return is_safe(levels) or any(
        is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in _reports(text) if is_safe(report))


def part2(text: str) -> int:
    """Number of reports that are safe after removing at most one level."""
    return sum(1 for report in _reports(text) if _safe_with_dampener(report))