"""Two location-id lists: total distance and similarity score."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split each line's first two numbers into a left and a right list."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part1(text: str) -> int:
    """Sum of distances between the sorted lists, pair by pair."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Sum of each left number times its count in the right list."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)