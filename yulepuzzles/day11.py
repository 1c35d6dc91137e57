"""Plutonian pebbles: stones that change and split every blink."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

PART1_BLINKS = 25
PART2_BLINKS = 75


def _parse_stones(text: str) -> list[int]:
    return [int(field) for field in text.split()]


def _change(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        left, right = divmod(stone, 10 ** (len(digits) // 2))
        return left, right
    return (stone * 2024,)


def blink(stones: Iterable[int]) -> list[int]:
    """Apply one blink to every stone, keeping their order."""
    return [new for stone in stones for new in _change(stone)]


@lru_cache(maxsize=None)
def count_stones(stone: int, blinks: int) -> int:
    """Number of stones a single stone turns into after ``blinks`` blinks."""
    if blinks == 0:
        return 1
    return sum(count_stones(new, blinks - 1) for new in _change(stone))


def part1(text: str) -> int:
    """Number of stones after 25 blinks, simulated stone by stone."""
    stones = _parse_stones(text)
    for _ in range(PART1_BLINKS):
        stones = blink(stones)
    return len(stones)


def part2(text: str) -> int:
    """Number of stones after 75 blinks, counted with memoisation."""
    return sum(count_stones(stone, PART2_BLINKS) for stone in _parse_stones(text))