"""Disk fragmenter: compacting file blocks and computing a checksum."""

from __future__ import annotations

from itertools import takewhile, zip_longest

Disk = list["int | None"]


def expand_disk(diskmap: str) -> list[int | None]:
    """Expand a dense disk map into blocks: file ids, or None for free space."""
    digits = [int(ch) for ch in diskmap.strip()]
    disk: list[int | None] = []
    sizes = zip_longest(digits[0::2], digits[1::2], fillvalue=0)
    for file_id, (size, free) in enumerate(sizes):
        disk.extend([file_id] * size)
        disk.extend([None] * free)
    return disk


def _compact(disk: list[int | None]) -> None:
    free, block = 0, max(len(disk) - 1, 0)
    while free < block:
        while free < len(disk) and disk[free] is not None:
            free += 1
        while block > 0 and disk[block] is None:
            block -= 1
        if free >= block:
            break
        disk[free], disk[block] = disk[block], disk[free]


def part1(text: str) -> int:
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("no disk map in input")
    disk = expand_disk(lines[0])
    _compact(disk)
    used = takewhile(lambda block: block is not None, disk)
    return sum(position * file_id for position, file_id in enumerate(used))