"""Command line entry point: solve each day's puzzles and print the answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from yulepuzzles import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
)
from yulepuzzles.inputs import get_input

Solver = Callable[[str], int]

DAYS: dict[int, tuple[tuple[str, Solver], ...]] = {
    1: (("Day 1 Distance", day01.part1), ("Day 1 Similarity", day01.part2)),
    2: (("Day 2 Safe Report", day02.part1), ("Day 2 Safe Report", day02.part2)),
    3: (
        ("Day 3 Multiplication", day03.part1),
        ("Day 3 Multiplication Do/Don't", day03.part2),
    ),
    4: (
        ("Day 4 Ceres Search", day04.part1),
        ("Day 4 Ceres Search X-MAS", day04.part2),
    ),
    5: (
        ("Day 5 Print Queue", day05.part1),
        ("Day 5 Print Incorects Queue", day05.part2),
    ),
    6: (("Day 6 Guard Map", day06.part1),),
    7: (("Day 7 Bridge Repair", day07.part1),),
    8: (
        ("Day 8 Resonant Collienarity", day08.part1),
        ("Day 8 Resonant", day08.part2),
    ),
    9: (("Day 9 Checksum", day09.part1),),
    10: (
        ("Day 10 Trailheads", day10.part1),
        ("Day 10 Distinct Trailheads", day10.part2),
    ),
    11: (
        ("Day 11 Stones Count", day11.part1),
        ("Day 11 Stones Count Plus", day11.part2),
    ),
    12: (
        ("Day 12 Region Price", day12.part1),
        ("Day 12 Region Price By Side", day12.part2),
    ),
    13: (("Day 13 Token Count", day13.part1), ("Day 13 Token Count", day13.part2)),
    14: (
        ("Day 14 Quadrant Safety", day14.part1),
        ("Day 14 Quadrant Safety", day14.part2),
    ),
    15: (
        ("Day 15 Warehouse Woes", day15.part1),
        ("Day 15 Widen Warehouse Woes", day15.part2),
    ),
}


def _solve(solvers: tuple[tuple[str, Solver], ...], text: str) -> Iterator[tuple[str, int]]:
    for label, solver in solvers:
        yield label, solver(text)


def run_day(day: int, text: str) -> Iterator[tuple[str, int]]:
    """Yield (label, answer) for each solved part of ``day``, one at a time."""
    try:
        solvers = DAYS[day]
    except KeyError:
        raise ValueError(f"no solutions for day {day}") from None
    return _solve(solvers, text)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the chosen days (all by default) and print their answers."""
    parser = argparse.ArgumentParser(prog="yulepuzzles", description=__doc__)
    parser.add_argument(
        "days", nargs="*", type=int, default=sorted(DAYS), help="days to solve"
    )
    parser.add_argument(
        "--inputs", default="inputs", help="directory caching puzzle inputs"
    )
    args = parser.parse_args(argv)
    unknown = [day for day in args.days if day not in DAYS]
    if unknown:
        parser.error(f"no solutions for day(s): {', '.join(map(str, unknown))}")

    try:
        for day in args.days:
            text = get_input(day, args.inputs)
            for label, result in run_day(day, text):
                print(f"{label}: {result}")
    except Exception as exc:  # every failure ends the run with a message
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())