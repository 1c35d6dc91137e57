"""Restroom redoubt: robots wrapping around a toroidal room."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from math import prod
from typing import TextIO

WIDTH = 101
HEIGHT = 103
SECONDS = 100

Vector = tuple[int, int]


@dataclass
class Robot:
    """A robot's (x, y) position and velocity per second."""

    pos: Vector
    vel: Vector

    def step(self, width: int, height: int) -> None:
        """Move one second, wrapping around the room's edges."""
        self.pos = (
            (self.pos[0] + self.vel[0]) % width,
            (self.pos[1] + self.vel[1]) % height,
        )


def _parse_coords(field: str) -> Vector:
    values = [int(part) for part in field.split(",")]
    if len(values) < 2:
        raise ValueError(f"expected two coordinates in {field!r}")
    return values[0], values[1]


def parse_robots(text: str) -> list[Robot]:
    """Read ``p=x,y v=dx,dy`` lines into robots."""
    robots = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"robot line {line!r} lacks a velocity")
        robots.append(
            Robot(
                _parse_coords(fields[0].removeprefix("p=")),
                _parse_coords(fields[1].removeprefix("v=")),
            )
        )
    return robots


def safety_factor(robots: Iterable[Robot], width: int, height: int, seconds: int) -> int:
    """Product of robot counts per quadrant after ``seconds``; centre lines excluded."""
    mid_x, mid_y = width // 2, height // 2
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        x = (robot.pos[0] + robot.vel[0] * seconds) % width
        y = (robot.pos[1] + robot.vel[1] * seconds) % height
        if x == mid_x or y == mid_y:
            continue
        quadrants[(0 if x < mid_x else 1) + (0 if y < mid_y else 2)] += 1
    return prod(quadrants)


def find_clusters(positions: Iterable[Vector]) -> list[set[Vector]]:
    """Groups of orthogonally adjacent occupied positions."""
    ordered = list(positions)
    occupied = set(ordered)
    seen: set[Vector] = set()
    clusters: list[set[Vector]] = []
    for start in ordered:
        if start in seen:
            continue
        cluster: set[Vector] = set()
        stack = [start]
        while stack:
            x, y = stack.pop()
            if (x, y) in seen:
                continue
            seen.add((x, y))
            cluster.add((x, y))
            for dx, dy in ((0, 1), (0, -1), (1, 0), (-1, 0)):
                if (x + dx, y + dy) in occupied:
                    stack.append((x + dx, y + dy))
        clusters.append(cluster)
    return clusters


def render(positions: Iterable[Vector], width: int, height: int) -> str:
    """Draw the room with '#' for robots and '.' for empty tiles."""
    occupied = set(positions)
    return "".join(
        "".join("#" if (x, y) in occupied else "." for x in range(width)) + "\n"
        for y in range(height)
    )


def part1(text: str) -> int:
    """Safety factor after 100 seconds in the full-size room."""
    return safety_factor(parse_robots(text), WIDTH, HEIGHT, SECONDS)


def part2(text: str, out: TextIO | None = None) -> int:
    """First second at which a third of the robots form one cluster.

    Every room in which a fifth of the robots cluster is drawn to ``out``
    (standard output by default).
    """
    robots = parse_robots(text)
    if not robots:
        raise ValueError("no robots in input")
    stream = sys.stdout if out is None else out
    show_at = len(robots) // 5
    found_at = len(robots) // 3
    step = 0
    while True:
        for robot in robots:
            robot.step(WIDTH, HEIGHT)
        step += 1
        positions = [robot.pos for robot in robots]
        for cluster in find_clusters(positions):
            if len(cluster) >= show_at:
                stream.write(render(positions, WIDTH, HEIGHT))
                if len(cluster) >= found_at:
                    return step