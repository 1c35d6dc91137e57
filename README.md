# yulepuzzles

Solvers for the first fifteen days of the 2024 December puzzle calendar.
Each day is a module (`yulepuzzles.day01` to `yulepuzzles.day15`) with a
`part1` function and, for every day but day 9, a `part2` function. Each takes
the raw puzzle input as a string and returns the answer as an integer.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## The command

```
yulepuzzles [DAY ...] [--inputs DIRECTORY]
```

With no days given, every day from 1 to 15 is solved in turn; otherwise only
the days named. One line is printed per answer, for example
`Day 1 Distance: ...` and `Day 1 Similarity: ...`. Asking for a day outside
1 to 15 is a usage error. The run stops with `Error: ...` on standard error
and exit status 1 as soon as an input cannot be read or a solver fails.

Day 14's second part writes a drawing of the room (`#` for a robot, `.` for
an empty tile) to standard output each time a fifth of the robots stand in
one connected group, before its answer is printed.

### Where the inputs come from

Inputs are cached as `day01.txt`, `day02.txt` and so on in the directory
given by `--inputs` (default `inputs`, relative to the current directory).
When a day's file is missing it is downloaded using your session cookie, read
from the `AOC_SESSION` environment variable, and then written to the cache.
A `.env` file found from the current directory upwards is loaded first:

```
AOC_SESSION=token
```

If the variable is not set and the file is missing,
`yulepuzzles.inputs.MissingSessionError` is raised (the command reports it
as an error). If you place your input files in the cache directory
yourself, no cookie is needed.

## Using the solvers from Python

```python
from yulepuzzles import day01, day11

with open("inputs/day01.txt") as f:
    text = f.read()
print(day01.part1(text))
print(day01.part2(text))

print(day11.part1("125 17"))
```

`yulepuzzles.cli.run_day(day, text)` yields `(label, answer)` pairs for the
parts of one day that the command runs, and
`yulepuzzles.inputs.get_input(day, directory="inputs")` returns a day's
input, fetching and caching it when needed.

Several modules also expose their building blocks, for example
`day02.is_safe`, `day05.fix_update`, `day07.evaluate`,
`day08.AntennaMap`, `day09.expand_disk`, `day11.count_stones`,
`day12.regions`, `day13.Machine`, `day14.Robot` and `day14.render`, and
`day15.Warehouse`.

| Module    | Puzzle                                  |
|-----------|-----------------------------------------|
| `day01`   | list distance and similarity            |
| `day02`   | safe reports, with one level dampened   |
| `day03`   | corrupted `mul` instructions            |
| `day04`   | word search for XMAS and X-MAS          |
| `day05`   | print queue ordering                    |
| `day06`   | guard patrol and loop-making obstacles  |
| `day07`   | bridge repair equations                 |
| `day08`   | antenna antinodes                       |
| `day09`   | disk fragmenting checksum               |
| `day10`   | hiking trailheads                       |
| `day11`   | splitting stones                        |
| `day12`   | garden plot fencing prices              |
| `day13`   | claw machine tokens                     |
| `day14`   | restroom robots and the hidden picture  |
| `day15`   | warehouse robot and widened warehouse   |

## What is not covered

- Day 9 has only its first part; there is no whole-file compaction.
- `day06.part2` and `day07.part2` exist and can be called from Python, but
  the command does not run them: for days 6 and 7 it prints only the first
  part.
- Nothing beyond day 15 is solved.