# adventsolver

Solvers for days 13 to 25 of a set of daily puzzles from the 2023
series: mirror patterns, tilting rock platforms, lens hashing, light
beams, crucible routing, dig plans, part-sorting workflows, pulse
networks, garden walks, falling bricks, hiking trails, hailstone
trajectories and graph cuts. A separate command counts stones after
repeated blinks.

No third-party libraries are needed.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running a day

```
adventsolver 14
```

The runner takes the day number, makes sure the day's puzzle input is
on disk, then prints both answers:

```
Day 14
Part 1: ...
Part 2: ...
```

Options:

- `--inputs-dir DIR`: where inputs are kept (default `inputs`).
- `--cookies PATH`: the cookies file used for downloading (default
  `cookies.json`).

Without a day, the runner prints `Please specify a day` and exits with
status 1. A day number must lie in 0 to 255. For a day with no solver
the input is still looked up (and downloaded if missing) first, and then
`Code for day not found` is printed with exit status 1.

Day 25 has no second puzzle; its part 2 answer is an empty string.

### Puzzle input

Inputs are stored one file per day, `input13`, `input14` and so on,
in the inputs directory. When the file for a day is missing, it is
downloaded from the puzzle site using the cookies in the cookies file,
a JSON object mapping cookie names to string values:

```json
{"session": "token"}
```

If the site answers with status 400 (the cookie is no longer accepted),
or replies that the input is not available yet, an
`InputUnavailableError` is raised and nothing is written. Other HTTP
errors are raised as they are. A file already in place is never fetched
again.

The same steps are available from Python through
`adventsolver.inputs`: `input_path(day, inputs_dir)`,
`load_cookies(path)` and `fetch_day_input(day, inputs_dir, cookies_path)`,
which returns the path of the input file.

## Counting stones

```
adventsolver-stones
```

Prints how many stones there are after 75 blinks for the built-in
starting arrangement. `--stones "125 17"` gives a different arrangement
and `--blinks N` a different number of blinks.

## Using the solvers from Python

Each day lives in its own module, `adventsolver.day13` through
`adventsolver.day25`, and each offers `part1(text)` and `part2(text)`,
which take the puzzle input as a string and return the answer:

```python
from adventsolver import day15

print(day15.part1("rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7\n"))
```

The building blocks are public too, for example:

```python
from adventsolver.day14 import Direction, Platform

with open("inputs/input14") as handle:
    platform = Platform.parse(handle.read())
platform.tilt(Direction.NORTH)
print(platform.north_load())
```

```python
from adventsolver.stones import solve

print(solve("125 17\n", 25))
```

`adventsolver.cli.get_day_functions(day)` returns the `DayFunctions`
pair for a day, or `None` when the day has no solvers.

Invalid puzzle input raises `ValueError`.

## What is not included

Only days 13 to 25 have solvers; days 1 to 12 are not part of this
package. The download year is fixed at 2023.