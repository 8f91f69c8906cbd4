"""Command line entry point: fetch a day's input and print both answers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Sequence

from adventsolver import (
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)
from adventsolver.inputs import DEFAULT_COOKIES_PATH, DEFAULT_INPUTS_DIR, fetch_day_input


@dataclass(frozen=True)
class DayFunctions:
    """The two solvers for one day, each taking the puzzle input text."""

    part1: Callable[[str], object]
    part2: Callable[[str], object]


_DAYS = {
    13: day13,
    14: day14,
    15: day15,
    16: day16,
    17: day17,
    18: day18,
    19: day19,
    20: day20,
    21: day21,
    22: day22,
    23: day23,
    24: day24,
    25: day25,
}


def get_day_functions(day: int) -> DayFunctions | None:
    """Solvers for a day, or None if the day has none."""
    module = _DAYS.get(day)
    if module is None:
        return None
    return DayFunctions(module.part1, module.part2)


def _day(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid day {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"day out of range: {value}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve a day's puzzle.")
    parser.add_argument("day", nargs="?", type=_day, help="day number")
    parser.add_argument("--inputs-dir", default=DEFAULT_INPUTS_DIR)
    parser.add_argument("--cookies", default=DEFAULT_COOKIES_PATH)
    args = parser.parse_args(argv)

    if args.day is None:
        print("Please specify a day", file=sys.stderr)
        return 1

    path = fetch_day_input(args.day, args.inputs_dir, args.cookies)
    functions = get_day_functions(args.day)
    if functions is None:
        print("Code for day not found", file=sys.stderr)
        return 1

    text = path.read_text(encoding="utf-8")
    print(f"Day {args.day}")
    print(f"Part 1: {functions.part1(text)}")
    print(f"Part 2: {functions.part2(text)}")
    return 0