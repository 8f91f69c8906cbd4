"""Plutonian pebbles: count stones after repeated blinks."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Sequence

PUZZLE_INPUT = "5178527 8525 22 376299 3 69312 0 275\n"
_MAX_STONE = 2**64


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def solve(text: str, blink_count: int) -> int:
    """Number of stones after blinking `blink_count` times."""
    stones: Counter[int] = Counter()
    for word in text.split():
        number = int(word)
        if not 0 <= number < _MAX_STONE:
            raise ValueError(f"stone number out of range: {word}")
        stones[number] = 1

    for _ in range(blink_count):
        next_stones: Counter[int] = Counter()
        for stone, count in stones.items():
            for new_stone in _blink(stone):
                next_stones[new_stone] += count
        stones = next_stones
    return sum(stones.values())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("--stones", default=PUZZLE_INPUT, help="space separated stones")
    parser.add_argument("--blinks", type=int, default=75, help="number of blinks")
    args = parser.parse_args(argv)
    print(solve(args.stones, args.blinks))
    return 0