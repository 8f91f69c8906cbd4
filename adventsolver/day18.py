"""Lavaduct lagoon: measure the area dug out by a trench plan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Turn(Enum):
    LEFT = "left"
    RIGHT = "right"


class Direction(Enum):
    """A compass direction on the dig site."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def parse(cls, text: str) -> Direction:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid direction {text!r}") from None

    @classmethod
    def parse_hex(cls, ch: str) -> Direction:
        try:
            return _HEX_DIRECTIONS[ch]
        except KeyError:
            raise ValueError(f"invalid direction {ch!r}") from None

    @property
    def delta(self) -> tuple[int, int]:
        """The (row, column) step taken when moving this way."""
        return _DELTAS[self]

    def turn(self, last_dir: Direction) -> Turn:
        """Which way one turns going from last_dir to this direction."""
        try:
            return _TURNS[(last_dir, self)]
        except KeyError:
            raise ValueError(
                f"no turn from {last_dir.name} to {self.name}"
            ) from None


_HEX_DIRECTIONS = {
    "0": Direction.RIGHT,
    "1": Direction.DOWN,
    "2": Direction.LEFT,
    "3": Direction.UP,
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_TURNS = {
    (Direction.UP, Direction.LEFT): Turn.LEFT,
    (Direction.UP, Direction.RIGHT): Turn.RIGHT,
    (Direction.DOWN, Direction.LEFT): Turn.RIGHT,
    (Direction.DOWN, Direction.RIGHT): Turn.LEFT,
    (Direction.LEFT, Direction.UP): Turn.RIGHT,
    (Direction.LEFT, Direction.DOWN): Turn.LEFT,
    (Direction.RIGHT, Direction.UP): Turn.LEFT,
    (Direction.RIGHT, Direction.DOWN): Turn.RIGHT,
}


@dataclass(frozen=True)
class DigStep:
    """Dig a number of metres in one direction."""

    direction: Direction
    steps: int

    @classmethod
    def parse(cls, text: str) -> DigStep:
        parts = text.split()
        if len(parts) < 2:
            raise ValueError(f"invalid dig step {text!r}")
        return cls(Direction.parse(parts[0]), int(parts[1]))

    @classmethod
    def parse_hex(cls, text: str) -> DigStep:
        _, sep, code = text.rstrip(")").partition("#")
        if not sep or len(code) < 6:
            raise ValueError(f"invalid dig step {text!r}")
        return cls(Direction.parse_hex(code[-1]), int(code[:5], 16))


@dataclass
class DigPlan:
    """A closed loop of dig steps."""

    steps: list[DigStep]

    @classmethod
    def parse(cls, text: str) -> DigPlan:
        return cls([DigStep.parse(line) for line in text.splitlines()])

    @classmethod
    def parse_hex(cls, text: str) -> DigPlan:
        return cls([DigStep.parse_hex(line) for line in text.splitlines()])

    def size_trapezoid_area(self) -> int:
        """Lagoon size, by the shoelace formula over the trench's outer edge."""
        if not self.steps:
            raise ValueError("empty dig plan")
        row = col = 0
        points = [(row, col)]
        last_turn = Turn.RIGHT
        following = self.steps[1:] + self.steps[:1]
        for step, next_step in zip(self.steps, following):
            next_turn = next_step.direction.turn(step.direction)
            if last_turn is next_turn:
                adjust = 1 if next_turn is Turn.RIGHT else -1
            else:
                adjust = 0
            last_turn = next_turn
            d_row, d_col = step.direction.delta
            length = step.steps + adjust
            row += d_row * length
            col += d_col * length
            points.append((row, col))

        twice_area = sum(
            (r0 + r1) * (c0 - c1) for (r0, c0), (r1, c1) in zip(points, points[1:])
        )
        return max(twice_area, 0) // 2

    def size_flood_fill(self) -> int:
        """Lagoon size, by tracing the trench and flood filling its interior."""
        row = col = 0
        trench = {(row, col)}
        for step in self.steps:
            d_row, d_col = step.direction.delta
            for _ in range(step.steps):
                row += d_row
                col += d_col
                trench.add((row, col))

        min_row = min(r for r, _ in trench)
        max_row = max(r for r, _ in trench)
        min_col = min(c for _, c in trench)
        max_col = max(c for _, c in trench)

        def inside(cell: tuple[int, int]) -> bool:
            r, c = cell
            return min_row <= r <= max_row and min_col <= c <= max_col

        start = (1, 1)
        if not inside(start):
            raise ValueError("fill start lies outside the trench bounds")

        filled = set(trench)
        pending = [start]
        while pending:
            r, c = pending.pop()
            filled.add((r, c))
            for d_row, d_col in _DELTAS.values():
                neighbour = (r + d_row, c + d_col)
                if inside(neighbour) and neighbour not in filled:
                    pending.append(neighbour)
        return len(filled)


def part1(text: str) -> int:
    return DigPlan.parse(text).size_flood_fill()


def part2(text: str) -> int:
    return DigPlan.parse_hex(text).size_trapezoid_area()