"""Parabolic reflector dish: tilt a platform of rocks and measure its load."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Tile(Enum):
    """A cell on the platform."""

    ROUND_ROCK = "O"
    CUBE_ROCK = "#"
    EMPTY = "."

    @classmethod
    def parse(cls, ch: str) -> Tile:
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"invalid tile {ch!r}") from None


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


@dataclass
class Platform:
    """A grid of rocks; remembers states seen while cycling."""

    grid: list[list[Tile]]
    states: dict[str, int] = field(default_factory=dict, compare=False)

    @classmethod
    def parse(cls, text: str) -> Platform:
        grid = [[Tile.parse(ch) for ch in line] for line in text.splitlines()]
        if not grid or not grid[0]:
            raise ValueError("empty platform")
        return cls(grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    def state_key(self) -> str:
        return "".join(tile.value for row in self.grid for tile in row)

    def _lines(self, direction: Direction) -> list[list[tuple[int, int]]]:
        """Cell coordinates grouped into lines, ordered towards the tilt edge first."""
        rows = range(self.height)
        cols = range(self.width)
        if direction is Direction.NORTH:
            return [[(r, c) for r in rows] for c in cols]
        if direction is Direction.SOUTH:
            return [[(r, c) for r in reversed(rows)] for c in cols]
        if direction is Direction.WEST:
            return [[(r, c) for c in cols] for r in rows]
        return [[(r, c) for c in reversed(cols)] for r in rows]

    def tilt(self, direction: Direction) -> None:
        """Slide every round rock as far as it goes in the given direction."""
        for cells in self._lines(direction):
            free = 0
            for i, (r, c) in enumerate(cells):
                tile = self.grid[r][c]
                if tile is Tile.CUBE_ROCK:
                    free = i + 1
                elif tile is Tile.ROUND_ROCK:
                    if free != i:
                        fr, fc = cells[free]
                        self.grid[fr][fc] = Tile.ROUND_ROCK
                        self.grid[r][c] = Tile.EMPTY
                    free += 1

    def north_load(self) -> int:
        return sum(
            row.count(Tile.ROUND_ROCK) * (self.height - index)
            for index, row in enumerate(self.grid)
        )

    def cycle(self) -> None:
        for direction in (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST):
            self.tilt(direction)

    def cycle_n(self, n: int) -> None:
        """Run n spin cycles, skipping ahead once a repeated state is found."""
        count = 0
        while count < n:
            self.cycle()
            count += 1
            key = self.state_key()
            previous = self.states.get(key)
            if previous is not None:
                loop_size = count - previous
                for _ in range((n - count) % loop_size):
                    self.cycle()
                break
            self.states[key] = count

    def __str__(self) -> str:
        body = "".join("".join(t.value for t in row) + "\n" for row in self.grid)
        return body + "\n"


def part1(text: str) -> int:
    platform = Platform.parse(text)
    platform.tilt(Direction.NORTH)
    return platform.north_load()


def part2(text: str) -> int:
    platform = Platform.parse(text)
    platform.cycle_n(1_000_000_000)
    return platform.north_load()