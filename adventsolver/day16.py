"""The floor will be lava: trace light beams through mirrors and splitters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tile(Enum):
    """A cell of the contraption."""

    EMPTY = "."
    FORWARD_MIRROR = "/"
    BACKWARD_MIRROR = "\\"
    VERT_SPLITTER = "|"
    HORZ_SPLITTER = "-"

    @classmethod
    def parse(cls, ch: str) -> Tile:
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"invalid tile {ch!r}") from None


class Direction(Enum):
    """Direction of travel as a (row, column) step."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


_FORWARD = {
    Direction.LEFT: Direction.DOWN,
    Direction.RIGHT: Direction.UP,
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
}

_BACKWARD = {
    Direction.LEFT: Direction.UP,
    Direction.RIGHT: Direction.DOWN,
    Direction.UP: Direction.LEFT,
    Direction.DOWN: Direction.RIGHT,
}


def _deflect(tile: Tile, direction: Direction) -> tuple[Direction, ...]:
    """Directions a beam leaves a tile in, given the direction it travels."""
    if tile is Tile.FORWARD_MIRROR:
        return (_FORWARD[direction],)
    if tile is Tile.BACKWARD_MIRROR:
        return (_BACKWARD[direction],)
    if tile is Tile.VERT_SPLITTER and direction.is_horizontal:
        return (Direction.UP, Direction.DOWN)
    if tile is Tile.HORZ_SPLITTER and not direction.is_horizontal:
        return (Direction.LEFT, Direction.RIGHT)
    return (direction,)


@dataclass
class Contraption:
    """A grid of mirrors and splitters."""

    grid: list[list[Tile]]

    @classmethod
    def parse(cls, text: str) -> Contraption:
        grid = [[Tile.parse(ch) for ch in line] for line in text.splitlines()]
        if not grid or not grid[0]:
            raise ValueError("empty contraption")
        return cls(grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def energized_tiles(self, start_row: int, start_col: int, start_dir: Direction) -> int:
        """Number of tiles a beam entering at the given tile passes through."""
        if not self._inside(start_row, start_col):
            raise ValueError(f"start ({start_row}, {start_col}) is outside the contraption")
        seen: set[tuple[int, int, Direction]] = set()
        pending = [(start_row, start_col, start_dir)]
        while pending:
            state = pending.pop()
            if state in seen:
                continue
            seen.add(state)
            row, col, direction = state
            for out in _deflect(self.grid[row][col], direction):
                d_row, d_col = out.value
                next_row, next_col = row + d_row, col + d_col
                if self._inside(next_row, next_col):
                    pending.append((next_row, next_col, out))
        return len({(row, col) for row, col, _ in seen})

    def max_energized_tiles(self) -> int:
        """Best result over every beam entering from an edge."""
        last_row = self.height - 1
        last_col = self.width - 1
        starts = [
            *((0, col, Direction.DOWN) for col in range(self.width)),
            *((last_row, col, Direction.UP) for col in range(self.width)),
            *((row, 0, Direction.RIGHT) for row in range(self.height)),
            *((row, last_col, Direction.LEFT) for row in range(self.height)),
        ]
        return max(self.energized_tiles(*start) for start in starts)


def part1(text: str) -> int:
    return Contraption.parse(text).energized_tiles(0, 0, Direction.RIGHT)


def part2(text: str) -> int:
    return Contraption.parse(text).max_energized_tiles()