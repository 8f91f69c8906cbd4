"""Sand slabs: let bricks fall and see which can be removed safely."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Cube:
    """A unit cube position."""

    x: int
    y: int
    z: int

    @classmethod
    def parse(cls, text: str) -> Cube:
        parts = text.split(",")
        if len(parts) != 3:
            raise ValueError(f"invalid cube {text!r}")
        x, y, z = (int(part) for part in parts)
        return cls(x, y, z)


@dataclass(frozen=True)
class Brick:
    """A straight line of cubes from start to end inclusive."""

    start: Cube
    end: Cube

    @classmethod
    def parse(cls, text: str) -> Brick:
        start, sep, end = text.partition("~")
        if not sep:
            raise ValueError(f"invalid brick {text!r}")
        return cls(Cube.parse(start), Cube.parse(end))

    def is_horizontal(self) -> bool:
        return self.start.z == self.end.z

    def is_vertical(self) -> bool:
        return self.start.z != self.end.z

    def footprint(self) -> Iterator[tuple[int, int]]:
        """The (x, y) columns the brick occupies."""
        for x in range(self.start.x, self.end.x + 1):
            for y in range(self.start.y, self.end.y + 1):
                yield x, y

    def lowered_to(self, bottom: int) -> Brick:
        drop = self.start.z - bottom
        return Brick(
            replace(self.start, z=self.start.z - drop),
            replace(self.end, z=self.end.z - drop),
        )


def parse_bricks(text: str) -> list[Brick]:
    return [Brick.parse(line) for line in text.splitlines()]


def settle_bricks(bricks: list[Brick]) -> int:
    """Let every brick fall as far as it can, in place; return how many moved."""
    for brick in bricks:
        if (
            brick.end.x < brick.start.x
            or brick.end.y < brick.start.y
            or brick.end.z < brick.start.z
        ):
            raise ValueError(f"brick ends out of order: {brick}")

    tops: dict[tuple[int, int], int] = {}
    moved = 0
    for index in sorted(range(len(bricks)), key=lambda i: bricks[i].start.z):
        brick = bricks[index]
        columns = list(brick.footprint())
        resting = max((tops.get(column, 0) for column in columns), default=0)
        bottom = min(brick.start.z, resting + 1)
        if bottom < brick.start.z:
            brick = brick.lowered_to(bottom)
            bricks[index] = brick
            moved += 1
        for column in columns:
            tops[column] = brick.end.z
    return moved


def _removal_effects(bricks: Sequence[Brick]) -> Iterator[int]:
    """For each brick, how many others fall once it is taken away."""
    for index in range(len(bricks)):
        remaining = [brick for i, brick in enumerate(bricks) if i != index]
        yield settle_bricks(remaining)


def disintegratable_bricks(bricks: Sequence[Brick]) -> int:
    return sum(1 for fallen in _removal_effects(bricks) if fallen == 0)


def sum_bricks_moved(bricks: Sequence[Brick]) -> int:
    return sum(_removal_effects(bricks))


def part1(text: str) -> int:
    bricks = parse_bricks(text)
    settle_bricks(bricks)
    return disintegratable_bricks(bricks)


def part2(text: str) -> int:
    bricks = parse_bricks(text)
    settle_bricks(bricks)
    return sum_bricks_moved(bricks)