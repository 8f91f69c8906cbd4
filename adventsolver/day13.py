"""Mirror valleys: find lines of reflection in patterns of ash and rock."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class Tile(Enum):
    """A single cell of a pattern."""

    ASH = "."
    ROCK = "#"

    @classmethod
    def parse(cls, ch: str) -> Tile:
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"invalid tile {ch!r}") from None

    def swapped(self) -> Tile:
        return Tile.ROCK if self is Tile.ASH else Tile.ASH

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Symmetry:
    """A line of reflection, either between rows or between columns."""

    horizontal: bool
    size: int

    @classmethod
    def across_rows(cls, rows_above: int) -> Symmetry:
        return cls(True, rows_above)

    @classmethod
    def across_columns(cls, cols_left: int) -> Symmetry:
        return cls(False, cols_left)

    @property
    def score(self) -> int:
        return 100 * self.size if self.horizontal else self.size


def _mirrors_at(lines: Sequence[Sequence[Tile]], split: int) -> bool:
    below = range(split, min(2 * split, len(lines)))
    above = reversed(range(split))
    return all(lines[a] == lines[b] for a, b in zip(below, above))


@dataclass
class Pattern:
    """A rectangular grid of tiles."""

    rows: list[list[Tile]]

    @classmethod
    def parse(cls, text: str) -> Pattern:
        rows = [[Tile.parse(ch) for ch in line] for line in text.splitlines()]
        if not rows or not rows[0]:
            raise ValueError("empty pattern")
        return cls(rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def find_symmetries(self) -> list[Symmetry]:
        """All lines of reflection, row splits first, then column splits."""
        rows = [tuple(row) for row in self.rows]
        columns = list(zip(*rows))
        found = [
            Symmetry.across_rows(split)
            for split in range(1, len(rows))
            if _mirrors_at(rows, split)
        ]
        found.extend(
            Symmetry.across_columns(split)
            for split in range(1, len(columns))
            if _mirrors_at(columns, split)
        )
        return found

    def find_symmetry_smudge(self) -> Symmetry:
        """The new line of reflection that appears when exactly one tile is flipped."""
        symmetries = self.find_symmetries()
        if not symmetries:
            raise ValueError(f"no symmetry found in pattern:\n{self}")
        original = symmetries[0]
        for row in self.rows:
            for col, tile in enumerate(row):
                row[col] = tile.swapped()
                candidates = self.find_symmetries()
                row[col] = tile
                for symmetry in candidates:
                    if symmetry != original:
                        return symmetry
        raise ValueError(f"no smudge symmetry found in pattern:\n{self}")

    def __str__(self) -> str:
        return "".join("".join(map(str, row)) + "\n" for row in self.rows)


def parse_patterns(text: str) -> list[Pattern]:
    """Split blank-line separated patterns."""
    patterns: list[Pattern] = []
    block: list[str] = []
    for line in text.splitlines():
        if line:
            block.append(line)
        else:
            patterns.append(Pattern.parse("\n".join(block)))
            block = []
    patterns.append(Pattern.parse("\n".join(block)))
    return patterns


def answer(patterns: Sequence[Pattern]) -> int:
    total = 0
    for pattern in patterns:
        symmetries = pattern.find_symmetries()
        if not symmetries:
            raise ValueError("no symmetry found")
        total += symmetries[0].score
    return total


def answer_smudge(patterns: Sequence[Pattern]) -> int:
    return sum(pattern.find_symmetry_smudge().score for pattern in patterns)


def part1(text: str) -> int:
    return answer(parse_patterns(text))


def part2(text: str) -> int:
    return answer_smudge(parse_patterns(text))