"""Step counter: garden plots reachable in an exact number of steps."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Callable

Cell = tuple[int, int]

_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _walk(
    start: Cell, steps: int, height: int, width: int, is_rock: Callable[[Cell], bool]
) -> set[Cell]:
    """Cells occupied after exactly `steps` moves within a bounded grid."""
    plots = {start}
    for _ in range(steps):
        plots = {
            (row + d_row, col + d_col)
            for row, col in plots
            for d_row, d_col in _STEPS
            if 0 <= row + d_row < height
            and 0 <= col + d_col < width
            and not is_rock((row + d_row, col + d_col))
        }
    return plots


@dataclass(frozen=True)
class Garden:
    """A grid of garden plots and rocks with a starting position."""

    rocks: frozenset[Cell]
    width: int
    height: int
    start: Cell

    @classmethod
    def parse(cls, text: str) -> Garden:
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("empty garden")
        rocks: set[Cell] = set()
        start: Cell | None = None
        for row, line in enumerate(lines):
            for col, ch in enumerate(line):
                if ch == "#":
                    rocks.add((row, col))
                elif ch == "S":
                    start = (row, col)
                elif ch != ".":
                    raise ValueError(f"invalid tile {ch!r}")
        if start is None:
            raise ValueError("garden has no start")
        return cls(frozenset(rocks), len(lines[0]), len(lines), start)

    @property
    def size(self) -> int:
        """Side length; the garden must be square."""
        if self.height != self.width:
            raise ValueError(f"garden is not square: {self.height}x{self.width}")
        return self.width

    def plots_reachable(self, n: int) -> int:
        """Number of plots that can be occupied after exactly n steps."""
        size = self.size
        return len(_walk(self.start, n, size, size, self.rocks.__contains__))

    def plots_reachable_fast(self, steps: int) -> int:
        """Plots reachable on an infinitely repeating garden, for an odd step count."""
        if steps % 2 != 1:
            raise ValueError("step count must be odd")
        size = self.size
        n, remainder = divmod(steps, size)

        counts = self.expand_and_move(2, 2 * size + remainder)
        even_full = counts[7]
        odd_full = counts[12]
        top, left, right, bottom = counts[2], counts[10], counts[14], counts[22]
        corners = counts[1] + counts[3] + counts[15] + counts[19]
        partial_corners = counts[6] + counts[8] + counts[16] + counts[18]

        full_gardens = 2 * (n - 1) * n + 1
        odd_full_gardens = ((n - 1) * n) // 2 + ((n - 2) * (n - 1)) // 2
        even_full_gardens = full_gardens - odd_full_gardens

        full = even_full_gardens * even_full + odd_full_gardens * odd_full
        partials = top + left + right + bottom + n * corners + (n - 1) * partial_corners
        return full + partials

    def expand_and_move(self, expansion: int, steps: int) -> list[int]:
        """Reachable plot counts in each copy of a garden tiled `expansion` times each way.

        Counts are listed copy by copy, row by row.
        """
        size = self.size
        copies = 2 * expansion + 1
        full = copies * size
        start = (expansion * size + self.start[0], expansion * size + self.start[1])

        def is_rock(cell: Cell) -> bool:
            return (cell[0] % size, cell[1] % size) in self.rocks

        plots = _walk(start, steps, full, full, is_rock)
        per_copy = Counter((row // size, col // size) for row, col in plots)
        return [per_copy[(r, c)] for r in range(copies) for c in range(copies)]


def part1(text: str) -> int:
    return Garden.parse(text).plots_reachable(64)


def part2(text: str) -> int:
    return Garden.parse(text).plots_reachable_fast(26501365)