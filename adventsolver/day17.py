"""Clumsy crucible: least heat loss path with limits on straight runs."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Direction of travel as a (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))


@dataclass(frozen=True)
class SearchNode:
    """A search state: position, direction of arrival and length of the straight run."""

    index: int
    dir: Direction
    steps: int


@dataclass
class HeatMap:
    """A grid of single-digit heat loss values, stored row by row."""

    blocks: list[int]
    width: int

    @classmethod
    def parse(cls, text: str) -> HeatMap:
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("empty map")
        blocks: list[int] = []
        for line in lines:
            for ch in line:
                if not ch.isdigit():
                    raise ValueError(f"invalid block {ch!r}")
                blocks.append(int(ch))
        return cls(blocks, len(lines[0]))

    @property
    def height(self) -> int:
        return len(self.blocks) // self.width

    def _neighbors(self, node: SearchNode, min_steps: int, max_steps: int):
        row, col = divmod(node.index, self.width)
        goal = (self.height - 1, self.width - 1)
        for direction in Direction:
            if direction is node.dir.opposite:
                continue
            d_row, d_col = direction.value
            next_row, next_col = row + d_row, col + d_col
            if not (0 <= next_row < self.height and 0 <= next_col < self.width):
                continue
            continuing = direction is node.dir
            if continuing and node.steps == max_steps:
                continue
            if (
                not continuing
                and node.steps < min_steps
                and not (direction is Direction.DOWN and node.index == 0)
            ):
                continue
            if (
                min_steps > 1
                and (next_row, next_col) == goal
                and (not continuing or node.steps < min_steps - 1)
            ):
                continue
            if continuing and not (direction is Direction.RIGHT and node.index == 0):
                steps = node.steps + 1
            else:
                steps = 1
            yield SearchNode(next_row * self.width + next_col, direction, steps)

    def minimal_heat_loss(self, min_steps: int, max_steps: int) -> int:
        """Least total heat loss from the top-left block to the bottom-right one."""
        goal_index = len(self.blocks) - 1
        start = SearchNode(0, Direction.RIGHT, 0)
        heat_loss = {start: 0}
        order = itertools.count()
        queue = [(0, next(order), start)]
        while queue:
            cost, _, current = heapq.heappop(queue)
            if cost > heat_loss[current]:
                continue
            if current.index == goal_index:
                return cost
            for neighbor in self._neighbors(current, min_steps, max_steps):
                tentative = cost + self.blocks[neighbor.index]
                if tentative < heat_loss.get(neighbor, float("inf")):
                    heat_loss[neighbor] = tentative
                    heapq.heappush(queue, (tentative, next(order), neighbor))
        raise ValueError("no path found")


def part1(text: str) -> int:
    return HeatMap.parse(text).minimal_heat_loss(1, 3)


def part2(text: str) -> int:
    return HeatMap.parse(text).minimal_heat_loss(4, 10)