"""A long walk: the longest hike through a forest of paths and slopes."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence


class Tile(Enum):
    """A cell of the trail map."""

    PATH = "."
    FOREST = "#"
    SLOPE_UP = "^"
    SLOPE_DOWN = "v"
    SLOPE_LEFT = "<"
    SLOPE_RIGHT = ">"

    @classmethod
    def parse(cls, ch: str) -> Tile:
        try:
            return cls(ch)
        except ValueError:
            raise ValueError(f"invalid tile {ch!r}") from None

    @property
    def is_slope(self) -> bool:
        return self in _SLOPE_STEPS


_SLOPE_STEPS = {
    Tile.SLOPE_UP: (-1, 0),
    Tile.SLOPE_DOWN: (1, 0),
    Tile.SLOPE_LEFT: (0, -1),
    Tile.SLOPE_RIGHT: (0, 1),
}

# Each step, paired with the slope that may not be climbed when taking it.
_MOVES = (
    ((-1, 0), Tile.SLOPE_DOWN),
    ((1, 0), Tile.SLOPE_UP),
    ((0, -1), Tile.SLOPE_RIGHT),
    ((0, 1), Tile.SLOPE_LEFT),
)


@dataclass
class TrailMap:
    """A grid of tiles stored row by row."""

    tiles: list[Tile]
    width: int

    @classmethod
    def parse(cls, text: str) -> TrailMap:
        lines = text.splitlines()
        if not lines or not lines[0]:
            raise ValueError("empty map")
        tiles = [Tile.parse(ch) for line in lines for ch in line]
        return cls(tiles, len(lines[0]))

    @property
    def height(self) -> int:
        return len(self.tiles) // self.width

    def replace_slopes(self) -> None:
        """Treat every slope as an ordinary path."""
        self.tiles = [Tile.PATH if tile.is_slope else tile for tile in self.tiles]

    def start_index(self) -> int:
        return 1

    def goal_index(self) -> int:
        return len(self.tiles) - 2

    def _step(self, index: int, d_row: int, d_col: int) -> int | None:
        row, col = divmod(index, self.width)
        row += d_row
        col += d_col
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.width + col
        return None

    def _options(self, index: int, visited: set[int]) -> list[int]:
        tile = self.tiles[index]
        if tile.is_slope:
            target = self._step(index, *_SLOPE_STEPS[tile])
            if target is None:
                raise ValueError(f"slope at {index} leads off the map")
            return [target]
        options = []
        for (d_row, d_col), forbidden in _MOVES:
            target = self._step(index, d_row, d_col)
            if target is None or target in visited:
                continue
            neighbour = self.tiles[target]
            if neighbour is Tile.FOREST or neighbour is forbidden:
                continue
            options.append(target)
        return options

    def longest_path_length(self) -> int:
        """Number of tiles on the longest hike, start and goal included."""
        return len(self.longest_path(self.start_index(), []))

    def longest_path(self, cur_idx: int, path_so_far: Sequence[int]) -> list[int]:
        """Longest hike to the goal continuing from cur_idx; empty if there is none."""
        path = list(path_so_far)
        visited = set(path)
        goal = self.goal_index()
        while True:
            path.append(cur_idx)
            visited.add(cur_idx)
            options = self._options(cur_idx, visited)
            if len(options) == 1 and options[0] != goal:
                cur_idx = options[0]
            else:
                break

        longest: list[int] = []
        for new_idx in options:
            if new_idx == goal:
                candidate = path + [new_idx]
            else:
                candidate = self.longest_path(new_idx, path)
            if len(candidate) > len(longest):
                longest = candidate
        return longest

    def _path_neighbours(self, index: int) -> list[int]:
        neighbours = []
        for (d_row, d_col), _ in _MOVES:
            target = self._step(index, d_row, d_col)
            if target is not None and self.tiles[target] is Tile.PATH:
                neighbours.append(target)
        return neighbours

    def nodes(self) -> list[int]:
        """Start, every junction in reading order, then goal."""
        junctions = [
            index
            for index, tile in enumerate(self.tiles)
            if tile is Tile.PATH and len(self._path_neighbours(index)) > 2
        ]
        return [self.start_index(), *junctions, self.goal_index()]

    def next_node(
        self, nodes: Sequence[int], start_node: int, next_path: int
    ) -> tuple[int, int]:
        """Follow a corridor from start_node through next_path to the next node."""
        node_set = set(nodes)
        dist = 1
        current = next_path
        previous = start_node
        while current not in node_set:
            step = next(
                (n for n in self._path_neighbours(current) if n != previous), None
            )
            if step is None:
                raise ValueError(f"dead end at {current}")
            previous, current = current, step
            dist += 1
        return current, dist

    def graph(self) -> dict[tuple[int, int], int]:
        """Directed edges between nodes, with corridor lengths."""
        nodes = self.nodes()
        edges: dict[tuple[int, int], int] = {}
        for node in nodes:
            for neighbour in self._path_neighbours(node):
                target, dist = self.next_node(nodes, node, neighbour)
                edges[(node, target)] = dist
        return edges

    def __str__(self) -> str:
        return "".join(
            "".join(t.value for t in self.tiles[start:start + self.width]) + "\n"
            for start in range(0, len(self.tiles), self.width)
        )


def find_longest_path(
    edges: Mapping[tuple[int, int], int],
    cur_idx: int,
    goal_idx: int,
    path_so_far: Sequence[int],
    path_length_so_far: int,
) -> tuple[list[int], int]:
    """Longest simple path over the edges from cur_idx to goal_idx, with its length."""
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for (source, target), dist in edges.items():
        adjacency[source].append((target, dist))

    path = [*path_so_far, cur_idx]
    visited = set(path)
    best_path: list[int] = []
    best_length = 0

    def search(node: int, length: int) -> None:
        nonlocal best_path, best_length
        for target, dist in adjacency.get(node, ()):
            if target in visited:
                continue
            total = length + dist
            if target == goal_idx:
                if total > best_length:
                    best_length = total
                    best_path = path + [target]
                continue
            visited.add(target)
            path.append(target)
            search(target, total)
            path.pop()
            visited.discard(target)

    search(cur_idx, path_length_so_far)
    return best_path, best_length


def part1(text: str) -> int:
    return TrailMap.parse(text).longest_path_length() - 1


def part2(text: str) -> int:
    trail = TrailMap.parse(text)
    trail.replace_slopes()
    _, length = find_longest_path(
        trail.graph(), trail.start_index(), trail.goal_index(), [], 0
    )
    return length