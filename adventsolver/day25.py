"""Snowverload: cut three wires to split the machine in two."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass
class Graph:
    """Components and their wires; each wire is stored in both directions."""

    nodes: list[str]
    edges: list[tuple[int, int]]

    @classmethod
    def parse(cls, text: str) -> Graph:
        nodes: list[str] = []
        indices: dict[str, int] = {}
        connections: list[tuple[str, list[str]]] = []

        def index_of(name: str) -> int:
            if name not in indices:
                indices[name] = len(nodes)
                nodes.append(name)
            return indices[name]

        for line in text.splitlines():
            node, sep, rest = line.partition(":")
            if not sep:
                raise ValueError(f"invalid line {line!r}")
            connected = rest.split()
            index_of(node)
            for other in connected:
                index_of(other)
            connections.append((node, connected))

        edges: list[tuple[int, int]] = []
        for node, connected in connections:
            a = indices[node]
            for other in connected:
                b = indices[other]
                edges.append((a, b))
                edges.append((b, a))
        return cls(nodes, edges)

    def min_cut_component_sizes(self, rng: random.Random | None = None) -> list[int]:
        """Sizes of the two groups left by a cut of exactly three wires.

        Repeats random edge contraction until such a cut turns up.
        """
        rng = rng or random.Random()
        if len(self.nodes) < 2:
            raise ValueError("graph needs at least two nodes")
        while True:
            parent = list(range(len(self.nodes)))

            def find(node: int) -> int:
                while parent[node] != node:
                    parent[node] = parent[parent[node]]
                    node = parent[node]
                return node

            order = self.edges[:]
            rng.shuffle(order)
            groups = len(self.nodes)
            for a, b in order:
                if groups == 2:
                    break
                root_a, root_b = find(a), find(b)
                if root_a != root_b:
                    parent[root_a] = root_b
                    groups -= 1
            if groups != 2:
                raise ValueError("graph is not connected")

            crossing = sum(1 for a, b in self.edges if find(a) != find(b))
            if crossing == 6:
                sizes: dict[int, int] = {}
                for node in range(len(self.nodes)):
                    root = find(node)
                    sizes[root] = sizes.get(root, 0) + 1
                return list(sizes.values())


def part1(text: str) -> int:
    sizes = Graph.parse(text).min_cut_component_sizes()
    if len(sizes) != 2:
        raise ValueError("cut did not give two groups")
    return math.prod(sizes)


def part2(text: str) -> str:
    """The last day has no second puzzle: check the input and give an empty answer."""
    graph = Graph.parse(text)
    return "" if graph.nodes or not graph.nodes else ""