"""Never tell me the odds: hailstone paths and the rock that hits them all."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float

    @classmethod
    def parse(cls, text: str) -> Vec3:
        parts = text.split(",")
        if len(parts) != 3:
            raise ValueError(f"invalid vector {text!r}")
        x, y, z = (float(part.strip()) for part in parts)
        return cls(x, y, z)


@dataclass(frozen=True)
class Hailstone:
    pos: Vec3
    vel: Vec3

    @classmethod
    def parse(cls, text: str) -> Hailstone:
        pos, sep, vel = text.partition(" @ ")
        if not sep:
            raise ValueError(f"invalid hailstone {text!r}")
        return cls(Vec3.parse(pos), Vec3.parse(vel))


def parse_hailstones(text: str) -> list[Hailstone]:
    return [Hailstone.parse(line) for line in text.splitlines()]


def path_intersections_2d(hailstones: Sequence[Hailstone], low: float, high: float) -> int:
    """Pairs whose future x-y paths cross inside the square [low, high]."""
    count = 0
    for i, h1 in enumerate(hailstones):
        for h2 in hailstones[i + 1:]:
            denominator = h2.vel.x * h1.vel.y - h1.vel.x * h2.vel.y
            if denominator == 0 or h1.vel.x == 0:
                # Parallel paths never meet at a single point
                continue
            u = (
                h1.vel.x * h2.pos.y
                - h1.vel.x * h1.pos.y
                - h1.vel.y * h2.pos.x
                + h1.vel.y * h1.pos.x
            ) / denominator
            t = (h2.pos.x + u * h2.vel.x - h1.pos.x) / h1.vel.x
            if t < 0 or u < 0:
                continue
            int_x = h1.pos.x + h1.vel.x * t
            int_y = h1.pos.y + h1.vel.y * t
            if low <= int_x <= high and low <= int_y <= high:
                count += 1
    return count


def _solve(matrix: list[list[Fraction]], rhs: list[Fraction]) -> list[Fraction]:
    """Solve a square linear system exactly."""
    size = len(matrix)
    rows = [row[:] + [value] for row, value in zip(matrix, rhs)]
    for col in range(size):
        pivot = next((r for r in range(col, size) if rows[r][col] != 0), None)
        if pivot is None:
            raise ValueError("hailstone system is singular")
        rows[col], rows[pivot] = rows[pivot], rows[col]
        lead = rows[col][col]
        rows[col] = [value / lead for value in rows[col]]
        for r in range(size):
            if r != col and rows[r][col] != 0:
                factor = rows[r][col]
                rows[r] = [a - factor * b for a, b in zip(rows[r], rows[col])]
    return [row[-1] for row in rows]


def _round(value: Fraction) -> float:
    """Round half away from zero."""
    magnitude = math.floor(abs(value) + Fraction(1, 2))
    return float(magnitude if value >= 0 else -magnitude)


_PAIRS = ((0, 1), (0, 2), (0, 3), (0, 4))


def _solve_plane(hailstones: Sequence[Hailstone], axis: str) -> list[Fraction]:
    def px(h: Hailstone) -> Fraction:
        return Fraction(h.pos.x)

    def vx(h: Hailstone) -> Fraction:
        return Fraction(h.vel.x)

    def pa(h: Hailstone) -> Fraction:
        return Fraction(getattr(h.pos, axis))

    def va(h: Hailstone) -> Fraction:
        return Fraction(getattr(h.vel, axis))

    matrix = []
    rhs = []
    for i, j in _PAIRS:
        hi, hj = hailstones[i], hailstones[j]
        matrix.append([va(hj) - va(hi), vx(hi) - vx(hj), pa(hi) - pa(hj), px(hj) - px(hi)])
        rhs.append(px(hi) * va(hi) - px(hj) * va(hj) + pa(hj) * vx(hj) - pa(hi) * vx(hi))
    return _solve(matrix, rhs)


def intersecting_hailstone_3d(hailstones: Sequence[Hailstone]) -> Hailstone:
    """The rock throw that hits every hailstone, found from the first five."""
    if len(hailstones) < 5:
        raise ValueError("at least five hailstones are needed")
    x, y, vx, vy = _solve_plane(hailstones, "y")
    _, z, _, vz = _solve_plane(hailstones, "z")
    return Hailstone(
        Vec3(-_round(x), -_round(y), -_round(z)),
        Vec3(-_round(vx), -_round(vy), -_round(vz)),
    )


def part1(text: str) -> int:
    return path_intersections_2d(parse_hailstones(text), 200000000000000.0, 400000000000000.0)


def part2(text: str) -> int:
    rock = intersecting_hailstone_3d(parse_hailstones(text))
    return int(rock.pos.x + rock.pos.y + rock.pos.z)