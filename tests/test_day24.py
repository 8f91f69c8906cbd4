import pytest

from adventsolver.day24 import (
    Hailstone,
    Vec3,
    intersecting_hailstone_3d,
    parse_hailstones,
    part2,
    path_intersections_2d,
)

EXAMPLE = (
    "19, 13, 30 @ -2,  1, -2\n18, 19, 22 @ -1, -1, -2\n20, 25, 34 @ -2, -2, -4\n"
    "12, 31, 28 @ -1, -2, -1\n20, 19, 15 @  1, -5, -3\n"
)


def test_parse_vec3():
    assert Vec3.parse("-2,  1, -2") == Vec3(-2.0, 1.0, -2.0)


def test_parse_hailstone():
    assert Hailstone.parse("19, 13, 30 @ -2,  1, -2") == Hailstone(
        Vec3(19.0, 13.0, 30.0), Vec3(-2.0, 1.0, -2.0)
    )


def test_parse_hailstones_count():
    assert len(parse_hailstones(EXAMPLE)) == 5


def test_path_intersections():
    assert path_intersections_2d(parse_hailstones(EXAMPLE), 7.0, 27.0) == 2


def test_parallel_paths_do_not_count():
    stones = parse_hailstones("0, 0, 0 @ 1, 1, 0\n0, 1, 0 @ 1, 1, 0\n")
    assert path_intersections_2d(stones, -100.0, 100.0) == 0


def test_intersecting_hailstone_3d():
    assert intersecting_hailstone_3d(parse_hailstones(EXAMPLE)) == Hailstone(
        Vec3(24.0, 13.0, 10.0), Vec3(-3.0, 1.0, 2.0)
    )


def test_part2():
    assert part2(EXAMPLE) == 47


def test_too_few_hailstones():
    with pytest.raises(ValueError):
        intersecting_hailstone_3d(parse_hailstones(EXAMPLE)[:4])


def test_invalid_hailstone():
    with pytest.raises(ValueError):
        Hailstone.parse("1, 2, 3")