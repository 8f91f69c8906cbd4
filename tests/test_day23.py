import pytest

from adventsolver.day23 import Tile, TrailMap, find_longest_path, part1, part2

EXAMPLE = (
    "#.#####################\n#.......#########...###\n#######.#########.#.###\n"
    "###.....#.>.>.###.#.###\n###v#####.#v#.###.#.###\n###.>...#.#.#.....#...#\n"
    "###v###.#.#.#########.#\n###...#.#.#.......#...#\n#####.#.#.#######.#.###\n"
    "#.....#.#.#.......#...#\n#.#####.#.#.#########v#\n#.#...#...#...###...>.#\n"
    "#.#.#v#######v###.###v#\n#...#.>.#...>.>.#.###.#\n#####v#.#.###v#.#.###.#\n"
    "#.....#...#...#.#.#...#\n#.#########.###.#.#.###\n#...###...#...#...#.###\n"
    "###.###.#.###v#####v###\n#...#...#.#.>.>.#.>.###\n#.###.###.#.###.#.#v###\n"
    "#.....###...###...#...#\n#####################.#\n"
)


def test_parse_map():
    assert TrailMap.parse(EXAMPLE).width == 23


def test_display_round_trip():
    assert str(TrailMap.parse(EXAMPLE)) == EXAMPLE


def test_invalid_tile():
    with pytest.raises(ValueError):
        TrailMap.parse("#x#\n")


def test_longest_path_length():
    assert TrailMap.parse(EXAMPLE).longest_path_length() - 1 == 94


def test_longest_path_length_no_slopes():
    trail = TrailMap.parse(EXAMPLE)
    trail.replace_slopes()
    assert trail.longest_path_length() - 1 == 154


def test_replace_slopes_removes_all_slopes():
    trail = TrailMap.parse(EXAMPLE)
    trail.replace_slopes()
    assert not any(tile.is_slope for tile in trail.tiles)
    assert trail.tiles.count(Tile.PATH) == EXAMPLE.count(".") + sum(
        EXAMPLE.count(ch) for ch in "^v<>"
    )


def test_longest_path_ends_at_goal():
    trail = TrailMap.parse(EXAMPLE)
    path = trail.longest_path(trail.start_index(), [])
    assert path[0] == trail.start_index()
    assert path[-1] == trail.goal_index()
    assert len(set(path)) == len(path)


def test_nodes():
    trail = TrailMap.parse(EXAMPLE)
    trail.replace_slopes()
    assert trail.nodes() == [1, 80, 118, 274, 304, 312, 450, 456, 527]


def test_graph_is_symmetric():
    trail = TrailMap.parse(EXAMPLE)
    trail.replace_slopes()
    edges = trail.graph()
    for (a, b), dist in edges.items():
        assert edges[(b, a)] == dist


def test_graph_longest_path():
    trail = TrailMap.parse(EXAMPLE)
    trail.replace_slopes()
    path, length = find_longest_path(
        trail.graph(), trail.start_index(), trail.goal_index(), [], 0
    )
    assert length == 154
    assert path[0] == 1
    assert path[-1] == 527


def test_find_longest_path_small_graph():
    edges = {(0, 1): 2, (1, 2): 3, (0, 2): 4}
    assert find_longest_path(edges, 0, 2, [], 0) == ([0, 1, 2], 5)


def test_find_longest_path_unreachable():
    assert find_longest_path({(0, 1): 2}, 0, 5, [], 0) == ([], 0)


def test_parts():
    assert part1(EXAMPLE) == 94
    assert part2(EXAMPLE) == 154