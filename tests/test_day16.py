import pytest

from adventsolver.day16 import Contraption, Direction, Tile, part1, part2

EXAMPLE = ".|...\\....\n|.-.\\.....\n.....|-...\n........|.\n..........\n.........\\\n..../.\\\\..\n.-.-/..|..\n.|....-|.\\\n..//.|....\n"


def test_parse():
    contraption = Contraption.parse(EXAMPLE)
    assert contraption.width == 10
    assert contraption.height == 10
    assert contraption.grid[0][1] is Tile.VERT_SPLITTER
    assert contraption.grid[0][5] is Tile.BACKWARD_MIRROR


def test_energized_tiles():
    contraption = Contraption.parse(EXAMPLE)
    assert contraption.energized_tiles(0, 0, Direction.RIGHT) == 46


def test_max_energized_tiles():
    contraption = Contraption.parse(EXAMPLE)
    assert contraption.max_energized_tiles() == 51


def test_parts():
    assert part1(EXAMPLE) == 46
    assert part2(EXAMPLE) == 51


def test_straight_line_energizes_row():
    contraption = Contraption.parse("....\n....\n")
    assert contraption.energized_tiles(0, 0, Direction.RIGHT) == 4


def test_splitter_sends_both_ways():
    contraption = Contraption.parse("...\n.|.\n...\n")
    assert contraption.energized_tiles(1, 0, Direction.RIGHT) == 4


def test_invalid_tile():
    with pytest.raises(ValueError):
        Contraption.parse("..x\n")


def test_start_outside():
    contraption = Contraption.parse("...\n")
    with pytest.raises(ValueError):
        contraption.energized_tiles(2, 0, Direction.RIGHT)