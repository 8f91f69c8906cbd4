import pytest

from adventsolver.day15 import (
    InitStep,
    LensHashMap,
    hash_label,
    parse_init_seq,
    part1,
    part2,
    sum_hash_seq,
)

EXAMPLE = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7\n"


def _run(text):
    lens_map = LensHashMap()
    for step in parse_init_seq(text):
        lens_map.run_init_step(step)
    return lens_map


def test_hash():
    assert hash_label("HASH") == 52


def test_hash_known_boxes():
    assert hash_label("rn") == 0
    assert hash_label("qp") == 1
    assert hash_label("pc") == 3


def test_sum_hash_seq():
    assert sum_hash_seq(EXAMPLE) == 1320


def test_parse_init_seq():
    steps = parse_init_seq("rn=1,cm-,qp=3,cm=2\n")
    assert steps[0] == InitStep("rn", hash_label("rn"), 1)
    assert steps[1] == InitStep("cm", hash_label("cm"))
    assert steps[1].is_removal
    assert steps[2] == InitStep("qp", hash_label("qp"), 3)
    assert steps[3] == InitStep("cm", hash_label("cm"), 2)


def test_run_init_seq():
    lens_map = _run(EXAMPLE)
    assert len(lens_map.boxes[0]) == 2
    assert len(lens_map.boxes[3]) == 3
    assert list(lens_map.boxes[0].items()) == [("rn", 1), ("cm", 2)]
    assert list(lens_map.boxes[3].items()) == [("ot", 7), ("ab", 5), ("pc", 6)]


def test_focusing_power():
    assert _run(EXAMPLE).focusing_power() == 145


def test_parts():
    assert part1(EXAMPLE) == 1320
    assert part2(EXAMPLE) == 145


def test_lens_out_of_range():
    with pytest.raises(ValueError):
        InitStep.parse("ab=300")


def test_lens_not_a_number():
    with pytest.raises(ValueError):
        InitStep.parse("ab=x")