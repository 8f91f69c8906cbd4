import pytest

from adventsolver.day20 import (
    Module,
    ModuleKind,
    Modules,
    Pulse,
    button_presses_until_low_pulse_to_module,
    part1,
)

FIRST = "broadcaster -> a, b, c\n%a -> b\n%b -> c\n%c -> inv\n&inv -> a\n"
SECOND = "broadcaster -> a\n%a -> inv, con\n&inv -> b\n%b -> con\n&con -> output\n"


def test_parse_modules():
    modules = Modules.parse(FIRST)
    assert len(modules.modules) == 5
    assert modules.modules["broadcaster"] == Module(
        ModuleKind.BROADCAST, "broadcaster", ["a", "b", "c"]
    )
    assert modules.modules["a"] == Module(ModuleKind.FLIP_FLOP, "a", ["b"])
    assert modules.modules["b"] == Module(ModuleKind.FLIP_FLOP, "b", ["c"])
    assert modules.modules["c"] == Module(ModuleKind.FLIP_FLOP, "c", ["inv"])
    assert modules.modules["inv"] == Module(
        ModuleKind.CONJUNCTION, "inv", ["a"], last_inputs={"c": Pulse.LOW}
    )


def test_push_button_first_example():
    modules = Modules.parse(FIRST)
    modules.push_button()
    assert modules.pulse_counts == {Pulse.LOW: 8, Pulse.HIGH: 4}
    for _ in range(999):
        modules.push_button()
    assert modules.pulse_counts == {Pulse.LOW: 8000, Pulse.HIGH: 4000}
    assert modules.pulse_counts_product() == 32000000


def test_push_button_second_example():
    modules = Modules.parse(SECOND)
    for _ in range(1000):
        modules.push_button()
    assert modules.pulse_counts == {Pulse.LOW: 4250, Pulse.HIGH: 2750}
    assert modules.pulse_counts_product() == 11687500
    assert modules.output == "output"


def test_part1_matches_example():
    assert part1(SECOND) == 11687500


def test_invalid_module_name():
    with pytest.raises(ValueError):
        Module.parse("relay -> a")


def test_missing_arrow():
    with pytest.raises(ValueError):
        Module.parse("%a b")


def test_push_until_high_input():
    modules = Modules.parse("broadcaster -> a\n%a -> con\n&con -> rx\n")
    modules.push_button_until_module_has_high_input("con", "a")
    assert modules.button_presses == 2


def test_push_until_unknown_input():
    modules = Modules.parse("broadcaster -> a\n%a -> con\n&con -> rx\n")
    with pytest.raises(ValueError):
        modules.push_button_until_module_has_high_input("con", "zz")


def test_button_presses_until_low_pulse():
    text = (
        "broadcaster -> pq, fg, dk, fm\n"
        "%pq -> vr\n%fg -> vr\n%dk -> vr\n%fm -> vr\n&vr -> rx\n"
    )
    assert button_presses_until_low_pulse_to_module(text, "vr") == 2