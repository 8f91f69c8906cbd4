import pytest

from adventsolver.stones import main, solve


def test_no_blinks_counts_distinct_stones():
    assert solve("5178527 8525 22 376299 3 69312 0 275\n", 0) == 8


@pytest.mark.parametrize("blinks", [0, 1, 5, 10])
def test_zero_becomes_one(blinks):
    assert solve("0", blinks + 1) == solve("1", blinks)


@pytest.mark.parametrize("blinks", [0, 1, 5, 10])
def test_odd_digit_count_multiplies(blinks):
    assert solve("1", blinks + 1) == solve("2024", blinks)


@pytest.mark.parametrize("blinks", [0, 3, 8])
def test_even_digits_split(blinks):
    assert solve("1000", blinks + 1) == solve("10 0", blinks)


def test_worked_example():
    assert solve("125 17", 6) == 22
    assert solve("125 17", 25) == 55312


def test_invalid_stone():
    with pytest.raises(ValueError):
        solve("12 x", 1)
    with pytest.raises(ValueError):
        solve("-3", 1)


def test_main_prints_result(capsys):
    assert main(["--stones", "125 17", "--blinks", "6"]) == 0
    assert capsys.readouterr().out.strip() == "22"