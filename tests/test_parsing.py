import random

import pytest

from parsing import TextInput, clamp, parse_sequence, random_sequence


def test_example_input_is_clamped():
    assert parse_sequence("6 7 1 0 2 1") == [6, 7, 1, 1, 2, 1]


def test_all_separators():
    assert parse_sequence("3,4;5\t6  7") == [3, 4, 5, 6, 7]


def test_unparsable_tokens_are_skipped():
    assert parse_sequence("a 5 x 1.5 20") == [5, 13]


def test_signed_integers():
    assert parse_sequence("-4 +3") == [1, 3]


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "; , ;"])
def test_nothing_usable_returns_none(raw):
    assert parse_sequence(raw) is None


def test_custom_range():
    assert parse_sequence("0 5 99", low=2, high=9) == [2, 5, 9]


def test_clamp():
    assert clamp(0, 1, 13) == 1
    assert clamp(14, 1, 13) == 13
    assert clamp(7, 1, 13) == 7


def test_random_sequence_count_and_range():
    values = random_sequence(5, random.Random(3))
    assert len(values) == 5
    assert all(1 <= v <= 13 for v in values)


def test_random_sequence_is_never_empty():
    assert len(random_sequence(0, random.Random(3))) == 1


def test_random_sequence_is_reproducible():
    assert random_sequence(8, random.Random(42)) == random_sequence(8, random.Random(42))


def test_text_input_reads_current_text():
    source = TextInput("")
    assert source.read_sequence() is None
    source.text = "2 9"
    assert source.read_sequence() == [2, 9]


def test_tokens_wider_than_int32_are_skipped():
    assert parse_sequence("5 3000000000 2") == [5, 2]
    assert parse_sequence("5 -3000000000 2") == [5, 2]


def test_int32_bounds_are_clamped():
    assert parse_sequence("2147483647 -2147483648") == [13, 1]
    assert parse_sequence("2147483648") is None


def test_leading_zeros_still_parse():
    assert parse_sequence("000000000007") == [7]


def test_huge_digit_strings_are_skipped():
    assert parse_sequence("5 " + "9" * 5000 + " 2") == [5, 2]
    assert parse_sequence("9" * 5000) is None
