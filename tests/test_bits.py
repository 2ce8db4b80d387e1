import pytest

from translatron.bits import check_bits, get_bits, set_bits, set_field, to_binary


@pytest.mark.parametrize("value,size", [(0, 5), (1, 5), (31, 5), (0xFFFF, 16), (7, 6)])
def test_to_binary_round_trip(value, size):
    text = to_binary(value, size)
    assert len(text) == size
    assert int(text, 2) == value


def test_to_binary_never_truncates():
    text = to_binary(64, 3)
    assert text == to_binary(64, 0)
    assert len(text) > 3
    assert int(text, 2) == 64


def test_to_binary_zero_with_no_width():
    assert to_binary(0, 0) == ""


def test_to_binary_rejects_negative():
    with pytest.raises(ValueError):
        to_binary(-1, 5)


@pytest.mark.parametrize(
    "start,value,size", [(25, 10, 5), (20, 31, 5), (15, 0xFFFF, 16), (31, 35, 6), (5, 0, 6)]
)
def test_set_field_then_get_bits(start, value, size):
    word = set_field(0, start, value, size)
    assert get_bits(word, start, size) == value
    assert check_bits(word, start, to_binary(value, size))


def test_add_instruction_word():
    word = 0
    word = set_field(word, 31, 0, 6)
    word = set_bits(word, 5, "100000")
    word = set_field(word, 15, 9, 5)
    word = set_field(word, 25, 10, 5)
    word = set_field(word, 20, 11, 5)
    assert word == 0x014B4820
    assert check_bits(word, 31, "000000")
    assert check_bits(word, 5, "100000")
    assert not check_bits(word, 5, "100010")
    assert to_binary(get_bits(word, 5, 6), 6) == "100000"


def test_set_bits_never_clears():
    assert set_bits(0xFFFFFFFF, 31, "000000") == 0xFFFFFFFF


def test_set_bits_skips_other_characters():
    assert set_bits(0, 31, "xxxxxx") == 0
    assert set_bits(0, 3, "1x1x") == set_bits(set_bits(0, 3, "1"), 1, "1")


def test_check_bits_ignores_wildcards():
    assert check_bits(0, 31, "xx")
    assert check_bits(0xFFFFFFFF, 31, "x1x1")
    assert not check_bits(0xFFFFFFFF, 31, "x0")


def test_get_bits_whole_word():
    assert get_bits(0xFFFFFFFF, 31, 32) == 0xFFFFFFFF


@pytest.mark.parametrize("start,pattern", [(32, "1"), (2, "1111"), (-1, "1")])
def test_out_of_range_patterns_raise(start, pattern):
    with pytest.raises(ValueError):
        set_bits(0, start, pattern)
    with pytest.raises(ValueError):
        check_bits(0, start, pattern)
    with pytest.raises(ValueError):
        get_bits(0, start, len(pattern))


def test_oversized_field_raises():
    with pytest.raises(ValueError):
        set_field(0, 20, 0xFFFFFFFF, 5)