import pytest

from cubescape.text import WHITESPACE, is_space, parse_int, split_fields, trim


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_blanks(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", ",", "", "  "])
def test_is_space_rejects_others(c):
    assert is_space(c) is False


def test_split_fields_simple():
    assert split_fields("1,2,3", ",") == ["1", "2", "3"]


def test_split_fields_drops_empty_fields():
    assert split_fields(",,a,,b,", ",") == ["a", "b"]


@pytest.mark.parametrize("text", ["", ",,,"])
def test_split_fields_nothing_left(text):
    assert split_fields(text, ",") == []


def test_split_fields_rejoin_roundtrip():
    text = "111\n101\n111"
    assert "\n".join(split_fields(text, "\n")) == text


def test_trim_whitespace_both_ends():
    assert trim(" \t./wall.xpm \n", WHITESPACE) == "./wall.xpm"


def test_trim_keeps_inner_characters():
    assert trim("  a b  ", " ") == "a b"


def test_trim_empty_set_keeps_text():
    assert trim("  abc ", "") == "  abc "


def test_trim_all_removed():
    assert trim("   ", " ") == ""


@pytest.mark.parametrize("n", [0, 7, 42, 255, 1000])
def test_parse_int_roundtrip(n):
    assert parse_int(str(n)) == n


def test_parse_int_leading_blanks_and_sign():
    assert parse_int(" \t 7") == 7
    assert parse_int("-5") == -5
    assert parse_int("+9") == 9


def test_parse_int_trailing_spaces_allowed():
    assert parse_int("12  ") == 12


def test_parse_int_without_digits_is_zero():
    assert parse_int("   ") == 0


@pytest.mark.parametrize("text", ["1 2", "3a", "12\t", "--1"])
def test_parse_int_rejects_trailing_garbage(text):
    with pytest.raises(ValueError):
        parse_int(text)