import pytest

from oracompat import plvchr
from oracompat.plvstr import InvalidParameterError


def test_nth_positive():
    assert plvchr.nth("abcde", 2) == "b"


def test_nth_zero_is_first():
    assert plvchr.nth("abcde", 0) == plvchr.first("abcde")


def test_nth_negative_counts_from_end():
    assert plvchr.nth("abcde", -1) == plvchr.last("abcde")
    assert plvchr.nth("abcde", -2) == "d"


def test_nth_out_of_range_is_empty():
    assert plvchr.nth("abc", 10) == ""
    assert plvchr.nth("abc", -10) == ""


def test_first_and_last():
    assert plvchr.first("xyz") == "x"
    assert plvchr.last("xyz") == "z"


@pytest.mark.parametrize(
    "char,kind",
    [(" ", 1), ("7", 2), ("'", 3), ("!", 4), ("~", 4), ("q", 5), ("Q", 5)],
)
def test_is_kind_matches(char, kind):
    assert plvchr.is_kind(char, kind) is True


@pytest.mark.parametrize(
    "char,kind",
    [("a", 1), ("a", 2), ("a", 3), ("a", 4), ("1", 5), ("1", 4)],
)
def test_is_kind_does_not_match(char, kind):
    assert plvchr.is_kind(char, kind) is False


def test_is_kind_uses_first_character():
    assert plvchr.is_kind("9abc", 2) is True


def test_is_kind_by_code():
    assert plvchr.is_kind(ord("A"), 5) is True
    assert plvchr.is_kind(ord("0"), 2) is True
    assert plvchr.is_kind(ord("0"), 5) is False


def test_is_kind_non_ascii_is_letter():
    assert plvchr.is_kind("č", 5) is True
    assert plvchr.is_kind("č", 2) is False


def test_is_kind_invalid_kind():
    with pytest.raises(InvalidParameterError):
        plvchr.is_kind("a", 6)


def test_is_kind_empty_string():
    with pytest.raises(InvalidParameterError):
        plvchr.is_kind("", 1)


def test_char_name_control_characters():
    assert plvchr.char_name("\x00") == "NULL"
    assert plvchr.char_name("\t") == "HT"
    assert plvchr.char_name(" ") == "SP"


def test_char_name_printable_returns_character():
    assert plvchr.char_name("abc") == "a"


def test_char_name_empty():
    with pytest.raises(InvalidParameterError):
        plvchr.char_name("")