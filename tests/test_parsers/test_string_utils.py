import pytest

from flagwork.parser.utils import join, parse_signed_int, split


def test_split():
    assert split("a,b,c", ",") == ["a", "b", "c"]
    assert split("a,,b", ",") == ["a", "", "b"]
    assert split("a,,b", ",", keep_empty=False) == ["a", "b"]
    assert split("a::b", "::") == ["a", "b"]
    assert split("", ",") == [""]


def test_split_empty_separator():
    with pytest.raises(ValueError):
        split("abc", "")


def test_join():
    assert join(["a", "b"], ",") == "a,b"
    assert join([], ",") == ""


@pytest.mark.parametrize(
    "token, expected",
    [
        ("42", 42),
        ("+7", 7),
        ("-3", -3),
        ("007", 7),
        ("", None),
        ("1.5", None),
        ("1_000", None),
        ("0x10", None),
        (" 7", None),
        ("abc", None),
    ],
)
def test_parse_signed_int(token, expected):
    assert parse_signed_int(token) == expected
