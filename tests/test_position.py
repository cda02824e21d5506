import pytest

from ovpager.position import (
    jump_position,
    parse_go_line,
    parse_write_ba,
    position,
    split_multi_color,
)


@pytest.mark.parametrize(
    "height, text, expected",
    [
        (30, "1", 1),
        (30, ".5", 15),
        (30, "20%", 6),
        (45, "30%", 13.5),
    ],
)
def test_position_source_cases(height, text, expected):
    assert position(height, text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "   ", "abc", ".abc", "x%", ".0", "0%"],
)
def test_position_unusable_is_zero(text):
    assert position(30, text) == 0


def test_position_trims_spaces():
    assert position(30, "  7  ") == 7


def test_position_percentage_of_ten():
    assert position(10, "50%") == 5


@pytest.mark.parametrize(
    "height, text, expected",
    [
        (30, "1", 1),
        (10, ".3", 3),
    ],
)
def test_jump_position_source_cases(height, text, expected):
    assert jump_position(height, text) == expected


def test_jump_position_negative_counts_from_bottom():
    assert jump_position(30, "-1") == 28


def test_jump_position_rounds_half_away_from_zero():
    assert jump_position(30, "2.5") == 3


def test_parse_go_line_whole_line():
    assert parse_go_line(100, "10") == (10, None)


def test_parse_go_line_with_wrap_number():
    assert parse_go_line(100, "10.5") == (10, 5)


def test_parse_go_line_percentage():
    assert parse_go_line(100, "50%") == (50, None)


def test_parse_go_line_empty():
    assert parse_go_line(100, "") is None


def test_parse_go_line_garbage_is_zero():
    assert parse_go_line(100, "abc") == (0, None)


def test_parse_go_line_nan_raises():
    with pytest.raises(ValueError):
        parse_go_line(100, "nan")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3:5", (3, 5)),
        ("3", (3, None)),
        (":4", (0, 4)),
        ("3:", (3, 0)),
        ("", (0, None)),
    ],
)
def test_parse_write_ba(text, expected):
    assert parse_write_ba(text) == expected


@pytest.mark.parametrize("text", ["x", "1:y", " 1"])
def test_parse_write_ba_invalid(text):
    with pytest.raises(ValueError):
        parse_write_ba(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a b  c", ["a", "b", "c"]),
        ('"a b" c', ['"a b"', "c"]),
        ("", []),
        ("  error:  warn: ", ["error:", "warn:"]),
    ],
)
def test_split_multi_color(text, expected):
    assert split_multi_color(text) == expected