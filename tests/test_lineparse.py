from pathlib import Path

import pytest

from wirefdf.lineparse import (
    DEFAULT_COLOR,
    clean_line,
    count_columns,
    map_path,
    parse_color,
    parse_hex,
    parse_int,
)


@pytest.mark.parametrize("value", [0, 1, 15, 255, 0xABCDEF, 0xFFFFFF, 0x123456])
def test_parse_hex_round_trip(value):
    assert parse_hex(format(value, "x")) == value
    assert parse_hex(format(value, "X")) == value


def test_parse_hex_empty_is_zero():
    assert parse_hex("") == 0


@pytest.mark.parametrize("text", ["0xFF", "12g", "ff ", "-1", "f_f"])
def test_parse_hex_rejects_non_digits(text):
    with pytest.raises(ValueError):
        parse_hex(text)


def test_parse_int_plain_and_signed():
    assert parse_int("42") == 42
    assert parse_int("-42") == -42
    assert parse_int("+7") == 7


def test_parse_int_stops_at_first_non_digit():
    assert parse_int("  -17,0xff") == -17


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("+-3") == 0


def test_parse_color_defaults_to_white():
    assert parse_color("10") == DEFAULT_COLOR
    assert parse_color("10") == 0xFFFFFF


def test_parse_color_reads_hex_after_prefix():
    assert parse_color("10,0xff0000") == 0xFF0000
    assert parse_color("-3,0x00FF00") == 0x00FF00


@pytest.mark.parametrize("tokens", [["1"], ["1", "2"], ["0", "10,0xff", "-4", "7"]])
def test_count_columns_matches_tokens(tokens):
    line = " ".join(tokens)
    assert count_columns(line) == len(tokens)
    assert count_columns(line + " ") == len(tokens)
    assert count_columns(" " + line) == len(tokens)


def test_count_columns_of_nothing():
    assert count_columns(None) == 0
    assert count_columns("") == 0
    assert count_columns(" ") == 0


@pytest.mark.parametrize("line", [None, "", "\n", "\n1 2"])
def test_clean_line_empty_inputs(line):
    assert clean_line(line) is None


def test_clean_line_squeezes_spaces_and_drops_newline():
    raw = "0   1  2 3\n"
    cleaned = clean_line(raw)
    assert "  " not in cleaned
    assert "\n" not in cleaned
    assert cleaned.split() == raw.split()
    assert cleaned == "0 1 2 3"


def test_clean_line_stops_at_first_newline():
    assert clean_line("1 2\n3 4") == "1 2"


def test_clean_line_output_counts_like_tokens():
    cleaned = clean_line("5    6    7   \n")
    assert count_columns(cleaned) == 3


def test_map_path():
    assert map_path("42.fdf") == Path("maps") / "42.fdf"