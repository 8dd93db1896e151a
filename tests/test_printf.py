import io

import pytest

from wirefdf.printf import (
    format_char,
    format_hex,
    format_pointer,
    format_signed,
    format_string,
    format_unsigned,
    printf,
    render,
)


def test_format_char_from_int_and_str():
    assert format_char(ord("A")) == "A"
    assert format_char("z") == "z"
    assert format_char(ord("B") + 256) == "B"


def test_format_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_format_string_null():
    assert format_string(None) == "(null)"
    assert format_string("hello") == "hello"


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_format_signed_round_trip(value):
    assert int(format_signed(value)) == value


def test_format_signed_zero():
    assert format_signed(0) == "0"


@pytest.mark.parametrize("value", [0, 1, 99, 2**31, 2**32 - 1])
def test_format_unsigned_round_trip(value):
    assert int(format_unsigned(value)) == value


def test_format_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 10, 255, 0xABCDEF, 2**32 - 1])
def test_format_hex_round_trip(value):
    lower = format_hex(value, False)
    upper = format_hex(value, True)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_format_hex_wraps_negative():
    assert int(format_hex(-1, False), 16) == 2**32 - 1


def test_format_pointer_null_and_zero():
    assert format_pointer(None) == "0x0"
    assert format_pointer(0) == "0x0"


def test_format_pointer_round_trip():
    text = format_pointer(0x7FFEE4B2C9A0)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x7FFEE4B2C9A0


def test_render_plain_text():
    assert render("no conversions here") == "no conversions here"


def test_render_mixed_conversions():
    assert render("%s has %d items", "box", 5) == "box has 5 items"


def test_render_percent_literal():
    assert render("100%%") == "100%"


def test_render_null_string_and_pointer():
    assert render("%s %p", None, None) == "(null) 0x0"


def test_render_unknown_conversion_emits_nothing():
    assert render("a%qb") == "ab"


def test_render_trailing_percent():
    assert render("end%") == "end"


def test_render_d_and_i_wrap_to_int32():
    assert int(render("%d", 2**32 - 1)) == -1
    assert render("%i", -15) == render("%d", -15)


def test_render_hex_cases():
    assert render("%x", 255) == "ff"
    assert render("%X", 255) == "FF"


def test_render_missing_argument():
    with pytest.raises(TypeError):
        render("%d and %d", 1)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%c%s %u", "x", "yz", 42, stream=out)
    assert out.getvalue() == "xyz 42"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("value %d\n", 3)
    captured = capsys.readouterr()
    assert captured.out == "value 3\n"
    assert count == len(captured.out)