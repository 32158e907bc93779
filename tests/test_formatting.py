import pytest

from swapcheck.formatting import (
    FormatError,
    FormatSpec,
    format_digits,
    format_hex,
    pad_text,
    parse_spec,
)


def test_parse_plain_specifier():
    spec = parse_spec("d rest")
    assert spec.specifier == "d"
    assert spec.width == 0
    assert spec.precision is None
    assert spec.consumed == 1
    assert not (spec.minus or spec.plus or spec.space or spec.alternate or spec.zero)


def test_parse_flags_width_precision():
    spec = parse_spec("-#12.7x tail")
    assert spec.minus and spec.alternate
    assert spec.width == 12
    assert spec.precision == 7
    assert spec.specifier == "x"
    assert spec.consumed == len("-#12.7x")


def test_parse_dot_without_digits_is_zero_precision():
    spec = parse_spec(".s")
    assert spec.precision == 0
    assert spec.consumed == 2


def test_parse_zero_flag_then_width():
    spec = parse_spec("08d")
    assert spec.zero
    assert spec.width == 8


@pytest.mark.parametrize("text", ["5q", "", "-", "3.4", "k"])
def test_parse_invalid_raises(text):
    with pytest.raises(FormatError):
        parse_spec(text)


def test_unsigned_clears_sign_flags():
    spec = parse_spec("+ u")
    assert spec.specifier == "u"
    assert not spec.plus
    assert not spec.space


def test_percent_clears_minus_and_plus():
    spec = parse_spec("-+%")
    assert spec.specifier == "%"
    assert not spec.minus
    assert not spec.plus


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_spec("z")


def test_pad_right_aligns_by_default():
    result = pad_text(FormatSpec("s", width=5), "ab")
    assert len(result) == 5
    assert result.endswith("ab")
    assert result.strip() == "ab"


def test_pad_left_aligns_with_minus():
    result = pad_text(FormatSpec("s", minus=True, width=5), "ab")
    assert len(result) == 5
    assert result.startswith("ab")
    assert result.strip() == "ab"


def test_pad_truncates_to_length():
    assert pad_text(FormatSpec("s"), "hello", 2) == "he"


def test_pad_never_pads_percent():
    assert pad_text(FormatSpec("%", width=10), "%") == "%"


def test_pad_no_padding_when_width_small():
    assert pad_text(FormatSpec("s", width=2), "hello") == "hello"


def test_hex_alternate_lower_and_upper():
    assert format_hex(FormatSpec("x", alternate=True), "ff") == "0xff"
    assert format_hex(FormatSpec("X", alternate=True), "FF") == "0XFF"


def test_hex_alternate_ignored_for_zero():
    assert format_hex(FormatSpec("x", alternate=True), "0") == "0"


def test_hex_precision_zero_fills():
    result = format_hex(FormatSpec("x", precision=4), "ff")
    assert len(result) == 4
    assert result.endswith("ff")
    assert set(result[:-2]) == {"0"}


def test_hex_zero_flag_fills_width_after_prefix():
    result = format_hex(FormatSpec("x", alternate=True, zero=True, width=8), "ff")
    assert len(result) == 8
    assert result.startswith("0x")
    assert result.endswith("ff")
    assert set(result[2:-2]) == {"0"}


def test_hex_pointer_only_padded():
    result = format_hex(FormatSpec("p", alternate=True, zero=True, width=6), "0x1a")
    assert result == "  0x1a"


def test_digits_plus_and_space():
    assert format_digits(FormatSpec("d", plus=True), "42") == "+42"
    assert format_digits(FormatSpec("d", space=True), "42") == " 42"
    assert format_digits(FormatSpec("d", plus=True), "-42") == "-42"


def test_digits_precision_keeps_sign_first():
    result = format_digits(FormatSpec("d", precision=5), "-42")
    assert result.startswith("-")
    assert len(result) == 6
    assert result.endswith("42")
    assert set(result[1:-2]) == {"0"}


def test_digits_zero_flag_fills_to_width():
    result = format_digits(FormatSpec("d", zero=True, width=6), "-42")
    assert len(result) == 6
    assert result[0] == "-"
    assert int(result) == -42


def test_digits_zero_with_zero_precision():
    assert format_digits(FormatSpec("d", precision=0), "0") == ""
    assert format_digits(FormatSpec("d", plus=True, precision=0), "0") == "+"
    result = format_digits(FormatSpec("d", width=3, precision=0), "0")
    assert result == " " * 3


def test_digits_minus_pads_on_right():
    result = format_digits(FormatSpec("d", minus=True, width=5), "42")
    assert result.rstrip() == "42"
    assert len(result) == 5


def test_digits_from_parsed_spec():
    spec = parse_spec("+08d")
    result = format_digits(spec, "7")
    assert len(result) == 8
    assert result.startswith("+")
    assert int(result) == 7