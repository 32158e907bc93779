"""Conversion specifications for printf-style formatting and their padding rules."""

from __future__ import annotations

from dataclasses import dataclass, replace

from swapcheck.numbers import is_digit, parse_int

SPECIFIERS = frozenset("diuxXcsp%")
_FLAG_CHARS = frozenset("-+ #0")


class FormatError(ValueError):
    """Raised when a conversion specification is not valid."""


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion: flags, width, precision and specifier.

    ``precision`` is None when no '.' was given. ``consumed`` is the number
    of characters after the '%' that the specification occupies, the
    specifier included.
    """

    specifier: str
    minus: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    zero: bool = False
    width: int = 0
    precision: int | None = None
    consumed: int = 1


def _skip_digits(text: str, position: int) -> int:
    while position < len(text) and is_digit(text[position]):
        position += 1
    return position


def parse_spec(text: str) -> FormatSpec:
    """Parse the conversion that starts TEXT, the characters after a '%'.

    Raises FormatError when no valid specifier follows the flags, width and
    precision.
    """
    flags = {"-": False, "+": False, " ": False, "#": False, "0": False}
    position = 0
    while position < len(text) and text[position] in _FLAG_CHARS:
        flags[text[position]] = True
        position += 1

    width = 0
    if position < len(text) and is_digit(text[position]):
        width = parse_int(text[position:])
    position = _skip_digits(text, position)

    precision: int | None = None
    if position < len(text) and text[position] == ".":
        position += 1
        if position < len(text) and is_digit(text[position]):
            precision = parse_int(text[position:])
        else:
            precision = 0
    position = _skip_digits(text, position)

    if position >= len(text) or text[position] not in SPECIFIERS:
        raise FormatError(f"invalid conversion specification: %{text!r}")
    specifier = text[position]

    spec = FormatSpec(
        specifier=specifier,
        minus=flags["-"],
        plus=flags["+"],
        space=flags[" "],
        alternate=flags["#"],
        zero=flags["0"],
        width=width,
        precision=precision,
        consumed=position + 1,
    )
    if specifier == "%":
        spec = replace(spec, minus=False, plus=False)
    elif specifier == "u":
        spec = replace(spec, plus=False, space=False)
    return spec


def pad_text(spec: FormatSpec, text: str, length: int | None = None) -> str:
    """Return the first LENGTH characters of TEXT padded to the spec's width.

    Padding is with spaces, on the right when the '-' flag is set and on the
    left otherwise. A '%' conversion is never padded.
    """
    if length is None:
        length = len(text)
    body = text[:length]
    if spec.width > length and spec.specifier != "%":
        return body.ljust(spec.width) if spec.minus else body.rjust(spec.width)
    return body


def _with_precision(spec: FormatSpec, precision: int, sign: int, text: str) -> str:
    """Zero-fill TEXT to PRECISION digits after its SIGN leading characters."""
    head, digits = text[:sign], text[sign:]
    filled = head + digits.rjust(precision, "0")
    return pad_text(spec, filled, precision + sign)


def format_hex(spec: FormatSpec, text: str) -> str:
    """Apply the '#', '0', precision and width rules to hexadecimal TEXT."""
    if spec.specifier == "p":
        return pad_text(spec, text)
    sign = 0
    if spec.alternate and text != "0":
        prefix = "0X" if spec.specifier == "X" else "0x"
        text = prefix + text
        sign = 2
    length = len(text)
    if spec.precision is not None and spec.precision > length - sign:
        return _with_precision(spec, spec.precision, sign, text)
    if spec.zero and spec.precision is None and spec.width > length:
        return _with_precision(spec, spec.width - sign, sign, text)
    return pad_text(spec, text, length)


def format_digits(spec: FormatSpec, text: str) -> str:
    """Apply the sign, '0', precision and width rules to decimal TEXT."""
    if text == "0" and spec.precision == 0:
        if spec.plus:
            return pad_text(spec, "+", 1)
        return pad_text(spec, "", 0)
    signed = not (text and is_digit(text[0]))
    if not signed and spec.plus:
        text = "+" + text
        signed = True
    elif not signed and spec.space:
        text = " " + text
        signed = True
    sign = int(signed)
    length = len(text)
    if spec.precision is not None and spec.precision > length - sign:
        return _with_precision(spec, spec.precision, sign, text)
    if spec.zero and spec.precision is None and spec.width > length:
        return _with_precision(spec, spec.width - sign, sign, text)
    return pad_text(spec, text, length)