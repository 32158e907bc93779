"""printf-style output to text streams, with the helpers that write to them."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from swapcheck.formatting import FormatSpec, format_digits, format_hex, pad_text, parse_spec
from swapcheck.numbers import int_to_str

_UINT32_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1


def _to_int32(value: int) -> int:
    return ((value + (1 << 31)) & _UINT32_MASK) - (1 << 31)


def _next_argument(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _argument_text(specifier: str, arguments: Iterator[Any]) -> str:
    """Turn the next argument into the raw text the specifier asks for."""
    if specifier == "%":
        return "%"
    value = _next_argument(arguments)
    if specifier == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError("%c expects a single character")
            return value
        return chr(value & 0xFF)
    if specifier == "u":
        return str(value & _UINT32_MASK)
    if specifier in ("d", "i"):
        return int_to_str(_to_int32(value))
    if specifier == "x":
        return f"{value & _UINT32_MASK:x}"
    if specifier == "X":
        return f"{value & _UINT32_MASK:X}"
    if specifier == "p":
        if value is None or value == 0:
            return "(nil)"
        address = value if isinstance(value, int) else id(value)
        return f"0x{address & _POINTER_MASK:x}"
    # specifier == "s"
    if value is None:
        return "(null)"
    return str(value)


def _apply_spec(spec: FormatSpec, text: str) -> str:
    """Apply the flags, width and precision of SPEC to the raw TEXT."""
    specifier = spec.specifier
    if specifier == "c" and text == "\0":
        padding = " " * (spec.width - 1) if spec.width > 1 else ""
        return "\0" + padding if spec.minus else padding + "\0"
    precision = spec.precision
    if (
        specifier == "s"
        and precision is not None
        and precision <= 5
        and text.startswith("(null)")
    ):
        precision = 0
    if specifier in ("s", "c", "%"):
        if specifier == "s" and precision is not None and precision < len(text):
            return pad_text(spec, text, precision)
        return pad_text(spec, text, len(text))
    if specifier in ("x", "X", "p"):
        if text == "0" and precision == 0:
            return pad_text(spec, text, 0)
        return format_hex(spec, text)
    return format_digits(spec, text)


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    """Yield the pieces of output for FMT, literal runs and conversions in turn."""
    arguments = iter(args)
    position = 0
    while position < len(fmt):
        percent = fmt.find("%", position)
        if percent < 0:
            yield fmt[position:]
            return
        if percent > position:
            yield fmt[position:percent]
        spec = parse_spec(fmt[percent + 1 :])
        yield _apply_spec(spec, _argument_text(spec.specifier, arguments))
        position = percent + 1 + spec.consumed


def format(fmt: str, *args: Any) -> str:
    """Return FMT with its conversions replaced by the formatted ARGS.

    Supports the specifiers c, s, p, d, i, u, x, X and %, with the flags
    '-', '+', ' ', '#' and '0', a width and a precision. Raises FormatError
    on an invalid conversion and TypeError when arguments run out.
    """
    return "".join(_render(fmt, args))


def printfd(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write FMT formatted with ARGS to STREAM and return the characters written.

    Output produced before an invalid conversion is still written.
    """
    count = 0
    for piece in _render(fmt, args):
        stream.write(piece)
        count += len(piece)
    return count


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> int:
    """Write one character to STREAM and return 1."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)
    return 1


def put_str(text: str, stream: TextIO | None = None) -> int:
    """Write TEXT to STREAM and return its length."""
    _target(stream).write(text)
    return len(text)


def put_endl(text: str, stream: TextIO | None = None) -> int:
    """Write TEXT and a newline to STREAM and return the characters written."""
    return put_str(text, stream) + put_char("\n", stream)


def put_nbr(number: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit signed integer in decimal to STREAM and return its length."""
    return put_str(int_to_str(number), stream)