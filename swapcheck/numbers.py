"""Number parsing, number formatting, word splitting and character classes."""

from __future__ import annotations

from collections.abc import Iterable

_WHITESPACE = frozenset(" \f\n\r\t\v")
_SIGNS = {"-": -1, "+": 1}

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce VALUE to a two's-complement signed integer of BITS bits."""
    span = 1 << bits
    half = span >> 1
    return (value + half) % span - half


def _leading_number(text: str) -> int:
    """Read the first number in TEXT after whitespace and an optional sign.

    Text that does not begin with a number, after the whitespace and the
    sign, reads as 0.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in _SIGNS:
        sign = _SIGNS[text[position]]
        position += 1
    start = position
    while position < len(text) and is_digit(text[position]):
        position += 1
    digits = text[start:position]
    if not digits:
        return 0
    return sign * int(digits)


def parse_int(text: str) -> int:
    """Return the first number found in TEXT as a 32-bit signed integer.

    Leading whitespace and one sign are accepted; reading stops at the first
    character that is not a digit. Values outside the 32-bit range wrap.
    """
    return _wrap(_leading_number(text), 32)


def parse_long(text: str) -> int:
    """Return the first number found in TEXT as a 64-bit signed integer.

    Follows the same rules as parse_int, wrapping at 64 bits instead.
    """
    return _wrap(_leading_number(text), 64)


def int_to_str(number: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def split_words(text: str, separator: str) -> list[str]:
    """Return the non-empty words of TEXT separated by the SEPARATOR character.

    An empty or NUL separator leaves TEXT whole as a single word. Empty TEXT
    has no words.
    """
    if len(separator) > 1:
        raise ValueError("separator must be a single character")
    if not text:
        return []
    if separator in ("", "\0"):
        return [text]
    return [word for word in text.split(separator) if word]


def join_args(args: Iterable[str]) -> str:
    """Join the arguments into one string, each followed by a single space."""
    return "".join(f"{arg} " for arg in args)


def _code(char: str | int) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return char


def is_alpha(char: str | int) -> bool:
    """Tell whether CHAR is an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: str | int) -> bool:
    """Tell whether CHAR is an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: str | int) -> bool:
    """Tell whether CHAR is an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """Tell whether CHAR lies in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """Tell whether CHAR is a printable ASCII character."""
    return 32 <= _code(char) <= 126