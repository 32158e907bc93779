"""Command that checks whether a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from swapcheck.numbers import split_words
from swapcheck.output import printfd
from swapcheck.stacks import StackError, Stacks, parse_instruction, parse_stack


def read_orders(stream: TextIO) -> list[str]:
    """Read instruction lines from STREAM until end of input.

    Raises StackError if an empty line is met.
    """
    collected = []
    for line in stream:
        if line.startswith("\n"):
            raise StackError("empty instruction line")
        collected.append(line)
    return split_words("".join(collected), "\n")


def verify(values: Iterable[int], orders: Sequence[str]) -> str:
    """Run ORDERS on a stack holding VALUES and return 'OK' or 'KO'.

    Raises StackError when an order is unknown or cannot be carried out.
    """
    stacks = Stacks(values)
    for order in orders:
        stacks.execute(parse_instruction(order))
    return "OK" if stacks.is_solved() else "KO"


def main(argv: Sequence[str] | None = None) -> int:
    """Check the instructions on standard input against the numbers in ARGV."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        return 0
    try:
        values = parse_stack(argv)
        orders = read_orders(sys.stdin)
    except StackError:
        printfd(sys.stderr, "Error\n")
        return 1
    try:
        result = verify(values, orders)
    except StackError:
        printfd(sys.stderr, "Error\n")
        return 0
    printfd(sys.stdout, "%s\n", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())