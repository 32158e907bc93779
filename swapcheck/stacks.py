"""The two stacks of the sorting puzzle and the instructions that move them."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum

from swapcheck.numbers import INT_MAX, INT_MIN, join_args, split_words


class StackError(ValueError):
    """Raised for invalid input values or an instruction that cannot run."""


class Instruction(Enum):
    """The instructions understood by the checker."""

    PA = 0
    PB = 1
    SA = 2
    RRA = 3
    RA = 4
    SB = 5
    RRB = 6
    RB = 7
    SS = 8
    RRR = 9
    RR = 10


_NAMES = {instruction.name.lower(): instruction for instruction in Instruction}
_NUMBER = re.compile(r"[+-]?[0-9]+")


def parse_instruction(text: str) -> Instruction:
    """Return the instruction named exactly by TEXT, such as 'pa' or 'rrr'."""
    try:
        return _NAMES[text]
    except KeyError:
        raise StackError(f"unknown instruction: {text!r}") from None


def parse_stack(args: Iterable[str]) -> list[int]:
    """Return the integers given in ARGS, in order.

    Each argument may hold several space-separated numbers. Every number
    must be an integer within the 32-bit signed range, and no number may
    appear twice; otherwise StackError is raised, as it is when no number
    is given at all.
    """
    values: list[int] = []
    seen: set[int] = set()
    for token in split_words(join_args(args), " "):
        if not _NUMBER.fullmatch(token):
            raise StackError(f"not an integer: {token!r}")
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise StackError(f"out of range: {token}")
        if value in seen:
            raise StackError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    if not values:
        raise StackError("no values given")
    return values


def count_unsorted(values: Sequence[int], direction: int) -> int:
    """Count the neighbouring pairs of VALUES that break the wanted order.

    A negative DIRECTION checks ascending order, a positive one descending
    order. An empty sequence counts as sorted.
    """
    pairs = zip(values, list(values)[1:])
    if direction < 0:
        return sum(1 for first, second in pairs if first > second)
    return sum(1 for first, second in pairs if first < second)


class Stacks:
    """Stack A, holding the values to sort, and the initially empty stack B.

    The top of each stack is its first element.
    """

    def __init__(self, values: Iterable[int] = (), other: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque(other)

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _stack(self, name: str) -> deque[int]:
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"no stack named {name!r}")

    @staticmethod
    def _need(stack: deque[int], count: int, action: str) -> None:
        if len(stack) < count:
            raise StackError(f"cannot {action}: too few elements")

    def push(self, source: str, target: str) -> None:
        """Move the top element of SOURCE onto TARGET ('a' or 'b')."""
        origin = self._stack(source)
        destination = self._stack(target)
        self._need(origin, 1, "push")
        destination.appendleft(origin.popleft())

    def swap(self, stack: str) -> None:
        """Exchange the two top elements of STACK."""
        items = self._stack(stack)
        self._need(items, 2, "swap")
        items[0], items[1] = items[1], items[0]

    def rotate(self, stack: str) -> None:
        """Move the top element of STACK to its bottom."""
        items = self._stack(stack)
        self._need(items, 1, "rotate")
        items.rotate(-1)

    def reverse_rotate(self, stack: str) -> None:
        """Move the bottom element of STACK to its top."""
        items = self._stack(stack)
        self._need(items, 1, "reverse rotate")
        items.rotate(1)

    def _both(self, operation, needed: int, action: str) -> None:
        self._need(self.a, needed, action)
        self._need(self.b, needed, action)
        operation("a")
        operation("b")

    def execute(self, instruction: Instruction) -> None:
        """Carry out INSTRUCTION, raising StackError if it cannot be done."""
        if instruction is Instruction.PA:
            self.push("b", "a")
        elif instruction is Instruction.PB:
            self.push("a", "b")
        elif instruction is Instruction.SA:
            self.swap("a")
        elif instruction is Instruction.SB:
            self.swap("b")
        elif instruction is Instruction.RA:
            self.rotate("a")
        elif instruction is Instruction.RB:
            self.rotate("b")
        elif instruction is Instruction.RRA:
            self.reverse_rotate("a")
        elif instruction is Instruction.RRB:
            self.reverse_rotate("b")
        elif instruction is Instruction.SS:
            self._both(self.swap, 2, "swap")
        elif instruction is Instruction.RR:
            self._both(self.rotate, 1, "rotate")
        elif instruction is Instruction.RRR:
            self._both(self.reverse_rotate, 1, "reverse rotate")
        else:
            raise StackError(f"unknown instruction: {instruction!r}")

    def is_solved(self) -> bool:
        """Tell whether A is in ascending order and B is empty."""
        return count_unsorted(list(self.a), -1) == 0 and not self.b