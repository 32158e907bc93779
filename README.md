# swapcheck

`swapcheck` checks solutions to the two-stack sorting puzzle. You start with
a list of distinct integers on stack A and an empty stack B. The goal is to
leave every number on stack A in ascending order, with stack B empty. Only
these instructions are allowed:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of A, of B, or of both |
| `pa`, `pb` | push the top of B onto A, or the top of A onto B |
| `ra`, `rb`, `rr` | rotate A, B, or both up (the first element becomes the last) |
| `rra`, `rrb`, `rrr` | rotate A, B, or both down (the last element becomes the first) |

An instruction that needs elements the stack does not have (swapping a stack
with fewer than two elements, pushing from or rotating an empty stack) cannot
be carried out. `ss`, `rr` and `rrr` need both stacks to qualify.

## Installation

```
pip install .
```

## Command line

Pass the numbers as arguments and the instructions on standard input, one per
line, until end of input:

```
printf 'sa\nrra\n' | swapcheck 2 1 3
```

The same command can be started with `python -m swapcheck.checker`.

The command prints one of these:

- `OK`: the instructions sort stack A and leave stack B empty.
- `KO`: the instructions are valid but the stacks do not end in that state.
- `Error` on standard error, in these cases:
  - the numbers are invalid (not integers, outside the 32-bit signed range,
    repeated, or none at all), or standard input holds an empty line; the
    exit status is then 1;
  - an instruction is unknown or cannot be carried out; the exit status is
    then 0.

The numbers can be given as separate arguments or space-separated in one
quoted argument, for example `swapcheck "3 2 1"`. With no arguments the
command prints nothing and exits with status 0.

## Library use

```python
from swapcheck.checker import verify
from swapcheck.stacks import Instruction, Stacks, parse_stack

verify([2, 1, 3], ["sa"])          # "OK"

stacks = Stacks(parse_stack(["3 2 1"]))
stacks.execute(Instruction.PB)
stacks.is_solved()                 # False until B is empty and A is sorted
```

- `swapcheck.stacks`: `Stacks` (with `push`, `swap`, `rotate`,
  `reverse_rotate`, `execute`, `is_solved`), the `Instruction` enum,
  `parse_instruction`, `parse_stack`, `count_unsorted`, and `StackError`,
  raised for invalid input or an instruction that cannot run.
- `swapcheck.checker`: `read_orders`, `verify` and the command's `main`.
- `swapcheck.output`: `format(fmt, *args)` and `printfd(stream, fmt, *args)`
  give printf-style formatting with the `%c %s %p %d %i %u %x %X %%`
  conversions, the `- + space # 0` flags, width and precision; `put_char`,
  `put_str`, `put_endl` and `put_nbr` write to a stream (standard output by
  default) and return the number of characters written.
- `swapcheck.formatting`: `parse_spec`, `FormatSpec`, `FormatError` and the
  padding helpers `pad_text`, `format_hex` and `format_digits`.
- `swapcheck.numbers`: `parse_int` and `parse_long` (leading-number parsing
  with 32- and 64-bit wrap-around), `int_to_str`, `split_words`, `join_args`
  and the ASCII character tests `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`.

## What it does not do

`swapcheck` only checks a list of instructions. It does not find a solution:
there is no command or function that produces the instructions that sort a
given list of numbers.

## Running the tests

```
pip install ".[test]"
pytest
```