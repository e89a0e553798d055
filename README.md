# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and prints
the operations that do it, one per line.

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the first two elements of `a` |
| `pa`  | move the top of `b` onto `a` |
| `pb`  | move the top of `a` onto `b` |
| `ra` / `rb`   | rotate `a` / `b` up: the first element becomes the last |
| `rra` / `rrb` | rotate `a` / `b` down: the last element becomes the first |

Each number is first replaced by its rank, meaning the count of numbers smaller
than it. Lists of two to five numbers are sorted by dedicated routines. Longer
lists are sorted with a binary radix sort on those ranks.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
python -m pushswap.cli 2 1
```

Numbers may be given as separate arguments, or several in one argument
separated by spaces.

An argument is rejected in these cases:

- it is empty;
- it starts with a space;
- it holds a character other than a digit, a space, `+` or `-`;
- a sign is followed by a space or ends the argument.

A number is rejected in these cases:

- it is written with more than eleven characters;
- it is not a valid integer;
- it appears twice.

Range is checked before each digit is added, so values far outside the 32-bit
signed range are rejected. A value pushed out of range only by its final digit
wraps around as a 32-bit integer would.

On bad input, `Error` is written to standard error. When no arguments are
given, nothing is written. When the input is already sorted, no operations are
printed. The exit status is 1 in every case, successful runs included.

## Library use

```python
from pushswap.cli import solve, main
from pushswap.parse import (
    InputError, validate_arguments, count_words, stack_size,
    parse_int, parse_numbers, has_duplicates, to_indices,
)
from pushswap.stacks import Stacks, Direction
from pushswap.sort import sort_three, sort_four, sort_five, radix_sort, sort_stacks
```

- `solve(args)` takes the argument strings and returns the list of operations.
  It raises `InputError` for bad input. It also raises `InputError` if the
  operations fail to sort the numbers.
- `main(argv=None)` is the command itself. It reads `sys.argv[1:]` when `argv`
  is not given and returns the exit status.
- `InputError` is a `ValueError` subclass. Its `message` attribute holds the
  text to report.
- `Stacks(a)` holds stacks `a` and `b`, top first. It records every operation
  that takes effect in `moves`. Its methods are:
  - `swap_a()`
  - `push_a()`
  - `push_b()`
  - `rotate(stack, direction)`, where `stack` is `"a"` or `"b"` and
    `direction` is a `Direction` or `"up"` / `"down"`
  - `is_sorted()`
- `sort_stacks(stacks)` picks the routine that suits the size of `a`.

```python
>>> solve(["3", "2", "1"])
['ra', 'sa']
```

## Running the tests

```
pip install .[test]
pytest
```