"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parse import InputError, has_duplicates, parse_numbers, to_indices, validate_arguments
from .sort import sort_stacks
from .stacks import Stacks


def _play(args: Sequence[str]) -> Stacks:
    args = validate_arguments(args)
    values = parse_numbers(args)
    if has_duplicates(values):
        raise InputError()
    stacks = Stacks(values)
    if stacks.is_sorted():
        return stacks
    stacks = Stacks(to_indices(values))
    sort_stacks(stacks)
    return stacks


def solve(args: Sequence[str]) -> list[str]:
    """Return the moves that sort the numbers in ``args``.

    Raises :class:`InputError` for bad input, or if the moves fail to sort.
    """
    stacks = _play(args)
    if not stacks.is_sorted():
        raise InputError()
    return stacks.moves


def main(argv: Sequence[str] | None = None) -> int:
    """Print one move per line; errors go to standard error.

    The exit status is 1 in every case, as the program has always reported.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        stacks = _play(args)
    except InputError as error:
        if error.message:
            sys.stderr.write(error.message + "\n")
        return 1
    for move in stacks.moves:
        sys.stdout.write(move + "\n")
    if not stacks.is_sorted():
        sys.stderr.write("Error\n")
    return 1


if __name__ == "__main__":
    sys.exit(main())