"""Checking and reading the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

INT_MAX = 2147483647
INT_MIN = -2147483648
_MAX_TOKEN_LENGTH = 11
_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the input cannot be sorted; ``message`` is what to report."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)
        self.message = message


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def validate_arguments(args: Iterable[str]) -> list[str]:
    """Check the raw arguments and return them as a list.

    No arguments at all raises an :class:`InputError` with an empty message.
    """
    args = list(args)
    if not args:
        raise InputError("")
    for arg in args:
        if not arg or arg[0] == " ":
            raise InputError()
        for char, following in zip(arg, chain(arg[1:], [None])):
            if not _is_digit(char) and char not in " +-":
                raise InputError()
            if char in "+-" and following in (None, " "):
                raise InputError()
    return args


def count_words(text: str, sep: str) -> int:
    """Number of non-empty runs of characters other than ``sep``."""
    return sum(1 for word in text.split(sep) if word)


def stack_size(args: Iterable[str]) -> int:
    """How many numbers the arguments hold; a word-less argument counts as one."""
    return sum(count_words(arg, " ") or 1 for arg in args)


def _to_int32(value: int) -> int:
    return (value - INT_MIN) % (1 << 32) + INT_MIN


def parse_int(text: str) -> int:
    """Read a signed decimal integer.

    Leading whitespace and one sign are allowed. The token may be at most
    eleven characters long and the value is kept within 32 bits; the range
    check is made before each digit is added, so the result of the last digit
    wraps as a 32-bit integer would.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("+", "-") and body:
        if body[0] == "-":
            sign = -1
        body = body[1:]
    value = 0
    for char in body:
        if value > INT_MAX or value * sign < INT_MIN or len(text) > _MAX_TOKEN_LENGTH:
            raise InputError()
        if not _is_digit(char):
            raise InputError()
        value = value * 10 + int(char)
    return _to_int32(value * sign)


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Join the arguments with spaces and read every word as an integer."""
    joined = " ".join(args)
    return [parse_int(word) for word in joined.split(" ") if word]


def has_duplicates(values: Iterable[int]) -> bool:
    """True if any value appears more than once."""
    values = list(values)
    return len(set(values)) != len(values)


def to_indices(values: Iterable[int]) -> list[int]:
    """Replace each value by the number of values smaller than it."""
    values = list(values)
    return [sum(1 for other in values if value > other) for value in values]