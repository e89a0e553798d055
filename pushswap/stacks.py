"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from itertools import pairwise


class Direction(Enum):
    """Which way a rotation turns a stack."""

    UP = "up"
    DOWN = "down"


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, with the moves made so far.

    Every move that takes effect is appended to ``moves`` under its
    usual name (``sa``, ``pa``, ``pb``, ``ra``, ``rra``, ``rb``, ``rrb``).
    """

    a: list[int]
    b: list[int] = field(default_factory=list)
    moves: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)
        self.moves = list(self.moves)

    def swap_a(self) -> None:
        """Swap the two top elements of ``a``; an empty ``a`` is left alone."""
        if not self.a:
            return
        if len(self.a) >= 2:
            self.a[0], self.a[1] = self.a[1], self.a[0]
        self.moves.append("sa")

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing happens if ``b`` is empty."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self.moves.append("pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing happens if ``a`` is empty."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self.moves.append("pb")

    def rotate(self, stack: str, direction: Direction | str) -> None:
        """Rotate stack ``"a"`` or ``"b"`` up (top to bottom) or down."""
        direction = Direction(direction)
        if stack == "a":
            items = self.a
        elif stack == "b":
            items = self.b
        else:
            raise ValueError(f"unknown stack: {stack!r}")
        if items:
            if direction is Direction.UP:
                items.append(items.pop(0))
            else:
                items.insert(0, items.pop())
        prefix = "r" if direction is Direction.UP else "rr"
        self.moves.append(prefix + stack)

    def is_sorted(self) -> bool:
        """True if ``a`` is in non-decreasing order from the top."""
        return all(x <= y for x, y in pairwise(self.a))