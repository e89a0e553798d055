"""Strategies that sort stack ``a`` using only the puzzle's moves."""

from __future__ import annotations

from .stacks import Direction, Stacks


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two or three distinct values."""
    a = stacks.a
    if len(a) == 2:
        if a[0] > a[1]:
            stacks.swap_a()
        return
    if len(a) < 3:
        return
    first, second, third = a[0], a[1], a[2]
    if first < second < third:
        return
    if first < second and first < third and second > third:
        stacks.rotate("a", Direction.DOWN)
        stacks.swap_a()
    elif first > second and first < third and second < third:
        stacks.swap_a()
    elif first < second and first > third and second > third:
        stacks.rotate("a", Direction.DOWN)
    elif second < third and first > second and first > third:
        stacks.rotate("a", Direction.UP)
    elif second > third and first > second and first > third:
        stacks.rotate("a", Direction.UP)
        stacks.swap_a()


def _four_min_to_b_front(stacks: Stacks) -> None:
    a = stacks.a
    if len(a) == 4 and a[0] < a[1] and a[0] < a[2] and a[0] < a[3]:
        stacks.push_b()
    a = stacks.a
    if len(a) == 4 and a[0] > a[1] and a[1] < a[2] and a[1] < a[3]:
        stacks.swap_a()
        stacks.push_b()


def _four_min_to_b_back(stacks: Stacks) -> None:
    a = stacks.a
    if len(a) == 4 and a[0] > a[2] and a[1] > a[2] and a[2] < a[3]:
        stacks.rotate("a", Direction.UP)
        stacks.swap_a()
        stacks.push_b()
    a = stacks.a
    if len(a) == 4 and a[0] > a[3] and a[1] > a[3] and a[2] > a[3]:
        stacks.rotate("a", Direction.DOWN)
        stacks.push_b()


def sort_four(stacks: Stacks) -> None:
    """Move the smallest of four values to ``b``, sort the rest, bring it back."""
    if len(stacks.a) == 4:
        _four_min_to_b_front(stacks)
        _four_min_to_b_back(stacks)
    if len(stacks.a) == 3:
        sort_three(stacks)
    stacks.push_a()


def _five_min_to_b_front(stacks: Stacks) -> bool:
    a = stacks.a
    if a[0] < a[1] and a[0] < a[2] and a[0] < a[3] and a[0] < a[4]:
        stacks.push_b()
        return True
    if a[0] > a[1] and a[1] < a[2] and a[1] < a[3] and a[1] < a[4]:
        stacks.swap_a()
        stacks.push_b()
        return True
    return False


def _five_min_to_b_back(stacks: Stacks) -> bool:
    a = stacks.a
    if a[0] > a[2] and a[1] > a[2] and a[2] < a[3] and a[2] < a[4]:
        stacks.rotate("a", Direction.UP)
        stacks.swap_a()
        stacks.push_b()
        return True
    if a[0] > a[3] and a[1] > a[3] and a[2] > a[3] and a[3] < a[4]:
        stacks.rotate("a", Direction.DOWN)
        stacks.rotate("a", Direction.DOWN)
        stacks.push_b()
        return True
    if a[0] > a[4] and a[1] > a[4] and a[2] > a[4] and a[3] > a[4]:
        stacks.rotate("a", Direction.DOWN)
        stacks.push_b()
        return True
    return False


def sort_five(stacks: Stacks) -> None:
    """Move the smallest of five values to ``b``, sort four, bring it back."""
    moved = False
    if len(stacks.a) == 5:
        moved = _five_min_to_b_front(stacks) or _five_min_to_b_back(stacks)
    sort_four(stacks)
    if moved:
        stacks.push_a()
        if stacks.a[0] > stacks.a[1]:
            stacks.swap_a()


def _drain_b(stacks: Stacks, count: int, bit_size: int, bit: int) -> None:
    for _ in range(count):
        if bit > bit_size or stacks.is_sorted():
            break
        if (stacks.b[0] >> bit) & 1 == 0:
            stacks.rotate("b", Direction.UP)
        else:
            stacks.push_a()
    if stacks.is_sorted():
        while stacks.b:
            stacks.push_a()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort over non-negative indices, using ``b`` as the bucket."""
    bit_size = 0
    size = len(stacks.a)
    while size > 1:
        bit_size += 1
        size //= 2
    for bit in range(bit_size + 1):
        for _ in range(len(stacks.a)):
            if stacks.is_sorted():
                break
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.push_b()
            else:
                stacks.rotate("a", Direction.UP)
        _drain_b(stacks, len(stacks.b), bit_size, bit + 1)
    while stacks.b:
        stacks.push_a()


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy that suits the size of ``a`` and apply it."""
    a = stacks.a
    if len(a) == 2 and a[0] > a[1]:
        stacks.swap_a()
    elif len(a) == 3:
        sort_three(stacks)
    elif len(a) == 4:
        sort_four(stacks)
    elif len(a) == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)