import pytest

from pushswap.stacks import Direction, Stacks


def test_swap_a_exchanges_top_two():
    original = [5, 9, 1, 4]
    s = Stacks(original)
    s.swap_a()
    assert s.a == [original[1], original[0]] + original[2:]
    assert s.moves == ["sa"]


def test_swap_a_twice_restores():
    original = [3, 8, 2]
    s = Stacks(original)
    s.swap_a()
    s.swap_a()
    assert s.a == original
    assert s.moves == ["sa", "sa"]


def test_swap_a_on_empty_records_nothing():
    s = Stacks([])
    s.swap_a()
    assert s.a == []
    assert s.moves == []


def test_push_b_moves_top():
    original = [7, 1, 6]
    s = Stacks(original)
    s.push_b()
    assert s.b == original[:1]
    assert s.a == original[1:]
    assert s.moves == ["pb"]


def test_push_round_trip():
    original = [4, 2, 9, 0]
    s = Stacks(original)
    s.push_b()
    s.push_b()
    s.push_a()
    s.push_a()
    assert s.a == original
    assert s.b == []
    assert s.moves == ["pb", "pb", "pa", "pa"]


def test_push_b_stacks_in_reverse_order():
    original = [4, 2, 9]
    s = Stacks(original)
    for _ in original:
        s.push_b()
    assert s.a == []
    assert s.b == original[::-1]


def test_push_from_empty_is_ignored():
    s = Stacks([1, 2])
    s.push_a()
    assert s.a == [1, 2]
    assert s.moves == []
    empty = Stacks([])
    empty.push_b()
    assert empty.b == []
    assert empty.moves == []


def test_rotate_up_a():
    original = [1, 2, 3, 4]
    s = Stacks(original)
    s.rotate("a", Direction.UP)
    assert s.a == original[1:] + original[:1]
    assert s.moves == ["ra"]


def test_rotate_down_a():
    original = [1, 2, 3, 4]
    s = Stacks(original)
    s.rotate("a", Direction.DOWN)
    assert s.a == original[-1:] + original[:-1]
    assert s.moves == ["rra"]


def test_rotate_b_names():
    s = Stacks([], b=[6, 5, 4])
    s.rotate("b", Direction.UP)
    s.rotate("b", Direction.DOWN)
    assert s.b == [6, 5, 4]
    assert s.moves == ["rb", "rrb"]


def test_rotate_up_full_cycle_is_identity():
    original = [9, 3, 7, 1, 5]
    s = Stacks(original)
    for _ in original:
        s.rotate("a", Direction.UP)
    assert s.a == original
    assert s.moves == ["ra"] * len(original)


def test_rotate_accepts_direction_names():
    original = [1, 2, 3]
    s = Stacks(original)
    s.rotate("a", "up")
    s.rotate("a", "down")
    assert s.a == original
    assert s.moves == ["ra", "rra"]


def test_rotate_rejects_unknown_stack():
    with pytest.raises(ValueError):
        Stacks([1, 2]).rotate("c", Direction.UP)


def test_rotate_rejects_unknown_direction():
    with pytest.raises(ValueError):
        Stacks([1, 2]).rotate("a", "sideways")


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1], True), ([1, 2, 3], True), ([2, 1, 3], False), ([1, 3, 2], False)],
)
def test_is_sorted(values, expected):
    assert Stacks(values).is_sorted() is expected


def test_constructor_copies_input():
    original = [2, 1]
    s = Stacks(original)
    s.swap_a()
    assert original == [2, 1]
    assert s.is_sorted()