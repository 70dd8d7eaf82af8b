"""The sorting strategy: choose and apply operations until ``a`` is sorted."""

from __future__ import annotations

from collections import deque
from itertools import pairwise
from typing import Callable, Iterable

from .parsing import INT_MAX, InputError
from .stack import Operation, Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    return all(x <= y for x, y in pairwise(values))


def _moves_to_top(position: int, length: int) -> int:
    """Rotations needed to bring ``position`` to the top, going the short way."""
    return position if position <= length // 2 else length - position


def _above_mid(stack: deque[int], value: int) -> bool:
    return stack.index(value) <= len(stack) // 2


def _rotate_to_top(
    stack: deque[int],
    value: int,
    up: Callable[[], bool],
    down: Callable[[], bool],
) -> None:
    """Rotate ``stack`` one way until ``value`` is on top.

    The direction is fixed from where ``value`` sits when rotation starts.
    """
    rotate = up if _above_mid(stack, value) else down
    while stack[0] != value:
        if not rotate():
            break


def _target_in_b(value: int, b: deque[int]) -> int:
    """Closest smaller non-negative value in ``b``; otherwise the largest of ``b``."""
    candidates = [x for x in b if -1 < x < value]
    return max(candidates) if candidates else max(b)


def _target_in_a(value: int, a: deque[int]) -> int:
    """Closest larger value in ``a`` below INT_MAX; otherwise the smallest of ``a``."""
    candidates = [x for x in a if value < x < INT_MAX]
    return min(candidates) if candidates else min(a)


def sort_three(stacks: Stacks) -> None:
    """Order the top of ``a`` with at most two operations (meant for three elements)."""
    a = stacks.a
    if len(a) < 2:
        return
    biggest = max(a)
    if a[0] == biggest:
        stacks.ra()
    elif a[1] == biggest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def _push_cheapest_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    len_a, len_b = len(a), len(b)
    positions_b = {value: pos for pos, value in enumerate(b)}

    def plan(entry: tuple[int, int]) -> tuple[int, int, int]:
        pos, value = entry
        target = _target_in_b(value, b)
        cost = _moves_to_top(pos, len_a) + _moves_to_top(positions_b[target], len_b)
        return cost, value, target

    _, cheapest, target = min(
        (plan(entry) for entry in enumerate(a)), key=lambda item: item[0]
    )

    a_up = _above_mid(a, cheapest)
    b_up = _above_mid(b, target)
    if a_up == b_up:
        both = stacks.rr if a_up else stacks.rrr
        while b[0] != target and a[0] != cheapest:
            if not both():
                break
    _rotate_to_top(a, cheapest, stacks.ra, stacks.rra)
    _rotate_to_top(b, target, stacks.rb, stacks.rrb)
    stacks.pb()


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` ascending, using ``b`` as scratch space, leaving ``b`` empty."""
    a, b = stacks.a, stacks.b
    for _ in range(2):
        if len(a) > 3 and not is_sorted(a):
            stacks.pb()
    while len(a) > 3 and not is_sorted(a):
        _push_cheapest_to_b(stacks)
    sort_three(stacks)
    while b:
        target = _target_in_a(b[0], a)
        _rotate_to_top(a, target, stacks.ra, stacks.rra)
        stacks.pa()
    if a:
        _rotate_to_top(a, min(a), stacks.ra, stacks.rra)


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` on stack ``a``."""
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError()
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_stacks(stacks)
    return stacks.operations