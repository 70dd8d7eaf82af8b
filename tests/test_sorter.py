import itertools
import random

import pytest

from pushswap.parsing import InputError
from pushswap.sorter import is_sorted, push_swap, sort_stacks, sort_three
from pushswap.stack import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        assert getattr(stacks, operation.value)()
    return stacks


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([2, 1]) is False
    assert is_sorted([-5, 0, 7, 6]) is False


def test_two_elements():
    assert push_swap([2, 1]) == ["sa"]


def test_three_reversed():
    assert push_swap([3, 2, 1]) == ["ra", "sa"]


def test_three_max_in_middle():
    assert push_swap([2, 3, 1]) == ["rra"]


def test_sorted_input_needs_nothing():
    assert push_swap([1, 2, 3, 4, 5]) == []
    assert push_swap([42]) == []


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_permutations(perm):
    stacks = Stacks(perm)
    sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(stacks.operations) <= 2


@pytest.mark.parametrize("perm", list(itertools.permutations([4, -2, 9, 0, 7])))
def test_five_all_permutations(perm):
    ops = push_swap(perm)
    result = _replay(perm, ops)
    assert list(result.a) == sorted(perm)
    assert not result.b


@pytest.mark.parametrize("seed", range(15))
def test_random_inputs_sort(seed):
    rng = random.Random(seed)
    size = rng.randint(4, 120)
    values = rng.sample(range(-1000, 1000), size)
    ops = push_swap(values)
    result = _replay(values, ops)
    assert list(result.a) == sorted(values)
    assert not result.b


def test_sort_stacks_in_place():
    stacks = Stacks([5, 1, 4, 2, 3, 8, -1])
    sort_stacks(stacks)
    assert list(stacks.a) == [-1, 1, 2, 3, 4, 5, 8]
    assert not stacks.b


def test_duplicates_rejected():
    with pytest.raises(InputError):
        push_swap([3, 1, 3])