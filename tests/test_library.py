import random

import pytest
from hypothesis import given, strategies as st

from sortbench.library import library_sort


def test_empty_input_gives_empty_list():
    assert library_sort([]) == []


def test_single_element():
    assert library_sort([42]) == [42]


def test_small_example():
    assert library_sort([3, 1, 2]) == [1, 2, 3]


def test_values_equal_to_minus_one_are_kept():
    data = [-1, 5, -1, 0, -3, -1]
    assert library_sort(data) == sorted(data)


@pytest.mark.parametrize("size", [2, 7, 33, 250, 1000])
def test_reversed_input(size):
    data = list(range(size - 1, -1, -1))
    assert library_sort(data) == list(range(size))


@pytest.mark.parametrize("size", [2, 9, 128, 1000])
def test_already_sorted_input(size):
    data = list(range(size))
    assert library_sort(data) == data


def test_shuffled_permutation():
    rng = random.Random(1234)
    data = list(range(2000))
    rng.shuffle(data)
    assert library_sort(data) == list(range(2000))


def test_many_duplicates():
    rng = random.Random(7)
    data = [rng.randint(0, 5) for _ in range(500)]
    result = library_sort(data)
    assert result == sorted(data)
    assert len(result) == len(data)


def test_input_not_mutated():
    data = [5, 2, 9, 1]
    snapshot = list(data)
    library_sort(data)
    assert data == snapshot


def test_accepts_generator_and_strings():
    words = ("pear", "apple", "fig", "banana")
    assert library_sort(w for w in words) == sorted(words)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_matches_builtin_sorted(data):
    assert library_sort(data) == sorted(data)


@given(st.lists(st.integers(), max_size=150))
def test_result_is_permutation_and_ordered(data):
    result = library_sort(data)
    assert sorted(result) == sorted(data)
    assert all(a <= b for a, b in zip(result, result[1:]))