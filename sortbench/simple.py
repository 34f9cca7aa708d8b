"""Quadratic and gap-based comparison sorts.

Each function takes any iterable and returns a new ascending list.
"""

from typing import Iterable, List, TypeVar

T = TypeVar("T")

_COMB_SHRINK = 1.3


def bubble_sort(arr: Iterable[T]) -> List[T]:
    """Sort with bubble sort, stopping early once a pass makes no swap."""
    items = list(arr)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(arr: Iterable[T]) -> List[T]:
    """Sort with straight insertion sort."""
    items = list(arr)
    for i in range(1, len(items)):
        key = items[i]
        j = i
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items


def selection_sort(arr: Iterable[T]) -> List[T]:
    """Sort with selection sort."""
    items = list(arr)
    n = len(items)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if items[j] < items[min_index]:
                min_index = j
        if min_index != i:
            items[i], items[min_index] = items[min_index], items[i]
    return items


def cocktail_sort(arr: Iterable[T]) -> List[T]:
    """Sort with cocktail shaker sort (bidirectional bubble sort)."""
    items = list(arr)
    start = 0
    end = len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        start += 1
    return items


def comb_sort(arr: Iterable[T]) -> List[T]:
    """Sort with comb sort using a shrink factor of 1.3."""
    items = list(arr)
    n = len(items)
    gap = n
    swapped = True
    while gap > 1 or swapped:
        gap = max(1, int(gap / _COMB_SHRINK))
        swapped = False
        for i in range(n - gap):
            if items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
                swapped = True
    return items