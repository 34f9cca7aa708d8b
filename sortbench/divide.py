"""Divide-and-conquer, heap-based and tree-based sorts.

Each function takes any iterable and returns a new ascending list.
"""

import math
from typing import Iterable, List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")

_TIM_RUN = 32
_INTRO_SMALL = 16


def _merge(left: Sequence[T], right: Sequence[T]) -> List[T]:
    """Stable merge of two ascending sequences."""
    merged: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _partition(items: MutableSequence[T], low: int, high: int) -> int:
    """Lomuto partition around items[high]; return the pivot's final index."""
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def _sift_down(items: MutableSequence[T], n: int, i: int) -> None:
    """Restore the max-heap property below index i within the first n items."""
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def merge_sort(arr: Iterable[T]) -> List[T]:
    """Sort with top-down stable merge sort."""
    items = list(arr)
    if len(items) <= 1:
        return items
    split = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:split]), merge_sort(items[split:]))


def quick_sort(arr: Iterable[T]) -> List[T]:
    """Sort with quicksort using a median-of-three pivot."""
    items = list(arr)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        mid = low + (high - low) // 2
        if items[mid] < items[low]:
            items[mid], items[low] = items[low], items[mid]
        if items[high] < items[low]:
            items[high], items[low] = items[low], items[high]
        if items[mid] < items[high]:
            items[mid], items[high] = items[high], items[mid]
        pivot_index = _partition(items, low, high)
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))
    return items


def heap_sort(arr: Iterable[T]) -> List[T]:
    """Sort with in-place max-heap heapsort."""
    items = list(arr)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _introsort(items: List[T], begin: int, end: int, depth_limit: int) -> None:
    if end - begin <= _INTRO_SMALL:
        items[begin:end + 1] = sorted(items[begin:end + 1])
        return
    if depth_limit == 0:
        items[begin:end + 1] = heap_sort(items[begin:end + 1])
        return
    pivot_index = _partition(items, begin, end)
    _introsort(items, begin, pivot_index - 1, depth_limit - 1)
    _introsort(items, pivot_index + 1, end, depth_limit - 1)


def introsort(arr: Iterable[T]) -> List[T]:
    """Sort with introsort: quicksort falling back to heapsort past a depth limit."""
    items = list(arr)
    if not items:
        return items
    depth_limit = int(2 * math.log2(len(items)))
    _introsort(items, 0, len(items) - 1, depth_limit)
    return items


def _insertion_sort_range(items: MutableSequence[T], left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        value = items[i]
        j = i - 1
        while j >= left and items[j] > value:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = value


def tim_sort(arr: Iterable[T]) -> List[T]:
    """Sort with a simplified timsort: insertion-sorted runs of 32, then merges."""
    items = list(arr)
    n = len(items)
    for start in range(0, n, _TIM_RUN):
        _insertion_sort_range(items, start, min(start + _TIM_RUN - 1, n - 1))
    size = _TIM_RUN
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                items[left:right + 1] = _merge(items[left:mid + 1], items[mid + 1:right + 1])
        size *= 2
    return items


def tournament_sort(arr: Iterable[T]) -> List[T]:
    """Sort with a winner-tree tournament sort."""
    items = list(arr)
    n = len(items)
    if n <= 1:
        return items

    leaf_count = 1
    while leaf_count < n:
        leaf_count *= 2

    # Each node holds the index of its winning item; None marks an exhausted slot.
    tree: List[Optional[int]] = [None] * (2 * leaf_count)
    tree[leaf_count:leaf_count + n] = range(n)

    def winner(left: Optional[int], right: Optional[int]) -> Optional[int]:
        if left is None:
            return right
        if right is None:
            return left
        return left if items[left] < items[right] else right

    for node in range(leaf_count - 1, 0, -1):
        tree[node] = winner(tree[2 * node], tree[2 * node + 1])

    result: List[T] = []
    for _ in range(n):
        champion = tree[1]
        assert champion is not None
        result.append(items[champion])
        node = leaf_count + champion
        tree[node] = None
        while node > 1:
            node //= 2
            tree[node] = winner(tree[2 * node], tree[2 * node + 1])
    return result