"""Library sort (gapped insertion sort) over a shelf with empty slots.

The function takes any iterable and returns a new ascending list.
"""

import math
from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T")

_GAP_FACTOR = 2.0


class _Empty:
    """Marker for an unused shelf slot."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<empty>"


_EMPTY = _Empty()


def _find_insert_pos(shelf: List, x) -> int:
    """Return the index of the first occupied slot holding a value >= x.

    Returns the shelf length when every stored value is smaller, and 0 when
    the shelf holds nothing.
    """
    first = next((i for i, v in enumerate(shelf) if v is not _EMPTY), None)
    if first is None:
        return 0

    low = first
    high = len(shelf) - 1
    pos = len(shelf)

    if x <= shelf[first]:
        return first

    while low <= high:
        mid = low + (high - low) // 2
        actual = mid
        while actual >= low and shelf[actual] is _EMPTY:
            actual -= 1

        if actual < low:
            actual = mid + 1
            while actual <= high and shelf[actual] is _EMPTY:
                actual += 1
            if actual > high:
                break
            if shelf[actual] < x:
                low = actual + 1
            else:
                pos = actual
                high = actual - 1
        elif shelf[actual] < x:
            low = mid + 1
        else:
            pos = actual
            high = actual - 1
    return pos


def _find_proper_empty(shelf: List, pos: int) -> Optional[int]:
    """Return an empty slot at or left of pos, else right of it, else None."""
    n = len(shelf)
    if pos >= n:
        pos = n - 1
    for i in range(pos, -1, -1):
        if shelf[i] is _EMPTY:
            return i
    for i in range(pos + 1, n):
        if shelf[i] is _EMPTY:
            return i
    return None


def _place_in_first_empty(shelf: List, value) -> None:
    for k, slot in enumerate(shelf):
        if slot is _EMPTY:
            shelf[k] = value
            return


def _rebalance(shelf: List, filled: int) -> List:
    """Return a shelf twice as long with the stored values spread evenly."""
    new_size = len(shelf) * 2
    new_shelf: List = [_EMPTY] * new_size
    if filled == 0:
        return new_shelf

    values = [v for v in shelf if v is not _EMPTY]
    gap = max(1, new_size // filled)
    j = gap // 2
    for value in values:
        if j >= new_size:
            _place_in_first_empty(new_shelf, value)
        else:
            while j < new_size and new_shelf[j] is not _EMPTY:
                j += 1
            if j < new_size:
                new_shelf[j] = value
            else:
                _place_in_first_empty(new_shelf, value)
        j += gap
    return new_shelf


def _prev_filled(shelf: List, index: int) -> Optional[int]:
    for i in range(index - 1, -1, -1):
        if shelf[i] is not _EMPTY:
            return i
    return None


def _next_filled(shelf: List, index: int) -> Optional[int]:
    for i in range(index + 1, len(shelf)):
        if shelf[i] is not _EMPTY:
            return i
    return None


def library_sort(arr: Iterable[T]) -> List[T]:
    """Sort with library sort: insert into a gapped shelf, rebalancing as it fills."""
    items = list(arr)
    if not items:
        return []

    n = len(items)
    shelf: List = [_EMPTY] * max(math.ceil(n * _GAP_FACTOR), 2)
    shelf[len(shelf) // 2] = items[0]
    filled = 1

    for value in items[1:]:
        while True:
            if filled * _GAP_FACTOR > len(shelf):
                shelf = _rebalance(shelf, filled)
            pos = _find_insert_pos(shelf, value)
            empty_pos = _find_proper_empty(shelf, pos)
            if empty_pos is None:
                shelf = _rebalance(shelf, filled)
                continue
            break

        current = empty_pos
        shelf[current] = value
        final = current

        # Move larger neighbours right until the value sits after smaller ones.
        prev = _prev_filled(shelf, current)
        while prev is not None and shelf[prev] > value:
            shelf[current] = shelf[prev]
            shelf[prev] = _EMPTY
            final = prev
            current = prev
            prev = _prev_filled(shelf, current)
        shelf[final] = value

        # Move smaller neighbours left until the value sits before larger ones.
        current = final
        nxt = _next_filled(shelf, current)
        while nxt is not None and shelf[nxt] < value:
            shelf[current] = shelf[nxt]
            shelf[nxt] = _EMPTY
            final = nxt
            current = nxt
            nxt = _next_filled(shelf, current)
        shelf[final] = value

        filled += 1

    return [v for v in shelf if v is not _EMPTY]