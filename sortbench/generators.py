"""Input data generators for sorting experiments.

Each generator returns a list holding a permutation of ``range(size)``.
"""

import random
import time
from typing import List, Optional

DEFAULT_DISORDER = 0.1


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("Size cannot be negative")


def _default_rng() -> random.Random:
    return random.Random(time.perf_counter_ns())


def generate_sorted(size: int) -> List[int]:
    """Return ``0, 1, ..., size - 1`` in ascending order."""
    _check_size(size)
    return list(range(size))


def generate_reversed(size: int) -> List[int]:
    """Return ``size - 1, ..., 1, 0`` in descending order."""
    _check_size(size)
    return list(range(size - 1, -1, -1))


def generate_random(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Return a random permutation of ``range(size)``.

    Without an explicit generator, one seeded from the clock is used.
    """
    data = generate_sorted(size)
    (rng or _default_rng()).shuffle(data)
    return data


def generate_partially_sorted(
    size: int,
    disorder_percentage: float = DEFAULT_DISORDER,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Return ascending data disturbed by a number of random swaps.

    ``size * disorder_percentage / 2`` swaps are attempted; a draw of the
    same index twice is skipped. A percentage outside ``[0, 1]`` falls back
    to the default of 10%.
    """
    _check_size(size)
    if not 0.0 <= disorder_percentage <= 1.0:
        disorder_percentage = DEFAULT_DISORDER
    data = generate_sorted(size)
    if size <= 1:
        return data

    rng = rng or _default_rng()
    num_swaps = int(size * disorder_percentage / 2.0)
    for _ in range(num_swaps):
        first = rng.randint(0, size - 1)
        second = rng.randint(0, size - 1)
        if first != second:
            data[first], data[second] = data[second], data[first]
    return data