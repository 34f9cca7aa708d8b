"""Timing experiments over every sort and input shape, saved as CSV."""

import argparse
import sys
import time
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from sortbench.divide import (
    heap_sort,
    introsort,
    merge_sort,
    quick_sort,
    tim_sort,
    tournament_sort,
)
from sortbench.generators import (
    DEFAULT_DISORDER,
    generate_partially_sorted,
    generate_random,
    generate_reversed,
    generate_sorted,
)
from sortbench.library import library_sort
from sortbench.simple import (
    bubble_sort,
    cocktail_sort,
    comb_sort,
    insertion_sort,
    selection_sort,
)

SortFunction = Callable[[List[int]], List[int]]
Generator = Callable[[int], List[int]]

DEFAULT_PATH = "sorting_results.csv"
FULL_SIZES = (1000, 5000, 10000, 20000, 50000, 100000, 200000, 500000, 1000000)
REDUCED_SIZES = (1000, 5000, 10000, 20000, 50000, 100000)
REPETITIONS = 1
CSV_HEADER = "Algorithm,DataType,Size,AvgTime(ms)"

_ALGORITHMS: Dict[str, SortFunction] = {
    "Bubble Sort": bubble_sort,
    "Insertion Sort": insertion_sort,
    "Selection Sort": selection_sort,
    "Merge Sort": merge_sort,
    "Quick Sort": quick_sort,
    "Heap Sort": heap_sort,
    "Cocktail Shaker Sort": cocktail_sort,
    "Comb Sort": comb_sort,
    "Tim Sort": tim_sort,
    "Library Sort": library_sort,
    "Tournament Sort": tournament_sort,
    "Introsort": introsort,
}
ALGORITHMS: Dict[str, SortFunction] = dict(sorted(_ALGORITHMS.items()))

QUADRATIC = frozenset(
    {"Bubble Sort", "Insertion Sort", "Selection Sort", "Cocktail Shaker Sort", "Library Sort"}
)

_PARTIAL_NAME = f"Partially Sorted ({int(DEFAULT_DISORDER * 100)}%)"
_GENERATORS: Dict[str, Generator] = {
    "Sorted (Asc)": generate_sorted,
    "Reversed (Desc)": generate_reversed,
    "Random": generate_random,
    _PARTIAL_NAME: lambda size: generate_partially_sorted(size, DEFAULT_DISORDER),
}
GENERATORS: Dict[str, Generator] = dict(sorted(_GENERATORS.items()))


class SortVerificationError(Exception):
    """A sort returned data that is not in ascending order."""

    def __init__(self, repetition: int, result: Sequence[int]) -> None:
        super().__init__(f"result not sorted on repetition {repetition}")
        self.repetition = repetition
        self.result = list(result)


def _is_sorted(data: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(data, data[1:]))


def measure(
    sort_func: SortFunction,
    generator: Generator,
    size: int,
    repetitions: int = REPETITIONS,
) -> float:
    """Return the mean time in milliseconds to sort fresh data of ``size``.

    Raises SortVerificationError if any repetition yields unsorted output.
    """
    if repetitions <= 0:
        return 0.0
    total_ns = 0
    for repetition in range(1, repetitions + 1):
        data = generator(size)
        start = time.perf_counter_ns()
        result = sort_func(list(data))
        end = time.perf_counter_ns()
        if not _is_sorted(result):
            raise SortVerificationError(repetition, result)
        total_ns += end - start
    return total_ns / repetitions / 1e6


def _quote(text: str) -> str:
    return f'"{text}"'


def run_experiments(
    path: str = DEFAULT_PATH,
    full_sizes: Sequence[int] = FULL_SIZES,
    reduced_sizes: Sequence[int] = REDUCED_SIZES,
    repetitions: int = REPETITIONS,
    out: Optional[TextIO] = None,
) -> None:
    """Time every algorithm on every data shape and write the results to ``path``.

    Raises OSError if the results file cannot be opened.
    """
    out = out or sys.stdout
    err = sys.stderr
    with open(path, "w", encoding="utf-8", newline="") as results:
        results.write(CSV_HEADER + "\n")
        print(f"Starting experiments... Results will be saved to {path}", file=out)
        print("Full sizes: " + "".join(f"{s} " for s in full_sizes), file=out)
        print("Reduced sizes for O(n^2): " + "".join(f"{s} " for s in reduced_sizes), file=out)
        print(f"Repetitions per test: {repetitions}", file=out)

        for alg_name, sort_func in ALGORITHMS.items():
            print(f"[CHECK] Algorithm registered: {alg_name}", file=out)
            print(f"\nTesting Algorithm: {alg_name}", file=out)
            if alg_name in QUADRATIC:
                sizes = reduced_sizes
                limit = reduced_sizes[-1] if reduced_sizes else 0
                print(
                    f"  (Note: Using reduced sizes up to {limit} for this O(n^2) algorithm)",
                    file=out,
                )
            else:
                sizes = full_sizes

            for data_type, generator in GENERATORS.items():
                print(f"  Data Type: {data_type}", file=out)
                for size in sizes:
                    print(f"    Size: {size:>8} ... ", end="", file=out, flush=True)
                    label = f"{alg_name} on {data_type} data (size {size})"
                    avg_ms: Optional[float] = None
                    try:
                        avg_ms = measure(sort_func, generator, size, repetitions)
                    except SortVerificationError as exc:
                        print(
                            f"\n[ERROR] {alg_name} failed to sort {data_type} data "
                            f"(size {size}) on repetition {exc.repetition}!",
                            file=err,
                        )
                        print(f"[DEBUG] Dump from {alg_name} failure:", file=err)
                        print("".join(f"{x} " for x in exc.result), file=err)
                    except Exception as exc:  # noqa: BLE001 - any failure is recorded
                        print(f"\n[EXCEPTION] During test for {label}: {exc}", file=err)

                    row = f"{_quote(alg_name)},{_quote(data_type)},{size},"
                    if avg_ms is None:
                        results.write(row + "ERROR\n")
                        print(" FAILED!", file=out)
                    else:
                        print(f"Avg Time: {avg_ms:.4f} ms", file=out)
                        results.write(row + f"{avg_ms:.6f}\n")
                    results.flush()

    print(f"\nExperiments finished. Results saved to {path}", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the full experiment suite; return 0 on success, 10 if output fails."""
    parser = argparse.ArgumentParser(description="Benchmark sorting algorithms.")
    parser.add_argument("--output", default=DEFAULT_PATH, help="CSV results file")
    parser.add_argument(
        "--repetitions", type=int, default=REPETITIONS, help="runs per measurement"
    )
    args = parser.parse_args(argv)
    try:
        run_experiments(args.output, repetitions=args.repetitions)
    except OSError:
        print(f"Error: Could not open results file {args.output}", file=sys.stderr)
        return 10
    return 0


if __name__ == "__main__":
    sys.exit(main())