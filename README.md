# sortbench

Times twelve sorting algorithms against four kinds of input data. It writes
the average run time for each combination to a CSV file.

## Algorithms

| Module | Functions |
| --- | --- |
| `sortbench.simple` | `bubble_sort`, `insertion_sort`, `selection_sort`, `cocktail_sort`, `comb_sort` |
| `sortbench.divide` | `merge_sort`, `quick_sort`, `heap_sort`, `introsort`, `tim_sort`, `tournament_sort` |
| `sortbench.library` | `library_sort` |

Every sort takes any iterable of comparable items and returns a new list in
ascending order. The input is left unchanged.

```python
from sortbench.divide import introsort

data = [5, 3, 9, 1]
print(introsort(data))  # [1, 3, 5, 9]
print(data)             # [5, 3, 9, 1]
```

Notes on the individual algorithms:

- `comb_sort` uses a shrink factor of 1.3.
- `quick_sort` picks its pivot as the median of three.
- `introsort` sorts ranges of up to 17 elements directly. Past a depth limit
  of `2 * log2(n)` it switches to heapsort.
- `tim_sort` is a simplified version. It insertion-sorts runs of 32 elements
  and then merges them pairwise.
- `tournament_sort` uses a winner tree.
- `library_sort` inserts into a shelf that has empty slots. The shelf doubles
  in size when it gets too full.

## Data sets

`sortbench.generators` builds the inputs. Each one is a permutation of
`range(size)`:

- `generate_sorted(size)` gives `0, 1, ..., size - 1`.
- `generate_reversed(size)` gives `size - 1, ..., 1, 0`.
- `generate_random(size, rng=None)` gives a shuffled permutation.
- `generate_partially_sorted(size, disorder_percentage=0.1, rng=None)` gives
  sorted data with `int(size * disorder_percentage / 2)` attempted random
  swaps.
  - A swap whose two drawn indices are equal is skipped.
  - A percentage outside `[0, 1]` falls back to 10%.

`rng` is a `random.Random`. If you do not pass one, a generator seeded from
the clock is used. A negative size raises `ValueError`.

## Running the benchmark

```
sortbench [--output FILE] [--repetitions N]
```

- `--output` sets the CSV file. The default is `sorting_results.csv` in the
  current directory.
- `--repetitions` sets how many fresh runs are averaged per measurement. The
  default is 1.

Sizes range from 1,000 to 1,000,000 elements. The quadratic algorithms run
only on sizes up to 100,000. These are bubble sort, insertion sort, selection
sort, cocktail shaker sort and library sort.

Every result is checked after sorting. A run that leaves the data unsorted or
raises an exception is recorded as `ERROR`, and the details go to stderr.

The CSV file has the columns `Algorithm,DataType,Size,AvgTime(ms)`. Times are
written with six decimal places. Progress goes to stdout as the run proceeds.

If the results file cannot be opened, the command prints an error and exits
with status 10.

## Using it from code

To run your own experiments, call:

```python
sortbench.bench.run_experiments(path, full_sizes, reduced_sizes, repetitions, out)
```

`out` is a text stream for progress output. If no results file can be opened,
this function raises `OSError`.

To time one case, call:

```python
sortbench.bench.measure(sort_func, generator, size, repetitions)
```

It returns the mean time in milliseconds. If a repetition yields unsorted
output, it raises `sortbench.bench.SortVerificationError`.

The algorithm and data-set tables are the dictionaries
`sortbench.bench.ALGORITHMS` and `sortbench.bench.GENERATORS`.

`sortbench.timer.Timer` is a small stopwatch with `reset()` and
`elapsed_milliseconds()`.

## What it does not do

The package only writes the CSV of timings. It draws no charts and does no
further analysis of the results.

## Tests

```
pip install -e .[test]
pytest
```