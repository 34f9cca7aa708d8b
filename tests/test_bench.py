import csv
import io

import pytest

from sortbench.bench import (
    ALGORITHMS,
    CSV_HEADER,
    GENERATORS,
    QUADRATIC,
    SortVerificationError,
    main,
    measure,
    run_experiments,
)
from sortbench.generators import generate_random, generate_reversed, generate_sorted


def test_registry_sizes():
    assert len(ALGORITHMS) == 12
    assert len(GENERATORS) == 4
    assert QUADRATIC <= set(ALGORITHMS)
    assert all(ALGORITHMS[name]([2, 0, 1]) == [0, 1, 2] for name in ALGORITHMS)


def test_registry_is_name_ordered():
    assert list(ALGORITHMS) == sorted(ALGORITHMS)
    assert list(GENERATORS) == sorted(GENERATORS)
    assert all(sorted(GENERATORS[name](5)) == [0, 1, 2, 3, 4] for name in GENERATORS)


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_every_algorithm_sorts_generated_data(name):
    for generator in GENERATORS.values():
        data = generator(200)
        assert ALGORITHMS[name](data) == sorted(data)


def test_measure_returns_nonnegative_time():
    assert measure(sorted, generate_reversed, 100, 3) >= 0.0


def test_measure_zero_repetitions():
    assert measure(sorted, generate_reversed, 100, 0) == 0.0


def test_measure_rejects_unsorted_output():
    with pytest.raises(SortVerificationError) as info:
        measure(lambda data: list(reversed(sorted(data))), generate_sorted, 5, 2)
    assert info.value.repetition == 1
    assert info.value.result == [4, 3, 2, 1, 0]


def test_measure_propagates_generator_errors():
    with pytest.raises(ValueError):
        measure(sorted, generate_random, -1, 1)


def test_run_experiments_writes_csv(tmp_path):
    path = tmp_path / "results.csv"
    out = io.StringIO()
    run_experiments(str(path), full_sizes=[12, 40], reduced_sizes=[6], repetitions=1, out=out)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    rows = list(csv.reader(lines[1:]))

    expected_rows = sum(
        len(GENERATORS) * (1 if name in QUADRATIC else 2) for name in ALGORITHMS
    )
    assert len(rows) == expected_rows
    assert all(row[3] != "ERROR" and float(row[3]) >= 0.0 for row in rows)

    algorithms_in_order = list(dict.fromkeys(row[0] for row in rows))
    assert algorithms_in_order == list(ALGORITHMS)

    for row in rows:
        allowed = {"6"} if row[0] in QUADRATIC else {"12", "40"}
        assert row[2] in allowed
        assert row[1] in GENERATORS

    text = out.getvalue()
    assert text.startswith(f"Starting experiments... Results will be saved to {path}")
    assert text.rstrip().endswith(f"Results saved to {path}")
    assert text.count("Avg Time:") == expected_rows


def test_run_experiments_quotes_names(tmp_path):
    path = tmp_path / "results.csv"
    run_experiments(str(path), full_sizes=[3], reduced_sizes=[3], out=io.StringIO())
    second_line = path.read_text(encoding="utf-8").splitlines()[1]
    first_alg = next(iter(ALGORITHMS))
    first_gen = next(iter(GENERATORS))
    assert second_line.startswith(f'"{first_alg}","{first_gen}",3,')


def test_run_experiments_unwritable_path(tmp_path):
    with pytest.raises(OSError):
        run_experiments(str(tmp_path / "missing" / "out.csv"), out=io.StringIO())


def test_main_returns_10_when_file_cannot_open(tmp_path, capsys):
    path = tmp_path / "missing" / "out.csv"
    assert main(["--output", str(path)]) == 10
    assert "Could not open results file" in capsys.readouterr().err