from collections import Counter

import pytest

from tablebench.dataset import build_dataset
from tablebench.operations import CreateColumn, Operation, default_operations
from tablebench.runner import (
    ORDERS,
    BenchmarkResult,
    execution_schedule,
    run_benchmark,
)


class CountingOperation(Operation):
    name = "0_Counting"
    title = "Counting"

    def __init__(self):
        self.calls = Counter()
        self.sequence = []

    def _record(self, label):
        self.calls[label] += 1
        self.sequence.append(label)

    def python(self, dataset):
        self._record("python")

    def pyarrow(self, dataset):
        self._record("pyarrow")

    def pandas(self, dataset):
        self._record("pandas")


class FailingCreateColumn(CreateColumn):
    def pandas(self, dataset):
        super().pandas(dataset)
        raise RuntimeError("candidate failed")


@pytest.mark.parametrize("order", ORDERS)
def test_schedule_runs_each_label_times(order):
    schedule = execution_schedule(["a", "b", "c"], times=7, order=order, seed=1)
    assert len(schedule) == 21
    assert Counter(schedule) == {"a": 7, "b": 7, "c": 7}


def test_schedule_random_is_reproducible():
    first = execution_schedule(["a", "b", "c"], times=20, order="random", seed=42)
    second = execution_schedule(["a", "b", "c"], times=20, order="random", seed=42)
    assert first == second


def test_schedule_unknown_order():
    with pytest.raises(ValueError, match="Unknown order"):
        execution_schedule(["a"], times=1, order="sideways")


def test_run_benchmark_records_samples():
    op = CountingOperation()
    result = run_benchmark(op, build_dataset(), times=5, warmup=0)
    assert result.name == "0_Counting"
    assert result.labels == ["python", "pyarrow", "pandas"]
    for samples in result.samples.values():
        assert len(samples) == 5
        assert all(isinstance(s, int) and s >= 0 for s in samples)


def test_run_benchmark_warmup_is_not_recorded():
    op = CountingOperation()
    result = run_benchmark(op, build_dataset(), times=4, warmup=3)
    assert op.calls == {"python": 7, "pyarrow": 7, "pandas": 7}
    assert all(len(samples) == 4 for samples in result.samples.values())


def test_run_benchmark_block_order():
    op = CountingOperation()
    run_benchmark(op, build_dataset(), times=2, order="block", warmup=0)
    assert op.sequence == ["python", "python", "pyarrow", "pyarrow", "pandas", "pandas"]


@pytest.mark.parametrize(
    "options",
    [{"times": 0}, {"times": 1, "warmup": -1}, {"times": 1, "order": "nope"}],
)
def test_run_benchmark_invalid_options(options):
    op = CountingOperation()
    with pytest.raises(ValueError):
        run_benchmark(op, build_dataset(), **options)
    assert not op.calls


@pytest.mark.parametrize("operation", default_operations(), ids=str)
def test_run_every_operation(operation):
    result = run_benchmark(operation, build_dataset(), times=3, seed=0)
    assert result.labels == ["python", "pyarrow", "pandas"]
    assert all(len(samples) == 3 for samples in result.samples.values())


def test_run_benchmark_create_column_restores_frame():
    dataset = build_dataset()
    snapshot = dataset.snapshot()
    run_benchmark(CreateColumn(), dataset, times=5)
    assert dataset.frame.equals(snapshot)
    assert list(dataset.columns) == ["mpg", "cyl", "hp", "am", "car"]


def test_run_benchmark_failure_propagates_and_restores():
    dataset = build_dataset()
    snapshot = dataset.snapshot()
    with pytest.raises(RuntimeError, match="candidate failed"):
        run_benchmark(FailingCreateColumn(), dataset, times=5)
    assert dataset.frame.equals(snapshot)


def test_benchmark_result_str():
    result = BenchmarkResult("1_Op", "Op", {"a": [1, 2], "b": [3]})
    assert str(result) == "BenchmarkResult(1_Op, samples={'a': 2, 'b': 1})"


def test_run_benchmark_existing_target_keeps_values():
    dataset = build_dataset()
    snapshot = dataset.snapshot()
    with pytest.raises(ValueError, match="Column hp already exists"):
        run_benchmark(CreateColumn(target="hp"), dataset, times=2)
    assert dataset.frame.equals(snapshot)
    assert dataset.columns == build_dataset().columns
