import pyarrow as pa
import pytest

from tablebench.dataset import build_dataset
from tablebench.operations import SortTable
from tablebench.runner import BenchmarkResult, run_benchmark
from tablebench.summary import SUMMARY_COLUMNS, summarize


def test_summarize_statistics():
    result = BenchmarkResult(
        "1_Op", "Op", {"python": [4, 1, 3, 2], "pandas": [100, 10, 10]}
    )
    summary = summarize(result)
    assert summary.name == "1_Op"
    assert summary.title == "Op"
    assert summary.table.to_pydict() == {
        "Operation": ["python", "pandas"],
        "Min_ns": [1, 10],
        "Mean_ns": [2.5, 40.0],
        "Median_ns": [2.5, 10.0],
    }


def test_summarize_schema():
    summary = summarize(BenchmarkResult("1_Op", "Op", {"a": [1]}))
    assert tuple(summary.table.column_names) == SUMMARY_COLUMNS
    assert summary.table.schema.field("Min_ns").type == pa.int64()
    assert summary.table.schema.field("Median_ns").type == pa.float64()


def test_summarize_min_is_lowest():
    result = run_benchmark(SortTable(), build_dataset(), times=10, seed=3)
    table = summarize(result).table.to_pylist()
    assert len(table) == 3
    for row in table:
        assert row["Min_ns"] <= row["Mean_ns"]
        assert row["Min_ns"] <= row["Median_ns"]


def test_summarize_without_samples():
    with pytest.raises(ValueError, match="No samples were recorded for a"):
        summarize(BenchmarkResult("1_Op", "Op", {"a": []}))


def test_summary_str():
    summary = summarize(BenchmarkResult("1_Op", "Op", {"a": [1], "b": [2]}))
    assert str(summary) == "SummaryTable(1_Op, rows=2)"
