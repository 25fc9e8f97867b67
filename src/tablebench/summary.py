"""Reduce benchmark samples to summary statistics.

Each :class:`tablebench.runner.BenchmarkResult` is reduced
to a small table with one row per candidate and the
minimum, mean and median of its samples in nanoseconds:

>>> from tablebench.runner import BenchmarkResult
>>> result = BenchmarkResult("1_Op", "Op", {"a": [30, 10, 20], "b": [5, 5, 8]})
>>> summary = summarize(result)
>>> summary.table.to_pydict()
{'Operation': ['a', 'b'], 'Min_ns': [10, 5], 'Mean_ns': [20.0, 6.0], 'Median_ns': [20.0, 5.0]}
"""

import pyarrow as pa
import pyarrow.compute as pc

from .runner import BenchmarkResult

__all__ = ("SummaryTable", "summarize", "SUMMARY_COLUMNS")

SUMMARY_COLUMNS = ("Operation", "Min_ns", "Mean_ns", "Median_ns")

SUMMARY_SCHEMA = pa.schema(
    [
        ("Operation", pa.string()),
        ("Min_ns", pa.int64()),
        ("Mean_ns", pa.float64()),
        ("Median_ns", pa.float64()),
    ]
)


class SummaryTable:
    """Summary statistics of a benchmarked operation.

    The ``table`` is a :class:`pyarrow.Table` with the
    :data:`SUMMARY_COLUMNS` and one row for each candidate.
    """

    def __init__(self, name: str, title: str, table: pa.Table) -> None:
        self.name = name
        self.title = title
        self.table = table

    def __str__(self) -> str:
        return f"SummaryTable({self.name}, rows={self.table.num_rows})"

    __repr__ = __str__


def summarize(result: BenchmarkResult) -> SummaryTable:
    """Compute min, mean and median of the samples of each candidate.

    Rows keep the order of the candidates in the result.
    """
    rows: dict[str, list] = {name: [] for name in SUMMARY_COLUMNS}
    for label, samples in result.samples.items():
        if not samples:
            raise ValueError(f"No samples were recorded for {label}")
        data = pa.array(samples, type=pa.int64())
        rows["Operation"].append(label)
        rows["Min_ns"].append(pc.min(data).as_py())
        rows["Mean_ns"].append(pc.mean(data).as_py())
        # The default linear interpolation of the 0.5 quantile is the exact median.
        rows["Median_ns"].append(pc.quantile(data, q=0.5)[0].as_py())

    return SummaryTable(
        result.name, result.title, pa.Table.from_pydict(rows, schema=SUMMARY_SCHEMA)
    )
