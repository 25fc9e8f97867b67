"""Command line interface running the whole benchmark.

Builds the dataset, benchmarks every operation of
:func:`tablebench.operations.default_operations` in sequence
and writes the summaries with :func:`tablebench.report.write_report`.

A line is printed as each operation completes and the memory
used by the process is printed once the report is saved,
the summary tables themselves are logged at ``DEBUG`` level
and formatted with :mod:`tablebench.utils.tabulate`.
"""

import logging
import os

import psutil

from tablebench.dataset import Dataset, build_dataset
from tablebench.operations import Operation, default_operations
from tablebench.report import write_report
from tablebench.runner import run_benchmark
from tablebench.summary import SummaryTable, summarize
from tablebench.utils import tabulate

N_TIMES = 100
OUTPUT_FILENAME = "Python_Benchmark_Results.xlsx"

log = logging.getLogger(__name__)


def benchmark_operations(
    operations: list[Operation],
    dataset: Dataset,
    times: int = N_TIMES,
    **options,
) -> list[SummaryTable]:
    """Benchmark the operations one after the other and summarize them.

    The summaries are returned in the same order as ``operations``.
    Extra ``options`` are forwarded to :func:`tablebench.runner.run_benchmark`.
    """
    summaries = []
    for operation in operations:
        result = run_benchmark(operation, dataset, times=times, **options)
        summary = summarize(result)
        summaries.append(summary)
        print(f"Completed: {summary.title}")
        log.debug("%s\n%s", summary.name, tabulate.tabulate(summary.table))
    return summaries


def run(
    times: int = N_TIMES, output: str | os.PathLike = OUTPUT_FILENAME, **options
) -> str:
    """Run all the default benchmarks and save them to ``output``.

    :returns: The path of the written report.
    """
    summaries = benchmark_operations(
        default_operations(), build_dataset(), times=times, **options
    )
    path = write_report(summaries, output)
    print(f"\nSuccess! All benchmark results have been saved to: {path}")
    return path


def main() -> None:
    """Run the benchmark with the module configuration."""
    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s"
    )
    run(N_TIMES, OUTPUT_FILENAME)
    print("MEMORY:", psutil.Process().memory_full_info().rss // (1024 * 1024), "MB")


if __name__ == "__main__":
    main()
