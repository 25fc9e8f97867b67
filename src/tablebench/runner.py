"""Measure how long each candidate of an operation takes.

The runner executes every candidate of an :class:`tablebench.operations.Operation`
a fixed number of times and records the wall clock time of
each execution in nanoseconds.

The order in which executions happen can be controlled:

* ``random`` shuffles all the executions of all candidates together,
  so that the candidates are equally affected by any noise on the machine.
* ``inorder`` alternates the candidates, one execution each.
* ``block`` performs all executions of a candidate before moving to the next.

>>> execution_schedule(["a", "b"], times=2, order="inorder")
['a', 'b', 'a', 'b']
>>> execution_schedule(["a", "b"], times=2, order="block")
['a', 'a', 'b', 'b']

Before measuring, each candidate is run a few ``warmup`` times
whose duration is discarded.
"""

import logging
import random
import time

from .dataset import Dataset
from .operations import Operation

__all__ = ("BenchmarkResult", "run_benchmark", "execution_schedule", "ORDERS")

log = logging.getLogger(__name__)

ORDERS = ("random", "inorder", "block")

DEFAULT_TIMES = 100
DEFAULT_WARMUP = 2


class BenchmarkResult:
    """The samples measured for each candidate of one operation.

    ``samples`` maps each candidate label to the list
    of the elapsed nanoseconds of its executions,
    in the order they were measured.
    """

    def __init__(self, name: str, title: str, samples: dict[str, list[int]]) -> None:
        """
        :param name: The name of the benchmarked operation.
        :param title: Human readable title of the operation.
        :param samples: The ``{label: [elapsed_ns, ...]}`` measurements.
        """
        self.name = name
        self.title = title
        self.samples = samples

    def __str__(self) -> str:
        counts = {label: len(values) for label, values in self.samples.items()}
        return f"BenchmarkResult({self.name}, samples={counts})"

    __repr__ = __str__

    @property
    def labels(self) -> list[str]:
        return list(self.samples)


def execution_schedule(
    labels: list[str], times: int, order: str = "random", seed: int | None = None
) -> list[str]:
    """The sequence of candidate labels to execute.

    Each label appears exactly ``times`` times in the result.

    :param labels: The labels of the candidates.
    :param times: How many times each candidate must be executed.
    :param order: One of :data:`ORDERS`.
    :param seed: Seed for the ``random`` order, to make it reproducible.
    """
    if order not in ORDERS:
        raise ValueError(f"Unknown order {order!r}, must be one of {ORDERS}")

    if order == "block":
        return [label for label in labels for _ in range(times)]

    schedule = [label for _ in range(times) for label in labels]
    if order == "random":
        random.Random(seed).shuffle(schedule)
    return schedule


def run_benchmark(
    operation: Operation,
    dataset: Dataset,
    times: int = DEFAULT_TIMES,
    order: str = "random",
    warmup: int = DEFAULT_WARMUP,
    seed: int | None = None,
) -> BenchmarkResult:
    """Measure all the candidates of ``operation`` against ``dataset``.

    The whole batch, warmup included, runs within the
    scope provided by the operation so that any side effect
    on the dataset is undone once the batch ends.

    Any exception raised by a candidate aborts the batch
    and is propagated as is, no partial result is returned.

    :param operation: The operation to benchmark.
    :param dataset: The data the candidates work on.
    :param times: How many measurements to take for each candidate.
    :param order: The order of executions, one of :data:`ORDERS`.
    :param warmup: How many unmeasured executions of each candidate
                   to perform before measuring.
    :param seed: Seed for the ``random`` order.
    """
    if times < 1:
        raise ValueError("times must be a positive number of repetitions")
    if warmup < 0:
        raise ValueError("warmup can't be negative")

    candidates = operation.candidates()
    schedule = execution_schedule(list(candidates), times, order, seed)
    samples: dict[str, list[int]] = {label: [] for label in candidates}

    log.debug(
        "Benchmarking %s: %d candidates, times=%d, order=%s, warmup=%d",
        operation,
        len(candidates),
        times,
        order,
        warmup,
    )
    with operation.scope(dataset):
        for _ in range(warmup):
            for candidate in candidates.values():
                candidate(dataset)

        perf_counter_ns = time.perf_counter_ns
        for label in schedule:
            candidate = candidates[label]
            start = perf_counter_ns()
            candidate(dataset)
            samples[label].append(perf_counter_ns() - start)

    return BenchmarkResult(operation.name, operation.title, samples)
