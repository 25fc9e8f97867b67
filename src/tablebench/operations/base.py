"""Base classes and interfaces for benchmarked operations.

This module defines what an operation is and how the
benchmark runner can discover the implementations
it has to measure.
"""

import abc
import contextlib
from typing import Any, Callable

from ..dataset import Dataset

#: The representations every operation must be implemented for,
#: in the order they are measured and reported.
REPRESENTATIONS = ("python", "pyarrow", "pandas")

Candidate = Callable[[Dataset], Any]


class Operation(abc.ABC):
    """A logical tabular transformation implemented once per representation.

    Each operation provides one method for each of the
    :data:`REPRESENTATIONS`, those methods are the candidates
    the runner measures. A candidate receives the whole
    :class:`tablebench.dataset.Dataset` and picks the
    representation it is meant to work on.

    Operations are identified by a ``name``, which is also
    used as the sheet name in the report, and have a human
    readable ``title`` used for progress messages.

    For example an operation that counts rows could be
    implemented as::

        class CountRows(Operation):
            name = "0_Count_Rows"
            title = "Counting Rows"

            def python(self, dataset):
                return len(dataset.columns["mpg"])

            def pyarrow(self, dataset):
                return dataset.table.num_rows

            def pandas(self, dataset):
                return len(dataset.frame)
    """

    name: str
    title: str

    @abc.abstractmethod
    def python(self, dataset: Dataset) -> Any:
        """Perform the operation on the plain python columns."""
        ...

    @abc.abstractmethod
    def pyarrow(self, dataset: Dataset) -> Any:
        """Perform the operation on the :class:`pyarrow.Table`."""
        ...

    @abc.abstractmethod
    def pandas(self, dataset: Dataset) -> Any:
        """Perform the operation on the :class:`pandas.DataFrame`."""
        ...

    def candidates(self) -> dict[str, Candidate]:
        """The candidates to measure, by representation label."""
        return {label: getattr(self, label) for label in REPRESENTATIONS}

    def scope(self, dataset: Dataset) -> contextlib.AbstractContextManager:
        """Context the runner enters around the whole batch of measurements.

        Operations that leave side effects on the dataset
        override this to undo them once the batch is over.
        """
        return contextlib.nullcontext()

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"

    __repr__ = __str__


def take_rows(columns: dict[str, list], indices: list[int]) -> dict[str, list]:
    """Pick the rows at ``indices`` from a dict of column lists.

    >>> take_rows({"a": [1, 2, 3], "b": ["x", "y", "z"]}, [2, 0])
    {'a': [3, 1], 'b': ['z', 'x']}
    """
    return {name: [values[i] for i in indices] for name, values in columns.items()}
