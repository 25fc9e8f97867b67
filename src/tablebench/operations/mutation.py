"""Creation of a new column derived from an existing one.

The benchmark computes gallons per mile (``gpm = 1 / mpg``).

Contrary to the other operations, this is the one where the
representations really differ in behaviour:

* The plain python columns get the new column added and
  removed again within the same measured call.
* The :class:`pyarrow.Table` is immutable, appending a column
  returns a new table and leaves the dataset untouched.
* The :class:`pandas.DataFrame` gets the column assigned in place,
  repeated measurements overwrite the same column.

To keep the dataset intact for the benchmarks that follow,
both in place mutations happen within a scope that
restores the original columns on exit, whatever the reason
of the exit is:

>>> columns = {"mpg": [20.0, 25.0]}
>>> with added_column(columns, "gpm", [0.05, 0.04]):
...     sorted(columns)
['gpm', 'mpg']
>>> sorted(columns)
['mpg']
"""

import contextlib
import logging
from typing import Any, Iterator, MutableMapping

import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc

from ..dataset import Dataset
from .base import Operation

log = logging.getLogger(__name__)


@contextlib.contextmanager
def added_column(
    container: MutableMapping[str, Any], name: str, values: Any
) -> Iterator[MutableMapping[str, Any]]:
    """Add a column to a dict or DataFrame and remove it on exit.

    :param container: Anything supporting item assignment and deletion
                      by column name, like a ``dict`` or :class:`pandas.DataFrame`.
    :param name: The name of the column to add.
    :param values: The data of the column.
    """
    if name in container:
        raise ValueError(f"Column {name} already exists")
    container[name] = values
    try:
        yield container
    finally:
        del container[name]


@contextlib.contextmanager
def restored_columns(frame: pd.DataFrame) -> Iterator[pd.DataFrame]:
    """Drop, on exit, every column added to ``frame`` within the scope.

    Columns that existed when entering the scope are kept
    and their original order is preserved.
    """
    original = list(frame.columns)
    try:
        yield frame
    finally:
        added = [c for c in frame.columns if c not in original]
        if added:
            log.debug("Dropping columns %s added in place", added)
            frame.drop(columns=added, inplace=True)


class CreateColumn(Operation):
    """Derive a new column as the reciprocal of an existing one."""

    name = "4_Create_Column"
    title = "Creating Column"

    def __init__(self, source: str = "mpg", target: str = "gpm") -> None:
        """
        :param source: The column the new values are computed from.
        :param target: The name of the derived column.
        """
        self.source = source
        self.target = target

    def python(self, dataset: Dataset) -> None:
        values = [1 / v for v in dataset.columns[self.source]]
        with added_column(dataset.columns, self.target, values):
            pass

    def pyarrow(self, dataset: Dataset) -> pa.Table:
        table = dataset.table
        return table.append_column(self.target, pc.divide(1.0, table[self.source]))

    def pandas(self, dataset: Dataset) -> pd.DataFrame:
        frame = dataset.frame
        frame[self.target] = 1 / frame[self.source]
        return frame

    def scope(self, dataset: Dataset) -> contextlib.AbstractContextManager:
        """Remove the column the pandas candidate left behind.

        Only columns added during the batch are removed, so
        the target can't be a column the dataset already has.
        """
        if self.target in dataset.frame.columns or self.target in dataset.columns:
            raise ValueError(f"Column {self.target} already exists in the dataset")
        return restored_columns(dataset.frame)
