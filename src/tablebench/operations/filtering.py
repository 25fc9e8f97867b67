"""Filtering of rows based on a predicate.

A common request in queries is to pick only the rows
that respect a specific condition, like the ``WHERE``
clause of a SQL query does.

The benchmark keeps the cars that do more than
20 miles per gallon:

>>> from tablebench.dataset import build_dataset
>>> FilterRows().pyarrow(build_dataset()).num_rows
14
"""

import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc

from ..dataset import Dataset
from .base import Operation, take_rows


class FilterRows(Operation):
    """Keep the rows where ``column > threshold``."""

    name = "2_Filter_Rows"
    title = "Filtering Rows"

    def __init__(self, column: str = "mpg", threshold: float = 20) -> None:
        """
        :param column: The column the predicate applies to.
        :param threshold: Rows with a value strictly greater than this are kept.
        """
        self.column = column
        self.threshold = threshold

    def python(self, dataset: Dataset) -> dict[str, list]:
        # Build the mask first and then gather every column,
        # the same two steps the columnar engines perform.
        values = dataset.columns[self.column]
        indices = [i for i, v in enumerate(values) if v > self.threshold]
        return take_rows(dataset.columns, indices)

    def pyarrow(self, dataset: Dataset) -> pa.Table:
        table = dataset.table
        return table.filter(pc.greater(table[self.column], self.threshold))

    def pandas(self, dataset: Dataset) -> pd.DataFrame:
        frame = dataset.frame
        return frame[frame[self.column] > self.threshold]
