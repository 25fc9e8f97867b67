"""Sorting of a table by one of its columns.

Rows are ordered by ``mpg`` ascending. Ties keep the
order they had in the dataset for all three representations,
so their results can be compared row by row.
"""

import pandas as pd
import pyarrow as pa

from ..dataset import Dataset
from .base import Operation, take_rows


class SortTable(Operation):
    """Sort all rows by a single column, ascending and stable."""

    name = "3_Sorting_Table"
    title = "Sorting Table"

    def __init__(self, key: str = "mpg") -> None:
        """
        :param key: The column to sort by.
        """
        self.key = key

    def python(self, dataset: Dataset) -> dict[str, list]:
        values = dataset.columns[self.key]
        # sorted() is stable, ties keep the dataset order.
        order = sorted(range(len(values)), key=values.__getitem__)
        return take_rows(dataset.columns, order)

    def pyarrow(self, dataset: Dataset) -> pa.Table:
        return dataset.table.sort_by([(self.key, "ascending")])

    def pandas(self, dataset: Dataset) -> pd.DataFrame:
        return dataset.frame.sort_values(self.key, kind="stable")
