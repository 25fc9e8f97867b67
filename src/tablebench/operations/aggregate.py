"""Grouped aggregation.

Frequently when analysing data it is necessary to compute
statistics for each group of rows sharing the same key.

The benchmark computes the mean horsepower for
each number of cylinders, which for the ``mtcars`` data is::

    cyl, mean_hp
    4,   82.64
    6,   122.29
    8,   209.21

Each representation emits groups in the order its library
prefers, the python one in order of first appearance:

>>> from tablebench.dataset import build_dataset
>>> result = GroupedSummary().python(build_dataset())
>>> result["cyl"]
[6, 4, 8]
"""

import pandas as pd
import pyarrow as pa

from ..dataset import Dataset
from .base import Operation


class GroupedSummary(Operation):
    """Mean of a column for each distinct value of a key column."""

    name = "5_Grouped_Summary"
    title = "Grouped Summary"

    def __init__(
        self, key: str = "cyl", column: str = "hp", result: str = "mean_hp"
    ) -> None:
        """
        :param key: The column to group by.
        :param column: The column to average.
        :param result: The name of the column holding the means.
        """
        self.key = key
        self.column = column
        self.result = result

    def python(self, dataset: Dataset) -> dict[str, list]:
        # {key_value: [total, count]}, dicts preserve first appearance order.
        groups: dict = {}
        for keyval, value in zip(
            dataset.columns[self.key], dataset.columns[self.column]
        ):
            partial = groups.setdefault(keyval, [0, 0])
            partial[0] += value
            partial[1] += 1
        return {
            self.key: list(groups),
            self.result: [total / count for total, count in groups.values()],
        }

    def pyarrow(self, dataset: Dataset) -> pa.Table:
        aggregated = dataset.table.group_by(self.key).aggregate(
            [(self.column, "mean")]
        )
        # pyarrow names the result column "<column>_mean".
        return aggregated.rename_columns(
            [
                self.result if name == f"{self.column}_mean" else name
                for name in aggregated.column_names
            ]
        )

    def pandas(self, dataset: Dataset) -> pd.DataFrame:
        return dataset.frame.groupby(self.key, as_index=False).agg(
            **{self.result: (self.column, "mean")}
        )
