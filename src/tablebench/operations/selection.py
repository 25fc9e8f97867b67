"""Selection of a subset of columns.

A common request when analysing data is to keep
only the columns that are relevant, like the
``SELECT`` clause of a SQL query does.

>>> from tablebench.dataset import build_dataset
>>> result = SelectColumns().pyarrow(build_dataset())
>>> result.column_names
['mpg', 'hp']
"""

import pandas as pd
import pyarrow as pa

from ..dataset import Dataset
from .base import Operation

SELECTED_COLUMNS = ["mpg", "hp"]


class SelectColumns(Operation):
    """Keep only the ``mpg`` and ``hp`` columns."""

    name = "1_Select_Columns"
    title = "Selecting Columns"

    def __init__(self, columns: list[str] | None = None) -> None:
        """
        :param columns: The column names to keep, in order.
        """
        self.columns = list(columns) if columns is not None else list(SELECTED_COLUMNS)

    def python(self, dataset: Dataset) -> dict[str, list]:
        return {name: dataset.columns[name] for name in self.columns}

    def pyarrow(self, dataset: Dataset) -> pa.Table:
        return dataset.table.select(self.columns)

    def pandas(self, dataset: Dataset) -> pd.DataFrame:
        return dataset.frame[self.columns]
