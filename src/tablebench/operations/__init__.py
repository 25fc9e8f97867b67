"""The operations being benchmarked.

Each operation is a logical tabular transformation implemented
once for each of the compared representations
(plain python columns, :class:`pyarrow.Table` and :class:`pandas.DataFrame`).

Every operation lives in its own module, so that the three
implementations of the same transformation can be read side by side:

>>> [op.name for op in default_operations()]
['1_Select_Columns', '2_Filter_Rows', '3_Sorting_Table', '4_Create_Column', '5_Grouped_Summary']

New operations can be added by subclassing :class:`Operation`.
"""

from .aggregate import GroupedSummary
from .base import REPRESENTATIONS, Operation, take_rows
from .filtering import FilterRows
from .mutation import CreateColumn, added_column, restored_columns
from .selection import SelectColumns
from .sorting import SortTable

__all__ = (
    "REPRESENTATIONS",
    "Operation",
    "SelectColumns",
    "FilterRows",
    "SortTable",
    "CreateColumn",
    "GroupedSummary",
    "added_column",
    "restored_columns",
    "take_rows",
    "default_operations",
)


def default_operations() -> list[Operation]:
    """The operations of a benchmark run, in the order they are run and reported."""
    return [
        SelectColumns(),
        FilterRows(),
        SortTable(),
        CreateColumn(),
        GroupedSummary(),
    ]
