"""tablebench

Compare how long common tabular data operations take
when written with plain Python, with pyarrow and with pandas.

The same small dataset (the ``mtcars`` reference data)
is kept in the three representations and each operation
is implemented once per representation:

1. Selecting columns.
2. Filtering rows.
3. Sorting the table.
4. Creating a new column.
5. Computing a grouped summary.

Every implementation is executed many times, and the
minimum, mean and median time of each one are saved to
a spreadsheet with one sheet per operation.

The components are:

* :mod:`tablebench.dataset`, which builds the data.
* :mod:`tablebench.operations`, the operations being measured.
* :mod:`tablebench.runner`, which measures them.
* :mod:`tablebench.summary` and :mod:`tablebench.report`, which reduce
  the measurements and write them to the spreadsheet.
"""

from . import operations

__all__ = ("operations",)
