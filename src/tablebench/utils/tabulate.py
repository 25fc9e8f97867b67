"""Format a summary table as text.

The ``tabulate`` function takes a :class:`pyarrow.Table` and
lays it out as aligned text, numbers are right aligned
and rendered with thousands separators:

    >>> import pyarrow as pa
    >>> table = pa.table({
    ...     "Operation": ["python", "pandas"],
    ...     "Min_ns": [1250, 98000],
    ...     "Mean_ns": [1410.5, 120331.25],
    ... })
    >>> print(tabulate(table))
    Operation | Min_ns |   Mean_ns
    --------- | ------ | ---------
    python    |  1,250 |   1,410.5
    pandas    | 98,000 | 120,331.2

It's used to log the summary of each benchmarked operation.
"""

from typing import Any

import pyarrow as pa

__all__ = ("tabulate", "format_value")


def tabulate(table: pa.Table) -> str:
    """Format a Table into aligned text, one line per row."""
    cols = table.column_names
    rows = [[format_value(row[c]) for c in cols] for row in table.to_pylist()]
    numeric = [
        pa.types.is_integer(field.type) or pa.types.is_floating(field.type)
        for field in table.schema
    ]

    colsizes = [
        max([len(row[idx]) for row in rows] + [len(name)])
        for idx, name in enumerate(cols)
    ]
    header = [maketablerow(cols, colsizes, numeric)]
    separator = [maketablerow(["-" * size for size in colsizes], colsizes, numeric)]
    textrows = [maketablerow(row, colsizes, numeric) for row in rows]
    return "\n".join(header + separator + textrows)


def maketablerow(cells: list[str], colsizes: list[int], numeric: list[bool]) -> str:
    """Join the cells padding numbers to the right and text to the left."""
    return " | ".join(
        cell.rjust(colsizes[idx]) if numeric[idx] else cell.ljust(colsizes[idx])
        for idx, cell in enumerate(cells)
    )


def format_value(v: Any) -> str:
    """Format a single value of the table.

    >>> format_value(1234567)
    '1,234,567'
    >>> format_value(0.25)
    '0.2'
    """
    if isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, int):
        return f"{v:,}"
    elif isinstance(v, float):
        return f"{v:,.1f}"
    return str(v)
