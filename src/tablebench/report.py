"""Write summary tables to a spreadsheet.

All the summaries of a run end up in a single ``.xlsx``
workbook, one sheet per operation named after it,
in the order the summaries are provided.

The workbook is always written from scratch, an existing
file at the same path is replaced, never extended.
"""

import logging
import os

import pandas as pd

from .summary import SummaryTable

__all__ = ("write_report", "validate_sheet_names")

log = logging.getLogger(__name__)

#: Excel refuses sheet names longer than this.
MAX_SHEET_NAME_LENGTH = 31


def validate_sheet_names(names: list[str]) -> None:
    """Ensure the sheet names can all be written in the same workbook.

    >>> validate_sheet_names(["1_Select_Columns", "1_Select_Columns"])
    Traceback (most recent call last):
        ...
    ValueError: Duplicate sheet name: 1_Select_Columns
    """
    seen = set()
    for name in names:
        if not name:
            raise ValueError("Sheet names can't be empty")
        if len(name) > MAX_SHEET_NAME_LENGTH:
            raise ValueError(
                f"Sheet name {name} is longer than {MAX_SHEET_NAME_LENGTH} characters"
            )
        if name in seen:
            raise ValueError(f"Duplicate sheet name: {name}")
        seen.add(name)


def write_report(summaries: list[SummaryTable], path: str | os.PathLike) -> str:
    """Write each summary to its own sheet of the workbook at ``path``.

    Sheet names are validated before the file is opened,
    errors while writing the file are propagated.

    :param summaries: The summaries in the order the sheets should appear.
    :param path: Where to write the ``.xlsx`` file.
    :returns: The path of the written file.
    """
    if not summaries:
        raise ValueError("Nothing to write, no summaries were provided")
    validate_sheet_names([summary.name for summary in summaries])

    with pd.ExcelWriter(path, engine="openpyxl", mode="w") as writer:
        for summary in summaries:
            summary.table.to_pandas().to_excel(
                writer, sheet_name=summary.name, index=False
            )
            log.debug("Wrote sheet %s", summary.name)

    return os.fspath(path)
