"""
In-place grid operations shared by the list-backed stores.

A grid is a list of rows, each a list of cell values. Row 1 is the header. All
positions and columns are 1-based, matching spreadsheet addressing.

Notes
- delete() shifts every later row up by one, the way a spreadsheet does.
- write_range() and set_cell() grow the grid with blank cells when writing past
  its current extent.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

from activetable.core.constants import EMPTY
from activetable.core.typing import Grid

from .errors import CellRangeError


def width(rows: Sequence[Sequence[Any]]) -> int:
    return max((len(r) for r in rows), default=0)


def padded(rows: Sequence[Sequence[Any]]) -> Grid:
    """Return a rectangular deep copy, filling short rows with EMPTY."""
    w = width(rows)
    return [copy.deepcopy(list(r)) + [EMPTY] * (w - len(r)) for r in rows]


def column_letter(column: int) -> str:
    """
    Convert a 1-based column index to its A1 letters.

    >>> column_letter(1), column_letter(26), column_letter(28)
    ('A', 'Z', 'AB')
    """
    if column < 1:
        raise CellRangeError(f"column must be >= 1, got {column}")
    letters = ""
    while column:
        column, rem = divmod(column - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def check_coordinate(position: int, column: int | None = None) -> None:
    if position < 1:
        raise CellRangeError(f"row position must be >= 1, got {position}")
    if column is not None and column < 1:
        raise CellRangeError(f"column must be >= 1, got {column}")


def append(rows: Grid, values: Sequence[Any]) -> None:
    rows.append(list(values))


def delete(rows: Grid, position: int) -> None:
    check_coordinate(position)
    if position > len(rows):
        raise CellRangeError(f"row position {position} is past the last row ({len(rows)})")
    del rows[position - 1]


def _grow(rows: Grid, position: int, column: int) -> list[Any]:
    while len(rows) < position:
        rows.append([])
    row = rows[position - 1]
    if len(row) < column:
        row.extend([EMPTY] * (column - len(row)))
    return row


def write_range(rows: Grid, position: int, values: Sequence[Any]) -> None:
    """Overwrite columns 1..len(values) of one row."""
    check_coordinate(position)
    row = _grow(rows, position, len(values))
    row[: len(values)] = list(values)


def get_cell(rows: Grid, position: int, column: int) -> Any:
    check_coordinate(position, column)
    if position > len(rows) or column > len(rows[position - 1]):
        return EMPTY
    return rows[position - 1][column - 1]


def set_cell(rows: Grid, position: int, column: int, value: Any) -> None:
    check_coordinate(position, column)
    row = _grow(rows, position, column)
    row[column - 1] = value
