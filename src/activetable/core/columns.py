"""
Column descriptors derived from a sheet's header row.

Notes:
    - Descriptors are built once per Table, left to right, from the raw header cells.
    - Names are kept verbatim: blank names, duplicates, and non-Latin text are all valid.
    - With duplicate names the first matching column wins in lookups.

Examples:
    >>> from activetable.core.columns import build_columns, column_index
    >>> cols = build_columns(["id", "name", "メモ"])
    >>> [(c.name, c.index) for c in cols]
    [('id', 1), ('name', 2), ('メモ', 3)]
    >>> column_index(cols, "メモ"), column_index(cols, "missing")
    (3, 0)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .constants import EMPTY, INVALID_COLUMN
from .typing import ColumnIndex

__all__ = [
    "ColumnDescriptor",
    "build_columns",
    "column_index",
    "row_values",
]


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    """
    Frozen (name, position) pair for one header cell.

    Attributes:
        name (str): Raw header cell value.
        index (ColumnIndex): 1-based column position.
    """

    name: str
    index: ColumnIndex


def build_columns(header: Iterable[Any]) -> tuple[ColumnDescriptor, ...]:
    """
    Build descriptors from a header row, preserving order.

    Args:
        header (Iterable[Any]): Header cells. Non-string cells are stringified;
            a None cell becomes the empty name.

    Returns:
        tuple[ColumnDescriptor, ...]: One descriptor per header cell.
    """
    return tuple(
        ColumnDescriptor(name=EMPTY if cell is None else str(cell), index=ColumnIndex(i))
        for i, cell in enumerate(header, start=1)
    )


def column_index(columns: Sequence[ColumnDescriptor], name: str) -> ColumnIndex:
    """Return the first column position named `name`, or INVALID_COLUMN."""
    for col in columns:
        if col.name == name:
            return col.index
    return ColumnIndex(INVALID_COLUMN)


def row_values(columns: Sequence[ColumnDescriptor], fields: Mapping[str, Any]) -> list[Any]:
    """
    Lay out a field mapping as a full row in column order.

    Missing fields and None values become EMPTY; keys that match no column are dropped.
    """
    out: list[Any] = []
    for col in columns:
        value = fields.get(col.name)
        out.append(EMPTY if value is None else value)
    return out
