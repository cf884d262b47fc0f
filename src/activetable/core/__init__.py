"""
Core contracts for activetable (errors, typing, constants, columns, value semantics).

## Contracts (single source of truth)
- Errors: typed exceptions surfaced by tables and rows.
- Columns: header-derived (name, position) descriptors and row layout.
- Values: equality, ordering and emptiness of heterogeneous cell values.

## Notes
- Zero-IO policy: stdlib only; no file/network IO.
- activetable.records and activetable.io both build on these modules.
"""

from __future__ import annotations

from .columns import ColumnDescriptor, build_columns, column_index, row_values
from .errors import (
    ActiveTableError,
    AmbiguousKeyError,
    DuplicateKeyError,
    NotFoundError,
    RowNotFoundError,
    SheetNotFoundError,
    StateError,
)
from .values import compare_values, is_empty, values_equal

__all__ = [
    "ActiveTableError",
    "AmbiguousKeyError",
    "ColumnDescriptor",
    "DuplicateKeyError",
    "NotFoundError",
    "RowNotFoundError",
    "SheetNotFoundError",
    "StateError",
    "build_columns",
    "column_index",
    "compare_values",
    "is_empty",
    "row_values",
    "values_equal",
]
