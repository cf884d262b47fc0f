"""
Lightweight typing aliases used across records and stores.

Provides minimal NewTypes and aliases to improve readability and static checks.
This module contains no runtime logic and is zero-IO.

Notes:
    - Row positions are plain ints counted from 1, header included, so the first
      data row sits at position 2.
    - ColumnIndex counts sheet columns from 1; 0 is reserved for "no such column".

Examples:
    >>> from activetable.core.typing import Criteria
    >>> criteria: Criteria = {"status": "active"}
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, NewType

__all__ = [
    "Scalar",
    "ColumnIndex",
    "Fields",
    "Criteria",
    "Grid",
]

# Cell values a sheet can hold.
Scalar = str | int | float | bool | date | datetime | None

ColumnIndex = NewType("ColumnIndex", int)

# Unknown keys are dropped at the table boundary.
Fields = Mapping[str, Any]
Criteria = Mapping[str, Any]

Grid = list[list[Any]]
