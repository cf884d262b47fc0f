"""
Sheet layout constants shared by records and stores.

Notes:
    - The first sheet row is always the header; data rows start right after it.
    - EMPTY is what a blank cell reads as, and what missing fields are written as.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "HEADER_POSITION",
    "FIRST_DATA_POSITION",
    "INVALID_COLUMN",
    "EMPTY",
]

# 1-based row number of the header row.
HEADER_POSITION: Final[int] = 1

# 1-based row number of the first data row.
FIRST_DATA_POSITION: Final[int] = HEADER_POSITION + 1

# Column index returned for an unknown column name; stores treat it as out of range.
INVALID_COLUMN: Final[int] = 0

EMPTY: Final[str] = ""
