"""
Custom exceptions for the activetable.io module.

Purpose
- Provide store-layer error types that map cleanly to responsibilities in activetable.io.
- Keep activetable.core as the source of truth for record-level errors
  (NotFoundError, DuplicateKeyError, AmbiguousKeyError, StateError).

Boundaries
- StoreConfigError: invalid or unsupported store configuration.
- StoreReadError: a sheet document is missing or cannot be decoded.
- StoreWriteError: the atomic write path failed (tmp write/fsync/rename) or a value
  cannot be serialized.
- CellRangeError: a row/column coordinate falls outside the grid, including the
  column-0 "invalid target" produced for unknown column names.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations

from activetable.core.errors import ActiveTableError

__all__ = [
    "StoreError",
    "StoreConfigError",
    "StoreReadError",
    "StoreWriteError",
    "CellRangeError",
]


class StoreError(ActiveTableError):
    """
    Base class for backing-store failures.

    Notes:
        Use this as a catch-all for store-layer failures, distinct from record errors.
    """


class StoreConfigError(StoreError):
    """
    Raised when store configuration is invalid or unsupported.

    Examples:
        - Unknown backend name
        - Google Sheets backend without a spreadsheet key
        - Sheet name that cannot be mapped onto a file name
    """


class StoreReadError(StoreError):
    """Raised when a sheet document is missing, unreadable, or fails validation."""


class StoreWriteError(StoreError):
    """
    Raised when a mutation cannot be persisted.

    Notes:
        The file write path is tmp json → fsync → os.replace(tmp, final). Failures at any
        step surface as StoreWriteError, with best-effort cleanup of the tmp file.
    """


class CellRangeError(StoreError, IndexError):
    """Raised when a 1-based row or column coordinate is outside the sheet."""
