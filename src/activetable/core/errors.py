"""
Core exception types raised by table construction, lookups, and row lifecycle checks.

Provides typed exceptions for record-layer failures:
- NotFoundError when a sheet name does not resolve or a key lookup matches nothing.
- DuplicateKeyError when the construction-time uniqueness check fails.
- AmbiguousKeyError when a key lookup matches more than one row.
- StateError when an operation needs a persisted row but the row is transient.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Store-level failures (corrupt documents, failed writes) live in activetable.io.errors
      and share the ActiveTableError base.

Examples:
    Catch a missing row.

    >>> from activetable.core.errors import NotFoundError, RowNotFoundError
    >>> try:
    ...     raise RowNotFoundError("ghost")
    ... except NotFoundError as e:
    ...     msg = str(e)
    >>> msg
    'Row with id "ghost" not found'
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ActiveTableError",
    "NotFoundError",
    "SheetNotFoundError",
    "RowNotFoundError",
    "DuplicateKeyError",
    "AmbiguousKeyError",
    "StateError",
]


class ActiveTableError(Exception):
    """Base class for every error raised by activetable."""


class NotFoundError(ActiveTableError, LookupError):
    """A sheet or a keyed row could not be found."""


class SheetNotFoundError(NotFoundError):
    """The backing store has no sheet with the requested name."""

    def __init__(self, sheet_name: str) -> None:
        super().__init__(f'Sheet with name "{sheet_name}" not found')
        self.sheet_name = sheet_name


class RowNotFoundError(NotFoundError):
    """Table.find matched zero rows."""

    def __init__(self, key: Any) -> None:
        super().__init__(f'Row with id "{key}" not found')
        self.key = key


class DuplicateKeyError(ActiveTableError, ValueError):
    """
    The first column of a sheet holds repeated values.

    Attributes:
        sheet_name (str): Name of the offending sheet.
    """

    def __init__(self, sheet_name: str) -> None:
        super().__init__(f'Duplicate values found in the first column of sheet "{sheet_name}"')
        self.sheet_name = sheet_name


class AmbiguousKeyError(ActiveTableError, LookupError):
    """Table.find matched more than one row."""

    def __init__(self, key: Any, count: int) -> None:
        super().__init__(f'Multiple rows with id "{key}" found')
        self.key = key
        self.count = count


class StateError(ActiveTableError, RuntimeError):
    """Operation requires a persisted row (non-null position) but the row is transient."""
