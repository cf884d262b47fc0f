"""
Backing-store contract for activetable.

Overview
- GridStore is the collaborator a Table reads from and writes through. It addresses a
  named sheet of cells with 1-based rows (row 1 is the header) and 1-based columns.
- Stores decide what a sheet handle is (a name, a worksheet object, ...); tables only
  pass it back.
- CellRef is the opaque coordinate returned by cell_handle(); it is what Row.cell_of()
  hands to callers needing collaborator-specific access to a single cell.

Contract
- resolve(name) returns a handle, or None when no such sheet exists.
- read_grid(sheet) returns the whole sheet, header first, as a rectangular list of rows.
- delete_row(sheet, position) shifts every later row up by one.
- write_row_range(sheet, position, values) overwrites one row's leading columns in a
  single call.
- All calls are synchronous and complete before returning.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from activetable.core.typing import Grid

from .grid import column_letter

__all__ = [
    "GridStore",
    "CellStore",
    "CellRef",
]


@runtime_checkable
class GridStore(Protocol):
    """Tabular store addressed by sheet handle and 1-based row position."""

    def resolve(self, name: str) -> Any | None: ...

    def read_grid(self, sheet: Any) -> Grid: ...

    def append_row(self, sheet: Any, values: Sequence[Any]) -> None: ...

    def delete_row(self, sheet: Any, position: int) -> None: ...

    def write_row_range(self, sheet: Any, position: int, values: Sequence[Any]) -> None: ...

    def cell_handle(self, sheet: Any, position: int, column: int) -> CellRef: ...


class CellStore(Protocol):
    """Single-cell access, for stores whose CellRef supports value()/set_value()."""

    def read_cell(self, sheet: Any, position: int, column: int) -> Any: ...

    def write_cell(self, sheet: Any, position: int, column: int, value: Any) -> None: ...


@dataclass(frozen=True)
class CellRef:
    """
    Coordinate of one cell in a sheet, bound to the store that produced it.

    Attributes:
        sheet_name (str): Human-readable sheet name.
        row (int): 1-based row position (header is row 1).
        column (int): 1-based column position.
        sheet (Any): Store-specific sheet handle.
        store (CellStore | None): Store used by value()/set_value().

    Examples:
        >>> CellRef("Users", 2, 3).a1
        'C2'
    """

    sheet_name: str
    row: int
    column: int
    sheet: Any = field(default=None, compare=False, repr=False)
    store: CellStore | None = field(default=None, compare=False, repr=False)

    @property
    def a1(self) -> str:
        return f"{column_letter(self.column)}{self.row}"

    def value(self) -> Any:
        """Read the live cell value from the store."""
        if self.store is None:
            raise TypeError(f"cell {self.a1} of {self.sheet_name!r} is not bound to a store")
        return self.store.read_cell(self.sheet, self.row, self.column)

    def set_value(self, value: Any) -> None:
        """Write a single cell through to the store."""
        if self.store is None:
            raise TypeError(f"cell {self.a1} of {self.sheet_name!r} is not bound to a store")
        self.store.write_cell(self.sheet, self.row, self.column, value)
