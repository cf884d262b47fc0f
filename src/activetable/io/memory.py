"""
In-process GridStore holding sheets as lists of rows.

Useful for tests, examples, and scripts that stage data before writing it elsewhere.
Sheet handles are the sheet names themselves.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from activetable.core.typing import Grid

from . import grid
from .store import CellRef


class MemoryGridStore:
    """
    GridStore over a dict of sheet name -> rows.

    Examples:
        >>> store = MemoryGridStore({"Users": [["id", "name"], ["u1", "Alice"]]})
        >>> store.read_grid(store.resolve("Users"))
        [['id', 'name'], ['u1', 'Alice']]
        >>> store.resolve("Missing") is None
        True
    """

    def __init__(self, sheets: Mapping[str, Sequence[Sequence[Any]]] | None = None) -> None:
        self._sheets: dict[str, Grid] = {}
        for name, rows in (sheets or {}).items():
            self.add_sheet(name, rows)

    def add_sheet(self, name: str, rows: Sequence[Sequence[Any]] = ()) -> None:
        """Create or replace a sheet with a copy of `rows` (header first)."""
        self._sheets[name] = [list(r) for r in rows]

    def sheet_names(self) -> list[str]:
        return list(self._sheets)

    def rows(self, name: str) -> Grid:
        """Snapshot of a sheet exactly as stored (not padded)."""
        return [list(r) for r in self._sheets[name]]

    # GridStore

    def resolve(self, name: str) -> str | None:
        return name if name in self._sheets else None

    def read_grid(self, sheet: str) -> Grid:
        return grid.padded(self._sheets[sheet])

    def append_row(self, sheet: str, values: Sequence[Any]) -> None:
        grid.append(self._sheets[sheet], values)

    def delete_row(self, sheet: str, position: int) -> None:
        grid.delete(self._sheets[sheet], position)

    def write_row_range(self, sheet: str, position: int, values: Sequence[Any]) -> None:
        grid.write_range(self._sheets[sheet], position, values)

    def cell_handle(self, sheet: str, position: int, column: int) -> CellRef:
        grid.check_coordinate(position, column)
        return CellRef(sheet, position, column, sheet=sheet, store=self)

    # CellStore

    def read_cell(self, sheet: str, position: int, column: int) -> Any:
        return grid.get_cell(self._sheets[sheet], position, column)

    def write_cell(self, sheet: str, position: int, column: int, value: Any) -> None:
        grid.set_cell(self._sheets[sheet], position, column, value)
