"""
Table: record-oriented access to one sheet of a GridStore.

Overview
- Table.by_sheet_name() / open_table() resolve a sheet, read it once to build the column
  descriptors from the header row, and optionally check that first-column values are
  unique across all data rows.
- Every top-level read (all, where, after, before, find) goes through _refresh(), which
  re-reads the whole sheet and builds fresh Rows. Nothing is cached between calls apart
  from the column descriptors, so two calls may see different data.
- Rows get a TableOperations capability, not the Table, for persisting themselves.

Writes
- create()/append: one appended row laid out in column order; unknown keys dropped,
  missing columns written as "".
- update: the full row rewritten in a single range write.
- delete: one sheet row removed; later rows shift up.

Notes
- The column descriptors are not refreshed if the header changes after construction.
- The uniqueness check runs at construction only; later writes are not checked.
"""

from __future__ import annotations

import logging
from typing import Any

from activetable.core.columns import ColumnDescriptor, build_columns, column_index, row_values
from activetable.core.constants import EMPTY, FIRST_DATA_POSITION
from activetable.core.errors import (
    AmbiguousKeyError,
    DuplicateKeyError,
    RowNotFoundError,
    SheetNotFoundError,
)
from activetable.core.typing import Criteria, Fields, Grid
from activetable.core.values import value_key, values_equal
from activetable.io.backends import open_store
from activetable.io.config import StoreSettings
from activetable.io.store import GridStore

from .collection import RowCollection
from .operable import TableOperations
from .row import Row

logger = logging.getLogger(__name__)


class Table:
    """
    Entry point for querying and mutating one sheet.

    Use Table.by_sheet_name() (or open_table()) rather than the constructor.

    Attributes:
        name (str): Sheet name the table was opened with.

    Examples:
        >>> from activetable.io import MemoryGridStore
        >>> store = MemoryGridStore({"Users": [["id", "name"], ["user1", "Alice"]]})
        >>> users = Table.by_sheet_name(store, "Users")
        >>> users.find("user1")["name"]
        'Alice'
    """

    def __init__(self, store: GridStore, sheet: Any, name: str, check_unique: bool = True) -> None:
        self._store = store
        self._sheet = sheet
        self.name = name
        self._operations = TableOperations(
            append_row=self._append_row,
            delete_row=self._delete_row,
            update_row=self._update_row,
            cell_at=self._cell_at,
        )

        grid = self._read()
        header, data = (grid[0], grid[1:]) if grid else ([], [])
        self._columns = build_columns(header)

        if check_unique:
            self._check_unique(data)

    @classmethod
    def by_sheet_name(cls, store: GridStore, name: str, check_unique: bool = True) -> Table:
        """
        Open the sheet called `name` in `store`.

        Args:
            store (GridStore): Backing store.
            name (str): Sheet name.
            check_unique (bool): Fail if the first column repeats a value.

        Returns:
            Table: Table bound to the resolved sheet.

        Raises:
            SheetNotFoundError: No such sheet.
            DuplicateKeyError: check_unique is set and a first-column value repeats.
        """
        sheet = store.resolve(name)
        if sheet is None:
            raise SheetNotFoundError(name)
        return cls(store, sheet, name, check_unique)

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        return self._columns

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self._columns]

    def __repr__(self) -> str:
        return f"Table(name={self.name!r}, columns={self.column_names!r})"

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def _read(self) -> Grid:
        return self._store.read_grid(self._sheet)

    def _check_unique(self, data: Grid) -> None:
        keys = {value_key(row[0] if row else EMPTY) for row in data}
        if len(keys) != len(data):
            logger.warning(
                "sheet %r: %d data rows but %d distinct first-column values",
                self.name,
                len(data),
                len(keys),
            )
            raise DuplicateKeyError(self.name)

    def _materialize(self, index: int, cells: list[Any]) -> Row:
        fields: dict[str, Any] = {}
        for col in self._columns:
            i = col.index - 1
            fields[col.name] = cells[i] if i < len(cells) else EMPTY
        return Row(self._operations, FIRST_DATA_POSITION + index, fields)

    def _refresh(self) -> RowCollection:
        """Re-read the sheet and wrap every data row in a fresh Row."""
        data = self._read()[1:]
        logger.debug("sheet %r: materialized %d rows", self.name, len(data))
        return RowCollection(self._materialize(i, cells) for i, cells in enumerate(data))

    def all(self) -> RowCollection:
        return self._refresh()

    def where(self, criteria: Criteria) -> RowCollection:
        return self._refresh().where(criteria)

    def after(self, criteria: Criteria) -> RowCollection:
        return self._refresh().after(criteria)

    def before(self, criteria: Criteria) -> RowCollection:
        return self._refresh().before(criteria)

    def find(self, key: Any) -> Row:
        """
        Return the single row whose first column equals `key`.

        Raises:
            RowNotFoundError: No row matches.
            AmbiguousKeyError: More than one row matches, whether or not uniqueness was
                checked at construction.
        """
        rows = self._refresh()
        if not self._columns:
            raise RowNotFoundError(key)
        key_name = self._columns[0].name
        matches = [r for r in rows if values_equal(r.get(key_name), key)]
        if len(matches) > 1:
            raise AmbiguousKeyError(key, len(matches))
        if not matches:
            raise RowNotFoundError(key)
        return matches[0]

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------
    def build(self, fields: Fields | None = None) -> Row:
        """Return a transient Row bound to this table; save() appends it."""
        return Row(self._operations, None, fields)

    def create(self, fields: Fields) -> None:
        """
        Append one row built from `fields`.

        Known columns take fields[name] (None and missing become ""); unknown keys are
        dropped. Returns nothing: re-query to obtain the persisted Row.
        """
        self._append_row(fields)

    def _append_row(self, fields: Fields) -> None:
        values = row_values(self._columns, fields)
        self._store.append_row(self._sheet, values)
        logger.info("sheet %r: appended row", self.name)

    def _delete_row(self, position: int) -> None:
        self._store.delete_row(self._sheet, position)
        logger.info("sheet %r: deleted row %d", self.name, position)

    def _update_row(self, position: int, fields: Fields) -> None:
        self._store.write_row_range(self._sheet, position, row_values(self._columns, fields))
        logger.debug("sheet %r: rewrote row %d", self.name, position)

    def _cell_at(self, position: int, column_name: str) -> Any:
        return self._store.cell_handle(self._sheet, position, column_index(self._columns, column_name))


def open_table(
    name: str,
    check_unique: bool = True,
    *,
    store: GridStore | None = None,
    settings: StoreSettings | None = None,
) -> Table:
    """
    Open a sheet as a Table.

    Args:
        name (str): Sheet name.
        check_unique (bool): Fail construction if first-column values repeat.
        store (GridStore | None): Store to use; built from settings when None.
        settings (StoreSettings | None): Store settings; StoreSettings.load() when None.

    Returns:
        Table

    Raises:
        SheetNotFoundError: No such sheet.
        DuplicateKeyError: check_unique is set and a first-column value repeats.
        activetable.io.errors.StoreConfigError: The configured store cannot be built.
    """
    if store is None:
        store = open_store(settings)
    return Table.by_sheet_name(store, name, check_unique)
