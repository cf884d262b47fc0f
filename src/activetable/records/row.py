"""
Row: one mutable record of a sheet.

A Row is a mapping from column name to cell value plus a position handle:

- position None: transient, never saved (or deleted).
- position n >= 2: the 1-based sheet row it was read from (row 1 is the header).

Assigning a field only changes the in-memory mapping. save(), update() and delete()
are the calls that reach the backing store, through the row's TableOperable.

Notes:
    - The position is captured at read time and never revalidated. Do not insert or
      delete rows elsewhere between reading a Row and mutating it.
    - save() on a transient row appends it but leaves it transient; re-query the table
      to get a persisted Row for the new record.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from activetable.core.errors import StateError
from activetable.core.typing import Fields
from activetable.core.values import is_empty

from .operable import TableOperable


class Row(MutableMapping[str, Any]):
    """
    Mutable record with named fields and a nullable sheet position.

    Args:
        table (TableOperable): Capability used to persist this row.
        position (int | None): 1-based sheet row, or None for a transient row.
        fields (Fields | None): Initial field values.

    Examples:
        >>> from unittest.mock import Mock
        >>> row = Row(Mock(), None, {"name": "Alice"})
        >>> row.is_persisted(), row["name"]
        (False, 'Alice')
    """

    def __init__(
        self,
        table: TableOperable,
        position: int | None = None,
        fields: Fields | None = None,
    ) -> None:
        self._table = table
        self._position = position
        self._fields: dict[str, Any] = dict(fields or {})

    @property
    def position(self) -> int | None:
        return self._position

    @property
    def fields(self) -> dict[str, Any]:
        """Copy of the current field values."""
        return dict(self._fields)

    def __getitem__(self, name: str) -> Any:
        return self._fields[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._fields[name] = value

    def __delitem__(self, name: str) -> None:
        del self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Row(position={self._position!r}, fields={self._fields!r})"

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def is_persisted(self) -> bool:
        return self._position is not None

    def save(self) -> None:
        """Append a transient row, or rewrite a persisted row in full."""
        if self._position is None:
            self._table.append_row(self.fields)
        else:
            self._table.update_row(self._position, self.fields)

    def update(self, fields: Fields | None = None, /, **kwargs: Any) -> None:  # type: ignore[override]
        """
        Merge fields into the row, then rewrite it if persisted.

        Args:
            fields (Fields | None): Values to merge (overwriting existing keys).
            **kwargs: Additional values, merged after `fields`.

        Notes:
            A transient row only changes in memory; nothing is written.
        """
        self._fields.update(fields or {})
        self._fields.update(kwargs)
        if self._position is not None:
            self._table.update_row(self._position, self.fields)

    def delete(self) -> None:
        """Delete the row from the sheet if persisted; always leaves it transient."""
        if self._position is not None:
            self._table.delete_row(self._position)
        self._position = None

    def cell_of(self, column_name: str) -> Any:
        """
        Return the store's live cell handle for this row and column.

        Raises:
            StateError: If the row is not persisted.
        """
        if self._position is None:
            raise StateError("row is not persisted; it has no sheet position")
        return self._table.cell_at(self._position, column_name)

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------
    def _typed(self, name: str, types: tuple[type, ...], label: str) -> Any:
        value = self._fields.get(name)
        if is_empty(value):
            return None
        if isinstance(value, bool) and bool not in types:
            raise TypeError(f"field {name!r} is a bool, not {label}")
        if not isinstance(value, types):
            raise TypeError(f"field {name!r} is {type(value).__name__}, not {label}")
        return value

    def get_str(self, name: str) -> str | None:
        return self._typed(name, (str,), "text")

    def get_number(self, name: str) -> int | float | Decimal | None:
        return self._typed(name, (int, float, Decimal), "a number")

    def get_bool(self, name: str) -> bool | None:
        return self._typed(name, (bool,), "a boolean")

    def get_datetime(self, name: str) -> datetime | None:
        """Return a temporal field as a datetime; a bare date becomes midnight."""
        value = self._typed(name, (date,), "a date")
        if value is None or isinstance(value, datetime):
            return value
        return datetime(value.year, value.month, value.day)
