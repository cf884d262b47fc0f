"""
activetable: record-style access to spreadsheet-like tables.

Presents a sheet (header row + data rows, 1-based row addressing) as a table of records:
lookup by primary key (first column), equality and ordering queries, and
create/update/delete written straight through to the backing store.

## Public API
- open_table / Table: open a sheet and query it.
- Row / RowCollection: records and ordered result sets.
- StoreSettings / open_store: choose and configure a backing store.
- Errors: NotFoundError, DuplicateKeyError, AmbiguousKeyError, StateError.

## Examples
```python
from activetable import open_table
from activetable.io import MemoryGridStore

store = MemoryGridStore({"Users": [["id", "name", "status"], ["user1", "Alice", "active"]]})
users = open_table("Users", store=store)
users.create({"id": "user2", "name": "Bob"})        # appends ["user2", "Bob", ""]
users.where({"status": "active"}).update_all({"status": "inactive"})
users.find("user2").delete()
```
"""

from __future__ import annotations

from .core.errors import (
    ActiveTableError,
    AmbiguousKeyError,
    DuplicateKeyError,
    NotFoundError,
    RowNotFoundError,
    SheetNotFoundError,
    StateError,
)
from .io import StoreSettings, open_store
from .records import Row, RowCollection, Table, open_table

__all__ = [
    "ActiveTableError",
    "AmbiguousKeyError",
    "DuplicateKeyError",
    "NotFoundError",
    "Row",
    "RowCollection",
    "RowNotFoundError",
    "SheetNotFoundError",
    "StateError",
    "StoreSettings",
    "Table",
    "open_store",
    "open_table",
]
