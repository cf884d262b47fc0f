"""
activetable.io: backing stores for activetable tables.

## Responsibilities
- Define the GridStore contract (resolve / read_grid / append_row / delete_row /
  write_row_range / cell_handle) tables talk to.
- Provide concrete stores: MemoryGridStore (in-process), FileGridStore (JSON document per
  sheet, atomic rewrites), GoogleSheetsStore (gspread; "sheets" extra).
- Load store configuration with env > TOML > defaults precedence.

## Public API
- StoreSettings: configuration for store selection and layout.
- open_store: build the configured GridStore.
- GridStore, CellRef: the store contract and its cell coordinate type.
- MemoryGridStore, FileGridStore: bundled stores.

## Import DAG discipline
- Depends on stdlib, pydantic, and activetable.core.*; gspread only inside
  activetable.io.sheets.
- MUST NOT import activetable.records.

## Examples
```python
from activetable.io import MemoryGridStore
store = MemoryGridStore({"Users": [["id", "name"], ["user1", "Alice"]]})
store.read_grid(store.resolve("Users"))  # [['id', 'name'], ['user1', 'Alice']]
```
"""

from __future__ import annotations

from .backends import open_store
from .config import StoreSettings
from .memory import MemoryGridStore
from .store import CellRef, GridStore
from .workbook import FileGridStore

__all__ = [
    "CellRef",
    "FileGridStore",
    "GridStore",
    "MemoryGridStore",
    "StoreSettings",
    "open_store",
]
