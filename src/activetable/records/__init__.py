"""
activetable.records: Table, Row, and RowCollection.

Control flow: Table reads the sheet grid → builds column descriptors from the header →
materializes Rows into a RowCollection → callers filter/mutate → Rows call back through
their TableOperable → Table turns that into store calls (append / range write / delete).
"""

from __future__ import annotations

from .collection import RowCollection
from .operable import TableOperable, TableOperations
from .row import Row
from .table import Table, open_table

__all__ = [
    "Row",
    "RowCollection",
    "Table",
    "TableOperable",
    "TableOperations",
    "open_table",
]
