"""
The narrowed capability a Row holds instead of its Table.

A Row can persist itself (append, update, delete) and resolve one of its cells, but it
cannot re-query the table or see other rows. Table hands each Row a TableOperations
built from its private mutation methods; anything with the same four callables
(including a unittest.mock.Mock) satisfies TableOperable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from activetable.core.typing import Fields


class TableOperable(Protocol):
    """Exactly the four table operations a Row may call."""

    def append_row(self, fields: Fields) -> None: ...

    def delete_row(self, position: int) -> None: ...

    def update_row(self, position: int, fields: Fields) -> None: ...

    def cell_at(self, position: int, column_name: str) -> Any: ...


@dataclass(frozen=True, slots=True)
class TableOperations:
    """Bound table callables packaged as a TableOperable."""

    append_row: Callable[[Fields], None]
    delete_row: Callable[[int], None]
    update_row: Callable[[int, Fields], None]
    cell_at: Callable[[int, str], Any]
