"""
File-backed GridStore: one JSON document per sheet.

Document layout (<root_dir>/<workbook>/<sheet>.json):
{
  "name": "<sheet name>",
  "rows": [["id", "name", ...], ["user1", "Alice", ...], ...],
  "version": 1
}

Notes:
- Row 1 of "rows" is the header. Temporal cells use the tagged encoding from
  activetable.io.serde.
- Every mutation loads the document, applies the change in memory, and rewrites the file
  atomically (tmp → fsync → os.replace). Single-writer semantics; no inter-process locking.
- Sheet handles are sheet names.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from activetable.core.typing import Grid

from . import grid
from .config import StoreSettings
from .errors import StoreConfigError, StoreReadError, StoreWriteError
from .fs import exists, listdir, makedirs, write_text_atomic
from .paths import is_valid_sheet_name, sheet_name_from_file, sheet_path, workbook_dir
from .serde import decode_cell, encode_cell, json_dumps
from .store import CellRef

logger = logging.getLogger(__name__)


class SheetDocument(BaseModel):
    """
    On-disk model of one sheet.

    Attributes:
        version (int): Document format version (currently 1).
        name (str): Sheet name, as passed to create_sheet().
        rows (list[list[Any]]): Encoded cells, header row first.

    Raises:
        pydantic.ValidationError: On unknown keys or a malformed rows array.
    """

    model_config = ConfigDict(extra="forbid")

    version: Literal[1] = 1
    name: str
    rows: list[list[Any]] = Field(default_factory=list)


class FileGridStore:
    """
    GridStore persisting each sheet as a JSON document under a workbook directory.

    Examples:
        >>> store = FileGridStore(StoreSettings(root_dir="out"))  # doctest: +SKIP
        >>> store.create_sheet("Users", ["id", "name"])  # doctest: +SKIP
        >>> store.append_row("Users", ["u1", "Alice"])  # doctest: +SKIP
    """

    def __init__(self, settings: StoreSettings | None = None) -> None:
        self.settings = settings or StoreSettings()

    def sheet_names(self) -> list[str]:
        names = (sheet_name_from_file(f) for f in listdir(workbook_dir(self.settings)))
        return [n for n in names if n is not None]

    def create_sheet(
        self,
        name: str,
        header: Sequence[Any],
        rows: Sequence[Sequence[Any]] = (),
        *,
        overwrite: bool = False,
    ) -> None:
        """
        Create a sheet document with a header row and optional data rows.

        Raises:
            StoreConfigError: If the name cannot be used as a file name.
            StoreWriteError: If the sheet exists and overwrite is False.
        """
        if not is_valid_sheet_name(name):
            raise StoreConfigError(f"invalid sheet name {name!r}")
        path = sheet_path(self.settings, name)
        if exists(path) and not overwrite:
            raise StoreWriteError(f"sheet {name!r} already exists at {path!r}")
        makedirs(workbook_dir(self.settings))
        self._save(name, [list(header), *(list(r) for r in rows)])
        logger.info("created sheet %r with %d data rows", name, len(rows))

    def _load(self, name: str) -> Grid:
        path = sheet_path(self.settings, name)
        try:
            with open(path, encoding="utf-8") as fh:
                text = fh.read()
        except OSError as exc:
            raise StoreReadError(f"cannot read sheet {name!r} at {path!r}: {exc}") from exc
        try:
            doc = SheetDocument.model_validate_json(text)
        except ValidationError as exc:
            raise StoreReadError(f"corrupt sheet document {path!r}: {exc}") from exc
        return [[decode_cell(c) for c in row] for row in doc.rows]

    def _save(self, name: str, rows: Grid) -> None:
        try:
            encoded = [[encode_cell(c) for c in row] for row in rows]
        except TypeError as exc:
            raise StoreWriteError(f"cannot store value in sheet {name!r}: {exc}") from exc
        doc = SheetDocument(name=name, rows=encoded)
        write_text_atomic(
            sheet_path(self.settings, name),
            json_dumps(doc.model_dump()),
            fsync=self.settings.fsync,
        )

    # GridStore

    def resolve(self, name: str) -> str | None:
        if not is_valid_sheet_name(name):
            return None
        return name if exists(sheet_path(self.settings, name)) else None

    def read_grid(self, sheet: str) -> Grid:
        rows = grid.padded(self._load(sheet))
        logger.debug("read sheet %r (%d rows)", sheet, len(rows))
        return rows

    def append_row(self, sheet: str, values: Sequence[Any]) -> None:
        rows = self._load(sheet)
        grid.append(rows, values)
        self._save(sheet, rows)

    def delete_row(self, sheet: str, position: int) -> None:
        rows = self._load(sheet)
        grid.delete(rows, position)
        self._save(sheet, rows)

    def write_row_range(self, sheet: str, position: int, values: Sequence[Any]) -> None:
        rows = self._load(sheet)
        grid.write_range(rows, position, values)
        self._save(sheet, rows)

    def cell_handle(self, sheet: str, position: int, column: int) -> CellRef:
        grid.check_coordinate(position, column)
        return CellRef(sheet, position, column, sheet=sheet, store=self)

    # CellStore

    def read_cell(self, sheet: str, position: int, column: int) -> Any:
        return grid.get_cell(self._load(sheet), position, column)

    def write_cell(self, sheet: str, position: int, column: int, value: Any) -> None:
        rows = self._load(sheet)
        grid.set_cell(rows, position, column, value)
        self._save(sheet, rows)
