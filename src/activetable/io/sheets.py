"""
Google Sheets GridStore built on gspread.

Requires the "sheets" extra (gspread, google-auth). Sheet handles are gspread Worksheet
objects; positions map one-to-one onto spreadsheet row numbers.

Notes
- Reads use UNFORMATTED_VALUE so numbers and booleans keep their types. Date cells come
  back as formatted strings; ISO-8601 ones ("2023-01-01", "2023-01-01 09:30:00") are
  parsed into date/datetime, so date criteria work. Format date columns as
  yyyy-mm-dd (optionally with hh:mm:ss) for that to apply.
- Writes send dates as ISO-8601 strings; with value_input_option="USER_ENTERED"
  Google Sheets parses them back into date cells.
- delete_rows() shifts later rows up, matching the GridStore contract.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any

import gspread
from gspread.exceptions import WorksheetNotFound

from activetable.core.constants import EMPTY
from activetable.core.typing import Grid

from . import grid
from .config import ValueInputOption
from .store import CellRef

logger = logging.getLogger(__name__)

SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/spreadsheets",)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ISO_DATETIME = re.compile(
    r"^\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:\d{2})?$"
)


def _to_sheet_value(value: Any) -> Any:
    if value is None:
        return EMPTY
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


def _from_sheet_value(value: Any) -> Any:
    """Turn an ISO-8601 date or date-time string back into date/datetime; pass others through."""
    if not isinstance(value, str):
        return value
    try:
        if _ISO_DATE.match(value):
            return date.fromisoformat(value)
        if _ISO_DATETIME.match(value):
            return datetime.fromisoformat(value)
    except ValueError:
        return value
    return value


class GoogleSheetsStore:
    """
    GridStore over one gspread Spreadsheet.

    Args:
        spreadsheet: An opened gspread.Spreadsheet (or anything with .worksheet(title)).
        value_input_option: "USER_ENTERED" (parse like typed input) or "RAW".
    """

    def __init__(self, spreadsheet: Any, *, value_input_option: ValueInputOption = "USER_ENTERED") -> None:
        self.spreadsheet = spreadsheet
        self.value_input_option = value_input_option

    @classmethod
    def from_service_account(
        cls,
        spreadsheet_key: str,
        credentials_file: str,
        *,
        value_input_option: ValueInputOption = "USER_ENTERED",
    ) -> GoogleSheetsStore:
        """Authorize with a service account JSON file and open a spreadsheet by key."""
        from google.oauth2.service_account import Credentials

        creds = Credentials.from_service_account_file(credentials_file, scopes=list(SCOPES))
        gc = gspread.authorize(creds)
        return cls(gc.open_by_key(spreadsheet_key), value_input_option=value_input_option)

    def sheet_names(self) -> list[str]:
        return [ws.title for ws in self.spreadsheet.worksheets()]

    # GridStore

    def resolve(self, name: str) -> Any | None:
        try:
            return self.spreadsheet.worksheet(name)
        except WorksheetNotFound:
            return None

    def read_grid(self, sheet: Any) -> Grid:
        values = sheet.get_values(
            value_render_option="UNFORMATTED_VALUE",
            date_time_render_option="FORMATTED_STRING",
        )
        rows = grid.padded([[_from_sheet_value(c) for c in row] for row in values])
        logger.debug("read worksheet %r (%d rows)", sheet.title, len(rows))
        return rows

    def append_row(self, sheet: Any, values: Sequence[Any]) -> None:
        sheet.append_row(
            [_to_sheet_value(v) for v in values],
            value_input_option=self.value_input_option,
        )

    def delete_row(self, sheet: Any, position: int) -> None:
        grid.check_coordinate(position)
        sheet.delete_rows(position)

    def write_row_range(self, sheet: Any, position: int, values: Sequence[Any]) -> None:
        grid.check_coordinate(position)
        if not values:
            return
        rng = f"A{position}:{grid.column_letter(len(values))}{position}"
        sheet.update(
            range_name=rng,
            values=[[_to_sheet_value(v) for v in values]],
            value_input_option=self.value_input_option,
        )

    def cell_handle(self, sheet: Any, position: int, column: int) -> CellRef:
        grid.check_coordinate(position, column)
        return CellRef(sheet.title, position, column, sheet=sheet, store=self)

    # CellStore

    def read_cell(self, sheet: Any, position: int, column: int) -> Any:
        return sheet.cell(position, column, value_render_option="UNFORMATTED_VALUE").value

    def write_cell(self, sheet: Any, position: int, column: int, value: Any) -> None:
        sheet.update_cell(position, column, _to_sheet_value(value))
