from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pytest

gspread = pytest.importorskip("gspread")

from gspread.exceptions import WorksheetNotFound  # noqa: E402

from activetable.io import CellRef, GridStore  # noqa: E402
from activetable.io.sheets import GoogleSheetsStore  # noqa: E402
from activetable.records import Table  # noqa: E402


class FakeCell:
    def __init__(self, value: Any) -> None:
        self.value = value


class FakeWorksheet:
    """Records gspread calls against an in-memory list of rows."""

    def __init__(self, title: str, rows: list[list[Any]]) -> None:
        self.title = title
        self.rows = rows
        self.calls: list[tuple[str, Any]] = []

    def get_values(self, **kwargs: Any) -> list[list[Any]]:
        self.calls.append(("get_values", kwargs))
        return [list(r) for r in self.rows]

    def append_row(self, values: list[Any], **kwargs: Any) -> None:
        self.calls.append(("append_row", kwargs))
        self.rows.append(list(values))

    def delete_rows(self, index: int) -> None:
        self.calls.append(("delete_rows", index))
        del self.rows[index - 1]

    def update(self, *, range_name: str, values: list[list[Any]], **kwargs: Any) -> None:
        self.calls.append(("update", range_name))
        row = int("".join(ch for ch in range_name.split(":")[0] if ch.isdigit()))
        self.rows[row - 1][: len(values[0])] = values[0]

    def cell(self, row: int, col: int, **kwargs: Any) -> FakeCell:
        return FakeCell(self.rows[row - 1][col - 1])

    def update_cell(self, row: int, col: int, value: Any) -> None:
        self.rows[row - 1][col - 1] = value


class FakeSpreadsheet:
    def __init__(self, *sheets: FakeWorksheet) -> None:
        self._sheets = {ws.title: ws for ws in sheets}

    def worksheet(self, title: str) -> FakeWorksheet:
        try:
            return self._sheets[title]
        except KeyError:
            raise WorksheetNotFound(title) from None

    def worksheets(self) -> list[FakeWorksheet]:
        return list(self._sheets.values())


def _users() -> FakeWorksheet:
    return FakeWorksheet(
        "Users",
        [["id", "name", "joined"], ["u1", "Alice", "2023-01-01"], ["u2", "Bob"]],
    )


def test_sheets_store_satisfies_grid_store() -> None:
    assert isinstance(GoogleSheetsStore(FakeSpreadsheet()), GridStore)


def test_resolve() -> None:
    ws = _users()
    store = GoogleSheetsStore(FakeSpreadsheet(ws))
    assert store.resolve("Users") is ws
    assert store.resolve("Missing") is None
    assert store.sheet_names() == ["Users"]


def test_read_grid_pads_and_requests_unformatted_values() -> None:
    ws = _users()
    store = GoogleSheetsStore(FakeSpreadsheet(ws))

    rows = store.read_grid(ws)

    assert rows[2] == ["u2", "Bob", ""]
    assert ws.calls[0] == (
        "get_values",
        {"value_render_option": "UNFORMATTED_VALUE", "date_time_render_option": "FORMATTED_STRING"},
    )


def test_append_converts_values() -> None:
    ws = _users()
    store = GoogleSheetsStore(FakeSpreadsheet(ws), value_input_option="RAW")

    store.append_row(ws, ["u3", None, date(2023, 2, 1)])

    assert ws.rows[-1] == ["u3", "", "2023-02-01"]
    assert ws.calls[-1] == ("append_row", {"value_input_option": "RAW"})


def test_write_row_range_uses_single_a1_range() -> None:
    ws = _users()
    store = GoogleSheetsStore(FakeSpreadsheet(ws))

    store.write_row_range(ws, 2, ["u1", "Alicia", datetime(2023, 1, 1, 9, 0)])

    assert ws.calls[-1] == ("update", "A2:C2")
    assert ws.rows[1] == ["u1", "Alicia", "2023-01-01 09:00:00"]


def test_cell_handle_uses_worksheet_title() -> None:
    ws = _users()
    store = GoogleSheetsStore(FakeSpreadsheet(ws))

    cell = store.cell_handle(ws, 2, 2)

    assert cell == CellRef("Users", 2, 2)
    assert cell.value() == "Alice"
    cell.set_value("Al")
    assert ws.rows[1][1] == "Al"


def test_table_over_sheets_store() -> None:
    ws = _users()
    table = Table.by_sheet_name(GoogleSheetsStore(FakeSpreadsheet(ws)), "Users")

    table.find("u1").delete()
    table.create({"id": "u3", "name": "Carol"})

    assert ("delete_rows", 2) in ws.calls
    assert [r["id"] for r in table.all()] == ["u2", "u3"]


def _created() -> FakeWorksheet:
    return FakeWorksheet(
        "Users",
        [["id", "created_at"], ["u1", "2022-12-31"], ["u2", "2023-06-01"], ["u3", ""]],
    )


def test_read_grid_parses_iso_dates() -> None:
    ws = FakeWorksheet(
        "Log",
        [
            ["at", "note"],
            ["2023-01-02", "2023-13-45"],
            ["2023-01-02 09:30:00", "1/2/2023"],
        ],
    )

    rows = GoogleSheetsStore(FakeSpreadsheet(ws)).read_grid(ws)

    assert rows[1] == [date(2023, 1, 2), "2023-13-45"]
    assert rows[2] == [datetime(2023, 1, 2, 9, 30), "1/2/2023"]


def test_date_criteria_on_sheets_store() -> None:
    table = Table.by_sheet_name(GoogleSheetsStore(FakeSpreadsheet(_created())), "Users")

    assert [r["id"] for r in table.after({"created_at": datetime(2023, 1, 1)})] == ["u2"]
    assert [r["id"] for r in table.before({"created_at": date(2023, 1, 1)})] == ["u1"]
    assert [r["id"] for r in table.where({"created_at": date(2023, 6, 1)})] == ["u2"]


def test_written_dates_read_back_as_dates() -> None:
    ws = _created()
    store = GoogleSheetsStore(FakeSpreadsheet(ws))
    table = Table.by_sheet_name(store, "Users")

    table.create({"id": "u4", "created_at": datetime(2024, 2, 3, 4, 5, 6)})

    assert table.find("u4")["created_at"] == datetime(2024, 2, 3, 4, 5, 6)
