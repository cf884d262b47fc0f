from __future__ import annotations

import pytest

from activetable.io import CellRef, GridStore, MemoryGridStore
from activetable.io.errors import CellRangeError
from activetable.io.grid import column_letter


def test_memory_store_satisfies_grid_store() -> None:
    assert isinstance(MemoryGridStore(), GridStore)


def test_read_grid_is_padded_copy() -> None:
    store = MemoryGridStore({"S": [["a", "b", "c"], ["1"]]})

    rows = store.read_grid("S")
    rows[1][0] = "changed"

    assert rows == [["a", "b", "c"], ["changed", "", ""]]
    assert store.rows("S") == [["a", "b", "c"], ["1"]]


def test_constructor_copies_input() -> None:
    source = [["id"], ["x"]]
    store = MemoryGridStore({"S": source})
    source.append(["y"])
    assert store.rows("S") == [["id"], ["x"]]


def test_resolve() -> None:
    store = MemoryGridStore({"S": [["id"]]})
    assert store.resolve("S") == "S"
    assert store.resolve("T") is None
    store.add_sheet("T")
    assert store.sheet_names() == ["S", "T"]


def test_delete_shifts_later_rows_up() -> None:
    store = MemoryGridStore({"S": [["id"], ["a"], ["b"], ["c"]]})
    store.delete_row("S", 2)
    assert store.rows("S") == [["id"], ["b"], ["c"]]


def test_delete_past_end() -> None:
    store = MemoryGridStore({"S": [["id"], ["a"]]})
    with pytest.raises(CellRangeError):
        store.delete_row("S", 3)
    with pytest.raises(CellRangeError):
        store.delete_row("S", 0)


def test_write_row_range_overwrites_leading_columns() -> None:
    store = MemoryGridStore({"S": [["id", "name", "note"], ["a", "Alice", "keep"]]})
    store.write_row_range("S", 2, ["a", "Alicia"])
    assert store.rows("S")[1] == ["a", "Alicia", "keep"]


def test_write_row_range_grows_grid() -> None:
    store = MemoryGridStore({"S": [["id", "name"]]})
    store.write_row_range("S", 3, ["x", "y"])
    assert store.rows("S") == [["id", "name"], [], ["x", "y"]]


def test_cell_handle_reads_and_writes_live_values() -> None:
    store = MemoryGridStore({"S": [["id", "name"], ["a", "Alice"]]})

    cell = store.cell_handle("S", 2, 2)
    assert cell == CellRef("S", 2, 2)
    assert cell.value() == "Alice"

    store.write_row_range("S", 2, ["a", "Alicia"])
    assert cell.value() == "Alicia"

    cell.set_value("Al")
    assert store.rows("S")[1] == ["a", "Al"]
    assert store.cell_handle("S", 5, 5).value() == ""


def test_cell_handle_rejects_invalid_column() -> None:
    store = MemoryGridStore({"S": [["id"]]})
    with pytest.raises(CellRangeError):
        store.cell_handle("S", 2, 0)


def test_unbound_cell_ref() -> None:
    cell = CellRef("S", 1, 1)
    with pytest.raises(TypeError):
        cell.value()
    with pytest.raises(TypeError):
        cell.set_value("x")


@pytest.mark.parametrize(
    ("column", "letters"),
    [(1, "A"), (26, "Z"), (27, "AA"), (52, "AZ"), (703, "AAA")],
)
def test_column_letter(column: int, letters: str) -> None:
    assert column_letter(column) == letters
