from __future__ import annotations

from datetime import date, datetime
from unittest.mock import Mock

import pytest

from activetable.core.errors import StateError
from activetable.records import Row


def test_is_persisted_follows_position() -> None:
    assert Row(Mock(), 2).is_persisted() is True
    assert Row(Mock(), None).is_persisted() is False


def test_save_appends_transient_row_without_adopting_a_position() -> None:
    ops = Mock()
    row = Row(ops, None, {"name": "Test"})

    row.save()

    ops.append_row.assert_called_once_with({"name": "Test"})
    ops.update_row.assert_not_called()
    assert row.is_persisted() is False


def test_save_rewrites_persisted_row() -> None:
    ops = Mock()
    row = Row(ops, 2)
    row["name"] = "Test"

    row.save()

    ops.update_row.assert_called_once_with(2, {"name": "Test"})
    ops.append_row.assert_not_called()


def test_field_assignment_does_not_persist() -> None:
    ops = Mock()
    row = Row(ops, 2, {"name": "Old"})
    row["name"] = "New"
    ops.update_row.assert_not_called()
    ops.append_row.assert_not_called()


def test_update_merges_and_persists() -> None:
    ops = Mock()
    row = Row(ops, 2, {"name": "Old Name", "status": "active"})

    row.update({"name": "New Name", "status": "inactive"})

    assert row["name"] == "New Name"
    assert row["status"] == "inactive"
    ops.update_row.assert_called_once_with(2, {"name": "New Name", "status": "inactive"})


def test_update_accepts_keywords() -> None:
    ops = Mock()
    row = Row(ops, 3, {"status": "active"})
    row.update(status="inactive")
    ops.update_row.assert_called_once_with(3, {"status": "inactive"})


def test_update_on_transient_row_stays_in_memory() -> None:
    ops = Mock()
    row = Row(ops, None)

    row.update({"name": "Test"})

    assert row["name"] == "Test"
    ops.update_row.assert_not_called()
    ops.append_row.assert_not_called()


def test_delete_clears_position_and_is_idempotent() -> None:
    ops = Mock()
    row = Row(ops, 2)

    row.delete()
    assert row.is_persisted() is False
    row.delete()

    ops.delete_row.assert_called_once_with(2)


def test_fields_stay_assignable_after_delete_but_are_inert() -> None:
    ops = Mock()
    row = Row(ops, 2, {"name": "x"})
    row.delete()
    row["name"] = "y"
    row.update({"name": "z"})
    assert row["name"] == "z"
    ops.update_row.assert_not_called()


def test_cell_of_delegates_with_position() -> None:
    ops = Mock()
    ops.cell_at.return_value = {"range": "B2"}
    row = Row(ops, 2)

    assert row.cell_of("name") == {"range": "B2"}
    ops.cell_at.assert_called_once_with(2, "name")


def test_cell_of_requires_persisted_row() -> None:
    row = Row(Mock(), None)
    with pytest.raises(StateError):
        row.cell_of("name")


def test_row_is_a_mapping() -> None:
    row = Row(Mock(), 2, {"id": "u1", "メモ": "テスト"})
    assert list(row) == ["id", "メモ"]
    assert len(row) == 2
    assert "メモ" in row
    assert row.get("missing") is None
    with pytest.raises(KeyError):
        row["missing"]
    fields = row.fields
    fields["id"] = "changed"
    assert row["id"] == "u1"


def test_typed_accessors() -> None:
    row = Row(
        Mock(),
        2,
        {"name": "Alice", "age": 30, "active": True, "born": date(1990, 5, 1), "blank": ""},
    )
    assert row.get_str("name") == "Alice"
    assert row.get_number("age") == 30
    assert row.get_bool("active") is True
    assert row.get_datetime("born") == datetime(1990, 5, 1)
    assert row.get_str("blank") is None
    assert row.get_number("missing") is None
    with pytest.raises(TypeError):
        row.get_number("name")
    with pytest.raises(TypeError):
        row.get_number("active")
    with pytest.raises(TypeError):
        row.get_datetime("age")
