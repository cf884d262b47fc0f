from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from activetable.cli import main
from activetable.io import FileGridStore, StoreSettings


def _seed(tmp: Path) -> FileGridStore:
    store = FileGridStore(StoreSettings(root_dir=str(tmp), workbook="book", fsync=False))
    store.create_sheet(
        "Users",
        ["id", "name", "age"],
        [["u1", "Alice", 25], ["u2", "Bob", 30], ["u3", "Carol", 35]],
    )
    return store


def _run(tmp: Path, *args: str) -> int:
    argv = [args[0], *args[1:], "--backend", "file", "--root-dir", str(tmp), "--workbook", "book", "--no-env"]
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_show_filters_rows(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed(tmp_path)

    code = _run(tmp_path, "show", "Users", "--after", "age=26", "--limit", "1")

    out = capsys.readouterr().out
    assert code == 0
    assert "Bob" in out
    assert "Alice" not in out
    assert "Carol" not in out


def test_find_prints_row(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed(tmp_path)

    code = _run(tmp_path, "find", "Users", "u3")

    assert code == 0
    assert "Carol" in capsys.readouterr().out


def test_create_and_delete(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    store = _seed(tmp_path)

    assert _run(tmp_path, "create", "Users", "id=u4", "name=Dan", "age=40") == 0
    assert store.read_grid("Users")[-1] == ["u4", "Dan", 40]

    assert _run(tmp_path, "delete", "Users", "u1") == 0
    assert [r[0] for r in store.read_grid("Users")[1:]] == ["u2", "u3", "u4"]
    assert "[INFO] Deleted u1 from Users" in capsys.readouterr().out


def test_errors_exit_with_one(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed(tmp_path)

    assert _run(tmp_path, "find", "Users", "ghost") == 1
    assert '[ERROR] Row with id "ghost" not found' in capsys.readouterr().err

    assert _run(tmp_path, "show", "Missing") == 1
    assert 'Sheet with name "Missing" not found' in capsys.readouterr().err


def test_unknown_command(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["frobnicate"])
    assert exc.value.code == 2
    assert "Unknown command: frobnicate" in capsys.readouterr().err


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    main([])
    assert "activetable" in capsys.readouterr().out


def test_show_with_blank_date_cell(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    store = FileGridStore(StoreSettings(root_dir=str(tmp_path), workbook="book", fsync=False))
    store.create_sheet("Events", ["id", "on"], [["e1", date(2023, 1, 1)], ["e2"]])

    code = _run(tmp_path, "show", "Events")

    out = capsys.readouterr().out
    assert code == 0
    assert "2023-01-01" in out
    assert "e2" in out
