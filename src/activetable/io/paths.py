"""
Path and layout helpers for the file backend.

Layout
- <root_dir>/<workbook>/<sheet_name>.json

Notes
- Sheet names map verbatim onto file names, so any Unicode name works, but names that
  would escape the workbook directory ("", ".", "..", anything with a path separator)
  are rejected.
"""

from __future__ import annotations

import os
from typing import Final

from .config import StoreSettings

SHEET_SUFFIX: Final[str] = ".json"


def workbook_dir(settings: StoreSettings) -> str:
    return os.path.join(settings.root_dir, settings.workbook)


def is_valid_sheet_name(name: str) -> bool:
    """
    Check whether a sheet name can be stored as a file in the workbook directory.

    >>> is_valid_sheet_name("Users"), is_valid_sheet_name("ユーザー"), is_valid_sheet_name("../x")
    (True, True, False)
    """
    if not name or name in {".", ".."}:
        return False
    seps = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    return not any(sep in name for sep in seps) and "\x00" not in name


def sheet_path(settings: StoreSettings, name: str) -> str:
    return os.path.join(workbook_dir(settings), name + SHEET_SUFFIX)


def sheet_name_from_file(filename: str) -> str | None:
    """Inverse of sheet_path() for a bare file name; None for non-sheet files."""
    if not filename.endswith(SHEET_SUFFIX) or ".tmp-" in filename:
        return None
    return filename[: -len(SHEET_SUFFIX)]
