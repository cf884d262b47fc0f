"""
Filesystem helpers for activetable.io (file backend).

Responsibilities
- Directory creation, existence checks, and the atomic write path used for sheet
  documents: tmp write → fsync → atomic rename.

Notes
- Atomicity via os.replace is guaranteed only when src and dst reside on the same filesystem;
  temp files are always created next to their destination.
- All helpers are synchronous; callers decide on locking if/when needed.
"""

from __future__ import annotations

import os
import uuid

from .errors import StoreWriteError


def exists(path: str) -> bool:
    return os.path.exists(path)


def makedirs(path: str, exist_ok: bool = True) -> None:
    """Create directories recursively (thin wrapper around os.makedirs)."""
    os.makedirs(path, exist_ok=exist_ok)


def tmp_path_for(path: str) -> str:
    """Return a unique temp path in the same directory as `path`."""
    return f"{path}.tmp-{uuid.uuid4().hex}"


def write_text_atomic(path: str, text: str, *, fsync: bool = True) -> None:
    """
    Replace the file at `path` with `text` (UTF-8) atomically.

    Args:
        path (str): Final destination path.
        text (str): Full file contents.
        fsync (bool): fsync the temp file before renaming it into place.

    Raises:
        StoreWriteError: If any step fails. The temp file is removed on a best-effort basis.
    """
    tmp = tmp_path_for(path)
    try:
        with open(tmp, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.flush()
            if fsync:
                os.fsync(fh.fileno())
        os.replace(tmp, path)
    except OSError as exc:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise StoreWriteError(f"failed to write {path!r}: {exc}") from exc


def listdir(path: str) -> list[str]:
    """List entry names of a directory; [] if it does not exist."""
    try:
        return sorted(os.listdir(path))
    except FileNotFoundError:
        return []
