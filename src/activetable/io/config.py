"""
Configuration for the activetable.io module.

Defines StoreSettings, a frozen dataclass carrying runtime configuration for the
backing store a Table is opened against.

Backends
- "file": one JSON document per sheet under <root_dir>/<workbook>/ (default).
- "memory": an empty in-process MemoryGridStore (tests, scratch scripts).
- "sheets": a Google Sheets spreadsheet via gspread (requires the "sheets" extra).

Precedence
- env (ACTIVETABLE_*) > TOML (./activetable.toml or [tool.activetable.store] in
  ./pyproject.toml) > defaults.
- Malformed values are ignored and the lower-precedence value is kept.

Import DAG discipline
- Depends only on stdlib. Does not import stores or records.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

Backend = Literal["file", "memory", "sheets"]
ValueInputOption = Literal["USER_ENTERED", "RAW"]

_BACKENDS: frozenset[str] = frozenset({"file", "memory", "sheets"})
_VALUE_INPUT_OPTIONS: frozenset[str] = frozenset({"USER_ENTERED", "RAW"})


@dataclass(frozen=True)
class StoreSettings:
    """
    Runtime settings for the activetable.io layer.

    Attributes:
        backend (Literal["file","memory","sheets"]): Which GridStore open_store() builds.
        root_dir (str): Root directory for the file backend.
        workbook (str): Workbook directory name under root_dir (file backend).
        fsync (bool): fsync temp files before the atomic rename (file backend).
        spreadsheet_key (str | None): Google Sheets spreadsheet key (sheets backend).
        credentials_file (str | None): Service account JSON path (sheets backend).
        value_input_option (Literal["USER_ENTERED","RAW"]): How Google Sheets parses
            written values (sheets backend).

    Examples:
        >>> from activetable.io import StoreSettings
        >>> StoreSettings(root_dir="out", workbook="crm")  # doctest: +ELLIPSIS
        StoreSettings(...)
    """

    backend: Backend = "file"
    root_dir: str = "data"
    workbook: str = "workbook"
    fsync: bool = True
    spreadsheet_key: str | None = None
    credentials_file: str | None = None
    value_input_option: ValueInputOption = "USER_ENTERED"

    @classmethod
    def _apply_mapping(cls, base: StoreSettings, cfg: dict[str, Any] | None) -> StoreSettings:
        """Apply a loose config mapping onto StoreSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        if "backend" in cfg and isinstance(cfg["backend"], str):
            backend = cfg["backend"].strip().lower()
            if backend in _BACKENDS:
                s = replace(s, backend=backend)  # type: ignore[arg-type]

        for key in ("root_dir", "workbook", "spreadsheet_key", "credentials_file"):
            if key in cfg and isinstance(cfg[key], str) and cfg[key].strip():
                s = replace(s, **{key: cfg[key].strip()})

        if "fsync" in cfg:
            s = replace(s, fsync=_bool(cfg["fsync"]))

        if "value_input_option" in cfg and isinstance(cfg["value_input_option"], str):
            opt = cfg["value_input_option"].strip().upper()
            if opt in _VALUE_INPUT_OPTIONS:
                s = replace(s, value_input_option=opt)  # type: ignore[arg-type]

        return s

    @classmethod
    def from_env(
        cls, base: StoreSettings | None = None, prefix: str = "ACTIVETABLE_"
    ) -> StoreSettings:
        """
        Build StoreSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - ACTIVETABLE_BACKEND ("file" | "memory" | "sheets")
            - ACTIVETABLE_ROOT_DIR
            - ACTIVETABLE_WORKBOOK
            - ACTIVETABLE_FSYNC (1/0/true/false/yes/no/on/off)
            - ACTIVETABLE_SPREADSHEET_KEY
            - ACTIVETABLE_CREDENTIALS_FILE
            - ACTIVETABLE_VALUE_INPUT_OPTION ("USER_ENTERED" | "RAW")
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in (
            "backend",
            "root_dir",
            "workbook",
            "fsync",
            "spreadsheet_key",
            "credentials_file",
            "value_input_option",
        ):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> StoreSettings:
        """
        Build StoreSettings from a TOML file.

        Search order when `path` is None:
            1) ./activetable.toml (with either a top-level [store] table or direct keys)
            2) ./pyproject.toml under [tool.activetable.store]

        Returns defaults if no file is present or none of them parses.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "activetable.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("activetable", {}).get("store") if isinstance(tool, dict) else None
            elif isinstance(data.get("store"), dict):
                cfg = data["store"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> StoreSettings:
        """
        Load StoreSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (activetable.toml, pyproject.toml).

        Returns:
            StoreSettings
        """
        s = cls.from_toml(path)
        return cls.from_env(base=s)
