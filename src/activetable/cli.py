"""
Command line for inspecting and editing a sheet.

Commands
- show SHEET [--where COL=VAL ...] [--after COL=VAL ...] [--before COL=VAL ...] [--limit N]
- find SHEET ID
- create SHEET COL=VAL ...
- delete SHEET ID

Store options (--backend, --root-dir, --workbook) override StoreSettings.load(). A .env
file in the working directory is loaded first unless --no-env is given, so
ACTIVETABLE_* variables can live there.

Values in COL=VAL are parsed as JSON scalars when possible (30, 2.5, true, null) and
kept as text otherwise.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any

from dotenv import load_dotenv

from .core.errors import ActiveTableError
from .core.typing import Scalar
from .io.config import StoreSettings
from .records import RowCollection, Table, open_table


def _coerce(text: str) -> Scalar:
    try:
        value = json.loads(text)
    except ValueError:
        return text
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return text


def _parse_pairs(pairs: list[str] | None) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise SystemExit(f"expected COL=VAL, got {pair!r}")
        key, value = pair.split("=", 1)
        out[key] = _coerce(value)
    return out


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("sheet", help="Sheet name.")
    p.add_argument("--backend", choices=["file", "memory", "sheets"], default=None)
    p.add_argument("--root-dir", default=None, help="Root directory (file backend).")
    p.add_argument("--workbook", default=None, help="Workbook name (file backend).")
    p.add_argument(
        "--no-check-unique",
        action="store_true",
        help="Skip the first-column uniqueness check when opening the sheet.",
    )
    p.add_argument("--no-env", action="store_true", help="Do not load .env.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")


def _open(args: argparse.Namespace) -> Table:
    if not args.no_env:
        load_dotenv()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    settings = StoreSettings.load()
    overrides = {
        k: v
        for k, v in (
            ("backend", args.backend),
            ("root_dir", args.root_dir),
            ("workbook", args.workbook),
        )
        if v is not None
    }
    if overrides:
        settings = replace(settings, **overrides)
    return open_table(args.sheet, not args.no_check_unique, settings=settings)


def _print_rows(rows: RowCollection) -> None:
    print(rows.to_frame())


def _cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="activetable show", description="Print rows of a sheet.")
    _add_common_args(p)
    p.add_argument("--where", nargs="*", metavar="COL=VAL", help="Equality criteria.")
    p.add_argument("--after", nargs="*", metavar="COL=VAL", help="Strictly-greater criteria.")
    p.add_argument("--before", nargs="*", metavar="COL=VAL", help="Strictly-less criteria.")
    p.add_argument("--limit", type=int, default=None, help="Print at most N rows.")
    args = p.parse_args(argv)

    rows = _open(args).all()
    rows = rows.where(_parse_pairs(args.where))
    rows = rows.after(_parse_pairs(args.after))
    rows = rows.before(_parse_pairs(args.before))
    if args.limit is not None:
        rows = rows[: args.limit]
    _print_rows(rows)
    return 0


def _cmd_find(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="activetable find", description="Print one row by key.")
    _add_common_args(p)
    p.add_argument("key", help="First-column value.")
    args = p.parse_args(argv)

    row = _open(args).find(_coerce(args.key))
    _print_rows(RowCollection([row]))
    return 0


def _cmd_create(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="activetable create", description="Append one row.")
    _add_common_args(p)
    p.add_argument("fields", nargs="+", metavar="COL=VAL")
    args = p.parse_args(argv)

    _open(args).create(_parse_pairs(args.fields))
    print(f"[INFO] Appended row to {args.sheet}")
    return 0


def _cmd_delete(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="activetable delete", description="Delete one row by key.")
    _add_common_args(p)
    p.add_argument("key", help="First-column value.")
    args = p.parse_args(argv)

    _open(args).find(_coerce(args.key)).delete()
    print(f"[INFO] Deleted {args.key} from {args.sheet}")
    return 0


_COMMANDS = {
    "show": _cmd_show,
    "find": _cmd_find,
    "create": _cmd_create,
    "delete": _cmd_delete,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="activetable", description="Sheet-as-table utilities.")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        raise SystemExit(2)
    try:
        code = handler(rest)
    except ActiveTableError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
