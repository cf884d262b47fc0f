"""
JSON encoding of cell values for sheet documents.

JSON has no temporal type, so dates are written as single-key tagged objects:

- datetime → {"$datetime": "2023-01-01T09:30:00+00:00"}
- date     → {"$date": "2023-01-01"}

Everything else must be a JSON scalar (str, int, float, bool, None). Decimal is
written as float.

Examples:
    >>> from datetime import date
    >>> encode_cell(date(2023, 1, 2))
    {'$date': '2023-01-02'}
    >>> decode_cell({'$date': '2023-01-02'})
    datetime.date(2023, 1, 2)
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any

__all__ = [
    "encode_cell",
    "decode_cell",
    "json_dumps",
]

_DATE_TAG = "$date"
_DATETIME_TAG = "$datetime"


def encode_cell(value: Any) -> Any:
    """
    Encode one cell value for JSON.

    Raises:
        TypeError: If the value is not a supported scalar.
    """
    if isinstance(value, datetime):
        return {_DATETIME_TAG: value.isoformat()}
    if isinstance(value, date):
        return {_DATE_TAG: value.isoformat()}
    if isinstance(value, Decimal):
        return float(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"unsupported cell value of type {type(value).__name__}: {value!r}")


def decode_cell(value: Any) -> Any:
    """Decode one JSON cell, turning tagged objects back into date/datetime."""
    if isinstance(value, dict) and len(value) == 1:
        if _DATETIME_TAG in value:
            return datetime.fromisoformat(value[_DATETIME_TAG])
        if _DATE_TAG in value:
            return date.fromisoformat(value[_DATE_TAG])
    return value


def json_dumps(obj: Any) -> str:
    """Serialize with sorted keys and literal (non-escaped) Unicode."""
    return json.dumps(obj, sort_keys=True, ensure_ascii=False, indent=1)
