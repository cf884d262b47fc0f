"""
Scalar value semantics for cell values: emptiness, equality, ordering, and hashing keys.

Responsibilities
- Decide when two cell values are "the same" for where()/find() and the uniqueness check.
- Decide how two cell values order for after()/before().

Families
- number: int, float, Decimal, and bool (a bool orders as 0/1 but only equals another bool).
- text: str, compared lexically.
- temporal: date and datetime, compared by instant. A bare date is midnight of that day;
  naive values are wall-clock times read as UTC.

Empty values
- None and "" are empty. Against a number an empty value orders as 0; against text it
  orders as "". Any other cross-family pair is incomparable, and compare_values returns None.

Notes
- Zero-IO, stdlib-only.

Examples
    >>> from datetime import date, datetime
    >>> from activetable.core.values import compare_values, values_equal
    >>> values_equal(datetime(2023, 1, 1), datetime(2023, 1, 1))
    True
    >>> values_equal(date(2023, 1, 1), datetime(2023, 1, 1, 0, 0))
    True
    >>> values_equal(True, 1)
    False
    >>> compare_values(30, 28)
    1
    >>> compare_values("", -1)
    1
    >>> compare_values("abc", 3) is None
    True
"""

from __future__ import annotations

from collections.abc import Hashable
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from typing import Any, Literal

from .constants import EMPTY

_EPOCH = datetime(1970, 1, 1)
_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=UTC)

__all__ = [
    "is_empty",
    "is_temporal",
    "instant",
    "values_equal",
    "compare_values",
    "value_key",
]

Family = Literal["number", "text", "temporal"]


def is_empty(value: Any) -> bool:
    """Return True for None and the empty string."""
    return value is None or (isinstance(value, str) and value == EMPTY)


def is_temporal(value: Any) -> bool:
    return isinstance(value, date)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal))


def instant(value: date) -> timedelta:
    """
    Map a date or datetime onto its offset from the Unix epoch.

    Args:
        value (date): Temporal cell value.

    Returns:
        timedelta: Exact offset from 1970-01-01. Aware values are measured against the UTC
        epoch; naive values (and bare dates, read as midnight) against the naive epoch, so
        a naive wall-clock time is treated as UTC. Defined for the full date range,
        including date.min and datetime.max.
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.utcoffset() is not None:
        return value - _EPOCH_UTC
    return value.replace(tzinfo=None) - _EPOCH


def _family(value: Any) -> Family | None:
    if is_temporal(value):
        return "temporal"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "text"
    return None


def values_equal(left: Any, right: Any) -> bool:
    """
    Strict by-value equality between two cell values.

    Args:
        left (Any): Cell value.
        right (Any): Expected value.

    Returns:
        bool: True when both values belong to the same family and are equal. Temporal
        values are equal when they denote the same instant, so two distinct datetime
        objects for the same moment compare equal.
    """
    if is_temporal(left) and is_temporal(right):
        return instant(left) == instant(right)
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    lf, rf = _family(left), _family(right)
    if lf != rf:
        return False
    return bool(left == right)


def compare_values(left: Any, right: Any) -> int | None:
    """
    Three-way comparison under the natural ordering of the values' family.

    Args:
        left (Any): Cell value.
        right (Any): Threshold value.

    Returns:
        int | None: -1, 0 or 1 when the values are comparable; None otherwise.
    """
    if is_empty(left) and _family(right) == "number":
        left = 0
    elif is_empty(left) and _family(right) == "text":
        left = EMPTY
    if is_empty(right) and _family(left) == "number":
        right = 0
    elif is_empty(right) and _family(left) == "text":
        right = EMPTY

    lf, rf = _family(left), _family(right)
    if lf is None or lf != rf:
        return None
    if lf == "temporal":
        left, right = instant(left), instant(right)
    return int(left > right) - int(left < right)


def value_key(value: Any) -> Hashable:
    """
    Hashable key with the same notion of identity as values_equal.

    Used to count distinct primary keys in a single pass.
    """
    if is_temporal(value):
        return ("temporal", instant(value))
    if isinstance(value, bool):
        return ("bool", value)
    if _is_number(value):
        return ("number", value)
    if isinstance(value, str):
        return ("text", value)
    if value is None:
        return ("none", None)
    return ("other", value)
