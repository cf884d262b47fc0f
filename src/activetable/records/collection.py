"""
RowCollection: an ordered, read-only sequence of Rows with query and batch helpers.

Query semantics
- where(criteria): every criterion equal (by value; temporal values by instant).
- after(criteria): every criterion strictly greater under the values' natural ordering.
- before(criteria): every criterion non-empty (not None, not "") AND strictly less.

after() has no empty-value guard, so an empty cell still takes part in the comparison
(it orders as 0 against numbers, "" against text); before() always drops empty cells.
Both behaviors are kept as-is because callers observe them.

A row without the criterion's field never matches. Filtering keeps relative order and
returns a new collection; empty criteria match every row.

Batch semantics
- update_all() updates rows one at a time in collection order. There is no
  transaction: the first failure propagates and later rows are left untouched.
- delete_all() deletes in reverse collection order. Deleting a sheet row shifts every
  later row up, so going from the bottom keeps each remaining position valid.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any, overload

import polars as pl

from activetable.core.typing import Criteria, Fields
from activetable.core.values import compare_values, is_empty, values_equal

from .row import Row

Predicate = Callable[[Any, Any], bool]


def _greater(value: Any, expected: Any) -> bool:
    c = compare_values(value, expected)
    return c is not None and c > 0


def _less_non_empty(value: Any, expected: Any) -> bool:
    if is_empty(value):
        return False
    c = compare_values(value, expected)
    return c is not None and c < 0


def _matches(row: Row, criteria: Criteria, test: Predicate) -> bool:
    for key, expected in criteria.items():
        if key not in row:
            return False
        if not test(row[key], expected):
            return False
    return True


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, datetime):
        return "datetime" if value.utcoffset() is None else "datetime_utc"
    if isinstance(value, date):
        return "date"
    if isinstance(value, str):
        return "text"
    return "other"


def _column(name: str, values: list[Any]) -> pl.Series:
    """Build one frame column from raw cell values."""
    cells = [None if is_empty(v) else v for v in values]
    kinds = {_kind(v) for v in cells if v is not None}
    if len(kinds) > 1 or kinds == {"other"}:
        return pl.Series(name, [None if v is None else str(v) for v in cells], dtype=pl.String)
    if kinds == {"number"}:
        nums = [float(v) if isinstance(v, Decimal) else v for v in cells]
        return pl.Series(name, nums, strict=False)
    if kinds == {"datetime_utc"}:
        return pl.Series(name, [None if v is None else v.astimezone(UTC) for v in cells])
    return pl.Series(name, cells)


class RowCollection(Sequence[Row]):
    """
    Immutable ordered wrapper over Rows.

    Args:
        rows (Iterable[Row]): Members, in sheet order.

    Notes:
        Members are shared, not copied: mutating a Row obtained from a filtered
        collection mutates the same Row seen by the collection it came from.
    """

    def __init__(self, rows: Iterable[Row] = ()) -> None:
        self._rows: tuple[Row, ...] = tuple(rows)

    @overload
    def __getitem__(self, index: int) -> Row: ...

    @overload
    def __getitem__(self, index: slice) -> RowCollection: ...

    def __getitem__(self, index: int | slice) -> Row | RowCollection:
        if isinstance(index, slice):
            return RowCollection(self._rows[index])
        return self._rows[index]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __repr__(self) -> str:
        return f"RowCollection({len(self._rows)} rows)"

    def _filter(self, criteria: Criteria, test: Predicate) -> RowCollection:
        return RowCollection(r for r in self._rows if _matches(r, criteria, test))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def where(self, criteria: Criteria) -> RowCollection:
        return self._filter(criteria, values_equal)

    def after(self, criteria: Criteria) -> RowCollection:
        return self._filter(criteria, _greater)

    def before(self, criteria: Criteria) -> RowCollection:
        return self._filter(criteria, _less_non_empty)

    def first(self) -> Row | None:
        return self._rows[0] if self._rows else None

    # ------------------------------------------------------------------
    # Batch mutation
    # ------------------------------------------------------------------
    def update_all(self, fields: Fields) -> None:
        for row in self._rows:
            row.update(fields)

    def delete_all(self) -> None:
        for row in reversed(self._rows):
            row.delete()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def to_dicts(self) -> list[dict[str, Any]]:
        return [row.fields for row in self._rows]

    def to_frame(self) -> pl.DataFrame:
        """
        Materialize the rows as a Polars DataFrame.

        Returns:
            pl.DataFrame: One row per member. Columns appear in first-seen field order, and
            a field missing from a row reads as null.

        Notes:
            - Empty cells (None and "") become null, so a blank in a date or number column
              does not change its dtype.
            - A column whose non-empty values share one kind (bool, number, text, date,
              naive datetime, aware datetime) keeps the matching dtype. Aware datetimes are
              normalized to UTC, and ints mixed with floats widen to Float64.
            - A column mixing kinds (e.g. True and 2) is rendered as text, never coerced.
        """
        if not self._rows:
            return pl.DataFrame()
        names: dict[str, None] = {}
        for row in self._rows:
            names.update(dict.fromkeys(row))
        columns = [_column(name, [row.get(name) for row in self._rows]) for name in names]
        return pl.DataFrame(columns)
