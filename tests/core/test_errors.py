from __future__ import annotations

import pytest

from activetable.core.errors import (
    ActiveTableError,
    AmbiguousKeyError,
    DuplicateKeyError,
    NotFoundError,
    RowNotFoundError,
    SheetNotFoundError,
    StateError,
)
from activetable.io.errors import CellRangeError, StoreError


def test_error_messages_name_the_subject() -> None:
    assert str(SheetNotFoundError("Users")) == 'Sheet with name "Users" not found'
    assert str(RowNotFoundError("ghost")) == 'Row with id "ghost" not found'
    assert str(AmbiguousKeyError("dup", 2)) == 'Multiple rows with id "dup" found'
    err = DuplicateKeyError("Users")
    assert err.sheet_name == "Users"
    assert "Users" in str(err)


@pytest.mark.parametrize(
    "exc, bases",
    [
        (SheetNotFoundError("s"), (NotFoundError, LookupError)),
        (RowNotFoundError("k"), (NotFoundError, LookupError)),
        (DuplicateKeyError("s"), (ValueError,)),
        (AmbiguousKeyError("k", 2), (LookupError,)),
        (StateError("x"), (RuntimeError,)),
        (CellRangeError("x"), (StoreError, IndexError)),
    ],
)
def test_hierarchy(exc: Exception, bases: tuple[type, ...]) -> None:
    assert isinstance(exc, ActiveTableError)
    for base in bases:
        assert isinstance(exc, base)
