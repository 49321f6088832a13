"""Exceptions raised by boxtable."""

from __future__ import annotations


class TableError(Exception):
    """Base class for all table errors."""


class RowLengthMismatch(TableError, ValueError):
    """A row's arity does not match the table's header."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"row has {actual} cells, table has {expected} columns")


class ColumnIndexError(TableError, IndexError):
    """A column insertion index falls outside the row."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"column index {index} out of range for row of length {length}")


__all__ = ["ColumnIndexError", "RowLengthMismatch", "TableError"]
