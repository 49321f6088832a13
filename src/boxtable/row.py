"""Fixed-arity rows of text cells."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from boxtable.errors import ColumnIndexError


class Row:
    """An immutable, ordered sequence of text cells.

    Cells are converted to ``str`` and copied into a tuple owned by the row,
    so later changes to the caller's sequence never leak into the table.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Any]) -> None:
        if isinstance(cells, str):
            raise TypeError("row cells must be a sequence of values, not a single string")
        self._cells: tuple[str, ...] = tuple(str(cell) for cell in cells)

    @property
    def cells(self) -> tuple[str, ...]:
        return self._cells

    @property
    def longest_length(self) -> int:
        """Length of the longest cell, 0 for an empty row."""
        return max((len(cell) for cell in self._cells), default=0)

    def cell_length(self, i: int) -> int:
        return len(self._cells[i])

    def insert_column(self, text: Any, index: int) -> Row:
        """Return a new row with ``text`` inserted before position ``index``.

        ``index`` may equal ``len(self)`` to append. Anything outside
        ``[0, len(self)]`` raises :class:`ColumnIndexError`.
        """
        if not 0 <= index <= len(self._cells):
            raise ColumnIndexError(index, len(self._cells))
        cells = list(self._cells)
        cells.insert(index, str(text))
        return Row(cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, i: int) -> str:
        return self._cells[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Row({list(self._cells)!r})"


__all__ = ["Row"]
