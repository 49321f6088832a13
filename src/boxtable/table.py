"""Table layout engine: column widths, alignment and border drawing."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Iterable, Iterator, Mapping, Sequence

from rich.console import Console, ConsoleOptions
from rich.measure import Measurement
from rich.text import Text

from boxtable.errors import RowLengthMismatch
from boxtable.glyphs import ASCII, UNICODE, GlyphSet
from boxtable.options import Alignment, Padding, RenderOptions
from boxtable.row import Row

logger = logging.getLogger(__name__)


def column_spacings(header: Row, rows: Sequence[Row], even: bool = False) -> list[int]:
    """Compute the render width of every column.

    Each width is the longest cell in that column, header included. With
    ``even`` every column takes the widest column's width.
    """
    spacings = []
    for col in range(len(header)):
        width = header.cell_length(col)
        for row in rows:
            width = max(width, row.cell_length(col))
        spacings.append(width)

    if even:
        widest = max(spacings, default=0)
        spacings = [widest] * len(spacings)
    return spacings


def align_cell(text: str, width: int, alignment: Alignment) -> str:
    """Pad ``text`` with spaces to ``width`` according to ``alignment``."""
    diff = width - len(text)
    if alignment is Alignment.LEFT:
        return text + " " * diff
    if alignment is Alignment.RIGHT:
        return " " * diff + text
    # Odd leftover space goes before the content.
    mid = diff // 2
    return " " * (diff - mid) + text + " " * mid


class Table:
    """A header row plus data rows of matching arity.

    Rendering uses the class-level :attr:`glyphs`; subclass and override it
    to draw with another character set (see :class:`AsciiTable`).
    """

    glyphs: ClassVar[GlyphSet] = UNICODE

    def __init__(self, headings: Iterable[Any]) -> None:
        self._headings = Row(headings)
        self._rows: list[Row] = []

    @property
    def headings(self) -> Row:
        return self._headings

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._headings)

    def __len__(self) -> int:
        return len(self._rows)

    def add_row(self, cells: Sequence[Any]) -> None:
        """Append a row, rejecting it when its arity differs from the header."""
        if isinstance(cells, str):
            raise TypeError("row cells must be a sequence of values, not a single string")
        cells = list(cells)
        if len(cells) != len(self._headings):
            logger.debug(
                "Rejected row with %d cells for %d-column table",
                len(cells),
                len(self._headings),
            )
            raise RowLengthMismatch(len(self._headings), len(cells))
        self._rows.append(Row(cells))

    def add_rows(self, rows: Iterable[Sequence[Any]]) -> None:
        """Append rows in order, stopping at the first rejected one."""
        for cells in rows:
            self.add_row(cells)

    def render(
        self,
        options: RenderOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> str:
        """Render the table to a string of newline-terminated lines.

        Args:
            options: Render options as a model or a plain mapping of fields;
                defaults are used when omitted.
            **overrides: Individual :class:`RenderOptions` fields, applied on
                top of ``options``.

        Returns:
            The full grid as one string.
        """
        opts = _resolve_options(options, overrides)
        header, rows = self._render_view(opts)

        spacings = column_spacings(header, rows, even=opts.even)
        linelength = 1 + len(header) + sum(spacings)
        logger.debug(
            "Rendering %d columns x %d rows with spacings %s",
            len(header),
            len(rows),
            spacings,
        )

        glyphs = self.glyphs
        padding = opts.padding
        delimiter = glyphs.vertical if opts.outline else ""
        out: list[str] = []

        if opts.outline:
            _write_border(
                out,
                spacings,
                linelength,
                padding,
                glyphs.top_left,
                glyphs.horizontal,
                glyphs.top_right,
                glyphs.top_separator,
            )

        _write_row(out, header, spacings, delimiter, opts.header_alignment, padding)

        if opts.rule:
            if opts.outline:
                ends = (glyphs.mid_left, glyphs.mid_right, glyphs.mid_separator)
            else:
                # Unboxed rows have no delimiters, so neither does the rule.
                ends = ("", "", "")
            _write_border(
                out,
                spacings,
                linelength,
                padding,
                ends[0],
                glyphs.horizontal,
                ends[1],
                ends[2],
            )

        for row in rows:
            _write_row(out, row, spacings, delimiter, opts.alignment, padding)

        if opts.outline:
            _write_border(
                out,
                spacings,
                linelength,
                padding,
                glyphs.bottom_left,
                glyphs.horizontal,
                glyphs.bottom_right,
                glyphs.bottom_separator,
            )

        return "".join(out)

    def _render_view(self, opts: RenderOptions) -> tuple[Row, list[Row]]:
        """Header and rows as they should be drawn, leaving stored rows intact."""
        if not opts.index:
            return self._headings, self._rows
        header = self._headings.insert_column(opts.index_label, 0)
        rows = [row.insert_column(str(i), 0) for i, row in enumerate(self._rows, start=1)]
        return header, rows

    def __str__(self) -> str:
        return self.render()

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> Iterator[Text]:
        # Lines wider than the console are cropped, never wrapped.
        yield Text(self.render().rstrip("\n"), no_wrap=True)

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        width = max((len(line) for line in self.render().splitlines()), default=0)
        return Measurement(width, width)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(columns={self.column_count}, rows={len(self._rows)})"
        )


class AsciiTable(Table):
    """Table drawn with plain ASCII ``+``, ``-`` and ``|`` borders."""

    glyphs: ClassVar[GlyphSet] = ASCII


def _resolve_options(
    options: RenderOptions | Mapping[str, Any] | None,
    overrides: dict[str, Any],
) -> RenderOptions:
    if options is None:
        return RenderOptions(**overrides)
    if not isinstance(options, RenderOptions):
        return RenderOptions.model_validate({**dict(options), **overrides})
    if overrides:
        return RenderOptions.model_validate({**options.model_dump(), **overrides})
    return options


def _write_row(
    out: list[str],
    row: Row,
    spacings: Sequence[int],
    delimiter: str,
    alignment: Alignment,
    padding: Padding,
) -> None:
    out.append(delimiter)
    for spacing, cell in zip(spacings, row):
        out.append(" " * padding.left)
        out.append(align_cell(cell, spacing, alignment))
        out.append(" " * padding.right)
        out.append(delimiter)
    out.append("\n")


def _write_border(
    out: list[str],
    spacings: Sequence[int],
    linelength: int,
    padding: Padding,
    left: str,
    fill: str,
    right: str,
    separator: str,
) -> None:
    out.append(left)
    consumed = 0
    for spacing in spacings:
        out.append(fill * (spacing + padding.left + padding.right))
        consumed += spacing + 1
        if consumed == linelength - 1:
            out.append(right)
            break
        out.append(separator)
    out.append("\n")


__all__ = ["AsciiTable", "Table", "align_cell", "column_spacings"]
