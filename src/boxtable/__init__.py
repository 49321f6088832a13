"""boxtable - render rows of text as aligned, box-drawn tables.

Build a :class:`Table` from headings, append rows, then call
:meth:`Table.render` to get the grid as a string.
"""

from __future__ import annotations

from .errors import ColumnIndexError, RowLengthMismatch, TableError
from .glyphs import ASCII, UNICODE, GlyphSet
from .options import Alignment, Padding, RenderOptions
from .row import Row
from .table import AsciiTable, Table, align_cell, column_spacings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Tables
    "Table",
    "AsciiTable",
    "Row",
    "align_cell",
    "column_spacings",
    # Options
    "Alignment",
    "Padding",
    "RenderOptions",
    # Glyphs
    "GlyphSet",
    "UNICODE",
    "ASCII",
    # Errors
    "TableError",
    "RowLengthMismatch",
    "ColumnIndexError",
]
