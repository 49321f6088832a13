"""Shared fixtures for boxtable tests."""

from __future__ import annotations

import pathlib
import sys

import pytest

# Ensure src directory is in path
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from boxtable import AsciiTable, Table  # noqa: E402  # isort: skip


def fill(table: Table) -> Table:
    """Populate a two-column fruit table."""
    table.add_row(["apple", "3"])
    table.add_row(["kiwi", "12"])
    return table


def border_widths(line: str, left: str, separator: str, right: str) -> list[int]:
    """Column widths drawn in a border line."""
    inner = line[len(left) : len(line) - len(right)]
    return [len(part) for part in inner.split(separator)]


@pytest.fixture
def fruit_table() -> Table:
    return fill(Table(["Name", "Qty"]))


@pytest.fixture
def ascii_fruit_table() -> AsciiTable:
    table = AsciiTable(["Name", "Qty"])
    fill(table)
    return table


@pytest.fixture
def headings_table() -> Table:
    table = Table(["Heading 1", "Head 2", "Heading 3"])
    for _ in range(3):
        table.add_row(["a", "b", "c"])
    return table
