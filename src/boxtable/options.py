"""Render configuration models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Alignment(str, Enum):
    """Horizontal placement of a cell within its column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Padding(BaseModel):
    """Spaces added on each side of every cell."""

    model_config = ConfigDict(frozen=True)

    left: int = Field(default=0, ge=0, description="Spaces before cell content")
    right: int = Field(default=0, ge=0, description="Spaces after cell content")

    @field_validator("left", "right", mode="before")
    @classmethod
    def reject_bool(cls, value: Any) -> Any:
        """Booleans are ints to pydantic; refuse them as space counts."""
        if isinstance(value, bool):
            raise ValueError("padding must be a non-negative integer, not a boolean")
        return value


class RenderOptions(BaseModel):
    """Options controlling how a table is rendered.

    ``outline`` draws the outer box (top and bottom borders plus side
    delimiters) and ``rule`` draws the line between header and body. The two
    are independent, so ``outline=False, rule=True`` gives an unboxed table
    with an underlined header.
    """

    model_config = ConfigDict(extra="forbid")

    alignment: Alignment = Field(default=Alignment.LEFT, description="Data row alignment")
    header_alignment: Alignment = Field(
        default=Alignment.CENTER,
        description="Header row alignment",
    )
    even: bool = Field(default=False, description="Render every column at the same width")
    outline: bool = Field(default=True, description="Draw the outer box")
    rule: bool = Field(default=True, description="Draw the header/body separator")
    index: bool = Field(default=False, description="Prepend a 1-based row number column")
    index_label: str = Field(default="", description="Header of the index column")
    padding: Padding = Field(default_factory=Padding, description="Cell padding")

    @field_validator("alignment", "header_alignment", mode="before")
    @classmethod
    def normalize_alignment(cls, value: Any) -> Any:
        """Accept alignment names in any case."""
        if isinstance(value, str) and not isinstance(value, Alignment):
            normalized = value.strip().lower()
            if normalized not in {item.value for item in Alignment}:
                raise ValueError("alignment must be left, center or right")
            return Alignment(normalized)
        return value

    @field_validator("padding", mode="before")
    @classmethod
    def parse_padding(cls, value: Any) -> Any:
        """Parse padding from an int, a (left, right) pair or a mapping."""
        if value is None:
            return Padding()
        if isinstance(value, bool):
            raise ValueError("padding must be an int, a pair or a mapping")
        if isinstance(value, int):
            return {"left": value, "right": value}
        if isinstance(value, (tuple, list)):
            if len(value) != 2:
                raise ValueError("padding pair must have exactly two values")
            return {"left": value[0], "right": value[1]}
        return value


__all__ = ["Alignment", "Padding", "RenderOptions"]
