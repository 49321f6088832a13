"""Border glyph sets used to draw table outlines."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GlyphSet(BaseModel):
    """Characters used for corners, separators and fills.

    Every glyph must be a single character: column spacing assumes each
    border glyph occupies exactly one cell of output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    top_left: str = Field(..., description="Top-left corner")
    top_right: str = Field(..., description="Top-right corner")
    bottom_left: str = Field(..., description="Bottom-left corner")
    bottom_right: str = Field(..., description="Bottom-right corner")
    horizontal: str = Field(..., description="Horizontal fill")
    vertical: str = Field(..., description="Vertical cell delimiter")
    top_separator: str = Field(..., description="Column separator in the top border")
    mid_separator: str = Field(..., description="Column separator in the header rule")
    bottom_separator: str = Field(..., description="Column separator in the bottom border")
    mid_left: str = Field(..., description="Left end of the header rule")
    mid_right: str = Field(..., description="Right end of the header rule")

    @field_validator(
        "top_left",
        "top_right",
        "bottom_left",
        "bottom_right",
        "horizontal",
        "vertical",
        "top_separator",
        "mid_separator",
        "bottom_separator",
        "mid_left",
        "mid_right",
    )
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("glyph must be exactly one character")
        return value


UNICODE = GlyphSet(
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    horizontal="─",
    vertical="│",
    top_separator="┬",
    mid_separator="┼",
    bottom_separator="┴",
    mid_left="├",
    mid_right="┤",
)

ASCII = GlyphSet(
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    horizontal="-",
    vertical="|",
    top_separator="+",
    mid_separator="+",
    bottom_separator="+",
    mid_left="+",
    mid_right="+",
)


__all__ = ["ASCII", "GlyphSet", "UNICODE"]
