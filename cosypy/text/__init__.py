"""Text offsets, ranges and line/column mapping."""

from cosypy.text.text import (
    LineColumn,
    LineIndex,
    TextRange,
    TextSize,
    slice_text_range,
)

__all__ = [
    "LineColumn",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
