from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Create a TextSize from a string's length."""
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer."""
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        """Get the start offset as a TextSize."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """Get the end offset as a TextSize."""
        return TextSize(self._end)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line/column position."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class LineIndex:
    """Maps text offsets to 1-based line/column positions.

    Only `\\n` starts a new line; a `\\r` before it counts as a column.
    """

    def __init__(self, text: str) -> None:
        self._line_starts = [0]
        for index, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(index + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_column(self, offset: TextSize | int) -> LineColumn:
        value = offset.value if isinstance(offset, TextSize) else offset
        line = bisect_right(self._line_starts, value) - 1
        return LineColumn(line=line + 1, column=value - self._line_starts[line] + 1)
