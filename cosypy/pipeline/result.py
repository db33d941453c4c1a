"""Parse carrier shared by the pipeline entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

from cosypy.diagnostics import has_errors
from cosypy.errors import LexError, ParseError, SourceError
from cosypy.parser.cosy import parse
from cosypy.parser.options import ParserOptions
from cosypy.text import LineIndex
from cosypy.value import Document

if TYPE_CHECKING:
    from cosypy.diagnostics import Diagnostic


@dataclass(slots=True)
class CosyParseResult:
    """One parse of one text, for parse-once/consume-many workflows.

    A malformed text does not raise here: the error is kept and surfaces
    through `diagnostics`, or is re-raised by `document()`.
    """

    source_text: str
    source: str
    options: ParserOptions
    parsed: Document | None
    error: SourceError | None = None
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)

    @staticmethod
    def from_text(text: str, options: ParserOptions, *, source: str = "<memory>") -> CosyParseResult:
        try:
            parsed = parse(text, options, source=source)
        except (LexError, ParseError) as exc:
            return CosyParseResult(text, source, options, None, exc)
        return CosyParseResult(text, source, options, parsed)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.error is None:
            return []
        return [self.error.diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def document(self) -> Document:
        if self.error is not None:
            raise self.error
        return cast(Document, self.parsed)

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self.source_text)
        return self._line_index
