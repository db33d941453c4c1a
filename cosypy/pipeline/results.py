"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from cosypy.pipeline.result import CosyParseResult
from cosypy.schema import ValidationReport
from cosypy.value import Document


@dataclass(frozen=True, slots=True)
class LoadRunResult:
    """Fully processed document plus its validation report, if a schema was given."""

    parse: CosyParseResult
    document: Document
    report: ValidationReport | None = None


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: CosyParseResult
    formatted_text: str
    changed: bool


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of loading and validating a document against a schema."""

    document: Document
    report: ValidationReport
    is_valid: bool
