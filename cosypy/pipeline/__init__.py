"""Shared parse carrier and pipeline entrypoints."""

from cosypy.pipeline.entrypoints import run_check, run_format, run_load
from cosypy.pipeline.result import CosyParseResult
from cosypy.pipeline.results import CheckRunResult, FormatRunResult, LoadRunResult

__all__ = [
    "CheckRunResult",
    "CosyParseResult",
    "FormatRunResult",
    "LoadRunResult",
    "run_check",
    "run_format",
    "run_load",
]
