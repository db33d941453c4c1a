"""COSY configuration language: parse, resolve, interpolate, validate and serialize."""

from cosypy.errors import (
    CosyError,
    CycleError,
    DirectiveParseError,
    InterpolationError,
    InvalidDirectiveError,
    InvalidTargetError,
    LexError,
    LoadFailedError,
    ParseError,
    ResolveDepthError,
    ResolveError,
    SchemaError,
)
from cosypy.format import SerializeOptions, serialize
from cosypy.interpolate import InterpolationOptions, MissingVarPolicy, interpolate
from cosypy.lexer import tokenize
from cosypy.parser import ParserOptions, parse, parse_result
from cosypy.pipeline import run_check, run_format, run_load
from cosypy.resolve import ResolveOptions, deep_merge, load_and_merge, resolve
from cosypy.schema import ValidationReport, compile_schema, validate
from cosypy.value import Document, from_python, to_python

__all__ = [
    "CosyError",
    "CycleError",
    "DirectiveParseError",
    "Document",
    "InterpolationError",
    "InterpolationOptions",
    "InvalidDirectiveError",
    "InvalidTargetError",
    "LexError",
    "LoadFailedError",
    "MissingVarPolicy",
    "ParseError",
    "ParserOptions",
    "ResolveDepthError",
    "ResolveError",
    "ResolveOptions",
    "SchemaError",
    "SerializeOptions",
    "ValidationReport",
    "compile_schema",
    "deep_merge",
    "from_python",
    "interpolate",
    "load_and_merge",
    "parse",
    "parse_result",
    "resolve",
    "run_check",
    "run_format",
    "run_load",
    "serialize",
    "to_python",
    "tokenize",
]
