"""Unified entrypoints that run parse/resolve/interpolate/validate/format over one parse lifecycle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cosypy.format import SerializeOptions, serialize
from cosypy.interpolate import Env, InterpolationOptions, interpolate
from cosypy.parser import ParserOptions, parse_result
from cosypy.parser import parse as parse_text
from cosypy.pipeline.result import CosyParseResult
from cosypy.pipeline.results import CheckRunResult, FormatRunResult, LoadRunResult
from cosypy.resolve import LoadFn, ResolveOptions, resolve
from cosypy.schema import compile_schema, validate

if TYPE_CHECKING:
    from cosypy.schema import SchemaNode
    from cosypy.value import Document, Value

logger = logging.getLogger(__name__)

SCHEMA_SOURCE = "<schema>"


def run_load(
    text: str,
    options: ParserOptions | None = None,
    *,
    source: str = "<memory>",
    parse: CosyParseResult | None = None,
    load_fn: LoadFn | None = None,
    resolve_options: ResolveOptions | None = None,
    env: Env | None = None,
    interpolation_options: InterpolationOptions | None = None,
    schema: SchemaNode | Document | Value | str | None = None,
) -> LoadRunResult:
    """Parse, then resolve (with `load_fn`), interpolate (with `env`) and validate (with `schema`).

    Stages whose input is not given are skipped. `schema` may be schema
    text, a parsed schema document or a compiled schema. Malformed text and
    failed directives raise; validation problems land in the report.
    """
    resolved_parse = _resolve_parse(text, options=options, source=source, parse=parse)
    document = resolved_parse.document()

    if load_fn is not None:
        document = resolve(document, load_fn, resolve_options)
    if env is not None:
        document = interpolate(document, env, interpolation_options)

    report = validate(document, _resolve_schema(schema)) if schema is not None else None
    if report is not None and not report.is_valid:
        logger.debug("%s failed validation with %d error(s)", resolved_parse.source, len(report.errors))

    return LoadRunResult(parse=resolved_parse, document=document, report=report)


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    source: str = "<memory>",
    parse: CosyParseResult | None = None,
    format_options: SerializeOptions | None = None,
) -> FormatRunResult:
    """Re-render one parse with the serializer."""
    resolved_parse = _resolve_parse(text, options=options, source=source, parse=parse)
    formatted_text = serialize(resolved_parse.document(), format_options)
    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        changed=formatted_text != resolved_parse.source_text,
    )


def run_check(
    text: str,
    schema: SchemaNode | Document | Value | str,
    options: ParserOptions | None = None,
    *,
    source: str = "<memory>",
    parse: CosyParseResult | None = None,
    load_fn: LoadFn | None = None,
    resolve_options: ResolveOptions | None = None,
    env: Env | None = None,
    interpolation_options: InterpolationOptions | None = None,
) -> CheckRunResult:
    """Load one document and validate it against `schema`."""
    loaded = run_load(
        text,
        options,
        source=source,
        parse=parse,
        load_fn=load_fn,
        resolve_options=resolve_options,
        env=env,
        interpolation_options=interpolation_options,
    )
    report = validate(loaded.document, _resolve_schema(schema))
    return CheckRunResult(document=loaded.document, report=report, is_valid=report.is_valid)


def _resolve_schema(schema: SchemaNode | Document | Value | str) -> SchemaNode | Document | Value:
    if isinstance(schema, str):
        return compile_schema(parse_text(schema, source=SCHEMA_SOURCE))
    return schema


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    source: str,
    parse: CosyParseResult | None,
) -> CosyParseResult:
    if parse is not None:
        if options is not None:
            raise ValueError("Pass either parse or options, not both")
        return parse
    return parse_result(text, options, source=source)
