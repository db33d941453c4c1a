"""Loading and merging several configuration files."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cosypy.errors import DirectiveParseError, LexError, LoadFailedError, ParseError
from cosypy.parser import parse
from cosypy.resolve.merge import deep_merge
from cosypy.resolve.options import ResolveOptions
from cosypy.resolve.resolver import LoadFn, resolve
from cosypy.value import Document, ObjectValue, Value

logger = logging.getLogger(__name__)

MERGED_SOURCE = "<merged>"


def load_and_merge(
    paths: Iterable[str],
    load_fn: LoadFn,
    options: ResolveOptions | None = None,
) -> Document:
    """Load `paths` in order and deep-merge them, later files overriding earlier ones.

    Each file has its own `extends`/`include` directives resolved before it is
    merged. No paths gives an empty object.
    """
    resolved_options = options or ResolveOptions()
    merged: Value = ObjectValue()

    for path in paths:
        try:
            text = load_fn(path)
        except Exception as exc:
            raise LoadFailedError(f"Failed to load {path!r}: {exc}", path=path, chain=(path,)) from exc

        try:
            document = parse(text, resolved_options.parser, source=path)
        except (LexError, ParseError) as exc:
            raise DirectiveParseError(exc, path=path, chain=(path,)) from exc

        logger.debug("Merging %s", path)
        merged = deep_merge(merged, resolve(document, load_fn, resolved_options).root)

    return Document(merged, source=MERGED_SOURCE)
