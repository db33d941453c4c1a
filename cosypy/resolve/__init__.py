"""`extends`/`include` resolution and deep merge."""

from cosypy.resolve.load import MERGED_SOURCE, load_and_merge
from cosypy.resolve.merge import deep_merge
from cosypy.resolve.options import JoinPath, ResolveOptions, is_synthetic_source, join_relative
from cosypy.resolve.resolver import DIRECTIVE_KEYS, EXTENDS, INCLUDE, LoadFn, Resolver, resolve

__all__ = [
    "DIRECTIVE_KEYS",
    "EXTENDS",
    "INCLUDE",
    "MERGED_SOURCE",
    "JoinPath",
    "LoadFn",
    "ResolveOptions",
    "Resolver",
    "deep_merge",
    "is_synthetic_source",
    "join_relative",
    "load_and_merge",
    "resolve",
]
