"""Environment-variable interpolation."""

from cosypy.interpolate.interpolate import PLACEHOLDER_RE, Env, interpolate
from cosypy.interpolate.options import InterpolationOptions, MissingVarPolicy

__all__ = [
    "PLACEHOLDER_RE",
    "Env",
    "InterpolationOptions",
    "MissingVarPolicy",
    "interpolate",
]
