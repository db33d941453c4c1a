"""Interpolation options."""

from dataclasses import dataclass
from enum import StrEnum


class MissingVarPolicy(StrEnum):
    """What to do with a `${NAME}` whose variable is not set."""

    PASS_THROUGH = "pass_through"
    EMPTY_STRING = "empty_string"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class InterpolationOptions:
    missing: MissingVarPolicy = MissingVarPolicy.PASS_THROUGH
