"""Parser configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits applied while building the document tree."""

    max_depth: int = 128

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
