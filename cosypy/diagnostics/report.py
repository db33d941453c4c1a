"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from cosypy.diagnostics.codes import Severity


class HasSeverity(Protocol):
    @property
    def severity(self) -> Severity: ...


def has_errors(diagnostics: Iterable[HasSeverity]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
