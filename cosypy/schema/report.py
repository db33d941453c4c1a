"""Validation diagnostics and the report that carries them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from cosypy.diagnostics import (
    SCHEMA_DEPRECATED_FIELD,
    SCHEMA_MISSING_FIELD,
    SCHEMA_TYPE_MISMATCH,
    SCHEMA_UNKNOWN_FIELD,
    DiagnosticSpec,
    Severity,
    has_errors,
)


def _where(path: str) -> str:
    return f"'{path}'" if path else "the document root"


class _ValidationItem:
    __slots__ = ()

    spec: ClassVar[DiagnosticSpec]

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def severity(self) -> Severity:
        return self.spec.severity


@dataclass(frozen=True, slots=True)
class MissingField(_ValidationItem):
    path: str

    spec: ClassVar[DiagnosticSpec] = SCHEMA_MISSING_FIELD

    @property
    def message(self) -> str:
        return f"Missing required field {_where(self.path)}"


@dataclass(frozen=True, slots=True)
class TypeMismatch(_ValidationItem):
    path: str
    expected: str
    actual: str

    spec: ClassVar[DiagnosticSpec] = SCHEMA_TYPE_MISMATCH

    @property
    def message(self) -> str:
        return f"Expected {self.expected} at {_where(self.path)}, found {self.actual}"


@dataclass(frozen=True, slots=True)
class UnknownField(_ValidationItem):
    path: str
    suggestion: str | None = None

    spec: ClassVar[DiagnosticSpec] = SCHEMA_UNKNOWN_FIELD

    @property
    def message(self) -> str:
        message = f"Unknown field {_where(self.path)}"
        if self.suggestion is not None:
            message = f"{message}; did you mean '{self.suggestion}'?"
        return message


@dataclass(frozen=True, slots=True)
class Deprecated(_ValidationItem):
    path: str
    reason: str

    spec: ClassVar[DiagnosticSpec] = SCHEMA_DEPRECATED_FIELD

    @property
    def message(self) -> str:
        return f"Field {_where(self.path)} is deprecated: {self.reason}"


ValidationDiagnostic: TypeAlias = MissingField | TypeMismatch | UnknownField | Deprecated


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Ordered result of validating one document against one schema."""

    diagnostics: tuple[ValidationDiagnostic, ...] = ()

    def __iter__(self) -> Iterator[ValidationDiagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    @property
    def is_valid(self) -> bool:
        return not has_errors(self.diagnostics)

    @property
    def errors(self) -> tuple[ValidationDiagnostic, ...]:
        return tuple(item for item in self.diagnostics if item.severity == "error")

    @property
    def warnings(self) -> tuple[ValidationDiagnostic, ...]:
        return tuple(item for item in self.diagnostics if item.severity == "warning")

    def messages(self) -> list[str]:
        return [f"{item.code}: {item.message}" for item in self.diagnostics]
