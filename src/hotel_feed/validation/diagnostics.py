"""Diagnostic records produced by a schema validation pass."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional

NO_ERRORS_MESSAGE = "No errors are found"


class Severity(str, Enum):
    WARNING = "Warning"
    ERROR = "Error"
    # terminal read failure; always the last entry of a report
    EXCEPTION = "Exception"


def _single_line(text: str) -> str:
    return " ".join(part.strip() for part in text.strip().splitlines() if part.strip())


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """A single validation message with optional position.

    Renders as ``(line L, pos P)`` when both are known and ``(line L)`` when
    libxml2 supplies no column.
    """

    severity: Severity
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def has_position(self) -> bool:
        return self.line is not None and self.line > 0

    def render(self) -> str:
        message = _single_line(self.message)
        if self.has_position:
            if self.column:
                return f"{self.severity.value}: (line {self.line}, pos {self.column}) {message}"
            return f"{self.severity.value}: (line {self.line}) {message}"
        return f"{self.severity.value}: {message}"

    @classmethod
    def from_log_entry(cls, entry: Any) -> "Diagnostic":
        """Build from an ``lxml`` error-log entry."""
        severity = Severity.WARNING if entry.level_name == "WARNING" else Severity.ERROR
        return cls(
            severity=severity,
            message=entry.message,
            line=entry.line or None,
            column=entry.column or None,
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Diagnostic":
        return cls(severity=Severity.EXCEPTION, message=str(exc) or type(exc).__name__)


@dataclass(slots=True)
class ValidationReport:
    """Append-only, ordered diagnostics from one validation pass."""

    document_location: str
    schema_location: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def failed(self) -> bool:
        """True when the pass stopped on a read failure."""
        return any(item.severity is Severity.EXCEPTION for item in self.diagnostics)

    def add(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def add_exception(self, exc: BaseException) -> None:
        self.add(Diagnostic.from_exception(exc))

    def render(self) -> str:
        if self.ok:
            return NO_ERRORS_MESSAGE
        return "\n".join(item.render() for item in self.diagnostics)
