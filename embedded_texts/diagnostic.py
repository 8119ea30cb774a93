"""Diagnostics reported for misconfigured resources."""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Kinds of per-resource problems, valued by their stable id."""

    MISSING_PROJECT_ROOT = "EMBED001"
    OUTSIDE_PROJECT_ROOT = "EMBED002"
    UNPARSEABLE_PATH = "EMBED003"
    UNREADABLE_RESOURCE = "EMBED004"
    DUPLICATE_SOURCE = "EMBED005"

    @property
    def id(self) -> str:
        """Return the stable diagnostic id."""
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A problem that prevented one resource from being embedded."""

    kind: DiagnosticKind
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.id}: {self.message}"


class ConfigurationError(Exception):
    """Raised while naming a resource whose configuration can't be satisfied."""

    def __init__(self, kind: DiagnosticKind, path: str, message: str) -> None:
        """Initialize the error with its diagnostic kind and offending path."""
        super().__init__(message)
        self.kind = kind
        self.path = path
        self.message = message

    def to_diagnostic(self) -> Diagnostic:
        """Convert the error into a diagnostic for the host to collect."""
        return Diagnostic(kind=self.kind, path=self.path, message=self.message)
