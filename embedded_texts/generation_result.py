"""Data model for the outcome of processing one resource."""

from dataclasses import dataclass

from embedded_texts.diagnostic import Diagnostic
from embedded_texts.generated_unit import GeneratedUnit


@dataclass(frozen=True)
class GenerationResult:
    """Either a unit, a diagnostic, or neither when the resource is excluded."""

    path: str
    unit: GeneratedUnit | None = None
    diagnostic: Diagnostic | None = None

    @property
    def included(self) -> bool:
        """Return True when the resource was selected for embedding."""
        return self.unit is not None or self.diagnostic is not None
