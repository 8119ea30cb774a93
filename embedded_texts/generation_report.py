"""Logic for generating reports on an embedding run."""

import json
import time
from pathlib import Path
from typing import Any

from embedded_texts.diagnostic import Diagnostic
from embedded_texts.generated_unit import GeneratedUnit
from embedded_texts.generation_result import GenerationResult


class GenerationReport:
    """Collects and summarizes the results of one generation pass."""

    def __init__(self) -> None:
        """Initialize an empty report and start its clock."""
        self.results: list[GenerationResult] = []
        self.start_time = time.time()

    def add_result(self, result: GenerationResult) -> None:
        """Add a single generation result to the report."""
        self.results.append(result)

    @property
    def units(self) -> list[GeneratedUnit]:
        """Return the generated units in the order they were added."""
        return [r.unit for r in self.results if r.unit is not None]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Return the diagnostics in the order they were added."""
        return [r.diagnostic for r in self.results if r.diagnostic is not None]

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "total_items": len(self.results),
            },
            "units": [
                {
                    "path": r.path,
                    "source_key": list(r.unit.source_key),
                    "hint_name": r.unit.hint_name,
                    "member_kind": r.unit.member_kind.name,
                    "container_kind": r.unit.container_kind.name,
                }
                for r in self.results
                if r.unit is not None
            ],
            "diagnostics": [
                {"id": d.kind.id, "path": d.path, "message": d.message}
                for d in self.diagnostics
            ],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        diagnostic_counts: dict[str, int] = {}
        for d in self.diagnostics:
            diagnostic_counts[d.kind.id] = diagnostic_counts.get(d.kind.id, 0) + 1

        namespace_counts: dict[str, int] = {}
        for u in self.units:
            ns = u.dotted_namespace
            namespace_counts[ns] = namespace_counts.get(ns, 0) + 1

        return {
            "generated": len(self.units),
            "excluded": sum(1 for r in self.results if not r.included),
            "diagnostic_counts": diagnostic_counts,
            "namespace_counts": namespace_counts,
        }
