"""Logic for refusing units whose generated sources would collide."""

import logging
from collections.abc import Iterable

from embedded_texts.diagnostic import Diagnostic, DiagnosticKind
from embedded_texts.generation_result import GenerationResult

logger = logging.getLogger(__name__)


def reject_duplicate_units(
    results: Iterable[GenerationResult],
) -> list[GenerationResult]:
    """Replace every unit sharing a hint name with a diagnostic naming the others.

    Hint names compare case-insensitively, so two units never land on one file
    on a case-insensitive file system either. No unit of a clash is kept.
    """
    results = list(results)
    claimed: dict[str, list[str]] = {}
    for r in results:
        if r.unit is not None:
            claimed.setdefault(_hint_key(r.unit.hint_name), []).append(r.path)

    checked = []
    for r in results:
        if r.unit is None or len(claimed[_hint_key(r.unit.hint_name)]) == 1:
            checked.append(r)
            continue
        others = [p for p in claimed[_hint_key(r.unit.hint_name)] if p != r.path]
        diagnostic = Diagnostic(
            kind=DiagnosticKind.DUPLICATE_SOURCE,
            path=r.path,
            message=(
                f"Generated source '{r.unit.hint_name}' is also generated for: "
                + ", ".join(others)
            ),
        )
        logger.warning("%s", diagnostic)
        checked.append(GenerationResult(path=r.path, diagnostic=diagnostic))
    return checked


def _hint_key(hint_name: str) -> str:
    return hint_name.casefold()
