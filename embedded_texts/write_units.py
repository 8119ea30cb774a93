"""Logic for writing rendered units to disk."""

from collections.abc import Iterable
from pathlib import Path

from embedded_texts.generated_unit import GeneratedUnit
from embedded_texts.render_unit import render_unit


def output_file_for_unit(out_root: Path, unit: GeneratedUnit) -> Path:
    """Determine the output file path for a unit, creating its directory."""
    p = out_root / unit.hint_name
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_units(units: Iterable[GeneratedUnit], out_root: Path) -> int:
    """Write every unit's source, skipping files that are already up to date."""
    written = 0
    for unit in units:
        source = render_unit(unit)
        out_file = output_file_for_unit(out_root, unit)
        # newline="" keeps the embedded content's own line endings intact.
        if out_file.exists() and _read(out_file) == source:
            continue
        with open(out_file, "w", encoding="utf-8", newline="") as f:
            f.write(source)
        written += 1
    return written


def _read(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
