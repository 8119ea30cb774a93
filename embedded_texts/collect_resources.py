"""Logic for discovering text resources and their per-resource metadata."""

import logging
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any

from embedded_texts.diagnostic import Diagnostic, DiagnosticKind
from embedded_texts.load_config import as_raw_options
from embedded_texts.text_resource import TextResource

logger = logging.getLogger(__name__)


def collect_resources(
    project_dir: Path, config: dict[str, Any]
) -> tuple[list[tuple[TextResource, dict[str, str | None]]], list[Diagnostic]]:
    """Find included files under project_dir and pair each with its metadata.

    Files that can't be read as UTF-8 text are returned as diagnostics instead,
    so the remaining files are still collected.
    """
    found: dict[str, Path] = {}
    for pattern in config.get("include") or []:
        for p in project_dir.glob(pattern):
            if p.is_file():
                found.setdefault(p.relative_to(project_dir).as_posix(), p)

    excludes = config.get("exclude") or []
    collected = []
    unreadable = []
    for rel in sorted(found):
        if any(matches(rel, pattern) for pattern in excludes):
            logger.debug("Excluded by pattern: %s", rel)
            continue
        path = str(found[rel].absolute())
        try:
            content = read_text(found[rel])
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Can't read %s: %s", rel, e)
            unreadable.append(
                Diagnostic(
                    kind=DiagnosticKind.UNREADABLE_RESOURCE,
                    path=path,
                    message=f"Text file '{rel}' can't be read as UTF-8: {e}",
                )
            )
            continue
        resource = TextResource(path=path, content=content)
        collected.append((resource, item_metadata(rel, config.get("items") or [])))
    return collected, unreadable


def item_metadata(rel: str, items: list[dict[str, Any]]) -> dict[str, str | None]:
    """Apply every matching item rule in order; later rules win per key."""
    metadata: dict[str, str | None] = {}
    for item in items:
        pattern = item.get("match")
        if pattern and matches(rel, pattern):
            metadata.update(as_raw_options(item.get("metadata")))
    return metadata


def matches(rel: str, pattern: str) -> bool:
    """Match a '/'-separated relative path against a glob pattern.

    '*' also matches across '/', and a leading '**/' may match zero directories.
    """
    if fnmatchcase(rel, pattern):
        return True
    return pattern.startswith("**/") and fnmatchcase(rel, pattern[3:])


def read_text(path: Path) -> str:
    """Read a file as UTF-8, dropping a BOM and keeping line endings as-is."""
    with open(path, encoding="utf-8-sig", newline="") as f:
        return f.read()
