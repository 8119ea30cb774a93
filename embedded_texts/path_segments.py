"""Utility for platform-neutral path splitting and relative path computation."""

import re
from dataclasses import dataclass

# Both separators are accepted regardless of the current platform.
_SEPARATOR_RE = re.compile(r"[/\\]+")


@dataclass(frozen=True)
class PathSegments:
    """A normalized path: whether it is anchored at a root, and its segments."""

    anchored: bool
    parts: tuple[str, ...]

    def __str__(self) -> str:
        joined = "/".join(self.parts)
        return "/" + joined if self.anchored else joined

    @property
    def parent(self) -> "PathSegments":
        """Return the containing directory."""
        return PathSegments(self.anchored, self.parts[:-1])


def split_path(path: str) -> PathSegments:
    """Split a path on '/' or '\\', resolving '.' and '..' segments."""
    anchored = path[:1] in ("/", "\\")
    parts: list[str] = []
    for part in _SEPARATOR_RE.split(path):
        if not part or part == ".":
            continue
        if part == ".." and parts and parts[-1] != "..":
            parts.pop()
            continue
        parts.append(part)
    return PathSegments(anchored, tuple(parts))


def relative_parts(root: PathSegments, path: PathSegments) -> tuple[str, ...] | None:
    """Return the segments of path below root, or None if path is outside root."""
    if root.anchored != path.anchored:
        return None
    depth = len(root.parts)
    if path.parts[:depth] != root.parts:
        return None
    return path.parts[depth:]
