"""Data model for the names derived for a resource."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NamePlacement:
    """Where a resource's member lives in the generated hierarchy."""

    namespace: tuple[str, ...]
    container_name: str
    member_name: str
    display_path: str  # relative to the project root when possible
