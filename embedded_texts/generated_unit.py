"""Data model for one generated declaration unit."""

from dataclasses import dataclass
from enum import Enum


class MemberKind(Enum):
    """How the member exposes the content."""

    CONSTANT = "const"
    ACCESSOR = "static"


class ContainerKind(Enum):
    """Whether the generated container can be instantiated."""

    STATIC = "static partial"
    PARTIAL = "partial"


@dataclass(frozen=True)
class GeneratedUnit:
    """A namespace, container and member exposing one resource's content."""

    namespace: tuple[str, ...]
    container_name: str
    member_name: str
    member_kind: MemberKind
    container_kind: ContainerKind
    literal_body: str
    fence: str
    preview_comment: tuple[str, ...] | None
    display_path: str

    @property
    def dotted_namespace(self) -> str:
        """Return the namespace joined with dots."""
        return ".".join(self.namespace)

    @property
    def source_key(self) -> tuple[str, str, str]:
        """Return the (namespace, container, member) placement key."""
        return (self.dotted_namespace, self.container_name, self.member_name)

    @property
    def hint_name(self) -> str:
        """Return the relative file name the unit is written to."""
        prefix = f"{self.dotted_namespace}/" if self.namespace else ""
        return f"{prefix}{self.container_name}/{self.member_name}.g.cs"
