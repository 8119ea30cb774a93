"""Data model for the fully resolved options of one resource."""

from dataclasses import dataclass

from embedded_texts.option_keys import DEFAULT_PREVIEW_LINE_LIMIT


@dataclass(frozen=True)
class ResolvedOptions:
    """Typed view over the global and per-resource configuration values."""

    root_namespace: str | None = None
    project_root: str | None = None
    namespace: str | None = None
    container_name: str | None = None
    is_constant: bool = False
    identifier: str | None = None
    preview_line_limit: int = DEFAULT_PREVIEW_LINE_LIMIT
    is_static_container: bool = False
    directory_as_container: bool = False
    included: bool = True
