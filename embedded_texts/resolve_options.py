"""Logic for merging global and per-resource configuration into options."""

import re
from collections.abc import Mapping

from embedded_texts import option_keys as keys
from embedded_texts.resolved_options import ResolvedOptions

RawOptions = Mapping[str, str | None]

# What an unsigned 32-bit parse of the build host accepts.
_UINT_RE = re.compile(r"^\s*\+?([0-9]+)\s*$")


def resolve_options(
    global_options: RawOptions, item_options: RawOptions
) -> ResolvedOptions:
    """Resolve one resource's options, including the include/exclude decision."""
    auto_embed = global_options.get(keys.AUTO_EMBED)
    if auto_embed is None:
        auto_embed = keys.DEFAULT_AUTO_EMBED
    embed = item_options.get(keys.EMBED)

    globally_enabled = _equals(auto_embed, "true")
    opted_in = _equals(embed, "true")
    opted_out = _equals(embed, "false")

    return ResolvedOptions(
        root_namespace=_non_empty(global_options.get(keys.ROOT_NAMESPACE)),
        project_root=_non_empty(global_options.get(keys.PROJECT_DIR)),
        namespace=_non_empty(item_options.get(keys.NAMESPACE)),
        container_name=_non_empty(item_options.get(keys.CONTAINER_NAME)),
        is_constant=_equals(item_options.get(keys.IS_CONSTANT), "true"),
        identifier=_non_empty(item_options.get(keys.IDENTIFIER)),
        preview_line_limit=parse_line_limit(
            item_options.get(keys.PREVIEW_LINE_LIMIT)
        ),
        is_static_container=_equals(item_options.get(keys.STATIC_CONTAINER), "true"),
        directory_as_container=_equals(
            item_options.get(keys.DIRECTORY_AS_CONTAINER), "true"
        ),
        included=(globally_enabled or opted_in) and not opted_out,
    )


def parse_line_limit(value: str | None) -> int:
    """Parse a preview line limit, falling back to the default when malformed."""
    if value is None:
        return keys.DEFAULT_PREVIEW_LINE_LIMIT
    match = _UINT_RE.match(value)
    if not match:
        return keys.DEFAULT_PREVIEW_LINE_LIMIT
    limit = int(match.group(1))
    if limit > keys.MAX_PREVIEW_LINE_LIMIT:
        return keys.DEFAULT_PREVIEW_LINE_LIMIT
    return limit


def _equals(value: str | None, token: str) -> bool:
    return value is not None and value.casefold() == token


def _non_empty(value: str | None) -> str | None:
    return value or None
