"""Logic for layering a user configuration over the defaults."""

from typing import Any

# Lists that extend the defaults instead of replacing them.
ADDITIVE_KEYS = frozenset({"exclude"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return base overlaid with update, without modifying either.

    Mappings merge key by key. Lists replace, except under ADDITIVE_KEYS, where
    update's entries are appended to base's and repeats are dropped. Exclude
    patterns are only tested for any match, so their order carries no meaning.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            merged[key] = list(dict.fromkeys([*current, *value]))
        else:
            merged[key] = value
    return merged
