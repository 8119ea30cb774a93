"""Logic for loading the YAML configuration and merging it with defaults."""

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from embedded_texts import option_keys as keys
from embedded_texts.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "properties": {
        keys.AUTO_EMBED: keys.DEFAULT_AUTO_EMBED,
    },
    "include": ["**/*.txt"],
    "exclude": ["bin/**", "obj/**", ".git/**"],
    "items": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config


def as_option_value(value: object) -> str | None:
    """Convert a YAML scalar into the string form the engine expects."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_raw_options(values: Mapping[str, Any] | None) -> dict[str, str | None]:
    """Convert a mapping of YAML scalars into raw engine options."""
    return {str(k): as_option_value(v) for k, v in (values or {}).items()}
