"""Configuration keys recognized by the embedding engine."""

# Global scope
ROOT_NAMESPACE = "root-namespace"
PROJECT_DIR = "project-dir"
AUTO_EMBED = "auto-embed"

# Per-resource scope
EMBED = "embed"
NAMESPACE = "namespace"
CONTAINER_NAME = "container-name"
IS_CONSTANT = "is-constant"
IDENTIFIER = "identifier"
PREVIEW_LINE_LIMIT = "preview-line-limit"
STATIC_CONTAINER = "static-container"
DIRECTORY_AS_CONTAINER = "directory-as-container"

DEFAULT_AUTO_EMBED = "true"
DEFAULT_IDENTIFIER = "Content"
DEFAULT_PREVIEW_LINE_LIMIT = 20

# uint range of the build host's metadata values
MAX_PREVIEW_LINE_LIMIT = 0xFFFFFFFF
