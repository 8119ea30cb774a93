"""Logic for deriving namespace, container and member names from a path."""

from embedded_texts.diagnostic import ConfigurationError, DiagnosticKind
from embedded_texts.name_placement import NamePlacement
from embedded_texts.option_keys import DEFAULT_IDENTIFIER
from embedded_texts.path_segments import relative_parts, split_path
from embedded_texts.resolved_options import ResolvedOptions
from embedded_texts.sanitizer import sanitize_identifier, sanitize_namespace


def map_names(path: str, options: ResolvedOptions) -> NamePlacement:
    """Compute the generated names for the resource at path.

    Raises ConfigurationError when the project root is missing, the path has no
    directory, or the resource lies outside the project root without an explicit
    namespace override.
    """
    if not options.project_root:
        raise ConfigurationError(
            DiagnosticKind.MISSING_PROJECT_ROOT,
            path,
            "No project directory configured.",
        )

    file_path = split_path(path)
    if not file_path.parts:
        raise ConfigurationError(
            DiagnosticKind.UNPARSEABLE_PATH, path, "Path not found for file."
        )
    directory = file_path.parent
    if not directory.parts:
        raise ConfigurationError(
            DiagnosticKind.UNPARSEABLE_PATH,
            path,
            f"Couldn't determine the directory of '{path}'.",
        )

    root = split_path(options.project_root)
    relative_directory = relative_parts(root, directory)
    if relative_directory is None and not options.namespace:
        raise ConfigurationError(
            DiagnosticKind.OUTSIDE_PROJECT_ROOT,
            path,
            f"The file '{path}' is outside the project directory "
            f"'{options.project_root}'; set an explicit namespace to embed it.",
        )

    file_name = file_path.parts[-1]
    directory_name = directory.parts[-1]

    if options.namespace:
        namespace = sanitize_namespace(options.namespace)
    else:
        folders = relative_directory or ()
        if options.directory_as_container and folders:
            # The directory becomes the container, not a namespace segment.
            folders = folders[:-1]
        namespace = sanitize_namespace(
            ".".join([options.root_namespace or "", *folders])
        )

    if options.container_name:
        container_name = sanitize_identifier(options.container_name)
    elif options.directory_as_container:
        container_name = sanitize_identifier(directory_name)
    else:
        container_name = sanitize_identifier(file_name)

    if options.identifier:
        member_name = sanitize_identifier(options.identifier)
    elif options.directory_as_container:
        member_name = sanitize_identifier(file_name)
    else:
        member_name = DEFAULT_IDENTIFIER

    relative_file = relative_parts(root, file_path)
    display_path = "/".join(relative_file) if relative_file else str(file_path)

    return NamePlacement(
        namespace=tuple(namespace.split(".")) if namespace else (),
        container_name=container_name,
        member_name=member_name,
        display_path=display_path,
    )
