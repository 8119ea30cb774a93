"""Per-resource embedding pipeline: resolve, name, assemble."""

import logging
from collections.abc import Iterable

from embedded_texts.assemble_unit import assemble_unit
from embedded_texts.diagnostic import ConfigurationError
from embedded_texts.generation_result import GenerationResult
from embedded_texts.map_names import map_names
from embedded_texts.resolve_options import RawOptions, resolve_options
from embedded_texts.text_resource import TextResource

logger = logging.getLogger(__name__)


def generate_unit(
    resource: TextResource,
    global_options: RawOptions,
    item_options: RawOptions,
) -> GenerationResult:
    """Generate the unit for one resource, or report why it can't be generated."""
    options = resolve_options(global_options, item_options)
    if not options.included:
        logger.debug("Skipping %s: embedding disabled", resource.path)
        return GenerationResult(path=resource.path)

    try:
        placement = map_names(resource.path, options)
    except ConfigurationError as e:
        diagnostic = e.to_diagnostic()
        logger.warning("%s", diagnostic)
        return GenerationResult(path=resource.path, diagnostic=diagnostic)

    unit = assemble_unit(resource, options, placement)
    if unit.namespace and unit.namespace[-1] == unit.container_name:
        # Legal C#, but the namespace then needs global:: qualification.
        logger.warning(
            "%s: container %s has the same name as its namespace %s",
            resource.path,
            unit.container_name,
            unit.dotted_namespace,
        )
    logger.debug("Embedded %s as %s", resource.path, unit.hint_name)
    return GenerationResult(path=resource.path, unit=unit)


def generate_units(
    items: Iterable[tuple[TextResource, RawOptions]],
    global_options: RawOptions,
) -> list[GenerationResult]:
    """Run generate_unit over every (resource, item options) pair, in order."""
    return [
        generate_unit(resource, global_options, item_options)
        for resource, item_options in items
    ]
