"""Logic for composing a generated unit from names, fence and preview."""

from embedded_texts.fence_width import literal_fence
from embedded_texts.generated_unit import ContainerKind, GeneratedUnit, MemberKind
from embedded_texts.name_placement import NamePlacement
from embedded_texts.preview_comment import build_preview_comment
from embedded_texts.resolved_options import ResolvedOptions
from embedded_texts.text_resource import TextResource


def assemble_unit(
    resource: TextResource,
    options: ResolvedOptions,
    placement: NamePlacement,
) -> GeneratedUnit:
    """Build the unit for a resource whose names have already been mapped."""
    if options.is_constant:
        member_kind = MemberKind.CONSTANT
    else:
        member_kind = MemberKind.ACCESSOR
    if options.is_static_container:
        container_kind = ContainerKind.STATIC
    else:
        container_kind = ContainerKind.PARTIAL

    return GeneratedUnit(
        namespace=placement.namespace,
        container_name=placement.container_name,
        member_name=placement.member_name,
        member_kind=member_kind,
        container_kind=container_kind,
        literal_body=resource.content,
        fence=literal_fence(resource.content),
        preview_comment=build_preview_comment(
            resource.content, options.preview_line_limit
        ),
        display_path=placement.display_path,
    )
