"""Logic for rendering a generated unit as C# source text."""

from embedded_texts.generated_unit import GeneratedUnit, MemberKind
from embedded_texts.preview_comment import escape_doc_line, join_lines


def render_unit(unit: GeneratedUnit) -> str:
    """Render the unit as a C# source file embedding the content verbatim."""
    parts = ["// <auto-generated />", ""]
    if unit.namespace:
        parts += [f"namespace {unit.dotted_namespace};", ""]
    parts += [
        f"public {unit.container_kind.value} class {unit.container_name}",
        "{",
        "    /// <summary>",
        f"    /// Gets the contents of the file at '{_display_path(unit)}'.",
    ]
    parts.extend(_render_preview(unit.preview_comment))
    parts += [
        "    /// </summary>",
        f"    {_member_declaration(unit)} {unit.fence}",
        # No escaping: the fence alone keeps the content intact.
        unit.literal_body + _closing_break(unit.literal_body) + f"{unit.fence};",
        "}",
    ]
    return "\n".join(parts) + "\n"


def _closing_break(body: str) -> str:
    # A lone trailing "\r" would pair with "\n" into the break the literal drops.
    return "\r\n" if body.endswith("\r") else "\n"


def _render_preview(preview: tuple[str, ...] | None) -> list[str]:
    if preview is None:
        return []
    return [
        "    /// <code>",
        *(f"    /// {line}" for line in preview),
        "    /// </code>",
    ]


def _member_declaration(unit: GeneratedUnit) -> str:
    if unit.member_kind is MemberKind.CONSTANT:
        return f"public const string {unit.member_name} ="
    return f"public static string {unit.member_name} =>"


def _display_path(unit: GeneratedUnit) -> str:
    # A path can't be allowed to end the summary's comment line.
    return escape_doc_line(join_lines(unit.display_path))
