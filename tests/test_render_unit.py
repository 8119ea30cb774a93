"""Tests for assembling units and rendering them as C# source."""

import time

import pytest

from embedded_texts import option_keys as keys
from embedded_texts.generate_unit import generate_unit
from embedded_texts.generated_unit import ContainerKind, GeneratedUnit, MemberKind
from embedded_texts.render_unit import render_unit
from embedded_texts.text_resource import TextResource

GLOBAL_OPTIONS = {keys.ROOT_NAMESPACE: "Project", keys.PROJECT_DIR: "/proj"}
# Breaks the compiler accepts before a closing fence, longest first.
LINE_BREAKS = ("\r\n", "\r", "\n", "\u0085", "\u2028", "\u2029")


def make_unit(
    content: str, item_options: dict[str, str] | None = None
) -> GeneratedUnit:
    """Generate the unit for /proj/File with the given content and metadata."""
    result = generate_unit(
        TextResource("/proj/File", content), GLOBAL_OPTIONS, item_options or {}
    )
    assert result.unit is not None
    return result.unit


def extract_literal(source: str, unit: GeneratedUnit) -> str:
    """Decode the raw string literal body the way the C# compiler reads it.

    The body runs from after the opening line to the line holding the closing
    fence, minus the single line break that precedes that line.
    """
    opening = f" {unit.fence}\n"
    closing = f"{unit.fence};\n}}\n"
    assert source.endswith(closing)
    start = source.index(opening) + len(opening)
    body = source[start : len(source) - len(closing)]
    line_break = next(b for b in LINE_BREAKS if body.endswith(b))
    return body[: len(body) - len(line_break)]



def test_default_example_renders_exactly() -> None:
    """Verify the full output for a simple file at the project root."""
    result = generate_unit(
        TextResource("/proj/Default.txt", "Default Content"), GLOBAL_OPTIONS, {}
    )
    assert result.unit is not None
    assert render_unit(result.unit) == (
        "// <auto-generated />\n"
        "\n"
        "namespace Project;\n"
        "\n"
        "public partial class Default_txt\n"
        "{\n"
        "    /// <summary>\n"
        "    /// Gets the contents of the file at 'Default.txt'.\n"
        "    /// <code>\n"
        "    /// Default Content\n"
        "    /// </code>\n"
        "    /// </summary>\n"
        '    public static string Content => """\n'
        "Default Content\n"
        '""";\n'
        "}\n"
    )


def test_assembled_unit_fields() -> None:
    """Verify the unit exposes its placement, kinds and verbatim body."""
    unit = make_unit("Contents")
    assert unit.source_key == ("Project", "File", "Content")
    assert unit.hint_name == "Project/File/Content.g.cs"
    assert unit.member_kind is MemberKind.ACCESSOR
    assert unit.container_kind is ContainerKind.PARTIAL
    assert unit.literal_body == "Contents"
    assert unit.fence == '"""'
    assert unit.preview_comment == ("Contents",)


@pytest.mark.parametrize(
    ("item_options", "expected_declaration"),
    [
        ({}, "public static string Content => "),
        ({keys.IS_CONSTANT: "False"}, "public static string Content => "),
        ({keys.IS_CONSTANT: "True"}, "public const string Content = "),
        (
            {keys.IDENTIFIER: "CustomIdentifier"},
            "public static string CustomIdentifier => ",
        ),
        (
            {keys.IS_CONSTANT: "True", keys.IDENTIFIER: "CustomIdentifier"},
            "public const string CustomIdentifier = ",
        ),
    ],
)
def test_constants_and_custom_identifiers(
    item_options: dict[str, str], expected_declaration: str
) -> None:
    """Verify the member declaration form and name."""
    source = render_unit(make_unit("Contents", item_options))
    assert f"    {expected_declaration}" in source


def test_container_is_not_static_by_default() -> None:
    """Verify the container is a plain partial class by default."""
    source = render_unit(make_unit(""))
    assert "public partial class File\n" in source
    assert "static partial" not in source


def test_container_can_be_made_static() -> None:
    """Verify the static-container option."""
    unit = make_unit("", {keys.STATIC_CONTAINER: "true"})
    assert unit.container_kind is ContainerKind.STATIC
    assert "public static partial class File\n" in render_unit(unit)


def test_disabled_preview_emits_no_code_block() -> None:
    """Verify a zero line limit removes the whole <code> block."""
    source = render_unit(make_unit("abc", {keys.PREVIEW_LINE_LIMIT: "0"}))
    assert "<code>" not in source
    summary = "    /// Gets the contents of the file at 'File'.\n    /// </summary>"
    assert summary in source


def test_truncated_preview_in_source() -> None:
    """Verify the preview and its summary line land inside the comment."""
    content = "\n".join(f"Line [{n}]" for n in range(1, 11))
    source = render_unit(make_unit(content, {keys.PREVIEW_LINE_LIMIT: "4"}))
    tail = "    /// Line [4]\n    /// [6 more lines (10 total)]\n    /// </code>"
    assert tail in source
    assert "    /// Line [5]" not in source


def test_empty_namespace_omits_declaration() -> None:
    """Verify units without a namespace live in the global namespace."""
    result = generate_unit(
        TextResource("/proj/a.txt", "x"), {keys.PROJECT_DIR: "/proj"}, {}
    )
    assert result.unit is not None
    assert result.unit.hint_name == "a_txt/Content.g.cs"
    assert "namespace" not in render_unit(result.unit)


def test_display_path_cannot_break_comment() -> None:
    """Verify line breaks and markup in the path stay inside the summary."""
    result = generate_unit(
        TextResource("/proj/a\r<b>.txt", "x"), GLOBAL_OPTIONS, {}
    )
    assert result.unit is not None
    assert "file at 'a &lt;b&gt;.txt'." in render_unit(result.unit)


@pytest.mark.parametrize(
    "content",
    [
        "",
        '"',
        '"""',
        '""""""""',
        'a\n"""\nb',
        '"""";\n}',
        '\n""";\n}\n',
        "\r\n\r\n",
        "trailing\r",
        "\r",
        "  indented\n\ttabbed  ",
        "<![CDATA[ ]]> </code>",
        "x\u2028y",
    ],
)
def test_literal_round_trips(content: str) -> None:
    """Verify the literal body decodes back to exactly the input content."""
    unit = make_unit(content)
    assert unit.fence not in content
    assert extract_literal(render_unit(unit), unit) == content


def test_generation_is_idempotent() -> None:
    """Verify identical inputs give identical units and sources."""
    content = 'some "quoted" """ text\nwith lines'
    first = make_unit(content, {keys.IS_CONSTANT: "true"})
    second = make_unit(content, {keys.IS_CONSTANT: "true"})
    assert first == second
    assert render_unit(first) == render_unit(second)


def test_large_file_round_trips_quickly() -> None:
    """Verify multi-megabyte content embeds fast and byte-exact."""
    content = '{"id": 1, "name": "item", "tags": ["a", "b"]}\r\n' * 100_000
    start = time.perf_counter()
    unit = make_unit(content)
    source = render_unit(unit)
    elapsed = time.perf_counter() - start
    assert elapsed < 1.0
    assert extract_literal(source, unit) == content


def test_trailing_carriage_return_keeps_its_own_break() -> None:
    """Verify a trailing CR is not merged with the break before the fence."""
    source = render_unit(make_unit("a\r"))
    assert 'a\r\r\n""";\n' in source
