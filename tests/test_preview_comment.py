"""Tests for the documentation preview builder."""

import time

from embedded_texts.preview_comment import (
    build_preview_comment,
    count_lines,
    escape_doc_line,
    head_lines,
    join_lines,
)


def numbered_lines(count: int) -> str:
    """Create content with numbered lines separated by '\\n'."""
    return "\n".join(f"Line [{n}]" for n in range(1, count + 1))


def test_preview_is_truncated() -> None:
    """Verify L lines plus a summary of the omitted ones."""
    preview = build_preview_comment(numbered_lines(10), 4)
    assert preview is not None
    assert len(preview) == 5  # noqa: PLR2004
    assert preview[0] == "Line [1]"
    assert preview[-2] == "Line [4]"
    assert preview[-1] == "[6 more lines (10 total)]"


def test_preview_without_truncation() -> None:
    """Verify no summary line when the content fits the limit."""
    assert build_preview_comment(numbered_lines(10), 15) == tuple(
        f"Line [{n}]" for n in range(1, 11)
    )
    exact = build_preview_comment(numbered_lines(10), 10)
    assert exact is not None
    assert len(exact) == 10  # noqa: PLR2004


def test_default_sized_preview() -> None:
    """Verify the default limit of 20 on a long file."""
    preview = build_preview_comment(numbered_lines(1000), 20)
    assert preview is not None
    assert len(preview) == 21  # noqa: PLR2004
    assert preview[-1] == "[980 more lines (1000 total)]"


def test_zero_limit_disables_preview() -> None:
    """Verify a limit of 0 yields no preview block at all."""
    assert build_preview_comment("anything", 0) is None


def test_line_breaks() -> None:
    """Verify CRLF, LF and lone CR all end lines."""
    content = "a\r\nb\rc\nd"
    assert count_lines(content) == 4  # noqa: PLR2004
    assert head_lines(content, 10) == ["a", "b", "c", "d"]
    assert head_lines(content, 2) == ["a", "b"]


def test_unicode_line_separators() -> None:
    """Verify separators that would end a comment line split the preview."""
    content = "a\u2028b\u2029c\u0085d"
    assert count_lines(content) == 4  # noqa: PLR2004
    assert head_lines(content, 10) == ["a", "b", "c", "d"]


def test_trailing_break_and_empty_content() -> None:
    """Verify a trailing break yields a final empty line."""
    assert head_lines("x\n", 5) == ["x", ""]
    assert count_lines("x\n") == 2  # noqa: PLR2004
    assert build_preview_comment("", 20) == ("",)
    assert build_preview_comment("", 1) == ("",)


def test_markup_is_escaped() -> None:
    """Verify content can't close the documentation markup."""
    assert escape_doc_line("</code></summary>") == "&lt;/code&gt;&lt;/summary&gt;"
    assert escape_doc_line("]]> & \"q\" 'a'") == "]]&gt; &amp; \"q\" 'a'"
    preview = build_preview_comment("<b>\n</code>", 20)
    assert preview == ("&lt;b&gt;", "&lt;/code&gt;")


def test_join_lines() -> None:
    """Verify every kind of line break is replaced."""
    assert join_lines("a\r\nb\nc\rd\u2028e") == "a b c d e"


def test_large_content_stays_fast() -> None:
    """Verify multi-megabyte content is previewed well under a second."""
    content = '{"key": "value"}\n' * 300_000
    start = time.perf_counter()
    preview = build_preview_comment(content, 20)
    elapsed = time.perf_counter() - start
    assert preview is not None
    assert preview[-1] == "[299981 more lines (300001 total)]"
    assert elapsed < 1.0
