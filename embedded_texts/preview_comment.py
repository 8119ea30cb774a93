"""Logic for building the truncated, escaped preview shown in documentation."""

import html
import re

# Every character sequence the generated source treats as the end of a line,
# so no content line can escape its documentation comment.
_LINE_BREAK_RE = re.compile(r"\r\n|[\n\r\u0085\u2028\u2029]")
_SINGLE_BREAKS = ("\n", "\r", "\u0085", "\u2028", "\u2029")


def count_lines(content: str) -> int:
    """Count lines the way they are split for the preview."""
    breaks = sum(content.count(ch) for ch in _SINGLE_BREAKS)
    # A "\r\n" pair was counted twice above.
    return breaks - content.count("\r\n") + 1


def head_lines(content: str, limit: int) -> list[str]:
    """Return at most the first ``limit`` lines of content."""
    lines: list[str] = []
    start = 0
    for match in _LINE_BREAK_RE.finditer(content):
        if len(lines) >= limit:
            return lines
        lines.append(content[start : match.start()])
        start = match.end()
    if len(lines) < limit:
        lines.append(content[start:])
    return lines


def join_lines(text: str, separator: str = " ") -> str:
    """Replace every line break in text with separator."""
    return _LINE_BREAK_RE.sub(separator, text)


def escape_doc_line(line: str) -> str:
    """Escape markup-significant characters for an XML documentation comment."""
    return html.escape(line, quote=False)


def build_preview_comment(content: str, line_limit: int) -> tuple[str, ...] | None:
    """Return the escaped preview lines, or None when the preview is disabled."""
    if line_limit <= 0:
        return None
    total = count_lines(content)
    preview = [escape_doc_line(line) for line in head_lines(content, line_limit)]
    if total > line_limit:
        preview.append(f"[{total - line_limit} more lines ({total} total)]")
    return tuple(preview)
