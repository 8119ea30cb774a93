"""Logic for sizing the delimiter fence around an embedded raw string literal."""

import re

QUOTE = '"'
MIN_FENCE_WIDTH = 3


def fence_width(
    content: str, quote: str = QUOTE, minimum: int = MIN_FENCE_WIDTH
) -> int:
    """Return max(longest run of quote in content + 1, minimum).

    Only runs of at least ``minimum`` quotes can push the width past the minimum,
    so the regex scan skips shorter runs entirely.
    """
    longest = 0
    pattern = re.compile(f"{re.escape(quote)}{{{minimum},}}")
    for match in pattern.finditer(content):
        longest = max(longest, match.end() - match.start())
    return max(longest + 1, minimum)


def literal_fence(
    content: str, quote: str = QUOTE, minimum: int = MIN_FENCE_WIDTH
) -> str:
    """Return a fence of quote characters no run inside content can close."""
    return quote * fence_width(content, quote, minimum)
