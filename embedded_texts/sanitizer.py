"""Logic for turning arbitrary strings into valid generated identifiers."""


def sanitize_identifier(name: str) -> str:
    """Replace every character that can't appear in an identifier with '_'.

    Each illegal character becomes exactly one underscore, so the result has the
    same length as the input unless it starts with a digit, in which case it is
    prefixed with '_'. Reserved words are not checked.
    """
    clean = "".join(ch if _is_identifier_char(ch) else "_" for ch in name)
    if clean[:1].isdecimal():
        return "_" + clean
    return clean


def sanitize_namespace(name: str) -> str:
    """Sanitize each dot-separated segment, dropping empty ones."""
    return ".".join(sanitize_identifier(part) for part in name.split(".") if part)


def _is_identifier_char(ch: str) -> bool:
    return ch == "_" or ch.isalpha() or ch.isdecimal()
