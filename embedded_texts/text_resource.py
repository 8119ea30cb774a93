"""Data model for a text resource supplied by the build host."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextResource:
    """A text file to embed, identified by its absolute path."""

    path: str
    content: str
