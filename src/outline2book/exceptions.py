"""Custom exceptions for outline2book."""

from __future__ import annotations

from pathlib import Path


class Outline2bookError(Exception):
    """Base exception for outline2book operations."""


class OutlineNotFoundError(Outline2bookError):
    """The top-level outline file does not exist."""


class OutlineError(Outline2bookError):
    """Error while compiling an outline file."""


class OutlineIndentationError(OutlineError):
    """A line's leading whitespace is not a whole number of levels."""

    def __init__(self, line: str, tab_width: int):
        self.line = line
        self.tab_width = tab_width
        super().__init__(
            f"Indentation error on line:\n\n{line}\n\n"
            f"Indentation should be a tab or {tab_width} spaces per level."
        )


class MalformedOutlineError(OutlineError):
    """A structural rule of the outline is violated."""


class NestedOutlineUnavailableError(OutlineError):
    """A directory's own outline file is missing or cannot be compiled."""

    def __init__(self, outline_path: Path, reason: str):
        self.outline_path = outline_path
        self.reason = reason
        super().__init__(f"Nested outline {outline_path} unavailable: {reason}")


class NameResolutionMiss(Outline2bookError):
    """No heading could be read from a chapter's content document."""
