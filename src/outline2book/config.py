"""Local configuration for outline2book."""

from __future__ import annotations

import os


DEFAULT_TAB_WIDTH = 4
DEFAULT_SUMMARY_FILENAME = "SUMMARY.md"
DEFAULT_INDEX_FILENAME = "index.md"
DEFAULT_CONTENT_EXTENSION = ".md"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


# Spaces that make up one indentation level in an outline file.
OUTLINE2BOOK_TAB_WIDTH = int(os.getenv("OUTLINE2BOOK_TAB_WIDTH", str(DEFAULT_TAB_WIDTH)))
OUTLINE2BOOK_SUMMARY_FILENAME = os.getenv("OUTLINE2BOOK_SUMMARY_FILENAME", DEFAULT_SUMMARY_FILENAME)
OUTLINE2BOOK_INDEX_FILENAME = os.getenv("OUTLINE2BOOK_INDEX_FILENAME", DEFAULT_INDEX_FILENAME)
OUTLINE2BOOK_CONTENT_EXTENSION = os.getenv("OUTLINE2BOOK_CONTENT_EXTENSION", DEFAULT_CONTENT_EXTENSION)
OUTLINE2BOOK_NUMBER_SECTIONS = _env_flag("OUTLINE2BOOK_NUMBER_SECTIONS")
OUTLINE2BOOK_STRICT_NESTED = _env_flag("OUTLINE2BOOK_STRICT_NESTED")
