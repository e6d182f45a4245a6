"""Line-level handling of outline files: indentation depth and classification."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from outline2book.config import OUTLINE2BOOK_TAB_WIDTH
from outline2book.exceptions import OutlineIndentationError

logger = logging.getLogger(__name__)

_LIST_MARKERS = ("-", "*")


@dataclass(frozen=True)
class SpacerLine:
    """A ``------`` separator line."""


@dataclass(frozen=True)
class ChapterLine:
    """A ``- [name](path)`` list entry, or a bare ``- path``."""

    name: str
    path: str


@dataclass(frozen=True)
class AffixLine:
    """A ``[name](path)`` entry outside of a list."""

    name: str
    path: str


LineItem = SpacerLine | ChapterLine | AffixLine


def line_depth(line: str, tab_width: int = OUTLINE2BOOK_TAB_WIDTH) -> int:
    """Compute the indentation level of a raw outline line.

    A tab counts as one level on its own; ``tab_width`` consecutive spaces
    count as one level. Scanning stops at the first other character.

    Args:
        line: The raw line, leading whitespace intact.
        tab_width: Number of spaces that make up one level.

    Returns:
        The indentation depth, zero or more.

    Raises:
        OutlineIndentationError: If spaces are left over that do not fill a
            whole level.
    """
    spaces = 0
    depth = 0
    for char in line:
        if char == " ":
            spaces += 1
        elif char == "\t":
            depth += 1
        else:
            break
        if spaces >= tab_width:
            depth += 1
            spaces = 0

    if spaces > 0:
        logger.debug("Indentation error on outline line %r (%d stray spaces)", line, spaces)
        raise OutlineIndentationError(line, tab_width)
    return depth


def read_link(text: str) -> tuple[str, str] | None:
    """Split ``[name](path)`` link syntax into its name and path.

    Only the first ``[``, the first ``](`` after it and the first ``)`` after
    that are considered. Text without all three delimiters is not a link.
    """
    start = text.find("[")
    if start == -1:
        return None
    middle = text.find("](", start)
    if middle == -1:
        return None
    end = text.find(")", middle + 2)
    if end == -1:
        return None
    return text[start + 1 : middle], text[middle + 2 : end]


def classify_line(line: str) -> LineItem | None:
    """Classify one outline line.

    Returns ``None`` for comments, blank lines and anything that cannot be
    parsed, so free-form prose in the outline is skipped rather than fatal.
    """
    line = line.strip()
    if not line:
        return None

    if line.startswith("--"):
        return SpacerLine()

    if line.startswith(_LIST_MARKERS):
        rest = line[1:].strip()
        link = read_link(rest)
        if link is None:
            return ChapterLine(name="", path=rest)
        name, path = link
        return ChapterLine(name=name, path=path)

    if line.startswith("#"):
        return None

    link = read_link(line)
    if link is None:
        logger.debug("Ignoring unparsable outline line %r", line)
        return None
    name, path = link
    return AffixLine(name=name, path=path)
