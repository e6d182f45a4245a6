"""Read chapter names from content documents."""

from __future__ import annotations

from pathlib import Path

from outline2book.exceptions import NameResolutionMiss


def read_first_heading(path: Path) -> str:
    """Return the text of the first heading line in a markdown document.

    Lines are read one at a time and reading stops at the first line that
    starts with ``#`` and carries text; the heading markers and surrounding
    whitespace are stripped from the result.

    Args:
        path: Path to the content document.

    Returns:
        The heading text.

    Raises:
        NameResolutionMiss: If the document cannot be read or has no
            non-empty heading.
    """
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            for line in handle:
                if line.startswith("#"):
                    heading = line.lstrip("#").strip()
                    if heading:
                        return heading
    except OSError as exc:
        raise NameResolutionMiss(f"Cannot read {path}: {exc}") from exc
    raise NameResolutionMiss(f"No heading found in {path}")
