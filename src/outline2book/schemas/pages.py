"""Per-page render context models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class NavLink(BaseModel):
    """Previous/next navigation target."""

    title: str
    link: str


class PageContext(BaseModel):
    """Data handed to the page renderer for one content document.

    Attributes:
        path: Page link (document path without extension).
        source_path: Document path relative to the source root.
        slug: File stem of the document.
        chapter_title: Display name of the item.
        path_to_root: Relative prefix leading back to the book root.
        previous: Link to the preceding page in reading order.
        next: Link to the following page in reading order.
    """

    path: str
    source_path: Path
    slug: str
    chapter_title: str
    path_to_root: str
    previous: NavLink | None = None
    next: NavLink | None = None
