"""Shared schemas for outline2book."""

from outline2book.schemas.book import (
    Affix,
    BookItem,
    Chapter,
    Spacer,
    dump_items,
    link_for,
    load_items,
)
from outline2book.schemas.pages import NavLink, PageContext

__all__ = [
    "Affix",
    "BookItem",
    "Chapter",
    "NavLink",
    "PageContext",
    "Spacer",
    "dump_items",
    "link_for",
    "load_items",
]
