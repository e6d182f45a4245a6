"""outline2book: compile SUMMARY.md outlines into book trees."""

from outline2book.exceptions import (
    MalformedOutlineError,
    NameResolutionMiss,
    NestedOutlineUnavailableError,
    Outline2bookError,
    OutlineError,
    OutlineIndentationError,
    OutlineNotFoundError,
)
from outline2book.navigation import format_outline_tree, iter_pages, make_render_data
from outline2book.outline_parser import (
    OutlineOptions,
    OutlineParser,
    load_book,
    load_outline,
    parse_summary,
)
from outline2book.schemas import (
    Affix,
    BookItem,
    Chapter,
    NavLink,
    PageContext,
    Spacer,
    dump_items,
    load_items,
)
from outline2book.traversal import Book, BookItems, iter_items

__all__ = [
    "Affix",
    "Book",
    "BookItem",
    "BookItems",
    "Chapter",
    "MalformedOutlineError",
    "NameResolutionMiss",
    "NavLink",
    "NestedOutlineUnavailableError",
    "Outline2bookError",
    "OutlineError",
    "OutlineIndentationError",
    "OutlineNotFoundError",
    "OutlineOptions",
    "OutlineParser",
    "PageContext",
    "Spacer",
    "dump_items",
    "format_outline_tree",
    "iter_items",
    "iter_pages",
    "load_book",
    "load_items",
    "load_outline",
    "make_render_data",
    "parse_summary",
]
