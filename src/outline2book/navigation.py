"""Build the data handed to the page renderer from a compiled book."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, Sequence

from outline2book.schemas import Affix, BookItem, Chapter, NavLink, PageContext, dump_items
from outline2book.traversal import Book


def make_render_data(
    book: Book,
    *,
    title: str | None = None,
    description: str | None = None,
    language: str = "en",
) -> dict[str, Any]:
    """Create the book-wide template context.

    ``chapters`` holds every item in reading order, serialized the same way
    :func:`outline2book.schemas.dump_items` does.
    """
    return {
        "language": language,
        "title": title,
        "description": description,
        "chapters": dump_items(list(book.iter())),
    }


def iter_pages(book: Book) -> Iterator[PageContext]:
    """Yield a render context for every page of the book, in reading order.

    Spacers and draft chapters produce no page and are skipped when linking
    previous and next pages.
    """
    pages = [item for item in book.iter() if _is_page(item)]
    for index, page in enumerate(pages):
        previous = pages[index - 1] if index > 0 else None
        following = pages[index + 1] if index + 1 < len(pages) else None
        yield PageContext(
            path=page.link,
            source_path=page.path,
            slug=page.path.stem,
            chapter_title=page.name,
            path_to_root=path_to_root(page.path),
            previous=_nav_link(previous),
            next=_nav_link(following),
        )


def path_to_root(path: Path) -> str:
    """Return the relative prefix that leads from ``path`` back to the book root.

    >>> path_to_root(Path("part1/ch1/index.md"))
    '../../'
    """
    return "../" * len(path.parent.parts)


def format_outline_tree(items: Sequence[BookItem], indent: int = 0) -> str:
    """Render the tree as indented plain text, four spaces per level."""
    lines: list[str] = []
    for item in items:
        prefix = " " * (indent * 4)
        if isinstance(item, Chapter):
            label = f"{item.section} {item.name}" if item.section else item.name
            target = item.path.as_posix() if item.path else "draft"
            lines.append(f"{prefix}{label} ({target})")
            if item.sub_items:
                lines.append(format_outline_tree(item.sub_items, indent + 1))
        elif isinstance(item, Affix):
            target = item.path.as_posix() if item.path else "draft"
            lines.append(f"{prefix}[{item.name}] ({target})")
        else:
            lines.append(f"{prefix}--------")
    return "\n".join(lines)


def _is_page(item: BookItem) -> bool:
    return isinstance(item, (Chapter, Affix)) and item.path is not None


def _nav_link(item: Chapter | Affix | None) -> NavLink | None:
    if item is None:
        return None
    return NavLink(title=item.name, link=item.link)
