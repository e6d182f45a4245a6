"""Reading-order traversal of a compiled book."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

from outline2book.schemas import BookItem, Chapter


class BookItems:
    """Pre-order iterator over a tree of book items.

    Items are yielded front-to-back: each item is followed by its children
    before its next sibling. The tree is only read; the iterator keeps a
    cursor into the current list of siblings and a stack of the cursors it
    descended from.
    """

    def __init__(self, items: Sequence[BookItem]) -> None:
        self.items = items
        self.current_index = 0
        self.stack: list[tuple[Sequence[BookItem], int]] = []

    def __iter__(self) -> BookItems:
        return self

    def __next__(self) -> BookItem:
        while True:
            if self.current_index >= len(self.items):
                if not self.stack:
                    raise StopIteration
                self.items, parent_index = self.stack.pop()
                self.current_index = parent_index + 1
                continue

            current = self.items[self.current_index]
            if isinstance(current, Chapter) and current.sub_items:
                self.stack.append((self.items, self.current_index))
                self.items = current.sub_items
                self.current_index = 0
            else:
                self.current_index += 1
            return current


def iter_items(items: Sequence[BookItem]) -> BookItems:
    """Return a fresh pre-order iterator over ``items``."""
    return BookItems(items)


@dataclass
class Book:
    """A compiled book: its source directory and top-level items."""

    source_dir: Path
    items: list[BookItem] = field(default_factory=list)

    def iter(self) -> BookItems:
        return BookItems(self.items)

    def __iter__(self) -> Iterator[BookItem]:
        return self.iter()

    def chapter_count(self) -> int:
        """Count chapters at every depth."""
        return sum(1 for item in self.iter() if isinstance(item, Chapter))
