"""Book item models."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field


def link_for(path: Path | None) -> str | None:
    """Return ``path`` without its file extension, using forward slashes."""
    if path is None:
        return None
    if path.suffix:
        path = path.with_suffix("")
    return path.as_posix()


class _Page(BaseModel):
    """Fields shared by every item that points at a content document."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    path: Path | None = None

    @computed_field
    @property
    def link(self) -> str | None:
        return link_for(self.path)


class Chapter(_Page):
    """A content page that may own child items.

    Attributes:
        name: Display name, possibly back-filled from the document heading.
        path: Document path relative to the book's source root, or None for a
            draft chapter that has no document yet.
        number: Hierarchical section number, e.g. ``(2, 1)`` for "2.1.".
        sub_items: Child items in reading order.
    """

    type: Literal["Chapter"] = "Chapter"
    number: tuple[int, ...] | None = None
    sub_items: list[BookItem] = Field(default_factory=list)

    @computed_field
    @property
    def section(self) -> str | None:
        if not self.number:
            return None
        return "".join(f"{part}." for part in self.number)

    def with_sub_items(self, items: list[BookItem]) -> Chapter:
        """Return a copy with ``items`` appended to the children."""
        return self.model_copy(update={"sub_items": [*self.sub_items, *items]})

    def prefixed(
        self, parent_path: Path, parent_number: tuple[int, ...] | None = None
    ) -> Chapter:
        """Return a copy re-rooted under ``parent_path``, descendants included.

        When ``parent_number`` is given, it is prepended to every numbered
        chapter in the subtree.
        """
        path = parent_path / self.path if self.path is not None else None
        number = self.number
        if parent_number is not None and number is not None:
            number = parent_number + number
        sub_items = [
            child.prefixed(parent_path, parent_number) if isinstance(child, Chapter) else child
            for child in self.sub_items
        ]
        return self.model_copy(update={"path": path, "number": number, "sub_items": sub_items})


class Affix(_Page):
    """Root-level front or back matter; never has children."""

    type: Literal["Affix"] = "Affix"

    @computed_field
    @property
    def sub_items(self) -> list[Any]:
        return []


class Spacer(BaseModel):
    """Root-level separator without content."""

    model_config = ConfigDict(frozen=True)

    type: Literal["Spacer"] = "Spacer"


BookItem = Annotated[Union[Chapter, Affix, Spacer], Field(discriminator="type")]

Chapter.model_rebuild()

_ITEMS_ADAPTER: TypeAdapter[list[BookItem]] = TypeAdapter(list[BookItem])


def dump_items(items: list[BookItem]) -> list[dict[str, Any]]:
    """Serialize book items into JSON-compatible data for templates."""
    return _ITEMS_ADAPTER.dump_python(items, mode="json")


def load_items(data: Any) -> list[BookItem]:
    """Rebuild book items from data produced by :func:`dump_items`."""
    return _ITEMS_ADAPTER.validate_python(data)
