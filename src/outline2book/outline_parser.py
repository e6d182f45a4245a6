"""Compile outline files (SUMMARY.md) into a tree of book items."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from outline2book.config import (
    OUTLINE2BOOK_CONTENT_EXTENSION,
    OUTLINE2BOOK_INDEX_FILENAME,
    OUTLINE2BOOK_NUMBER_SECTIONS,
    OUTLINE2BOOK_STRICT_NESTED,
    OUTLINE2BOOK_SUMMARY_FILENAME,
    OUTLINE2BOOK_TAB_WIDTH,
)
from outline2book.exceptions import (
    MalformedOutlineError,
    NameResolutionMiss,
    NestedOutlineUnavailableError,
    OutlineError,
    OutlineNotFoundError,
)
from outline2book.headings import read_first_heading
from outline2book.outline_lines import AffixLine, ChapterLine, classify_line, line_depth
from outline2book.schemas import Affix, BookItem, Chapter, Spacer
from outline2book.traversal import Book

logger = logging.getLogger(__name__)


@dataclass
class OutlineOptions:
    """Options for outline compilation.

    Attributes:
        tab_width: Spaces per indentation level.
        summary_filename: Outline file looked up in book and chapter directories.
        index_filename: Document a directory-backed chapter points at.
        content_extension: Suffix forced onto chapter paths that are not directories.
        number_sections: If True, assign hierarchical section numbers to chapters.
        strict_nested: If True, a nested outline that exists but fails to compile
            aborts the whole compile instead of leaving the chapter childless.
    """

    tab_width: int = OUTLINE2BOOK_TAB_WIDTH
    summary_filename: str = OUTLINE2BOOK_SUMMARY_FILENAME
    index_filename: str = OUTLINE2BOOK_INDEX_FILENAME
    content_extension: str = OUTLINE2BOOK_CONTENT_EXTENSION
    number_sections: bool = OUTLINE2BOOK_NUMBER_SECTIONS
    strict_nested: bool = OUTLINE2BOOK_STRICT_NESTED


class OutlineParser:
    """Compile the lines of one outline file into book items.

    Paths in the outline are resolved against ``root_dir``. Outlines of
    directory-backed chapters are compiled by child parsers and spliced in
    with their paths re-rooted, so every path in the result is relative to
    ``root_dir``.
    """

    def __init__(
        self,
        root_dir: Path,
        options: OutlineOptions | None = None,
        *,
        ancestors: tuple[Path, ...] | None = None,
    ) -> None:
        self.root_dir = root_dir
        self.options = options or OutlineOptions()
        if ancestors is None:
            ancestors = ((root_dir / self.options.summary_filename).resolve(),)
        # Outline files currently being compiled, outermost first.
        self._ancestors = ancestors

    def parse(self, text: str) -> list[BookItem]:
        """Compile a whole outline document."""
        logger.debug("Parsing outline under %s", self.root_dir)
        items, _ = self.parse_level(text.splitlines(), 0, 0)
        logger.debug("Parsed %d top-level items under %s", len(items), self.root_dir)
        return items

    def parse_level(
        self,
        lines: Sequence[str],
        offset: int,
        current_depth: int,
        prefix: tuple[int, ...] = (),
        first_number: int = 1,
    ) -> tuple[list[BookItem], int]:
        """Compile consecutive lines at ``current_depth`` and everything nested below.

        Args:
            lines: All lines of the outline.
            offset: Index of the first line to read.
            current_depth: Indentation level handled by this call.
            prefix: Section number of the enclosing chapter.
            first_number: Section number given to the first chapter of this call.

        Returns:
            The items of this level and the offset of the first unread line.

        Raises:
            OutlineIndentationError: On a line with partial indentation.
            MalformedOutlineError: On a separator or affix below the root level,
                or on lines indented under anything but a chapter.
        """
        items: list[BookItem] = []
        # The latest chapter is held back until its children are known.
        pending: Chapter | None = None
        children: list[BookItem] = []
        next_number = first_number

        while offset < len(lines):
            line = lines[offset]
            depth = line_depth(line, self.options.tab_width)

            if depth < current_depth:
                break

            if depth > current_depth:
                if pending is None:
                    raise MalformedOutlineError(
                        f"Line {line.strip()!r} is indented but does not follow a chapter. "
                        "Only chapters can have nested items; separators and affixes "
                        "can only exist on the root level."
                    )
                logger.debug("Parsing deeper at level %d", depth)
                nested, offset = self.parse_level(
                    lines,
                    offset,
                    depth,
                    prefix=pending.number or (),
                    first_number=_count_chapters(pending.sub_items) + _count_chapters(children) + 1,
                )
                children.extend(nested)
                continue

            offset += 1
            entry = classify_line(line)
            if entry is None:
                continue

            if not isinstance(entry, ChapterLine) and current_depth > 0:
                raise MalformedOutlineError(
                    f"Line {line.strip()!r} is nested at level {current_depth}. "
                    "Separators and affixes can only exist on the root level."
                )

            if pending is not None:
                items.append(pending.with_sub_items(children))
                pending, children = None, []

            if isinstance(entry, ChapterLine):
                number = None
                if self.options.number_sections:
                    number = (*prefix, next_number)
                next_number += 1
                pending = self._resolve_chapter(entry, number)
            elif isinstance(entry, AffixLine):
                items.append(Affix(name=entry.name, path=_optional_path(entry.path)))
            else:
                items.append(Spacer())

        if pending is not None:
            items.append(pending.with_sub_items(children))
        return items, offset

    def _resolve_chapter(self, entry: ChapterLine, number: tuple[int, ...] | None) -> Chapter:
        path = _optional_path(entry.path)
        if path is None:
            logger.debug("Chapter %r has no target; keeping it as a draft", entry.name)
            return Chapter(name=entry.name, number=number)

        full_path = self.root_dir / path
        sub_items: list[BookItem] = []
        if full_path.is_dir():
            sub_items = self._compose_nested(full_path, path, number)
            path = path / self.options.index_filename
            full_path = full_path / self.options.index_filename
        else:
            path = path.with_suffix(self.options.content_extension)
            full_path = full_path.with_suffix(self.options.content_extension)

        name = entry.name
        if not name and full_path.is_file():
            try:
                name = read_first_heading(full_path)
            except NameResolutionMiss as exc:
                logger.debug("Leaving chapter name empty: %s", exc)

        return Chapter(name=name, path=path, number=number, sub_items=sub_items)

    def _compose_nested(
        self, directory: Path, path: Path, number: tuple[int, ...] | None
    ) -> list[BookItem]:
        outline_path = directory / self.options.summary_filename
        if not outline_path.is_file():
            logger.debug("No outline at %s; %s has no sub-items", outline_path, path)
            return []

        try:
            items = self._compile_nested(outline_path)
        except NestedOutlineUnavailableError as exc:
            if self.options.strict_nested:
                raise
            logger.warning("%s; %s will have no sub-items", exc, path)
            return []

        return [item.prefixed(path, number) for item in items]

    def _compile_nested(self, outline_path: Path) -> list[Chapter]:
        resolved = outline_path.resolve()
        if resolved in self._ancestors:
            raise NestedOutlineUnavailableError(outline_path, "outline includes itself")

        try:
            text = outline_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise NestedOutlineUnavailableError(outline_path, str(exc)) from exc

        parser = OutlineParser(
            outline_path.parent, self.options, ancestors=(*self._ancestors, resolved)
        )
        try:
            items = parser.parse(text)
        except OutlineError as exc:
            raise NestedOutlineUnavailableError(outline_path, str(exc)) from exc

        chapters: list[Chapter] = []
        for item in items:
            if not isinstance(item, Chapter):
                raise NestedOutlineUnavailableError(
                    outline_path, f"{item.type} items cannot be nested below the root level"
                )
            chapters.append(item)
        return chapters


def _optional_path(raw: str) -> Path | None:
    raw = raw.strip()
    return Path(raw) if raw else None


def _count_chapters(items: list[BookItem]) -> int:
    return sum(1 for item in items if isinstance(item, Chapter))


def parse_summary(
    text: str, root_dir: Path, options: OutlineOptions | None = None
) -> list[BookItem]:
    """Compile outline text whose paths are relative to ``root_dir``."""
    return OutlineParser(root_dir, options).parse(text)


def load_outline(summary_path: Path, options: OutlineOptions | None = None) -> list[BookItem]:
    """Read and compile an outline file.

    Paths in the outline are resolved against the file's directory.

    Raises:
        OutlineNotFoundError: If ``summary_path`` is not a file.
        OutlineError: If the outline cannot be compiled.
    """
    if not summary_path.is_file():
        raise OutlineNotFoundError(f"Outline file not found: {summary_path}")
    text = summary_path.read_text(encoding="utf-8")
    parser = OutlineParser(summary_path.parent, options, ancestors=(summary_path.resolve(),))
    return parser.parse(text)


def load_book(source_dir: Path, options: OutlineOptions | None = None) -> Book:
    """Compile the outline at the root of a book source directory."""
    opts = options or OutlineOptions()
    items = load_outline(source_dir / opts.summary_filename, opts)
    return Book(source_dir=source_dir, items=items)
