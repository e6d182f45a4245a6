"""Tests for book item models and their serialized form."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from outline2book.schemas import Affix, Chapter, Spacer, dump_items, link_for, load_items


class TestLinkFor:
    """Tests for link_for function."""

    @pytest.mark.parametrize(
        ("path", "link"),
        [
            (Path("intro.md"), "intro"),
            (Path("ch1/index.md"), "ch1/index"),
            (Path("LICENSE"), "LICENSE"),
            (None, None),
        ],
    )
    def test_strips_extension(self, path: Path | None, link: str | None) -> None:
        assert link_for(path) == link


class TestDumpItems:
    """Tests for serializing items for the template layer."""

    def test_chapter_fields(self) -> None:
        chapter = Chapter(
            name="Ch1",
            path=Path("ch1/index.md"),
            number=(1,),
            sub_items=[Chapter(name="Sub", path=Path("ch1/sub.md"), number=(1, 1))],
        )

        (data,) = dump_items([chapter])

        assert data["type"] == "Chapter"
        assert data["name"] == "Ch1"
        assert data["path"] == "ch1/index.md"
        assert data["link"] == "ch1/index"
        assert data["section"] == "1."
        assert data["sub_items"][0]["link"] == "ch1/sub"
        assert data["sub_items"][0]["section"] == "1.1."

    def test_affix_has_empty_sub_items(self) -> None:
        (data,) = dump_items([Affix(name="Preface", path=Path("preface.md"))])

        assert data == {
            "type": "Affix",
            "name": "Preface",
            "path": "preface.md",
            "link": "preface",
            "sub_items": [],
        }

    def test_spacer_is_a_bare_tag(self) -> None:
        assert dump_items([Spacer()]) == [{"type": "Spacer"}]

    def test_output_is_json_serializable(self) -> None:
        data = dump_items([Chapter(name="A", path=Path("a.md")), Spacer()])

        assert json.loads(json.dumps(data)) == data


class TestLoadItems:
    """Tests for rebuilding items from their serialized form."""

    def test_restores_variants_and_order(self) -> None:
        items = [
            Affix(name="Preface", path=Path("preface.md")),
            Chapter(
                name="A",
                path=Path("a.md"),
                number=(1,),
                sub_items=[
                    Chapter(name="A1", path=Path("a/1.md"), number=(1, 1)),
                    Chapter(name="A2", path=None, number=(1, 2)),
                ],
            ),
            Spacer(),
        ]

        restored = load_items(json.loads(json.dumps(dump_items(items))))

        assert restored == items
        assert isinstance(restored[0], Affix)
        assert isinstance(restored[2], Spacer)

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            load_items([{"type": "Part", "name": "x"}])


class TestChapter:
    """Tests for chapter helpers."""

    def test_items_are_frozen(self) -> None:
        chapter = Chapter(name="A", path=Path("a.md"))

        with pytest.raises(ValidationError):
            chapter.name = "B"

    def test_prefixed_rewrites_descendants(self) -> None:
        chapter = Chapter(
            name="Sub",
            path=Path("sub.md"),
            number=(1,),
            sub_items=[Chapter(name="Leaf", path=Path("leaf.md"), number=(1, 1))],
        )

        moved = chapter.prefixed(Path("ch1"), (3,))

        assert moved.path == Path("ch1/sub.md")
        assert moved.number == (3, 1)
        assert moved.sub_items[0].path == Path("ch1/leaf.md")
        assert moved.sub_items[0].number == (3, 1, 1)
        assert chapter.path == Path("sub.md")

    def test_prefixed_keeps_draft_without_path(self) -> None:
        assert Chapter(name="Draft").prefixed(Path("ch1")).path is None

    def test_with_sub_items_appends(self) -> None:
        chapter = Chapter(name="A", sub_items=[Chapter(name="A1")])

        extended = chapter.with_sub_items([Chapter(name="A2")])

        assert [child.name for child in extended.sub_items] == ["A1", "A2"]
        assert len(chapter.sub_items) == 1
