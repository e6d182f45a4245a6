"""Tests for reading chapter names from documents."""

from __future__ import annotations

from pathlib import Path

import pytest

from outline2book.exceptions import NameResolutionMiss
from outline2book.headings import read_first_heading


class TestReadFirstHeading:
    """Tests for read_first_heading function."""

    def test_reads_first_heading(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("Some text\n\n# Title\n\n## Second\n")

        assert read_first_heading(doc) == "Title"

    def test_strips_deeper_heading_markers(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("### Deep Title  \n")

        assert read_first_heading(doc) == "Deep Title"

    def test_skips_empty_heading(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("#\n# Real\n")

        assert read_first_heading(doc) == "Real"

    def test_indented_hash_is_not_a_heading(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("    # code comment\n")

        with pytest.raises(NameResolutionMiss, match="No heading"):
            read_first_heading(doc)

    def test_missing_document(self, tmp_path: Path) -> None:
        with pytest.raises(NameResolutionMiss, match="Cannot read"):
            read_first_heading(tmp_path / "missing.md")

    def test_handles_encoding_errors(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_bytes(b"\xff\xfe\n# Title\n")

        assert read_first_heading(doc) == "Title"
