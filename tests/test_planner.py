"""Unit tests for fetch planning.

Tests cover:
- split_range chunking
- Single-chapter passages (one query)
- Start and end partial chapters
- Whole-chapter chunking by chapters_per_query
- Whole books, including one-chapter books
"""

from __future__ import annotations

import pytest

from dailybread.fetch.planner import plan_queries, split_range
from dailybread.reference.cleaner import clean_passage_reference
from dailybread.reference.models import PassageReference, Reference
from dailybread.reference.parser import parse_passage_references


def plan(text: str, book, **kwargs) -> list[str]:
    """Parse, clean and plan the first reference in text."""
    raw = parse_passage_references(text)[0]
    return plan_queries(clean_passage_reference(raw, book), book, **kwargs)


class TestSplitRange:
    """Tests for split_range()."""

    def test_exact_multiple(self):
        assert split_range(1, 15, 5) == [(1, 5), (6, 10), (11, 15)]

    def test_remainder(self):
        assert split_range(1, 12, 5) == [(1, 5), (6, 10), (11, 12)]

    def test_single_number(self):
        assert split_range(7, 7, 5) == [(7, 7)]

    def test_shorter_than_chunk(self):
        assert split_range(2, 4, 5) == [(2, 4)]

    def test_empty_when_start_after_end(self):
        assert split_range(3, 2, 5) == []

    def test_chunks_cover_range_without_gaps(self):
        chunks = split_range(3, 48, 7)
        assert chunks[0][0] == 3
        assert chunks[-1][1] == 48
        for (_, last), (first, _) in zip(chunks, chunks[1:]):
            assert first == last + 1
        assert all(last - first + 1 <= 7 for first, last in chunks)

    def test_rejects_non_positive_chunk(self):
        with pytest.raises(ValueError):
            split_range(1, 10, 0)


class TestSingleChapter:
    """Passages inside one chapter need one query."""

    def test_verse_range(self, genesis):
        assert plan("Genesis 1:2-5", genesis) == ["Genesis 1:2-5"]

    def test_single_verse(self, genesis):
        assert plan("Genesis 1:2", genesis) == ["Genesis 1:2-2"]

    def test_whole_chapter(self, genesis):
        assert plan("Genesis 1", genesis) == ["Genesis 1:1-200"]

    def test_one_chapter_book_verses(self, obadiah):
        assert plan("Obadiah 2-4", obadiah) == ["Obadiah 1:2-4"]

    def test_one_chapter_book_whole(self, obadiah):
        assert plan("Obadiah", obadiah) == ["Obadiah 1:1-200"]

    def test_max_verse_number(self, genesis):
        assert plan("Genesis 1", genesis, max_verse_number=180) == [
            "Genesis 1:1-180"
        ]


class TestMultipleChapters:
    """Passages spanning chapters."""

    def test_partial_start_and_end(self, isaiah):
        assert plan("Isaiah 52:13-53:12", isaiah) == [
            "Isaiah 52:13-200",
            "Isaiah 53:1-12",
        ]

    def test_partial_ends_around_whole_chapter(self, genesis):
        assert plan("Genesis 1:2-3:4", genesis) == [
            "Genesis 1:2-200",
            "Genesis 2",
            "Genesis 3:1-4",
        ]

    def test_start_at_verse_one(self, genesis):
        assert plan("Genesis 1:1-3:4", genesis) == [
            "Genesis 1-2",
            "Genesis 3:1-4",
        ]

    def test_chapter_range_chunked(self, genesis):
        assert plan("Genesis 1-15", genesis) == [
            "Genesis 1-5",
            "Genesis 6-10",
            "Genesis 11-15",
        ]

    def test_chapter_range_remainder(self, genesis):
        assert plan("Genesis 1-6", genesis) == ["Genesis 1-5", "Genesis 6"]

    def test_chapters_per_query(self, genesis):
        assert plan("Genesis 1-6", genesis, chapters_per_query=2) == [
            "Genesis 1-2",
            "Genesis 3-4",
            "Genesis 5-6",
        ]

    def test_whole_book(self, genesis):
        queries = plan("Genesis", genesis)
        assert queries[0] == "Genesis 1-5"
        assert queries[-1] == "Genesis 46-50"
        assert len(queries) == 10

    def test_clamped_end_chapter(self, genesis):
        assert plan("Genesis 49-70", genesis) == ["Genesis 49-50"]


class TestPlanFromStructuredReference:
    """Planning works on references built without the parser."""

    def test_cleaned_reference(self, genesis):
        cleaned = PassageReference(
            "Genesis", Reference(chapter=5, verse=3), Reference(chapter=6, verse=1)
        )
        assert plan_queries(cleaned, genesis) == ["Genesis 5:3-200", "Genesis 6:1-1"]
