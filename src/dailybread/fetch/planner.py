"""Fetch planning: split a cleaned passage into bounded range queries.

A content source limits how much text one request may cover, so a long
passage is fetched as several queries and joined afterwards:

1. start-partial: "<book> <start>:<verse>-<max>", only if the passage does
   not start at verse 1 of its first chapter
2. whole chapters, at most ``chapters_per_query`` per query ("<book> 6-10")
3. end-partial: "<book> <end>:1-<verse>", only if the passage stops before
   the end of its last chapter

Text is joined in planned order, so the order of the returned queries
matters.
"""

from __future__ import annotations

from dailybread.catalog.books import BookData
from dailybread.reference.models import PassageReference

DEFAULT_MAX_VERSE_NUMBER = 200
DEFAULT_CHAPTERS_PER_QUERY = 5


def split_range(start: int, end: int, chunk_size: int) -> list[tuple[int, int]]:
    """Split the inclusive range [start, end] into consecutive chunks.

    Args:
        start: First number (inclusive)
        end: Last number (inclusive)
        chunk_size: Maximum length of each chunk

    Returns:
        Fewest ascending (first, last) pairs covering the range; empty if
        start > end

    Raises:
        ValueError: If chunk_size is not positive
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    ranges = []
    while end - start + 1 > chunk_size:
        ranges.append((start, start + chunk_size - 1))
        start += chunk_size
    if start <= end:
        ranges.append((start, end))
    return ranges


def plan_queries(
    passage: PassageReference,
    book: BookData,
    max_verse_number: int = DEFAULT_MAX_VERSE_NUMBER,
    chapters_per_query: int = DEFAULT_CHAPTERS_PER_QUERY,
) -> list[str]:
    """Plan the range queries needed to fetch a cleaned passage.

    Args:
        passage: Cleaned reference (book holds the display name)
        book: Facts for the passage's book
        max_verse_number: Verse number larger than any chapter's last verse
        chapters_per_query: Maximum whole chapters per query

    Returns:
        Query strings in the order their text must be joined
    """
    name = passage.book
    start, end = passage.start, passage.end

    start_chapter = start.chapter if start.chapter is not None else 1
    if end.chapter is not None:
        end_chapter = end.chapter
    elif start.chapter is not None:
        end_chapter = start.chapter
    else:
        end_chapter = book.chapters
    start_verse = start.verse if start.verse is not None else 1
    if end.verse is not None:
        end_verse = end.verse
    elif start.verse is not None:
        end_verse = start.verse
    else:
        end_verse = max_verse_number

    if start_chapter == end_chapter:
        return [f"{name} {start_chapter}:{start_verse}-{end_verse}"]

    head: list[str] = []
    tail: list[str] = []

    if start_verse != 1:
        head.append(f"{name} {start_chapter}:{start_verse}-{max_verse_number}")
        start_chapter += 1
    if end_verse != max_verse_number:
        tail.append(f"{name} {end_chapter}:1-{end_verse}")
        end_chapter -= 1

    chapters = [
        f"{name} {first}" if first == last else f"{name} {first}-{last}"
        for first, last in split_range(start_chapter, end_chapter, chapters_per_query)
    ]
    return head + chapters + tail
