"""Passage reference parsing for free-text input.

Extracts every reference found in a string. References may be separated
by any punctuation or whitespace:

- Book alone: "Genesis", "1 Samuel", "1KGS"
- Chapter: "Exodus 20"
- Chapter range: "Leviticus 1-11"
- Verse: "Numbers 12:13"
- Verse range: "Deuteronomy 9:25-29"
- Range across chapters: "Judges 6:11-8:35"
- Several at once: "Mark 4:26-29; Luke 7:41-43, Matthew 5:14-15"

Output is raw: the book is the token as typed and nothing is validated.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from dailybread.reference.models import PassageReference, Reference

# Book token: "Psalm 151" (its name ends in a number) or an optional
# leading ordinal followed by a run of non-digit, non-separator characters.
# Then: chapter[:verse][-chapter-or-verse[:verse]]
PASSAGE_REFERENCE_PATTERN = re.compile(
    r"(?P<book>psalm\s*151|(?:\d+\s*)?[^\s\d:,;.\-][^\d:,;.\-]*)"
    r"\s*(?:(?P<from_chapter>\d+)(?::(?P<from_verse>\d+))?"
    r"(?:\s*-\s*(?P<to_chapter>\d+)(?::(?P<to_verse>\d+))?)?)?",
    re.IGNORECASE,
)


def _normalize_dashes(text: str) -> str:
    """Replace en-dash and em-dash with a hyphen."""
    return text.replace("–", "-").replace("—", "-")


def _to_int(value: str | None) -> int | None:
    return int(value) if value else None


def iter_passage_references(text: str) -> Iterator[PassageReference]:
    """Yield raw passage references in order of occurrence.

    Args:
        text: Free text holding zero or more references

    Yields:
        Unvalidated PassageReference objects
    """
    for match in PASSAGE_REFERENCE_PATTERN.finditer(_normalize_dashes(text)):
        from_chapter = _to_int(match.group("from_chapter"))
        from_verse = _to_int(match.group("from_verse"))
        to_chapter = _to_int(match.group("to_chapter"))
        to_verse = _to_int(match.group("to_verse"))

        if to_chapter is not None and from_verse is not None and to_verse is None:
            # "7:1-17": the third number ends a verse range in the same chapter
            to_chapter, to_verse = from_chapter, to_chapter

        yield PassageReference(
            book=match.group("book").strip(),
            start=Reference(chapter=from_chapter, verse=from_verse),
            end=Reference(chapter=to_chapter, verse=to_verse),
        )


def parse_passage_references(text: str) -> list[PassageReference]:
    """Parse all passage references found in the given string.

    Examples:
        >>> [ref.book for ref in parse_passage_references("2 sam 7:1-17; Obadiah")]
        ['2 sam', 'Obadiah']

        >>> parse_passage_references("9001")
        []
    """
    return list(iter_passage_references(text))
