"""Reference data models.

A PassageReference is a book plus two endpoints. Each endpoint may carry a
chapter, a verse, both, or neither; an endpoint with neither means
"unspecified, defaults apply".
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Reference:
    """One endpoint (start or end) of a passage range."""

    chapter: int | None = None
    verse: int | None = None

    @property
    def is_empty(self) -> bool:
        """True if neither chapter nor verse is set."""
        return self.chapter is None and self.verse is None

    def to_dict(self) -> dict:
        """Serialize to dictionary, omitting unset fields."""
        data = {}
        if self.chapter is not None:
            data["chapter"] = self.chapter
        if self.verse is not None:
            data["verse"] = self.verse
        return data


@dataclass(frozen=True)
class PassageReference:
    """A candidate passage: book token plus start and end endpoints.

    Raw references come out of the parser (or from callers) with the book
    exactly as typed. Cleaned references hold the book's display name and
    canonical endpoints; see ``clean_passage_reference``.
    """

    book: str
    start: Reference = field(default_factory=Reference)
    end: Reference = field(default_factory=Reference)

    @property
    def is_whole_book(self) -> bool:
        """True if both endpoints are empty."""
        return self.start.is_empty and self.end.is_empty

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "book": self.book,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }
