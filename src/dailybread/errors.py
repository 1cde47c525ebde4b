"""Exception taxonomy for passage resolution.

Every error raised by the library derives from DailyBreadError so callers
can catch the whole family in one place. Messages are meant to be shown
to the person who typed the reference.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dailybread.reference.models import PassageReference


class DailyBreadError(Exception):
    """Base class for all library errors."""

    pass


class UnsupportedVersionError(DailyBreadError):
    """Raised when a version abbreviation is not in the version catalog."""

    def __init__(self, abbreviation: str):
        self.abbreviation = abbreviation
        super().__init__(f"{abbreviation} is not a supported version")


class BookNotFoundError(DailyBreadError):
    """Raised when a book token matches nothing in the book catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid book: {name}")


class ValidationErrorKind(Enum):
    """Structural problems found while cleaning a reference."""

    MISSING_START_CHAPTER = "Missing start chapter"
    CHAPTER_NOT_FOUND = "Chapter not found"
    MUST_SPECIFY_END_VERSE = "Must specify end verse in end chapter"
    INVALID_START_VERSE = "Invalid start verse"
    INVALID_END_VERSE = "Invalid end verse"
    INVALID_CHAPTER_RANGE = "Invalid chapter range"
    INVALID_VERSE_RANGE = "Invalid verse range"


class ValidationError(DailyBreadError, ValueError):
    """Raised when a reference is structurally invalid for its book."""

    def __init__(
        self, kind: ValidationErrorKind, passage: PassageReference | None = None
    ):
        self.kind = kind
        self.passage = passage
        message = kind.value
        if passage is not None:
            message = f"{message}: {passage.book}"
        super().__init__(message)


class PassageNotFoundError(DailyBreadError):
    """Raised when a planned query comes back empty.

    ``query`` is None when there was nothing to look up at all.
    """

    def __init__(self, query: str | None = None):
        self.query = query
        if query is None:
            message = "Passage not found"
        else:
            message = f"Passage not found: {query}"
        super().__init__(message)


class CatalogError(DailyBreadError):
    """Raised when catalog data is malformed."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        full_message = f"[{key}] {message}" if key else message
        super().__init__(full_message)
