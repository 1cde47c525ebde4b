"""Validation and normalization of raw passage references.

Cleaning rewrites a raw reference into canonical form against the facts of
one book:

- the book token becomes the book's display name
- one-chapter books are addressed by verse only (chapter numbers are read
  as verse numbers, except 1 which means "no explicit chapter")
- redundant end fields are dropped (same chapter, same verse)
- an end chapter past the end of the book is clamped to the last chapter
- an end verse without a start verse implies start verse 1

Cleaning is pure and idempotent: the input is never modified, and
cleaning a cleaned reference returns an equal reference.
"""

from __future__ import annotations

from dailybread.catalog.books import BookData, Language
from dailybread.errors import ValidationError, ValidationErrorKind
from dailybread.reference.models import PassageReference, Reference


def clean_passage_reference(
    passage: PassageReference,
    book: BookData,
    language: Language = Language.ENGLISH,
) -> PassageReference:
    """Clean and validate a passage reference.

    Args:
        passage: Raw reference (book token as typed)
        book: Facts for the book the token resolved to
        language: Language used for the display name

    Returns:
        New, cleaned PassageReference

    Raises:
        ValidationError: If the reference is structurally invalid for the book
    """
    name = book.name(language)

    if passage.is_whole_book:
        return PassageReference(book=name)

    from_chapter, from_verse = passage.start.chapter, passage.start.verse
    to_chapter, to_verse = passage.end.chapter, passage.end.verse

    def fail(kind: ValidationErrorKind) -> ValidationError:
        return ValidationError(
            kind, PassageReference(name, passage.start, passage.end)
        )

    if book.is_single_chapter:
        # Chapter numbers address verses; chapter 1 is the book itself
        if from_chapter is not None:
            if from_chapter != 1:
                from_verse = from_chapter
            from_chapter = None
        if to_chapter is not None:
            if to_chapter != 1:
                to_verse = to_chapter
            to_chapter = None
        if from_verse is None and to_verse is None:
            return PassageReference(book=name)
    else:
        if from_chapter is None:
            raise fail(ValidationErrorKind.MISSING_START_CHAPTER)
        if not 1 <= from_chapter <= book.chapters:
            raise fail(ValidationErrorKind.CHAPTER_NOT_FOUND)

        clamped = False
        if to_chapter == from_chapter:
            to_chapter = None
        elif to_chapter is not None and to_chapter > book.chapters:
            to_chapter = book.chapters
            to_verse = None
            clamped = True
            if to_chapter == from_chapter:
                to_chapter = None

        if (
            from_verse is not None
            and to_verse is None
            and (to_chapter is not None or clamped)
        ):
            raise fail(ValidationErrorKind.MUST_SPECIFY_END_VERSE)

    if from_verse is not None and from_verse < 1:
        raise fail(ValidationErrorKind.INVALID_START_VERSE)
    if to_verse is not None and to_verse < 1:
        raise fail(ValidationErrorKind.INVALID_END_VERSE)

    if to_verse is not None:
        if from_verse is None:
            from_verse = 1
        if to_chapter is None and to_verse == from_verse:
            to_verse = None

    if to_chapter is not None and to_chapter < from_chapter:
        raise fail(ValidationErrorKind.INVALID_CHAPTER_RANGE)
    if to_chapter is None and to_verse is not None and to_verse < from_verse:
        raise fail(ValidationErrorKind.INVALID_VERSE_RANGE)

    return PassageReference(
        book=name,
        start=Reference(chapter=from_chapter, verse=from_verse),
        end=Reference(chapter=to_chapter, verse=to_verse),
    )
