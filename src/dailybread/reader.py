"""Passage reader: the public entry point for looking up passages.

DailyBread ties the pieces together. For each requested reference it
resolves the book in the active version's language, cleans the reference,
formats its label, plans range queries and assembles the text through the
active content source.

Version and formatting are reader state. Each call to get(), get_one() or
verse_of_the_day() takes one snapshot of that state before any request is
issued, so changing it between calls never affects a call in progress.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Union

from dailybread.catalog.books import BookCatalog, BookData
from dailybread.catalog.versions import VersionCatalog, VersionData
from dailybread.config import FormattingOptions, Settings
from dailybread.errors import CatalogError, PassageNotFoundError
from dailybread.fetch.assembler import fetch_passage, gather_passages
from dailybread.fetch.planner import plan_queries
from dailybread.fetch.source import ContentSource, Passage
from dailybread.reference.cleaner import clean_passage_reference
from dailybread.reference.formatter import format_passage_reference
from dailybread.reference.models import PassageReference
from dailybread.reference.parser import parse_passage_references

logger = logging.getLogger(__name__)

SingleInput = Union[str, PassageReference]
PassageInput = Union[SingleInput, Sequence[SingleInput]]

SourceFactory = Callable[[VersionData, FormattingOptions], ContentSource]


@dataclass(frozen=True)
class GetOptions:
    """Options for a multi-passage lookup."""

    strict: bool = False
    """Fail the whole call if any passage fails, instead of dropping it."""


@dataclass(frozen=True)
class _Snapshot:
    version: VersionData
    formatting: FormattingOptions
    source: ContentSource


def references_from_input(passage: PassageInput) -> list[PassageReference]:
    """Normalize caller input into a flat list of raw references.

    Strings are parsed (one string may hold several references), structured
    references pass through unchanged, and lists are flattened in order.
    """
    if isinstance(passage, str):
        return parse_passage_references(passage)
    if isinstance(passage, PassageReference):
        return [passage]

    references: list[PassageReference] = []
    for item in passage:
        if isinstance(item, str):
            references.extend(parse_passage_references(item))
        elif isinstance(item, PassageReference):
            references.append(item)
        else:
            raise TypeError(
                f"Expected str or PassageReference, got {type(item).__name__}"
            )
    return references


class DailyBread:
    """API for reading passages.

    Example:
        >>> reader = DailyBread(lambda version, formatting: my_source)
        >>> passages = await reader.get("John 3:16; Obadiah 1-4")
    """

    def __init__(
        self,
        source_factory: SourceFactory,
        *,
        settings: Settings | None = None,
        books: BookCatalog | None = None,
        versions: VersionCatalog | None = None,
        formatting: FormattingOptions | None = None,
    ):
        """Initialize reader.

        Args:
            source_factory: Builds a content source for a version and
                formatting; called again whenever either changes
            settings: Planning limits and defaults
            books: Book catalog (loaded if not provided)
            versions: Version catalog (loaded if not provided)
            formatting: Initial formatting options
        """
        self.settings = settings or Settings()
        self.books = books or BookCatalog.load(self.settings.books_path)
        self.versions = versions or VersionCatalog.load(self.settings.versions_path)
        self._source_factory = source_factory
        self._formatting = formatting or FormattingOptions()
        default_version = self.settings.default_version or self.versions.default
        if default_version is None:
            raise CatalogError("No default version configured")
        self._version = self.versions.find(default_version)
        self._source = self._source_factory(self._version, self._formatting)

    def is_supported_version(self, abbreviation: str) -> bool:
        """Check if a version abbreviation (e.g., NIV, ESV) is supported."""
        return self.versions.lookup(abbreviation) is not None

    def get_version(self) -> VersionData:
        """Get the version currently used for reading."""
        return self._version

    def set_version(self, abbreviation: str) -> None:
        """Set the version used for reading.

        Raises:
            UnsupportedVersionError: If the version is not supported; the
                current version is kept
        """
        version = self.versions.find(abbreviation)
        self._source = self._source_factory(version, self._formatting)
        self._version = version
        logger.info(f"Reading from {version.abbreviation} ({version.name})")

    def get_formatting(self) -> FormattingOptions:
        """Get the formatting options for returned passages."""
        return self._formatting

    def set_formatting(self, **options) -> None:
        """Set formatting options for returned passages.

        Options not given take their default value, not their current one.

        Raises:
            TypeError: For unknown option names
        """
        formatting = dataclasses.replace(FormattingOptions(), **options)
        self._source = self._source_factory(self._version, formatting)
        self._formatting = formatting

    def get_book(self, name: str) -> BookData | None:
        """Find a book by name, abbreviation or alias in the active version."""
        return self.books.lookup(
            name, self._version.language, self._version.deuterocanon
        )

    async def get(
        self, passage: PassageInput, options: GetOptions | None = None
    ) -> list[Passage]:
        """Get one or more passages.

        Args:
            passage: Reference string (may hold several references), a
                PassageReference, or a list of either
            options: Failure policy; lenient by default

        Returns:
            Resolved passages in input order. In lenient mode, passages
            that fail are left out.
        """
        options = options or GetOptions()
        snapshot = self._snapshot()
        references = references_from_input(passage)
        return await gather_passages(
            [self._get_passage(ref, snapshot) for ref in references],
            strict=options.strict,
        )

    async def get_one(self, passage: PassageInput) -> Passage:
        """Get the first passage found in the input.

        Raises:
            PassageNotFoundError: If the input holds no reference
            DailyBreadError: If the first reference cannot be resolved
        """
        snapshot = self._snapshot()
        references = references_from_input(passage)
        if not references:
            raise PassageNotFoundError()
        return await self._get_passage(references[0], snapshot)

    async def verse_of_the_day(self) -> Passage:
        """Get the content source's featured passage."""
        return await self._snapshot().source.fetch_featured()

    def _snapshot(self) -> _Snapshot:
        return _Snapshot(self._version, self._formatting, self._source)

    async def _get_passage(
        self, passage: PassageReference, snapshot: _Snapshot
    ) -> Passage:
        version = snapshot.version
        book = self.books.find(passage.book, version.language, version.deuterocanon)

        cleaned = clean_passage_reference(passage, book, version.language)
        queries = plan_queries(
            cleaned,
            book,
            max_verse_number=self.settings.max_verse_number,
            chapters_per_query=self.settings.chapters_per_query,
        )
        return await fetch_passage(
            format_passage_reference(cleaned),
            queries,
            snapshot.source,
            separator=snapshot.formatting.separator,
        )
