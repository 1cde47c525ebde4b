"""Book catalog loading and lookup.

Loads books.yaml: chapter counts, display names and aliases for every book
of the canon and the deuterocanon.

Design assumptions:
- books.yaml ships inside the package (DAILYBREAD_BOOKS_PATH env override)
- Abbreviations are language-independent lookup keys
- Display names and aliases are per language; a book without a name in the
  requested language falls back to its English name
- Lookup is case-insensitive and ignores repeated whitespace
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml

from dailybread.errors import BookNotFoundError, CatalogError

logger = logging.getLogger(__name__)

DEFAULT_BOOKS_PATH = Path(__file__).resolve().parent / "data" / "books.yaml"


class Language(Enum):
    """Languages with supported versions."""

    ENGLISH = "english"
    SPANISH = "spanish"
    CHINESE = "chinese"
    KOREAN = "korean"
    JAPANESE = "japanese"
    PORTUGUESE = "portuguese"
    FRENCH = "french"
    GERMAN = "german"
    ITALIAN = "italian"
    HINDI = "hindi"


class Testament(Enum):
    """The testament a book belongs to."""

    OLD = "old"
    NEW = "new"


class Canon(Enum):
    """The canon a book belongs to."""

    CANON = "canon"
    DEUTEROCANON = "deuterocanon"


class Category(Enum):
    """Traditional groupings of books."""

    INSTRUCTION = "instruction"
    PROPHETS = "prophets"
    FORMER_PROPHETS = "former_prophets"
    LATTER_PROPHETS = "latter_prophets"
    MINOR_PROPHETS = "minor_prophets"
    WRITINGS = "writings"
    POETIC = "poetic"
    SCROLLS = "scrolls"
    HISTORICAL = "historical"
    PENTATEUCH = "pentateuch"
    HISTORICAL_NARRATIVE = "historical_narrative"
    WISDOM = "wisdom"
    PROPHETIC = "prophetic"
    MAJOR_PROPHETS = "major_prophets"
    GOSPEL = "gospel"
    ACTS = "acts"
    EPISTLE = "epistle"
    APOCALYPTIC = "apocalyptic"
    SAPIENTAL = "sapiental"
    NOVEL = "novel"
    PHILOSOPHICAL = "philosophical"


def _lookup_key(name: str) -> str:
    return " ".join(name.split()).lower()


@dataclass(frozen=True)
class BookData:
    """Immutable facts about one book."""

    abbreviation: str
    names: dict[Language, str]
    testament: Testament
    chapters: int
    canon: Canon
    categories: tuple[Category, ...] = ()
    aliases: dict[Language, tuple[str, ...]] = field(default_factory=dict)

    @property
    def is_single_chapter(self) -> bool:
        """True if the book is addressed by verse only."""
        return self.chapters == 1

    def name(self, language: Language = Language.ENGLISH) -> str:
        """Display name in the given language (English fallback)."""
        return self.names.get(language) or self.names[Language.ENGLISH]

    @classmethod
    def from_dict(cls, key: str, data: dict, canon: Canon) -> "BookData":
        """Create BookData from a books.yaml entry."""
        raw_names = data.get("names") or {}
        if Language.ENGLISH.value not in raw_names:
            raise CatalogError("Missing required field: names.english", key)

        chapters = data.get("chapters")
        if not isinstance(chapters, int) or chapters < 1:
            raise CatalogError(f"Invalid chapter count: {chapters!r}", key)

        raw_aliases = data.get("aliases") or {}
        if not isinstance(raw_aliases, dict) or not all(
            isinstance(values, list) for values in raw_aliases.values()
        ):
            raise CatalogError("aliases must map each language to a list", key)

        try:
            names = {Language(lang): str(name) for lang, name in raw_names.items()}
            aliases = {
                Language(lang): tuple(str(alias) for alias in values)
                for lang, values in raw_aliases.items()
            }
            testament = Testament(data.get("testament", ""))
            categories = tuple(Category(c) for c in data.get("categories") or [])
        except ValueError as e:
            raise CatalogError(str(e), key) from e

        return cls(
            abbreviation=key,
            names=names,
            testament=testament,
            chapters=chapters,
            canon=canon,
            categories=categories,
            aliases=aliases,
        )


@dataclass
class BookCatalog:
    """All books, indexed for case-insensitive lookup.

    Canon and deuterocanon are kept apart so lookups can include the
    deuterocanon only for versions that carry it.
    """

    canon: dict[str, BookData] = field(default_factory=dict)
    deuterocanon: dict[str, BookData] = field(default_factory=dict)
    path: Path | None = None

    def __post_init__(self) -> None:
        self._canon_index = self._build_index(self.canon.values())
        self._deuterocanon_index = self._build_index(self.deuterocanon.values())

    @staticmethod
    def _build_index(books) -> dict[tuple[Language | None, str], BookData]:
        index: dict[tuple[Language | None, str], BookData] = {}
        for book in books:
            index[(None, _lookup_key(book.abbreviation))] = book
            for language, name in book.names.items():
                index[(language, _lookup_key(name))] = book
            for language, aliases in book.aliases.items():
                for alias in aliases:
                    index[(language, _lookup_key(alias))] = book
        return index

    @staticmethod
    def _search(index, key: str, language: Language) -> BookData | None:
        for candidate in ((None, key), (language, key), (Language.ENGLISH, key)):
            book = index.get(candidate)
            if book is not None:
                return book
        return None

    def lookup(
        self,
        name: str,
        language: Language = Language.ENGLISH,
        include_deuterocanon: bool = False,
    ) -> BookData | None:
        """Find a book by abbreviation, name or alias.

        Args:
            name: Book token (e.g., "GEN", "Genesis", "song of solomon")
            language: Language of names and aliases to match
            include_deuterocanon: Also search deuterocanonical books

        Returns:
            BookData, or None if not found
        """
        key = _lookup_key(name)
        book = self._search(self._canon_index, key, language)
        if book is None and include_deuterocanon:
            book = self._search(self._deuterocanon_index, key, language)
        return book

    def find(
        self,
        name: str,
        language: Language = Language.ENGLISH,
        include_deuterocanon: bool = False,
    ) -> BookData:
        """Like lookup(), but raises BookNotFoundError instead of returning None."""
        book = self.lookup(name, language, include_deuterocanon)
        if book is None:
            raise BookNotFoundError(name)
        return book

    def books(self, include_deuterocanon: bool = False) -> list[BookData]:
        """All books in canonical order."""
        books = list(self.canon.values())
        if include_deuterocanon:
            books.extend(self.deuterocanon.values())
        return books

    @classmethod
    def load(cls, path: Path | str | None = None) -> "BookCatalog":
        """Load the book catalog from YAML.

        Args:
            path: Path to books.yaml. If None, uses:
                  1. DAILYBREAD_BOOKS_PATH env var
                  2. books.yaml shipped with the package

        Raises:
            CatalogError: If the catalog is malformed
            FileNotFoundError: If the catalog file does not exist
        """
        if path is None:
            path = os.environ.get("DAILYBREAD_BOOKS_PATH") or DEFAULT_BOOKS_PATH
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Book catalog not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)

        if not isinstance(raw_data, dict):
            raise CatalogError("Book catalog must be a YAML mapping")

        sections: dict[Canon, dict[str, BookData]] = {}
        for canon in Canon:
            entries = raw_data.get(canon.value) or {}
            if not isinstance(entries, dict):
                raise CatalogError(f"Section '{canon.value}' must be a mapping")
            sections[canon] = {
                str(key): BookData.from_dict(str(key), value, canon)
                for key, value in entries.items()
            }

        catalog = cls(
            canon=sections[Canon.CANON],
            deuterocanon=sections[Canon.DEUTEROCANON],
            path=path,
        )
        logger.debug(
            f"Loaded {len(catalog.canon)} canon and "
            f"{len(catalog.deuterocanon)} deuterocanon books from {path}"
        )
        return catalog
