"""Shared fixtures for dailybread tests."""

from __future__ import annotations

import pytest

from dailybread.catalog.books import BookCatalog, BookData
from dailybread.catalog.versions import VersionCatalog


@pytest.fixture(scope="session")
def books() -> BookCatalog:
    """Book catalog shipped with the package."""
    return BookCatalog.load()


@pytest.fixture(scope="session")
def versions() -> VersionCatalog:
    """Version catalog shipped with the package."""
    return VersionCatalog.load()


@pytest.fixture
def genesis(books) -> BookData:
    """A multi-chapter book (50 chapters)."""
    return books.find("GEN")


@pytest.fixture
def obadiah(books) -> BookData:
    """A one-chapter book."""
    return books.find("OBA")


@pytest.fixture
def isaiah(books) -> BookData:
    """A long book (66 chapters)."""
    return books.find("ISA")
