"""Book and version catalogs.

- books.py: Books with chapter counts, names and aliases per language
- versions.py: Supported text versions per language

Both load YAML data shipped under data/ and are treated as immutable once
loaded.
"""

from dailybread.catalog.books import (
    BookCatalog,
    BookData,
    Canon,
    Category,
    Language,
    Testament,
)
from dailybread.catalog.versions import VersionCatalog, VersionData

__all__ = [
    "BookCatalog",
    "BookData",
    "Canon",
    "Category",
    "Language",
    "Testament",
    "VersionCatalog",
    "VersionData",
]
