"""Daily Bread: resolve passage references and assemble their text."""

__version__ = "0.1.0"

from dailybread.config import FormattingOptions, Settings
from dailybread.errors import (
    BookNotFoundError,
    CatalogError,
    DailyBreadError,
    PassageNotFoundError,
    UnsupportedVersionError,
    ValidationError,
    ValidationErrorKind,
)
from dailybread.catalog import (
    BookCatalog,
    BookData,
    Language,
    VersionCatalog,
    VersionData,
)
from dailybread.reference import (
    PassageReference,
    Reference,
    clean_passage_reference,
    format_passage_reference,
    parse_passage_references,
)
from dailybread.fetch import (
    ContentSource,
    FixtureSource,
    Passage,
    RangeText,
    plan_queries,
)
from dailybread.reader import DailyBread, GetOptions

__all__ = [
    "FormattingOptions",
    "Settings",
    "BookNotFoundError",
    "CatalogError",
    "DailyBreadError",
    "PassageNotFoundError",
    "UnsupportedVersionError",
    "ValidationError",
    "ValidationErrorKind",
    "BookCatalog",
    "BookData",
    "Language",
    "VersionCatalog",
    "VersionData",
    "PassageReference",
    "Reference",
    "clean_passage_reference",
    "format_passage_reference",
    "parse_passage_references",
    "ContentSource",
    "FixtureSource",
    "Passage",
    "RangeText",
    "plan_queries",
    "DailyBread",
    "GetOptions",
]
