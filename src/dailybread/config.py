"""Configuration settings for Daily Bread."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    """Application settings."""

    # Fetch planning
    # Upper bound on verse numbers used to mean "to the end of the chapter".
    # Must exceed the verse count of every real chapter (Psalm 119 has 176).
    max_verse_number: int = 200
    chapters_per_query: int = 5

    # Versions (None: the version catalog's _default)
    default_version: str | None = None

    # Catalog data (None: env override, then packaged YAML)
    books_path: Path | None = None
    versions_path: Path | None = None


@dataclass(frozen=True)
class FormattingOptions:
    """Options for the text handed back by a content source.

    Only ``paragraph_spacing`` matters to passage assembly; the remaining
    fields are passed through to the content source.
    """

    paragraph_spacing: int = 2
    """Newlines between paragraphs. 0 joins with a single space."""

    show_verse_numbers: bool = True
    """Render verse numbers as superscript numbers."""

    allow_unicode_punctuation: bool = True
    """If False, Unicode punctuation is converted to its ASCII equivalent."""

    preserve_small_caps: bool = False
    """Render small caps such as "LORD" with normal capitalization."""

    show_verse_number_for_verse_one: bool = False
    """Add the number 1 before the first verse of each chapter."""

    def __post_init__(self) -> None:
        if self.paragraph_spacing < 0:
            raise ValueError(
                f"paragraph_spacing must be >= 0, got {self.paragraph_spacing}"
            )

    @property
    def separator(self) -> str:
        """String placed between the texts of consecutive queries."""
        if self.paragraph_spacing == 0:
            return " "
        return "\n" * self.paragraph_spacing
