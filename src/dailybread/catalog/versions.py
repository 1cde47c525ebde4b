"""Version catalog loading and lookup.

Loads versions.yaml: the text versions that can be read, grouped by
language. Lookup is case-insensitive on the abbreviation.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from dailybread.catalog.books import Language
from dailybread.errors import CatalogError, UnsupportedVersionError

logger = logging.getLogger(__name__)

DEFAULT_VERSIONS_PATH = Path(__file__).resolve().parent / "data" / "versions.yaml"


@dataclass(frozen=True)
class VersionData:
    """A supported version of the text."""

    abbreviation: str
    name: str
    language: Language
    deuterocanon: bool = False
    """True if the version includes the deuterocanon."""


@dataclass
class VersionCatalog:
    """All supported versions keyed by lowercase abbreviation."""

    versions_by_key: dict[str, VersionData] = field(default_factory=dict)
    default: str | None = None
    path: Path | None = None

    def lookup(self, abbreviation: str) -> VersionData | None:
        """Find a version by abbreviation (e.g., NIV, esv, Msg)."""
        return self.versions_by_key.get(abbreviation.strip().lower())

    def find(self, abbreviation: str) -> VersionData:
        """Like lookup(), but raises UnsupportedVersionError."""
        version = self.lookup(abbreviation)
        if version is None:
            raise UnsupportedVersionError(abbreviation)
        return version

    def versions(self, language: Language | None = None) -> list[VersionData]:
        """Supported versions in catalog order, optionally for one language."""
        return [
            v
            for v in self.versions_by_key.values()
            if language is None or v.language == language
        ]

    @classmethod
    def load(cls, path: Path | str | None = None) -> "VersionCatalog":
        """Load the version catalog from YAML.

        Args:
            path: Path to versions.yaml. If None, uses:
                  1. DAILYBREAD_VERSIONS_PATH env var
                  2. versions.yaml shipped with the package

        Raises:
            CatalogError: If the catalog is malformed
            FileNotFoundError: If the catalog file does not exist
        """
        if path is None:
            path = os.environ.get("DAILYBREAD_VERSIONS_PATH") or DEFAULT_VERSIONS_PATH
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Version catalog not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)

        if not isinstance(raw_data, dict):
            raise CatalogError("Version catalog must be a YAML mapping")

        versions: dict[str, VersionData] = {}
        for language_key, entries in raw_data.items():
            # Skip special keys like _default
            if str(language_key).startswith("_"):
                continue

            try:
                language = Language(language_key)
            except ValueError as e:
                raise CatalogError(f"Unknown language '{language_key}'") from e

            for abbreviation, value in (entries or {}).items():
                abbreviation = str(abbreviation)
                value = value or {}
                name = value.get("name", "")
                if not name:
                    raise CatalogError("Missing required field: name", abbreviation)
                versions[abbreviation.lower()] = VersionData(
                    abbreviation=abbreviation,
                    name=name,
                    language=language,
                    deuterocanon=bool(value.get("deuterocanon", False)),
                )

        default = raw_data.get("_default")
        if default is not None and default.lower() not in versions:
            raise CatalogError(f"Default version '{default}' is not in the catalog")

        logger.debug(f"Loaded {len(versions)} versions from {path}")
        return cls(versions_by_key=versions, default=default, path=path)
