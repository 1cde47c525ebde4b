"""Content source interface for range text retrieval.

A content source answers one range query ("Genesis 1:1-5", "Genesis 6-10")
with the text of that range. Retrieval and markup handling live entirely
behind this interface.

Provides:
- ContentSource: Protocol every source implements
- FixtureSource: In-memory source for tests and offline use
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml

from dailybread.errors import CatalogError, PassageNotFoundError


@dataclass(frozen=True)
class RangeText:
    """Text returned for one range query."""

    text: str


@dataclass(frozen=True)
class Passage:
    """A passage ready to print continuously."""

    reference: str
    text: str


@runtime_checkable
class ContentSource(Protocol):
    """Protocol for range text providers."""

    async def fetch_range(self, query: str) -> Sequence[RangeText]:
        """Fetch the text of one contiguous range.

        Args:
            query: Range expression like "Genesis 1:1-5" or "Genesis 6-10"

        Returns:
            Matching texts; empty if nothing matches the query
        """
        ...

    async def fetch_featured(self) -> Passage:
        """Fetch the featured passage (verse of the day)."""
        ...


@dataclass
class FixtureSource:
    """Content source backed by a fixed query -> text mapping.

    Query matching is exact apart from letter case. Every issued query is
    recorded in ``issued``, in issue order.
    """

    ranges: dict[str, str] = field(default_factory=dict)
    featured: Passage | None = None
    issued: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._texts = {query.lower(): text for query, text in self.ranges.items()}

    async def fetch_range(self, query: str) -> list[RangeText]:
        self.issued.append(query)
        text = self._texts.get(query.lower())
        if text is None:
            return []
        return [RangeText(text=text)]

    async def fetch_featured(self) -> Passage:
        if self.featured is None:
            raise PassageNotFoundError()
        return self.featured

    @classmethod
    def from_dict(cls, data: Mapping) -> "FixtureSource":
        """Create from a mapping with ``ranges`` and optional ``featured``.

        Raises:
            CatalogError: If the mapping does not have that shape
        """
        if not isinstance(data, Mapping):
            raise CatalogError("Fixture data must be a mapping")
        ranges = data.get("ranges") or {}
        if not isinstance(ranges, Mapping):
            raise CatalogError("ranges must map each query to its text")
        featured = data.get("featured")
        if featured and (
            not isinstance(featured, Mapping)
            or set(featured) != {"reference", "text"}
        ):
            raise CatalogError("featured must have exactly reference and text")
        return cls(
            ranges={str(k): str(v) for k, v in ranges.items()},
            featured=Passage(**featured) if featured else None,
        )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "FixtureSource":
        """Load a fixture file.

        Format:
            ranges:
              "Genesis 1:1-3": "In the beginning..."
            featured:
              reference: John 3:16
              text: For God so loved the world...
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)
