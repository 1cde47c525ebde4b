"""Fetch planning and passage assembly.

- planner.py: Split cleaned passages into bounded range queries
- source.py: Content source interface and fixture implementation
- assembler.py: Concurrent query issue, ordered join, strict/lenient policy
"""

from dailybread.fetch.planner import (
    DEFAULT_CHAPTERS_PER_QUERY,
    DEFAULT_MAX_VERSE_NUMBER,
    plan_queries,
    split_range,
)
from dailybread.fetch.source import ContentSource, FixtureSource, Passage, RangeText
from dailybread.fetch.assembler import fetch_passage, gather_passages

__all__ = [
    "DEFAULT_CHAPTERS_PER_QUERY",
    "DEFAULT_MAX_VERSE_NUMBER",
    "plan_queries",
    "split_range",
    "ContentSource",
    "FixtureSource",
    "Passage",
    "RangeText",
    "fetch_passage",
    "gather_passages",
]
