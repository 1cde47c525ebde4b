"""Passage reference parsing, cleaning and formatting."""

from dailybread.reference.models import PassageReference, Reference
from dailybread.reference.parser import (
    iter_passage_references,
    parse_passage_references,
)
from dailybread.reference.cleaner import clean_passage_reference
from dailybread.reference.formatter import format_passage_reference, format_reference

__all__ = [
    "PassageReference",
    "Reference",
    "iter_passage_references",
    "parse_passage_references",
    "clean_passage_reference",
    "format_passage_reference",
    "format_reference",
]
