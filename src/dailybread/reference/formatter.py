"""Render cleaned passage references as display strings."""

from __future__ import annotations

from dailybread.reference.models import PassageReference, Reference


def format_reference(reference: Reference) -> str:
    """Format one endpoint as "chapter[:verse]", "verse", or ""."""
    if reference.chapter is not None:
        if reference.verse is not None:
            return f"{reference.chapter}:{reference.verse}"
        return str(reference.chapter)
    if reference.verse is not None:
        return str(reference.verse)
    return ""


def format_passage_reference(passage: PassageReference) -> str:
    """Format a cleaned passage reference.

    Args:
        passage: Reference previously returned by clean_passage_reference

    Returns:
        Display string like "Genesis", "Genesis 1:1-2:2" or "Obadiah 1-2"
    """
    label = passage.book
    if not passage.start.is_empty:
        label += f" {format_reference(passage.start)}"
    if not passage.end.is_empty:
        label += f"-{format_reference(passage.end)}"
    return label
