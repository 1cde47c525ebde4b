"""Passage assembly: issue planned queries and join their text.

Single passage: all planned queries go out concurrently and their texts are
joined in planned order, whatever order they complete in. A query that
comes back empty fails the whole passage; a gap cannot be told apart from
a wrong answer, so no partial text is ever returned.

Several passages: resolved concurrently, then either all-or-nothing
(strict) or best-effort (lenient, failed passages are dropped).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Sequence

from dailybread.errors import PassageNotFoundError
from dailybread.fetch.source import ContentSource, Passage

logger = logging.getLogger(__name__)


async def _fetch_one(source: ContentSource, query: str) -> str:
    results = await source.fetch_range(query)
    if not results:
        raise PassageNotFoundError(query)
    return results[0].text


async def fetch_passage(
    reference: str,
    queries: Sequence[str],
    source: ContentSource,
    separator: str = "\n\n",
) -> Passage:
    """Fetch and join the text for one planned passage.

    Args:
        reference: Display label for the passage
        queries: Planned range queries, in join order
        source: Content source to query
        separator: Placed between the texts of consecutive queries

    Returns:
        Passage labelled with ``reference``

    Raises:
        PassageNotFoundError: If any query returns no text
    """
    logger.debug(f"Fetching {reference} with {len(queries)} queries")
    texts = await asyncio.gather(*(_fetch_one(source, q) for q in queries))
    return Passage(reference=reference, text=separator.join(texts))


async def gather_passages(
    resolutions: Sequence[Awaitable[Passage]],
    strict: bool = False,
) -> list[Passage]:
    """Resolve several passages concurrently.

    Args:
        resolutions: One awaitable per requested passage, in input order
        strict: If True, the first failure fails the whole call. Other
            resolutions still in flight are left to finish and their
            results are discarded. If False, failed passages are dropped.

    Returns:
        Resolved passages in input order
    """
    if strict:
        return list(await asyncio.gather(*resolutions))

    results = await asyncio.gather(*resolutions, return_exceptions=True)
    passages = []
    for index, result in enumerate(results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            logger.warning(f"Dropping passage #{index + 1}: {result}")
            continue
        passages.append(result)
    return passages
