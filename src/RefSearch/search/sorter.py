"""Relevance ordering for search results."""

from __future__ import annotations

from typing import Mapping, Sequence

from RefSearch.core.models import CslItem, SearchResult
from RefSearch.search.fields import extract_year


def sort_results(results: Sequence[SearchResult]) -> list[SearchResult]:
    """Sort results for display by relevance.

    Order: match strength (exact first), year (newest first, undated last),
    first author family name, title, then original position. Records missing
    an author or title sort after those that have one.

    Args:
        results: Results as returned by ``search``.

    Returns:
        A new sorted list; ``results`` is left untouched.
    """
    indexed = list(enumerate(results))
    indexed.sort(key=lambda pair: _relevance_key(pair[1], pair[0]))
    return [result for _, result in indexed]


def _relevance_key(result: SearchResult, index: int) -> tuple:
    reference = result.reference
    author = _first_author_family(reference).lower()
    title = _title(reference).lower()
    return (
        -result.overall_strength.rank,
        -int(extract_year(reference)),
        author == "",
        author,
        title == "",
        title,
        index,
    )


def _first_author_family(reference: CslItem) -> str:
    authors = reference.get("author")
    if not isinstance(authors, Sequence) or isinstance(authors, str) or not authors:
        return ""
    first = authors[0]
    if not isinstance(first, Mapping):
        return ""
    family = first.get("family")
    return family if isinstance(family, str) else ""


def _title(reference: CslItem) -> str:
    title = reference.get("title")
    return title if isinstance(title, str) else ""
