"""Mapper for converting CSL-JSON records to ReferenceView display models."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Sequence

from RefSearch.core.models import CslItem, SearchResult
from RefSearch.renderers.view_models import ReferenceView
from RefSearch.search.fields import MISSING_YEAR, extract_year, format_author, get_custom
from RefSearch.services.search import SearchPage


def map_reference_to_view(reference: CslItem, matched_fields: Sequence[str] = ()) -> ReferenceView:
    """Map a record to its view model.

    Args:
        reference: CSL-JSON record.
        matched_fields: Field names that matched the query.

    Returns:
        ReferenceView with missing data left as None/empty.
    """
    authors = reference.get("author")
    names: list[str] = []
    if isinstance(authors, Sequence) and not isinstance(authors, str):
        names = [name for name in map(format_author, authors) if name]

    year = extract_year(reference)
    return ReferenceView(
        id=_str_or_none(reference.get("id")) or "",
        title=_str_or_none(reference.get("title")) or "",
        authors=tuple(names),
        year=None if year == MISSING_YEAR else year,
        container_title=_str_or_none(reference.get("container-title")),
        doi=_str_or_none(reference.get("DOI")),
        url=_str_or_none(reference.get("URL")),
        uuid=_str_or_none(get_custom(reference).get("uuid")),
        matched_fields=tuple(matched_fields),
    )


def map_result_to_view(result: SearchResult) -> ReferenceView:
    """Map a search result, keeping matched field names overall and per token."""
    view = map_reference_to_view(result.reference, result.matched_fields)
    token_fields = tuple(
        (tm.token.raw, tuple(dict.fromkeys(m.field for m in tm.matches)))
        for tm in result.token_matches
    )
    return replace(view, token_fields=token_fields)


def map_page_to_views(page: SearchPage) -> list[ReferenceView]:
    """Map a search page; uses match details when the page has them."""
    if page.results:
        return [map_result_to_view(r) for r in page.results]
    return [map_reference_to_view(item) for item in page.items]


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None
