"""Search service layer over an in-memory reference library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from RefSearch.core.models import CslItem, SearchResult
from RefSearch.search.matcher import search
from RefSearch.search.sorter import sort_results
from RefSearch.search.tokenizer import tokenize
from RefSearch.services.ordering import (
    SORT_ORDERS,
    paginate,
    resolve_sort_alias,
    sort_references,
)
from RefSearch.utils.log import log


@dataclass(frozen=True, slots=True)
class SearchPage:
    """Paginated outcome of a library search.

    Attributes:
        items: Matched references on this page, in display order.
        total: Number of matches before pagination.
        limit: Applied limit (0 means unlimited).
        offset: Applied offset.
        next_offset: Offset of the next page, or None.
        results: Match details for ``items`` (same order); empty when the
            query was blank and every reference was listed.
    """

    items: list[CslItem]
    total: int
    limit: int
    offset: int
    next_offset: int | None
    results: list[SearchResult] = field(default_factory=list)


@dataclass(slots=True)
class ReferenceSearchService:
    """Application service that searches a reference library."""

    references: Sequence[CslItem]

    def search(
        self,
        query: str,
        *,
        sort: str = "updated",
        order: str = "desc",
        limit: int = 0,
        offset: int = 0,
    ) -> SearchPage:
        """Search the library.

        A blank query lists every reference.

        Args:
            query: Raw query string.
            sort: Sort field or alias; ``relevance`` uses the match ranking.
            order: ``asc`` or ``desc``.
            limit: Page size, 0 for unlimited.
            offset: Number of matches to skip.

        Returns:
            The requested page of matches.

        Raises:
            ValueError: On unknown sort field/order or negative limit/offset.
        """
        sort = resolve_sort_alias(sort)
        if order not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {order}")
        if limit < 0 or offset < 0:
            raise ValueError("limit and offset must not be negative")

        results: list[SearchResult] = []
        if not query.strip():
            matched = list(self.references)
            log.debug("Blank query, listing %d references", len(matched))
        else:
            parsed = tokenize(query)
            results = search(self.references, parsed.tokens)
            log.debug("Query %r: %d tokens, %d matches", query, len(parsed.tokens), len(results))
            if sort == "relevance":
                results = sort_results(results)
                if order == "asc":
                    results.reverse()
            matched = [result.reference for result in results]

        if sort != "relevance":
            matched = sort_references(matched, sort, order)
            if results:
                results = _reorder_results(results, matched)

        page = paginate(matched, limit=limit, offset=offset)
        page_results = results[offset:offset + len(page.items)] if results else []
        log.info("Matched %d of %d references", len(matched), len(self.references))
        return SearchPage(
            items=page.items,
            total=len(matched),
            limit=limit,
            offset=offset,
            next_offset=page.next_offset,
            results=page_results,
        )


def _reorder_results(results: Sequence[SearchResult], ordered: Sequence[CslItem]) -> list[SearchResult]:
    """Arrange results to follow an already sorted reference order."""
    by_identity = {id(result.reference): result for result in results}
    return [by_identity[id(item)] for item in ordered]
