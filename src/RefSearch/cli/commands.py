"""Command implementations for RefSearch CLI.

Encapsulates business logic for commands like search, separated from CLI
parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from RefSearch.renderers import OutputWriter
from RefSearch.services.search import ReferenceSearchService, SearchPage
from RefSearch.utils.log import log


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Resolved options for one search invocation."""

    query: str
    sort: str
    order: str
    limit: int
    offset: int


@dataclass(slots=True)
class SearchCommand:
    """Encapsulates search command business logic.

    Runs the query through the search service and delegates rendering to the
    configured OutputWriter.
    """

    search_service: ReferenceSearchService
    output_writer: OutputWriter
    options: SearchOptions

    def execute(self) -> SearchPage:
        """Execute the search and write the resulting page.

        Returns:
            The page that was written.
        """
        opts = self.options
        log.info(
            "query=%r sort=%s order=%s limit=%d offset=%d",
            opts.query,
            opts.sort,
            opts.order,
            opts.limit,
            opts.offset,
        )

        page = self.search_service.search(
            opts.query,
            sort=opts.sort,
            order=opts.order,
            limit=opts.limit,
            offset=opts.offset,
        )
        log.info("Found %d references (showing %d)", page.total, len(page.items))

        self.output_writer.write_page(page, opts.query)
        return page
