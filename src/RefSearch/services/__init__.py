"""Search service layer for RefSearch.

Wraps the pure search engine with library loading, ordering and pagination,
and provides a factory for component creation.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from RefSearch.services.ordering import Page, paginate, resolve_sort_alias, sort_references
from RefSearch.services.search import ReferenceSearchService, SearchPage
from RefSearch.storage.library import load_library
from RefSearch.utils.log import log

if TYPE_CHECKING:
    from RefSearch.config import AppConfig


def create_search_service(config: AppConfig, library_path: Path | None = None) -> ReferenceSearchService:
    """Create a search service over the configured library file.

    Args:
        config: Application configuration containing the library location.
        library_path: Optional path overriding ``config.library.path``.

    Returns:
        Search service holding the loaded references.

    Raises:
        LibraryError: If the library file cannot be read.
    """
    path = library_path or Path(config.library.path)
    references = load_library(path)
    log.info("Loaded %d references from %s", len(references), path)
    return ReferenceSearchService(references=references)


__all__ = [
    "Page",
    "ReferenceSearchService",
    "SearchPage",
    "create_search_service",
    "paginate",
    "resolve_sort_alias",
    "sort_references",
]
