"""Base classes for output writers.

Separates command control flow from output formatting for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from RefSearch.services.search import SearchPage


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_page(self, page: SearchPage, query: str) -> None:
        """Write one page of search results.

        Args:
            page: Matched references with match details.
            query: The raw query that produced the page.
        """

    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """

