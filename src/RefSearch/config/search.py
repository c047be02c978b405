"""Search domain configuration: default ordering and page size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from RefSearch.config.common import (
    expect_choice,
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)
from RefSearch.services.ordering import SORT_ORDERS, resolve_sort_alias


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search defaults used when CLI options are omitted."""

    sort: str
    order: str
    limit: int


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed search configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the sort field or order is unknown.
    """
    section = get_section(raw, "search", required=False)
    sort_name = expect_str(get_optional_value(section, "sort", "relevance"), "search.sort").strip().lower()
    try:
        sort = resolve_sort_alias(sort_name)
    except ValueError as e:
        raise ValueError(f"search.sort: {e}") from e

    return SearchConfig(
        sort=sort,
        order=expect_choice(get_optional_value(section, "order", "desc"), SORT_ORDERS, "search.order"),
        limit=expect_int(get_optional_value(section, "limit", 0), "search.limit"),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if config.limit < 0:
        raise ValueError("search.limit must be 0 (unlimited) or positive")
