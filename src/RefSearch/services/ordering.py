"""Sorting and pagination of reference lists."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Final, Generic, Mapping, Sequence, TypeVar

from dateutil import parser as dt_parser

from RefSearch.core.models import CslItem
from RefSearch.search.fields import extract_date_parts, get_custom

T = TypeVar("T")

SORT_FIELDS: Final[tuple[str, ...]] = ("created", "updated", "published", "author", "title")
SEARCH_SORT_FIELDS: Final[tuple[str, ...]] = SORT_FIELDS + ("relevance",)
SORT_ORDERS: Final[tuple[str, ...]] = ("asc", "desc")

_SORT_ALIASES: Final[dict[str, str]] = {
    "pub": "published",
    "mod": "updated",
    "add": "created",
    "rel": "relevance",
}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One page of items.

    Attributes:
        items: Items on this page.
        next_offset: Offset of the next page, or None when nothing is left or
            the listing is unlimited.
    """

    items: list[T]
    next_offset: int | None


def resolve_sort_alias(name: str) -> str:
    """Resolve a sort field name or alias.

    Args:
        name: Sort field (``published``) or alias (``pub``).

    Returns:
        The full sort field name.

    Raises:
        ValueError: If ``name`` is neither a sort field nor an alias.
    """
    if name in SEARCH_SORT_FIELDS:
        return name
    resolved = _SORT_ALIASES.get(name)
    if resolved is None:
        raise ValueError(f"Unknown sort field: {name}")
    return resolved


def sort_references(items: Sequence[CslItem], sort: str, order: str) -> list[CslItem]:
    """Sort references by field and order.

    Ties fall back to created date (newest first) and then ``id`` ascending.

    Args:
        items: References to sort.
        sort: One of ``SORT_FIELDS``.
        order: ``asc`` or ``desc``.

    Returns:
        A new sorted list.

    Raises:
        ValueError: On unknown sort field or order.
    """
    if sort not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field: {sort}")
    if order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order: {order}")

    # Python's sort is stable: apply the tie-breakers first, the primary key last.
    ordered = sorted(items, key=lambda item: str(item.get("id", "")))
    ordered.sort(key=_created_at, reverse=True)
    ordered.sort(key=lambda item: _sort_value(item, sort), reverse=order == "desc")
    return ordered


def paginate(items: Sequence[T], *, limit: int = 0, offset: int = 0) -> Page[T]:
    """Apply offset then limit.

    Args:
        items: Full ordered item list.
        limit: Page size; 0 means unlimited.
        offset: Number of items to skip.

    Returns:
        The requested page.
    """
    after_offset = list(items[offset:])
    unlimited = limit == 0
    page_items = after_offset if unlimited else after_offset[:limit]

    next_offset = None
    if not unlimited and page_items:
        next_position = offset + len(page_items)
        if next_position < len(items):
            next_offset = next_position
    return Page(items=page_items, next_offset=next_offset)


def _sort_value(item: CslItem, sort: str) -> datetime | str:
    if sort == "created":
        return _created_at(item)
    if sort == "updated":
        return _updated_at(item)
    if sort == "published":
        return _published(item)
    if sort == "author":
        return _first_author_name(item).lower()
    title = item.get("title")
    return title.lower() if isinstance(title, str) else ""


def _created_at(item: CslItem) -> datetime:
    return _parse_timestamp(get_custom(item).get("created_at"))


def _updated_at(item: CslItem) -> datetime:
    timestamp = get_custom(item).get("timestamp")
    if timestamp:
        return _parse_timestamp(timestamp)
    return _created_at(item)


def _published(item: CslItem) -> datetime:
    parts = extract_date_parts(item)
    if not parts:
        return _EPOCH
    year = parts[0]
    month = parts[1] if len(parts) > 1 else 1
    day = parts[2] if len(parts) > 2 else 1
    try:
        return datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        return _EPOCH


def _first_author_name(item: CslItem) -> str:
    authors = item.get("author")
    if isinstance(authors, Sequence) and not isinstance(authors, str) and authors:
        first = authors[0]
        if isinstance(first, Mapping):
            for key in ("family", "literal"):
                name = first.get(key)
                if isinstance(name, str):
                    return name
    return "Anonymous"


def _parse_timestamp(value: object) -> datetime:
    if not isinstance(value, str) or not value.strip():
        return _EPOCH
    try:
        parsed = dt_parser.isoparse(value)
    except (ValueError, OverflowError):
        try:
            parsed = dt_parser.parse(value)
        except (ValueError, OverflowError):
            return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
