"""Field extraction from CSL-JSON records."""

from __future__ import annotations

from typing import Any, Final, Mapping, Sequence

from RefSearch.core.models import CslItem

MISSING_YEAR: Final[str] = "0000"
CUSTOM_PREFIX: Final[str] = "custom."

# Query field specifier -> CSL-JSON field name.
FIELD_MAP: Final[Mapping[str, str]] = {
    "author": "author",
    "title": "title",
    "doi": "DOI",
    "pmid": "PMID",
    "pmcid": "PMCID",
    "id": "id",
}

# Identifier fields only match on whole-value, case-insensitive equality.
ID_FIELDS: Final[frozenset[str]] = frozenset({"DOI", "PMID", "PMCID", "URL", "ISBN", "id"})


def extract_year(reference: CslItem) -> str:
    """Return the first date-part of ``issued`` as a string, or ``"0000"``."""
    date_parts = _first_date_parts(reference)
    if date_parts:
        year = _as_int(date_parts[0])
        if year:
            return str(year)
    return MISSING_YEAR


def extract_date_parts(reference: CslItem) -> tuple[int, ...]:
    """Return the numeric prefix of ``issued.date-parts[0]`` (may be empty)."""
    parts: list[int] = []
    for part in _first_date_parts(reference):
        number = _as_int(part)
        if number is None:
            break
        parts.append(number)
    return tuple(parts)


def format_author(name: Any) -> str:
    """Format one CSL name as ``"family given"``.

    Names without a family part use ``literal`` when present, else ``given``.
    """
    if not isinstance(name, Mapping):
        return ""
    family = _as_str(name.get("family"))
    given = _as_str(name.get("given"))
    if not family:
        return _as_str(name.get("literal")) or given
    return f"{family} {given}" if given else family


def extract_authors(reference: CslItem) -> str:
    """Join all authors in listed order, separated by single spaces."""
    authors = reference.get("author")
    if not isinstance(authors, Sequence) or isinstance(authors, str):
        return ""
    return " ".join(formatted for formatted in map(format_author, authors) if formatted)


def get_custom(reference: CslItem) -> Mapping[str, Any]:
    """Return the ``custom`` extension mapping, or an empty mapping."""
    custom = reference.get("custom")
    return custom if isinstance(custom, Mapping) else {}


def get_string_list(reference: CslItem, field: str) -> list[str]:
    """Return string elements of an array field, skipping non-strings.

    ``field`` may name a top-level field (``keyword``) or a nested custom
    field (``custom.tags``).
    """
    if field.startswith(CUSTOM_PREFIX):
        value = get_custom(reference).get(field[len(CUSTOM_PREFIX):])
    else:
        value = reference.get(field)
    if not isinstance(value, Sequence) or isinstance(value, str):
        return []
    return [item for item in value if isinstance(item, str)]


def get_field_value(reference: CslItem, field: str) -> str | None:
    """Return a record field as a string.

    Args:
        reference: CSL-JSON record.
        field: CSL field name, ``year``, ``author`` or ``custom.<name>``.

    Returns:
        The field text, or None when the field is absent or not a string.
    """
    if field == "year":
        return extract_year(reference)
    if field == "author":
        return extract_authors(reference)

    value = reference.get(field)
    if isinstance(value, str):
        return value

    if field.startswith(CUSTOM_PREFIX):
        custom_value = get_custom(reference).get(field[len(CUSTOM_PREFIX):])
        if isinstance(custom_value, str):
            return custom_value

    return None


def _first_date_parts(reference: CslItem) -> Sequence[Any]:
    issued = reference.get("issued")
    if not isinstance(issued, Mapping):
        return ()
    date_parts = issued.get("date-parts")
    if not isinstance(date_parts, Sequence) or not date_parts:
        return ()
    first = date_parts[0]
    if not isinstance(first, Sequence) or isinstance(first, str):
        return ()
    return first


def _as_int(value: Any) -> int | None:
    # CSL-JSON from some exporters stores date parts as digit strings.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""
