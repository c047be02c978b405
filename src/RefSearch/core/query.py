from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class FieldSpecifier(str, Enum):
    """Field prefixes recognized in ``field:value`` query fragments.

    ``isbn`` is intentionally absent: ``isbn:...`` is read as free text.
    """

    AUTHOR = "author"
    TITLE = "title"
    YEAR = "year"
    DOI = "doi"
    PMID = "pmid"
    PMCID = "pmcid"
    URL = "url"
    KEYWORD = "keyword"
    TAG = "tag"

    @classmethod
    def parse(cls, name: str) -> FieldSpecifier | None:
        """Return the specifier named exactly ``name``, or None."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class SearchToken:
    """One parsed element of a search query.

    Attributes:
        raw: Exact source substring consumed, including ``field:`` and quotes.
        value: Text compared against record fields.
        field: Field restriction from ``field:value`` syntax, if any.
        is_phrase: Whether the value was enclosed in double quotes.
    """

    raw: str
    value: str
    field: FieldSpecifier | None = None
    is_phrase: bool = False


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """Tokenized search query.

    Token order follows the source text; it carries no meaning for matching
    since tokens combine with AND.
    """

    original: str
    tokens: Sequence[SearchToken] = ()
