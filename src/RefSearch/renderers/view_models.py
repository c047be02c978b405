"""View models for output rendering.

Display-oriented structures that keep presentation concerns out of the raw
CSL-JSON records. Used by OutputWriter implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class ReferenceView:
    """Reference view model for output rendering.

    Attributes:
        id: Citation key.
        title: Title, empty when missing.
        authors: Formatted author names ("family given" or literal).
        year: Publication year, or None when undated.
        container_title: Journal/book title if any.
        doi: Digital Object Identifier if any.
        url: Primary URL if any.
        uuid: Library-internal UUID if any.
        matched_fields: Record fields that satisfied the query, if known.
        token_fields: Per query token, its raw text and the fields it matched.
    """

    id: str
    title: str
    authors: Sequence[str]
    year: str | None
    container_title: str | None
    doi: str | None
    url: str | None
    uuid: str | None
    matched_fields: Sequence[str] = ()
    token_fields: Sequence[tuple[str, Sequence[str]]] = ()
