from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

from RefSearch.core.query import SearchToken

# A bibliographic record in CSL-JSON form. Records are owned by the caller and
# are never mutated by RefSearch.
CslItem = Mapping[str, Any]


class MatchStrength(str, Enum):
    """How strongly a token or record matched."""

    EXACT = "exact"
    PARTIAL = "partial"
    NONE = "none"

    @property
    def rank(self) -> int:
        return _STRENGTH_RANK[self]


_STRENGTH_RANK = {
    MatchStrength.EXACT: 2,
    MatchStrength.PARTIAL: 1,
    MatchStrength.NONE: 0,
}


@dataclass(frozen=True, slots=True)
class FieldMatch:
    """A single record field that satisfied a token.

    Attributes:
        field: Record field name (e.g. ``DOI``, ``custom.additional_urls``).
        strength: ``EXACT`` for whole-value equality, ``PARTIAL`` otherwise.
        value: Matched text; for array fields, the matching element.
    """

    field: str
    strength: MatchStrength
    value: str


@dataclass(frozen=True, slots=True)
class TokenMatch:
    """All fields of one record that satisfied one token."""

    token: SearchToken
    matches: Sequence[FieldMatch]

    @property
    def strength(self) -> MatchStrength:
        if any(m.strength is MatchStrength.EXACT for m in self.matches):
            return MatchStrength.EXACT
        return MatchStrength.PARTIAL


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A record accepted by every token of a query.

    Attributes:
        reference: The matched record.
        token_matches: One entry per query token, in token order.
        overall_strength: Strongest per-token strength.
        score: ``100 + len(tokens)`` for exact results, ``50 + len(tokens)``
            for partial ones.
    """

    reference: CslItem
    token_matches: Sequence[TokenMatch]
    overall_strength: MatchStrength
    score: int

    @property
    def matched_fields(self) -> tuple[str, ...]:
        """Distinct matched field names in first-seen order."""
        seen: dict[str, None] = {}
        for token_match in self.token_matches:
            for match in token_match.matches:
                seen.setdefault(match.field, None)
        return tuple(seen)
