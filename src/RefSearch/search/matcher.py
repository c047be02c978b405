"""Token-to-record matching and result aggregation.

Match rules per field kind:

- identifier fields (DOI, PMID, PMCID, ISBN, id): whole value, case-insensitive,
  ``EXACT``
- ``url``: primary URL or any ``custom.additional_urls`` entry, verbatim,
  ``EXACT``
- ``year``: derived year string equality, ``EXACT``
- ``keyword`` / ``tag``: first array element passing the uppercase-aware
  substring test, ``PARTIAL``
- other text fields: uppercase-aware substring test on normalized text,
  ``PARTIAL``

Tokens combine with AND. A record matched by at least one ``EXACT`` token is an
exact result.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, Iterable, Sequence

from RefSearch.core.models import CslItem, FieldMatch, MatchStrength, SearchResult, TokenMatch
from RefSearch.core.query import FieldSpecifier, SearchToken
from RefSearch.search.fields import (
    FIELD_MAP,
    ID_FIELDS,
    extract_year,
    get_custom,
    get_field_value,
    get_string_list,
)
from RefSearch.search.normalizer import normalize_preserving_case
from RefSearch.search.uppercase import match_with_uppercase_sensitivity

EXACT_SCORE_BASE: Final[int] = 100
PARTIAL_SCORE_BASE: Final[int] = 50

# Fields searched, besides the special ones, when a token has no field prefix.
STANDARD_SEARCH_FIELDS: Final[tuple[str, ...]] = (
    "id",
    "title",
    "author",
    "container-title",
    "publisher",
    "DOI",
    "PMID",
    "PMCID",
    "abstract",
)

FieldMatcher = Callable[[str, CslItem], FieldMatch | None]


def match_url(value: str, reference: CslItem) -> FieldMatch | None:
    """Match a URL against ``URL`` and then ``custom.additional_urls``."""
    url = reference.get("URL")
    if isinstance(url, str) and url == value:
        return FieldMatch(field="URL", strength=MatchStrength.EXACT, value=url)

    additional = get_custom(reference).get("additional_urls")
    if isinstance(additional, Sequence) and not isinstance(additional, str):
        for item in additional:
            if isinstance(item, str) and item == value:
                return FieldMatch(field="custom.additional_urls", strength=MatchStrength.EXACT, value=item)
    return None


def match_year(value: str, reference: CslItem) -> FieldMatch | None:
    """Match the derived publication year exactly."""
    year = extract_year(reference)
    if year == value:
        return FieldMatch(field="year", strength=MatchStrength.EXACT, value=year)
    return None


def match_keyword(value: str, reference: CslItem) -> FieldMatch | None:
    """Match the first ``keyword`` element containing the value."""
    return _match_array(value, get_string_list(reference, "keyword"), "keyword")


def match_tag(value: str, reference: CslItem) -> FieldMatch | None:
    """Match the first ``custom.tags`` element containing the value."""
    return _match_array(value, get_string_list(reference, "custom.tags"), "tag")


def match_field_value(field: str, value: str, reference: CslItem) -> FieldMatch | None:
    """Match an identifier or text field.

    Args:
        field: CSL field name (already resolved through ``FIELD_MAP``).
        value: Token value.
        reference: Record to test.

    Returns:
        An ``EXACT`` match for equal identifiers, a ``PARTIAL`` match for text
        fields containing the value, otherwise None.
    """
    field_value = get_field_value(reference, field)
    if field_value is None:
        return None

    if field in ID_FIELDS:
        if field_value.upper() == value.upper():
            return FieldMatch(field=field, strength=MatchStrength.EXACT, value=field_value)
        return None

    normalized_field = normalize_preserving_case(field_value)
    normalized_query = normalize_preserving_case(value)
    if match_with_uppercase_sensitivity(normalized_query, normalized_field):
        return FieldMatch(field=field, strength=MatchStrength.PARTIAL, value=field_value)
    return None


_SPECIAL_MATCHERS: Final[dict[FieldSpecifier, FieldMatcher]] = {
    FieldSpecifier.URL: match_url,
    FieldSpecifier.YEAR: match_year,
    FieldSpecifier.KEYWORD: match_keyword,
    FieldSpecifier.TAG: match_tag,
}

# Order used when a token has no field prefix.
_ALL_FIELDS_SPECIAL: Final[tuple[FieldMatcher, ...]] = (match_year, match_url, match_keyword, match_tag)


def match_token(token: SearchToken, reference: CslItem) -> list[FieldMatch]:
    """Return every field of ``reference`` that satisfies ``token``.

    A field-restricted token yields at most one match. A free token is tested
    against the special fields and ``STANDARD_SEARCH_FIELDS`` and may match
    several of them.
    """
    if token.field is not None:
        return _match_specific_field(token.field, token.value, reference)
    return _match_all_fields(token.value, reference)


def match_reference(reference: CslItem, tokens: Sequence[SearchToken]) -> SearchResult | None:
    """Match one record against all tokens with AND semantics.

    Args:
        reference: Record to test.
        tokens: Parsed query tokens.

    Returns:
        A SearchResult when every token matches at least one field; None when
        any token fails or when ``tokens`` is empty.
    """
    if not tokens:
        return None

    token_matches: list[TokenMatch] = []
    overall = MatchStrength.NONE
    for token in tokens:
        matches = match_token(token, reference)
        if not matches:
            return None

        token_match = TokenMatch(token=token, matches=tuple(matches))
        if token_match.strength is MatchStrength.EXACT:
            overall = MatchStrength.EXACT
        elif overall is MatchStrength.NONE:
            overall = MatchStrength.PARTIAL
        token_matches.append(token_match)

    base = EXACT_SCORE_BASE if overall is MatchStrength.EXACT else PARTIAL_SCORE_BASE
    return SearchResult(
        reference=reference,
        token_matches=tuple(token_matches),
        overall_strength=overall,
        score=base + len(token_matches),
    )


def search(references: Iterable[CslItem], tokens: Sequence[SearchToken]) -> list[SearchResult]:
    """Return results for all matching records, in input order."""
    results: list[SearchResult] = []
    for reference in references:
        result = match_reference(reference, tokens)
        if result is not None:
            results.append(result)
    return results


def _match_specific_field(field: FieldSpecifier, value: str, reference: CslItem) -> list[FieldMatch]:
    special = _SPECIAL_MATCHERS.get(field)
    if special is not None:
        match = special(value, reference)
    else:
        match = match_field_value(FIELD_MAP.get(field.value, field.value), value, reference)
    return [match] if match is not None else []


def _match_all_fields(value: str, reference: CslItem) -> list[FieldMatch]:
    matches: list[FieldMatch] = []
    for matcher in _ALL_FIELDS_SPECIAL:
        match = matcher(value, reference)
        if match is not None:
            matches.append(match)
    for field in STANDARD_SEARCH_FIELDS:
        match = match_field_value(field, value, reference)
        if match is not None:
            matches.append(match)
    return matches


def _match_array(value: str, elements: Iterable[str], field: str) -> FieldMatch | None:
    normalized_query = normalize_preserving_case(value)
    for element in elements:
        if match_with_uppercase_sensitivity(normalized_query, normalize_preserving_case(element)):
            return FieldMatch(field=field, strength=MatchStrength.PARTIAL, value=element)
    return None
