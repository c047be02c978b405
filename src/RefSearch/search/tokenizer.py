"""Search query tokenizer.

Query syntax (whitespace separated):

- ``machine``: free text, searched in all fields
- ``"machine learning"``: phrase, searched in all fields
- ``author:Smith``: field-restricted value
- ``title:"deep learning"``: field-restricted phrase

Malformed fragments never raise. Unknown field prefixes are read as free text
(colon included), ``field:`` with nothing after it is dropped, empty quotes are
dropped, and an unclosed quote is read as free text starting at the quote.
"""

from __future__ import annotations

from RefSearch.core.query import FieldSpecifier, ParsedQuery, SearchToken
from RefSearch.utils.log import log

_QUOTE = '"'

_Scan = tuple[SearchToken | None, int]


def tokenize(query: str) -> ParsedQuery:
    """Parse a raw query string into tokens.

    Args:
        query: Raw query text as typed by the user.

    Returns:
        Parsed query with tokens in source order (possibly none).
    """
    tokens: list[SearchToken] = []
    i = 0
    while i < len(query):
        if query[i].isspace():
            i += 1
            continue
        token, i = _parse_next_token(query, i)
        if token is not None:
            tokens.append(token)

    log.debug("Tokenized query %r into %d tokens", query, len(tokens))
    return ParsedQuery(original=query, tokens=tuple(tokens))


def _parse_next_token(query: str, start: int) -> _Scan:
    field_result = _try_parse_field_value(query, start)
    if field_result is not None:
        return field_result
    if query[start] == _QUOTE:
        return _parse_quoted_token(query, start)
    return _parse_regular_token(query, start)


def _try_parse_field_value(query: str, start: int) -> _Scan | None:
    """Parse ``field:value`` at ``start``; None when the text is not one."""
    colon = query.find(":", start)
    if colon == -1 or _has_whitespace(query, start, colon):
        return None

    field = FieldSpecifier.parse(query[start:colon])
    if field is None:
        return None

    after_colon = colon + 1
    if after_colon >= len(query) or query[after_colon].isspace():
        return None, after_colon

    if query[after_colon] == _QUOTE:
        value, next_index = _parse_quoted_value(query, after_colon)
        if value is None:
            # Empty or unclosed quote: reread as ordinary text.
            return None
        token = SearchToken(
            raw=query[start:next_index],
            value=value,
            field=field,
            is_phrase=True,
        )
        return token, next_index

    value, next_index = _parse_unquoted_value(query, after_colon)
    token = SearchToken(raw=query[start:next_index], value=value, field=field)
    return token, next_index


def _parse_quoted_token(query: str, start: int) -> _Scan:
    value, next_index = _parse_quoted_value(query, start)
    if value is not None:
        return SearchToken(raw=query[start:next_index], value=value, is_phrase=True), next_index

    if next_index > start:
        # Empty quotes
        return None, next_index

    text, next_index = _parse_unquoted_value(query, start, include_quotes=True)
    return SearchToken(raw=text, value=text), next_index


def _parse_regular_token(query: str, start: int) -> _Scan:
    text, next_index = _parse_unquoted_value(query, start)
    return SearchToken(raw=text, value=text), next_index


def _parse_quoted_value(query: str, start: int) -> tuple[str | None, int]:
    """Read a double-quoted value starting at the opening quote.

    Returns:
        ``(value, index after closing quote)``; ``(None, index after closing
        quote)`` for blank quotes; ``(None, start)`` when the quote is unclosed.
    """
    if query[start] != _QUOTE:
        return None, start

    closing = query.find(_QUOTE, start + 1)
    if closing == -1:
        return None, start

    value = query[start + 1:closing]
    if not value.strip():
        return None, closing + 1
    return value, closing + 1


def _parse_unquoted_value(query: str, start: int, *, include_quotes: bool = False) -> tuple[str, int]:
    i = start
    while i < len(query) and not query[i].isspace():
        if not include_quotes and query[i] == _QUOTE:
            break
        i += 1
    return query[start:i], i


def _has_whitespace(query: str, start: int, end: int) -> bool:
    return any(ch.isspace() for ch in query[start:end])
