"""Query tokenizer and field-matching engine.

Pure, synchronous functions over caller-owned CSL-JSON records. Nothing in
this package performs I/O or raises for malformed queries.
"""

from __future__ import annotations

from RefSearch.search.matcher import match_reference, match_token, search
from RefSearch.search.normalizer import normalize, normalize_preserving_case
from RefSearch.search.sorter import sort_results
from RefSearch.search.tokenizer import tokenize
from RefSearch.search.uppercase import match_with_uppercase_sensitivity

__all__ = [
    "tokenize",
    "normalize",
    "normalize_preserving_case",
    "match_with_uppercase_sensitivity",
    "match_token",
    "match_reference",
    "search",
    "sort_results",
]
