"""Uppercase-aware substring matching.

A query containing two or more consecutive uppercase ASCII letters (an acronym
such as ``AI``, ``RNA``, ``API``) is matched case-sensitively; any other query
is matched case-insensitively. A single leading capital (``Smith``) does not
count.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_UPPER_RUN_RE = re.compile(r"[A-Z]{2,}")


@dataclass(frozen=True, slots=True)
class UppercaseSegment:
    """A run of consecutive uppercase letters.

    Attributes:
        segment: The uppercase text.
        start: Start index (inclusive).
        end: End index (exclusive).
    """

    segment: str
    start: int
    end: int


def has_consecutive_uppercase(text: str) -> bool:
    """Return True if ``text`` has a run of 2+ uppercase ASCII letters."""
    return _UPPER_RUN_RE.search(text) is not None


def extract_uppercase_segments(text: str) -> list[UppercaseSegment]:
    """Return every run of 2+ uppercase ASCII letters, left to right."""
    return [
        UppercaseSegment(segment=m.group(0), start=m.start(), end=m.end())
        for m in _UPPER_RUN_RE.finditer(text)
    ]


def match_with_uppercase_sensitivity(query: str, candidate: str) -> bool:
    """Test whether ``candidate`` contains ``query``.

    Both arguments are expected to be normalized with
    :func:`RefSearch.search.normalizer.normalize_preserving_case`.

    Args:
        query: Normalized query text.
        candidate: Normalized field text.

    Returns:
        True on a case-sensitive substring hit when ``query`` holds an
        uppercase run, otherwise on a case-insensitive substring hit.
    """
    if has_consecutive_uppercase(query):
        return query in candidate
    return query.lower() in candidate.lower()
