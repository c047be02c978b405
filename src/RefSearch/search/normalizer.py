"""Text normalization for search matching.

Both variants apply, in order:

1. Unicode NFKC normalization
2. Lowercasing (``normalize`` only)
3. Diacritic removal (NFD decomposition, combining marks dropped, NFC
   recomposition)
4. Punctuation and symbols replaced by spaces; letters, digits, ``/`` and
   whitespace are kept
5. Whitespace runs collapsed to one space, ends trimmed
"""

from __future__ import annotations

import re
import unicodedata

_WS_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Normalize text for case-insensitive comparison."""
    return _normalize(text, lowercase=True)


def normalize_preserving_case(text: str) -> str:
    """Normalize text like :func:`normalize` but keep letter case.

    Used wherever the uppercase heuristic in
    :mod:`RefSearch.search.uppercase` needs to see the original capitals.
    """
    return _normalize(text, lowercase=False)


def _normalize(text: str, *, lowercase: bool) -> str:
    normalized = unicodedata.normalize("NFKC", text)
    if lowercase:
        normalized = normalized.lower()
    normalized = _strip_diacritics(normalized)
    normalized = "".join(ch if _is_kept(ch) else " " for ch in normalized)
    return _WS_RE.sub(" ", normalized).strip()


def _strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.category(ch).startswith("M"))
    # Recompose so Hangul and other decomposable scripts come back unchanged.
    return unicodedata.normalize("NFC", stripped)


def _is_kept(ch: str) -> bool:
    if ch == "/" or ch.isspace():
        return True
    # L* letters, N* numbers
    return unicodedata.category(ch)[0] in ("L", "N")
