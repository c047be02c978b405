"""Storage layer for RefSearch.

Provides read-only access to a CSL-JSON reference library.
"""

from __future__ import annotations

from RefSearch.storage.library import LibraryError, load_library, parse_library

__all__ = [
    "LibraryError",
    "load_library",
    "parse_library",
]
