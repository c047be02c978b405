"""Read-only CSL-JSON library loading."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from RefSearch.core.models import CslItem
from RefSearch.utils.log import log


class LibraryError(ValueError):
    """Raised when a library file cannot be read as CSL-JSON."""


def load_library(path: Path) -> tuple[CslItem, ...]:
    """Load references from a CSL-JSON file.

    The file must hold a top-level array of objects, each with a string
    ``id``. Items are returned as read-only mappings.

    Args:
        path: Library file path.

    Returns:
        References in file order.

    Raises:
        LibraryError: If the file is missing, not JSON, or not a CSL-JSON array.
    """
    if not path.is_file():
        raise LibraryError(f"Library file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LibraryError(f"Library file is not valid JSON: {path}: {e}") from e

    return parse_library(data, source=str(path))


def parse_library(data: Any, *, source: str = "<memory>") -> tuple[CslItem, ...]:
    """Validate decoded CSL-JSON and freeze its items.

    Args:
        data: Decoded JSON value.
        source: Label used in error messages.

    Returns:
        References in input order.

    Raises:
        LibraryError: If ``data`` is not a list of objects with string ids.
    """
    if not isinstance(data, list):
        raise LibraryError(f"{source}: library root must be an array")

    items: list[CslItem] = []
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise LibraryError(f"{source}: item[{idx}] must be an object")
        if not isinstance(item.get("id"), str):
            raise LibraryError(f"{source}: item[{idx}].id must be a string")
        items.append(MappingProxyType(dict(item)))

    log.debug("Parsed %d library items from %s", len(items), source)
    return tuple(items)
