"""Library domain configuration: where the CSL-JSON references live."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from RefSearch.config.common import (
    expect_str,
    get_optional_value,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class LibraryConfig:
    """Library location.

    Attributes:
        path: Effective library file path (environment override applied).
        path_env: Name of the environment variable that overrides ``path``.
    """

    path: str
    path_env: str


def load_library(raw: Mapping[str, Any]) -> LibraryConfig:
    """Load library config, applying the ``path_env`` override when set."""
    section = get_section(raw, "library", required=True)
    path_env = expect_str(get_optional_value(section, "path_env", "REFSEARCH_LIBRARY"), "library.path_env")
    path = expect_str(get_required_value(section, "path", "library.path"), "library.path")
    return LibraryConfig(path=_path_from_env(path_env) or path, path_env=path_env)


def check_library(config: LibraryConfig) -> None:
    """Validate library domain constraints."""
    if not config.path.strip():
        raise ValueError("library.path must not be empty")


def _path_from_env(env_name: str) -> str:
    """Return the stripped environment value, or an empty string."""
    if not env_name.strip():
        return ""
    return os.getenv(env_name, "").strip()
