from __future__ import annotations

"""Public configuration API for RefSearch."""

from RefSearch.config.app import (
    DEFAULT_CONFIG_YAML,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from RefSearch.config.library import LibraryConfig
from RefSearch.config.output import OutputConfig
from RefSearch.config.runtime import RuntimeConfig
from RefSearch.config.search import SearchConfig

__all__ = [
    "RuntimeConfig",
    "LibraryConfig",
    "SearchConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG_YAML",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
