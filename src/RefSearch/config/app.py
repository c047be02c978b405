from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from RefSearch.config.library import LibraryConfig, check_library, load_library
from RefSearch.config.output import OutputConfig, check_output, load_output
from RefSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from RefSearch.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG_YAML = """
log:
  level: WARNING
  to_file: false
  dir: log

library:
  path: library.json
  path_env: REFSEARCH_LIBRARY

search:
  sort: relevance
  order: desc
  limit: 0

output:
  format: pretty
  base_dir: ""
"""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    library: LibraryConfig
    search: SearchConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    library = load_library(raw)
    search = load_search(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_library(library)
    check_search(search)
    check_output(output)

    return AppConfig(
        runtime=runtime,
        library=library,
        search=search,
        output=output,
    )


def load_config(path: Path | None = None) -> AppConfig:
    """Load config from built-in defaults, overridden by an optional YAML file."""
    return load_config_with_defaults(path)


def load_config_with_defaults(
    config_path: Path | None,
    *,
    _defaults_text: str = DEFAULT_CONFIG_YAML,
) -> AppConfig:
    """Load config by merging defaults and optional override.

    Args:
        config_path: User YAML file, or None to use defaults only.
        _defaults_text: Default YAML document (overridable for tests).

    Returns:
        Parsed configuration.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        TypeError: If config types are invalid.
        ValueError: If config values are invalid.
    """
    base = parse_yaml(_defaults_text)
    if config_path is None:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
