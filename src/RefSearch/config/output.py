"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from RefSearch.config.common import (
    expect_choice,
    expect_str,
    get_optional_value,
    get_section,
)

OUTPUT_FORMATS = ("pretty", "json", "ids", "uuid")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        format: Default output format.
        base_dir: Directory for saved JSON results; empty writes JSON to stdout.
    """

    format: str
    base_dir: str


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the format is unknown.
    """
    section = get_section(raw, "output", required=False)
    return OutputConfig(
        format=expect_choice(get_optional_value(section, "format", "pretty"), OUTPUT_FORMATS, "output.format"),
        base_dir=expect_str(get_optional_value(section, "base_dir", ""), "output.base_dir"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints."""
    if config.format not in OUTPUT_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(OUTPUT_FORMATS)}")
