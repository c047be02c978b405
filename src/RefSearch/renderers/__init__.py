"""Output renderers for command results.

Provides the OutputWriter abstraction, the pretty/json/ids/uuid writers, and
a factory that instantiates the writer for an output format.
"""

from __future__ import annotations

from RefSearch.renderers.base import OutputWriter
from RefSearch.renderers.console import ConsoleOutputWriter, render_text
from RefSearch.renderers.identifiers import IdsOutputWriter, UuidOutputWriter
from RefSearch.renderers.json import JsonOutputWriter, render_json


def create_output_writer(output_format: str, *, base_dir: str = "") -> OutputWriter:
    """Create the output writer for a format.

    Args:
        output_format: One of ``pretty``, ``json``, ``ids``, ``uuid``.
        base_dir: Directory for saved JSON; empty prints JSON to stdout.

    Returns:
        Writer instance for the format.

    Raises:
        ValueError: If the format is unknown.
    """
    if output_format == "pretty":
        return ConsoleOutputWriter()
    if output_format == "json":
        return JsonOutputWriter(base_dir)
    if output_format == "ids":
        return IdsOutputWriter()
    if output_format == "uuid":
        return UuidOutputWriter()
    raise ValueError(f"Unknown output format: {output_format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "IdsOutputWriter",
    "UuidOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
