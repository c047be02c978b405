"""JSON output renderers.

Renders matched references back into CSL-JSON and provides JsonOutputWriter,
which prints to stdout or saves a timestamped file under ``<base_dir>/json``.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Mapping

import click

from RefSearch.core.models import CslItem
from RefSearch.renderers.base import OutputWriter
from RefSearch.services.search import SearchPage
from RefSearch.utils.log import log


def render_json(items: Iterable[CslItem]) -> list[dict[str, Any]]:
    """Render references into JSON-serializable CSL-JSON objects.

    Args:
        items: Iterable of references (read-only mappings are accepted).

    Returns:
        A list of plain dicts.
    """
    return [_to_plain(item) for item in items]


def dumps_json(items: Iterable[CslItem]) -> str:
    """Serialize references as an indented CSL-JSON array."""
    return json.dumps(render_json(items), ensure_ascii=False, indent=2)


class JsonOutputWriter(OutputWriter):
    """Accumulate matched references and write them as one JSON array."""

    def __init__(self, base_dir: str = "") -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory; empty prints to stdout instead.
        """
        self.output_dir = Path(base_dir) / "json" if base_dir else None
        self.items: list[CslItem] = []

    def write_page(self, page: SearchPage, query: str) -> None:
        """Accumulate the page for later writing."""
        self.items.extend(page.items)

    def finalize(self, action: str) -> None:
        """Write accumulated references.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = dumps_json(self.items)
        if self.output_dir is None:
            click.echo(payload)
            return

        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)


def _to_plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value
