"""Line-oriented identifier output (``ids`` and ``uuid`` formats)."""

from __future__ import annotations

import click

from RefSearch.renderers.base import OutputWriter
from RefSearch.search.fields import get_custom
from RefSearch.services.search import SearchPage


class IdsOutputWriter(OutputWriter):
    """Print one citation key per line."""

    def write_page(self, page: SearchPage, query: str) -> None:
        for item in page.items:
            click.echo(item.get("id", ""))


class UuidOutputWriter(OutputWriter):
    """Print one ``custom.uuid`` per line; records without a UUID are skipped."""

    def write_page(self, page: SearchPage, query: str) -> None:
        for item in page.items:
            uuid = get_custom(item).get("uuid")
            if isinstance(uuid, str) and uuid:
                click.echo(uuid)
