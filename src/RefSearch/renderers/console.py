"""Console text output renderers.

Renders reference views into human-friendly text and provides the
ConsoleOutputWriter used by the ``pretty`` output format.
"""

from __future__ import annotations

from typing import Iterable

import click

from RefSearch.renderers.base import OutputWriter
from RefSearch.renderers.mapper import map_page_to_views
from RefSearch.renderers.view_models import ReferenceView
from RefSearch.services.search import SearchPage


def _fmt_authors(authors: Iterable[str], max_authors: int = 3) -> str:
    """Join author names, abbreviating long lists with "et al."."""
    names = list(authors)
    if not names:
        return "-"
    if len(names) > max_authors:
        return ", ".join(names[:max_authors]) + ", et al."
    return ", ".join(names)


def render_text(views: Iterable[ReferenceView], *, start: int = 1) -> str:
    """Render reference views into a human-readable text block.

    Args:
        views: Iterable of reference views.
        start: Number of the first entry.

    Returns:
        A formatted string ready to be printed (empty when there are no views).
    """
    lines: list[str] = []
    for idx, view in enumerate(views, start=start):
        lines.append(f"{idx}. [{view.id}] {view.title or '(untitled)'}")
        lines.append(f"   Authors: {_fmt_authors(view.authors)}")
        published = view.year or "-"
        if view.container_title:
            published = f"{published}  {view.container_title}"
        lines.append(f"   Published: {published}")
        if view.doi:
            lines.append(f"   DOI: {view.doi}")
        if view.url:
            lines.append(f"   URL: {view.url}")
        if view.token_fields:
            detail = "; ".join(f"{raw} -> {', '.join(fields)}" for raw, fields in view.token_fields)
            lines.append(f"   Matched: {detail}")
        elif view.matched_fields:
            lines.append(f"   Matched: {', '.join(view.matched_fields)}")
        lines.append("")
    if not lines:
        return ""
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results as readable text to stdout."""

    def write_page(self, page: SearchPage, query: str) -> None:
        """Write a page of results, followed by a paging hint when relevant."""
        if not page.items:
            if page.total:
                click.echo(f"No results at offset {page.offset} of {page.total}.")
            elif query.strip():
                click.echo(f"No references found for: {query}")
            else:
                click.echo("Library is empty.")
            return

        click.echo(render_text(map_page_to_views(page), start=page.offset + 1), nl=False)
        shown_to = page.offset + len(page.items)
        summary = f"Showing {page.offset + 1}-{shown_to} of {page.total}"
        if page.next_offset is not None:
            summary += f" (next: --offset {page.next_offset})"
        click.echo(summary)
