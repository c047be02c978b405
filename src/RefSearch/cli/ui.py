"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to their
respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from RefSearch.cli.commands import SearchOptions
from RefSearch.cli.help import build_search_help_text
from RefSearch.cli.runner import CommandRunner
from RefSearch.config import load_config
from RefSearch.config.output import OUTPUT_FORMATS
from RefSearch.services.ordering import SORT_ORDERS, resolve_sort_alias


def _resolve_sort(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """Resolve sort aliases at parse time."""
    if value is None:
        return None
    try:
        return resolve_sort_alias(value.strip().lower())
    except ValueError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


@click.group(help="RefSearch: search a CSL-JSON reference library.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML config file overriding the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML config file.
    """
    load_dotenv()

    try:
        cfg = load_config(config_path)
    except (TypeError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--config") from e
    ctx.obj = cfg


@cli.command("search", epilog=build_search_help_text())
@click.argument("query", nargs=-1)
@click.option(
    "--library",
    "library_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="CSL-JSON library file (default: library.path from config).",
)
@click.option("--sort", callback=_resolve_sort, default=None, help="Sort field or alias.")
@click.option("--order", type=click.Choice(SORT_ORDERS), default=None, help="Sort order.")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Maximum results (0 = unlimited).")
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True, help="Results to skip.")
@click.option("--output", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None, help="Output format.")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    query: tuple[str, ...],
    library_path: Path | None,
    sort: str | None,
    order: str | None,
    limit: int | None,
    offset: int,
    output_format: str | None,
) -> None:
    """Search references and print matches.

    Query words are joined with spaces; an empty query lists the library.
    Options left out fall back to the ``search`` and ``output`` config
    sections.

    Args:
        ctx: Click context.

    Raises:
        click.Abort: When the search fails.
    """
    cfg = ctx.obj
    options = SearchOptions(
        query=" ".join(query),
        sort=sort or cfg.search.sort,
        order=order or cfg.search.order,
        limit=cfg.search.limit if limit is None else limit,
        offset=offset,
    )
    runner = CommandRunner(cfg)
    runner.run_search(
        action=ctx.command.name,
        options=options,
        library_path=library_path,
        output_format=output_format,
    )
