"""CLI package for RefSearch command orchestration.

Contains the click interface, the command runner and the command
implementations as separate modules.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from RefSearch.cli.runner import CommandRunner
from RefSearch.cli.ui import cli


def main() -> None:
    """Run RefSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
