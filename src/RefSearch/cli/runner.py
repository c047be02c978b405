"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, and error handling for
command execution.
"""

from __future__ import annotations

from pathlib import Path

import click

from RefSearch.cli.commands import SearchCommand, SearchOptions
from RefSearch.config import AppConfig
from RefSearch.renderers import create_output_writer
from RefSearch.services import create_search_service
from RefSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation, and error handling for
    CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(
        self,
        action: str,
        options: SearchOptions,
        *,
        library_path: Path | None = None,
        output_format: str | None = None,
    ) -> None:
        """Execute search command.

        Args:
            action: The CLI command name (e.g., 'search').
            options: Resolved query, ordering and paging options.
            library_path: Optional library file overriding the config.
            output_format: Optional output format overriding the config.

        Raises:
            click.Abort: When the search fails.
        """
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path is not None:
            log.debug("Writing log file %s", log_path)
        try:
            search_service = create_search_service(self.config, library_path=library_path)
            output_writer = create_output_writer(
                output_format or self.config.output.format,
                base_dir=self.config.output.base_dir,
            )

            command = SearchCommand(
                search_service=search_service,
                output_writer=output_writer,
                options=options,
            )
            command.execute()
            output_writer.finalize(action)

        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
