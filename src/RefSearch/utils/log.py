"""RefSearch logging utilities.

Provides the shared ``RefSearch`` logger with a timestamp + abbreviated level
prefix. Console records go to stderr so that search results printed on stdout
(``--output json``/``ids``/``uuid``) stay pipeable.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final

_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("RefSearch")


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Configure the RefSearch logger, replacing any earlier configuration.

    Uses format: mm-dd HH:MM:SS [<LVL>] <message>
    where LVL is one of: DEBG/INFO/WARN/ERRO.

    Handlers from a previous call are closed, so repeated CLI invocations in
    one process do not leak open log files.

    Args:
        level: Console level name (e.g. WARNING, DEBUG). Unknown names fall
            back to INFO.
        action: CLI action name; required for file logging.
        log_to_file: Whether to mirror DEBUG and above to
            ``<log_dir>/<action>/<action>_<timestamp>.log``.
        log_dir: Base directory for log files.

    Returns:
        The log file path when file logging is active, else None.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    _close_handlers()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)
    log.addHandler(console)

    log_path = None
    if log_to_file and action:
        log_path = _log_file_path(Path(log_dir or "log"), action)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    log.setLevel(min(logging.DEBUG, console_level) if log_path else console_level)
    log.propagate = False
    return log_path


def _close_handlers() -> None:
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()


def _log_file_path(log_root: Path, action: str) -> Path:
    action_dir = log_root / action
    action_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%m%d%H%M%S")
    return action_dir / f"{action}_{timestamp}.log"
