"""Tests for logger configuration."""

import logging
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.utils.log import configure_logging, log


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(level="WARNING")

    def test_console_only(self) -> None:
        self.assertIsNone(configure_logging(level="error"))
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.ERROR)
        self.assertFalse(log.propagate)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(level="chatty")
        self.assertEqual(log.handlers[0].level, logging.INFO)

    def test_file_logging_writes_debug(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = configure_logging(level="WARNING", action="search", log_to_file=True, log_dir=tmp)
            self.assertIsNotNone(path)
            self.assertEqual(path.parent, Path(tmp) / "search")

            log.debug("tokenized 3 tokens")
            configure_logging(level="WARNING")

            self.assertIn("[DEBG] tokenized 3 tokens", path.read_text(encoding="utf-8"))

    def test_reconfigure_closes_previous_file_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(action="search", log_to_file=True, log_dir=tmp)
            (file_handler,) = [h for h in log.handlers if isinstance(h, logging.FileHandler)]

            configure_logging(action="search", log_to_file=True, log_dir=tmp)

            self.assertIsNone(file_handler.stream)
            self.assertNotIn(file_handler, log.handlers)
            self.assertEqual(len(log.handlers), 2)
            configure_logging(level="WARNING")


if __name__ == "__main__":
    unittest.main()
