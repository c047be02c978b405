"""Tests for CSL-JSON library loading."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.storage.library import LibraryError, load_library, parse_library


class TestLoadLibrary(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, content: str) -> Path:
        path = self.root / "library.json"
        path.write_text(content, encoding="utf-8")
        return path

    def test_loads_items_in_order(self) -> None:
        path = self._write(json.dumps([{"id": "b", "title": "Two"}, {"id": "a", "title": "One"}]))
        items = load_library(path)
        self.assertEqual([item["id"] for item in items], ["b", "a"])
        self.assertEqual(items[0]["title"], "Two")

    def test_items_are_read_only(self) -> None:
        items = load_library(self._write('[{"id": "x"}]'))
        with self.assertRaises(TypeError):
            items[0]["id"] = "y"

    def test_empty_library(self) -> None:
        self.assertEqual(load_library(self._write("[]")), ())

    def test_missing_file(self) -> None:
        with self.assertRaisesRegex(LibraryError, "not found"):
            load_library(self.root / "absent.json")

    def test_invalid_json(self) -> None:
        with self.assertRaisesRegex(LibraryError, "not valid JSON"):
            load_library(self._write("[{"))


class TestParseLibrary(unittest.TestCase):
    def test_root_must_be_array(self) -> None:
        with self.assertRaisesRegex(LibraryError, "root must be an array"):
            parse_library({"id": "x"})

    def test_items_must_be_objects(self) -> None:
        with self.assertRaisesRegex(LibraryError, r"item\[1\] must be an object"):
            parse_library([{"id": "a"}, "b"])

    def test_items_need_string_id(self) -> None:
        with self.assertRaisesRegex(LibraryError, r"item\[0\]\.id must be a string"):
            parse_library([{"id": 3}])

    def test_library_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(LibraryError, ValueError))


if __name__ == "__main__":
    unittest.main()
