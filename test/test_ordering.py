"""Tests for reference sorting and pagination."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.services.ordering import paginate, resolve_sort_alias, sort_references


def _ref(ref_id: str, **kwargs) -> dict:
    reference = {"id": ref_id}
    custom = {}
    if "created" in kwargs:
        custom["created_at"] = kwargs.pop("created")
    if "updated" in kwargs:
        custom["timestamp"] = kwargs.pop("updated")
    if custom:
        reference["custom"] = custom
    reference.update(kwargs)
    return reference


def _ids(items) -> list[str]:
    return [item["id"] for item in items]


class TestResolveSortAlias(unittest.TestCase):
    def test_aliases(self) -> None:
        self.assertEqual(resolve_sort_alias("pub"), "published")
        self.assertEqual(resolve_sort_alias("mod"), "updated")
        self.assertEqual(resolve_sort_alias("add"), "created")
        self.assertEqual(resolve_sort_alias("rel"), "relevance")

    def test_full_names_pass_through(self) -> None:
        for name in ("created", "updated", "published", "author", "title", "relevance"):
            with self.subTest(name=name):
                self.assertEqual(resolve_sort_alias(name), name)

    def test_unknown(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown sort field: size"):
            resolve_sort_alias("size")


class TestSortReferences(unittest.TestCase):
    def test_created(self) -> None:
        items = [
            _ref("b", created="2024-01-02T00:00:00Z"),
            _ref("a", created="2024-03-01T00:00:00Z"),
            _ref("c", created="2023-12-31T23:59:59Z"),
        ]
        self.assertEqual(_ids(sort_references(items, "created", "desc")), ["a", "b", "c"])
        self.assertEqual(_ids(sort_references(items, "created", "asc")), ["c", "b", "a"])

    def test_updated_falls_back_to_created(self) -> None:
        items = [
            _ref("edited", created="2020-01-01T00:00:00Z", updated="2024-06-01T00:00:00Z"),
            _ref("fresh", created="2024-01-01T00:00:00Z"),
        ]
        self.assertEqual(_ids(sort_references(items, "updated", "desc")), ["edited", "fresh"])

    def test_published_uses_date_parts(self) -> None:
        items = [
            _ref("y2020", issued={"date-parts": [[2020]]}),
            _ref("y2020-06", issued={"date-parts": [[2020, 6]]}),
            _ref("undated"),
            _ref("y2019", issued={"date-parts": [[2019, 12, 31]]}),
        ]
        self.assertEqual(
            _ids(sort_references(items, "published", "asc")),
            ["undated", "y2019", "y2020", "y2020-06"],
        )

    def test_author_case_insensitive(self) -> None:
        items = [
            _ref("z", author=[{"family": "zhang"}]),
            _ref("b", author=[{"family": "Brown"}]),
            _ref("lit", author=[{"literal": "Cochrane Group"}]),
            _ref("anon"),
        ]
        self.assertEqual(_ids(sort_references(items, "author", "asc")), ["anon", "b", "lit", "z"])

    def test_title(self) -> None:
        items = [_ref("2", title="beta"), _ref("1", title="Alpha"), _ref("0")]
        self.assertEqual(_ids(sort_references(items, "title", "asc")), ["0", "1", "2"])

    def test_ties_break_on_created_then_id(self) -> None:
        items = [
            _ref("b", title="same", created="2024-01-01T00:00:00Z"),
            _ref("a", title="same", created="2024-01-01T00:00:00Z"),
            _ref("c", title="same", created="2025-01-01T00:00:00Z"),
        ]
        self.assertEqual(_ids(sort_references(items, "title", "asc")), ["c", "a", "b"])

    def test_unparseable_timestamps_sort_as_oldest(self) -> None:
        items = [_ref("bad", created="not a date"), _ref("ok", created="2001-01-01")]
        self.assertEqual(_ids(sort_references(items, "created", "desc")), ["ok", "bad"])

    def test_invalid_arguments(self) -> None:
        with self.assertRaises(ValueError):
            sort_references([], "relevance", "asc")
        with self.assertRaises(ValueError):
            sort_references([], "title", "up")


class TestPaginate(unittest.TestCase):
    def test_unlimited(self) -> None:
        page = paginate([1, 2, 3])
        self.assertEqual(page.items, [1, 2, 3])
        self.assertIsNone(page.next_offset)

    def test_limit_and_offset(self) -> None:
        items = list(range(10))
        first = paginate(items, limit=4)
        self.assertEqual((first.items, first.next_offset), ([0, 1, 2, 3], 4))
        last = paginate(items, limit=4, offset=8)
        self.assertEqual((last.items, last.next_offset), ([8, 9], None))

    def test_exact_fit_has_no_next_page(self) -> None:
        page = paginate([1, 2], limit=2)
        self.assertIsNone(page.next_offset)

    def test_offset_past_end(self) -> None:
        page = paginate([1, 2], limit=5, offset=10)
        self.assertEqual(page.items, [])
        self.assertIsNone(page.next_offset)

    def test_offset_without_limit(self) -> None:
        page = paginate([1, 2, 3], offset=1)
        self.assertEqual(page.items, [2, 3])
        self.assertIsNone(page.next_offset)


if __name__ == "__main__":
    unittest.main()
