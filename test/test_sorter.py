"""Tests for relevance ordering of search results."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.core.models import MatchStrength, SearchResult
from RefSearch.search.sorter import sort_results


def _result(ref_id: str, strength: MatchStrength, *, year=None, family=None, title=None) -> SearchResult:
    reference = {"id": ref_id}
    if year is not None:
        reference["issued"] = {"date-parts": [[year]]}
    if family is not None:
        reference["author"] = [{"family": family}]
    if title is not None:
        reference["title"] = title
    base = 100 if strength is MatchStrength.EXACT else 50
    return SearchResult(reference=reference, token_matches=(), overall_strength=strength, score=base + 1)


def _ids(results) -> list[str]:
    return [r.reference["id"] for r in results]


class TestSortResults(unittest.TestCase):
    def test_exact_before_partial(self) -> None:
        results = [
            _result("p", MatchStrength.PARTIAL, year=2024),
            _result("e", MatchStrength.EXACT, year=1990),
        ]
        self.assertEqual(_ids(sort_results(results)), ["e", "p"])

    def test_newer_first_and_undated_last(self) -> None:
        results = [
            _result("undated", MatchStrength.PARTIAL),
            _result("old", MatchStrength.PARTIAL, year=2001),
            _result("new", MatchStrength.PARTIAL, year=2022),
        ]
        self.assertEqual(_ids(sort_results(results)), ["new", "old", "undated"])

    def test_author_then_title(self) -> None:
        results = [
            _result("no-author", MatchStrength.PARTIAL, year=2020, title="A"),
            _result("zhang", MatchStrength.PARTIAL, year=2020, family="Zhang"),
            _result("adams-b", MatchStrength.PARTIAL, year=2020, family="adams", title="Beta"),
            _result("adams-a", MatchStrength.PARTIAL, year=2020, family="Adams", title="alpha"),
            _result("adams-none", MatchStrength.PARTIAL, year=2020, family="Adams"),
        ]
        self.assertEqual(
            _ids(sort_results(results)),
            ["adams-a", "adams-b", "adams-none", "zhang", "no-author"],
        )

    def test_stable_for_full_ties(self) -> None:
        results = [_result(str(i), MatchStrength.PARTIAL, year=2020, family="Same", title="Same") for i in range(5)]
        self.assertEqual(_ids(sort_results(results)), ["0", "1", "2", "3", "4"])

    def test_input_untouched(self) -> None:
        results = [_result("b", MatchStrength.PARTIAL), _result("a", MatchStrength.EXACT)]
        before = list(results)
        sort_results(results)
        self.assertEqual(results, before)

    def test_empty(self) -> None:
        self.assertEqual(sort_results([]), [])


if __name__ == "__main__":
    unittest.main()
