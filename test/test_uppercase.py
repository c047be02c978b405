"""Tests for uppercase-aware substring matching."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.search.uppercase import (
    UppercaseSegment,
    extract_uppercase_segments,
    has_consecutive_uppercase,
    match_with_uppercase_sensitivity,
)


class TestHasConsecutiveUppercase(unittest.TestCase):
    def test_acronyms(self) -> None:
        for text in ("AI", "RNA", "API", "mRNA", "the AI way"):
            with self.subTest(text=text):
                self.assertTrue(has_consecutive_uppercase(text))

    def test_single_capitals_do_not_count(self) -> None:
        for text in ("Smith", "A b C", "ai", "", "Ai"):
            with self.subTest(text=text):
                self.assertFalse(has_consecutive_uppercase(text))


class TestExtractUppercaseSegments(unittest.TestCase):
    def test_positions(self) -> None:
        self.assertEqual(
            extract_uppercase_segments("mRNA and DNA"),
            [UppercaseSegment("RNA", 1, 4), UppercaseSegment("DNA", 9, 12)],
        )

    def test_none(self) -> None:
        self.assertEqual(extract_uppercase_segments("Smith et al"), [])


class TestMatchWithUppercaseSensitivity(unittest.TestCase):
    def test_acronym_matches_same_case(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("AI", "AI therapy for mental health"))

    def test_acronym_rejects_lowercase(self) -> None:
        self.assertFalse(match_with_uppercase_sensitivity("AI", "ai therapy for mental health"))

    def test_acronym_rejects_capitalized(self) -> None:
        self.assertFalse(match_with_uppercase_sensitivity("AI", "Ai therapy for mental health"))

    def test_lowercase_query_matches_acronym(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("api", "RESTful API design patterns"))

    def test_acronym_inside_word(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("RNA", "mRNA sequencing advances"))
        self.assertFalse(match_with_uppercase_sensitivity("RNA", "mrna sequencing advances"))

    def test_lowercase_query_is_case_insensitive(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("rna", "RNA sequencing advances"))

    def test_single_capital_query_is_case_insensitive(self) -> None:
        self.assertTrue(match_with_uppercase_sensitivity("Smith", "smith john"))


if __name__ == "__main__":
    unittest.main()
