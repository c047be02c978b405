"""Tests for search text normalization."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RefSearch.search.normalizer import normalize, normalize_preserving_case


class TestNormalize(unittest.TestCase):
    def test_lowercases(self) -> None:
        self.assertEqual(normalize("Machine LEARNING"), "machine learning")

    def test_strips_diacritics(self) -> None:
        self.assertEqual(normalize("Müller Café naïve"), "muller cafe naive")

    def test_punctuation_becomes_space(self) -> None:
        self.assertEqual(normalize("self-attention: a review."), "self attention a review")

    def test_slash_is_kept(self) -> None:
        self.assertEqual(normalize("input/output"), "input/output")

    def test_whitespace_is_collapsed_and_trimmed(self) -> None:
        self.assertEqual(normalize("  deep\t\nlearning   models "), "deep learning models")

    def test_nfkc_folds_compatibility_forms(self) -> None:
        # Full-width letters and the "fi" ligature
        self.assertEqual(normalize("ＡＢＣ ﬁsh"), "abc fish")

    def test_cjk_passes_through(self) -> None:
        self.assertEqual(normalize(" 機械学習 "), "機械学習")

    def test_hangul_is_not_decomposed(self) -> None:
        self.assertEqual(normalize("한국어"), "한국어")

    def test_empty_and_punctuation_only(self) -> None:
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize("-- !! ??"), "")

    def test_idempotent(self) -> None:
        samples = ["Élan VITAL — über-cool", "ＡＢＣ ﬁsh", "한국어 텍스트", "  áb  c "]
        for text in samples:
            with self.subTest(text=text):
                once = normalize(text)
                self.assertEqual(normalize(once), once)
                kept = normalize_preserving_case(text)
                self.assertEqual(normalize_preserving_case(kept), kept)


class TestNormalizePreservingCase(unittest.TestCase):
    def test_keeps_case(self) -> None:
        self.assertEqual(normalize_preserving_case("mRNA-Sequencing"), "mRNA Sequencing")

    def test_strips_diacritics_keeps_capitals(self) -> None:
        self.assertEqual(normalize_preserving_case("Étude ÀLA"), "Etude ALA")


if __name__ == "__main__":
    unittest.main()
