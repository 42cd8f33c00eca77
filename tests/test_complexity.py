"""
Tests for Name Complexity
=========================
Tests the complexity terms and their sum in namekit/complexity.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.complexity import ComplexityScorer, compute_complexity
from namekit.phonetic_similarity import jaro_winkler_similarity


@pytest.fixture
def scorer():
    return ComplexityScorer()


class TestLengthFactor:
    """Tests for the length term."""

    def test_scales_with_length(self, scorer):
        assert scorer.length_factor("Anna") == pytest.approx(0.4)

    def test_clamped_at_one(self, scorer):
        """Names of 10+ characters all count as maximally long."""
        assert scorer.length_factor("Alexandrina") == 1
        assert scorer.length_factor("Maximiliana") == 1


class TestSyllableFactor:
    """Tests for the vowel-run term."""

    def test_counts_vowel_runs(self, scorer):
        # a, e, i, e
        assert scorer.syllable_factor("Katherine") == pytest.approx(4 / 5)

    def test_run_counts_once(self, scorer):
        assert scorer.syllable_factor("queue") == pytest.approx(1 / 5)

    def test_y_is_a_vowel(self, scorer):
        # Yo, a, a
        assert scorer.syllable_factor("Yolanda") == pytest.approx(3 / 5)

    def test_case_insensitive(self, scorer):
        assert scorer.syllable_factor("AEIOU") == scorer.syllable_factor("aeiou")

    def test_no_vowels(self, scorer):
        assert scorer.syllable_factor("Brr") == 0

    def test_turkish_i_variants_are_not_vowels(self, scorer):
        """Only ASCII letters fold case when counting vowel runs."""
        assert scorer.syllable_factor("ı") == 0
        assert scorer.syllable_factor("İ") == 0
        # K, ı, l, ı, ç: no ASCII vowel runs
        assert scorer.syllable_factor("Kılıç") == 0
        # only the ASCII capital I counts
        assert scorer.syllable_factor("Işıl") == pytest.approx(1 / 5)


class TestNonStandardFactor:
    """Tests for the non a-z character term."""

    def test_plain_ascii_is_zero(self, scorer):
        assert scorer.non_standard_factor("Anna") == 0

    def test_digits_punctuation_diacritics(self, scorer):
        # ë, -, 2
        assert scorer.non_standard_factor("Zoë-2") == pytest.approx(1.0)

    def test_not_clamped(self, scorer):
        """The term can exceed 1 for names rich in non-letters."""
        assert scorer.non_standard_factor("12345-6") == pytest.approx(7 / 3)
        assert scorer.non_standard_factor("12345-6") > 1

    def test_uppercase_letters_are_standard(self, scorer):
        assert scorer.non_standard_factor("ANNA") == 0

    def test_dotted_capital_i_is_standard(self, scorer):
        """'İ' lowers to 'i' plus a combining dot, which contains a-z."""
        assert scorer.non_standard_factor("İ") == 0


class TestComplexityScore:
    """Tests for the summed score."""

    def test_baseline_word(self, scorer):
        """The baseline word has no ortho-neighbor distance."""
        # 0.8 length + 0.4 syllables + 0 + 0
        assert scorer.compute("standard") == pytest.approx(1.2)

    def test_empty_string(self, scorer):
        assert scorer.compute("") == 1 - jaro_winkler_similarity("", "standard")

    def test_sum_of_terms(self, scorer):
        b = scorer.breakdown("Katherine")
        expected = b.length + b.syllables + b.non_standard + b.ortho_neighbors
        assert scorer.compute("Katherine") == pytest.approx(expected)

    def test_phonetic_density_reserved_zero(self, scorer):
        b = scorer.breakdown("Zzyzx")
        assert b.phonetic_density == 0.0
        assert [t for t, _ in b.terms] == [
            "length", "syllables", "non_standard", "ortho_neighbors", "phonetic_density",
        ]

    @pytest.mark.parametrize("name", ["", "a", "Katherine", "Zoë-2", "12345-6", "Ólafur Þór"])
    def test_never_negative(self, scorer, name):
        assert scorer.compute(name) >= 0

    def test_can_exceed_one(self, scorer):
        assert scorer.compute("X-Æ-12!!") > 1

    def test_module_helper(self, scorer):
        assert compute_complexity("Kathryn") == scorer.compute("Kathryn")

    def test_custom_baseline(self):
        scorer = ComplexityScorer(baseline_word="Kathryn")
        assert scorer.ortho_neighbor_factor("Kathryn") == pytest.approx(0.0)
