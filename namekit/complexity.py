#!/usr/bin/env python3
"""
Name Complexity
===============
Heuristic per-name difficulty score. Longer names, more syllables,
characters outside a-z, and spellings far from an ordinary English word
all make a name harder to say, hear and write down correctly.

The score is the plain sum of its terms and is deliberately not
normalised: the non-standard term is unbounded, so a name full of digits
or diacritics can score well above 1. Consumers clamp the aggregate.
"""

import re
from typing import Optional

from namekit.models import ComplexityBreakdown
from namekit.phonetic_similarity import jaro_winkler_similarity
from namekit.settings import require_setting

_VOWEL_RUN = re.compile(r'[aeiouy]+', re.IGNORECASE | re.ASCII)
_STANDARD_LETTER = re.compile(r'[a-z]')


def _require(key: str) -> float:
    return require_setting(f"complexity.{key}")


class ComplexityScorer:
    """
    Computes complexity scores for names.

    Example:
        scorer = ComplexityScorer()
        scorer.compute("Katherine")      # float
        scorer.breakdown("Katherine")    # ComplexityBreakdown
    """

    def __init__(self,
                 baseline_word: Optional[str] = None,
                 length_divisor: Optional[float] = None,
                 syllable_divisor: Optional[float] = None,
                 non_standard_divisor: Optional[float] = None):
        self.baseline_word = baseline_word if baseline_word is not None else _require("baseline_word")
        self.length_divisor = length_divisor if length_divisor is not None else _require("length_divisor")
        self.syllable_divisor = syllable_divisor if syllable_divisor is not None else _require("syllable_divisor")
        self.non_standard_divisor = (non_standard_divisor if non_standard_divisor is not None
                                     else _require("non_standard_divisor"))

    def length_factor(self, name: str) -> float:
        return min(1, len(name) / self.length_divisor)

    def syllable_factor(self, name: str) -> float:
        return len(_VOWEL_RUN.findall(name)) / self.syllable_divisor

    def non_standard_factor(self, name: str) -> float:
        # A character counts as standard if its lower-case form contains a-z
        # anywhere ("İ" lowers to "i" plus a combining dot).
        count = sum(1 for c in name if not _STANDARD_LETTER.search(c.lower()))
        return count / self.non_standard_divisor

    def ortho_neighbor_factor(self, name: str) -> float:
        return 1 - jaro_winkler_similarity(name, self.baseline_word)

    def breakdown(self, name: str) -> ComplexityBreakdown:
        return ComplexityBreakdown(
            length=self.length_factor(name),
            syllables=self.syllable_factor(name),
            non_standard=self.non_standard_factor(name),
            ortho_neighbors=self.ortho_neighbor_factor(name),
            phonetic_density=0.0,
        )

    def compute(self, name: str) -> float:
        return self.breakdown(name).total


def compute_complexity(name: str) -> float:
    """Complexity of a single name with the configured defaults."""
    return ComplexityScorer().compute(name)
