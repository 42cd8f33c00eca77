#!/usr/bin/env python3
"""
Orthographic Diversity
======================
How differently the names of a cluster are spelled: the mean normalised
edit distance over all pairs drawn from the first few names.

Only a fixed-size prefix is compared, which bounds the quadratic cost and
keeps the result a pure function of member order.
"""

from itertools import combinations
from typing import Optional, Sequence

from namekit.phonetic_similarity import normalized_levenshtein_distance
from namekit.settings import require_setting


class OrthographicDiversityEstimator:
    """Average pairwise spelling divergence within a name sample."""

    def __init__(self, sample_size: Optional[int] = None):
        if sample_size is None:
            sample_size = require_setting("diversity.sample_size")
        self.sample_size = int(sample_size)

    def sample(self, names: Sequence[str]) -> list:
        return list(names[:self.sample_size])

    def diversity(self, names: Sequence[str]) -> float:
        total = 0.0
        comparisons = 0
        for a, b in combinations(self.sample(names), 2):
            total += normalized_levenshtein_distance(a, b)
            comparisons += 1
        return total / comparisons if comparisons > 0 else 0.0
