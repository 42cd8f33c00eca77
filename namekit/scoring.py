#!/usr/bin/env python3
"""
Confusion Scoring
=================
Combines four signals into one severity score for a cluster of
same-sounding names:

- size_penalty:    more names sharing a sound, more room for mix-ups
- complexity:      hardest member's complexity, clamped to 1
- value_spread:    a rare name next to a common one gets "corrected" into it
- ortho_diversity: sound-alikes with different spellings are the worst case

The weights live in app.yaml (confusion.weights) and must sum to 1.0, so
the score stays in [0, 1] when every factor does. It is a heuristic
ranking signal, not a probability.
"""

import math
from typing import Dict, Optional, Sequence

from namekit.diversity import OrthographicDiversityEstimator
from namekit.models import ConfusionFactors, NameRecord
from namekit.settings import get_setting, require_setting

WEIGHT_KEYS = ("size", "complexity", "value_spread", "ortho_diversity")


def _load_weights() -> Dict[str, float]:
    weights = get_setting("confusion.weights", {}) or {}
    missing = [k for k in WEIGHT_KEYS if k not in weights]
    if missing:
        raise ValueError(f"confusion.weights missing in app.yaml: {', '.join(missing)}")
    return {k: float(weights[k]) for k in WEIGHT_KEYS}


class ConfusionScorer:
    """Scores a group of records that share a phonetic code."""

    def __init__(self,
                 weights: Optional[Dict[str, float]] = None,
                 size_saturation: Optional[int] = None,
                 zero_value_spread: Optional[float] = None,
                 diversity_estimator: Optional[OrthographicDiversityEstimator] = None):
        if weights is None:
            weights = _load_weights()
        if size_saturation is None:
            size_saturation = require_setting("confusion.size_saturation")
        if zero_value_spread is None:
            zero_value_spread = require_setting("confusion.zero_value_spread")

        missing = [k for k in WEIGHT_KEYS if k not in weights]
        if missing:
            raise ValueError(f"Missing confusion weights: {', '.join(missing)}")
        total = sum(weights[k] for k in WEIGHT_KEYS)
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Invalid confusion.weights: sum must be 1.0, got {total}")

        self.weights = {k: float(weights[k]) for k in WEIGHT_KEYS}
        self.size_saturation = size_saturation
        self.zero_value_spread = float(zero_value_spread)
        self.diversity_estimator = diversity_estimator or OrthographicDiversityEstimator()

    def size_penalty(self, members: Sequence[NameRecord]) -> float:
        return min(1, len(members) / self.size_saturation)

    def complexity_factor(self, members: Sequence[NameRecord]) -> float:
        return min(1, max(m.complexity for m in members))

    def value_spread(self, members: Sequence[NameRecord]) -> float:
        values = [m.value for m in members]
        highest = max(values)
        if highest == 0:
            # All-zero groups have nothing to spread.
            return self.zero_value_spread
        return 1 - (min(values) / highest)

    def factors(self, members: Sequence[NameRecord]) -> ConfusionFactors:
        if not members:
            raise ValueError("Cannot score an empty group")
        return ConfusionFactors(
            size_penalty=self.size_penalty(members),
            complexity=self.complexity_factor(members),
            value_spread=self.value_spread(members),
            ortho_diversity=self.diversity_estimator.diversity([m.name for m in members]),
        )

    def combine(self, factors: ConfusionFactors) -> float:
        w = self.weights
        return ((factors.size_penalty * w["size"]) +
                (factors.complexity * w["complexity"]) +
                (factors.value_spread * w["value_spread"]) +
                (factors.ortho_diversity * w["ortho_diversity"]))

    def score(self, members: Sequence[NameRecord]) -> float:
        return self.combine(self.factors(members))
