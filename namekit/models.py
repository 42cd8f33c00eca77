#!/usr/bin/env python3
"""
Data Model
==========
Immutable records passed between the pipeline stages, and the errors
the pipeline can raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple

from namekit.settings import get_setting, require_setting


# =============================================================================
# Errors
# =============================================================================

class NameKitError(Exception):
    """Base class for namekit failures."""


class InvalidRecord(NameKitError, ValueError):
    """An input record that the pipeline refuses to score."""

    def __init__(self, index: int, reason: str, line: Optional[int] = None):
        self.index = index
        self.reason = reason
        self.line = line
        where = f"record {index}"
        if line is not None:
            where += f" (line {line})"
        super().__init__(f"Invalid {where}: {reason}")


class ClusterBuildError(NameKitError):
    """Scoring a phonetic bucket failed."""

    def __init__(self, code: "PhoneticCode", reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Failed to build cluster {code.display()}: {reason}")


# =============================================================================
# Records
# =============================================================================

class PhoneticCode(NamedTuple):
    """Composite bucket key: primary and alternate Double Metaphone codes."""
    primary: str
    secondary: str = ""

    def display(self, separator: Optional[str] = None) -> str:
        if separator is None:
            separator = get_setting("phonetic_similarity.code_separator", "|")
        return f"{self.primary}{separator}{self.secondary}"


@dataclass(frozen=True)
class NameRecord:
    """One input name with its weight and precomputed complexity."""
    name: str
    value: int
    complexity: float


@dataclass(frozen=True)
class ComplexityBreakdown:
    """The named terms that make up a name's complexity score."""
    length: float
    syllables: float
    non_standard: float
    ortho_neighbors: float
    # Reserved; always zero.
    phonetic_density: float = 0.0

    @property
    def terms(self) -> Tuple[Tuple[str, float], ...]:
        return (
            ("length", self.length),
            ("syllables", self.syllables),
            ("non_standard", self.non_standard),
            ("ortho_neighbors", self.ortho_neighbors),
            ("phonetic_density", self.phonetic_density),
        )

    @property
    def total(self) -> float:
        total = 0.0
        for _, value in self.terms:
            total += value
        return total


@dataclass(frozen=True)
class ConfusionFactors:
    """Score components of a cluster, each nominally in [0, 1]."""
    size_penalty: float
    complexity: float
    value_spread: float
    ortho_diversity: float

    def to_dict(self) -> dict:
        return {
            "size_penalty": self.size_penalty,
            "complexity": self.complexity,
            "value_spread": self.value_spread,
            "ortho_diversity": self.ortho_diversity,
        }


@dataclass(frozen=True)
class ConfusionCluster:
    """
    A scored group of two or more names sharing a phonetic code.

    Besides the stored aggregates, exposes the derived values the report
    needs as read-only properties. ``orthographic_diversity`` is recomputed
    on each access and agrees with ``factors.ortho_diversity``.
    """
    phonetic_code: PhoneticCode
    members: Tuple[NameRecord, ...]
    avg_value: float
    avg_complexity: float
    confusion_score: float
    factors: Optional[ConfusionFactors] = field(default=None, compare=False)

    def __post_init__(self):
        if len(self.members) < 2:
            raise ValueError(
                f"ConfusionCluster {self.phonetic_code.display()} needs at least 2 members, "
                f"got {len(self.members)}"
            )
        if not isinstance(self.members, tuple):
            object.__setattr__(self, "members", tuple(self.members))

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(m.name for m in self.members)

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(m.value for m in self.members)

    @property
    def min_value(self) -> int:
        return min(self.values)

    @property
    def max_value(self) -> int:
        return max(self.values)

    @property
    def high_complexity_count(self) -> int:
        threshold = require_setting("complexity.high_complexity_threshold")
        return sum(1 for m in self.members if m.complexity > threshold)

    @property
    def orthographic_diversity(self) -> float:
        from namekit.diversity import OrthographicDiversityEstimator
        return OrthographicDiversityEstimator().diversity(self.names)

    @property
    def code_display(self) -> str:
        return self.phonetic_code.display()

    def to_dict(self) -> dict:
        return {
            "phonetic_code": self.code_display,
            "confusion_score": self.confusion_score,
            "avg_value": self.avg_value,
            "avg_complexity": self.avg_complexity,
            "size": self.size,
            "high_complexity_count": self.high_complexity_count,
            "min_value": self.min_value,
            "max_value": self.max_value,
            "orthographic_diversity": self.orthographic_diversity,
            "factors": self.factors.to_dict() if self.factors else None,
            "members": [
                {"name": m.name, "value": m.value, "complexity": m.complexity}
                for m in self.members
            ],
        }
