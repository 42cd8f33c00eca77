#!/usr/bin/env python3
"""
Phonetic Encoding and String Metrics
====================================

The low-level measurements every scoring stage is built on:

- Double Metaphone: primary and alternate phonetic codes for a name
- Jaro-Winkler: spelling similarity (0 = unrelated, 1 = identical)
- Levenshtein: character edit distance

All three are deterministic and case-sensitive over Unicode code points.
Results are memoised, since the same names are measured repeatedly
(once while scoring a cluster and again while annotating the report).
"""

from functools import lru_cache
from typing import Tuple

from metaphone import doublemetaphone
from rapidfuzz.distance import Jaro, Levenshtein

from namekit.settings import require_setting

_CACHE_MAXSIZE = require_setting("phonetic_similarity.cache_maxsize")

WINKLER_PREFIX_SCALE = 0.1
WINKLER_MAX_PREFIX = 4


# =============================================================================
# Double Metaphone
# =============================================================================

@lru_cache(maxsize=int(_CACHE_MAXSIZE))
def double_metaphone(name: str) -> Tuple[str, str]:
    """
    Compute Double Metaphone encoding.

    Returns two codes: primary and alternate, accounting for different
    pronunciations of the same spelling (e.g., "Schmidt" vs "Smith").
    The alternate is an empty string when the name has only one
    plausible pronunciation.

    Args:
        name: Name to encode

    Returns:
        Tuple of (primary_code, alternate_code)
    """
    if not name:
        return ('', '')
    primary, secondary = doublemetaphone(name)
    return (primary or '', secondary or '')


# =============================================================================
# Jaro-Winkler
# =============================================================================

@lru_cache(maxsize=int(_CACHE_MAXSIZE))
def jaro_winkler_similarity(s1: str, s2: str) -> float:
    """
    Jaro-Winkler similarity between two strings.

    The prefix bonus (0.1 per shared leading character, up to 4) applies
    at every Jaro level, with no 0.7 boost threshold.

    Returns:
        1.0 = identical
        0.0 = no characters in common (or one side empty)
    """
    if s1 == s2:
        return 1.0
    jaro = float(Jaro.similarity(s1, s2))
    prefix = 0
    for a, b in zip(s1[:WINKLER_MAX_PREFIX], s2[:WINKLER_MAX_PREFIX]):
        if a != b:
            break
        prefix += 1
    return jaro + prefix * WINKLER_PREFIX_SCALE * (1 - jaro)


# =============================================================================
# Levenshtein Distance
# =============================================================================

@lru_cache(maxsize=int(_CACHE_MAXSIZE))
def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Compute Levenshtein edit distance between two strings.

    Counts minimum number of single-character edits (insertions,
    deletions, substitutions) to transform s1 into s2. Case matters:
    "Anna" and "anna" are one edit apart.
    """
    return int(Levenshtein.distance(s1, s2))


def normalized_levenshtein_distance(s1: str, s2: str) -> float:
    """
    Edit distance divided by the longer string's length (0 to 1).

    Returns:
        0.0 = identical (or both empty)
        1.0 = nothing in common
    """
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 0.0
    return levenshtein_distance(s1, s2) / max_len


def cache_info() -> dict:
    """Hit/miss statistics of the memoised metrics (for --verbose runs)."""
    return {
        "double_metaphone": double_metaphone.cache_info()._asdict(),
        "jaro_winkler_similarity": jaro_winkler_similarity.cache_info()._asdict(),
        "levenshtein_distance": levenshtein_distance.cache_info()._asdict(),
    }


__all__ = [
    "double_metaphone",
    "jaro_winkler_similarity",
    "levenshtein_distance",
    "normalized_levenshtein_distance",
    "cache_info",
]
