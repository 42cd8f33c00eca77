#!/usr/bin/env python3
"""
Cluster Building
================
Turns phonetic buckets into scored, immutable ConfusionCluster records.

Each bucket is scored independently of every other, so scoring can fan
out over a thread pool. Results are always merged back in bucket order.

Usage:
    builder = ClusterBuilder(workers=4)
    clusters = builder.build(PhoneticIndexer().index(records))
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from namekit.indexer import Buckets
from namekit.models import ClusterBuildError, ConfusionCluster, NameRecord, PhoneticCode
from namekit.scoring import ConfusionScorer
from namekit.settings import require_setting

logger = logging.getLogger(__name__)


def _mean(values: Iterable[float]) -> float:
    # Plain left-to-right accumulation; sum() compensates float error on 3.12+.
    total = 0.0
    count = 0
    for value in values:
        total += value
        count += 1
    return total / count


class ClusterBuilder:
    """Filters out singleton buckets and scores the rest."""

    def __init__(self,
                 scorer: Optional[ConfusionScorer] = None,
                 min_cluster_size: Optional[int] = None,
                 workers: Optional[int] = None):
        """
        Args:
            scorer: Confusion scorer (default: configured ConfusionScorer)
            min_cluster_size: Smallest bucket that becomes a cluster
            workers: Threads used for scoring; 1 scores sequentially
        """
        if min_cluster_size is None:
            min_cluster_size = require_setting("confusion.min_cluster_size")
        if workers is None:
            workers = require_setting("parallel.cluster_workers")
        if min_cluster_size < 2:
            raise ValueError("min_cluster_size must be at least 2")
        if workers < 1:
            raise ValueError("workers must be positive")

        self.scorer = scorer or ConfusionScorer()
        self.min_cluster_size = min_cluster_size
        self.workers = workers

    def qualifying(self, buckets: Buckets) -> List[Tuple[PhoneticCode, Sequence[NameRecord]]]:
        return [(code, group) for code, group in buckets.items()
                if len(group) >= self.min_cluster_size]

    def build_one(self, code: PhoneticCode, group: Sequence[NameRecord]) -> ConfusionCluster:
        try:
            factors = self.scorer.factors(group)
            return ConfusionCluster(
                phonetic_code=code,
                members=tuple(group),
                avg_value=_mean(m.value for m in group),
                avg_complexity=_mean(m.complexity for m in group),
                confusion_score=self.scorer.combine(factors),
                factors=factors,
            )
        except (ArithmeticError, TypeError, ValueError) as e:
            raise ClusterBuildError(code, str(e)) from e

    def build(self, buckets: Buckets) -> List[ConfusionCluster]:
        survivors = self.qualifying(buckets)
        logger.debug(f"{len(survivors)} of {len(buckets)} buckets have "
                     f"{self.min_cluster_size}+ members")

        if self.workers == 1 or len(survivors) < 2:
            return [self.build_one(code, group) for code, group in survivors]

        # map() yields in submission order regardless of completion order.
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            return list(executor.map(lambda item: self.build_one(*item), survivors))
