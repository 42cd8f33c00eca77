#!/usr/bin/env python3
"""
Confusion Analysis Pipeline
===========================
Runs the scoring stages in order, each consuming the previous stage's
immutable output:

    (name, value) pairs
      -> ingest   NameRecord with complexity
      -> index    phonetic buckets
      -> build    scored ConfusionClusters (2+ members)
      -> rank     clusters by score, stable on ties

Usage:
    from namekit.pipeline import ConfusionPipeline

    clusters = ConfusionPipeline().run([("Katherine", 10), ("Catherine", 7)])
    for cluster in clusters:
        print(cluster.code_display, cluster.confusion_score)
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from namekit.clusters import ClusterBuilder
from namekit.complexity import ComplexityScorer
from namekit.indexer import Buckets, PhoneticIndexer
from namekit.models import ConfusionCluster, InvalidRecord, NameRecord
from namekit.profiler import PipelineProfiler
from namekit.ranking import Ranker

logger = logging.getLogger(__name__)


def validate_pair(index: int, pair) -> Tuple[str, int]:
    """Check one (name, value) pair, raising InvalidRecord naming its index."""
    try:
        name, value = pair
    except (TypeError, ValueError):
        raise InvalidRecord(index, f"expected a (name, value) pair, got {pair!r}") from None

    if not isinstance(name, str) or not name:
        raise InvalidRecord(index, f"missing name (got {name!r})")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecord(index, f"value for {name!r} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidRecord(index, f"value for {name!r} must be non-negative, got {value}")
    return name, value


class ConfusionPipeline:
    """Explicit sequence of the analysis stages."""

    def __init__(self,
                 complexity_scorer: Optional[ComplexityScorer] = None,
                 indexer: Optional[PhoneticIndexer] = None,
                 builder: Optional[ClusterBuilder] = None,
                 ranker: Optional[Ranker] = None,
                 profiler: Optional[PipelineProfiler] = None):
        self.complexity_scorer = complexity_scorer or ComplexityScorer()
        self.indexer = indexer or PhoneticIndexer()
        self.builder = builder or ClusterBuilder()
        self.ranker = ranker or Ranker()
        self.profiler = profiler or PipelineProfiler(enabled=False)

    def ingest(self, pairs: Iterable[Tuple[str, int]]) -> List[NameRecord]:
        records = []
        for index, pair in enumerate(pairs):
            name, value = validate_pair(index, pair)
            records.append(NameRecord(
                name=name,
                value=value,
                complexity=self.complexity_scorer.compute(name),
            ))
        return records

    def index(self, records: Sequence[NameRecord]) -> Buckets:
        return self.indexer.index(records)

    def build(self, buckets: Buckets) -> List[ConfusionCluster]:
        return self.builder.build(buckets)

    def rank(self, clusters: Sequence[ConfusionCluster]) -> List[ConfusionCluster]:
        return self.ranker.rank(clusters)

    def run(self, pairs: Iterable[Tuple[str, int]]) -> List[ConfusionCluster]:
        profiler = self.profiler
        profiler.start()

        pairs = list(pairs)
        with profiler.stage("ingest", items=len(pairs)):
            records = self.ingest(pairs)
        with profiler.stage("index", items=len(records)):
            buckets = self.index(records)
        with profiler.stage("build", items=len(buckets)):
            clusters = self.build(buckets)
        with profiler.stage("rank", items=len(clusters)):
            ranked = self.rank(clusters)

        profiler.stop()
        logger.info(f"Analysed {len(records)} names: {len(buckets)} phonetic codes, "
                    f"{len(ranked)} confusion clusters")
        return ranked


def analyze(pairs: Iterable[Tuple[str, int]], workers: Optional[int] = None) -> List[ConfusionCluster]:
    """Rank confusion clusters for ``(name, value)`` pairs with default settings."""
    builder = ClusterBuilder(workers=workers) if workers is not None else None
    return ConfusionPipeline(builder=builder).run(pairs)
