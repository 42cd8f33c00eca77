#!/usr/bin/env python3
"""
namekit - Phonetic Name Confusion Analysis
==========================================

Finds groups of names that sound alike and ranks them by how likely they
are to be confused with one another.

Quick Start
-----------
    from namekit import analyze, render_report

    clusters = analyze([("Katherine", 10), ("Catherine", 7), ("Kathryn", 3)])
    print(render_report(clusters))

Modules
-------
    namekit.complexity          - Per-name complexity score
    namekit.indexer             - Phonetic bucketing (Double Metaphone)
    namekit.diversity           - Orthographic diversity of a name sample
    namekit.scoring             - Cluster confusion score
    namekit.clusters            - Bucket filtering and aggregation
    namekit.ranking             - Stable ranking by score
    namekit.pipeline            - The stages wired together
    namekit.ingest / report     - Input files and text/JSON/console output

CLI Usage
---------
    python -m namekit analyze names.txt
    python -m namekit complexity "Katherine" -v
"""

__version__ = "0.1.0"

from .models import (
    ClusterBuildError,
    ComplexityBreakdown,
    ConfusionCluster,
    ConfusionFactors,
    InvalidRecord,
    NameKitError,
    NameRecord,
    PhoneticCode,
)
from .complexity import ComplexityScorer, compute_complexity
from .indexer import PhoneticIndexer
from .diversity import OrthographicDiversityEstimator
from .scoring import ConfusionScorer
from .clusters import ClusterBuilder
from .ranking import Ranker
from .pipeline import ConfusionPipeline, analyze
from .ingest import parse_lines, read_records
from .report import clusters_to_json, render_report, write_report

__all__ = [
    "__version__",
    # Models
    "NameRecord",
    "PhoneticCode",
    "ConfusionCluster",
    "ConfusionFactors",
    "ComplexityBreakdown",
    # Errors
    "NameKitError",
    "InvalidRecord",
    "ClusterBuildError",
    # Stages
    "ComplexityScorer",
    "compute_complexity",
    "PhoneticIndexer",
    "OrthographicDiversityEstimator",
    "ConfusionScorer",
    "ClusterBuilder",
    "Ranker",
    "ConfusionPipeline",
    "analyze",
    # I/O
    "parse_lines",
    "read_records",
    "render_report",
    "write_report",
    "clusters_to_json",
]
