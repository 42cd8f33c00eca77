"""
Tests for the Analysis Pipeline
===============================
End-to-end tests for namekit/pipeline.py.
"""

import math
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit import analyze
from namekit.clusters import ClusterBuilder
from namekit.indexer import PhoneticIndexer
from namekit.models import InvalidRecord
from namekit.pipeline import ConfusionPipeline, validate_pair
from namekit.profiler import PipelineProfiler

KATH_CODES = {
    "Katherine": ("K0RN", "KTRN"),
    "Catherine": ("K0RN", "KTRN"),
    "Kathryn": ("K0RN", "KTRN"),
    "Zzyzx": ("SSKS", ""),
}


@pytest.fixture
def pipeline():
    return ConfusionPipeline(indexer=PhoneticIndexer(encoder=lambda name: KATH_CODES[name]))


class TestExample:
    """The Katherine/Catherine/Kathryn/Zzyzx example."""

    PAIRS = [("Katherine", 10), ("Catherine", 7), ("Kathryn", 3), ("Zzyzx", 1)]

    def test_single_cluster(self, pipeline):
        clusters = pipeline.run(self.PAIRS)
        assert len(clusters) == 1
        cluster = clusters[0]
        assert cluster.names == ("Katherine", "Catherine", "Kathryn")
        assert cluster.avg_value == pytest.approx(20 / 3)
        assert cluster.code_display == "K0RN|KTRN"

    def test_singleton_discarded(self, pipeline):
        clusters = pipeline.run(self.PAIRS)
        assert all("Zzyzx" not in c.names for c in clusters)

    def test_complexity_precomputed(self, pipeline):
        records = pipeline.ingest(self.PAIRS)
        scorer = pipeline.complexity_scorer
        assert [r.complexity for r in records] == [scorer.compute(n) for n, _ in self.PAIRS]

    def test_score_factors(self, pipeline):
        cluster = pipeline.run(self.PAIRS)[0]
        assert cluster.factors.size_penalty == pytest.approx(3 / 5)
        assert cluster.factors.value_spread == pytest.approx(1 - 3 / 10)

    def test_real_encoder_groups_k_and_c(self):
        clusters = analyze([("Katherine", 10), ("Catherine", 7), ("Zzyzx", 1)])
        assert len(clusters) == 1
        assert set(clusters[0].names) == {"Katherine", "Catherine"}


class TestRunProperties:
    """Properties that hold for any input."""

    def test_no_small_clusters(self):
        pairs = [(n, i) for i, n in enumerate(
            ["Smith", "Smyth", "Schmidt", "Jon", "John", "Joan", "Xavier", "Philip", "Phillip"])]
        assert all(c.size >= 2 for c in analyze(pairs))

    def test_deterministic(self):
        pairs = [("Smith", 4), ("Smyth", 9), ("Jon", 2), ("John", 6), ("Sean", 1), ("Shawn", 3)]
        first = analyze(pairs)
        second = analyze(pairs)
        assert first == second
        assert [c.orthographic_diversity for c in first] == [c.factors.ortho_diversity for c in first]

    def test_all_zero_values(self, pipeline):
        clusters = pipeline.run([("Katherine", 0), ("Catherine", 0)])
        assert clusters[0].factors.value_spread == 0.0
        assert math.isfinite(clusters[0].confusion_score)

    def test_empty_input(self, pipeline):
        assert pipeline.run([]) == []

    def test_workers(self):
        pairs = [("Smith", 4), ("Smyth", 9), ("Jon", 2), ("John", 6)]
        assert analyze(pairs, workers=3) == analyze(pairs, workers=1)

    def test_profiler_records_stages(self):
        profiler = PipelineProfiler(enabled=True)
        pipeline = ConfusionPipeline(
            indexer=PhoneticIndexer(encoder=lambda name: KATH_CODES[name]),
            builder=ClusterBuilder(workers=1),
            profiler=profiler,
        )
        pipeline.run([("Katherine", 1), ("Catherine", 2)])
        assert list(profiler.stages) == ["ingest", "index", "build", "rank"]
        assert profiler.stages["ingest"].items == 2
        assert "Pipeline timings" in profiler.report()
        assert profiler.to_dict()["stages"]["ingest"]["items"] == 2

    def test_disabled_profiler_records_nothing(self, pipeline):
        pipeline.run([("Katherine", 1), ("Catherine", 2)])
        assert pipeline.profiler.stages == {}
        assert pipeline.profiler.report() == ""


class TestValidation:
    """Tests for record validation."""

    def test_valid(self):
        assert validate_pair(0, ("Ann", 0)) == ("Ann", 0)

    @pytest.mark.parametrize("pair", [
        ("", 3),
        (None, 3),
        ("Ann", -1),
        ("Ann", 2.5),
        ("Ann", "7"),
        ("Ann", True),
        ("Ann",),
        "Ann",
    ])
    def test_invalid(self, pair):
        with pytest.raises(InvalidRecord):
            validate_pair(4, pair)

    def test_names_offending_index(self, pipeline):
        with pytest.raises(InvalidRecord) as exc_info:
            pipeline.run([("Katherine", 1), ("Catherine", 2), ("Kathryn", -5)])
        assert exc_info.value.index == 2
        assert "record 2" in str(exc_info.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_pair(0, ("", 1))
