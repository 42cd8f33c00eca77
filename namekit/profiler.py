#!/usr/bin/env python3
"""
Pipeline Profiler
=================
Wall-clock timing of the ingest, index, build and rank stages.

Usage:
    namekit analyze names.txt --profiling
    namekit analyze names.txt --profiling --profile-output profile.json
"""

import json
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass
class StageTiming:
    """Accumulated time and item count for one stage."""
    seconds: float = 0.0
    items: int = 0

    @property
    def ms_per_item(self) -> Optional[float]:
        return self.seconds * 1000 / self.items if self.items else None


class PipelineProfiler:
    """
    Records how long each pipeline stage takes. A disabled profiler
    records nothing, so the pipeline can always time its stages.

    Example:
        profiler = PipelineProfiler(enabled=True)
        clusters = ConfusionPipeline(profiler=profiler).run(pairs)
        print(profiler.report())
    """

    def __init__(self, enabled: bool = False):
        self.enabled = enabled
        self.stages: Dict[str, StageTiming] = {}
        self._started: Optional[float] = None
        self._elapsed: Optional[float] = None

    def start(self):
        if self.enabled:
            self._started = time.perf_counter()
            self._elapsed = None

    def stop(self):
        if self.enabled and self._started is not None and self._elapsed is None:
            self._elapsed = time.perf_counter() - self._started

    @property
    def total_time(self) -> float:
        if self._started is None:
            return 0.0
        if self._elapsed is None:
            return time.perf_counter() - self._started
        return self._elapsed

    @contextmanager
    def stage(self, name: str, items: int = 0):
        if not self.enabled:
            yield
            return

        began = time.perf_counter()
        try:
            yield
        finally:
            timing = self.stages.setdefault(name, StageTiming())
            timing.seconds += time.perf_counter() - began
            timing.items += items

    def report(self) -> str:
        """Stage table in run order; empty when profiling is off."""
        if not self.enabled or not self.stages:
            return ""

        self.stop()
        total = self.total_time
        lines = ["", f"Pipeline timings ({total:.4f}s total)", ""]
        for name, timing in self.stages.items():
            share = timing.seconds / total * 100 if total > 0 else 0.0
            rate = "" if timing.ms_per_item is None else f"  {timing.ms_per_item:.4f} ms/item"
            lines.append(f"  {name:<8}{timing.seconds:>9.4f}s {share:>5.1f}%  "
                         f"{timing.items:>6} items{rate}")
        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        self.stop()
        return {
            "total_seconds": self.total_time,
            "stages": {name: dict(asdict(timing), ms_per_item=timing.ms_per_item)
                       for name, timing in self.stages.items()},
        }

    def save_json(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
