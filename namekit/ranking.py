#!/usr/bin/env python3
"""Ordering of scored clusters."""

from operator import attrgetter
from typing import Iterable, List

from namekit.models import ConfusionCluster


class Ranker:
    """
    Sorts clusters by confusion score, highest first.

    The sort is stable: clusters with equal scores stay in the order the
    builder produced them. There is intentionally no secondary key.
    """

    def rank(self, clusters: Iterable[ConfusionCluster]) -> List[ConfusionCluster]:
        # reverse=True keeps equal elements in their original order.
        return sorted(clusters, key=attrgetter("confusion_score"), reverse=True)
