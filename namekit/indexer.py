#!/usr/bin/env python3
"""Phonetic bucketing of name records."""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from namekit.models import NameRecord, PhoneticCode
from namekit.phonetic_similarity import double_metaphone

logger = logging.getLogger(__name__)

Encoder = Callable[[str], Tuple[str, str]]
Buckets = Dict[PhoneticCode, List[NameRecord]]


class PhoneticIndexer:
    """
    Groups records by their (primary, secondary) phonetic code.

    Bucket contents keep input order, and buckets themselves are ordered
    by the first record that landed in them. Ranking relies on this for
    its tie order.
    """

    def __init__(self, encoder: Optional[Encoder] = None):
        self.encoder = encoder or double_metaphone

    def code_for(self, name: str) -> PhoneticCode:
        primary, secondary = self.encoder(name)
        return PhoneticCode(primary or "", secondary or "")

    def index(self, records: Iterable[NameRecord]) -> Buckets:
        buckets: Buckets = {}
        for record in records:
            buckets.setdefault(self.code_for(record.name), []).append(record)
        logger.debug(f"Indexed records into {len(buckets)} phonetic buckets")
        return buckets
