#!/usr/bin/env python3
"""
Input Reader
============
Parses line-delimited ``name,value`` files into (name, value) pairs.

Blank lines are skipped. The name is taken verbatim (no trimming); the
value is read leniently like a C ``atoi``: leading whitespace, an
optional sign and the leading digits, ignoring anything after them
(so a trailing ``\\r`` or comment is harmless). Extra comma-separated
fields are ignored.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from namekit.models import InvalidRecord
from namekit.settings import get_setting

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def parse_value(text: str) -> int:
    """Leading integer of ``text``; ValueError when there is none."""
    match = _LEADING_INT.match(text)
    if not match:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def parse_lines(lines: Iterable[str]) -> List[Tuple[str, int]]:
    pairs = []
    for line_no, line in enumerate(lines, 1):
        line = line.rstrip('\n')
        if not line.strip():
            continue
        fields = line.split(',')
        index = len(pairs)
        if len(fields) < 2:
            raise InvalidRecord(index, f"missing value field in {line!r}", line=line_no)
        try:
            value = parse_value(fields[1])
        except ValueError as e:
            raise InvalidRecord(index, str(e), line=line_no) from None
        pairs.append((fields[0], value))
    return pairs


def read_records(path: Union[str, Path], encoding: str = None) -> List[Tuple[str, int]]:
    """Read and parse an input file."""
    if encoding is None:
        encoding = get_setting("report.encoding", "utf-8")
    path = Path(path)
    with open(path, encoding=encoding, newline='') as f:
        pairs = parse_lines(f.read().split('\n'))
    logger.debug(f"Read {len(pairs)} records from {path}")
    return pairs
