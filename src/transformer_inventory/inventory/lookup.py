"""
Serial and Pole Lookup
======================
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..records.models import PoleRecord, TransformerRecord
from ..records.normalize import clean_str

logger = logging.getLogger(__name__)

# Cooper serials are printed with a "CP" prefix that the dataset omits
COOPER_PREFIX = "CP"


def normalize_serial_input(raw: str) -> Tuple[str, bool]:
    """
    Clean a typed serial number.

    Returns:
        Tuple of (search key, whether a CP prefix was stripped)
    """
    s = clean_str(raw)
    had_prefix = s[:2].upper() == COOPER_PREFIX
    if had_prefix:
        s = s[2:]
    s = re.sub(r"\s+", "", s)
    s = re.sub(r"[-_]", "", s)
    return s, had_prefix


def _numeric_form(text: str) -> Optional[str]:
    # "02246025" and "2246025" are the same serial
    if text.isdigit():
        return str(int(text))
    return None


def find_by_serial(records: Sequence[TransformerRecord], raw: str) -> Optional[TransformerRecord]:
    """
    Find a transformer by serial number.

    Tries an exact match on the whitespace-free serial first, then a
    numeric-equivalent match that ignores leading zeros.
    """
    key, had_prefix = normalize_serial_input(raw)
    if not key:
        return None
    if had_prefix:
        logger.info("Stripped CP prefix from serial search %r", raw)

    for r in records:
        if re.sub(r"\s+", "", r.serial) == key:
            return r

    key_num = _numeric_form(key)
    if key_num is not None:
        for r in records:
            if _numeric_form(clean_str(r.serial)) == key_num:
                return r
    return None


def normalize_pole_number(raw: str) -> str:
    return re.sub(r"\s+", "", clean_str(raw)).lower()


class PoleIndex:
    """Pole records keyed by normalized pole number; the first occurrence wins."""

    def __init__(self, poles: Dict[str, PoleRecord]):
        self._poles = dict(poles)

    @classmethod
    def build(cls, poles: Iterable[PoleRecord]) -> "PoleIndex":
        index: Dict[str, PoleRecord] = {}
        for pole in poles:
            key = normalize_pole_number(pole.pole_no)
            if key and key not in index:
                index[key] = pole
        logger.debug("Indexed %d poles", len(index))
        return cls(index)

    def __len__(self) -> int:
        return len(self._poles)

    def lookup(self, raw: str) -> Optional[PoleRecord]:
        key = normalize_pole_number(raw)
        if not key:
            return None
        return self._poles.get(key)
