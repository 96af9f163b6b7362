"""
Inventory Grid
==============

Status rules and column filters for the inventory and in-service pages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Iterable, List, Optional, Sequence

from ..records.models import TransformerRecord
from ..records.normalize import clean_str

INVENTORY_STATUSES = frozenset(s.upper() for s in [
    "IN STOCK",
    "NEW T.B.T.",
    "RECOVERED T.B.T.",
    "NEEDS TESTED",
    "ON HOLD",
    "NEEDS PAINTED",
])


def is_inventory_row(record: TransformerRecord) -> bool:
    """True when the transformer is on the shelf rather than installed."""
    return clean_str(record.status).upper() in INVENTORY_STATUSES


def is_in_service(status: str) -> bool:
    """
    Broad match for installed units.

    Field data uses several spellings: "IN SERVICE", "SERVICE", "INSTALLED",
    "ACTIVE". "INACTIVE" is not in service.
    """
    s = clean_str(status).upper()
    if "IN SERVICE" in s:
        return True
    if s == "SERVICE":
        return True
    if "INSTALLED" in s:
        return True
    return "ACTIVE" in s and "INACTIVE" not in s


@dataclass(frozen=True)
class InventoryFilter:
    """Exact-match column filters; None or "" means no restriction."""
    type: Optional[str] = None
    kva: Optional[str] = None
    pri_volt: Optional[str] = None
    sec_volt: Optional[str] = None

    def matches(self, record: TransformerRecord) -> bool:
        for f in fields(self):
            wanted = getattr(self, f.name)
            if wanted and clean_str(getattr(record, f.name)) != wanted:
                return False
        return True

    def apply(self, records: Iterable[TransformerRecord]) -> List[TransformerRecord]:
        """Inventory-status transformers matching every set column."""
        return [r for r in records if is_inventory_row(r) and self.matches(r)]


def search_records(records: Sequence[TransformerRecord], query: str) -> List[TransformerRecord]:
    """Case-insensitive substring search across all fields of each record."""
    q = clean_str(query).lower()
    if not q:
        return list(records)
    return [
        r for r in records
        if q in " ".join(str(v) for v in r.to_dict().values()).lower()
    ]


def _natural_key(value: str):
    return [(0, int(part), "") if part.isdigit() else (1, 0, part.lower())
            for part in re.split(r"(\d+)", value) if part]


def filter_values(records: Iterable[TransformerRecord], field_name: str) -> List[str]:
    """Distinct non-blank values of a column in natural order (25 before 100)."""
    values = {clean_str(getattr(r, field_name)) for r in records}
    values.discard("")
    return sorted(values, key=_natural_key)


def format_fixed(value, decimals: int = 2) -> str:
    """Fixed-decimal display for numeric text; non-numeric text is shown as-is."""
    text = clean_str(value)
    try:
        return f"{float(text):.{decimals}f}"
    except ValueError:
        return text
