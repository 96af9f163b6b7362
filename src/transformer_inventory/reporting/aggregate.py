"""
Load Aggregation
================

Reduces a set of load records to report totals.
"""

from dataclasses import dataclass
from typing import Iterable

from ..records.normalize import normalize_numeric, customer_total


@dataclass(frozen=True)
class Aggregate:
    """
    Summary totals over a record subset.

    Attributes:
        transformer_count: Number of records (a row count, not a field sum)
        customer_total: Sum of all customer-count fields
        phase1_kva_total: Sum of phase 1 kVA
        phase2_kva_total: Sum of phase 2 kVA
        phase3_kva_total: Sum of phase 3 kVA
    """
    transformer_count: int = 0
    customer_total: float = 0.0
    phase1_kva_total: float = 0.0
    phase2_kva_total: float = 0.0
    phase3_kva_total: float = 0.0

    @property
    def combined_kva_total(self) -> float:
        return self.phase1_kva_total + self.phase2_kva_total + self.phase3_kva_total

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "transformer_count": self.transformer_count,
            "customer_total": self.customer_total,
            "phase1_kva_total": self.phase1_kva_total,
            "phase2_kva_total": self.phase2_kva_total,
            "phase3_kva_total": self.phase3_kva_total,
            "combined_kva_total": self.combined_kva_total,
        }


def aggregate(records: Iterable) -> Aggregate:
    """Totals for ``records``; an empty input yields all zeros."""
    count = 0
    customers = 0.0
    p1 = p2 = p3 = 0.0

    for r in records:
        count += 1  # Count([Feeder]) in the legacy report: one per row
        customers += customer_total(r)
        p1 += normalize_numeric(r.phase1_kva)
        p2 += normalize_numeric(r.phase2_kva)
        p3 += normalize_numeric(r.phase3_kva)

    return Aggregate(
        transformer_count=count,
        customer_total=customers,
        phase1_kva_total=p1,
        phase2_kva_total=p2,
        phase3_kva_total=p3,
    )
