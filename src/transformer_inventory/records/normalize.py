"""
Field Normalization
===================

Converts raw, heterogeneous field values into clean numbers and strings.

Blank or malformed numeric fields count as zero: a transformer with an
empty kVA cell still counts as a transformer, it just adds no load.
"""

from __future__ import annotations

import math
import numbers
from typing import Any


def normalize_numeric(value: Any) -> float:
    """
    Return the finite numeric value of ``value``, or 0.0.

    Accepts any real number (int, float, Decimal, numpy scalars) and numeric
    strings (surrounding whitespace is ignored). None, blanks, non-numeric
    text, booleans, NaN, infinities and values too large for a float all
    normalize to 0.0. Never raises.
    """
    if value is None or isinstance(value, (bool, complex)):
        return 0.0

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    elif not isinstance(value, numbers.Number):
        return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0

    return number if math.isfinite(number) else 0.0


def normalize_feeder(value: Any) -> int:
    """Integer feeder number; malformed values map to feeder 0."""
    return int(normalize_numeric(value))


def clean_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def customer_total(record) -> float:
    """Sum of the four customer-count fields of a load record."""
    return (
        normalize_numeric(record.phase1_cust)
        + normalize_numeric(record.phase2_cust)
        + normalize_numeric(record.phase3_cust)
        + normalize_numeric(record.three_phase_cust)
    )


def combined_kva(record) -> float:
    """Sum of the three per-phase kVA fields of a load record."""
    return (
        normalize_numeric(record.phase1_kva)
        + normalize_numeric(record.phase2_kva)
        + normalize_numeric(record.phase3_kva)
    )
