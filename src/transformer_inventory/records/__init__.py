"""
Records Layer
=============

Canonical record types, numeric normalization and dataset loading.
"""

from .models import LoadRecord, TransformerRecord, PoleRecord
from .normalize import normalize_numeric, normalize_feeder, clean_str, customer_total, combined_kva
from .loader import (
    extract_rows,
    pick,
    load_record_from_raw,
    transformer_from_raw,
    pole_from_raw,
    read_json,
    load_json_with_fallback,
    load_feeder_dataset,
    load_transformers,
    load_poles,
)

__all__ = [
    "LoadRecord",
    "TransformerRecord",
    "PoleRecord",
    "normalize_numeric",
    "normalize_feeder",
    "clean_str",
    "customer_total",
    "combined_kva",
    "extract_rows",
    "pick",
    "load_record_from_raw",
    "transformer_from_raw",
    "pole_from_raw",
    "read_json",
    "load_json_with_fallback",
    "load_feeder_dataset",
    "load_transformers",
    "load_poles",
]
