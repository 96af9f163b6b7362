"""
Dataset Loading
===============

Reads exported JSON datasets and maps raw rows onto the canonical record
types. Field-name guessing happens here, once, so downstream code only ever
sees typed records.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .models import LoadRecord, PoleRecord, TransformerRecord
from .normalize import clean_str, normalize_feeder, normalize_numeric

logger = logging.getLogger(__name__)


# Candidate source keys per canonical field, in priority order
TRANSFORMER_FIELDS: Dict[str, List[str]] = {
    "trans_id": ["TRANS_ID", "Trans_ID", "TransID"],
    "serial": ["SERIAL", "Serial", "Serial_Number", "SERIAL_NUMBER", "SERIAL_NO"],
    "manufacturer": ["MFG", "Manufacturer", "MANUFACTURER", "MFR", "Make", "MAKE", "MFG_NAME"],
    "type": ["TYPE", "Type"],
    "kva": ["KVA", "kVA", "Kva"],
    "imp": ["IMP", "Imp", "Impedance"],
    "pri_volt": ["PRI_VOLT", "Primary", "PRIMARY"],
    "sec_volt": ["SEC_VOLT", "Secondary", "SECONDARY"],
    "status": ["STATUS", "Status", "INV_STATUS", "Inventory_Status"],
    "location": ["LOCATION", "Location"],
    "pole": ["POLE_NO", "Pole", "POLE", "Pole_Number", "POLE#"],
    "feeder": ["FEEDER", "Feeder", "FeederNumberValue", "FEEDER_NO", "FEEDER_ID"],
    "remarks": ["REMARKS", "Remarks"],
}

POLE_FIELDS: Dict[str, List[str]] = {
    "pole_no": ["Pole_No", "POLE_NO", "PoleNo"],
    "pole_id": ["Pole_ID", "POLE_ID"],
    "owner": ["Owner", "OWNER"],
    "material": ["Material", "MATERIAL"],
    "height": ["Height", "HEIGHT"],
    "pole_class": ["Class", "CLASS"],
    "address": ["Address", "ADDRESS"],
    "street": ["Street", "STREET"],
    "location": ["Location", "LOCATION"],
    "sect_no": ["Sect_No", "SECT_NO"],
    "blk_no": ["Blk_No", "BLK_NO"],
    "sec_dist": ["Sec_Dist", "SEC_DIST"],
    "year_set": ["Year_Set", "YEAR_SET"],
    "remarks": ["Remarks", "REMARKS"],
}

FEEDER_KEYS = ["feeder", "Feeder", "FEEDER"]


def extract_rows(data: Any) -> List[Any]:
    """
    Pull the list of row objects out of any supported dataset shape.

    Supports a bare list, ``{"rows": [...]}``, ArcGIS-style
    ``{"features": [{"attributes": {...}}]}`` and keyed objects
    (``{"0": {...}, "1": {...}}``). Anything else yields an empty list.
    """
    if isinstance(data, list):
        return data

    if isinstance(data, dict):
        if isinstance(data.get("rows"), list):
            return data["rows"]

        if isinstance(data.get("features"), list):
            return [
                f["attributes"] if isinstance(f, dict) and isinstance(f.get("attributes"), dict) else f
                for f in data["features"]
            ]

        return list(data.values())

    return []


def pick(row: Any, keys: Iterable[str], fallback: Any = "") -> Any:
    """Return the first present, non-blank value among candidate keys."""
    if not isinstance(row, dict):
        return fallback
    for key in keys:
        if key in row:
            value = row[key]
            if value is not None and str(value).strip() != "":
                return value
    return fallback


def load_record_from_raw(row: Any) -> LoadRecord:
    """Map one feeder analysis row onto a ``LoadRecord``."""
    if not isinstance(row, dict):
        row = {}
    return LoadRecord(
        feeder_number=normalize_feeder(pick(row, FEEDER_KEYS, None)),
        block=clean_str(row.get("block")),
        phase1_kva=normalize_numeric(row.get("phase1_kva")),
        phase2_kva=normalize_numeric(row.get("phase2_kva")),
        phase3_kva=normalize_numeric(row.get("phase3_kva")),
        phase1_cust=normalize_numeric(row.get("phase1_cust")),
        phase2_cust=normalize_numeric(row.get("phase2_cust")),
        phase3_cust=normalize_numeric(row.get("phase3_cust")),
        three_phase_cust=normalize_numeric(row.get("cust_3ph")),
    )


def _adapt(row: Any, fields: Dict[str, List[str]]) -> Dict[str, str]:
    return {name: clean_str(pick(row, keys)) for name, keys in fields.items()}


def transformer_from_raw(row: Any) -> TransformerRecord:
    return TransformerRecord(**_adapt(row, TRANSFORMER_FIELDS))


def pole_from_raw(row: Any) -> PoleRecord:
    return PoleRecord(**_adapt(row, POLE_FIELDS))


def read_json(path: str | Path) -> Any:
    """Load a JSON file, raising FileNotFoundError when it is missing."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")
    return json.loads(p.read_text(encoding="utf-8"))


def load_json_with_fallback(paths: Sequence[str | Path]) -> Tuple[Any, Path]:
    """
    Load the first dataset that exists among ``paths``.

    Returns:
        Tuple of (parsed JSON, path actually used)
    """
    last = ""
    for candidate in paths:
        p = Path(candidate)
        if p.exists():
            logger.info("Loading dataset from %s", p)
            return read_json(p), p
        last = str(p)
    raise FileNotFoundError(f"Could not load dataset. Last attempt: {last}")


def load_feeder_dataset(path: str | Path) -> List[LoadRecord]:
    """Load the feeder analysis table into ``LoadRecord`` objects."""
    rows = extract_rows(read_json(path))
    records = [load_record_from_raw(r) for r in rows]
    logger.info("Loaded %d feeder analysis rows from %s", len(records), path)
    return records


def load_transformers(paths: Sequence[str | Path]) -> List[TransformerRecord]:
    data, used = load_json_with_fallback(paths)
    records = [transformer_from_raw(r) for r in extract_rows(data)]
    logger.info("Loaded %d transformers from %s", len(records), used)
    return records


def load_poles(path: str | Path) -> List[PoleRecord]:
    records = [pole_from_raw(r) for r in extract_rows(read_json(path))]
    logger.info("Loaded %d poles from %s", len(records), path)
    return records
