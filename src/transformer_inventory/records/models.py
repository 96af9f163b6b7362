"""
Record Models
=============

Canonical, immutable records built once when a dataset is loaded.
"""

from dataclasses import dataclass, asdict
from typing import Any


@dataclass(frozen=True)
class LoadRecord:
    """
    One transformer-to-feeder assignment from the feeder analysis table.

    Numeric fields normally hold floats produced by the loader, but raw
    values (None, text) are tolerated: every consumer reads them through
    ``normalize_numeric``.

    Attributes:
        feeder_number: Numeric feeder identifier
        block: Optional grouping key within the feeder ("" when absent)
        phase1_kva: Connected kVA on phase 1
        phase2_kva: Connected kVA on phase 2
        phase3_kva: Connected kVA on phase 3
        phase1_cust: Customers served from phase 1
        phase2_cust: Customers served from phase 2
        phase3_cust: Customers served from phase 3
        three_phase_cust: Three-phase customers
    """
    feeder_number: int
    block: str = ""
    phase1_kva: Any = 0.0
    phase2_kva: Any = 0.0
    phase3_kva: Any = 0.0
    phase1_cust: Any = 0.0
    phase2_cust: Any = 0.0
    phase3_cust: Any = 0.0
    three_phase_cust: Any = 0.0


@dataclass(frozen=True)
class TransformerRecord:
    """Inventory transformer, as shown by the inventory, service and serial pages."""
    trans_id: str = ""
    serial: str = ""
    manufacturer: str = ""
    type: str = ""
    kva: str = ""
    imp: str = ""
    pri_volt: str = ""
    sec_volt: str = ""
    status: str = ""
    location: str = ""
    pole: str = ""
    feeder: str = ""
    remarks: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PoleRecord:
    """Pole attributes from the pole dataset."""
    pole_no: str = ""
    pole_id: str = ""
    owner: str = ""
    material: str = ""
    height: str = ""
    pole_class: str = ""
    address: str = ""
    street: str = ""
    location: str = ""
    sect_no: str = ""
    blk_no: str = ""
    sec_dist: str = ""
    year_set: str = ""
    remarks: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
