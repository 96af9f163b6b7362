"""
Inventory Lookups
=================

Single-table utilities over the transformer and pole datasets:
- Inventory grid filters and in-service status rules
- Serial number search (Cooper prefix, leading zeros)
- Pole number index
"""

from .grid import (
    INVENTORY_STATUSES,
    is_inventory_row,
    is_in_service,
    InventoryFilter,
    search_records,
    filter_values,
    format_fixed,
)
from .lookup import normalize_serial_input, find_by_serial, normalize_pole_number, PoleIndex

__all__ = [
    "INVENTORY_STATUSES",
    "is_inventory_row",
    "is_in_service",
    "InventoryFilter",
    "search_records",
    "filter_values",
    "format_fixed",
    "normalize_serial_input",
    "find_by_serial",
    "normalize_pole_number",
    "PoleIndex",
]
