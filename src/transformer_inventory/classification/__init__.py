"""
Classification Layer
====================

Static override tables and the rules that turn feeder numbers into
display labels and substation keys.
"""

from .config import ClassificationConfig, DEFAULT_CONFIG
from .rules import (
    ALL,
    SYSTEM_TOTAL_LABEL,
    feeder_label,
    substation_key_for_feeder,
    substation_label,
    total_label,
)
from .index import SubstationIndex

__all__ = [
    "ClassificationConfig",
    "DEFAULT_CONFIG",
    "ALL",
    "SYSTEM_TOTAL_LABEL",
    "feeder_label",
    "substation_key_for_feeder",
    "substation_label",
    "total_label",
    "SubstationIndex",
]
