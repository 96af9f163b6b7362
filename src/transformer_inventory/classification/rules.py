"""
Classification Rules
====================

Pure mappings from a feeder number to its display label and substation.

Substations are derived from the feeder numbering scheme (feeder 142 is on
substation 1) except for feeders listed in the override table, which are
checked first.
"""

from __future__ import annotations

from typing import Union

from .config import ClassificationConfig, DEFAULT_CONFIG

ALL = "ALL"
SYSTEM_TOTAL_LABEL = "System Total"


def feeder_label(feeder_number: int, config: ClassificationConfig = DEFAULT_CONFIG) -> str:
    """Display label, e.g. 'Feeder 101' or 'THEISS 3' for an overridden feeder."""
    override = config.feeder_labels.get(feeder_number)
    if override is not None:
        return override
    return f"Feeder {feeder_number}"


def substation_key_for_feeder(feeder_number: int, config: ClassificationConfig = DEFAULT_CONFIG) -> str:
    """
    Substation key for a feeder.

    Args:
        feeder_number: Non-negative feeder number
        config: Override tables

    Returns:
        Override tag (e.g. "THEISS") or str(feeder_number // 100)
    """
    override = config.substation_overrides.get(feeder_number)
    if override is not None:
        return override
    return str(feeder_number // 100)


def substation_label(key: Union[str, int], config: ClassificationConfig = DEFAULT_CONFIG) -> str:
    key = str(key).strip().upper()
    if key in config.substation_labels:
        return config.substation_labels[key]
    if key.isdigit():
        return f"Substation {key}"
    if key in config.override_tags:
        return key
    return f"Substation {key}"


def total_label(substation: str, config: ClassificationConfig = DEFAULT_CONFIG) -> str:
    """Label of the bottom total row for a substation scope."""
    if substation == ALL:
        return SYSTEM_TOTAL_LABEL
    return f"{substation_label(substation, config)} Total"
