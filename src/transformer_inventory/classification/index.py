"""
Substation Index
================

Maps each substation key to the set of feeder numbers observed in the
dataset. Built once per load and read-only afterwards; rebuild it if the
dataset changes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Dict, FrozenSet, Iterable, Iterator, List, Union

from .config import ClassificationConfig, DEFAULT_CONFIG
from .rules import substation_key_for_feeder, substation_label

logger = logging.getLogger(__name__)


def _normalize_key(key: Union[str, int]) -> str:
    return str(key).strip().upper()


def _display_order(key: str):
    # Numeric substations first, in numeric order, then override tags
    if key.isdigit():
        return (0, int(key), "")
    return (1, 0, key)


class SubstationIndex(Mapping):
    """
    Read-only mapping of substation key -> frozenset of feeder numbers.

    Iteration follows display order: numeric keys ascending, then override
    tags alphabetically. Lookups accept ints and untrimmed/lowercase strings.
    """

    def __init__(self, feeders_by_key: Dict[str, FrozenSet[int]]):
        ordered = sorted(feeders_by_key, key=_display_order)
        self._feeders = {k: frozenset(feeders_by_key[k]) for k in ordered}

    @classmethod
    def build(cls, records: Iterable, config: ClassificationConfig = DEFAULT_CONFIG) -> "SubstationIndex":
        """Scan all records once and group their feeder numbers by substation."""
        groups: Dict[str, set] = {}
        for record in records:
            key = substation_key_for_feeder(record.feeder_number, config)
            groups.setdefault(key, set()).add(record.feeder_number)

        index = cls({k: frozenset(v) for k, v in groups.items()})
        logger.debug("Built substation index: %d substations", len(index))
        return index

    def __getitem__(self, key: Union[str, int]) -> FrozenSet[int]:
        return self._feeders[_normalize_key(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._feeders)

    def __len__(self) -> int:
        return len(self._feeders)

    def __contains__(self, key) -> bool:
        return _normalize_key(key) in self._feeders

    def feeders_for(self, key: Union[str, int]) -> FrozenSet[int]:
        """Feeders of a substation; empty for an unknown key."""
        return self._feeders.get(_normalize_key(key), frozenset())

    @property
    def all_feeders(self) -> FrozenSet[int]:
        out = set()
        for feeders in self._feeders.values():
            out |= feeders
        return frozenset(out)

    def options(self, config: ClassificationConfig = DEFAULT_CONFIG) -> List[tuple]:
        """(key, label) pairs for a substation dropdown, in display order."""
        return [(key, substation_label(key, config)) for key in self._feeders]
