"""
Filter Pipeline
===============

Turns the full record set plus the current view state into:
- the records displayed in the report body, and
- the records covered by the bottom total.

The two differ on purpose: once a substation is selected, the bottom total
covers the whole substation even if the feeder dropdown or the search box
narrows the rows shown above it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Union

from ..classification.config import ClassificationConfig, DEFAULT_CONFIG
from ..classification.index import SubstationIndex
from ..classification.rules import ALL, feeder_label
from ..records.models import LoadRecord
from ..records.normalize import combined_kva, normalize_numeric


def _substation_choice(key: Union[str, int, None]) -> str:
    """Return ALL or the trimmed, uppercased substation key."""
    key = "" if key is None else str(key).strip().upper()
    return key or ALL


def _feeder_choice(value: Union[str, int, None]) -> Union[str, int]:
    """Return ALL or an int feeder number; numeric strings are converted."""
    if value is None:
        return ALL
    if isinstance(value, str):
        text = value.strip()
        if text.upper() in ("", ALL):
            return ALL
        if not text.isdigit():
            raise ValueError(f"feeder must be 'ALL' or a feeder number, got {value!r}")
        return int(text)
    if isinstance(value, bool):
        raise ValueError(f"feeder must be 'ALL' or a feeder number, got {value!r}")
    return int(value)


@dataclass(frozen=True)
class ViewState:
    """
    User filter selections for one render.

    Attributes:
        substation: "ALL" or a substation key
        feeder: "ALL" or a feeder number
        query: Free-text search against feeder display labels
        min_kva: Minimum combined kVA per row (None = no threshold)
        show_blocks: Whether feeders are broken down by block
    """
    substation: str = ALL
    feeder: Union[str, int] = ALL
    query: str = ""
    min_kva: Optional[float] = None
    show_blocks: bool = True

    def __post_init__(self):
        # Frozen: normalized values are written back through object.__setattr__
        object.__setattr__(self, "substation", _substation_choice(self.substation))
        object.__setattr__(self, "feeder", _feeder_choice(self.feeder))
        object.__setattr__(self, "query", self.query or "")

    def select_substation(self, key: Union[str, int]) -> "ViewState":
        """Change substation; the feeder selection and search are cleared."""
        return replace(self, substation=key, feeder=ALL, query="")

    def select_feeder(self, value: Union[str, int]) -> "ViewState":
        return replace(self, feeder=value)

    def search(self, text: str) -> "ViewState":
        return replace(self, query=text or "")

    def with_min_kva(self, value) -> "ViewState":
        """Set the kVA threshold; blank input clears it."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return replace(self, min_kva=None)
        return replace(self, min_kva=normalize_numeric(value))

    def with_blocks(self, show: bool) -> "ViewState":
        return replace(self, show_blocks=bool(show))

    def reset(self) -> "ViewState":
        return ViewState()


def _in_substation(records: Sequence[LoadRecord], substation: str, index: SubstationIndex) -> List[LoadRecord]:
    if substation == ALL:
        return list(records)
    allowed = index.feeders_for(substation)
    return [r for r in records if r.feeder_number in allowed]


def filter_for_display(
    records: Sequence[LoadRecord],
    view: ViewState,
    index: SubstationIndex,
    config: ClassificationConfig = DEFAULT_CONFIG,
) -> List[LoadRecord]:
    """
    Records shown in the report body.

    Applies, in order: substation scope, exact feeder, minimum combined kVA,
    and the search query. The query is matched case-insensitively against
    the feeder display label only; for overridden feeders the override label
    replaces the numeric one entirely ("1203" does not find "THEISS 3").
    """
    rows = _in_substation(records, view.substation, index)

    if view.feeder != ALL:
        rows = [r for r in rows if r.feeder_number == view.feeder]

    if view.min_kva is not None:
        rows = [r for r in rows if combined_kva(r) >= view.min_kva]

    q = view.query.strip().lower()
    if q:
        rows = [r for r in rows if q in feeder_label(r.feeder_number, config).lower()]

    return rows


def records_for_total_scope(
    records: Sequence[LoadRecord],
    view: ViewState,
    index: SubstationIndex,
) -> List[LoadRecord]:
    """Records covered by the bottom total: substation scope only."""
    return _in_substation(records, view.substation, index)


def feeder_options(
    records: Sequence[LoadRecord],
    index: SubstationIndex,
    substation: str = ALL,
) -> List[int]:
    """Feeder numbers offered by the feeder dropdown, ascending."""
    if substation == ALL:
        return sorted({r.feeder_number for r in records})
    return sorted(index.feeders_for(substation))
