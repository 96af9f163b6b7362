"""
Feeder Report Grouping
======================

Builds the feeder analysis report: feeders in numeric order, optional
block breakdown inside each feeder, and a scoped bottom total.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..classification.config import ClassificationConfig, DEFAULT_CONFIG
from ..classification.index import SubstationIndex
from ..classification.rules import ALL, feeder_label, total_label
from ..records.models import LoadRecord
from ..records.normalize import clean_str
from .aggregate import Aggregate, aggregate
from .filters import ViewState, filter_for_display, records_for_total_scope


@dataclass(frozen=True)
class BlockGroup:
    """Records of one block within a feeder."""
    block: str
    total: Aggregate

    def to_dict(self) -> dict:
        return {"block": self.block, "total": self.total.to_dict()}


@dataclass(frozen=True)
class FeederGroup:
    """
    One feeder section of the report.

    Attributes:
        feeder_number: Underlying numeric feeder id (sort key)
        label: Display label after overrides
        total: Totals over all of the feeder's displayed records
        blocks: Block breakdown (empty when block detail is off)
    """
    feeder_number: int
    label: str
    total: Aggregate
    blocks: Tuple[BlockGroup, ...] = ()

    @property
    def total_label(self) -> str:
        return f"{self.label} Total"

    def to_dict(self) -> dict:
        return {
            "feeder_number": self.feeder_number,
            "label": self.label,
            "total": self.total.to_dict(),
            "blocks": [b.to_dict() for b in self.blocks],
        }


@dataclass(frozen=True)
class FeederReport:
    """Ordered feeder groups plus the bottom total and its scope label."""
    groups: Tuple[FeederGroup, ...]
    grand_total: Aggregate
    grand_total_label: str
    row_count: int = 0
    substation: str = ALL
    show_blocks: bool = True

    @property
    def feeder_count(self) -> int:
        return len(self.groups)

    def to_dict(self) -> dict:
        return {
            "substation": self.substation,
            "show_blocks": self.show_blocks,
            "row_count": self.row_count,
            "feeder_count": self.feeder_count,
            "groups": [g.to_dict() for g in self.groups],
            "grand_total": {
                "label": self.grand_total_label,
                **self.grand_total.to_dict(),
            },
        }


def group_by_feeder(records: Sequence[LoadRecord]) -> List[Tuple[int, List[LoadRecord]]]:
    """Partition records by feeder, ordered by numeric feeder number."""
    by_feeder: Dict[int, List[LoadRecord]] = {}
    for r in records:
        by_feeder.setdefault(r.feeder_number, []).append(r)
    return sorted(by_feeder.items(), key=lambda item: item[0])


def group_by_block(records: Sequence[LoadRecord]) -> List[Tuple[str, List[LoadRecord]]]:
    """Partition records by block; blank blocks are left out."""
    by_block: Dict[str, List[LoadRecord]] = {}
    for r in records:
        block = clean_str(r.block)
        if not block:
            continue
        by_block.setdefault(block, []).append(r)
    return sorted(by_block.items(), key=lambda item: item[0])


def build_report(
    filtered: Sequence[LoadRecord],
    total_scope: Sequence[LoadRecord],
    substation: str = ALL,
    show_blocks: bool = True,
    config: ClassificationConfig = DEFAULT_CONFIG,
) -> FeederReport:
    """
    Group the displayed records and compute every total in the report.

    Args:
        filtered: Records displayed in the report body
        total_scope: Records of the selected substation (all records for ALL)
        substation: "ALL" or the selected substation key
        show_blocks: Break feeders down by block
        config: Label override tables

    Returns:
        FeederReport. With no substation selected the bottom total covers the
        displayed records ("System Total"); otherwise it covers
        ``total_scope`` ("{Substation} Total"). Blocks never affect it.
    """
    groups = []
    for feeder_number, feeder_rows in group_by_feeder(filtered):
        blocks: Tuple[BlockGroup, ...] = ()
        if show_blocks:
            blocks = tuple(
                BlockGroup(block=b, total=aggregate(rows))
                for b, rows in group_by_block(feeder_rows)
            )
        groups.append(FeederGroup(
            feeder_number=feeder_number,
            label=feeder_label(feeder_number, config),
            total=aggregate(feeder_rows),
            blocks=blocks,
        ))

    if substation == ALL:
        grand_total = aggregate(filtered)
    else:
        grand_total = aggregate(total_scope)

    return FeederReport(
        groups=tuple(groups),
        grand_total=grand_total,
        grand_total_label=total_label(substation, config),
        row_count=len(filtered),
        substation=substation,
        show_blocks=show_blocks,
    )


def run_report(
    records: Sequence[LoadRecord],
    view: ViewState,
    index: SubstationIndex,
    config: ClassificationConfig = DEFAULT_CONFIG,
) -> FeederReport:
    """Filter and group ``records`` for one render of ``view``."""
    return build_report(
        filter_for_display(records, view, index, config),
        records_for_total_scope(records, view, index),
        substation=view.substation,
        show_blocks=view.show_blocks,
        config=config,
    )
