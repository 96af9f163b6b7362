"""
Feeder Analysis Reporting
=========================

Legacy-compatible feeder analysis report:
- Filter pipeline over a ViewState (substation, feeder, kVA threshold, search)
- Feeder / block grouping in numeric feeder order
- Aggregates per block, per feeder and for the scoped bottom total
- Export to DataFrame, JSON and printable HTML
"""

from .aggregate import Aggregate, aggregate
from .filters import ViewState, filter_for_display, records_for_total_scope, feeder_options
from .grouping import (
    BlockGroup,
    FeederGroup,
    FeederReport,
    group_by_feeder,
    group_by_block,
    build_report,
    run_report,
)
from .export import report_rows, report_to_frame, report_to_dict, report_to_html

__all__ = [
    "Aggregate",
    "aggregate",
    "ViewState",
    "filter_for_display",
    "records_for_total_scope",
    "feeder_options",
    "BlockGroup",
    "FeederGroup",
    "FeederReport",
    "group_by_feeder",
    "group_by_block",
    "build_report",
    "run_report",
    "report_rows",
    "report_to_frame",
    "report_to_dict",
    "report_to_html",
]
