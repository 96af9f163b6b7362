"""
Report Export
=============

Flattens a FeederReport into table rows for the page, the CLI and the
printable document.
"""

from __future__ import annotations

import html
from datetime import date
from typing import Dict, List, Optional

import pandas as pd

from .aggregate import Aggregate
from .grouping import FeederReport

COLUMNS = [
    "kind",
    "label",
    "block",
    "phase1_kva",
    "phase2_kva",
    "phase3_kva",
    "total_kva",
    "transformers",
    "customers",
]

DISPLAY_NAMES = {
    "label": "Feeder",
    "block": "Block",
    "phase1_kva": "Phase 1 kVA",
    "phase2_kva": "Phase 2 kVA",
    "phase3_kva": "Phase 3 kVA",
    "total_kva": "Total kVA",
    "transformers": "Transformers",
    "customers": "Customers",
}


def _row(kind: str, label: str, block: str, agg: Aggregate) -> Dict:
    return {
        "kind": kind,
        "label": label,
        "block": block,
        "phase1_kva": agg.phase1_kva_total,
        "phase2_kva": agg.phase2_kva_total,
        "phase3_kva": agg.phase3_kva_total,
        "total_kva": agg.combined_kva_total,
        "transformers": agg.transformer_count,
        "customers": agg.customer_total,
    }


def report_rows(report: FeederReport) -> List[Dict]:
    """
    Rows in render order.

    For each feeder: a "feeder" header row, one "block" row per block, and a
    "feeder_total" row; then a single "grand_total" row.
    """
    rows = []
    for group in report.groups:
        rows.append(_row("feeder", group.label, "", group.total))
        for block in group.blocks:
            rows.append(_row("block", "", block.block, block.total))
        rows.append(_row("feeder_total", group.total_label, "", group.total))
    rows.append(_row("grand_total", report.grand_total_label, "", report.grand_total))
    return rows


def report_to_frame(report: FeederReport) -> pd.DataFrame:
    return pd.DataFrame(report_rows(report), columns=COLUMNS)


def report_to_dict(report: FeederReport) -> dict:
    return report.to_dict()


def format_frame(df: pd.DataFrame, show_blocks: bool = True) -> pd.DataFrame:
    """Human-readable copy: kVA to 2 decimals, counts as integers."""
    out = df.drop(columns=["kind"])
    if not show_blocks:
        out = out.drop(columns=["block"])
    for col in ("phase1_kva", "phase2_kva", "phase3_kva", "total_kva"):
        out[col] = out[col].map(lambda v: f"{v:,.2f}")
    for col in ("transformers", "customers"):
        out[col] = out[col].map(lambda v: f"{v:,.0f}")
    return out.rename(columns=DISPLAY_NAMES)


def report_to_html(
    report: FeederReport,
    title: str = "Feeder Analysis",
    printed: Optional[date] = None,
) -> str:
    """Standalone printable HTML document for the report."""
    printed = printed or date.today()
    table = format_frame(report_to_frame(report), report.show_blocks).to_html(
        index=False, border=0, classes="report"
    )
    return (
        "<!doctype html>\n"
        "<html><head><meta charset=\"utf-8\">"
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:sans-serif;font-size:12px}"
        "table.report{border-collapse:collapse;width:100%}"
        "table.report td,table.report th{padding:3px 6px;border-bottom:1px solid #ccc;text-align:right}"
        "table.report td:first-child,table.report th:first-child{text-align:left}"
        "</style></head><body>"
        f"<h1>{html.escape(title)}</h1>"
        f"<p>Printed {printed.strftime('%m/%d/%Y')} &middot; "
        f"{report.row_count:,} rows &middot; {report.feeder_count:,} feeders</p>"
        f"{table}"
        "</body></html>\n"
    )
