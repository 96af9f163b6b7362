from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from ..classification.config import ClassificationConfig, DEFAULT_CONFIG
from ..classification.index import SubstationIndex
from ..classification.rules import ALL
from ..records.loader import load_feeder_dataset
from .export import format_frame, report_to_dict, report_to_frame, report_to_html
from .filters import ViewState
from .grouping import run_report

logger = logging.getLogger(__name__)


def build_view(args: argparse.Namespace, index: SubstationIndex) -> ViewState:
    view = ViewState()
    if args.substation and args.substation.strip().upper() != ALL:
        if args.substation not in index:
            raise ValueError(f"Unknown substation: {args.substation}")
        view = view.select_substation(args.substation)
    if args.feeder:
        view = view.select_feeder(args.feeder)
    if args.query:
        view = view.search(args.query)
    if args.min_kva is not None:
        view = view.with_min_kva(args.min_kva)
    return view.with_blocks(not args.no_blocks)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Feeder analysis report (kVA and customers per feeder) from an exported dataset."
    )
    parser.add_argument("data", help="Path to feeder_analysis_table.json.")
    parser.add_argument("--substation", "-s", default=ALL, help="Substation key (e.g. 1, THEISS) or ALL.")
    parser.add_argument("--feeder", "-f", default=None, help="Single feeder number.")
    parser.add_argument("--query", "-q", default="", help="Search text matched against feeder labels.")
    parser.add_argument("--min-kva", type=float, default=None, help="Hide rows below this combined kVA.")
    parser.add_argument("--no-blocks", action="store_true", help="Do not break feeders down by block.")
    parser.add_argument("--config", help="JSON file with feeder label / substation override tables.")
    parser.add_argument(
        "--format",
        choices=["table", "csv", "json", "html"],
        default="table",
        help="Output format.",
    )
    parser.add_argument("--output", "-o", help="Write the report to this file instead of stdout.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress.")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ClassificationConfig.from_file(args.config) if args.config else DEFAULT_CONFIG
        records = load_feeder_dataset(args.data)
        index = SubstationIndex.build(records, config)
        view = build_view(args, index)
    except ValidationError as e:
        print("Config validation error:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2
    except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 2

    report = run_report(records, view, index, config)
    logger.info(
        "Report: %d rows, %d feeders, %s",
        report.row_count, report.feeder_count, report.grand_total_label,
    )

    if args.format == "json":
        text = json.dumps(report_to_dict(report), indent=2)
    elif args.format == "csv":
        text = report_to_frame(report).to_csv(index=False)
    elif args.format == "html":
        text = report_to_html(report)
    else:
        text = format_frame(report_to_frame(report), report.show_blocks).to_string(index=False)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
