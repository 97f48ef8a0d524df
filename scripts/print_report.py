#!/usr/bin/env python3
"""
Print fee and fund distribution reports for a file of orders.

Run: python scripts/print_report.py --orders orders.json --kind both
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fee_engine import FeeEngineError, FeeProcessor, load_schedule_file  # noqa: E402
from fee_engine.config import DEFAULT_SCHEDULE_PATH, PROJECT_ROOT  # noqa: E402
from fee_engine.processor import parse_orders  # noqa: E402
from fee_engine.report import format_distributions_report, format_fees_report  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print fee and fund distribution reports.")
    parser.add_argument("--orders", type=Path, default=PROJECT_ROOT / "orders.json", help="Orders JSON file")
    parser.add_argument("--schedule", type=Path, default=DEFAULT_SCHEDULE_PATH, help="Fee schedule JSON file")
    parser.add_argument(
        "--kind",
        choices=["fees", "distributions", "both"],
        default="both",
        help="Which report to print",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    try:
        processor = FeeProcessor(load_schedule_file(args.schedule))
        orders = parse_orders(json.loads(args.orders.read_text(encoding="utf-8")))

        fees = processor.compute_fees(orders)
        if args.kind in ("fees", "both"):
            print(format_fees_report(fees), end="")
        if args.kind in ("distributions", "both"):
            print(format_distributions_report(processor.distribute_orders(fees)), end="")
    except (FeeEngineError, OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not build report: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
