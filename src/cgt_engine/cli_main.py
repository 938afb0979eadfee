"""
Irish Capital Gains Tax calculator for E*Trade sales

Reads the G&L_Expanded sheet of an E*Trade Gains & Losses export, converts
each sale to EUR at the ECB rate of its sale date and prints the CGT due.

Main entry point for the application.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import DETAIL_CSV_PATH
from .ecb_rates import ECBRateFetcher
from .errors import IngestionError
from .normalizer import load_transactions
from .report import print_ledger, print_tax_report, write_detail_csv
from .tax_engine import TaxEngine

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point: compute and print the CGT report for one export file."""
    parser = argparse.ArgumentParser(
        prog="cgt",
        description="Compute Irish CGT from an E*Trade Gains & Losses export (.xlsx)",
    )
    parser.add_argument("gains_and_losses", help='Path to the export, e.g. "path/to/file.xlsx"')
    parser.add_argument(
        "--detail-csv",
        default=DETAIL_CSV_PATH,
        help=f"Where to write the per-transaction detail (default: {DETAIL_CSV_PATH})",
    )
    parser.add_argument("--ledger", action="store_true", help="Also print the transaction ledger")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log ECB requests")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    excel_path = Path(args.gains_and_losses)
    if not excel_path.exists():
        logger.error("%s not found", excel_path)
        return 1

    try:
        transactions = load_transactions(excel_path, ECBRateFetcher())
    except IngestionError as e:
        logger.error("%s", e)
        return 1

    try:
        write_detail_csv(transactions, Path(args.detail_csv))
    except OSError as e:
        logger.error("Cannot write %s: %s", args.detail_csv, e)
        return 1

    report = TaxEngine().build_report(transactions)
    if args.ledger:
        print_ledger(transactions)
    print_tax_report(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
