"""
Demo script to run the CGT engine with sample data.

Converts the bundled sample rows at live ECB rates and prints the report.
"""

import logging

from .normalizer import TransactionNormalizer
from .report import print_ledger, print_tax_report
from .sample_data import SAMPLE_HEADER, create_sample_rows
from .tax_engine import TaxEngine


def main() -> None:
    """Run the CGT engine with sample data using ECB rates."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    print("Irish Capital Gains Tax calculator for E*Trade sales")
    print("\n** DEMO MODE: Using sample data **\n")

    transactions = TransactionNormalizer().normalize(create_sample_rows(), SAMPLE_HEADER)
    report = TaxEngine().build_report(transactions)

    print_ledger(transactions)
    print_tax_report(report)


if __name__ == "__main__":
    main()
