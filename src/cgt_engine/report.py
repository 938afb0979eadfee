"""
Report output: the transaction detail CSV and the console report.
"""

import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from .models import Period, PeriodTaxReport, TaxReport, Transaction

logger = logging.getLogger(__name__)

DETAIL_CSV_COLUMNS = [
    "Sell Date",
    "USD Gain",
    "USD Loss",
    "EUR Gain",
    "EUR Loss",
    "EXR",
    "USD Proceeds",
    "EUR Proceeds",
]


def write_detail_csv(transactions: Sequence[Transaction], csv_path: Path) -> None:
    """Write one row per transaction, in list order, with a header row first."""
    # Fixed-point notation: exact Decimal quotients such as 500 / 1.25 come out as 4E+2
    df = pd.DataFrame(
        [
            [t.sell_date.isoformat()]
            + [
                format(amount, "f")
                for amount in (
                    t.usd_gain,
                    t.usd_loss,
                    t.eur_gain,
                    t.eur_loss,
                    t.exr,
                    t.usd_proceeds,
                    t.eur_proceeds,
                )
            ]
            for t in transactions
        ],
        columns=DETAIL_CSV_COLUMNS,
    )
    df.to_csv(csv_path, index=False)
    logger.info("The transaction detail was written as CSV to file %s", csv_path)


def print_period_header(period: Period) -> None:
    print(
        f"\n=== TAX REPORT FOR PERIOD {period.start.isoformat()} "
        f"TO {period.end.isoformat()} ===\n"
    )


def print_period_report(report: PeriodTaxReport) -> None:
    """Print the USD and EUR totals of one period."""
    print(f"Total proceeds (USD): ${report.usd_proceeds:,.2f}")
    print(f"Total gain (USD): ${report.usd_gain:,.2f}")
    print(f"Total loss (USD): ${report.usd_loss:,.2f}")
    print(f"Net gain (USD): ${report.usd_net_gain:,.2f}\n")
    print(f"Total proceeds: €{report.eur_proceeds:,.2f}")
    print(f"Total gain: €{report.eur_gain:,.2f}")
    print(f"Total loss: €{report.eur_loss:,.2f}")
    print(f"Net gain (Gain-Loss): €{report.eur_net_gain:,.2f}")


def print_tax_report(report: TaxReport) -> None:
    """Print both CGT payment periods, then the full fiscal year and the tax due."""
    for period, period_report in report.period_reports:
        print_period_header(period)
        print_period_report(period_report)

    print(f"\n=== TAX REPORT FOR ENTIRE FISCAL YEAR {report.fiscal_year} ===\n")
    print_period_report(report.period_tax_report)
    print(f"\nExemption: €{report.exemption_eur:,.2f}")
    print(f"Taxable gain (amount above exemption): €{report.eur_taxable_gain:,.2f}")
    print(f"Tax to pay ({report.tax_rate * 100:.2f}%): €{report.eur_tax:,.2f}")


def print_ledger(transactions: Sequence[Transaction]) -> None:
    """Print the converted transactions in a readable format."""
    print("\n" + "=" * 110)
    print("TRANSACTION LEDGER")
    print("=" * 110)
    print(
        f"{'Date':<12} {'USD Gain':>12} {'USD Loss':>12} {'EXR':>8} "
        f"{'EUR Gain':>12} {'EUR Loss':>12} {'USD Proceeds':>14} {'EUR Proceeds':>14}"
    )
    print("-" * 110)

    for t in transactions:
        print(
            f"{t.sell_date.isoformat():<12} ${t.usd_gain:>11,.2f} ${t.usd_loss:>11,.2f} "
            f"{t.exr:>8.4f} €{t.eur_gain:>11,.2f} €{t.eur_loss:>11,.2f} "
            f"${t.usd_proceeds:>13,.2f} €{t.eur_proceeds:>13,.2f}"
        )

    print("=" * 110)
