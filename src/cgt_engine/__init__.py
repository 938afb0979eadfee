"""
Irish Capital Gains Tax Engine for E*Trade sales

Converts the sales of an E*Trade Gains & Losses export to EUR at the ECB
reference rate of each sale date and computes the CGT due for the fiscal
year, split into the January-November and December payment periods.
"""

from .config import TaxRules
from .errors import (
    CrossYearViolation,
    IngestionError,
    MalformedField,
    MissingColumn,
    RateUnavailable,
)
from .models import (
    Period,
    PeriodTaxReport,
    TaxReport,
    Transaction,
    statutory_periods,
)
from .ecb_rates import ECBRateFetcher
from .etrade_reader import load_gains_and_losses
from .normalizer import TransactionNormalizer, load_transactions, locate_columns
from .tax_engine import TaxEngine
from .report import print_ledger, print_tax_report, write_detail_csv
from .sample_data import SAMPLE_HEADER, create_sample_rows

__version__ = "0.1.0"

__all__ = [
    "TaxRules",
    "CrossYearViolation",
    "IngestionError",
    "MalformedField",
    "MissingColumn",
    "RateUnavailable",
    "Period",
    "PeriodTaxReport",
    "TaxReport",
    "Transaction",
    "statutory_periods",
    "ECBRateFetcher",
    "load_gains_and_losses",
    "TransactionNormalizer",
    "load_transactions",
    "locate_columns",
    "TaxEngine",
    "print_ledger",
    "print_tax_report",
    "write_detail_csv",
    "SAMPLE_HEADER",
    "create_sample_rows",
]
