"""
Transaction normalization.

Turns the rows of an E*Trade Gains & Losses export into Transaction
records, converting every sale to EUR at the ECB rate of its sale date.
"""

import logging
import numbers
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

import pandas as pd

from .config import (
    DATE_SOLD_COLUMN,
    GAIN_LOSS_COLUMN,
    RECORD_TYPE_COLUMN,
    SELL_RECORD_TYPE,
    SHEET_DATE_FORMAT,
    TOTAL_PROCEEDS_COLUMN,
)
from .ecb_rates import ECBRateFetcher
from .errors import CrossYearViolation, MalformedField, MissingColumn
from .etrade_reader import load_gains_and_losses
from .models import Transaction

logger = logging.getLogger(__name__)


class RateFetcher(Protocol):
    def get_rate(self, target_date: date) -> Decimal: ...


@dataclass(frozen=True)
class ColumnIndices:
    """Positions of the required columns in the header row."""

    date_sold: int
    gain_loss: int
    record_type: int
    total_proceeds: int


def locate_columns(header_row: Sequence[Any]) -> ColumnIndices:
    """Find the required columns by their trimmed names."""
    positions: dict[str, int] = {}
    for pos, name in enumerate(header_row):
        if name is None:
            continue
        positions[str(name).strip()] = pos

    def position(column: str) -> int:
        if column not in positions:
            raise MissingColumn(column)
        return positions[column]

    return ColumnIndices(
        date_sold=position(DATE_SOLD_COLUMN),
        gain_loss=position(GAIN_LOSS_COLUMN),
        record_type=position(RECORD_TYPE_COLUMN),
        total_proceeds=position(TOTAL_PROCEEDS_COLUMN),
    )


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def _is_missing(value: Any) -> bool:
    return value is None or (not isinstance(value, str) and bool(pd.isna(value)))


def parse_sale_date(value: Any, column: str, row_number: int) -> date:
    """
    Parse a sale date cell.

    E*Trade writes dates as MM/DD/YYYY strings; a date-typed cell is
    taken as is.
    """
    if _is_missing(value):
        raise MalformedField(column, row_number, value, "missing date")
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), SHEET_DATE_FORMAT).date()
        except ValueError as e:
            raise MalformedField(column, row_number, value, "wrong date format") from e
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise MalformedField(column, row_number, value, "wrong date field type")


def parse_amount(value: Any, column: str, row_number: int) -> Decimal:
    """Parse a USD amount cell, accepting numbers and strings like '$1,234.50'."""
    if _is_missing(value):
        raise MalformedField(column, row_number, value, "missing amount")
    if isinstance(value, bool):
        raise MalformedField(column, row_number, value, "wrong amount field type")

    if isinstance(value, (Decimal, numbers.Real)):
        raw = str(value)
    elif isinstance(value, str):
        raw = value.replace("$", "").replace(",", "").strip()
    else:
        raise MalformedField(column, row_number, value, "wrong amount field type")

    try:
        amount = Decimal(raw)
    except InvalidOperation as e:
        raise MalformedField(column, row_number, value, "not a number") from e
    if not amount.is_finite():
        raise MalformedField(column, row_number, value, "not a finite number")
    return amount


class TransactionNormalizer:
    """
    Builds Transaction records from sheet rows.

    Rules:
    - Only rows whose record type is exactly "Sell" are sales; others are skipped
    - The first sale fixes the fiscal year; a sale from another year aborts the run
    - The rate for each sale date is resolved through the fetcher, which
      hits the ECB once per distinct date
    """

    def __init__(self, rate_fetcher: Optional[RateFetcher] = None):
        self.rate_fetcher = rate_fetcher if rate_fetcher is not None else ECBRateFetcher()

    def normalize(
        self, rows: Sequence[Sequence[Any]], header_row: Sequence[Any]
    ) -> list[Transaction]:
        """
        Normalize data rows into transactions, preserving row order.

        Rows are numbered as in the sheet: the header is row 1, so the
        first data row is row 2.
        """
        columns = locate_columns(header_row)

        transactions: list[Transaction] = []
        fiscal_year: Optional[int] = None
        skipped = 0

        for i, row in enumerate(rows):
            row_number = i + 2
            if _cell(row, columns.record_type) != SELL_RECORD_TYPE:
                skipped += 1
                continue

            sell_date = parse_sale_date(_cell(row, columns.date_sold), DATE_SOLD_COLUMN, row_number)
            if fiscal_year is None:
                fiscal_year = sell_date.year
            elif sell_date.year != fiscal_year:
                raise CrossYearViolation(fiscal_year, sell_date.year, row_number)

            gain_loss = parse_amount(_cell(row, columns.gain_loss), GAIN_LOSS_COLUMN, row_number)
            usd_proceeds = parse_amount(
                _cell(row, columns.total_proceeds), TOTAL_PROCEEDS_COLUMN, row_number
            )
            if usd_proceeds < 0:
                raise MalformedField(
                    TOTAL_PROCEEDS_COLUMN, row_number, usd_proceeds, "proceeds cannot be negative"
                )

            exr = self.rate_fetcher.get_rate(sell_date)
            transactions.append(Transaction.from_usd(sell_date, gain_loss, usd_proceeds, exr))

        logger.info(
            "Loaded %d sale(s), skipped %d non-sale row(s)", len(transactions), skipped
        )
        return transactions


def load_transactions(
    path: Path, rate_fetcher: Optional[RateFetcher] = None
) -> list[Transaction]:
    """Read an E*Trade Gains & Losses export and normalize its sales."""
    header_row, rows = load_gains_and_losses(path)
    return TransactionNormalizer(rate_fetcher).normalize(rows, header_row)
