"""
Shared pytest fixtures for CGT engine tests.

Provides reusable sheet rows and mocked ECB services to avoid
external dependencies and private data exposure.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from cgt_engine.models import Transaction

# =============================================================================
# G&L sheet rows
# =============================================================================

HEADER = ["Record Type", "Symbol", "Date Sold", "Total Proceeds", "Adjusted Gain/Loss"]


@pytest.fixture
def header():
    """A minimal G&L_Expanded header row, in a different order than the real export."""
    return list(HEADER)


@pytest.fixture
def sell_row():
    """
    Factory for a data row matching the header fixture.

    Usage:
        row = sell_row("03/01/2023", 1000, 5000)
        row = sell_row("03/01/2023", 1000, 5000, record_type="Buy")
    """

    def _factory(date_sold, gain_loss, proceeds, record_type="Sell"):
        return [record_type, "XYZ", date_sold, proceeds, gain_loss]

    return _factory


# =============================================================================
# Stub rate fetcher (no ECB calls)
# =============================================================================


class StubRateFetcher:
    """Returns rates from a dict and records every lookup."""

    def __init__(self, rates: dict):
        self.rates = rates
        self.calls: list[date] = []

    def get_rate(self, target_date: date) -> Decimal:
        self.calls.append(target_date)
        return self.rates[target_date]


@pytest.fixture
def stub_rates():
    """
    Stub fetcher factory.

    Usage:
        fetcher = stub_rates({date(2023, 3, 1): Decimal("1.10")})
    """
    return StubRateFetcher


# =============================================================================
# Mock ECB HTTP responses
# =============================================================================

ECB_CSV_HEADER = "KEY,FREQ,CURRENCY,CURRENCY_DENOM,EXR_TYPE,EXR_SUFFIX,TIME_PERIOD,OBS_VALUE\n"


def ecb_csv(day: str, value: str) -> str:
    """Body of an ECB csvdata response holding one observation."""
    return ECB_CSV_HEADER + f"EXR.D.USD.EUR.SP00.A,D,USD,EUR,SP00,A,{day},{value}\n"


def mock_http_response(body: str) -> MagicMock:
    mock_response = MagicMock()
    mock_response.read.return_value = body.encode()
    mock_response.__enter__ = MagicMock(return_value=mock_response)
    mock_response.__exit__ = MagicMock(return_value=False)
    return mock_response


@pytest.fixture
def mock_ecb_response():
    """
    Patch urlopen to answer every ECB request with the given body.

    Usage:
        def test_something(mock_ecb_response):
            mock_urlopen = mock_ecb_response(ecb_csv("2023-03-01", "1.0665"))
            ...
            assert mock_urlopen.call_count == 1
    """
    patchers = []

    def _mock(body: str):
        patcher = patch("urllib.request.urlopen", return_value=mock_http_response(body))
        patchers.append(patcher)
        return patcher.start()

    yield _mock

    for patcher in patchers:
        patcher.stop()


# =============================================================================
# Sample transactions
# =============================================================================


@pytest.fixture
def year_transactions():
    """
    Sales spread over 2023, with one on each side of the Nov 30 / Dec 1 boundary.

    Rate 1.25 everywhere keeps the EUR figures exact: EUR = USD * 0.8
    """
    rate = Decimal("1.25")
    return [
        Transaction.from_usd(date(2023, 1, 2), Decimal("500"), Decimal("2500"), rate),
        Transaction.from_usd(date(2023, 6, 15), Decimal("-250"), Decimal("1000"), rate),
        Transaction.from_usd(date(2023, 11, 30), Decimal("1000"), Decimal("4000"), rate),
        Transaction.from_usd(date(2023, 12, 1), Decimal("2000"), Decimal("6000"), rate),
        Transaction.from_usd(date(2023, 12, 29), Decimal("-125"), Decimal("500"), rate),
    ]


@pytest.fixture
def ecb_body():
    """Factory for ECB csvdata bodies: ecb_body("2023-03-01", "1.0665")."""
    return ecb_csv


# =============================================================================
# E*Trade workbooks
# =============================================================================


@pytest.fixture
def gains_and_losses_xlsx(tmp_path):
    """
    Factory writing an .xlsx export with the given header and rows.

    Usage:
        path = gains_and_losses_xlsx(SAMPLE_HEADER, create_sample_rows())
    """

    def _factory(header, rows, sheet_name="G&L_Expanded", file_name="G&L_Expanded.xlsx"):
        path = tmp_path / file_name
        pd.DataFrame(rows, columns=header).to_excel(path, sheet_name=sheet_name, index=False)
        return path

    return _factory
