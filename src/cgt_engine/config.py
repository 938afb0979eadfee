"""
Configuration constants for the CGT engine.

Irish Capital Gains Tax rules, the E*Trade export layout and the
ECB Data Portal endpoint used for USD/EUR reference rates.
"""

from dataclasses import dataclass
from decimal import Decimal

FROM_CURRENCY = "USD"
TO_CURRENCY = "EUR"

# Irish CGT: 33% rate, EUR 1,270 annual personal exemption
TAX_RATE = Decimal("0.33")
EXEMPTION_EUR = Decimal("1270")

# ECB Data Portal, single-day query in CSV format.
# The series quotes USD per 1 EUR, so eur_amount = usd_amount / rate.
ECB_API_URL = (
    "https://data-api.ecb.europa.eu/service/data/EXR/D.{from_currency}.{to_currency}.SP00.A"
    "?detail=dataonly&startPeriod={day}&endPeriod={day}&format=csvdata"
)
ECB_OBS_VALUE_COLUMN = "OBS_VALUE"
ECB_TIMEOUT_SECONDS = 30

# E*Trade "Gains & Losses" expanded export
GAINS_AND_LOSSES_SHEET = "G&L_Expanded"
DATE_SOLD_COLUMN = "Date Sold"
GAIN_LOSS_COLUMN = "Adjusted Gain/Loss"
RECORD_TYPE_COLUMN = "Record Type"
TOTAL_PROCEEDS_COLUMN = "Total Proceeds"
SELL_RECORD_TYPE = "Sell"
SHEET_DATE_FORMAT = "%m/%d/%Y"

DETAIL_CSV_PATH = "CGT_transaction_detail.csv"


@dataclass(frozen=True)
class TaxRules:
    """Exemption and rate applied to the full-year net gain."""

    exemption_eur: Decimal = EXEMPTION_EUR
    tax_rate: Decimal = TAX_RATE
