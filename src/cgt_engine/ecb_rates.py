"""
ECB Exchange Rate Fetcher.

Fetches USD/EUR reference rates from the European Central Bank
Data Portal API, one sale date at a time.
"""

import io
import logging
import urllib.request
from datetime import date
from decimal import Decimal, InvalidOperation

import pandas as pd

from .config import (
    ECB_API_URL,
    ECB_OBS_VALUE_COLUMN,
    ECB_TIMEOUT_SECONDS,
    FROM_CURRENCY,
    TO_CURRENCY,
)
from .errors import RateUnavailable

logger = logging.getLogger(__name__)


class ECBRateFetcher:
    """
    Fetches and caches daily USD/EUR exchange rates from the European Central Bank.

    The ECB series quotes USD per 1 EUR, which is the rate Revenue accepts
    for converting foreign-currency disposals: eur_amount = usd_amount / rate.

    Each instance owns its cache, so one fetcher serves one run. A date is
    requested from the ECB at most once per fetcher.
    """

    ECB_API_URL = ECB_API_URL

    def __init__(self, timeout: float = ECB_TIMEOUT_SECONDS):
        self.timeout = timeout
        self._rate_cache: dict[date, Decimal] = {}

    def _fetch_observations(self, target_date: date) -> pd.DataFrame:
        """Query the ECB for a single day and return the CSV body as a DataFrame."""
        url = self.ECB_API_URL.format(
            from_currency=FROM_CURRENCY,
            to_currency=TO_CURRENCY,
            day=target_date.isoformat(),
        )
        logger.debug("Fetching ECB rate: %s", url)

        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                raw = response.read()
        except OSError as e:
            raise RateUnavailable(target_date, f"failed to fetch ECB rates: {e}") from e

        try:
            return pd.read_csv(io.StringIO(raw.decode("utf-8")), dtype=str, keep_default_na=False)
        except (UnicodeDecodeError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
            raise RateUnavailable(target_date, f"unreadable ECB response: {e}") from e

    def get_rate(self, target_date: date) -> Decimal:
        """
        Get the USD/EUR exchange rate for a specific date.

        There is no fallback to a neighbouring date: a weekend or holiday
        sale has no ECB fixing and fails with RateUnavailable.
        """
        if target_date in self._rate_cache:
            return self._rate_cache[target_date]

        observations = self._fetch_observations(target_date)

        columns = [str(c).strip() for c in observations.columns]
        if ECB_OBS_VALUE_COLUMN not in columns:
            raise RateUnavailable(target_date, f"missing {ECB_OBS_VALUE_COLUMN} column in ECB response")
        if observations.empty:
            raise RateUnavailable(target_date, "no observation in ECB response")

        raw_value = observations.iloc[0, columns.index(ECB_OBS_VALUE_COLUMN)]
        try:
            rate = Decimal(str(raw_value).strip())
        except InvalidOperation as e:
            raise RateUnavailable(target_date, f"{raw_value!r} is not a valid rate") from e

        if not rate.is_finite() or rate <= 0:
            raise RateUnavailable(target_date, f"{raw_value!r} is not a positive rate")

        self._rate_cache[target_date] = rate
        logger.info("ECB rate for %s: %s %s per %s", target_date, rate, FROM_CURRENCY, TO_CURRENCY)
        return rate

    @property
    def cached_dates(self) -> list[date]:
        """Dates resolved so far, in resolution order."""
        return list(self._rate_cache)

    def clear_cache(self) -> None:
        """Clear the rate cache."""
        self._rate_cache.clear()
