"""
Ingestion errors.

Every failure aborts the whole run; none of these are recoverable
per row.
"""

from datetime import date


class IngestionError(ValueError):
    """Base class for failures while turning an export into transactions."""


class MissingColumn(IngestionError):
    """A required header is absent from the sheet."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Missing required column '{column}' in header row")


class MalformedField(IngestionError):
    """A cell does not hold a value of the expected type."""

    def __init__(self, column: str, row_number: int, value: object, reason: str):
        self.column = column
        self.row_number = row_number
        self.value = value
        self.reason = reason
        super().__init__(f"Row #{row_number}, column '{column}': {reason} (got {value!r})")


class CrossYearViolation(IngestionError):
    """A sale falls outside the fiscal year fixed by the first sale."""

    def __init__(self, fiscal_year: int, year: int, row_number: int):
        self.fiscal_year = fiscal_year
        self.year = year
        self.row_number = row_number
        super().__init__(
            f"Row #{row_number} is from {year} but the fiscal year is {fiscal_year}. "
            f"All sales should be from the same fiscal year."
        )


class RateUnavailable(IngestionError):
    """No usable exchange rate could be obtained for a date."""

    def __init__(self, rate_date: date, reason: str):
        self.rate_date = rate_date
        self.reason = reason
        super().__init__(f"No exchange rate available for {rate_date.isoformat()}: {reason}")
