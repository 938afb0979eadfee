"""
Data models for the CGT engine.

Contains all dataclasses used throughout the application.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

ZERO = Decimal("0")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to Decimal, going through str for floats."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Transaction:
    """
    A single completed sale, with its USD figures converted to EUR.

    Attributes:
        sell_date: The date the shares were sold
        usd_gain: Positive part of the adjusted gain/loss in USD
        usd_loss: Magnitude of the negative part of the adjusted gain/loss in USD
        eur_gain: usd_gain / exr
        eur_loss: usd_loss / exr
        exr: ECB USD/EUR reference rate applied (USD per 1 EUR)
        usd_proceeds: Total sale proceeds in USD
        eur_proceeds: usd_proceeds / exr
    """

    sell_date: date
    usd_gain: Decimal
    usd_loss: Decimal
    eur_gain: Decimal
    eur_loss: Decimal
    exr: Decimal
    usd_proceeds: Decimal
    eur_proceeds: Decimal

    def __post_init__(self) -> None:
        """Convert numeric fields to Decimal and check the sale invariants."""
        for name in (
            "usd_gain",
            "usd_loss",
            "eur_gain",
            "eur_loss",
            "exr",
            "usd_proceeds",
            "eur_proceeds",
        ):
            value = to_decimal(getattr(self, name))
            if not value.is_finite():
                raise ValueError(f"{name} must be a finite amount, got {value}")
            object.__setattr__(self, name, value)

        if not self.exr > 0:
            raise ValueError(f"Exchange rate must be positive, got {self.exr} on {self.sell_date}")
        if self.usd_gain < 0 or self.usd_loss < 0:
            raise ValueError("Gain and loss must both be non-negative")
        if self.usd_gain != 0 and self.usd_loss != 0:
            raise ValueError("A sale is either a gain or a loss, not both")
        if self.usd_proceeds < 0:
            raise ValueError(f"Proceeds cannot be negative, got {self.usd_proceeds}")

    @classmethod
    def from_usd(
        cls,
        sell_date: date,
        gain_loss: Decimal,
        usd_proceeds: Decimal,
        exr: Decimal,
    ) -> "Transaction":
        """
        Build a transaction from the signed USD gain/loss of a sale.

        Non-negative figures become a pure gain, negative ones a pure loss.
        """
        gain_loss = to_decimal(gain_loss)
        usd_proceeds = to_decimal(usd_proceeds)
        exr = to_decimal(exr)
        for name, value in (("gain_loss", gain_loss), ("usd_proceeds", usd_proceeds), ("exr", exr)):
            if not value.is_finite():
                raise ValueError(f"{name} must be a finite amount, got {value}")
        if not exr > 0:
            raise ValueError(f"Exchange rate must be positive, got {exr} on {sell_date}")

        if gain_loss >= 0:
            usd_gain, usd_loss = gain_loss, ZERO
        else:
            usd_gain, usd_loss = ZERO, -gain_loss

        return cls(
            sell_date=sell_date,
            usd_gain=usd_gain,
            usd_loss=usd_loss,
            eur_gain=usd_gain / exr,
            eur_loss=usd_loss / exr,
            exr=exr,
            usd_proceeds=usd_proceeds,
            eur_proceeds=usd_proceeds / exr,
        )


@dataclass(frozen=True)
class Period:
    """An inclusive date interval."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Period start {self.start} is after its end {self.end}")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def statutory_periods(year: int) -> tuple[Period, Period]:
    """
    The two CGT payment periods of a fiscal year.

    Gains from January to November are due by mid-December, gains made in
    December by the end of January. Together they cover the year exactly.
    """
    return (
        Period(date(year, 1, 1), date(year, 11, 30)),
        Period(date(year, 12, 1), date(year, 12, 31)),
    )


@dataclass(frozen=True)
class PeriodTaxReport:
    """Totals over the transactions of one period."""

    usd_gain: Decimal = ZERO
    usd_loss: Decimal = ZERO
    usd_net_gain: Decimal = ZERO
    eur_gain: Decimal = ZERO
    eur_loss: Decimal = ZERO
    eur_net_gain: Decimal = ZERO
    usd_proceeds: Decimal = ZERO
    eur_proceeds: Decimal = ZERO


@dataclass(frozen=True)
class TaxReport:
    """
    Tax report for an entire fiscal year.

    The exemption is applied once, to the full-year EUR net gain.
    period_reports holds the statutory sub-periods for display only.
    """

    fiscal_year: int
    period_tax_report: PeriodTaxReport
    eur_taxable_gain: Decimal
    eur_tax: Decimal
    exemption_eur: Decimal
    tax_rate: Decimal
    period_reports: tuple[tuple[Period, PeriodTaxReport], ...] = field(default=())
