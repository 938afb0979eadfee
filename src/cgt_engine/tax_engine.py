"""
Irish CGT Engine Core Logic.

Aggregates converted sales over the CGT payment periods of a fiscal year
and applies the annual exemption and the CGT rate.
"""

from decimal import Decimal
from typing import Optional, Sequence

from .config import TaxRules
from .models import (
    ZERO,
    Period,
    PeriodTaxReport,
    TaxReport,
    Transaction,
    statutory_periods,
)


class TaxEngine:
    """
    Irish Capital Gains Tax engine.

    Rules implemented:
    - Rule A: Gains and losses of all sales in the fiscal year are netted in EUR
    - Rule B: The personal exemption is deducted once, from the full-year net gain
    - Rule C: Tax is due on the remainder at the CGT rate; a net loss gives no tax

    The Jan-Nov and December period totals are reported separately since
    they are paid at different deadlines, but they do not change the tax due.
    """

    def __init__(self, rules: Optional[TaxRules] = None):
        self.rules = rules if rules is not None else TaxRules()

    def aggregate(
        self, transactions: Sequence[Transaction], period: Optional[Period] = None
    ) -> PeriodTaxReport:
        """
        Sum the transactions sold within period (all of them when period is None).

        An empty selection gives an all-zero report.
        """
        selected = [
            t for t in transactions if period is None or period.contains(t.sell_date)
        ]

        usd_gain = sum((t.usd_gain for t in selected), ZERO)
        usd_loss = sum((t.usd_loss for t in selected), ZERO)
        eur_gain = sum((t.eur_gain for t in selected), ZERO)
        eur_loss = sum((t.eur_loss for t in selected), ZERO)
        usd_proceeds = sum((t.usd_proceeds for t in selected), ZERO)
        eur_proceeds = sum((t.eur_proceeds for t in selected), ZERO)

        return PeriodTaxReport(
            usd_gain=usd_gain,
            usd_loss=usd_loss,
            usd_net_gain=usd_gain - usd_loss,
            eur_gain=eur_gain,
            eur_loss=eur_loss,
            eur_net_gain=eur_gain - eur_loss,
            usd_proceeds=usd_proceeds,
            eur_proceeds=eur_proceeds,
        )

    def taxable_gain(self, eur_net_gain: Decimal) -> Decimal:
        """Net gain above the exemption, never below zero."""
        return max(eur_net_gain - self.rules.exemption_eur, ZERO)

    def build_report(self, transactions: Sequence[Transaction]) -> TaxReport:
        """
        Build the tax report for the fiscal year of the transactions.

        The fiscal year is the year of the first sale. Without transactions
        the year is 0, all totals are zero and no period is reported.
        """
        fiscal_year = transactions[0].sell_date.year if transactions else 0

        period_reports: tuple[tuple[Period, PeriodTaxReport], ...] = ()
        if transactions:
            period_reports = tuple(
                (period, self.aggregate(transactions, period))
                for period in statutory_periods(fiscal_year)
            )

        year_report = self.aggregate(transactions)
        eur_taxable_gain = self.taxable_gain(year_report.eur_net_gain)

        return TaxReport(
            fiscal_year=fiscal_year,
            period_tax_report=year_report,
            eur_taxable_gain=eur_taxable_gain,
            eur_tax=eur_taxable_gain * self.rules.tax_rate,
            exemption_eur=self.rules.exemption_eur,
            tax_rate=self.rules.tax_rate,
            period_reports=period_reports,
        )
