"""
Closed-form future values.

These do not round month by month and only exist at whole-year boundaries,
so the simulators never use them. They are kept to cross-check the
simulated series.
"""

from __future__ import annotations

from typing import List

from growthcalc.core.kernel import monthly_rate
from growthcalc.core.periods import period_label
from growthcalc.core.rounding import round_currency
from growthcalc.models import YearSnapshot


def lumpsum_future_value(principal: float, annual_rate_percent: float, months: int) -> float:
    # FV = P * (1 + r)^n
    return principal * (1 + monthly_rate(annual_rate_percent)) ** months


def annuity_due_future_value(contribution: float, annual_rate_percent: float, months: int) -> float:
    # FV = C * [((1 + r)^n - 1) / r] * (1 + r)
    rate = monthly_rate(annual_rate_percent)
    if rate == 0:
        return contribution * months
    return contribution * ((1 + rate) ** months - 1) / rate * (1 + rate)


def combined_yearly_table(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: int,
) -> List[YearSnapshot]:
    """Year-boundary snapshots of lump sum + SIP evaluated in closed form."""
    rows: List[YearSnapshot] = []
    for year in range(1, years + 1):
        months = year * 12
        total_value = lumpsum_future_value(principal, annual_rate_percent, months) + annuity_due_future_value(
            monthly_contribution, annual_rate_percent, months
        )
        invested = principal + monthly_contribution * months
        rows.append(
            YearSnapshot(
                period_label=period_label(months),
                months_elapsed=months,
                invested_amount=round_currency(invested),
                estimated_returns=round_currency(total_value - invested),
                total_value=round_currency(total_value),
            )
        )
    return rows
