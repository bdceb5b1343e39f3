"""Roll monthly series into year snapshots and a final summary."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from growthcalc.core.periods import period_label
from growthcalc.core.rounding import round_currency
from growthcalc.models import MonthlyRecord, Summary, YearSnapshot


def is_snapshot_month(month: int, last_month: int) -> bool:
    return month % 12 == 0 or month == last_month


def split_percentages(final_returns: int, final_value: int) -> Tuple[int, int]:
    """Return ``(invested_percent, returns_percent)`` summing to 100, or zeros."""
    if final_value <= 0:
        return 0, 0
    returns_percent = round_currency(final_returns / final_value * 100)
    return 100 - returns_percent, returns_percent


def summarize(record: MonthlyRecord) -> Summary:
    final_value = record.closing_balance
    final_invested = record.cumulative_invested
    final_returns = final_value - final_invested
    invested_percent, returns_percent = split_percentages(final_returns, final_value)
    return Summary(
        final_invested=final_invested,
        final_returns=final_returns,
        final_value=final_value,
        invested_percent=invested_percent,
        returns_percent=returns_percent,
    )


def rollup(monthly_series: Sequence[MonthlyRecord]) -> Tuple[List[YearSnapshot], Summary]:
    """
    Sample the series at every 12th month and at its last month.

    The last month is whatever the series ends on, so a withdrawal run that
    exhausts early still gets a closing snapshot.
    """
    if not monthly_series:
        raise ValueError("monthly series is empty")

    last_month = monthly_series[-1].month
    snapshots: List[YearSnapshot] = []
    for record in monthly_series:
        if not is_snapshot_month(record.month, last_month):
            continue
        snapshots.append(
            YearSnapshot(
                period_label=period_label(record.month),
                months_elapsed=record.month,
                invested_amount=record.cumulative_invested,
                estimated_returns=record.estimated_returns,
                total_value=record.closing_balance,
            )
        )

    return snapshots, summarize(monthly_series[-1])
