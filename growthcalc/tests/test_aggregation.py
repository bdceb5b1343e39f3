from __future__ import annotations

import pytest

from growthcalc.core.aggregation import rollup, split_percentages
from growthcalc.models import MonthlyRecord


def make_record(month: int, closing: int, invested: int) -> MonthlyRecord:
    return MonthlyRecord(
        month=month,
        opening_balance=0,
        amount_before_interest=0,
        cash_flow=0,
        interest=closing,
        closing_balance=closing,
        cumulative_invested=invested,
        monthly_return_rate=1.0,
    )


def test_split_percentages_sum_to_hundred():
    assert split_percentages(25, 100) == (75, 25)
    assert split_percentages(1, 3) == (67, 33)


def test_split_percentages_zero_for_non_positive_value():
    assert split_percentages(0, 0) == (0, 0)
    assert split_percentages(-100, -5) == (0, 0)


def test_rollup_samples_year_ends_and_last_month():
    series = [make_record(m, 100 * m, 50 * m) for m in range(1, 27)]
    snapshots, summary = rollup(series)

    assert [s.months_elapsed for s in snapshots] == [12, 24, 26]
    assert [s.period_label for s in snapshots] == ["1y", "2y", "2y 2m"]
    assert snapshots[-1].estimated_returns == 2600 - 1300
    assert summary.final_value == 2600
    assert summary.final_invested == 1300
    assert summary.final_returns == 1300
    assert (summary.invested_percent, summary.returns_percent) == (50, 50)


def test_rollup_rejects_empty_series():
    with pytest.raises(ValueError):
        rollup([])


def test_records_are_immutable():
    record = make_record(1, 10, 10)
    with pytest.raises(Exception):
        record.closing_balance = 5
