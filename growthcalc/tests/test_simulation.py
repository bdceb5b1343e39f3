from __future__ import annotations

from math import isclose

import pytest

from growthcalc.core.closed_form import (
    annuity_due_future_value,
    combined_yearly_table,
    lumpsum_future_value,
)
from growthcalc.core.policies import EscalatingContribution
from growthcalc.core.simulation import (
    project_combined,
    project_lumpsum,
    project_sip,
    project_step_up,
    project_swp,
)
from growthcalc.core.validation import InvalidInputError
from growthcalc.models import Mode

# Worst case drift from rounding interest every month over 10 years at 1%/month:
# 0.5 * sum(1.01^k for k < 120) ~= 115.
TEN_YEAR_ROUNDING_TOLERANCE = 120


def assert_balances_reconcile(result):
    for record in result.monthly_series:
        assert record.closing_balance == record.opening_balance + record.cash_flow + record.interest


def test_sip_first_months_follow_annuity_due():
    result = project_sip(10000, 12, 10)
    first, second = result.monthly_series[:2]

    assert (first.opening_balance, first.amount_before_interest, first.interest, first.closing_balance) == (
        0,
        10000,
        100,
        10100,
    )
    assert (second.amount_before_interest, second.interest, second.closing_balance) == (20100, 201, 20301)


def test_sip_invested_grows_by_exactly_one_contribution_per_month():
    result = project_sip(10000, 12, 10)

    assert result.mode == Mode.SIP
    assert result.total_months == 120
    assert len(result.monthly_series) == 120
    previous = 0
    for record in result.monthly_series:
        assert record.cumulative_invested - previous == 10000
        previous = record.cumulative_invested
    assert_balances_reconcile(result)


def test_sip_matches_closed_form_at_ten_years():
    result = project_sip(10000, 12, 10)
    expected = annuity_due_future_value(10000, 12, 120)

    assert isclose(result.summary.final_value, expected, abs_tol=TEN_YEAR_ROUNDING_TOLERANCE)
    assert result.summary.final_invested == 1_200_000
    assert result.summary.returns_percent == 48
    assert result.summary.invested_percent == 52


def test_sip_year_snapshots():
    result = project_sip(5000, 10, 3)

    assert [s.period_label for s in result.year_snapshots] == ["1y", "2y", "3y"]
    for snapshot in result.year_snapshots:
        record = result.monthly_series[snapshot.months_elapsed - 1]
        assert snapshot.total_value == record.closing_balance
        assert snapshot.estimated_returns == snapshot.total_value - snapshot.invested_amount


def test_partial_year_gets_a_closing_snapshot():
    result = project_sip(5000, 10, 1.6)

    assert result.total_months == 18
    assert [s.period_label for s in result.year_snapshots] == ["1y", "1y 6m"]
    assert result.year_snapshots[-1].months_elapsed == 18


def test_months_only_period():
    result = project_sip(5000, 10, 0.2)

    assert result.total_months == 2
    assert [s.period_label for s in result.year_snapshots] == ["2m"]


def test_lumpsum_matches_compound_growth():
    result = project_lumpsum(25000, 12, 10)
    expected = lumpsum_future_value(25000, 12, 120)

    assert isclose(result.monthly_series[-1].closing_balance, expected, abs_tol=TEN_YEAR_ROUNDING_TOLERANCE)
    assert all(record.cash_flow == 0 for record in result.monthly_series)
    assert all(record.cumulative_invested == 25000 for record in result.monthly_series)
    assert result.monthly_series[0].opening_balance == 25000
    assert_balances_reconcile(result)


def test_step_up_contribution_is_constant_within_each_year():
    result = project_step_up(10000, 12, 10, 4)
    flows = [record.cash_flow for record in result.monthly_series]

    for year_index in range(4):
        year_flows = flows[year_index * 12 : (year_index + 1) * 12]
        expected = round(10000 * 1.1**year_index)
        assert year_flows == [expected] * 12
    assert flows[12] == 11000
    assert flows[24] == 12100
    assert flows[36] == 13310


def test_step_up_contribution_for_year_index():
    policy = EscalatingContribution(initial=10000, step_up_rate_percent=10)

    assert policy.contribution_for_year(0) == 10000
    assert policy.contribution_for_year(5) == 16105
    assert policy.cash_flow(13) == 11000


def test_step_up_without_escalation_equals_sip():
    step_up = project_step_up(7500, 11, 0, 5)
    sip = project_sip(7500, 11, 5)

    assert step_up.monthly_series == sip.monthly_series
    assert step_up.summary == sip.summary


def test_step_up_invested_increases_by_current_contribution():
    result = project_step_up(2000, 9, 15, 3)
    previous = 0
    for record in result.monthly_series:
        assert record.cumulative_invested - previous == record.cash_flow
        previous = record.cumulative_invested
    assert_balances_reconcile(result)


def test_swp_exhaustion_terminates_early():
    result = project_swp(100000, 50000, 12, 2)

    assert result.total_months == 24
    assert result.exhausted
    assert [r.closing_balance for r in result.monthly_series] == [51000, 1510, 0]
    assert result.monthly_series[-1].cash_flow == -1525
    assert all(r.closing_balance >= 0 for r in result.monthly_series)

    assert result.year_snapshots[-1].period_label == "3m"
    assert result.year_snapshots[-1].total_value == 0
    assert result.summary.final_value == 0
    assert result.summary.final_invested == 100000
    assert result.summary.invested_percent == 0
    assert result.summary.returns_percent == 0


def test_swp_sustainable_withdrawal_runs_full_horizon():
    result = project_swp(1_000_000, 5000, 12, 10)

    assert not result.exhausted
    assert len(result.monthly_series) == 120
    assert all(r.cash_flow == -5000 for r in result.monthly_series)
    assert all(r.cumulative_invested == 1_000_000 for r in result.monthly_series)
    assert_balances_reconcile(result)


def test_swp_without_withdrawal_grows_like_lumpsum():
    swp = project_swp(40000, 0, 8, 3)
    lumpsum = project_lumpsum(40000, 8, 3)

    assert [r.closing_balance for r in swp.monthly_series] == [r.closing_balance for r in lumpsum.monthly_series]


def test_combined_is_the_sum_of_both_legs():
    combined = project_combined(50000, 5000, 12, 2)
    lumpsum = project_lumpsum(50000, 12, 2)
    sip = project_sip(5000, 12, 2)

    for total, lump, recurring in zip(combined.monthly_series, lumpsum.monthly_series, sip.monthly_series):
        assert total.closing_balance == lump.closing_balance + recurring.closing_balance
        assert total.cumulative_invested == lump.cumulative_invested + recurring.cumulative_invested
    assert combined.summary.final_invested == 50000 + 5000 * 24
    assert_balances_reconcile(combined)


def test_combined_agrees_with_closed_form_at_year_boundaries():
    combined = project_combined(25000, 10000, 12, 10)
    table = combined_yearly_table(25000, 10000, 12, 10)

    assert len(combined.year_snapshots) == len(table)
    for simulated, closed in zip(combined.year_snapshots, table):
        assert simulated.period_label == closed.period_label
        assert simulated.invested_amount == closed.invested_amount
        assert isclose(simulated.total_value, closed.total_value, abs_tol=2 * TEN_YEAR_ROUNDING_TOLERANCE)


def test_combined_with_only_one_leg_runs_full_horizon():
    only_sip = project_combined(0, 3000, 10, 2)
    only_lump = project_combined(3000, 0, 10, 2)

    assert len(only_sip.monthly_series) == 24
    assert len(only_lump.monthly_series) == 24
    assert only_sip.summary.final_value == project_sip(3000, 10, 2).summary.final_value


def test_invalid_inputs_are_refused_with_every_violation():
    with pytest.raises(InvalidInputError) as excinfo:
        project_sip(0, -1, 0)

    assert excinfo.value.errors == [
        "monthly_contribution must be greater than 0",
        "annual_rate_percent must be greater than 0",
        "period_years must be greater than 0",
    ]


def test_period_that_encodes_zero_months_is_refused():
    with pytest.raises(InvalidInputError) as excinfo:
        project_lumpsum(1000, 10, 0.001)

    assert "period_years must resolve to at least 1 month" in excinfo.value.errors


def test_non_finite_rate_is_refused():
    with pytest.raises(InvalidInputError) as excinfo:
        project_swp(1000, 10, float("nan"), 1)

    assert "annual_rate_percent must be a finite number" in excinfo.value.errors


def test_combined_requires_some_money():
    with pytest.raises(InvalidInputError) as excinfo:
        project_combined(0, 0, 12, 1)

    assert excinfo.value.errors == ["principal or monthly_contribution must be greater than 0"]


def test_rates_beyond_limit_are_refused():
    with pytest.raises(InvalidInputError) as excinfo:
        project_lumpsum(100000, 1e6, 100)

    assert excinfo.value.errors == ["annual_rate_percent must not exceed 100"]


def test_step_up_beyond_limit_is_refused():
    with pytest.raises(InvalidInputError) as excinfo:
        project_step_up(1000, 12, 1000, 300)

    assert excinfo.value.errors == [
        "step_up_rate_percent must not exceed 100",
        "period_years must not exceed 100 years",
    ]


def test_amounts_beyond_limit_are_refused():
    with pytest.raises(InvalidInputError) as excinfo:
        project_swp(1e15, 1e13, 10, 1)

    assert excinfo.value.errors == [
        "initial_corpus must not exceed 1,000,000,000,000",
        "monthly_withdrawal must not exceed 1,000,000,000,000",
    ]


def test_period_beyond_limit_is_refused():
    with pytest.raises(InvalidInputError) as excinfo:
        project_sip(1000, 12, 100.6)

    assert excinfo.value.errors == ["period_years must not exceed 100 years"]


def test_largest_allowed_inputs_stay_finite():
    lumpsum = project_lumpsum(1e12, 100, 100)
    step_up = project_step_up(1e12, 100, 100, 100)

    assert lumpsum.total_months == 1200
    assert lumpsum.summary.final_value > 0
    assert step_up.monthly_series[-1].cash_flow == round(1e12 * 2**99)
