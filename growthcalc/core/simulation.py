from __future__ import annotations

from typing import List

from growthcalc.core.aggregation import rollup
from growthcalc.core.kernel import advance_month, monthly_rate
from growthcalc.core.logging import get_logger
from growthcalc.core.periods import PeriodInput
from growthcalc.core.policies import (
    CappedWithdrawal,
    CashFlowPolicy,
    EscalatingContribution,
    FixedContribution,
    NoCashFlow,
)
from growthcalc.core.rounding import round_currency
from growthcalc.core.validation import (
    check_combined,
    check_lumpsum,
    check_sip,
    check_step_up,
    check_swp,
)
from growthcalc.models import Mode, MonthlyRecord, ProjectionResult

logger = get_logger(__name__)


def simulate_months(
    opening_balance: int,
    initial_invested: int,
    annual_rate_percent: float,
    total_months: int,
    policy: CashFlowPolicy,
) -> List[MonthlyRecord]:
    """
    Run the compounding kernel for months 1..total_months.

    Contributions (positive cash flows) add to the invested total; withdrawals
    do not reduce it. Under a withdrawal policy the loop stops early once the
    balance reaches zero.
    """
    rate = monthly_rate(annual_rate_percent)
    rate_percent = round(rate * 100, 4)

    balance = opening_balance
    invested = initial_invested
    series: List[MonthlyRecord] = []

    for month in range(1, total_months + 1):
        step = advance_month(balance, rate, policy.cash_flow(month), policy.timing)
        if step.cash_flow > 0:
            invested += step.cash_flow

        series.append(
            MonthlyRecord(
                month=month,
                opening_balance=balance,
                amount_before_interest=step.amount_before_interest,
                cash_flow=step.cash_flow,
                interest=step.interest,
                closing_balance=step.balance,
                cumulative_invested=invested,
                monthly_return_rate=rate_percent,
            )
        )
        balance = step.balance

        if balance <= 0 and isinstance(policy, CappedWithdrawal):
            logger.debug("balance exhausted at month %d of %d", month, total_months)
            break

    return series


def _result(mode: Mode, total_months: int, series: List[MonthlyRecord]) -> ProjectionResult:
    snapshots, summary = rollup(series)
    return ProjectionResult(
        mode=mode,
        total_months=total_months,
        monthly_series=series,
        year_snapshots=snapshots,
        summary=summary,
    )


def project_sip(
    monthly_contribution: float,
    annual_rate_percent: float,
    period_years: PeriodInput,
) -> ProjectionResult:
    """Standard SIP: a constant contribution at the start of every month."""
    total_months = check_sip(monthly_contribution, annual_rate_percent, period_years)
    logger.debug("sip projection over %d months", total_months)

    policy = FixedContribution(amount=round_currency(monthly_contribution))
    series = simulate_months(0, 0, annual_rate_percent, total_months, policy)
    return _result(Mode.SIP, total_months, series)


def project_lumpsum(
    principal: float,
    annual_rate_percent: float,
    period_years: PeriodInput,
) -> ProjectionResult:
    total_months = check_lumpsum(principal, annual_rate_percent, period_years)
    logger.debug("lumpsum projection over %d months", total_months)

    opening = round_currency(principal)
    series = simulate_months(opening, opening, annual_rate_percent, total_months, NoCashFlow())
    return _result(Mode.LUMPSUM, total_months, series)


def project_step_up(
    monthly_contribution: float,
    annual_rate_percent: float,
    step_up_rate_percent: float,
    period_years: PeriodInput,
) -> ProjectionResult:
    """
    Step-up SIP. The running balance is carried month to month, so the cost
    is linear in the horizon.
    """
    total_months = check_step_up(
        monthly_contribution, annual_rate_percent, step_up_rate_percent, period_years
    )
    logger.debug("step-up projection over %d months", total_months)

    policy = EscalatingContribution(
        initial=monthly_contribution,
        step_up_rate_percent=step_up_rate_percent,
    )
    series = simulate_months(0, 0, annual_rate_percent, total_months, policy)
    return _result(Mode.STEP_UP, total_months, series)


def project_swp(
    initial_corpus: float,
    monthly_withdrawal: float,
    annual_rate_percent: float,
    period_years: PeriodInput,
) -> ProjectionResult:
    """
    Systematic withdrawal. Interest accrues first, then the withdrawal is
    taken, capped at what is left. The series ends early if the corpus runs
    out; that is a normal outcome, not an error.
    """
    total_months = check_swp(initial_corpus, monthly_withdrawal, annual_rate_percent, period_years)
    logger.debug("swp projection over %d months", total_months)

    opening = round_currency(initial_corpus)
    policy = CappedWithdrawal(amount=round_currency(monthly_withdrawal))
    series = simulate_months(opening, opening, annual_rate_percent, total_months, policy)
    return _result(Mode.SWP, total_months, series)


def project_combined(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    period_years: PeriodInput,
) -> ProjectionResult:
    """
    Lump sum plus SIP over the same months.

    Both legs are simulated on their own and summed month by month, so each
    leg rounds exactly as it would standalone.
    """
    total_months = check_combined(principal, monthly_contribution, annual_rate_percent, period_years)
    logger.debug("combined projection over %d months", total_months)

    opening = round_currency(principal)
    lump_leg = simulate_months(opening, opening, annual_rate_percent, total_months, NoCashFlow())
    sip_leg = simulate_months(
        0,
        0,
        annual_rate_percent,
        total_months,
        FixedContribution(amount=round_currency(monthly_contribution)),
    )

    series = [
        MonthlyRecord(
            month=lump.month,
            opening_balance=lump.opening_balance + sip.opening_balance,
            amount_before_interest=lump.amount_before_interest + sip.amount_before_interest,
            cash_flow=lump.cash_flow + sip.cash_flow,
            interest=lump.interest + sip.interest,
            closing_balance=lump.closing_balance + sip.closing_balance,
            cumulative_invested=lump.cumulative_invested + sip.cumulative_invested,
            monthly_return_rate=lump.monthly_return_rate,
        )
        for lump, sip in zip(lump_leg, sip_leg)
    ]
    return _result(Mode.COMBINED, total_months, series)
