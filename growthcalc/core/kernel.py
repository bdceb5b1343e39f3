"""Single-month compounding step used by every projection mode."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from growthcalc.core.rounding import round_currency


class CashFlowTiming(str, Enum):
    # PRE_INTEREST: the month's cash flow earns that month's interest (annuity due).
    PRE_INTEREST = "pre_interest"
    # POST_INTEREST: interest accrues on the opening balance, then the cash flow lands.
    POST_INTEREST = "post_interest"


@dataclass(frozen=True)
class MonthStep:
    amount_before_interest: int
    cash_flow: int
    interest: int
    balance: int


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def advance_month(
    balance: int,
    rate: float,
    cash_flow: int,
    timing: CashFlowTiming,
) -> MonthStep:
    """
    Advance ``balance`` by one month at monthly ``rate``.

    Every intermediate amount is rounded to whole units before it feeds the
    next step. A negative ``cash_flow`` applied after interest is a withdrawal
    and is capped at the post-interest balance, so the result never goes
    below zero.
    """
    if timing is CashFlowTiming.PRE_INTEREST:
        amount_before_interest = round_currency(balance + cash_flow)
        interest = round_currency(amount_before_interest * rate)
        return MonthStep(
            amount_before_interest=amount_before_interest,
            cash_flow=cash_flow,
            interest=interest,
            balance=amount_before_interest + interest,
        )

    amount_before_interest = round_currency(balance)
    interest = round_currency(amount_before_interest * rate)
    grown = amount_before_interest + interest

    applied = cash_flow
    if cash_flow < 0:
        applied = -min(round_currency(-cash_flow), grown)

    return MonthStep(
        amount_before_interest=amount_before_interest,
        cash_flow=applied,
        interest=interest,
        balance=grown + applied,
    )
