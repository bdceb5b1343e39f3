from __future__ import annotations

from typing import List

from growthcalc.core.logging import get_logger
from growthcalc.core.periods import period_label
from growthcalc.core.rounding import round_currency
from growthcalc.core.validation import check_loan
from growthcalc.models import (
    AmortizationRow,
    LoanSchedule,
    LoanSummary,
    LoanYearSnapshot,
)

logger = get_logger(__name__)


def level_installment(loan_amount: int, rate: float, term_months: int) -> int:
    """Equal monthly installment (EMI), rounded to whole units."""
    growth = (1 + rate) ** term_months
    # rates too small to move (1 + rate) ** n off 1.0 amortize like zero interest
    if rate == 0 or growth == 1:
        return round_currency(loan_amount / term_months)
    return round_currency(loan_amount * rate * growth / (growth - 1))


def amortize(loan_amount: int, installment: int, rate: float, term_months: int) -> List[AmortizationRow]:
    """
    Declining-balance schedule.

    The final row pays off whatever is left, so the last closing balance is
    exactly zero. If an installment would overshoot the remaining balance
    earlier, that row becomes the final one.
    """
    rows: List[AmortizationRow] = []
    balance = loan_amount

    for month in range(1, term_months + 1):
        interest = round_currency(balance * rate)
        principal = installment - interest
        if month == term_months or principal >= balance:
            principal = balance

        closing = balance - principal
        rows.append(
            AmortizationRow(
                month=month,
                opening_balance=balance,
                installment=installment,
                interest_portion=interest,
                principal_portion=principal,
                closing_balance=closing,
            )
        )
        balance = closing

        if balance <= 0:
            break

    return rows


def yearly_rollup(rows: List[AmortizationRow]) -> List[LoanYearSnapshot]:
    """Sum principal and interest over each 12-month window (and the final partial one)."""
    snapshots: List[LoanYearSnapshot] = []
    if not rows:
        return snapshots

    last_month = rows[-1].month
    window_start = 0
    for index, row in enumerate(rows):
        if row.month % 12 != 0 and row.month != last_month:
            continue
        window = rows[window_start : index + 1]
        snapshots.append(
            LoanYearSnapshot(
                period_label=period_label(row.month),
                months_elapsed=row.month,
                principal_paid=sum(r.principal_portion for r in window),
                interest_paid=sum(r.interest_portion for r in window),
                remaining_balance=row.closing_balance,
            )
        )
        window_start = index + 1

    return snapshots


def build_schedule(
    principal: float,
    down_payment: float,
    annual_rate_percent: float,
    term_months: int,
) -> LoanSchedule:
    """
    Amortization schedule for an equal-installment loan on
    ``principal - down_payment``.
    """
    check_loan(principal, down_payment, annual_rate_percent, term_months)

    loan_amount = round_currency(principal - down_payment)
    n = int(term_months)
    rate = annual_rate_percent / 1200

    installment = level_installment(loan_amount, rate, n)
    rows = amortize(loan_amount, installment, rate, n)
    logger.debug("loan schedule closed after %d of %d months", len(rows), n)

    total_interest = sum(row.interest_portion for row in rows)
    denominator = total_interest + loan_amount
    interest_percent = round_currency(total_interest / denominator * 100) if denominator > 0 else 0

    return LoanSchedule(
        installment=installment,
        rows=rows,
        year_snapshots=yearly_rollup(rows),
        summary=LoanSummary(
            loan_amount=loan_amount,
            installment=installment,
            total_interest=total_interest,
            total_payment=installment * len(rows) + round_currency(down_payment),
            interest_percent=interest_percent,
        ),
    )
