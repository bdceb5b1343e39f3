"""Boundary checks run once before any simulation starts."""

from __future__ import annotations

import math
from typing import List, Optional

from growthcalc.core.periods import PeriodInput, resolve_months
from growthcalc.core.rounding import round_currency

# Within these bounds every balance stays a finite float: 1e12 compounded at
# 100% a year for 100 years, or stepped up 100% a year, is below 1e90.
MAX_AMOUNT = 1_000_000_000_000
MAX_RATE_PERCENT = 100
MAX_STEP_UP_PERCENT = 100
MAX_MONTHS = 1200
MAX_LOAN_MONTHS = 600


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class _Checks:
    def __init__(self) -> None:
        self.errors: List[str] = []

    def finite(self, name: str, value: float) -> bool:
        try:
            ok = math.isfinite(float(value))
        except (TypeError, ValueError):
            ok = False
        if not ok:
            self.errors.append(f"{name} must be a finite number")
        return ok

    def _at_most(self, name: str, value: float, limit: float) -> None:
        if float(value) > limit:
            self.errors.append(f"{name} must not exceed {limit:,}")

    def positive(self, name: str, value: float, limit: float) -> None:
        if not self.finite(name, value):
            return
        if float(value) <= 0:
            self.errors.append(f"{name} must be greater than 0")
        else:
            self._at_most(name, value, limit)

    def non_negative(self, name: str, value: float, limit: float) -> None:
        if not self.finite(name, value):
            return
        if float(value) < 0:
            self.errors.append(f"{name} must not be negative")
        else:
            self._at_most(name, value, limit)

    def period(self, period_years: PeriodInput) -> Optional[int]:
        try:
            as_number = float(period_years)
        except (TypeError, ValueError):
            self.errors.append("period_years must be a number")
            return None
        if not math.isfinite(as_number):
            self.errors.append("period_years must be a finite number")
            return None
        if as_number <= 0:
            self.errors.append("period_years must be greater than 0")
            return None
        if as_number > MAX_MONTHS // 12 + 1:
            self.errors.append(f"period_years must not exceed {MAX_MONTHS // 12} years")
            return None

        months = resolve_months(period_years)
        if months < 1:
            self.errors.append("period_years must resolve to at least 1 month")
            return None
        if months > MAX_MONTHS:
            self.errors.append(f"period_years must not exceed {MAX_MONTHS // 12} years")
            return None
        return months

    def raise_if_any(self) -> None:
        if self.errors:
            raise InvalidInputError(self.errors)


def check_sip(monthly_contribution: float, annual_rate_percent: float, period_years: PeriodInput) -> int:
    """Validate recurring-investment inputs and return the resolved month count."""
    checks = _Checks()
    checks.positive("monthly_contribution", monthly_contribution, MAX_AMOUNT)
    checks.positive("annual_rate_percent", annual_rate_percent, MAX_RATE_PERCENT)
    months = checks.period(period_years)
    checks.raise_if_any()
    return months


def check_lumpsum(principal: float, annual_rate_percent: float, period_years: PeriodInput) -> int:
    checks = _Checks()
    checks.positive("principal", principal, MAX_AMOUNT)
    checks.positive("annual_rate_percent", annual_rate_percent, MAX_RATE_PERCENT)
    months = checks.period(period_years)
    checks.raise_if_any()
    return months


def check_step_up(
    monthly_contribution: float,
    annual_rate_percent: float,
    step_up_rate_percent: float,
    period_years: PeriodInput,
) -> int:
    checks = _Checks()
    checks.positive("monthly_contribution", monthly_contribution, MAX_AMOUNT)
    checks.positive("annual_rate_percent", annual_rate_percent, MAX_RATE_PERCENT)
    checks.non_negative("step_up_rate_percent", step_up_rate_percent, MAX_STEP_UP_PERCENT)
    months = checks.period(period_years)
    checks.raise_if_any()
    return months


def check_swp(
    initial_corpus: float,
    monthly_withdrawal: float,
    annual_rate_percent: float,
    period_years: PeriodInput,
) -> int:
    checks = _Checks()
    checks.positive("initial_corpus", initial_corpus, MAX_AMOUNT)
    checks.non_negative("monthly_withdrawal", monthly_withdrawal, MAX_AMOUNT)
    checks.positive("annual_rate_percent", annual_rate_percent, MAX_RATE_PERCENT)
    months = checks.period(period_years)
    checks.raise_if_any()
    return months


def check_combined(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    period_years: PeriodInput,
) -> int:
    checks = _Checks()
    checks.non_negative("principal", principal, MAX_AMOUNT)
    checks.non_negative("monthly_contribution", monthly_contribution, MAX_AMOUNT)
    if not checks.errors and principal <= 0 and monthly_contribution <= 0:
        checks.errors.append("principal or monthly_contribution must be greater than 0")
    checks.positive("annual_rate_percent", annual_rate_percent, MAX_RATE_PERCENT)
    months = checks.period(period_years)
    checks.raise_if_any()
    return months


def check_loan(principal: float, down_payment: float, annual_rate_percent: float, term_months: int) -> None:
    checks = _Checks()
    checks.positive("principal", principal, MAX_AMOUNT)
    checks.non_negative("down_payment", down_payment, MAX_AMOUNT)
    checks.non_negative("annual_rate_percent", annual_rate_percent, MAX_RATE_PERCENT)
    if checks.finite("term_months", term_months):
        if not float(term_months).is_integer():
            checks.errors.append("term_months must be a whole number of months")
        elif term_months < 1:
            checks.errors.append("term_months must be at least 1")
        elif term_months > MAX_LOAN_MONTHS:
            checks.errors.append(f"term_months must not exceed {MAX_LOAN_MONTHS}")
    if not checks.errors and round_currency(principal - down_payment) <= 0:
        checks.errors.append("loan amount (principal - down_payment) must be greater than 0")
    checks.raise_if_any()
