from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class Mode(str, Enum):
    SIP = "sip"
    LUMPSUM = "lumpsum"
    STEP_UP = "step_up"
    SWP = "swp"
    COMBINED = "combined"


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class MonthlyRecord(Record):
    """
    One simulated month.

    closing_balance == opening_balance + cash_flow + interest, where
    cash_flow is signed (+ contribution, - withdrawal, 0 for lump sums).
    """

    month: int
    opening_balance: int
    amount_before_interest: int
    cash_flow: int
    interest: int
    closing_balance: int
    cumulative_invested: int
    monthly_return_rate: float

    @property
    def estimated_returns(self) -> int:
        return self.closing_balance - self.cumulative_invested


class YearSnapshot(Record):
    period_label: str
    months_elapsed: int
    invested_amount: int
    estimated_returns: int
    total_value: int


class Summary(Record):
    final_invested: int
    final_returns: int
    final_value: int
    invested_percent: int
    returns_percent: int


class ProjectionResult(Record):
    mode: Mode
    total_months: int
    monthly_series: List[MonthlyRecord]
    year_snapshots: List[YearSnapshot]
    summary: Summary

    @property
    def exhausted(self) -> bool:
        """True when the series stopped before ``total_months`` (corpus depleted)."""
        return len(self.monthly_series) < self.total_months


class AmortizationRow(Record):
    month: int
    opening_balance: int
    installment: int
    interest_portion: int
    principal_portion: int
    closing_balance: int


class LoanYearSnapshot(Record):
    period_label: str
    months_elapsed: int
    principal_paid: int
    interest_paid: int
    remaining_balance: int


class LoanSummary(Record):
    loan_amount: int
    installment: int
    total_interest: int
    total_payment: int
    interest_percent: int


class LoanSchedule(Record):
    installment: int
    rows: List[AmortizationRow]
    year_snapshots: List[LoanYearSnapshot]
    summary: LoanSummary


__all__ = [
    "Mode",
    "MonthlyRecord",
    "YearSnapshot",
    "Summary",
    "ProjectionResult",
    "AmortizationRow",
    "LoanYearSnapshot",
    "LoanSummary",
    "LoanSchedule",
]
