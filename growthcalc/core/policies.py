"""Cash-flow policies that parameterize the monthly simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from growthcalc.core.kernel import CashFlowTiming
from growthcalc.core.rounding import round_currency


@dataclass(frozen=True)
class NoCashFlow:
    """Lump-sum growth: nothing is added or removed after month 0."""

    timing: CashFlowTiming = CashFlowTiming.PRE_INTEREST

    def cash_flow(self, month: int) -> int:
        return 0


@dataclass(frozen=True)
class FixedContribution:
    amount: int
    timing: CashFlowTiming = CashFlowTiming.PRE_INTEREST

    def cash_flow(self, month: int) -> int:
        return self.amount


@dataclass(frozen=True)
class EscalatingContribution:
    """
    Contribution that steps up by ``step_up_rate_percent`` every 12 months.

    For 1-based ``month``, the year index is ``(month - 1) // 12`` and the
    contribution for that whole year is
    ``round(initial * (1 + step_up_rate_percent / 100) ** year_index)``.
    """

    initial: float
    step_up_rate_percent: float
    timing: CashFlowTiming = CashFlowTiming.PRE_INTEREST

    def contribution_for_year(self, year_index: int) -> int:
        factor = (1 + self.step_up_rate_percent / 100) ** year_index
        return round_currency(self.initial * factor)

    def cash_flow(self, month: int) -> int:
        return self.contribution_for_year((month - 1) // 12)


@dataclass(frozen=True)
class CappedWithdrawal:
    """Fixed monthly withdrawal; the kernel caps it at the available balance."""

    amount: int
    timing: CashFlowTiming = CashFlowTiming.POST_INTEREST

    def cash_flow(self, month: int) -> int:
        return -self.amount


CashFlowPolicy = Union[NoCashFlow, FixedContribution, EscalatingContribution, CappedWithdrawal]
