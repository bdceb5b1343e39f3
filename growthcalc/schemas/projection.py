"""Data contracts for the projection and loan endpoints."""

from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from growthcalc.models import LoanSchedule, ProjectionResult

PeriodYears = Annotated[
    Union[float, str],
    Field(
        description=(
            "Years, with the digits after the decimal point read as months "
            "(1.6 is 1 year 6 months, 0.12 is 12 months)."
        )
    ),
]


class _Request(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)


class SipRequest(_Request):
    mode: Literal["sip"] = "sip"
    monthly_contribution: float = Field(..., description="Amount invested at the start of every month.")
    annual_rate_percent: float = Field(..., description="Expected annual return, in percent.")
    period_years: PeriodYears


class LumpsumRequest(_Request):
    mode: Literal["lumpsum"] = "lumpsum"
    principal: float = Field(..., description="One-time amount invested at month 0.")
    annual_rate_percent: float
    period_years: PeriodYears


class StepUpRequest(_Request):
    mode: Literal["step_up"] = "step_up"
    monthly_contribution: float = Field(..., description="Monthly amount during the first year.")
    annual_rate_percent: float
    step_up_rate_percent: float = Field(..., description="Yearly increase of the monthly amount, in percent.")
    period_years: PeriodYears


class SwpRequest(_Request):
    mode: Literal["swp"] = "swp"
    initial_corpus: float
    monthly_withdrawal: float = Field(..., description="Amount withdrawn at the end of every month.")
    annual_rate_percent: float
    period_years: PeriodYears


class CombinedRequest(_Request):
    mode: Literal["combined"] = "combined"
    principal: float = 0.0
    monthly_contribution: float = 0.0
    annual_rate_percent: float
    period_years: PeriodYears


ProjectionRequest = Annotated[
    Union[SipRequest, LumpsumRequest, StepUpRequest, SwpRequest, CombinedRequest],
    Field(discriminator="mode"),
]


class CompareRequest(_Request):
    requests: List[ProjectionRequest] = Field(..., min_length=1)


class CompareResponse(BaseModel):
    results: List[ProjectionResult]


class LoanRequest(_Request):
    principal: float = Field(..., description="Purchase price.")
    down_payment: float = 0.0
    annual_rate_percent: float
    term_months: int = Field(..., description="Loan tenure in months.")


__all__ = [
    "SipRequest",
    "LumpsumRequest",
    "StepUpRequest",
    "SwpRequest",
    "CombinedRequest",
    "ProjectionRequest",
    "CompareRequest",
    "CompareResponse",
    "LoanRequest",
    "LoanSchedule",
    "ProjectionResult",
]
