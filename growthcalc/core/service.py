"""Dispatch typed requests to the simulators."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence

from growthcalc.core.logging import get_logger
from growthcalc.core.simulation import (
    project_combined,
    project_lumpsum,
    project_sip,
    project_step_up,
    project_swp,
)
from growthcalc.models import ProjectionResult
from growthcalc.schemas.projection import (
    CombinedRequest,
    LumpsumRequest,
    ProjectionRequest,
    SipRequest,
    StepUpRequest,
    SwpRequest,
)

logger = get_logger(__name__)


def run_projection(request: ProjectionRequest) -> ProjectionResult:
    if isinstance(request, SipRequest):
        return project_sip(request.monthly_contribution, request.annual_rate_percent, request.period_years)
    if isinstance(request, LumpsumRequest):
        return project_lumpsum(request.principal, request.annual_rate_percent, request.period_years)
    if isinstance(request, StepUpRequest):
        return project_step_up(
            request.monthly_contribution,
            request.annual_rate_percent,
            request.step_up_rate_percent,
            request.period_years,
        )
    if isinstance(request, SwpRequest):
        return project_swp(
            request.initial_corpus,
            request.monthly_withdrawal,
            request.annual_rate_percent,
            request.period_years,
        )
    if isinstance(request, CombinedRequest):
        return project_combined(
            request.principal,
            request.monthly_contribution,
            request.annual_rate_percent,
            request.period_years,
        )
    raise TypeError(f"unsupported projection request: {type(request).__name__}")


def compare_modes(requests: Sequence[ProjectionRequest], max_workers: int = 4) -> List[ProjectionResult]:
    """
    Evaluate independent requests concurrently; results keep request order.

    The first failing request's exception propagates to the caller.
    """
    logger.debug("comparing %d projections on %d workers", len(requests), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(run_projection, requests))
