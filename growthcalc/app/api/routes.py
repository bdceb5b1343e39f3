"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, Type

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from growthcalc import __version__
from growthcalc.core.loan import build_schedule
from growthcalc.core.logging import get_logger
from growthcalc.core.service import compare_modes, run_projection
from growthcalc.core.validation import InvalidInputError
from growthcalc.schemas.ping import PingResponse
from growthcalc.schemas.projection import (
    CombinedRequest,
    CompareRequest,
    CompareResponse,
    LoanRequest,
    LumpsumRequest,
    SipRequest,
    StepUpRequest,
    SwpRequest,
)

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected malformed payload on %s", request.path)
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    logger.info("rejected projection inputs on %s: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _payload(model: Type[BaseModel]) -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return model.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/calc/sip")
def sip() -> Any:
    result = run_projection(_payload(SipRequest))
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/lumpsum")
def lumpsum() -> Any:
    result = run_projection(_payload(LumpsumRequest))
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/step-up")
def step_up() -> Any:
    result = run_projection(_payload(StepUpRequest))
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/swp")
def swp() -> Any:
    result = run_projection(_payload(SwpRequest))
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/combined")
def combined() -> Any:
    result = run_projection(_payload(CombinedRequest))
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/calc/emi")
def emi() -> Any:
    """Equal-installment loan schedule."""
    payload = _payload(LoanRequest)
    schedule = build_schedule(
        principal=payload.principal,
        down_payment=payload.down_payment,
        annual_rate_percent=payload.annual_rate_percent,
        term_months=payload.term_months,
    )
    return jsonify(schedule.model_dump(mode="json"))


@api_bp.post("/calc/compare")
def compare() -> Any:
    """Run several projections side by side."""
    payload = _payload(CompareRequest)
    config = current_app.config["GROWTHCALC"]
    results = compare_modes(payload.requests, max_workers=config.max_workers)
    response = CompareResponse(results=results)
    return jsonify(response.model_dump(mode="json"))
