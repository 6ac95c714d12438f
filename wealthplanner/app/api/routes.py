"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from wealthplanner.core.analytics import (
    calculate_alignment,
    calculate_metrics,
    generate_suggestions,
    summarize_events,
)
from wealthplanner.core.projection import simulate_wealth_curve
from wealthplanner.log import get_logger
from wealthplanner.models import ProjectionParameters
from wealthplanner.schemas.health import HealthResponse
from wealthplanner.schemas.planning import (
    AlignmentRequest,
    EventSummaryRequest,
    SuggestionRequest,
    SuggestionResponse,
)
from wealthplanner.schemas.projection import (
    MetricsRequest,
    MetricsResponse,
    ProjectionParametersEcho,
    ProjectionRequest,
    ProjectionResponse,
)

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"error": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(ValueError)
def _handle_value_error(exc: ValueError):
    logger.info("rejected request: %s", exc)
    return jsonify({"error": str(exc)}), HTTPStatus.BAD_REQUEST


def _json_body() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(status="ok").model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Project the wealth curve for the given starting value and events."""
    payload = ProjectionRequest.model_validate(_json_body())

    points = simulate_wealth_curve(
        ProjectionParameters(
            initialValue=payload.initialValue,
            annualInterestRate=payload.interestRate,
            events=payload.events,
            projectionYears=payload.projectionYears,
        ),
        current_year=current_app.config["TODAY"]().year,
    )
    logger.info(
        "projection generated years=%s events=%s",
        payload.projectionYears,
        len(payload.events),
    )

    response = ProjectionResponse(
        projectionData=points,
        parameters=ProjectionParametersEcho(
            initialValue=payload.initialValue,
            interestRate=payload.interestRate,
            projectionYears=payload.projectionYears,
            eventsCount=len(payload.events),
        ),
        metrics=calculate_metrics(points, payload.initialValue),
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/projection/metrics")
def projection_metrics() -> Any:
    """Summarize a curve produced earlier."""
    payload = MetricsRequest.model_validate(_json_body())
    response = MetricsResponse(metrics=calculate_metrics(payload.projectionData, payload.initialValue))
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/suggestions")
def suggestions() -> Any:
    """Contribution and allocation suggestions for reaching a wealth target."""
    payload = SuggestionRequest.model_validate(_json_body())
    result = generate_suggestions(
        payload.currentPatrimony,
        payload.targetPatrimony,
        payload.timeHorizonYears,
        payload.currentMonthlyContribution,
    )
    logger.info("suggestions generated count=%s", len(result))
    return jsonify(SuggestionResponse(suggestions=result).model_dump(mode="json"))


@api_bp.post("/alignment")
def alignment() -> Any:
    payload = AlignmentRequest.model_validate(_json_body())
    return jsonify(calculate_alignment(payload.wallets).model_dump(mode="json"))


@api_bp.post("/events/summary")
def events_summary() -> Any:
    payload = EventSummaryRequest.model_validate(_json_body())
    return jsonify(summarize_events(payload.events).model_dump(mode="json"))
