"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from sip_backend import __version__
from sip_backend.core.charts import chart_series
from sip_backend.core.metrics import MetricError, suggested_contribution, summarize
from sip_backend.core.sip import (
    ProjectionOverflowError,
    SipResult,
    calculate_sip,
    ensure_finite,
)
from sip_backend.core.table import table_page
from sip_backend.schemas.ping import PingResponse
from sip_backend.schemas.sip import (
    ChartResponse,
    LimitsResponse,
    SipRequest,
    SipResponse,
    SuggestionRequest,
    SuggestionResponse,
    SummaryResponse,
    TableRequest,
    TableResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected %s: %d invalid field(s)", request.path, exc.error_count())
    detail = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(MetricError)
def _handle_metric_error(exc: MetricError):
    """A metric with no defined value is reported as 'cannot compute', never as NaN."""
    logger.warning("%s on %s", exc, request.path)
    return jsonify({"detail": str(exc), "metric": exc.metric}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(ProjectionOverflowError)
def _handle_projection_overflow(exc: ProjectionOverflowError):
    """Totals beyond the float range have no JSON form; report them as not computable."""
    logger.warning("%s on %s", exc, request.path)
    return jsonify({"detail": f"cannot compute projection: {exc}"}), HTTPStatus.UNPROCESSABLE_ENTITY


def _json_body() -> Any:
    return request.get_json(force=True, silent=False)


def _project(payload: SipRequest) -> SipResult:
    return ensure_finite(calculate_sip(payload.to_params()))


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/calc/sip/limits")
def limits() -> Any:
    """Input bounds and defaults the calculator form should offer."""
    response = LimitsResponse.model_validate(current_app.config["FORM_LIMITS"])
    return jsonify(response.model_dump())


@api_bp.post("/calc/sip")
def sip() -> Any:
    """Month-by-month and year-by-year projection."""
    payload = SipRequest.model_validate(_json_body())
    result = _project(payload)
    response = SipResponse.from_result(result, request_id=payload.requestId)
    return jsonify(response.model_dump())


@api_bp.post("/calc/sip/summary")
def summary() -> Any:
    """Totals plus growth rate, wealth gain and, when asked, the inflation-adjusted value."""
    payload = SipRequest.model_validate(_json_body())
    result = _project(payload)
    sip_summary = summarize(result, inflation_rate=payload.inflationRate)
    response = SummaryResponse(requestId=payload.requestId, **dict(sip_summary))
    return jsonify(response.model_dump())


@api_bp.post("/calc/sip/suggestion")
def suggestion() -> Any:
    """Monthly contribution needed to reach a goal amount."""
    payload = SuggestionRequest.model_validate(_json_body())
    amount = suggested_contribution(payload.goalAmount, payload.years, payload.expectedReturnRate)
    response = SuggestionResponse(suggestedContribution=amount, **payload.model_dump())
    return jsonify(response.model_dump())


@api_bp.post("/calc/sip/table")
def table() -> Any:
    """One page of the yearly or monthly breakdown, filtered by year/month number."""
    payload = TableRequest.model_validate(_json_body())
    config: Dict[str, Any] = current_app.config
    page_size = min(payload.pageSize or config["DEFAULT_PAGE_SIZE"], config["MAX_PAGE_SIZE"])

    result = _project(payload)
    page = table_page(
        result,
        view=payload.view,
        search=payload.search,
        page=payload.page,
        page_size=page_size,
    )
    response = TableResponse(requestId=payload.requestId, **dict(page))
    return jsonify(response.model_dump())


@api_bp.post("/calc/sip/charts")
def charts() -> Any:
    """Series for the growth, yearly breakdown and distribution charts."""
    payload = SipRequest.model_validate(_json_body())
    series = chart_series(_project(payload))
    response = ChartResponse(requestId=payload.requestId, **dict(series))
    return jsonify(response.model_dump())
