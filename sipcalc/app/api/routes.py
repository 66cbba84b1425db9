"""HTTP routes for the Flask API."""

import math
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from sipcalc.config import AppSettings
from sipcalc.core.logging import get_logger
from sipcalc.core.ping import get_ping_response
from sipcalc.core.projection import (
    InvalidProjectionInput,
    calculate_sip,
    coerce_inputs,
)
from sipcalc.schemas.projection import ProjectionInputs

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


def _settings() -> AppSettings:
    return current_app.config["SIPCALC_SETTINGS"]


def _json_safe(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_json_safe(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return all(_json_safe(item) for item in value)
    return True


def _error_detail(error: Any) -> Dict[str, Any]:
    """Pydantic error dict minus context and any NaN/Infinity echo of the input."""
    if not isinstance(error, dict):
        return {"msg": str(error)}
    return {
        key: value
        for key, value in error.items()
        if key != "ctx" and not (key == "input" and not _json_safe(value))
    }


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected request: %s", exc.error_count())
    detail = [_error_detail(error) for error in exc.errors(include_url=False)]
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidProjectionInput)
def _handle_invalid_input(exc: InvalidProjectionInput):
    """Convert engine input errors into JSON responses."""
    logger.info("rejected projection inputs: %s", exc)
    detail = [_error_detail(error) for error in exc.errors]
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = get_ping_response(_settings())
    return jsonify(response.model_dump())


@api_bp.get("/calc/sip/defaults")
def sip_defaults() -> Any:
    """Inputs the calculator widget starts from."""
    settings = _settings()
    defaults = ProjectionInputs(
        monthly_contribution=settings.default_monthly_contribution,
        years=settings.default_years,
        annual_rate_percent=settings.default_annual_rate_percent,
    )
    return jsonify(defaults.model_dump(by_alias=True))


@api_bp.post("/calc/sip")
def sip() -> Any:
    """Project future value, growth series and breakdown for a SIP."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    inputs = coerce_inputs(raw_payload)

    max_years = _settings().max_years
    if inputs.years > max_years:
        raise InvalidProjectionInput(
            [
                {
                    "type": "less_than_equal",
                    "loc": ("years",),
                    "msg": f"Input should be less than or equal to {max_years}",
                    "input": inputs.years,
                }
            ]
        )

    response = calculate_sip(inputs)
    logger.info(
        "projected SIP: %s/month for %s years at %s%% -> %s",
        inputs.monthly_contribution,
        inputs.years,
        inputs.annual_rate_percent,
        response.result.future_value,
    )
    return jsonify(response.model_dump(by_alias=True))
