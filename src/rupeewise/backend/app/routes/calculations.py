"""REST endpoints for instrument validation and calculation."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, request

from rupeewise.backend.services import (
    build_calculation_response,
    check_fields,
    parse_calculation_payload,
    run_calculation,
)

blueprint = Blueprint("calculations", __name__, url_prefix="/api/v1/calculations")
validations_blueprint = Blueprint("validations", __name__, url_prefix="/api/v1/validations")


@blueprint.post("/<instrument>")
def create_calculation(instrument: str) -> tuple[Any, int]:
    """Validate the submitted fields and return the formatted result."""

    payload = parse_calculation_payload(request)
    result = run_calculation(instrument, payload)

    return build_calculation_response(result)


@validations_blueprint.post("/<instrument>")
def validate_fields(instrument: str) -> tuple[Any, int]:
    """Report guardrail violations without running the calculation."""

    payload = parse_calculation_payload(request)
    return build_calculation_response(check_fields(instrument, payload))
