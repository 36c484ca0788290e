"""Service-layer helpers bridging HTTP requests and the calculation pipeline."""

from rupeewise.backend.app.services.calculation_service import check_fields, run_calculation

from .request_parser import parse_calculation_payload
from .response_builder import build_calculation_response

__all__ = [
    "build_calculation_response",
    "check_fields",
    "parse_calculation_payload",
    "run_calculation",
]
