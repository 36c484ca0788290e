"""Serialise service payloads into Flask responses."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Tuple

from flask import jsonify

ResponseTuple = Tuple[Any, int]


def build_calculation_response(payload: Mapping[str, Any], status: int = 200) -> ResponseTuple:
    """Return ``payload`` as JSON.

    Results are derived from the submitted figures, so clients and proxies
    are told not to cache them.
    """

    response = jsonify(payload)
    response.headers["Cache-Control"] = "no-store"
    return response, status
