"""Problem payloads shared by the blueprints and the app error handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from flask import jsonify


@dataclass(frozen=True)
class ProblemResponse:
    """RFC 7807-style error body.

    ``error`` is a short machine-readable code (``validation_error``,
    ``not_found``, ``bad_request``); ``details`` are merged into the body, which
    is how rule violations carry their field-keyed ``errors`` map.
    """

    error: str
    status: int
    message: str | None = None
    details: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error, "status": self.status}
        if self.message:
            body["message"] = self.message
        body.update(self.details)
        return body

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **details: Any,
) -> ProblemResponse:
    return ProblemResponse(error=error, status=status, message=message, details=details)


__all__ = ["ProblemResponse", "problem_response"]
