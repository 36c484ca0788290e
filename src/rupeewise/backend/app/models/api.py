"""Pydantic models describing the public API surface."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = [
    "CalculationRequest",
    "CalculationResponse",
    "DisclaimerPayload",
    "ResponseMeta",
    "ValidationResponse",
    "format_validation_error",
]

FieldValue = str | float | int | None


class CalculationRequest(BaseModel):
    """Raw form submission for a single instrument."""

    model_config = ConfigDict(extra="forbid")

    fields: dict[str, FieldValue] = Field(default_factory=dict)
    options: dict[str, str] = Field(default_factory=dict)
    locale: str | None = None

    @field_validator("fields", mode="before")
    @classmethod
    def _reject_nested_values(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        for key, raw in value.items():
            if isinstance(raw, (Mapping, list, bool)):
                raise ValueError(f"field '{key}' must be text or a number")
        return value


class DisclaimerPayload(BaseModel):
    """Caveat text attached to every calculation result."""

    model_config = ConfigDict(extra="forbid")

    category: str
    title: str
    text: str
    regulatory: list[str] = Field(default_factory=list)


class ResponseMeta(BaseModel):
    """Metadata returned alongside the calculation output."""

    model_config = ConfigDict(extra="forbid")

    fiscal_year: str
    locale: str
    options: dict[str, str] = Field(default_factory=dict)
    timings_ms: dict[str, float] | None = None


class CalculationResponse(BaseModel):
    """Full response payload produced by the calculation service."""

    model_config = ConfigDict(extra="forbid")

    instrument: str
    category: str
    result: dict[str, Any]
    display: dict[str, Any]
    disclaimer: DisclaimerPayload
    meta: ResponseMeta


class ValidationResponse(BaseModel):
    """Validation outcome without running a calculation kernel."""

    model_config = ConfigDict(extra="forbid")

    instrument: str
    ok: bool
    errors: dict[str, str]
    field_errors: dict[str, str]


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of payload issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid calculation payload: {details}"
