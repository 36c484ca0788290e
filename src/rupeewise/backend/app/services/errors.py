"""Exceptions raised by the validation and calculation pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:  # pragma: no cover - only for static type checkers
    from .rule_validator import ValidationResult


class UnknownInstrumentError(LookupError):
    """Raised when a calculator tag has no configured rule set."""

    def __init__(self, instrument: str) -> None:
        super().__init__(f"Unknown instrument '{instrument}'")
        self.instrument = instrument


class RuleViolation(ValueError):
    """Raised when submitted fields fail the instrument's guardrails.

    The failing :class:`ValidationResult` travels with the exception so that
    callers can surface the field-keyed message.
    """

    def __init__(self, result: ValidationResult, message: str | None = None) -> None:
        detail = message or next(iter(result.errors.values()), "Validation failed")
        super().__init__(detail)
        self.result = result

    @property
    def errors(self) -> Mapping[str, str]:
        return self.result.errors


class CalculationNotAllowed(RuleViolation):
    """Raised when a calculation is requested from a failing validation."""


__all__ = ["CalculationNotAllowed", "RuleViolation", "UnknownInstrumentError"]
