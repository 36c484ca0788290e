"""Apply per-instrument guardrail rules to submitted form fields.

Rules are evaluated in the order the configuration declares them and the
first failing rule wins: only its message is reported, keyed by the rule's
field. Values are never clamped into range.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from rupeewise.backend.app.localization import Translator, get_translator
from rupeewise.backend.config.rule_config import get_instrument_config
from rupeewise.backend.config.schema import InstrumentConfig, RuleConfig

from .errors import UnknownInstrumentError
from .numeric_guard import guard_fields

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one instrument's form.

    ``ok`` is derived from ``errors`` so the two can never disagree. ``values``
    holds the parsed numbers (defaults applied) and ``options`` the resolved
    selections; both are only meaningful when ``ok`` is true.
    """

    instrument: str
    category: str
    errors: Mapping[str, str] = field(default_factory=dict)
    values: Mapping[str, float | None] = field(default_factory=dict)
    options: Mapping[str, str] = field(default_factory=dict)
    locale: str = "en"

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "errors": dict(self.errors)}


def resolve_instrument(instrument: str) -> InstrumentConfig:
    """Return the configuration for ``instrument`` or raise ``UnknownInstrumentError``."""

    try:
        return get_instrument_config(instrument)
    except KeyError as error:
        raise UnknownInstrumentError(instrument) from error


def _format_bound(value: float | None) -> str:
    return "" if value is None else f"{value:g}"


def _rule_passes(rule: RuleConfig, values: Mapping[str, float | None]) -> bool:
    value = values.get(rule.field)

    if rule.check == "required":
        return value is not None
    if rule.check == "positive":
        return value is not None and value > 0

    # The remaining checks constrain a value only once it is set.
    if value is None:
        return True
    if rule.check == "non_negative":
        return value >= 0
    if rule.check == "minimum":
        return value >= rule.value
    if rule.check == "maximum":
        return value <= rule.value
    if rule.check == "whole_number":
        return float(value).is_integer()
    if rule.check == "not_above_field":
        other = values.get(rule.other)
        return other is None or value <= other
    if rule.check == "above_field":
        other = values.get(rule.other)
        return other is None or value > other

    raise ValueError(f"Unsupported rule check '{rule.check}'")


def _resolve_options(
    config: InstrumentConfig,
    requested: Mapping[str, Any],
    translator: Translator,
) -> tuple[dict[str, str], dict[str, str]]:
    resolved: dict[str, str] = {}
    errors: dict[str, str] = {}

    for name, spec in config.options.items():
        raw = requested.get(name)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            resolved[name] = spec.default
            continue

        choice = str(raw).strip()
        if choice not in spec.choices:
            errors[name] = translator("errors.option_invalid", value=choice, option=name)
            break
        resolved[name] = choice

    return resolved, errors


def _failure(
    config: InstrumentConfig,
    instrument: str,
    translator: Translator,
    errors: Mapping[str, str],
) -> ValidationResult:
    return ValidationResult(
        instrument=instrument,
        category=config.category,
        errors=MappingProxyType(dict(errors)),
        locale=translator.locale,
    )


def validate(
    instrument: str,
    raw_fields: Mapping[str, Any],
    locale: str | None = None,
    options: Mapping[str, Any] | None = None,
) -> ValidationResult:
    """Validate ``raw_fields`` for ``instrument`` and return the outcome.

    Malformed numbers are reported first, then invalid option selections,
    then the ordered domain rules. Required fields that no rule covered are
    checked last.
    """

    config = resolve_instrument(instrument)
    translator = get_translator(locale)
    guarded = guard_fields(config, raw_fields)

    for name, numeric in guarded.items():
        if numeric.malformed:
            _LOGGER.debug("%s rejected: malformed value for %s", instrument, name)
            return _failure(
                config, instrument, translator, {name: translator("errors.invalid_number")}
            )

    resolved_options, option_errors = _resolve_options(config, options or {}, translator)
    if option_errors:
        _LOGGER.debug("%s rejected: invalid option %s", instrument, list(option_errors))
        return _failure(config, instrument, translator, option_errors)

    values: dict[str, float | None] = {}
    for name, numeric in guarded.items():
        default = config.fields[name].default
        values[name] = numeric.value if numeric.is_set else default

    for rule in config.rules:
        if _rule_passes(rule, values):
            continue
        _LOGGER.debug("%s rejected by %s rule on %s", instrument, rule.check, rule.field)
        message = translator(
            rule.message,
            value=_format_bound(rule.value),
            other=rule.other or "",
        )
        return _failure(config, instrument, translator, {rule.field: message})

    for name, numeric in guarded.items():
        if numeric.is_required and values[name] is None:
            return _failure(
                config, instrument, translator, {name: translator("errors.field_required")}
            )

    return ValidationResult(
        instrument=instrument,
        category=config.category,
        values=MappingProxyType(values),
        options=MappingProxyType(resolved_options),
        locale=translator.locale,
    )


__all__ = ["ValidationResult", "resolve_instrument", "validate"]
