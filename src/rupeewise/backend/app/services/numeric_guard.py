"""Normalise raw form text into numeric field values.

Fields accept unsigned decimals only: digits with at most one decimal point.
Empty text is *unset*, which is distinct from zero. Range checks belong to the
rule validator; nothing here clamps or rejects a well-formed number.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping

from rupeewise.backend.app.localization import Translator
from rupeewise.backend.config.schema import FieldConfig, InstrumentConfig

NUMERIC_PATTERN = re.compile(r"^\d*\.?\d*$")


@dataclass(frozen=True)
class NumericField:
    """A single parsed form field."""

    name: str
    value: float | None
    is_required: bool
    minimum: float | None = None
    maximum: float | None = None
    malformed: bool = False

    @property
    def is_set(self) -> bool:
        return self.value is not None


def is_numeric_text(text: str) -> bool:
    """Return ``True`` when ``text`` is empty or an unsigned decimal."""

    return NUMERIC_PATTERN.fullmatch(text) is not None


def accept_keystroke(previous: str, candidate: str) -> str:
    """Return ``candidate`` if it is well formed, otherwise keep ``previous``."""

    return candidate if is_numeric_text(candidate) else previous


def _text_of(raw: Any) -> str:
    if raw is None:
        return ""
    return str(raw).strip()


def _finite_or_none(text: str) -> float | None:
    value = float(text)
    return value if math.isfinite(value) else None


def _is_malformed(raw: Any) -> bool:
    if raw is None:
        return False
    if isinstance(raw, bool):
        return True
    if isinstance(raw, Real):
        return not math.isfinite(float(raw)) or raw < 0

    text = _text_of(raw)
    if not is_numeric_text(text):
        return True
    return text not in ("", ".") and _finite_or_none(text) is None


def parse_numeric(raw: Any) -> float | None:
    """Parse ``raw`` into a float or ``None`` when unset or malformed.

    JSON clients may send numbers instead of text; finite non-negative
    numbers are accepted as-is. Digit strings too long to fit a finite float
    are treated as malformed.
    """

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Real):
        value = float(raw)
        return value if math.isfinite(value) and value >= 0 else None

    text = _text_of(raw)
    if not text or text == "." or not is_numeric_text(text):
        return None
    return _finite_or_none(text)


def guard_field(
    name: str,
    raw: Any,
    spec: FieldConfig,
    *,
    minimum: float | None = None,
    maximum: float | None = None,
) -> NumericField:
    """Build a :class:`NumericField` for ``raw`` using the declared constraints."""

    return NumericField(
        name=name,
        value=parse_numeric(raw),
        is_required=spec.required,
        minimum=minimum,
        maximum=maximum,
        malformed=_is_malformed(raw),
    )


def _declared_bound(config: InstrumentConfig, field: str, check: str) -> float | None:
    for rule in config.rules_for(field):
        if rule.check == check:
            return rule.value
    return None


def guard_fields(config: InstrumentConfig, raw: Mapping[str, Any]) -> dict[str, NumericField]:
    """Guard every field declared by ``config`` in declaration order."""

    return {
        name: guard_field(
            name,
            raw.get(name),
            spec,
            minimum=_declared_bound(config, name, "minimum"),
            maximum=_declared_bound(config, name, "maximum"),
        )
        for name, spec in config.fields.items()
    }


def field_shape_errors(
    config: InstrumentConfig, raw: Mapping[str, Any], translator: Translator
) -> dict[str, str]:
    """Return per-field input messages independent of the domain rules.

    Required fields left empty report the "required" message; text that is
    not an unsigned decimal reports the invalid-number message.
    """

    errors: dict[str, str] = {}
    for name, field in guard_fields(config, raw).items():
        if field.malformed:
            errors[name] = translator("errors.invalid_number")
        elif field.is_required and not field.is_set:
            errors[name] = translator("errors.field_required")
    return errors


__all__ = [
    "NUMERIC_PATTERN",
    "NumericField",
    "accept_keystroke",
    "field_shape_errors",
    "guard_field",
    "guard_fields",
    "is_numeric_text",
    "parse_numeric",
]
