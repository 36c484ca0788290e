"""Expose rule configuration metadata consumed by calculator forms.

Forms use these endpoints to learn which fields an instrument accepts, their
defaults and bounds, and the option choices, without duplicating the rules.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from rupeewise.backend.app.http import problem_response
from rupeewise.backend.app.localization import Translator, get_translator
from rupeewise.backend.app.services.calculation_service import supported_instruments
from rupeewise.backend.config.rule_config import get_instrument_config, load_rule_set
from rupeewise.backend.config.schema import InstrumentConfig
from rupeewise.backend.version import get_project_version

blueprint = Blueprint("config", __name__, url_prefix="/api/v1/config")


def get_configuration_metadata() -> dict[str, Any]:
    """Expose runtime metadata derived from the rule configuration."""

    return {
        "version": get_project_version(),
        "fiscal_year": load_rule_set().fiscal_year,
        "instruments": list(supported_instruments()),
    }


def _bound(config: InstrumentConfig, field: str, check: str) -> float | None:
    for rule in config.rules_for(field):
        if rule.check == check:
            return rule.value
    return None


def _serialise_instrument(name: str, config: InstrumentConfig, translator: Translator) -> dict[str, Any]:
    fields = []
    for field_name, spec in config.fields.items():
        checks = [rule.check for rule in config.rules_for(field_name)]
        fields.append(
            {
                "name": field_name,
                "required": spec.required,
                "default": spec.default,
                "minimum": _bound(config, field_name, "minimum"),
                "maximum": _bound(config, field_name, "maximum"),
                "whole_number": "whole_number" in checks,
            }
        )

    return {
        "instrument": name,
        "category": config.category,
        "fields": fields,
        "options": {
            option: {"choices": list(spec.choices), "default": spec.default}
            for option, spec in config.options.items()
        },
        "rules": [
            {
                "field": rule.field,
                "check": rule.check,
                "value": rule.value,
                "other": rule.other,
                "message": translator(
                    rule.message,
                    value="" if rule.value is None else f"{rule.value:g}",
                    other=rule.other or "",
                ),
            }
            for rule in config.rules
        ],
    }


@blueprint.get("/meta")
def get_application_metadata() -> tuple[Any, int]:
    """Return version and fiscal-year metadata."""

    return jsonify(get_configuration_metadata()), 200


@blueprint.get("/instruments")
def list_instruments() -> tuple[Any, int]:
    rule_set = load_rule_set()
    payload = {
        "fiscal_year": rule_set.fiscal_year,
        "instruments": [
            {"instrument": name, "category": rule_set.instruments[name].category}
            for name in supported_instruments()
        ],
    }
    return jsonify(payload), 200


@blueprint.get("/instruments/<instrument>")
def get_instrument(instrument: str) -> tuple[Any, int]:
    """Describe one instrument's fields, options and ordered rules."""

    if instrument not in supported_instruments():
        return problem_response(
            "not_found", status=404, message=f"Unknown instrument '{instrument}'"
        ).to_response()

    translator = get_translator(request.args.get("locale"))
    config = get_instrument_config(instrument)
    payload = _serialise_instrument(instrument, config, translator)
    payload["locale"] = translator.locale
    return jsonify(payload), 200
