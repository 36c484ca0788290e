"""Serve the label and message catalogues used by the calculator forms."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from rupeewise.backend.app.localization import load_translations

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


@blueprint.get("/", defaults={"locale": None})
@blueprint.get("/<locale>")
def get_translations(locale: str | None) -> tuple[Any, int]:
    """Return a catalogue; a path locale takes precedence over ``?locale=``."""

    payload = load_translations(locale or request.args.get("locale"))
    response = jsonify(payload)
    response.headers["Content-Language"] = payload["locale"]
    return response, 200
