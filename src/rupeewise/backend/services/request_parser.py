"""Turn a Flask request into the mapping the calculation service accepts."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from flask import Request
from werkzeug.exceptions import BadRequest

from rupeewise.backend.app.localization import normalise_locale

_ENVELOPE_KEYS = frozenset({"fields", "options", "locale"})


def _locale_hints(req: Request, body: Mapping[str, Any]) -> Iterator[str]:
    """Yield locale hints from most to least specific.

    The body wins over ``?locale=``, which wins over the first
    ``Accept-Language`` entry (quality weights are ignored).
    """

    explicit = body.get("locale")
    if isinstance(explicit, str):
        yield explicit

    query = req.args.get("locale")
    if query:
        yield query

    header = req.headers.get("Accept-Language", "")
    first, _, _ = header.partition(",")
    language, _, _ = first.partition(";")
    yield language


def parse_calculation_payload(req: Request) -> dict[str, Any]:
    """Return the JSON body of ``req`` with its locale resolved.

    A body made only of field values is accepted as shorthand for
    ``{"fields": {...}}``.
    """

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    payload: dict[str, Any] = dict(data)
    if payload and _ENVELOPE_KEYS.isdisjoint(payload):
        payload = {"fields": payload}

    for hint in _locale_hints(req, data):
        if hint.strip():
            payload["locale"] = normalise_locale(hint)
            break

    return payload
