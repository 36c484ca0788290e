"""Locale catalogues for guardrail messages, disclaimers and form labels.

Each locale ships one JSON document in :mod:`rupeewise.translations` with a
flat ``backend`` map of message keys and a nested ``frontend`` tree of labels.
English is the reference catalogue; every other locale may be partial.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import cache
from importlib import resources
from typing import Any, Mapping

_BASE_LOCALE = "en"
_TRANSLATIONS_PACKAGE = "rupeewise.translations"


@dataclass(frozen=True)
class Translator:
    """Resolve message keys for one locale.

    Keyword arguments fill ``{placeholder}`` markers, so a rule bound can be
    named in its message (``translator("errors.sip.return_maximum", value="50")``).
    A key missing from both the locale and English resolves to itself.
    """

    locale: str
    _messages: Mapping[str, str]
    _fallback: Mapping[str, str]

    def __call__(self, key: str, **params: Any) -> str:
        template = self._messages.get(key) or self._fallback.get(key, key)
        return template.format(**params) if params else template

    def has(self, key: str) -> bool:
        return key in self._messages or key in self._fallback


@dataclass(frozen=True)
class Catalogue:
    locale: str
    backend: Mapping[str, str] = field(default_factory=dict)
    frontend: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, locale: str, document: Mapping[str, Any]) -> Catalogue:
        backend = document.get("backend")
        frontend = document.get("frontend")
        if not isinstance(backend, Mapping):
            backend = {}
        if not isinstance(frontend, Mapping):
            frontend = {}
        return cls(
            locale=locale,
            backend={key: str(text) for key, text in backend.items()},
            frontend=frontend,
        )

    def as_payload(self) -> dict[str, Any]:
        return {"backend": dict(self.backend), "frontend": self.frontend}


def _catalogue_files() -> dict[str, Any]:
    root = resources.files(_TRANSLATIONS_PACKAGE)
    return {
        entry.name[: -len(".json")]: entry
        for entry in root.iterdir()
        if entry.name.endswith(".json")
    }


@cache
def _available_locales() -> tuple[str, ...]:
    return tuple(sorted(_catalogue_files())) or (_BASE_LOCALE,)


@cache
def _load_catalogue(locale: str) -> Catalogue:
    resource = _catalogue_files().get(locale)
    if resource is None:
        return Catalogue(locale=locale)

    with resource.open("r", encoding="utf-8") as handle:
        document = json.load(handle)

    return Catalogue.from_document(locale, document if isinstance(document, Mapping) else {})


def normalise_locale(locale: str | None) -> str:
    """Map a requested locale (``hi-IN``, ``EN_in``) onto a shipped catalogue.

    Only the language subtag is considered; unknown languages fall back to
    English.
    """

    if not locale:
        return _BASE_LOCALE

    language = locale.strip().lower().replace("_", "-").partition("-")[0]
    return language if language in _available_locales() else _BASE_LOCALE


def get_translator(locale: str | None = None) -> Translator:
    """Return a translator for ``locale`` backed by the English catalogue."""

    catalogue = _load_catalogue(normalise_locale(locale))
    return Translator(
        locale=catalogue.locale,
        _messages=catalogue.backend,
        _fallback=_load_catalogue(_BASE_LOCALE).backend,
    )


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Bundle a locale's catalogue with the English fallback for form clients."""

    catalogue = _load_catalogue(normalise_locale(locale))
    return {
        "locale": catalogue.locale,
        "available_locales": list(_available_locales()),
        **catalogue.as_payload(),
        "fallback": {"locale": _BASE_LOCALE, **_load_catalogue(_BASE_LOCALE).as_payload()},
    }


__all__ = [
    "Catalogue",
    "Translator",
    "get_translator",
    "load_translations",
    "normalise_locale",
]
