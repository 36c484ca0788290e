"""Attach category-specific caveats to calculation results."""

from __future__ import annotations

from typing import Any

from rupeewise.backend.app.localization import Translator, get_translator

DISCLAIMER_CATEGORIES = ("tax", "investment", "retirement", "insurance", "general")
REGULATORY_NOTES = ("mutual_funds", "fixed_deposits", "nps")
_FALLBACK_CATEGORY = "general"
_REGULATED_CATEGORIES = frozenset({"investment"})


def disclaimer_for(category: str, translator: Translator | None = None) -> dict[str, Any]:
    """Return the disclaimer block for ``category``.

    Unknown categories receive the general disclaimer. Investment results also
    carry the SEBI, RBI and PFRDA notes.
    """

    translate = translator or get_translator()
    resolved = category if category in DISCLAIMER_CATEGORIES else _FALLBACK_CATEGORY

    regulatory: list[str] = []
    if resolved in _REGULATED_CATEGORIES:
        regulatory = [translate(f"disclaimer.regulatory.{note}") for note in REGULATORY_NOTES]

    return {
        "category": resolved,
        "title": translate("disclaimer.title"),
        "text": translate(f"disclaimer.{resolved}"),
        "regulatory": regulatory,
    }


__all__ = ["DISCLAIMER_CATEGORIES", "REGULATORY_NOTES", "disclaimer_for"]
