"""Render calculation results as Indian Rupee display strings."""

from __future__ import annotations

import math
from dataclasses import fields, is_dataclass
from decimal import Decimal
from numbers import Real
from typing import Any

from .calculators.utils import format_percentage, round_rupees

CURRENCY_SYMBOL = "₹"
ZERO_DISPLAY = f"{CURRENCY_SYMBOL}0"


def group_indian_digits(digits: str) -> str:
    """Group an unsigned digit string the en-IN way: ``12,34,567``."""

    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def format_currency(amount: Any) -> str:
    """Format ``amount`` as whole rupees with Indian digit grouping.

    Halves round up. NaN, infinities, negatives and non-numeric values all
    render as ``₹0``.
    """

    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        return ZERO_DISPLAY

    value = float(amount)
    if not math.isfinite(value) or value < 0:
        return ZERO_DISPLAY

    return f"{CURRENCY_SYMBOL}{group_indian_digits(str(round_rupees(value)))}"


def format_result(result: Any) -> dict[str, Any]:
    """Format the currency and percentage fields a result type declares.

    Nested results and breakdown rows are formatted recursively.
    """

    display: dict[str, Any] = {
        name: format_currency(getattr(result, name))
        for name in getattr(result, "currency_fields", ())
    }
    for name in getattr(result, "percentage_fields", ()):
        display[name] = format_percentage(getattr(result, name) / 100)

    for entry in fields(result):
        value = getattr(result, entry.name)
        if is_dataclass(value):
            display[entry.name] = format_result(value)
        elif isinstance(value, tuple) and value and is_dataclass(value[0]):
            display[entry.name] = [format_result(row) for row in value]

    return display


__all__ = [
    "CURRENCY_SYMBOL",
    "format_currency",
    "format_percentage",
    "format_result",
    "group_indian_digits",
]
