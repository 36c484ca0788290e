"""Utility helpers for calculator modules."""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from rupeewise.backend.config.schema import TaxSlab


def format_percentage(value: float) -> str:
    """Return a human-readable percentage label for the ratio ``value``."""

    percentage = value * 100
    if float(int(percentage)) == percentage:
        return f"{int(percentage)}%"
    return f"{percentage:.2f}%"


def calculate_progressive_tax(amount: float, slabs: Sequence[TaxSlab]) -> float:
    """Calculate progressive tax for ``amount`` using ``slabs``."""

    if amount <= 0:
        return 0.0

    total = 0.0
    lower_bound = 0.0

    for slab in slabs:
        upper = slab.upper_bound
        if upper is None or amount < upper:
            total += (amount - lower_bound) * slab.rate
            break

        total += (upper - lower_bound) * slab.rate
        lower_bound = upper

    return total


def round_currency(value: float) -> float:
    """Round monetary amounts to two decimals."""

    return round(value, 2)


def round_rupees(value: float) -> int:
    """Round to whole rupees, halves away from zero.

    Any finite magnitude is accepted, including amounts beyond the default
    28-digit decimal context.
    """

    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite amount {value!r} to rupees")
    return int(Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP))


def compound(rate: float, periods: float) -> float:
    """Return the growth factor ``(1 + rate) ** periods``."""

    return (1 + rate) ** periods


__all__ = [
    "calculate_progressive_tax",
    "compound",
    "format_percentage",
    "round_currency",
    "round_rupees",
]
