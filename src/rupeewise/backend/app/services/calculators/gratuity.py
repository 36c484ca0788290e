"""Gratuity under the Payment of Gratuity Act, 1972."""

from __future__ import annotations

from rupeewise.backend.app.models import GratuityInput, GratuityResult
from rupeewise.backend.config.schema import GratuityConfig


def calculate_gratuity(payload: GratuityInput, config: GratuityConfig) -> GratuityResult:
    """Return fifteen days' wages per completed year, capped at the statutory limit.

    A month is taken as ``config.divisor`` working days, so the daily wage is
    ``salary / divisor``.
    """

    years = payload.years_of_service
    uncapped = payload.last_drawn_salary / config.divisor * config.multiplier * years

    return GratuityResult(
        amount=min(uncapped, config.cap),
        uncapped_amount=uncapped,
        cap_applied=uncapped > config.cap,
        months=years * 12,
        years_of_service=years,
    )


__all__ = ["calculate_gratuity"]
