"""Systematic investment plan projections."""

from __future__ import annotations

from rupeewise.backend.app.models import SipInput, SipResult, SipYear

from .utils import compound


def sip_future_value(monthly_investment: float, monthly_rate: float, months: int) -> float:
    """Future value of an annuity due: ``M * ((1+r)^n - 1) / r * (1+r)``."""

    return monthly_investment * (compound(monthly_rate, months) - 1) / monthly_rate * (1 + monthly_rate)


def calculate_sip(payload: SipInput) -> SipResult:
    monthly = payload.monthly_investment
    rate = payload.annual_return / 100 / 12
    months = payload.investment_years * 12

    total_invested = monthly * months
    future_value = sip_future_value(monthly, rate, months)
    returns = future_value - total_invested

    breakdown = tuple(
        SipYear(month=month, invested=monthly * month, value=sip_future_value(monthly, rate, month))
        for month in range(12, months + 1, 12)
    )

    return SipResult(
        total_invested=total_invested,
        estimated_returns=returns,
        future_value=future_value,
        return_percentage=returns / total_invested * 100,
        breakdown=breakdown,
    )


__all__ = ["calculate_sip", "sip_future_value"]
