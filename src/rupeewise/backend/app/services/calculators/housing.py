"""Rent versus home-ownership comparison."""

from __future__ import annotations

from rupeewise.backend.app.models import RentVsOwnInput, RentVsOwnResult

from .loans import monthly_emi
from .utils import compound


def total_rent(monthly_rent: float, annual_increase: float, years: int) -> float:
    """Sum twelve months of rent per year, escalating the rent each year."""

    growth = annual_increase / 100
    return sum(monthly_rent * compound(growth, year) * 12 for year in range(years))


def calculate_rent_vs_own(payload: RentVsOwnInput) -> RentVsOwnResult:
    """Compare the net position of buying with a loan against renting.

    ``net_savings`` is the appreciated property value less everything paid to
    buy and everything that would have been paid in rent. Buying wins only
    when it is strictly positive.
    """

    months = payload.loan_tenure_years * 12
    loan_amount = payload.home_price - payload.down_payment
    emi = monthly_emi(loan_amount, payload.interest_rate, months)

    total_emi = emi * months
    cost_of_buying = payload.down_payment + total_emi
    cost_of_renting = total_rent(
        payload.monthly_rent, payload.rent_increase_rate, payload.loan_tenure_years
    )
    property_value = payload.home_price * compound(
        payload.property_appreciation_rate / 100, payload.loan_tenure_years
    )
    net_savings = property_value - cost_of_buying - cost_of_renting

    return RentVsOwnResult(
        monthly_emi=emi,
        loan_amount=loan_amount,
        total_interest=total_emi - loan_amount,
        total_cost_of_buying=cost_of_buying,
        total_cost_of_renting=cost_of_renting,
        property_value_after=property_value,
        net_savings=net_savings,
        buying_is_better=net_savings > 0,
    )


__all__ = ["calculate_rent_vs_own", "total_rent"]
