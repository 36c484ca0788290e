"""Recurring and fixed deposit maturity projections."""

from __future__ import annotations

import math

from rupeewise.backend.app.models import (
    DepositYear,
    FixedDepositInput,
    FixedDepositResult,
    FixedDepositYear,
    RecurringDepositInput,
    RecurringDepositResult,
)

from .utils import compound

COMPOUNDING_PERIODS = {"yearly": 1, "quarterly": 4, "monthly": 12}


def recurring_deposit_maturity(monthly_deposit: float, annual_rate: float, years: float) -> float:
    """Maturity of a recurring deposit compounded quarterly.

    Uses the bank convention ``D * ((1+q)^Q - 1) / (1 - (1+q)^(-1/3))`` with
    ``q`` the quarterly rate and ``Q`` the number of quarters. At a zero rate
    the expression is 0/0 and its limit, the deposited sum, is returned.
    """

    if annual_rate == 0:
        return monthly_deposit * years * 12

    quarterly_rate = annual_rate / 100 / 4
    quarters = years * 4
    growth = compound(quarterly_rate, quarters) - 1
    return monthly_deposit * growth / (1 - compound(quarterly_rate, -1 / 3))


def calculate_recurring_deposit(payload: RecurringDepositInput) -> RecurringDepositResult:
    deposit = payload.monthly_deposit
    years = payload.tenure_years

    maturity = recurring_deposit_maturity(deposit, payload.interest_rate, years)
    total_deposited = deposit * years * 12

    breakdown = tuple(
        DepositYear(
            year=year,
            deposited=deposit * 12 * year,
            maturity_value=recurring_deposit_maturity(deposit, payload.interest_rate, year),
        )
        for year in range(1, years + 1)
    )

    return RecurringDepositResult(
        maturity_value=maturity,
        total_deposited=total_deposited,
        interest_earned=maturity - total_deposited,
        breakdown=breakdown,
    )


def calculate_fixed_deposit(payload: FixedDepositInput) -> FixedDepositResult:
    """Compound ``principal`` at ``n`` periods per year for the tenure.

    The yearly breakdown covers ``ceil(tenure)`` rows. A fractional final row
    compounds only the remaining part of the year, so its closing balance is
    the maturity value.
    """

    periods = COMPOUNDING_PERIODS[payload.compounding]
    period_rate = payload.interest_rate / 100 / periods

    maturity = payload.principal * compound(period_rate, periods * payload.tenure_years)
    effective_rate = (compound(period_rate, periods) - 1) * 100

    rows: list[FixedDepositYear] = []
    balance = payload.principal
    for year in range(1, math.ceil(payload.tenure_years) + 1):
        span = min(1.0, payload.tenure_years - (year - 1))
        closing = balance * compound(period_rate, periods * span)
        rows.append(
            FixedDepositYear(
                year=year,
                opening_balance=balance,
                interest=closing - balance,
                closing_balance=closing,
            )
        )
        balance = closing

    return FixedDepositResult(
        maturity_value=maturity,
        principal=payload.principal,
        interest_earned=maturity - payload.principal,
        effective_rate=effective_rate,
        periods_per_year=periods,
        breakdown=tuple(rows),
    )


__all__ = [
    "COMPOUNDING_PERIODS",
    "calculate_fixed_deposit",
    "calculate_recurring_deposit",
    "recurring_deposit_maturity",
]
