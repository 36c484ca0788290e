"""Amortizing loan payments and repayment schedules."""

from __future__ import annotations

from rupeewise.backend.app.models import AmortizationYear, LoanEmiInput, LoanEmiResult

from .utils import compound


def monthly_emi(principal: float, annual_rate: float, months: int) -> float:
    """Equated monthly instalment ``P*r*(1+r)^n / ((1+r)^n - 1)``.

    ``annual_rate`` is a percentage and must be positive.
    """

    rate = annual_rate / 100 / 12
    growth = compound(rate, months)
    return principal * rate * growth / (growth - 1)


def amortization_schedule(
    principal: float, annual_rate: float, months: int, emi: float
) -> tuple[AmortizationYear, ...]:
    """Aggregate the month-by-month repayment into yearly rows."""

    rate = annual_rate / 100 / 12
    balance = principal
    rows: list[AmortizationYear] = []

    for start in range(0, months, 12):
        opening = balance
        interest_paid = 0.0
        principal_paid = 0.0
        for _ in range(start, min(start + 12, months)):
            interest = balance * rate
            repaid = emi - interest
            interest_paid += interest
            principal_paid += repaid
            balance -= repaid
        rows.append(
            AmortizationYear(
                year=start // 12 + 1,
                opening_balance=opening,
                principal_paid=principal_paid,
                interest_paid=interest_paid,
                # float drift leaves a few paise on the final row
                closing_balance=balance if balance > 0.005 else 0.0,
            )
        )

    return tuple(rows)


def calculate_loan_emi(payload: LoanEmiInput) -> LoanEmiResult:
    months = payload.tenure_years * 12
    emi = monthly_emi(payload.loan_amount, payload.interest_rate, months)
    total_payment = emi * months

    return LoanEmiResult(
        monthly_emi=emi,
        loan_amount=payload.loan_amount,
        total_interest=total_payment - payload.loan_amount,
        total_payment=total_payment,
        months=months,
        breakdown=amortization_schedule(payload.loan_amount, payload.interest_rate, months, emi),
    )


__all__ = ["amortization_schedule", "calculate_loan_emi", "monthly_emi"]
