"""Immutable calculation inputs built from a passing validation result."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "AgeCategory",
    "CalculationInput",
    "EpfInput",
    "FixedDepositInput",
    "GratuityInput",
    "HealthInsuranceInput",
    "InHandSalaryInput",
    "LoanEmiInput",
    "NpsInput",
    "OfferComparisonInput",
    "RecurringDepositInput",
    "RentVsOwnInput",
    "RetirementCorpusInput",
    "SalaryGrowthInput",
    "SipInput",
    "TaxRegimeInput",
    "TermInsuranceInput",
]


class CalculationInput(BaseModel):
    """Base class for kernel inputs: plain numbers, frozen, no extras."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class GratuityInput(CalculationInput):
    last_drawn_salary: float = Field(..., gt=0)
    years_of_service: float = Field(..., ge=0)


class RecurringDepositInput(CalculationInput):
    monthly_deposit: float = Field(..., gt=0)
    interest_rate: float = Field(default=0.0, ge=0)
    tenure_years: int = Field(..., gt=0)


class FixedDepositInput(CalculationInput):
    principal: float = Field(..., gt=0)
    interest_rate: float = Field(..., gt=0)
    tenure_years: float = Field(..., gt=0)
    compounding: Literal["monthly", "quarterly", "yearly"] = "quarterly"


class SipInput(CalculationInput):
    monthly_investment: float = Field(..., gt=0)
    annual_return: float = Field(..., gt=0)
    investment_years: int = Field(..., gt=0)


class LoanEmiInput(CalculationInput):
    loan_amount: float = Field(..., gt=0)
    interest_rate: float = Field(..., gt=0)
    tenure_years: int = Field(..., gt=0)


class RentVsOwnInput(CalculationInput):
    """Inputs for comparing a home purchase against continued renting."""

    home_price: float = Field(..., gt=0)
    down_payment: float = Field(..., gt=0)
    loan_tenure_years: int = Field(..., gt=0)
    interest_rate: float = Field(..., gt=0)
    monthly_rent: float = Field(..., gt=0)
    rent_increase_rate: float = Field(default=0.0, ge=0)
    property_appreciation_rate: float = Field(default=0.0, ge=0)


class TaxRegimeInput(CalculationInput):
    annual_income: float = Field(..., gt=0)
    deductions: float = Field(default=0.0, ge=0)
    age_category: Literal["below60", "senior", "super_senior"] = "below60"


AgeCategory = Literal["below60", "senior", "super_senior"]


class InHandSalaryInput(CalculationInput):
    """Annual CTC and the structure used to split it into salary heads.

    ``basic_percentage`` applies to fixed pay (CTC less variable pay);
    ``professional_tax`` is the yearly amount.
    """

    ctc: float = Field(..., gt=0)
    variable_pay: float = Field(default=0.0, ge=0)
    variable_pay_realization: float = Field(default=100.0, ge=0, le=100)
    basic_percentage: float = Field(default=40.0, gt=0, le=100)
    professional_tax: float = Field(default=2400.0, ge=0)
    monthly_rent: float = Field(default=0.0, ge=0)
    section_80c: float = Field(default=0.0, ge=0)
    section_80d: float = Field(default=0.0, ge=0)
    hra_share: Literal["40", "50"] = "50"
    city: Literal["metro", "non_metro"] = "metro"
    pf_wage_base: Literal["capped", "full"] = "capped"
    employer_pf: Literal["in_ctc", "over_ctc"] = "in_ctc"
    age_category: AgeCategory = "below60"


class OfferComparisonInput(CalculationInput):
    offer_a_ctc: float = Field(..., gt=0)
    offer_a_variable_pay: float = Field(default=0.0, ge=0)
    offer_b_ctc: float = Field(..., gt=0)
    offer_b_variable_pay: float = Field(default=0.0, ge=0)
    variable_pay_realization: float = Field(default=100.0, ge=0, le=100)
    basic_percentage: float = Field(default=40.0, gt=0, le=100)
    age_category: AgeCategory = "below60"


class SalaryGrowthInput(CalculationInput):
    current_salary: float = Field(..., gt=0)
    annual_hike: float = Field(default=10.0, gt=0)
    years: int = Field(default=5, gt=0)


class EpfInput(CalculationInput):
    basic_salary: float = Field(..., gt=0)
    current_age: int = Field(default=25, gt=0)
    retirement_age: int = Field(default=58, gt=0)
    current_balance: float = Field(default=0.0, ge=0)
    interest_rate: float = Field(default=8.25, gt=0)
    pf_wage_base: Literal["capped", "full"] = "capped"


class NpsInput(CalculationInput):
    monthly_contribution: float = Field(..., gt=0)
    employer_contribution: float = Field(default=0.0, ge=0)
    current_age: int = Field(default=30, gt=0)
    retirement_age: int = Field(default=60, gt=0)
    current_balance: float = Field(default=0.0, ge=0)
    expected_return: float = Field(default=10.0, gt=0)
    annuity_rate: float = Field(default=6.0, ge=0)


class RetirementCorpusInput(CalculationInput):
    """Ages in whole years and rates in percent per annum."""

    current_age: int = Field(..., gt=0)
    retirement_age: int = Field(default=60, gt=0)
    life_expectancy: int = Field(default=85, gt=0)
    current_monthly_expense: float = Field(..., gt=0)
    current_savings: float = Field(default=0.0, ge=0)
    monthly_savings: float = Field(default=0.0, ge=0)
    inflation_rate: float = Field(default=6.0, ge=0)
    pre_retirement_return: float = Field(default=12.0, ge=0)
    post_retirement_return: float = Field(default=7.0, ge=0)


class TermInsuranceInput(CalculationInput):
    annual_income: float = Field(..., gt=0)
    current_age: float = Field(default=30.0, gt=0)
    retirement_age: float = Field(default=60.0, gt=0)
    outstanding_debts: float = Field(default=0.0, ge=0)
    existing_assets: float = Field(default=0.0, ge=0)
    dependents: int = Field(default=1, ge=0)


class HealthInsuranceInput(CalculationInput):
    """A zero ``spouse_age`` or ``parents_age`` means that member is not covered."""

    age: float = Field(..., gt=0)
    spouse_age: float = Field(default=0.0, ge=0)
    children: int = Field(default=0, ge=0)
    parents_age: float = Field(default=0.0, ge=0)
    existing_coverage: float = Field(default=0.0, ge=0)
    family_type: Literal["individual", "family"] = "individual"
    city_tier: Literal["metro", "tier1", "tier2"] = "metro"
