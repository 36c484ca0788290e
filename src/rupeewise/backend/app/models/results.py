"""Frozen result types produced by the calculation kernels.

Each result lists the attributes holding rupee amounts in ``currency_fields``
so the formatter can render them without knowing the instrument.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "AmortizationYear",
    "CalculationResult",
    "DepositYear",
    "EpfResult",
    "FixedDepositResult",
    "FixedDepositYear",
    "GratuityResult",
    "HealthInsuranceResult",
    "InHandSalaryResult",
    "LoanEmiResult",
    "NpsResult",
    "NpsYear",
    "OfferComparisonResult",
    "OfferSummary",
    "ProvidentFundYear",
    "RecurringDepositResult",
    "RegimeTax",
    "RentVsOwnResult",
    "RetirementCorpusResult",
    "RetirementYear",
    "SalaryGrowthResult",
    "SalaryGrowthYear",
    "SipResult",
    "SipYear",
    "TaxRegimeResult",
    "TermInsuranceResult",
]


@dataclass(frozen=True)
class GratuityResult:
    currency_fields: ClassVar[tuple[str, ...]] = ("amount", "uncapped_amount")

    amount: float
    uncapped_amount: float
    cap_applied: bool
    months: float
    years_of_service: float


@dataclass(frozen=True)
class DepositYear:
    currency_fields: ClassVar[tuple[str, ...]] = ("deposited", "maturity_value")

    year: int
    deposited: float
    maturity_value: float


@dataclass(frozen=True)
class RecurringDepositResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "maturity_value",
        "total_deposited",
        "interest_earned",
    )

    maturity_value: float
    total_deposited: float
    interest_earned: float
    breakdown: tuple[DepositYear, ...]


@dataclass(frozen=True)
class FixedDepositYear:
    currency_fields: ClassVar[tuple[str, ...]] = ("opening_balance", "interest", "closing_balance")

    year: int
    opening_balance: float
    interest: float
    closing_balance: float


@dataclass(frozen=True)
class FixedDepositResult:
    currency_fields: ClassVar[tuple[str, ...]] = ("maturity_value", "principal", "interest_earned")
    percentage_fields: ClassVar[tuple[str, ...]] = ("effective_rate",)

    maturity_value: float
    principal: float
    interest_earned: float
    effective_rate: float
    periods_per_year: int
    breakdown: tuple[FixedDepositYear, ...]


@dataclass(frozen=True)
class SipYear:
    currency_fields: ClassVar[tuple[str, ...]] = ("invested", "value")

    month: int
    invested: float
    value: float


@dataclass(frozen=True)
class SipResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "total_invested",
        "estimated_returns",
        "future_value",
    )
    percentage_fields: ClassVar[tuple[str, ...]] = ("return_percentage",)

    total_invested: float
    estimated_returns: float
    future_value: float
    return_percentage: float
    breakdown: tuple[SipYear, ...]


@dataclass(frozen=True)
class AmortizationYear:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "opening_balance",
        "principal_paid",
        "interest_paid",
        "closing_balance",
    )

    year: int
    opening_balance: float
    principal_paid: float
    interest_paid: float
    closing_balance: float


@dataclass(frozen=True)
class LoanEmiResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "monthly_emi",
        "loan_amount",
        "total_interest",
        "total_payment",
    )

    monthly_emi: float
    loan_amount: float
    total_interest: float
    total_payment: float
    months: int
    breakdown: tuple[AmortizationYear, ...]


@dataclass(frozen=True)
class RentVsOwnResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "monthly_emi",
        "loan_amount",
        "total_interest",
        "total_cost_of_buying",
        "total_cost_of_renting",
        "property_value_after",
        "net_savings",
    )

    monthly_emi: float
    loan_amount: float
    total_interest: float
    total_cost_of_buying: float
    total_cost_of_renting: float
    property_value_after: float
    net_savings: float
    buying_is_better: bool


@dataclass(frozen=True)
class RegimeTax:
    """Tax computation for one regime, in whole rupees."""

    currency_fields: ClassVar[tuple[str, ...]] = (
        "taxable_income",
        "tax_before_rebate",
        "rebate",
        "marginal_relief",
        "surcharge",
        "cess",
        "total_tax",
        "income_after_tax",
    )

    regime: str
    standard_deduction: float
    taxable_income: float
    tax_before_rebate: int
    rebate: int
    marginal_relief: float
    surcharge: int
    cess: int
    total_tax: float
    income_after_tax: float


@dataclass(frozen=True)
class TaxRegimeResult:
    currency_fields: ClassVar[tuple[str, ...]] = ("savings",)

    old_regime: RegimeTax
    new_regime: RegimeTax
    recommended_regime: str
    savings: float


@dataclass(frozen=True)
class InHandSalaryResult:
    """Monthly salary heads, both regimes' tax and the resulting take-home pay."""

    currency_fields: ClassVar[tuple[str, ...]] = (
        "monthly_basic",
        "monthly_hra",
        "monthly_special_allowance",
        "monthly_variable_pay",
        "monthly_gross",
        "monthly_employee_pf",
        "monthly_employer_pf",
        "monthly_professional_tax",
        "annual_gross",
        "hra_exemption",
        "old_regime_deductions",
        "monthly_in_hand_old",
        "monthly_in_hand_new",
        "annual_in_hand_old",
        "annual_in_hand_new",
        "tax_saved",
    )

    monthly_basic: float
    monthly_hra: float
    monthly_special_allowance: float
    monthly_variable_pay: float
    monthly_gross: float
    monthly_employee_pf: int
    monthly_employer_pf: int
    monthly_professional_tax: float
    annual_gross: float
    hra_exemption: float
    old_regime_deductions: float
    old_regime: RegimeTax
    new_regime: RegimeTax
    monthly_in_hand_old: float
    monthly_in_hand_new: float
    annual_in_hand_old: float
    annual_in_hand_new: float
    recommended_regime: str
    tax_saved: float


@dataclass(frozen=True)
class OfferSummary:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "ctc",
        "variable_pay_realized",
        "monthly_gross",
        "monthly_deductions",
        "monthly_tax",
        "monthly_in_hand",
        "annual_in_hand",
    )

    ctc: float
    variable_pay_realized: float
    monthly_gross: float
    monthly_deductions: float
    monthly_tax: float
    monthly_in_hand: float
    annual_in_hand: float


@dataclass(frozen=True)
class OfferComparisonResult:
    currency_fields: ClassVar[tuple[str, ...]] = ("monthly_difference", "annual_difference")

    offer_a: OfferSummary
    offer_b: OfferSummary
    better_offer: str
    monthly_difference: float
    annual_difference: float


@dataclass(frozen=True)
class SalaryGrowthYear:
    currency_fields: ClassVar[tuple[str, ...]] = ("salary", "increase")

    year: int
    salary: float
    increase: float


@dataclass(frozen=True)
class SalaryGrowthResult:
    currency_fields: ClassVar[tuple[str, ...]] = ("final_salary", "total_growth")
    percentage_fields: ClassVar[tuple[str, ...]] = ("growth_percentage",)

    final_salary: float
    total_growth: float
    growth_percentage: float
    breakdown: tuple[SalaryGrowthYear, ...]


@dataclass(frozen=True)
class ProvidentFundYear:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "opening_balance",
        "employee_contribution",
        "employer_contribution",
        "interest",
        "closing_balance",
    )

    age: int
    opening_balance: float
    employee_contribution: float
    employer_contribution: float
    interest: float
    closing_balance: float


@dataclass(frozen=True)
class EpfResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "monthly_employee_contribution",
        "monthly_employer_epf",
        "monthly_employer_eps",
        "monthly_total_contribution",
        "annual_employee_contribution",
        "annual_employer_contribution",
        "total_contributions",
        "total_interest",
        "final_corpus",
        "taxable_corpus",
        "non_taxable_corpus",
    )

    monthly_employee_contribution: int
    monthly_employer_epf: int
    monthly_employer_eps: int
    monthly_total_contribution: int
    annual_employee_contribution: int
    annual_employer_contribution: int
    years_to_retirement: int
    total_contributions: float
    total_interest: float
    final_corpus: float
    taxable_corpus: float
    non_taxable_corpus: float
    breakdown: tuple[ProvidentFundYear, ...]


@dataclass(frozen=True)
class NpsYear:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "opening_balance",
        "employee_contribution",
        "employer_contribution",
        "returns",
        "closing_balance",
        "own_contribution_total",
    )

    age: int
    opening_balance: float
    employee_contribution: float
    employer_contribution: float
    returns: float
    closing_balance: float
    own_contribution_total: float


@dataclass(frozen=True)
class NpsResult:
    """Corpus at exit, its lump-sum/annuity split and the yearly projection.

    ``partial_withdrawal`` is zero until the minimum holding period is met.
    """

    currency_fields: ClassVar[tuple[str, ...]] = (
        "annual_employee_contribution",
        "annual_employer_contribution",
        "total_contributions",
        "total_returns",
        "final_corpus",
        "lump_sum",
        "annuity",
        "monthly_pension",
        "partial_withdrawal",
        "tax_benefit_80ccd_1b",
    )

    annual_employee_contribution: float
    annual_employer_contribution: float
    years_to_retirement: int
    total_contributions: float
    total_returns: float
    final_corpus: float
    lump_sum: float
    annuity: float
    monthly_pension: float
    partial_withdrawal: float
    early_exit: bool
    tax_benefit_80ccd_1b: float
    breakdown: tuple[NpsYear, ...]


@dataclass(frozen=True)
class RetirementYear:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "opening_balance",
        "savings",
        "returns",
        "closing_balance",
        "required_corpus",
        "gap",
        "monthly_expense",
    )

    year: int
    age: int
    opening_balance: float
    savings: float
    returns: float
    closing_balance: float
    required_corpus: float
    gap: float
    monthly_expense: float


@dataclass(frozen=True)
class RetirementCorpusResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "future_monthly_expense",
        "future_annual_expense",
        "required_corpus",
        "monthly_investment_needed",
        "future_value_of_savings",
        "future_value_of_monthly_savings",
        "projected_corpus",
        "corpus_gap",
        "additional_monthly_investment",
    )
    percentage_fields: ClassVar[tuple[str, ...]] = ("real_return_rate",)

    years_to_retirement: int
    years_in_retirement: int
    future_monthly_expense: float
    future_annual_expense: float
    real_return_rate: float
    required_corpus: float
    monthly_investment_needed: float
    future_value_of_savings: float
    future_value_of_monthly_savings: float
    projected_corpus: float
    corpus_gap: float
    additional_monthly_investment: float
    breakdown: tuple[RetirementYear, ...]


@dataclass(frozen=True)
class TermInsuranceResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "recommended_coverage",
        "income_replacement",
        "debt_coverage",
        "asset_adjustment",
    )

    recommended_coverage: float
    coverage_multiplier: float
    years_to_retirement: float
    income_replacement: float
    debt_coverage: float
    asset_adjustment: float


@dataclass(frozen=True)
class HealthInsuranceResult:
    currency_fields: ClassVar[tuple[str, ...]] = (
        "base_coverage",
        "total_coverage",
        "top_up_coverage",
        "recommended_coverage",
    )

    family_type: str
    city_multiplier: float
    base_coverage: float
    total_coverage: float
    top_up_coverage: float
    recommended_coverage: float


CalculationResult = (
    GratuityResult
    | RecurringDepositResult
    | FixedDepositResult
    | SipResult
    | LoanEmiResult
    | RentVsOwnResult
    | TaxRegimeResult
    | InHandSalaryResult
    | OfferComparisonResult
    | SalaryGrowthResult
    | EpfResult
    | NpsResult
    | RetirementCorpusResult
    | TermInsuranceResult
    | HealthInsuranceResult
)
