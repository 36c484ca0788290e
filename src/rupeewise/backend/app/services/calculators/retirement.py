"""Provident fund, National Pension System and retirement corpus projections."""

from __future__ import annotations

from dataclasses import dataclass

from rupeewise.backend.app.models import (
    EpfInput,
    EpfResult,
    NpsInput,
    NpsResult,
    NpsYear,
    ProvidentFundYear,
    RetirementCorpusInput,
    RetirementCorpusResult,
    RetirementYear,
)
from rupeewise.backend.config.schema import PensionSchemeConfig, ProvidentFundConfig

from .investments import sip_future_value
from .utils import compound, round_rupees


@dataclass(frozen=True)
class ProvidentFundContribution:
    """One month's PF contributions in whole rupees."""

    employee: int
    employer_epf: int
    employer_eps: int

    @property
    def employer_total(self) -> int:
        return self.employer_epf + self.employer_eps


def monthly_pf_contribution(
    wage: float, config: ProvidentFundConfig, *, full_wage: bool = False
) -> ProvidentFundContribution:
    """Split a month's PF contribution on ``wage`` (basic plus DA).

    Both sides contribute on the wage ceiling unless ``full_wage`` is set.
    The pension (EPS) share is always worked out on the capped wage and never
    exceeds ``config.pension_cap``; the rest of the employer's share is
    credited to EPF.
    """

    base = wage if full_wage else min(wage, config.wage_ceiling)
    employee = round_rupees(base * config.contribution_rate)
    employer = round_rupees(base * config.contribution_rate)

    pension = round_rupees(min(wage, config.wage_ceiling) * config.pension_rate)
    pension = min(pension, round_rupees(config.pension_cap), employer)

    return ProvidentFundContribution(
        employee=employee,
        employer_epf=employer - pension,
        employer_eps=pension,
    )


def calculate_epf(payload: EpfInput, config: ProvidentFundConfig) -> EpfResult:
    """Project the EPF balance to retirement.

    A year's contributions are credited up front and earn that year's interest
    with the opening balance; interest is rounded to whole rupees each year.
    Employee contributions above the tax-free threshold are tracked and their
    compounded value reported as the taxable part of the corpus.
    """

    contribution = monthly_pf_contribution(
        payload.basic_salary, config, full_wage=payload.pf_wage_base == "full"
    )
    annual_employee = contribution.employee * 12
    annual_employer = contribution.employer_epf * 12
    rate = payload.interest_rate / 100
    years = payload.retirement_age - payload.current_age

    balance = payload.current_balance
    total_interest = 0.0
    taxable_contributions = 0.0
    breakdown: list[ProvidentFundYear] = []

    for year in range(1, years + 1):
        opening = balance
        interest = round_rupees((opening + annual_employee + annual_employer) * rate)
        balance = opening + annual_employee + annual_employer + interest
        total_interest += interest
        taxable_contributions += max(0, annual_employee - config.taxable_contribution_threshold)

        breakdown.append(
            ProvidentFundYear(
                age=payload.current_age + year,
                opening_balance=opening,
                employee_contribution=annual_employee,
                employer_contribution=annual_employer,
                interest=interest,
                closing_balance=balance,
            )
        )

    taxable = 0.0
    if taxable_contributions > 0:
        taxable = min(balance, round_rupees(taxable_contributions * compound(rate, years)))

    return EpfResult(
        monthly_employee_contribution=contribution.employee,
        monthly_employer_epf=contribution.employer_epf,
        monthly_employer_eps=contribution.employer_eps,
        monthly_total_contribution=contribution.employee + contribution.employer_epf,
        annual_employee_contribution=annual_employee,
        annual_employer_contribution=annual_employer,
        years_to_retirement=years,
        total_contributions=(annual_employee + annual_employer) * years,
        total_interest=total_interest,
        final_corpus=balance,
        taxable_corpus=taxable,
        non_taxable_corpus=balance - taxable,
        breakdown=tuple(breakdown),
    )


def _lump_sum(corpus: float, early_exit: bool, config: PensionSchemeConfig) -> float:
    if corpus < config.small_corpus_threshold:
        return corpus
    share = config.early_exit_lump_sum_share if early_exit else config.lump_sum_share
    return round_rupees(corpus * share)


def calculate_nps(payload: NpsInput, config: PensionSchemeConfig) -> NpsResult:
    """Project a Tier-I NPS account and split the corpus at exit.

    A small corpus may be withdrawn entirely. Otherwise an exit before the
    normal exit age allows only the early-exit lump sum and the remainder
    buys an annuity paying ``annuity_rate`` a year.
    """

    annual_employee = payload.monthly_contribution * 12
    annual_employer = payload.employer_contribution * 12
    rate = payload.expected_return / 100
    years = payload.retirement_age - payload.current_age

    balance = payload.current_balance
    own_contributions = 0.0
    total_returns = 0.0
    breakdown: list[NpsYear] = []

    for year in range(1, years + 1):
        opening = balance
        returns = round_rupees((opening + annual_employee + annual_employer) * rate)
        balance = opening + annual_employee + annual_employer + returns
        own_contributions += annual_employee
        total_returns += returns

        breakdown.append(
            NpsYear(
                age=payload.current_age + year,
                opening_balance=opening,
                employee_contribution=annual_employee,
                employer_contribution=annual_employer,
                returns=returns,
                closing_balance=balance,
                own_contribution_total=own_contributions,
            )
        )

    early_exit = payload.retirement_age < config.normal_exit_age
    lump_sum = _lump_sum(balance, early_exit, config)
    annuity = balance - lump_sum

    partial_withdrawal = 0.0
    if years >= config.partial_withdrawal_min_years:
        partial_withdrawal = round_rupees(own_contributions * config.partial_withdrawal_share)

    return NpsResult(
        annual_employee_contribution=annual_employee,
        annual_employer_contribution=annual_employer,
        years_to_retirement=years,
        total_contributions=(annual_employee + annual_employer) * years,
        total_returns=total_returns,
        final_corpus=balance,
        lump_sum=lump_sum,
        annuity=annuity,
        monthly_pension=annuity * payload.annuity_rate / 100 / 12,
        partial_withdrawal=partial_withdrawal,
        early_exit=early_exit,
        tax_benefit_80ccd_1b=min(annual_employee, config.section_80ccd_1b_limit),
        breakdown=tuple(breakdown),
    )


def corpus_for_expense(annual_expense: float, real_rate: float, years: int) -> int:
    """Present value at retirement of ``years`` of inflation-adjusted expenses.

    Falls back to plain multiplication when the real return is not positive.
    """

    if real_rate > 0:
        return round_rupees(annual_expense * (1 - compound(real_rate, -years)) / real_rate)
    return round_rupees(annual_expense * years)


def monthly_investment_for(target: float, monthly_rate: float, months: int) -> int:
    """Monthly SIP (invested at the start of each month) that grows to ``target``."""

    if target <= 0:
        return 0
    if monthly_rate > 0:
        return round_rupees(target / sip_future_value(1.0, monthly_rate, months))
    return round_rupees(target / months)


def calculate_retirement_corpus(payload: RetirementCorpusInput) -> RetirementCorpusResult:
    years = payload.retirement_age - payload.current_age
    years_in_retirement = payload.life_expectancy - payload.retirement_age
    inflation = payload.inflation_rate / 100
    pre_return = payload.pre_retirement_return / 100
    post_return = payload.post_retirement_return / 100
    monthly_rate = pre_return / 12
    months = years * 12

    future_monthly_expense = round_rupees(
        payload.current_monthly_expense * compound(inflation, years)
    )
    future_annual_expense = future_monthly_expense * 12
    real_rate = (1 + post_return) / (1 + inflation) - 1
    required = corpus_for_expense(future_annual_expense, real_rate, years_in_retirement)

    savings_value = round_rupees(payload.current_savings * compound(pre_return, years))
    if monthly_rate > 0:
        monthly_value = round_rupees(
            sip_future_value(payload.monthly_savings, monthly_rate, months)
        )
    else:
        monthly_value = payload.monthly_savings * months
    projected = savings_value + monthly_value
    gap = required - projected

    # Rows compare the balance with the target discounted back to that year.
    breakdown: list[RetirementYear] = []
    balance = payload.current_savings
    annual_savings = payload.monthly_savings * 12
    for year in range(1, years + 1):
        opening = balance
        returns = round_rupees(opening * pre_return)
        balance = opening + annual_savings + returns
        on_track = round_rupees(required / compound(pre_return, years - year))
        breakdown.append(
            RetirementYear(
                year=year,
                age=payload.current_age + year,
                opening_balance=opening,
                savings=annual_savings,
                returns=returns,
                closing_balance=balance,
                required_corpus=on_track,
                gap=on_track - balance,
                monthly_expense=round_rupees(
                    payload.current_monthly_expense * compound(inflation, year)
                ),
            )
        )

    return RetirementCorpusResult(
        years_to_retirement=years,
        years_in_retirement=years_in_retirement,
        future_monthly_expense=future_monthly_expense,
        future_annual_expense=future_annual_expense,
        real_return_rate=real_rate * 100,
        required_corpus=required,
        monthly_investment_needed=monthly_investment_for(required, monthly_rate, months),
        future_value_of_savings=savings_value,
        future_value_of_monthly_savings=monthly_value,
        projected_corpus=projected,
        corpus_gap=gap,
        additional_monthly_investment=monthly_investment_for(gap, monthly_rate, months),
        breakdown=tuple(breakdown),
    )


__all__ = [
    "ProvidentFundContribution",
    "calculate_epf",
    "calculate_nps",
    "calculate_retirement_corpus",
    "corpus_for_expense",
    "monthly_investment_for",
    "monthly_pf_contribution",
]
