"""Take-home pay from a CTC, job offer comparison and salary growth."""

from __future__ import annotations

from rupeewise.backend.app.models import (
    InHandSalaryInput,
    InHandSalaryResult,
    OfferComparisonInput,
    OfferComparisonResult,
    OfferSummary,
    SalaryGrowthInput,
    SalaryGrowthResult,
    SalaryGrowthYear,
)
from rupeewise.backend.config.schema import SalaryDeductionConfig, StatutoryConfig

from .income_tax import NEW_REGIME, OLD_REGIME, calculate_regime_tax
from .retirement import monthly_pf_contribution


def hra_exemption(
    annual_basic: float,
    annual_hra: float,
    annual_rent: float,
    city: str,
    config: SalaryDeductionConfig,
) -> float:
    """Section 10(13A) exemption on annual amounts.

    The least of the HRA received, rent paid above a share of basic, and the
    city's share of basic. Nothing is exempt when no rent is paid.
    """

    if annual_basic <= 0 or annual_hra <= 0 or annual_rent <= 0:
        return 0.0

    city_share = config.hra_metro_share if city == "metro" else config.hra_non_metro_share
    return min(
        annual_hra,
        max(0.0, annual_rent - annual_basic * config.hra_rent_offset_share),
        annual_basic * city_share,
    )


def _section_80d_limit(age_category: str, config: SalaryDeductionConfig) -> float:
    if age_category == "below60":
        return config.section_80d_limit
    return config.section_80d_senior_limit


def calculate_in_hand_salary(
    payload: InHandSalaryInput, statutory: StatutoryConfig
) -> InHandSalaryResult:
    """Split a CTC into salary heads and work out take-home pay under both regimes.

    Fixed pay (CTC less variable pay) is divided into basic, HRA and a special
    allowance that absorbs the remainder, less the employer's PF when that is
    part of the CTC. Only the expected share of variable pay is counted as
    income. Employee PF, 80C investments, 80D premiums, the HRA exemption and
    professional tax reduce old-regime income only.
    """

    salary_config = statutory.salary
    fixed_pay = payload.ctc - payload.variable_pay
    annual_basic = fixed_pay * payload.basic_percentage / 100
    annual_hra = annual_basic * int(payload.hra_share) / 100

    pf = monthly_pf_contribution(
        annual_basic / 12,
        statutory.provident_fund,
        full_wage=payload.pf_wage_base == "full",
    )
    employer_pf_in_ctc = pf.employer_total * 12 if payload.employer_pf == "in_ctc" else 0
    annual_special = max(0.0, fixed_pay - annual_basic - annual_hra - employer_pf_in_ctc)
    realized_variable = payload.variable_pay * payload.variable_pay_realization / 100
    annual_gross = annual_basic + annual_hra + annual_special + realized_variable

    annual_employee_pf = pf.employee * 12
    exemption = hra_exemption(
        annual_basic, annual_hra, payload.monthly_rent * 12, payload.city, salary_config
    )
    old_deductions = (
        exemption
        + payload.professional_tax
        + min(salary_config.section_80c_limit, annual_employee_pf + payload.section_80c)
        + min(payload.section_80d, _section_80d_limit(payload.age_category, salary_config))
    )

    old = calculate_regime_tax(
        OLD_REGIME, annual_gross, old_deductions, payload.age_category, statutory.income_tax
    )
    new = calculate_regime_tax(
        NEW_REGIME, annual_gross, 0.0, payload.age_category, statutory.income_tax
    )

    before_tax = annual_gross - annual_employee_pf - payload.professional_tax
    annual_in_hand_old = before_tax - old.total_tax
    annual_in_hand_new = before_tax - new.total_tax

    return InHandSalaryResult(
        monthly_basic=annual_basic / 12,
        monthly_hra=annual_hra / 12,
        monthly_special_allowance=annual_special / 12,
        monthly_variable_pay=realized_variable / 12,
        monthly_gross=annual_gross / 12,
        monthly_employee_pf=pf.employee,
        monthly_employer_pf=pf.employer_total,
        monthly_professional_tax=payload.professional_tax / 12,
        annual_gross=annual_gross,
        hra_exemption=exemption,
        old_regime_deductions=old_deductions,
        old_regime=old,
        new_regime=new,
        monthly_in_hand_old=annual_in_hand_old / 12,
        monthly_in_hand_new=annual_in_hand_new / 12,
        annual_in_hand_old=annual_in_hand_old,
        annual_in_hand_new=annual_in_hand_new,
        recommended_regime=NEW_REGIME if new.total_tax < old.total_tax else OLD_REGIME,
        tax_saved=abs(old.total_tax - new.total_tax),
    )


def _summarise_offer(
    ctc: float,
    variable_pay: float,
    payload: OfferComparisonInput,
    statutory: StatutoryConfig,
) -> OfferSummary:
    salary = calculate_in_hand_salary(
        InHandSalaryInput(
            ctc=ctc,
            variable_pay=variable_pay,
            variable_pay_realization=payload.variable_pay_realization,
            basic_percentage=payload.basic_percentage,
            age_category=payload.age_category,
        ),
        statutory,
    )
    return OfferSummary(
        ctc=ctc,
        variable_pay_realized=salary.monthly_variable_pay * 12,
        monthly_gross=salary.monthly_gross,
        monthly_deductions=salary.monthly_employee_pf + salary.monthly_professional_tax,
        monthly_tax=salary.new_regime.total_tax / 12,
        monthly_in_hand=salary.monthly_in_hand_new,
        annual_in_hand=salary.annual_in_hand_new,
    )


def calculate_offer_comparison(
    payload: OfferComparisonInput, statutory: StatutoryConfig
) -> OfferComparisonResult:
    """Compare two offers on new-regime monthly take-home pay."""

    offer_a = _summarise_offer(
        payload.offer_a_ctc, payload.offer_a_variable_pay, payload, statutory
    )
    offer_b = _summarise_offer(
        payload.offer_b_ctc, payload.offer_b_variable_pay, payload, statutory
    )

    if offer_a.monthly_in_hand > offer_b.monthly_in_hand:
        better = "a"
    elif offer_b.monthly_in_hand > offer_a.monthly_in_hand:
        better = "b"
    else:
        better = "equal"

    return OfferComparisonResult(
        offer_a=offer_a,
        offer_b=offer_b,
        better_offer=better,
        monthly_difference=abs(offer_a.monthly_in_hand - offer_b.monthly_in_hand),
        annual_difference=abs(offer_a.annual_in_hand - offer_b.annual_in_hand),
    )


def calculate_salary_growth(payload: SalaryGrowthInput) -> SalaryGrowthResult:
    hike = payload.annual_hike / 100
    salary = payload.current_salary
    breakdown: list[SalaryGrowthYear] = []

    for year in range(1, payload.years + 1):
        increase = salary * hike
        salary += increase
        breakdown.append(SalaryGrowthYear(year=year, salary=salary, increase=increase))

    total_growth = salary - payload.current_salary
    return SalaryGrowthResult(
        final_salary=salary,
        total_growth=total_growth,
        growth_percentage=total_growth / payload.current_salary * 100,
        breakdown=tuple(breakdown),
    )


__all__ = [
    "calculate_in_hand_salary",
    "calculate_offer_comparison",
    "calculate_salary_growth",
    "hra_exemption",
]
