"""Life (term) and health cover recommendations."""

from __future__ import annotations

from rupeewise.backend.app.models import (
    HealthInsuranceInput,
    HealthInsuranceResult,
    TermInsuranceInput,
    TermInsuranceResult,
)

from .utils import round_rupees

# Term cover is kept between these multiples of annual income.
MIN_COVER_MULTIPLE = 10
MAX_COVER_MULTIPLE = 20
LARGE_FAMILY_COVER_MULTIPLE = 15
LARGE_FAMILY_DEPENDENTS = 2

CITY_TIER_MULTIPLIERS = {"metro": 1.5, "tier1": 1.2, "tier2": 1.0}
INDIVIDUAL_BASE_COVER = 500_000
INDIVIDUAL_SENIOR_BASE_COVER = 1_000_000
INDIVIDUAL_SENIOR_AGE = 50
FAMILY_BASE_COVER = 1_000_000
COVER_PER_CHILD = 200_000
PARENT_COVER = 500_000
FAMILY_SENIOR_AGE = 60
FAMILY_SENIOR_MIN_COVER = 1_500_000
TOP_UP_TARGET = 2_000_000


def calculate_term_insurance(payload: TermInsuranceInput) -> TermInsuranceResult:
    """Recommend life cover from income replacement, debts and existing assets.

    Cover is raised to the large-family floor with more than two dependents and
    is always clamped between 10 and 20 times annual income.
    """

    income = payload.annual_income
    years = payload.retirement_age - payload.current_age
    income_replacement = income * years

    coverage = income_replacement + payload.outstanding_debts - payload.existing_assets
    if payload.dependents > LARGE_FAMILY_DEPENDENTS:
        coverage = max(coverage, income * LARGE_FAMILY_COVER_MULTIPLE)
    coverage = max(income * MIN_COVER_MULTIPLE, min(coverage, income * MAX_COVER_MULTIPLE))

    return TermInsuranceResult(
        recommended_coverage=coverage,
        coverage_multiplier=round_rupees(coverage / income * 10) / 10,
        years_to_retirement=years,
        income_replacement=income_replacement,
        debt_coverage=payload.outstanding_debts,
        asset_adjustment=payload.existing_assets,
    )


def _family_base_cover(payload: HealthInsuranceInput) -> float:
    cover = FAMILY_BASE_COVER + payload.children * COVER_PER_CHILD
    if payload.parents_age > 0:
        cover += PARENT_COVER
    if max(payload.age, payload.spouse_age, payload.parents_age) > FAMILY_SENIOR_AGE:
        cover = max(cover, FAMILY_SENIOR_MIN_COVER)
    return cover


def calculate_health_insurance(payload: HealthInsuranceInput) -> HealthInsuranceResult:
    """Recommend a base health policy scaled for the city, plus a top-up.

    Spouse, children and parents only count towards a family floater. The
    top-up fills the gap to the top-up target, and existing cover above the
    recommendation is kept.
    """

    if payload.family_type == "individual":
        base = (
            INDIVIDUAL_SENIOR_BASE_COVER
            if payload.age > INDIVIDUAL_SENIOR_AGE
            else INDIVIDUAL_BASE_COVER
        )
    else:
        base = _family_base_cover(payload)

    multiplier = CITY_TIER_MULTIPLIERS[payload.city_tier]
    total = round_rupees(base * multiplier)

    return HealthInsuranceResult(
        family_type=payload.family_type,
        city_multiplier=multiplier,
        base_coverage=base,
        total_coverage=total,
        top_up_coverage=max(0, TOP_UP_TARGET - total),
        recommended_coverage=max(total, payload.existing_coverage),
    )


__all__ = [
    "CITY_TIER_MULTIPLIERS",
    "calculate_health_insurance",
    "calculate_term_insurance",
]
