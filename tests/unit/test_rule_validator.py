"""Tests for ordered first-failure guardrail validation."""

from __future__ import annotations

import pytest

from rupeewise.backend.app.services.errors import UnknownInstrumentError
from rupeewise.backend.app.services.rule_validator import validate

GRATUITY_MINIMUM = (
    "Gratuity is payable only after completing 5 years of continuous service "
    "(Payment of Gratuity Act, 1972)"
)


def test_empty_gratuity_form_reports_service_first() -> None:
    result = validate("gratuity", {"last_drawn_salary": "", "years_of_service": ""})

    assert not result.ok
    assert result.errors == {"years_of_service": "This field is required"}


@pytest.mark.parametrize("salary", ["0", "", "50000"])
@pytest.mark.parametrize("years", ["0", "3", "4.9"])
def test_short_service_is_rejected_whatever_the_salary(salary: str, years: str) -> None:
    result = validate("gratuity", {"last_drawn_salary": salary, "years_of_service": years})

    assert result.errors == {"years_of_service": GRATUITY_MINIMUM}


def test_gratuity_salary_checked_once_service_is_valid() -> None:
    result = validate("gratuity", {"last_drawn_salary": "0", "years_of_service": "10"})

    assert result.errors == {
        "last_drawn_salary": "Last drawn basic salary must be greater than ₹0"
    }


def test_gratuity_below_statutory_minimum_is_rejected() -> None:
    result = validate("gratuity", {"last_drawn_salary": "50000", "years_of_service": "3"})

    assert result.errors == {"years_of_service": GRATUITY_MINIMUM}


@pytest.mark.parametrize("years", ["5", "10", "50"])
def test_gratuity_accepts_inclusive_bounds(years: str) -> None:
    result = validate("gratuity", {"last_drawn_salary": "50000", "years_of_service": years})

    assert result.ok
    assert result.errors == {}
    assert result.values["years_of_service"] == float(years)


def test_gratuity_above_maximum_is_rejected() -> None:
    result = validate("gratuity", {"last_drawn_salary": "50000", "years_of_service": "51"})

    assert result.errors == {"years_of_service": "Years of service cannot exceed 50 years"}


def test_first_failing_rule_short_circuits() -> None:
    result = validate(
        "recurring_deposit",
        {"monthly_deposit": "0", "interest_rate": "40", "tenure_years": "25"},
    )

    assert list(result.errors) == ["monthly_deposit"]
    assert result.errors["monthly_deposit"].startswith("Monthly deposit must be greater than ₹0")


def test_recurring_deposit_rate_defaults_to_zero_when_unset() -> None:
    result = validate(
        "recurring_deposit",
        {"monthly_deposit": "5000", "interest_rate": "", "tenure_years": "5"},
    )

    assert result.ok
    assert result.values["interest_rate"] == 0


def test_recurring_deposit_rate_cap_names_the_limit() -> None:
    result = validate(
        "recurring_deposit",
        {"monthly_deposit": "5000", "interest_rate": "16", "tenure_years": "5"},
    )

    assert result.errors == {
        "interest_rate": "Interest rate cannot exceed 15%. Please enter a realistic value."
    }


def test_fractional_tenure_is_rejected_not_truncated() -> None:
    result = validate(
        "recurring_deposit",
        {"monthly_deposit": "5000", "interest_rate": "6.5", "tenure_years": "2.5"},
    )

    assert list(result.errors) == ["tenure_years"]


def test_values_are_never_clamped() -> None:
    result = validate(
        "recurring_deposit",
        {"monthly_deposit": "5000", "interest_rate": "6.5", "tenure_years": "21"},
    )

    assert not result.ok
    assert result.values == {}


def test_malformed_number_is_reported_before_rules() -> None:
    result = validate("sip", {"monthly_investment": "5000", "annual_return": "12%"})

    assert list(result.errors) == ["annual_return"]


def test_option_defaults_apply_when_missing() -> None:
    result = validate(
        "fixed_deposit", {"principal": "100000", "interest_rate": "7", "tenure_years": "5"}
    )

    assert result.ok
    assert result.options == {"compounding": "quarterly"}


def test_unknown_option_choice_is_rejected() -> None:
    result = validate(
        "fixed_deposit",
        {"principal": "100000", "interest_rate": "7", "tenure_years": "5"},
        options={"compounding": "weekly"},
    )

    assert result.errors == {
        "compounding": "'weekly' is not a valid choice for compounding."
    }


def test_down_payment_cannot_exceed_home_price() -> None:
    result = validate(
        "rent_vs_own",
        {
            "home_price": "5000000",
            "down_payment": "6000000",
            "loan_tenure_years": "20",
            "interest_rate": "8.5",
            "monthly_rent": "20000",
        },
    )

    assert result.errors == {"down_payment": "Down payment cannot exceed the home price."}


def test_tax_regime_rejects_zero_income() -> None:
    result = validate("tax_regime", {"annual_income": "0"})

    assert result.errors == {"annual_income": "Annual income must be greater than ₹0."}
    assert result.category == "tax"


def test_messages_follow_requested_locale() -> None:
    result = validate(
        "gratuity", {"last_drawn_salary": "50000", "years_of_service": "3"}, locale="hi-IN"
    )

    assert result.locale == "hi"
    assert "ग्रेच्युटी" in result.errors["years_of_service"]


def test_untranslated_messages_fall_back_to_english() -> None:
    result = validate("sip", {"monthly_investment": "0"}, locale="hi")

    assert result.errors == {"monthly_investment": "Monthly investment must be greater than ₹0"}


def test_ok_matches_absence_of_errors() -> None:
    passing = validate("loan_emi", {"loan_amount": "100000", "interest_rate": "12", "tenure_years": "1"})
    failing = validate("loan_emi", {"loan_amount": "100000", "interest_rate": "0", "tenure_years": "1"})

    assert passing.ok and not passing.errors
    assert not failing.ok and failing.errors


def test_unknown_instrument_raises_lookup_error() -> None:
    with pytest.raises(UnknownInstrumentError) as excinfo:
        validate("crypto", {})

    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.instrument == "crypto"


@pytest.mark.parametrize(
    ("fields", "expected"),
    [
        ({"annual_income": ""}, {"annual_income": "This field is required"}),
        (
            {"annual_income": "1000000", "current_age": "40", "retirement_age": "40"},
            {"retirement_age": "Retirement age must be greater than current age."},
        ),
        (
            {"annual_income": "1000000", "dependents": "11"},
            {"dependents": "Number of dependents must be between 0 and 10."},
        ),
        (
            {"annual_income": "1000000", "dependents": "2.5"},
            {"dependents": "Number of dependents must be a whole number."},
        ),
    ],
)
def test_term_insurance_guardrails(fields: dict[str, str], expected: dict[str, str]) -> None:
    result = validate("term_insurance", fields)

    assert result.errors == expected
    assert result.category == "insurance"


def test_health_insurance_checks_age_before_family() -> None:
    result = validate("health_insurance", {"age": "0", "children": "6"})

    assert result.errors == {"age": "Please enter a valid age (1-100 years)."}

    result = validate("health_insurance", {"age": "30", "children": "6"})

    assert result.errors == {"children": "Number of children must be between 0 and 5."}


def test_retirement_age_must_follow_current_age() -> None:
    epf = validate("epf", {"basic_salary": "15000", "current_age": "40", "retirement_age": "40"})
    nps = validate(
        "nps", {"monthly_contribution": "5000", "current_age": "45", "retirement_age": "40"}
    )

    assert epf.errors == {"retirement_age": "Retirement age must be greater than current age."}
    assert nps.errors == {"retirement_age": "Retirement age must be greater than current age."}


def test_epf_rejects_minors() -> None:
    result = validate("epf", {"basic_salary": "15000", "current_age": "17"})

    assert result.errors == {"current_age": "Please enter a valid current age (18-100 years)."}


def test_life_expectancy_must_exceed_retirement_age() -> None:
    result = validate(
        "retirement_corpus",
        {
            "current_age": "30",
            "retirement_age": "60",
            "life_expectancy": "60",
            "current_monthly_expense": "50000",
        },
    )

    assert result.errors == {
        "life_expectancy": "Life expectancy must be greater than retirement age."
    }


def test_variable_pay_cannot_exceed_ctc() -> None:
    result = validate("in_hand_salary", {"ctc": "1000000", "variable_pay": "1200000"})

    assert result.errors == {"variable_pay": "Variable pay cannot exceed the CTC."}


def test_in_hand_salary_defaults_fill_optional_fields() -> None:
    result = validate("in_hand_salary", {"ctc": "1200000"})

    assert result.ok
    assert result.values["professional_tax"] == 2400
    assert result.options["hra_share"] == "50"
    assert result.category == "tax"
