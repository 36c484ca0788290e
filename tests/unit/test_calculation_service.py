"""Unit tests for the calculation service pipeline."""

from __future__ import annotations

import logging

import pytest

from rupeewise.backend.app.models import GratuityResult
from rupeewise.backend.app.services.calculation_service import (
    calculate,
    check_fields,
    run_calculation,
    supported_instruments,
)
from rupeewise.backend.app.services.errors import (
    CalculationNotAllowed,
    RuleViolation,
    UnknownInstrumentError,
)
from rupeewise.backend.app.services.rule_validator import validate

GRATUITY_FIELDS = {"last_drawn_salary": "50000", "years_of_service": "10"}


def test_supported_instruments_follow_configuration_order() -> None:
    assert supported_instruments() == (
        "gratuity",
        "recurring_deposit",
        "fixed_deposit",
        "sip",
        "loan_emi",
        "rent_vs_own",
        "tax_regime",
        "in_hand_salary",
        "offer_comparison",
        "salary_growth",
        "epf",
        "nps",
        "retirement_corpus",
        "term_insurance",
        "health_insurance",
    )


def test_calculate_builds_result_from_validation() -> None:
    validation = validate("gratuity", GRATUITY_FIELDS)

    result = calculate("gratuity", validation)

    assert isinstance(result, GratuityResult)
    assert result.amount == pytest.approx(288461.538, rel=1e-6)


def test_calculate_refuses_failing_validation() -> None:
    validation = validate("gratuity", {"last_drawn_salary": "50000", "years_of_service": "3"})

    with pytest.raises(CalculationNotAllowed) as excinfo:
        calculate("gratuity", validation)

    assert excinfo.value.result is validation
    assert "years_of_service" in excinfo.value.errors


def test_calculate_rejects_validation_for_other_instrument() -> None:
    validation = validate("gratuity", GRATUITY_FIELDS)

    with pytest.raises(ValueError):
        calculate("sip", validation)


def test_calculate_is_repeatable() -> None:
    validation = validate(
        "rent_vs_own",
        {
            "home_price": "5000000",
            "down_payment": "1000000",
            "loan_tenure_years": "20",
            "interest_rate": "8.5",
            "monthly_rent": "20000",
        },
    )

    assert calculate("rent_vs_own", validation) == calculate("rent_vs_own", validation)


def test_run_calculation_returns_formatted_payload() -> None:
    payload = run_calculation("gratuity", {"fields": GRATUITY_FIELDS, "locale": "en"})

    assert payload["instrument"] == "gratuity"
    assert payload["category"] == "retirement"
    assert payload["display"]["amount"] == "₹2,88,462"
    assert payload["result"]["amount"] == pytest.approx(288461.54)
    assert payload["result"]["months"] == 120
    assert payload["disclaimer"]["category"] == "retirement"
    assert payload["meta"] == {"fiscal_year": "2024-25", "locale": "en", "options": {}}


def test_run_calculation_adds_translated_recommendation() -> None:
    payload = run_calculation("tax_regime", {"fields": {"annual_income": "775000"}})

    assert payload["result"]["recommended_regime"] == "new"
    assert payload["display"]["recommendation"] == "New Regime"
    assert payload["meta"]["options"] == {"age_category": "below60"}
    assert payload["disclaimer"]["category"] == "tax"


def test_run_calculation_raises_rule_violation() -> None:
    with pytest.raises(RuleViolation) as excinfo:
        run_calculation("recurring_deposit", {"fields": {"monthly_deposit": "0"}})

    assert not isinstance(excinfo.value, CalculationNotAllowed)
    assert list(excinfo.value.errors) == ["monthly_deposit"]


def test_run_calculation_rejects_unknown_payload_keys() -> None:
    with pytest.raises(ValueError, match="Invalid calculation payload"):
        run_calculation("gratuity", {"fields": GRATUITY_FIELDS, "year": 2024})


def test_run_calculation_rejects_unknown_instrument() -> None:
    with pytest.raises(UnknownInstrumentError):
        run_calculation("ppf", {"fields": {}})


def test_profiling_records_timings(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    monkeypatch.setenv("RUPEEWISE_PROFILE_CALCULATIONS", "true")
    caplog.set_level(logging.DEBUG, logger="rupeewise.backend.app.services.calculation_service")

    payload = run_calculation("gratuity", {"fields": GRATUITY_FIELDS})

    assert set(payload["meta"]["timings_ms"]) == {"validate", "calculate", "format", "total"}
    assert any("timings" in record.getMessage() for record in caplog.records)


def test_check_fields_reports_domain_and_field_errors() -> None:
    payload = check_fields(
        "gratuity", {"fields": {"last_drawn_salary": "", "years_of_service": ""}}
    )

    assert payload["ok"] is False
    assert payload["errors"] == {"years_of_service": "This field is required"}
    assert payload["field_errors"] == {
        "last_drawn_salary": "This field is required",
        "years_of_service": "This field is required",
    }


def test_check_fields_passes_valid_form() -> None:
    payload = check_fields("gratuity", {"fields": GRATUITY_FIELDS})

    assert payload == {
        "instrument": "gratuity",
        "ok": True,
        "errors": {},
        "field_errors": {},
    }


def test_overlong_income_is_reported_as_invalid_number() -> None:
    with pytest.raises(RuleViolation) as excinfo:
        run_calculation("tax_regime", {"fields": {"annual_income": "1" * 400}})

    assert list(excinfo.value.errors) == ["annual_income"]
    assert excinfo.value.errors["annual_income"].startswith("Please enter a valid number")


def test_very_large_amounts_still_format() -> None:
    payload = run_calculation(
        "rent_vs_own",
        {
            "fields": {
                "home_price": "1" + "0" * 30,
                "down_payment": "1000000",
                "loan_tenure_years": "20",
                "interest_rate": "8.5",
                "monthly_rent": "20000",
            }
        },
    )

    assert payload["display"]["loan_amount"].startswith("₹")
    assert len(payload["display"]["property_value_after"]) > 30

    tax = run_calculation("tax_regime", {"fields": {"annual_income": "9" * 35}})
    assert tax["display"]["recommendation"] in {"Old Regime", "New Regime"}


def test_in_hand_salary_recommends_cheaper_regime() -> None:
    payload = run_calculation("in_hand_salary", {"fields": {"ctc": "1200000"}})

    assert payload["category"] == "tax"
    assert payload["display"]["recommendation"] == "New Regime"
    assert payload["display"]["new_regime"]["total_tax"] == "₹68,130"
    assert payload["meta"]["options"]["city"] == "metro"


def test_offer_comparison_names_the_better_offer() -> None:
    payload = run_calculation(
        "offer_comparison",
        {"fields": {"offer_a_ctc": "1500000", "offer_b_ctc": "1200000"}},
    )

    assert payload["result"]["better_offer"] == "a"
    assert payload["display"]["recommendation"].startswith("Offer A pays ₹")
    assert payload["display"]["offer_b"]["ctc"] == "₹12,00,000"


def test_retirement_corpus_reports_shortfall_or_on_track() -> None:
    short = run_calculation(
        "retirement_corpus",
        {"fields": {"current_age": "30", "current_monthly_expense": "50000"}},
    )
    funded = run_calculation(
        "retirement_corpus",
        {
            "fields": {
                "current_age": "50",
                "current_monthly_expense": "20000",
                "current_savings": "1000000000",
            }
        },
    )

    assert short["display"]["recommendation"].startswith("Invest about ₹")
    assert short["disclaimer"]["category"] == "retirement"
    assert funded["display"]["recommendation"] == (
        "Your current savings are on track to fund retirement"
    )


def test_term_insurance_carries_insurance_disclaimer() -> None:
    payload = run_calculation("term_insurance", {"fields": {"annual_income": "1000000"}})

    assert payload["category"] == "insurance"
    assert payload["disclaimer"]["category"] == "insurance"
    assert payload["display"]["recommended_coverage"] == "₹2,00,00,000"
    assert "recommendation" not in payload["display"]
