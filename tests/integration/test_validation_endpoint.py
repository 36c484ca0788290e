"""Integration tests for the validation-only endpoint."""

from __future__ import annotations

from http import HTTPStatus

from flask.testing import FlaskClient


def test_validation_endpoint_reports_first_violation(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/validations/recurring_deposit",
        json={"fields": {"monthly_deposit": "5000", "interest_rate": "20", "tenure_years": "30"}},
    )

    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["ok"] is False
    assert list(payload["errors"]) == ["interest_rate"]
    assert payload["field_errors"] == {}


def test_validation_endpoint_accepts_valid_form(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/validations/fixed_deposit",
        json={
            "fields": {"principal": "100000", "interest_rate": "7", "tenure_years": "5"},
            "options": {"compounding": "monthly"},
        },
    )

    assert response.get_json() == {
        "instrument": "fixed_deposit",
        "ok": True,
        "errors": {},
        "field_errors": {},
    }


def test_validation_endpoint_lists_empty_required_fields(client: FlaskClient) -> None:
    response = client.post("/api/v1/validations/tax_regime", json={"fields": {"deductions": "0"}})

    payload = response.get_json()
    assert payload["field_errors"] == {"annual_income": "This field is required"}
    assert payload["errors"] == {"annual_income": "Annual income must be greater than ₹0."}


def test_validation_endpoint_unknown_instrument(client: FlaskClient) -> None:
    response = client.post("/api/v1/validations/ppf", json={"fields": {}})

    assert response.status_code == HTTPStatus.NOT_FOUND
