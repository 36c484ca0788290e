#!/usr/bin/env python3
"""Time the validate/calculate/format pipeline for every instrument."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from time import perf_counter

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from rupeewise.backend.app.services.calculation_service import run_calculation  # noqa: E402

SAMPLE_PAYLOADS = {
    "gratuity": {"fields": {"last_drawn_salary": "50000", "years_of_service": "10"}},
    "recurring_deposit": {
        "fields": {"monthly_deposit": "5000", "interest_rate": "6.5", "tenure_years": "5"}
    },
    "fixed_deposit": {
        "fields": {"principal": "100000", "interest_rate": "7", "tenure_years": "5"},
        "options": {"compounding": "quarterly"},
    },
    "sip": {
        "fields": {"monthly_investment": "10000", "annual_return": "12", "investment_years": "20"}
    },
    "loan_emi": {"fields": {"loan_amount": "2500000", "interest_rate": "8.5", "tenure_years": "20"}},
    "rent_vs_own": {
        "fields": {
            "home_price": "5000000",
            "down_payment": "1000000",
            "loan_tenure_years": "20",
            "interest_rate": "8.5",
            "monthly_rent": "20000",
            "rent_increase_rate": "5",
            "property_appreciation_rate": "6",
        }
    },
    "tax_regime": {
        "fields": {"annual_income": "1800000", "deductions": "200000"},
        "options": {"age_category": "below60"},
    },
    "in_hand_salary": {
        "fields": {"ctc": "1800000", "monthly_rent": "30000", "section_80c": "150000"}
    },
    "offer_comparison": {
        "fields": {
            "offer_a_ctc": "1800000",
            "offer_b_ctc": "2000000",
            "offer_b_variable_pay": "300000",
        }
    },
    "salary_growth": {"fields": {"current_salary": "1200000", "annual_hike": "8", "years": "10"}},
    "epf": {"fields": {"basic_salary": "25000", "current_age": "28"}},
    "nps": {"fields": {"monthly_contribution": "5000", "current_age": "30"}},
    "retirement_corpus": {"fields": {"current_age": "30", "current_monthly_expense": "50000"}},
    "term_insurance": {"fields": {"annual_income": "1500000", "dependents": "2"}},
    "health_insurance": {
        "fields": {"age": "35", "spouse_age": "33", "children": "2"},
        "options": {"family_type": "family", "city_tier": "tier1"},
    },
}


def measure(instrument: str, iterations: int) -> dict[str, float]:
    """Return timing statistics for repeated runs of one instrument."""

    payload = SAMPLE_PAYLOADS[instrument]
    run_calculation(instrument, payload)  # Warm caches
    start = perf_counter()
    for _ in range(iterations):
        run_calculation(instrument, payload)
    elapsed = perf_counter() - start
    return {
        "iterations": iterations,
        "total_ms": elapsed * 1000,
        "average_ms": (elapsed / iterations) * 1000,
    }


def main() -> None:
    iterations = int(os.getenv("RUPEEWISE_PROFILE_ITERATIONS", "200"))
    report = {instrument: measure(instrument, iterations) for instrument in SAMPLE_PAYLOADS}
    print(json.dumps(report, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
