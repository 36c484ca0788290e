"""Unit tests for the pure calculation kernels."""

from __future__ import annotations

import math

import pytest

from rupeewise.backend.app.models import (
    FixedDepositInput,
    GratuityInput,
    LoanEmiInput,
    RecurringDepositInput,
    RentVsOwnInput,
    SipInput,
    TaxRegimeInput,
)
from rupeewise.backend.app.services.calculators import (
    calculate_fixed_deposit,
    calculate_gratuity,
    calculate_loan_emi,
    calculate_progressive_tax,
    calculate_recurring_deposit,
    calculate_regime_tax,
    calculate_rent_vs_own,
    calculate_sip,
    calculate_tax_regime,
    monthly_emi,
    recurring_deposit_maturity,
    round_rupees,
)
from rupeewise.backend.config.rule_config import statutory_constants


@pytest.fixture()
def statutory():
    return statutory_constants()


def test_gratuity_matches_statutory_formula(statutory) -> None:
    result = calculate_gratuity(
        GratuityInput(last_drawn_salary=50000, years_of_service=10), statutory.gratuity
    )

    assert result.amount == pytest.approx(50000 / 26 * 15 * 10)
    assert round(result.amount) == 288462
    assert result.months == 120
    assert not result.cap_applied


def test_gratuity_is_capped(statutory) -> None:
    result = calculate_gratuity(
        GratuityInput(last_drawn_salary=500000, years_of_service=30), statutory.gratuity
    )

    assert result.amount == 2_000_000
    assert result.uncapped_amount > 2_000_000
    assert result.cap_applied


@pytest.mark.parametrize("rate", [0, 4, 6.5, 15])
@pytest.mark.parametrize("years", [1, 5, 20])
def test_recurring_deposit_never_loses_principal(rate: float, years: int) -> None:
    result = calculate_recurring_deposit(
        RecurringDepositInput(monthly_deposit=5000, interest_rate=rate, tenure_years=years)
    )

    assert result.total_deposited == 5000 * years * 12
    assert result.maturity_value >= result.total_deposited - 1e-6
    assert result.interest_earned == pytest.approx(result.maturity_value - result.total_deposited)


def test_recurring_deposit_reproduces_quarterly_formula() -> None:
    q = 0.065 / 4
    expected = 5000 * ((1 + q) ** 20 - 1) / (1 - (1 + q) ** (-1 / 3))

    result = calculate_recurring_deposit(
        RecurringDepositInput(monthly_deposit=5000, interest_rate=6.5, tenure_years=5)
    )

    assert result.maturity_value == pytest.approx(expected)
    assert result.maturity_value > 300000


def test_recurring_deposit_zero_rate_returns_deposits() -> None:
    assert recurring_deposit_maturity(1000, 0, 3) == 36000


def test_recurring_deposit_breakdown_tracks_each_year() -> None:
    result = calculate_recurring_deposit(
        RecurringDepositInput(monthly_deposit=2000, interest_rate=7, tenure_years=3)
    )

    assert [row.year for row in result.breakdown] == [1, 2, 3]
    assert [row.deposited for row in result.breakdown] == [24000, 48000, 72000]
    assert result.breakdown[-1].maturity_value == pytest.approx(result.maturity_value)


def test_fixed_deposit_compound_interest() -> None:
    result = calculate_fixed_deposit(
        FixedDepositInput(
            principal=100000, interest_rate=10, tenure_years=2, compounding="yearly"
        )
    )

    assert result.maturity_value == pytest.approx(121000)
    assert result.interest_earned == pytest.approx(21000)
    assert result.effective_rate == pytest.approx(10)
    assert result.periods_per_year == 1


def test_fixed_deposit_effective_rate_for_quarterly_compounding() -> None:
    result = calculate_fixed_deposit(
        FixedDepositInput(principal=100000, interest_rate=8, tenure_years=1)
    )

    assert result.effective_rate == pytest.approx(((1 + 0.02) ** 4 - 1) * 100)
    assert result.maturity_value == pytest.approx(100000 * 1.02**4)


def test_fixed_deposit_partial_final_year_ends_at_maturity() -> None:
    result = calculate_fixed_deposit(
        FixedDepositInput(
            principal=100000, interest_rate=10, tenure_years=1.5, compounding="yearly"
        )
    )

    assert len(result.breakdown) == 2
    assert result.breakdown[0].closing_balance == pytest.approx(110000)
    assert result.breakdown[1].opening_balance == pytest.approx(110000)
    assert result.maturity_value == pytest.approx(100000 * 1.1**1.5)
    assert result.breakdown[-1].closing_balance == pytest.approx(result.maturity_value)


@pytest.mark.parametrize("years", [0.25, 2.5, 7.75])
@pytest.mark.parametrize("compounding", ["monthly", "quarterly", "yearly"])
def test_fixed_deposit_breakdown_never_exceeds_maturity(years: float, compounding: str) -> None:
    result = calculate_fixed_deposit(
        FixedDepositInput(
            principal=250000, interest_rate=7.1, tenure_years=years, compounding=compounding
        )
    )

    closings = [row.closing_balance for row in result.breakdown]
    assert closings == sorted(closings)
    assert closings[-1] == pytest.approx(result.maturity_value)


def test_sip_future_value_is_annuity_due() -> None:
    result = calculate_sip(SipInput(monthly_investment=1000, annual_return=12, investment_years=1))

    expected = 1000 * ((1.01**12 - 1) / 0.01) * 1.01
    assert result.future_value == pytest.approx(expected)
    assert result.total_invested == 12000
    assert result.return_percentage == pytest.approx((expected - 12000) / 12000 * 100)
    assert [row.month for row in result.breakdown] == [12]


def test_sip_breakdown_samples_every_twelve_months() -> None:
    result = calculate_sip(SipInput(monthly_investment=500, annual_return=10, investment_years=3))

    assert [row.month for row in result.breakdown] == [12, 24, 36]
    assert [row.invested for row in result.breakdown] == [6000, 12000, 18000]
    assert result.breakdown[-1].value == pytest.approx(result.future_value)


def test_monthly_emi_formula() -> None:
    emi = monthly_emi(100000, 12, 12)

    assert emi == pytest.approx(100000 * 0.01 * 1.01**12 / (1.01**12 - 1))
    assert round(emi, 2) == pytest.approx(8884.88)


def test_loan_schedule_repays_the_principal() -> None:
    result = calculate_loan_emi(LoanEmiInput(loan_amount=2500000, interest_rate=8.5, tenure_years=20))

    assert result.months == 240
    assert len(result.breakdown) == 20
    assert result.breakdown[0].opening_balance == 2500000
    assert result.breakdown[-1].closing_balance == 0
    assert sum(row.principal_paid for row in result.breakdown) == pytest.approx(2500000)
    assert sum(row.interest_paid for row in result.breakdown) == pytest.approx(
        result.total_interest
    )


def test_rent_vs_own_buying_cost_uses_full_emi_term() -> None:
    result = calculate_rent_vs_own(
        RentVsOwnInput(
            home_price=5000000,
            down_payment=1000000,
            loan_tenure_years=20,
            interest_rate=8.5,
            monthly_rent=20000,
        )
    )

    emi = monthly_emi(4000000, 8.5, 240)
    assert result.monthly_emi == pytest.approx(emi)
    assert result.total_cost_of_buying == pytest.approx(1000000 + emi * 240)
    assert result.total_cost_of_renting == pytest.approx(20000 * 12 * 20)
    assert result.property_value_after == pytest.approx(5000000)


def test_rent_vs_own_recommends_buying_only_on_positive_net() -> None:
    renting = calculate_rent_vs_own(
        RentVsOwnInput(
            home_price=5000000,
            down_payment=1000000,
            loan_tenure_years=20,
            interest_rate=8.5,
            monthly_rent=20000,
        )
    )
    buying = calculate_rent_vs_own(
        RentVsOwnInput(
            home_price=5000000,
            down_payment=1000000,
            loan_tenure_years=20,
            interest_rate=8.5,
            monthly_rent=30000,
            rent_increase_rate=8,
            property_appreciation_rate=10,
        )
    )

    assert renting.net_savings < 0 and not renting.buying_is_better
    assert buying.net_savings > 0 and buying.buying_is_better


def test_rent_escalates_yearly() -> None:
    result = calculate_rent_vs_own(
        RentVsOwnInput(
            home_price=1000000,
            down_payment=200000,
            loan_tenure_years=2,
            interest_rate=10,
            monthly_rent=10000,
            rent_increase_rate=10,
        )
    )

    assert result.total_cost_of_renting == pytest.approx(120000 + 132000)


def test_progressive_tax_over_continuous_slabs(statutory) -> None:
    slabs = statutory.income_tax.old_regime.slabs_for("below60")

    assert calculate_progressive_tax(725000, slabs) == pytest.approx(57500)
    assert calculate_progressive_tax(0, slabs) == 0


def test_round_rupees_rounds_halves_up() -> None:
    assert round_rupees(2.5) == 3
    assert round_rupees(0.5) == 1
    assert round_rupees(1.49) == 1


def test_new_regime_rebate_covers_income_up_to_threshold(statutory) -> None:
    result = calculate_tax_regime(TaxRegimeInput(annual_income=775000), statutory.income_tax)

    assert result.new_regime.taxable_income == 700000
    assert result.new_regime.total_tax == 0
    assert result.old_regime.total_tax == 59800
    assert result.recommended_regime == "new"
    assert result.savings == 59800


def test_new_regime_marginal_relief(statutory) -> None:
    tax = calculate_regime_tax("new", 785000, 0, "below60", statutory.income_tax)

    assert tax.tax_before_rebate == 21000
    assert tax.marginal_relief == pytest.approx(11000)
    assert tax.cess == 400
    assert tax.total_tax == pytest.approx(10400)


def test_old_regime_rebate_and_age_slabs(statutory) -> None:
    below60 = calculate_regime_tax("old", 600000, 50000, "below60", statutory.income_tax)
    super_senior = calculate_regime_tax("old", 1050000, 0, "super_senior", statutory.income_tax)

    assert below60.taxable_income == 500000
    assert below60.rebate == below60.tax_before_rebate == 12500
    assert below60.total_tax == 0
    assert super_senior.tax_before_rebate == 100000


def test_surcharge_is_capped_for_new_regime(statutory) -> None:
    new = calculate_regime_tax("new", 6000000, 0, "below60", statutory.income_tax)
    old = calculate_regime_tax("old", 6000000, 0, "below60", statutory.income_tax)

    assert new.tax_before_rebate == 1467500
    assert new.surcharge == 146750
    assert new.cess == 64570
    assert new.total_tax == 1678820
    assert old.total_tax == 1827540

    top = calculate_regime_tax("new", 60000000, 0, "below60", statutory.income_tax)
    assert top.surcharge == round_rupees(top.tax_before_rebate * 0.25)


def test_tax_regime_ties_favour_old_regime(statutory) -> None:
    result = calculate_tax_regime(
        TaxRegimeInput(annual_income=500000, deductions=0), statutory.income_tax
    )

    assert result.old_regime.total_tax == result.new_regime.total_tax == 0
    assert result.recommended_regime == "old"


def test_kernels_are_deterministic(statutory) -> None:
    payload = TaxRegimeInput(annual_income=1800000, deductions=200000, age_category="senior")

    first = calculate_tax_regime(payload, statutory.income_tax)
    second = calculate_tax_regime(payload, statutory.income_tax)

    assert first == second
    assert not math.isnan(first.savings)


def test_round_rupees_handles_large_and_rejects_non_finite() -> None:
    assert round_rupees(2.5) == 3
    assert round_rupees(1e30) == 10**30

    with pytest.raises(ValueError):
        round_rupees(math.inf)
