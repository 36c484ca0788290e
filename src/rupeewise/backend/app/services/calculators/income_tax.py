"""Old versus new income-tax regime comparison for resident individuals."""

from __future__ import annotations

from rupeewise.backend.app.models import RegimeTax, TaxRegimeInput, TaxRegimeResult
from rupeewise.backend.config.schema import IncomeTaxConfig, RegimeConfig

from .utils import calculate_progressive_tax, round_rupees

OLD_REGIME = "old"
NEW_REGIME = "new"


def surcharge_rate(gross_income: float, config: IncomeTaxConfig, cap: float) -> float:
    """Return the surcharge rate of the highest band ``gross_income`` exceeds."""

    rate = 0.0
    for band in config.surcharge:
        if gross_income > band.above:
            rate = band.rate
    return min(rate, cap)


def calculate_regime_tax(
    regime: str,
    gross_income: float,
    deductions: float,
    age_category: str,
    config: IncomeTaxConfig,
) -> RegimeTax:
    """Compute the liability under one regime.

    Slab tax is rounded to whole rupees, then the Section 87A rebate removes it
    entirely at or below the rebate threshold. Where the regime grants
    marginal relief, tax above the threshold cannot exceed the income above
    it. Surcharge and the cess on tax plus surcharge are rounded separately.
    """

    settings: RegimeConfig = config.old_regime if regime == OLD_REGIME else config.new_regime
    taxable = max(0.0, gross_income - settings.standard_deduction - deductions)

    tax_before_rebate = round_rupees(
        calculate_progressive_tax(taxable, settings.slabs_for(age_category))
    )
    rebate = tax_before_rebate if taxable <= settings.rebate_threshold else 0
    tax_after_rebate: float = max(0, tax_before_rebate - rebate)

    marginal_relief = 0.0
    if settings.marginal_relief and taxable > settings.rebate_threshold:
        ceiling = taxable - settings.rebate_threshold
        if tax_after_rebate > ceiling:
            marginal_relief = tax_after_rebate - ceiling
            tax_after_rebate = ceiling

    rate = surcharge_rate(gross_income, config, settings.surcharge_cap)
    surcharge = round_rupees(tax_after_rebate * rate)
    cess = round_rupees((tax_after_rebate + surcharge) * config.cess_rate)
    total_tax = tax_after_rebate + surcharge + cess

    return RegimeTax(
        regime=regime,
        standard_deduction=settings.standard_deduction,
        taxable_income=taxable,
        tax_before_rebate=tax_before_rebate,
        rebate=rebate,
        marginal_relief=marginal_relief,
        surcharge=surcharge,
        cess=cess,
        total_tax=total_tax,
        income_after_tax=gross_income - total_tax,
    )


def calculate_tax_regime(payload: TaxRegimeInput, config: IncomeTaxConfig) -> TaxRegimeResult:
    """Compare both regimes; the old regime is kept unless the new one is cheaper.

    Chapter VI-A style deductions only reduce old-regime income.
    """

    old = calculate_regime_tax(
        OLD_REGIME, payload.annual_income, payload.deductions, payload.age_category, config
    )
    new = calculate_regime_tax(
        NEW_REGIME, payload.annual_income, 0.0, payload.age_category, config
    )

    recommended = NEW_REGIME if new.total_tax < old.total_tax else OLD_REGIME

    return TaxRegimeResult(
        old_regime=old,
        new_regime=new,
        recommended_regime=recommended,
        savings=abs(old.total_tax - new.total_tax),
    )


__all__ = [
    "NEW_REGIME",
    "OLD_REGIME",
    "calculate_regime_tax",
    "calculate_tax_regime",
    "surcharge_rate",
]
