"""Pure calculation kernels, one per instrument."""

from .deposits import (
    COMPOUNDING_PERIODS,
    calculate_fixed_deposit,
    calculate_recurring_deposit,
    recurring_deposit_maturity,
)
from .gratuity import calculate_gratuity
from .housing import calculate_rent_vs_own, total_rent
from .income_tax import calculate_regime_tax, calculate_tax_regime
from .insurance import calculate_health_insurance, calculate_term_insurance
from .investments import calculate_sip, sip_future_value
from .loans import amortization_schedule, calculate_loan_emi, monthly_emi
from .retirement import (
    calculate_epf,
    calculate_nps,
    calculate_retirement_corpus,
    monthly_pf_contribution,
)
from .salary import (
    calculate_in_hand_salary,
    calculate_offer_comparison,
    calculate_salary_growth,
    hra_exemption,
)
from .utils import (
    calculate_progressive_tax,
    format_percentage,
    round_currency,
    round_rupees,
)

__all__ = [
    "COMPOUNDING_PERIODS",
    "amortization_schedule",
    "calculate_epf",
    "calculate_fixed_deposit",
    "calculate_gratuity",
    "calculate_health_insurance",
    "calculate_in_hand_salary",
    "calculate_loan_emi",
    "calculate_nps",
    "calculate_offer_comparison",
    "calculate_progressive_tax",
    "calculate_recurring_deposit",
    "calculate_regime_tax",
    "calculate_rent_vs_own",
    "calculate_retirement_corpus",
    "calculate_salary_growth",
    "calculate_sip",
    "calculate_tax_regime",
    "calculate_term_insurance",
    "format_percentage",
    "hra_exemption",
    "monthly_emi",
    "monthly_pf_contribution",
    "recurring_deposit_maturity",
    "round_currency",
    "round_rupees",
    "sip_future_value",
    "total_rent",
]
