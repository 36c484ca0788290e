"""Typed request, input and result models shared across the calculation services.

Pydantic models validate what crosses the API boundary and what the kernels
accept; lightweight frozen dataclasses carry the derived results.
"""

from .api import (
    CalculationRequest,
    CalculationResponse,
    DisclaimerPayload,
    ResponseMeta,
    ValidationResponse,
    format_validation_error,
)
from .inputs import (
    AgeCategory,
    CalculationInput,
    EpfInput,
    FixedDepositInput,
    GratuityInput,
    HealthInsuranceInput,
    InHandSalaryInput,
    LoanEmiInput,
    NpsInput,
    OfferComparisonInput,
    RecurringDepositInput,
    RentVsOwnInput,
    RetirementCorpusInput,
    SalaryGrowthInput,
    SipInput,
    TaxRegimeInput,
    TermInsuranceInput,
)
from .results import (
    AmortizationYear,
    CalculationResult,
    DepositYear,
    EpfResult,
    FixedDepositResult,
    FixedDepositYear,
    GratuityResult,
    HealthInsuranceResult,
    InHandSalaryResult,
    LoanEmiResult,
    NpsResult,
    NpsYear,
    OfferComparisonResult,
    OfferSummary,
    ProvidentFundYear,
    RecurringDepositResult,
    RegimeTax,
    RentVsOwnResult,
    RetirementCorpusResult,
    RetirementYear,
    SalaryGrowthResult,
    SalaryGrowthYear,
    SipResult,
    SipYear,
    TaxRegimeResult,
    TermInsuranceResult,
)

__all__ = [
    "AgeCategory",
    "AmortizationYear",
    "CalculationInput",
    "CalculationRequest",
    "CalculationResponse",
    "CalculationResult",
    "DepositYear",
    "DisclaimerPayload",
    "EpfInput",
    "EpfResult",
    "FixedDepositInput",
    "FixedDepositResult",
    "FixedDepositYear",
    "GratuityInput",
    "GratuityResult",
    "HealthInsuranceInput",
    "HealthInsuranceResult",
    "InHandSalaryInput",
    "InHandSalaryResult",
    "LoanEmiInput",
    "LoanEmiResult",
    "NpsInput",
    "NpsResult",
    "NpsYear",
    "OfferComparisonInput",
    "OfferComparisonResult",
    "OfferSummary",
    "ProvidentFundYear",
    "RecurringDepositInput",
    "RecurringDepositResult",
    "RegimeTax",
    "RentVsOwnInput",
    "RentVsOwnResult",
    "ResponseMeta",
    "RetirementCorpusInput",
    "RetirementCorpusResult",
    "RetirementYear",
    "SalaryGrowthInput",
    "SalaryGrowthResult",
    "SalaryGrowthYear",
    "SipInput",
    "SipResult",
    "SipYear",
    "TaxRegimeInput",
    "TaxRegimeResult",
    "TermInsuranceInput",
    "TermInsuranceResult",
    "ValidationResponse",
    "format_validation_error",
]
