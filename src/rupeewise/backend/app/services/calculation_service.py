"""Orchestrate validation, calculation, formatting and annotation.

The service maps each instrument tag to its input model and kernel so the
kernels stay free of validation concerns. ``calculate`` is the in-process
entry point; ``run_calculation`` drives the full pipeline for the HTTP layer.
Profiling hooks live here so every instrument is timed the same way.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from time import perf_counter
from typing import Any

from pydantic import ValidationError

from rupeewise.backend.app.localization import Translator, get_translator
from rupeewise.backend.app.models import (
    CalculationInput,
    CalculationRequest,
    CalculationResponse,
    CalculationResult,
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
    ValidationResponse,
    format_validation_error,
)
from rupeewise.backend.config.rule_config import load_rule_set
from rupeewise.backend.config.schema import StatutoryConfig

from .calculators import (
    calculate_epf,
    calculate_fixed_deposit,
    calculate_gratuity,
    calculate_health_insurance,
    calculate_in_hand_salary,
    calculate_loan_emi,
    calculate_nps,
    calculate_offer_comparison,
    calculate_recurring_deposit,
    calculate_rent_vs_own,
    calculate_retirement_corpus,
    calculate_salary_growth,
    calculate_sip,
    calculate_tax_regime,
    calculate_term_insurance,
    round_currency,
)
from .disclaimers import disclaimer_for
from .errors import CalculationNotAllowed, RuleViolation, UnknownInstrumentError
from .formatting import format_currency, format_result
from .numeric_guard import field_shape_errors
from .rule_validator import ValidationResult, resolve_instrument, validate

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Kernel:
    input_model: type[CalculationInput]
    compute: Callable[[Any, StatutoryConfig], CalculationResult]


_KERNELS: Mapping[str, _Kernel] = {
    "gratuity": _Kernel(
        GratuityInput, lambda payload, statutory: calculate_gratuity(payload, statutory.gratuity)
    ),
    "recurring_deposit": _Kernel(
        RecurringDepositInput, lambda payload, _statutory: calculate_recurring_deposit(payload)
    ),
    "fixed_deposit": _Kernel(
        FixedDepositInput, lambda payload, _statutory: calculate_fixed_deposit(payload)
    ),
    "sip": _Kernel(SipInput, lambda payload, _statutory: calculate_sip(payload)),
    "loan_emi": _Kernel(LoanEmiInput, lambda payload, _statutory: calculate_loan_emi(payload)),
    "rent_vs_own": _Kernel(
        RentVsOwnInput, lambda payload, _statutory: calculate_rent_vs_own(payload)
    ),
    "tax_regime": _Kernel(
        TaxRegimeInput,
        lambda payload, statutory: calculate_tax_regime(payload, statutory.income_tax),
    ),
    "in_hand_salary": _Kernel(InHandSalaryInput, calculate_in_hand_salary),
    "offer_comparison": _Kernel(OfferComparisonInput, calculate_offer_comparison),
    "salary_growth": _Kernel(
        SalaryGrowthInput, lambda payload, _statutory: calculate_salary_growth(payload)
    ),
    "epf": _Kernel(
        EpfInput, lambda payload, statutory: calculate_epf(payload, statutory.provident_fund)
    ),
    "nps": _Kernel(
        NpsInput, lambda payload, statutory: calculate_nps(payload, statutory.pension_scheme)
    ),
    "retirement_corpus": _Kernel(
        RetirementCorpusInput,
        lambda payload, _statutory: calculate_retirement_corpus(payload),
    ),
    "term_insurance": _Kernel(
        TermInsuranceInput, lambda payload, _statutory: calculate_term_insurance(payload)
    ),
    "health_insurance": _Kernel(
        HealthInsuranceInput, lambda payload, _statutory: calculate_health_insurance(payload)
    ),
}


def supported_instruments() -> tuple[str, ...]:
    """Instrument tags that have both a rule set and a kernel."""

    configured = load_rule_set().instruments
    return tuple(name for name in configured if name in _KERNELS)


def _profiling_enabled() -> bool:
    """Return ``True`` when calculation profiling should be captured."""

    flag = os.getenv("RUPEEWISE_PROFILE_CALCULATIONS", "")
    return flag.strip().lower() in {"1", "true", "yes", "on"}


@contextmanager
def _profile_section(name: str, store: dict[str, float] | None):
    """Capture the duration of a named section when profiling is enabled."""

    if store is None:
        yield
        return

    start = perf_counter()
    try:
        yield
    finally:
        store[name] = perf_counter() - start


def _kernel_for(instrument: str) -> _Kernel:
    kernel = _KERNELS.get(instrument)
    if kernel is None:
        raise UnknownInstrumentError(instrument)
    return kernel


def calculate(instrument: str, validation: ValidationResult) -> CalculationResult:
    """Run the kernel for ``instrument`` from a passing validation result.

    Raises ``CalculationNotAllowed`` when ``validation`` failed or belongs to a
    different instrument; no result is ever produced from rejected input.
    """

    kernel = _kernel_for(instrument)
    if validation.instrument != instrument:
        raise ValueError(
            f"Validation result for '{validation.instrument}' cannot drive '{instrument}'"
        )
    if not validation.ok:
        raise CalculationNotAllowed(validation)

    payload = kernel.input_model.model_validate(
        {**dict(validation.values), **dict(validation.options)}
    )
    return kernel.compute(payload, load_rule_set().statutory)


def _round_amounts(value: Any) -> Any:
    if isinstance(value, float):
        return round_currency(value)
    if isinstance(value, dict):
        return {key: _round_amounts(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_round_amounts(item) for item in value]
    return value


def _recommendation(instrument: str, result: CalculationResult, translator: Translator) -> str | None:
    if instrument == "rent_vs_own":
        choice = "buy" if result.buying_is_better else "rent"
        return translator(f"recommendation.rent_vs_own.{choice}")
    if instrument in ("tax_regime", "in_hand_salary"):
        return translator(f"recommendation.tax_regime.{result.recommended_regime}")
    if instrument == "offer_comparison":
        return translator(
            f"recommendation.offer_comparison.{result.better_offer}",
            monthly=format_currency(result.monthly_difference),
            annual=format_currency(result.annual_difference),
        )
    if instrument == "retirement_corpus":
        if result.corpus_gap > 0:
            return translator(
                "recommendation.retirement_corpus.shortfall",
                monthly=format_currency(result.additional_monthly_investment),
                gap=format_currency(result.corpus_gap),
            )
        return translator("recommendation.retirement_corpus.on_track")
    return None


def _parse_request(payload: Mapping[str, Any]) -> CalculationRequest:
    try:
        return CalculationRequest.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc


def check_fields(instrument: str, payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a request without running the kernel.

    ``errors`` carries the first domain violation; ``field_errors`` lists the
    per-field input problems (empty required fields, malformed numbers).
    """

    config = resolve_instrument(instrument)
    request = _parse_request(payload)
    translator = get_translator(request.locale)

    result = validate(instrument, request.fields, request.locale, request.options)
    response = ValidationResponse(
        instrument=instrument,
        ok=result.ok,
        errors=dict(result.errors),
        field_errors=field_shape_errors(config, request.fields, translator),
    )
    return response.model_dump(mode="json")


def run_calculation(instrument: str, payload: Mapping[str, Any]) -> dict[str, Any]:
    """Validate, calculate, format and annotate a calculation request.

    Raises ``RuleViolation`` carrying the failing validation result when the
    submitted fields break a guardrail.
    """

    _kernel_for(instrument)
    request = _parse_request(payload)
    translator = get_translator(request.locale)

    timings: dict[str, float] | None = {} if _profiling_enabled() else None
    overall_start = perf_counter() if timings is not None else None

    with _profile_section("validate", timings):
        validation = validate(instrument, request.fields, request.locale, request.options)
    if not validation.ok:
        raise RuleViolation(validation)

    with _profile_section("calculate", timings):
        result = calculate(instrument, validation)

    with _profile_section("format", timings):
        display = format_result(result)
        recommendation = _recommendation(instrument, result, translator)
        if recommendation is not None:
            display["recommendation"] = recommendation

    meta: dict[str, Any] = {
        "fiscal_year": load_rule_set().fiscal_year,
        "locale": translator.locale,
        "options": dict(validation.options),
    }

    if timings is not None and overall_start is not None:
        timings["total"] = perf_counter() - overall_start
        meta["timings_ms"] = {
            name: round(duration * 1000, 3) for name, duration in timings.items()
        }
        _LOGGER.debug("run_calculation(%s) timings (ms): %s", instrument, meta["timings_ms"])

    response = CalculationResponse.model_validate(
        {
            "instrument": instrument,
            "category": validation.category,
            "result": _round_amounts(asdict(result)),
            "display": display,
            "disclaimer": disclaimer_for(validation.category, translator),
            "meta": meta,
        }
    )
    return response.model_dump(mode="json", exclude_none=True)


__all__ = [
    "calculate",
    "check_fields",
    "run_calculation",
    "supported_instruments",
]
