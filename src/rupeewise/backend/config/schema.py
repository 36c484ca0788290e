"""Pydantic models describing the calculator rule configuration schema."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self

RuleCheck = Literal[
    "positive",
    "required",
    "minimum",
    "maximum",
    "non_negative",
    "whole_number",
    "not_above_field",
    "above_field",
]

CalculatorCategory = Literal["tax", "investment", "retirement", "insurance", "general"]

_BOUNDED_CHECKS = frozenset({"minimum", "maximum"})
_CROSS_FIELD_CHECKS = frozenset({"not_above_field", "above_field"})


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class TaxSlab(ImmutableModel):
    """Represents a single progressive income-tax slab."""

    upper_bound: float | None = Field(default=None, alias="upper")
    rate: float

    @model_validator(mode="after")
    def _validate_values(self) -> Self:
        if self.rate < 0 or self.rate > 1:
            raise ConfigurationError("Slab rates must be between 0 and 1")
        if self.upper_bound is not None and self.upper_bound <= 0:
            raise ConfigurationError("Slab upper bounds must be positive values")
        return self


class SurchargeBand(ImmutableModel):
    """Surcharge rate applied once gross income exceeds ``above``."""

    above: float = Field(..., gt=0)
    rate: float = Field(..., ge=0, le=1)


class RegimeConfig(ImmutableModel):
    """Deductions, rebate and slab tables for a single tax regime."""

    standard_deduction: float = Field(..., ge=0)
    rebate_threshold: float = Field(..., ge=0)
    marginal_relief: bool = False
    surcharge_cap: float = Field(..., ge=0, le=1)
    slabs: Mapping[str, tuple[TaxSlab, ...]]

    @field_validator("slabs")
    @classmethod
    def _require_open_top_slab(
        cls, value: Mapping[str, tuple[TaxSlab, ...]]
    ) -> Mapping[str, tuple[TaxSlab, ...]]:
        if not value:
            raise ConfigurationError("Tax regimes require at least one slab table")
        for table, slabs in value.items():
            if not slabs:
                raise ConfigurationError(f"Slab table '{table}' is empty")
            if slabs[-1].upper_bound is not None:
                raise ConfigurationError(
                    f"Slab table '{table}' must end with an open upper bound"
                )
        return value

    def slabs_for(self, age_category: str) -> tuple[TaxSlab, ...]:
        """Return the slab table for ``age_category`` or the regime default."""

        if age_category in self.slabs:
            return self.slabs[age_category]
        if "default" in self.slabs:
            return self.slabs["default"]
        return next(iter(self.slabs.values()))


class IncomeTaxConfig(ImmutableModel):
    """Statutory income-tax parameters for the encoded fiscal year."""

    cess_rate: float = Field(..., ge=0, le=1)
    surcharge: tuple[SurchargeBand, ...] = ()
    old_regime: RegimeConfig
    new_regime: RegimeConfig


class GratuityConfig(ImmutableModel):
    """Payment of Gratuity Act parameters."""

    divisor: float = Field(..., gt=0)
    multiplier: float = Field(..., gt=0)
    cap: float = Field(..., gt=0)
    minimum_service_years: float = Field(..., ge=0)


class ProvidentFundConfig(ImmutableModel):
    """EPF and EPS contribution parameters (Employees' Provident Funds Act, 1952)."""

    contribution_rate: float = Field(..., gt=0, le=1)
    pension_rate: float = Field(..., ge=0, le=1)
    wage_ceiling: float = Field(..., gt=0)
    pension_cap: float = Field(..., ge=0)
    taxable_contribution_threshold: float = Field(..., gt=0)

    @model_validator(mode="after")
    def _validate_shares(self) -> Self:
        if self.pension_rate > self.contribution_rate:
            raise ConfigurationError("The EPS share cannot exceed the employer contribution")
        return self


class SalaryDeductionConfig(ImmutableModel):
    """Old-regime deduction limits and HRA exemption shares applied to salaries."""

    section_80c_limit: float = Field(..., ge=0)
    section_80d_limit: float = Field(..., ge=0)
    section_80d_senior_limit: float = Field(..., ge=0)
    hra_metro_share: float = Field(..., ge=0, le=1)
    hra_non_metro_share: float = Field(..., ge=0, le=1)
    hra_rent_offset_share: float = Field(..., ge=0, le=1)


class PensionSchemeConfig(ImmutableModel):
    """National Pension System exit and deduction rules."""

    lump_sum_share: float = Field(..., ge=0, le=1)
    early_exit_lump_sum_share: float = Field(..., ge=0, le=1)
    small_corpus_threshold: float = Field(..., ge=0)
    normal_exit_age: float = Field(..., gt=0)
    partial_withdrawal_share: float = Field(..., ge=0, le=1)
    partial_withdrawal_min_years: float = Field(..., ge=0)
    section_80ccd_1b_limit: float = Field(..., ge=0)


class StatutoryConfig(ImmutableModel):
    """Container for statutory constants consumed by calculation kernels."""

    gratuity: GratuityConfig
    income_tax: IncomeTaxConfig
    provident_fund: ProvidentFundConfig
    salary: SalaryDeductionConfig
    pension_scheme: PensionSchemeConfig


class FieldConfig(ImmutableModel):
    """Declares a numeric form field accepted by an instrument."""

    required: bool = False
    default: float | None = None

    @model_validator(mode="after")
    def _validate_default(self) -> Self:
        if self.required and self.default is not None:
            raise ConfigurationError("Required fields cannot declare a default value")
        return self


class OptionConfig(ImmutableModel):
    """Declares a selection control (for example a compounding frequency)."""

    choices: tuple[str, ...]
    default: str

    @model_validator(mode="after")
    def _validate_default(self) -> Self:
        if not self.choices:
            raise ConfigurationError("Options must declare at least one choice")
        if self.default not in self.choices:
            raise ConfigurationError(
                f"Option default '{self.default}' is not one of {list(self.choices)}"
            )
        return self


class RuleConfig(ImmutableModel):
    """Single guardrail rule evaluated against one field."""

    field: str
    check: RuleCheck
    message: str
    value: float | None = None
    other: str | None = None

    @model_validator(mode="after")
    def _validate_parameters(self) -> Self:
        if self.check in _BOUNDED_CHECKS and self.value is None:
            raise ConfigurationError(f"Rule '{self.check}' on '{self.field}' requires a value")
        if self.check in _CROSS_FIELD_CHECKS and not self.other:
            raise ConfigurationError(
                f"Rule '{self.check}' on '{self.field}' requires another field"
            )
        return self


class InstrumentConfig(ImmutableModel):
    """Fields, options and ordered rules for a calculator instrument."""

    category: CalculatorCategory
    fields: Mapping[str, FieldConfig]
    options: Mapping[str, OptionConfig] = Field(default_factory=dict)
    rules: tuple[RuleConfig, ...]

    @model_validator(mode="before")
    @classmethod
    def _coerce_empty_fields(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        fields = data.get("fields")
        if isinstance(fields, Mapping):
            copied = dict(data)
            copied["fields"] = {
                name: ({} if spec is None else spec) for name, spec in fields.items()
            }
            return copied
        return data

    @model_validator(mode="after")
    def _validate_rule_targets(self) -> Self:
        if not self.fields:
            raise ConfigurationError("Instruments must declare at least one field")
        for rule in self.rules:
            if rule.field not in self.fields:
                raise ConfigurationError(f"Rule references undeclared field '{rule.field}'")
            if rule.other is not None and rule.other not in self.fields:
                raise ConfigurationError(f"Rule references undeclared field '{rule.other}'")
        return self

    def rules_for(self, field: str) -> Sequence[RuleConfig]:
        return [rule for rule in self.rules if rule.field == field]


class RuleSet(ImmutableModel):
    """Top-level configuration document."""

    fiscal_year: str
    statutory: StatutoryConfig
    instruments: Mapping[str, InstrumentConfig]

    @field_validator("instruments")
    @classmethod
    def _require_instruments(
        cls, value: Mapping[str, InstrumentConfig]
    ) -> Mapping[str, InstrumentConfig]:
        if not value:
            raise ConfigurationError("At least one instrument must be configured")
        return value


__all__ = [
    "CalculatorCategory",
    "ConfigurationError",
    "FieldConfig",
    "GratuityConfig",
    "ImmutableModel",
    "IncomeTaxConfig",
    "InstrumentConfig",
    "OptionConfig",
    "PensionSchemeConfig",
    "ProvidentFundConfig",
    "RegimeConfig",
    "RuleCheck",
    "RuleConfig",
    "RuleSet",
    "SalaryDeductionConfig",
    "StatutoryConfig",
    "SurchargeBand",
    "TaxSlab",
]
