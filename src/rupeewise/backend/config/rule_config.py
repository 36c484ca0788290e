"""Configuration loader wrapping the shared schema models."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from .schema import (
    CalculatorCategory,
    ConfigurationError,
    FieldConfig,
    GratuityConfig,
    IncomeTaxConfig,
    InstrumentConfig,
    OptionConfig,
    PensionSchemeConfig,
    ProvidentFundConfig,
    RegimeConfig,
    RuleConfig,
    RuleSet,
    SalaryDeductionConfig,
    StatutoryConfig,
    SurchargeBand,
    TaxSlab,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
RULES_FILE = CONFIG_DIRECTORY / "rules.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


@lru_cache(maxsize=1)
def load_rule_set() -> RuleSet:
    """Load and cache the rule configuration from disk."""

    if not RULES_FILE.exists():
        raise FileNotFoundError(f"Rule configuration not found: {RULES_FILE.name}")

    raw_config = _load_yaml(RULES_FILE)

    try:
        return RuleSet.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Rule configuration validation failed: {error}") from error


def available_instruments() -> Sequence[str]:
    """Return the instrument tags declared in the configuration."""

    return tuple(load_rule_set().instruments)


def get_instrument_config(instrument: str) -> InstrumentConfig:
    """Return the configuration for ``instrument``.

    Raises ``KeyError`` when the instrument is not configured.
    """

    instruments = load_rule_set().instruments
    if instrument not in instruments:
        raise KeyError(instrument)
    return instruments[instrument]


def statutory_constants() -> StatutoryConfig:
    """Expose the statutory constants consumed by the calculators."""

    return load_rule_set().statutory


__all__ = [
    "CONFIG_DIRECTORY",
    "CalculatorCategory",
    "ConfigurationError",
    "FieldConfig",
    "GratuityConfig",
    "IncomeTaxConfig",
    "InstrumentConfig",
    "OptionConfig",
    "PensionSchemeConfig",
    "ProvidentFundConfig",
    "RULES_FILE",
    "RegimeConfig",
    "RuleConfig",
    "RuleSet",
    "SalaryDeductionConfig",
    "StatutoryConfig",
    "SurchargeBand",
    "TaxSlab",
    "available_instruments",
    "get_instrument_config",
    "load_rule_set",
    "statutory_constants",
]
