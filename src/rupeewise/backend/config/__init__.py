"""Rule configuration loading and consistency checks."""

from .rule_config import (
    ConfigurationError,
    available_instruments,
    get_instrument_config,
    load_rule_set,
    statutory_constants,
)

__all__ = [
    "ConfigurationError",
    "available_instruments",
    "get_instrument_config",
    "load_rule_set",
    "statutory_constants",
]
