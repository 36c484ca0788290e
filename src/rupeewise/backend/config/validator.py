"""Utilities for validating the rule configuration and surfacing issues."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Collection, Sequence

from .rule_config import (
    ConfigurationError,
    GratuityConfig,
    IncomeTaxConfig,
    InstrumentConfig,
    RegimeConfig,
    RuleSet,
    load_rule_set,
)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_regime(scope: str, regime: RegimeConfig) -> list[str]:
    errors: list[str] = []

    for table, slabs in regime.slabs.items():
        bounds = [slab.upper_bound for slab in slabs if slab.upper_bound is not None]
        if bounds != sorted(bounds) or len(set(bounds)) != len(bounds):
            errors.append(
                _format_scope(
                    f"{scope}.slabs.{table}",
                    "slab upper bounds must be strictly ascending",
                )
            )

        rates = [slab.rate for slab in slabs]
        if rates != sorted(rates):
            errors.append(
                _format_scope(
                    f"{scope}.slabs.{table}",
                    "slab rates should not decrease as income grows",
                )
            )

    return errors


def _validate_income_tax(config: IncomeTaxConfig) -> list[str]:
    errors: list[str] = []

    errors.extend(_validate_regime("income_tax.old_regime", config.old_regime))
    errors.extend(_validate_regime("income_tax.new_regime", config.new_regime))

    thresholds = [band.above for band in config.surcharge]
    if thresholds != sorted(thresholds):
        errors.append(
            _format_scope("income_tax.surcharge", "bands should be sorted by threshold")
        )

    duplicates = [value for value, count in Counter(thresholds).items() if count > 1]
    if duplicates:
        errors.append(
            _format_scope(
                "income_tax.surcharge",
                f"duplicate surcharge thresholds detected: {sorted(duplicates)}",
            )
        )

    return errors


def _validate_gratuity_rules(
    gratuity: GratuityConfig, instrument: InstrumentConfig | None
) -> list[str]:
    if instrument is None:
        return []

    minimums = [rule.value for rule in instrument.rules if rule.check == "minimum"]
    if gratuity.minimum_service_years not in minimums:
        return [
            _format_scope(
                "instruments.gratuity",
                (
                    "minimum service rule does not match the statutory minimum of "
                    f"{gratuity.minimum_service_years:g} years"
                ),
            )
        ]
    return []


def _validate_instrument(
    name: str,
    instrument: InstrumentConfig,
    known_messages: Collection[str] | None,
) -> list[str]:
    errors: list[str] = []
    scope = f"instruments.{name}"

    if not instrument.rules:
        errors.append(_format_scope(scope, "no rules declared"))

    signatures = Counter(
        (rule.field, rule.check, rule.value, rule.other) for rule in instrument.rules
    )
    for (field, check, _value, _other), count in signatures.items():
        if count > 1:
            errors.append(
                _format_scope(scope, f"duplicate '{check}' rule declared for '{field}'")
            )

    for field in instrument.fields:
        lower = [
            rule.value
            for rule in instrument.rules_for(field)
            if rule.check == "minimum" and rule.value is not None
        ]
        upper = [
            rule.value
            for rule in instrument.rules_for(field)
            if rule.check == "maximum" and rule.value is not None
        ]
        if lower and upper and max(lower) > min(upper):
            errors.append(
                _format_scope(
                    f"{scope}.{field}",
                    f"minimum {max(lower):g} exceeds maximum {min(upper):g}",
                )
            )

        spec = instrument.fields[field]
        if spec.default is not None and upper and spec.default > min(upper):
            errors.append(
                _format_scope(
                    f"{scope}.{field}",
                    f"default {spec.default:g} violates the declared maximum",
                )
            )

    if known_messages is not None:
        for rule in instrument.rules:
            if rule.message not in known_messages:
                errors.append(
                    _format_scope(
                        scope,
                        f"message key '{rule.message}' is missing from the base catalogue",
                    )
                )

    return errors


def validate_rule_set(
    config: RuleSet, known_messages: Collection[str] | None = None
) -> list[str]:
    """Return a list of validation issues for the provided configuration.

    ``known_messages`` is the set of backend catalogue keys; message keys are
    only checked when it is supplied.
    """

    errors: list[str] = []

    errors.extend(_validate_income_tax(config.statutory.income_tax))
    errors.extend(
        _validate_gratuity_rules(
            config.statutory.gratuity, config.instruments.get("gratuity")
        )
    )

    for name, instrument in config.instruments.items():
        errors.extend(_validate_instrument(name, instrument, known_messages))

    return errors


def _base_catalogue_keys() -> set[str]:
    from rupeewise.backend.app.localization import load_translations

    return set(load_translations("en")["backend"])


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the calculator rule configuration and report issues."
    )
    parser.add_argument(
        "instruments",
        nargs="*",
        help="Specific instruments to report on (defaults to all configured instruments)",
    )
    parser.add_argument(
        "--skip-messages",
        action="store_true",
        help="Do not cross-check rule message keys against the English catalogue",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_rule_set()
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"failed to load configuration: {error}")
        return 1

    unknown = [name for name in args.instruments if name not in config.instruments]
    if unknown:
        print(f"unknown instrument(s): {', '.join(unknown)}")
        return 1

    known_messages = None if args.skip_messages else _base_catalogue_keys()
    issues = validate_rule_set(config, known_messages)

    if args.instruments:
        prefixes = tuple(f"instruments.{name}" for name in args.instruments)
        issues = [issue for issue in issues if issue.startswith(prefixes)]

    if issues:
        print(f"[{config.fiscal_year}] {len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print(f"[{config.fiscal_year}] OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
