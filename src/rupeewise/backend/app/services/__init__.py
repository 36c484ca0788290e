"""Validation, calculation and presentation services."""
