"""Rupee-denominated personal-finance calculators."""
