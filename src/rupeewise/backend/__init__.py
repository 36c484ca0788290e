"""Backend services for the rupeewise calculators."""
