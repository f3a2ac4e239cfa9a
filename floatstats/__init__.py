"""Descriptive statistics, percentiles, correlation, regressions, distances,
sampling and transforms for sequences of floats."""

__version__ = "0.1.0"