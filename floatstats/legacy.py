"""Short names kept for compatibility with older callers."""

from __future__ import annotations

from collections.abc import Iterable

from .regression import (
    Coordinate,
    exponential_regression,
    linear_regression,
    logarithmic_regression,
)
from .spread import (
    population_variance,
    sample_variance,
    standard_deviation_population,
    standard_deviation_sample,
)


def var_p(data: Iterable[float]) -> float:
    """Shortcut for population_variance."""
    return population_variance(data)


def var_s(data: Iterable[float]) -> float:
    """Shortcut for sample_variance."""
    return sample_variance(data)


def std_dev_p(data: Iterable[float]) -> float:
    """Shortcut for standard_deviation_population."""
    return standard_deviation_population(data)


def std_dev_s(data: Iterable[float]) -> float:
    """Shortcut for standard_deviation_sample."""
    return standard_deviation_sample(data)


def lin_reg(series: Iterable[Coordinate | tuple[float, float]]) -> list[Coordinate]:
    """Shortcut for linear_regression."""
    return linear_regression(series)


def exp_reg(series: Iterable[Coordinate | tuple[float, float]]) -> list[Coordinate]:
    """Shortcut for exponential_regression."""
    return exponential_regression(series)


def log_reg(series: Iterable[Coordinate | tuple[float, float]]) -> list[Coordinate]:
    """Shortcut for logarithmic_regression."""
    return logarithmic_regression(series)