"""Measures of spread and association: variance, deviation, covariance, correlation."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .core import mean, median
from .errors import EmptyInputError, SizeError


def _values(data: Iterable[float]) -> list[float]:
    values = [float(v) for v in data]
    if not values:
        raise EmptyInputError()
    return values


def _pair(data1: Iterable[float], data2: Iterable[float]) -> tuple[list[float], list[float]]:
    first = [float(v) for v in data1]
    second = [float(v) for v in data2]
    if not first or not second:
        raise EmptyInputError()
    if len(first) != len(second):
        raise SizeError()
    return first, second


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero denominators give NaN or infinity."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _variance(data: Iterable[float], sample: bool) -> float:
    values = _values(data)
    centre = mean(values)
    squares = 0.0
    for value in values:
        squares += (value - centre) * (value - centre)
    return _divide(squares, len(values) - (1 if sample else 0))


def variance(data: Iterable[float]) -> float:
    """Return the population variance."""
    return population_variance(data)


def population_variance(data: Iterable[float]) -> float:
    """Return the variance of a whole population."""
    return _variance(data, sample=False)


def sample_variance(data: Iterable[float]) -> float:
    """Return the variance of a sample (divides by n - 1)."""
    return _variance(data, sample=True)


def covariance(data1: Iterable[float], data2: Iterable[float]) -> float:
    """Return the sample covariance of two equally long sequences."""
    first, second = _pair(data1, data2)
    mean1 = mean(first)
    mean2 = mean(second)
    running = 0.0
    for count, (a, b) in enumerate(zip(first, second), start=1):
        running += ((a - mean1) * (b - mean2) - running) / count
    length = len(first)
    return _divide(running * length, length - 1)


def covariance_population(data1: Iterable[float], data2: Iterable[float]) -> float:
    """Return the population covariance of two equally long sequences."""
    first, second = _pair(data1, data2)
    mean1 = mean(first)
    mean2 = mean(second)
    products = 0.0
    for a, b in zip(first, second):
        products += (a - mean1) * (b - mean2)
    return products / len(first)


def standard_deviation(data: Iterable[float]) -> float:
    """Return the population standard deviation."""
    return standard_deviation_population(data)


def standard_deviation_population(data: Iterable[float]) -> float:
    """Return the standard deviation of a whole population."""
    return math.sqrt(population_variance(data))


def standard_deviation_sample(data: Iterable[float]) -> float:
    """Return the standard deviation of a sample."""
    result = sample_variance(data)
    return result if math.isnan(result) else math.sqrt(result)


def median_absolute_deviation(data: Iterable[float]) -> float:
    """Return the median of the absolute deviations from the median."""
    return median_absolute_deviation_population(data)


def median_absolute_deviation_population(data: Iterable[float]) -> float:
    """Return the median of the absolute deviations from the population median."""
    values = _values(data)
    centre = median(values)
    return median(abs(value - centre) for value in values)


def correlation(data1: Iterable[float], data2: Iterable[float]) -> float:
    """Return the correlation of two sequences; 0 when either has no spread."""
    first, second = _pair(data1, data2)
    sdev1 = standard_deviation_population(first)
    sdev2 = standard_deviation_population(second)
    if sdev1 == 0 or sdev2 == 0:
        return 0.0
    return covariance_population(first, second) / (sdev1 * sdev2)


def pearson(data1: Iterable[float], data2: Iterable[float]) -> float:
    """Return the Pearson product-moment correlation coefficient."""
    return correlation(data1, data2)


def auto_correlation(data: Iterable[float], lags: int) -> float:
    """Return the correlation of a signal with a delayed copy of itself."""
    values = _values(data)
    centre = mean(values)
    first_delta = values[0] - centre
    result = 0.0
    q = 0.0
    for _ in range(lags):
        v = first_delta * first_delta
        for count, (previous, current) in enumerate(zip(values, values[1:]), start=2):
            delta0 = previous - centre
            delta1 = current - centre
            q += (delta0 * delta1 - q) / count
            v += (delta1 * delta1 - v) / count
        result = _divide(q, v)
    return result