"""A list of floats with the package's statistics as methods."""

from __future__ import annotations

from collections.abc import Iterable

from . import core, distances, percentile, sampling, spread, transforms
from .percentile import Outliers, Quartiles

# distances is imported so that the namespace of operations is complete for
# callers that reach through this module; it holds no per-data methods.
del distances


class Float64Data(list):
    """A list of floats offering every statistic as a method."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        super().__init__(float(v) for v in values)

    def min(self) -> float:
        """Return the lowest value."""
        return core.minimum(self)

    def max(self) -> float:
        """Return the highest value."""
        return core.maximum(self)

    def sum(self) -> float:
        """Return the total of all values."""
        return core.total(self)

    def cumulative_sum(self) -> list[float]:
        """Return the running totals."""
        return core.cumulative_sum(self)

    def mean(self) -> float:
        """Return the arithmetic mean."""
        return core.mean(self)

    def median(self) -> float:
        """Return the median."""
        return core.median(self)

    def mode(self) -> list[float]:
        """Return the most frequent value(s)."""
        return core.mode(self)

    def geometric_mean(self) -> float:
        """Return the geometric mean."""
        return core.geometric_mean(self)

    def harmonic_mean(self) -> float:
        """Return the harmonic mean."""
        return core.harmonic_mean(self)

    def median_absolute_deviation(self) -> float:
        """Return the median of the absolute deviations from the median."""
        return spread.median_absolute_deviation(self)

    def median_absolute_deviation_population(self) -> float:
        """Return the median absolute deviation from the population median."""
        return spread.median_absolute_deviation_population(self)

    def standard_deviation(self) -> float:
        """Return the population standard deviation."""
        return spread.standard_deviation(self)

    def standard_deviation_population(self) -> float:
        """Return the population standard deviation."""
        return spread.standard_deviation_population(self)

    def standard_deviation_sample(self) -> float:
        """Return the sample standard deviation."""
        return spread.standard_deviation_sample(self)

    def quartile_outliers(self) -> Outliers:
        """Return the mild and extreme outliers."""
        return percentile.quartile_outliers(self)

    def percentile(self, percent: float) -> float:
        """Return the given percentile."""
        return percentile.percentile(self, percent)

    def percentile_nearest_rank(self, percent: float) -> float:
        """Return the given percentile by the nearest-rank method."""
        return percentile.percentile_nearest_rank(self, percent)

    def correlation(self, other: Iterable[float]) -> float:
        """Return the correlation with ``other``."""
        return spread.correlation(self, other)

    def auto_correlation(self, lags: int) -> float:
        """Return the autocorrelation for ``lags``."""
        return spread.auto_correlation(self, lags)

    def pearson(self, other: Iterable[float]) -> float:
        """Return the Pearson correlation with ``other``."""
        return spread.pearson(self, other)

    def quartile(self, other: Iterable[float]) -> Quartiles:
        """Return the quartiles of ``other``."""
        return percentile.quartile(other)

    def inter_quartile_range(self) -> float:
        """Return the range between the first and third quartiles."""
        return percentile.inter_quartile_range(self)

    def midhinge(self, other: Iterable[float]) -> float:
        """Return the midhinge of ``other``."""
        return percentile.midhinge(other)

    def trimean(self, other: Iterable[float]) -> float:
        """Return the trimean of ``other``."""
        return percentile.trimean(other)

    def sample(self, take: int, replacement: bool) -> list[float]:
        """Draw ``take`` random values, with or without replacement."""
        return sampling.sample(self, take, replacement)

    def variance(self) -> float:
        """Return the population variance."""
        return spread.variance(self)

    def population_variance(self) -> float:
        """Return the population variance."""
        return spread.population_variance(self)

    def sample_variance(self) -> float:
        """Return the sample variance."""
        return spread.sample_variance(self)

    def covariance(self, other: Iterable[float]) -> float:
        """Return the sample covariance with ``other``."""
        return spread.covariance(self, other)

    def covariance_population(self, other: Iterable[float]) -> float:
        """Return the population covariance with ``other``."""
        return spread.covariance_population(self, other)

    def sigmoid(self) -> list[float]:
        """Return the values mapped onto the sigmoid curve."""
        return transforms.sigmoid(self)

    def softmax(self) -> list[float]:
        """Return the softmax probabilities of the values."""
        return transforms.softmax(self)

    def entropy(self) -> float:
        """Return the entropy of the normalised values."""
        return transforms.entropy(self)