"""Percentiles, quartiles and quartile-based outlier detection."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .core import _sorted_copy, mean, median
from .errors import BoundsError, EmptyInputError


def _values(data: Iterable[float]) -> list[float]:
    values = [float(v) for v in data]
    if not values:
        raise EmptyInputError()
    return values


def _median_or_nan(values: Sequence[float]) -> float:
    return median(values) if values else math.nan


def percentile(data: Iterable[float], percent: float) -> float:
    """Return the value below which ``percent`` percent of the data falls.

    Between two ranks the mean of both neighbours is taken. A single value
    is returned as is; otherwise ``percent`` must lie in (0, 100].
    """
    values = _values(data)
    if len(values) == 1:
        return values[0]
    if not 0 < percent <= 100:
        raise BoundsError()

    ordered = _sorted_copy(values)
    index = (percent / 100) * len(ordered)
    whole = int(index)
    if index == whole:
        return ordered[whole - 1]
    if index > 1:
        return mean(ordered[whole - 1 : whole + 1])
    raise BoundsError()


def percentile_nearest_rank(data: Iterable[float], percent: float) -> float:
    """Return the percentile using the nearest-rank method; ``percent`` in [0, 100]."""
    values = _values(data)
    if not 0 <= percent <= 100:
        raise BoundsError()

    ordered = _sorted_copy(values)
    if percent == 100:
        return ordered[-1]

    rank = math.ceil(len(ordered) * percent / 100)
    if rank == 0:
        return ordered[0]
    return ordered[rank - 1]


@dataclass(frozen=True)
class Quartiles:
    """The three quartile points of a data set."""

    q1: float
    q2: float
    q3: float


def quartile(data: Iterable[float]) -> Quartiles:
    """Return the three quartile points.

    Q1 and Q3 are the medians of the lower and upper halves; with an odd
    count the middle value belongs to neither half. An empty half gives NaN.
    """
    ordered = _sorted_copy(_values(data))
    half, odd = divmod(len(ordered), 2)
    return Quartiles(
        _median_or_nan(ordered[:half]),
        median(ordered),
        _median_or_nan(ordered[half + odd :]),
    )


def inter_quartile_range(data: Iterable[float]) -> float:
    """Return the range between the first and third quartiles."""
    qs = quartile(data)
    return qs.q3 - qs.q1


def midhinge(data: Iterable[float]) -> float:
    """Return the average of the first and third quartiles."""
    qs = quartile(data)
    return (qs.q1 + qs.q3) / 2


def trimean(data: Iterable[float]) -> float:
    """Return the average of the median and the midhinge."""
    qs = quartile(data)
    return (qs.q1 + (qs.q2 * 2) + qs.q3) / 4


@dataclass
class Outliers:
    """Mild and extreme outliers, each in ascending order."""

    mild: list[float] = field(default_factory=list)
    extreme: list[float] = field(default_factory=list)


def quartile_outliers(data: Iterable[float]) -> Outliers:
    """Find values beyond the inner (1.5 IQR) and outer (3 IQR) fences."""
    ordered = _sorted_copy(_values(data))
    qs = quartile(ordered)
    iqr = qs.q3 - qs.q1

    lower_inner = qs.q1 - (1.5 * iqr)
    upper_inner = qs.q3 + (1.5 * iqr)
    lower_outer = qs.q1 - (3 * iqr)
    upper_outer = qs.q3 + (3 * iqr)

    result = Outliers()
    for value in ordered:
        if value < lower_outer or value > upper_outer:
            result.extreme.append(value)
        elif value < lower_inner or value > upper_inner:
            result.mild.append(value)
    return result