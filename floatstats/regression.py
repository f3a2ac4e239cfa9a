"""Least-squares regressions over series of coordinates."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import EmptyInputError, YCoordError
from .spread import _divide


@dataclass(frozen=True)
class Coordinate:
    """A point of a data series."""

    x: float
    y: float


def _points(series: Iterable[Coordinate | tuple[float, float]]) -> list[Coordinate]:
    points = [p if isinstance(p, Coordinate) else Coordinate(*p) for p in series]
    if not points:
        raise EmptyInputError()
    return points


def _log(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def linear_regression(series: Iterable[Coordinate | tuple[float, float]]) -> list[Coordinate]:
    """Return the points of the least-squares line at each x of the series."""
    points = _points(series)
    n = float(len(points))
    sum_x = sum_y = sum_xx = sum_xy = 0.0
    for p in points:
        sum_x += p.x
        sum_y += p.y
        sum_xx += p.x * p.x
        sum_xy += p.x * p.y

    gradient = _divide(n * sum_xy - sum_x * sum_y, n * sum_xx - sum_x * sum_x)
    intercept = (sum_y / n) - (gradient * sum_x / n)
    return [Coordinate(p.x, p.x * gradient + intercept) for p in points]


def exponential_regression(
    series: Iterable[Coordinate | tuple[float, float]],
) -> list[Coordinate]:
    """Return the points of the fitted curve y = a * e^(b * x).

    Raises YCoordError when any y is negative.
    """
    points = _points(series)
    sum_y = sum_xxy = sum_ylny = sum_xylny = sum_xy = 0.0
    for p in points:
        if p.y < 0:
            raise YCoordError()
        log_y = _log(p.y)
        sum_y += p.y
        sum_xxy += p.x * p.x * p.y
        sum_ylny += p.y * log_y
        sum_xylny += p.x * p.y * log_y
        sum_xy += p.x * p.y

    denominator = sum_y * sum_xxy - sum_xy * sum_xy
    a = _power(math.e, _divide(sum_xxy * sum_ylny - sum_xy * sum_xylny, denominator))
    b = _divide(sum_y * sum_xylny - sum_xy * sum_ylny, denominator)
    return [Coordinate(p.x, a * _exp(b * p.x)) for p in points]


def logarithmic_regression(
    series: Iterable[Coordinate | tuple[float, float]],
) -> list[Coordinate]:
    """Return the points of the fitted curve y = b + a * ln(x)."""
    points = _points(series)
    n = float(len(points))
    sum_lnx = sum_ylnx = sum_y = sum_lnx2 = 0.0
    for p in points:
        log_x = _log(p.x)
        sum_lnx += log_x
        sum_ylnx += p.y * log_x
        sum_y += p.y
        sum_lnx2 += log_x * log_x

    a = _divide(n * sum_ylnx - sum_y * sum_lnx, n * sum_lnx2 - sum_lnx * sum_lnx)
    b = (sum_y - a * sum_lnx) / n
    return [Coordinate(p.x, b + a * _log(p.x)) for p in points]