"""Distances between two equally long data points."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .errors import EmptyInputError, InfValueError, SizeError


def _pair(x: Iterable[float], y: Iterable[float]) -> list[tuple[float, float]]:
    first = [float(v) for v in x]
    second = [float(v) for v in y]
    if not first or not second:
        raise EmptyInputError()
    if len(first) != len(second):
        raise SizeError()
    return list(zip(first, second))


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.inf if base == 0 else math.nan


def chebyshev_distance(x: Iterable[float], y: Iterable[float]) -> float:
    """Return the largest absolute difference between matching coordinates."""
    return max([0.0, *(abs(a - b) for a, b in _pair(x, y))])


def euclidean_distance(x: Iterable[float], y: Iterable[float]) -> float:
    """Return the straight-line distance."""
    squares = 0.0
    for a, b in _pair(x, y):
        squares += (a - b) * (a - b)
    return math.sqrt(squares)


def manhattan_distance(x: Iterable[float], y: Iterable[float]) -> float:
    """Return the sum of absolute differences."""
    distance = 0.0
    for a, b in _pair(x, y):
        distance += abs(a - b)
    return distance


def minkowski_distance(x: Iterable[float], y: Iterable[float], lam: float) -> float:
    """Return the Minkowski distance of order ``lam``.

    ``lam`` of 1 gives the Manhattan distance, 2 the Euclidean distance and,
    as it grows, the result tends to the Chebyshev distance. Raises
    InfValueError when the result is infinite.
    """
    distance = 0.0
    for a, b in _pair(x, y):
        distance += _power(abs(a - b), lam)
    exponent = math.copysign(math.inf, lam) if lam == 0 else 1 / lam
    distance = _power(distance, exponent)
    if distance == math.inf:
        raise InfValueError()
    return distance