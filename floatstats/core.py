"""Basic descriptive statistics over sequences of floats.

Example::

    data = [1.0, 2.1, 3.2, 4.823, 4.1, 5.8]
    median(data)                      # 3.65
    round_half_up(median(data), 0)    # 4.0

Every function raises EmptyInputError when given no values.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import reduce
from itertools import accumulate
from operator import add

from .errors import EmptyInputError, NegativeError, ZeroError


def _values(data: Iterable[float]) -> list[float]:
    values = [float(v) for v in data]
    if not values:
        raise EmptyInputError()
    return values


def _sorted_copy(values: Iterable[float]) -> list[float]:
    """Sort ascending with NaN values placed first."""
    return sorted(values, key=lambda v: (not math.isnan(v), v))


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def total(data: Iterable[float]) -> float:
    """Add all the values together, left to right."""
    return reduce(add, _values(data), 0.0)


def minimum(data: Iterable[float]) -> float:
    """Return the lowest value."""
    return min(_values(data))


def maximum(data: Iterable[float]) -> float:
    """Return the highest value."""
    return max(_values(data))


def mean(data: Iterable[float]) -> float:
    """Return the arithmetic mean."""
    values = _values(data)
    return total(values) / len(values)


def geometric_mean(data: Iterable[float]) -> float:
    """Return the geometric mean.

    A running product of zero restarts from the next value.
    """
    values = _values(data)
    product = 0.0
    for value in values:
        product = value if product == 0 else product * value
    return _pow(product, 1 / len(values))


def harmonic_mean(data: Iterable[float]) -> float:
    """Return the harmonic mean; negative or zero values are rejected."""
    values = _values(data)
    reciprocals = 0.0
    for value in values:
        if value < 0:
            raise NegativeError()
        if value == 0:
            raise ZeroError()
        reciprocals += 1 / value
    return len(values) / reciprocals


def median(data: Iterable[float]) -> float:
    """Return the median without changing the input."""
    ordered = _sorted_copy(_values(data))
    half, odd = divmod(len(ordered), 2)
    if odd:
        return ordered[half]
    return mean(ordered[half - 1 : half + 1])


def mode(data: Iterable[float]) -> list[float]:
    """Return the most frequent value(s) in ascending order.

    A single value is its own mode; when no value repeats more often than
    the others the result is empty.
    """
    values = _values(data)
    length = len(values)
    if length == 1:
        return values

    ordered = _sorted_copy(values)
    modes: list[float] = []
    count = max_count = 1
    for previous, current in zip(ordered, ordered[1:]):
        if current == previous:
            count += 1
        elif count == max_count and max_count != 1:
            modes.append(previous)
            count = 1
        elif count > max_count:
            modes = [previous]
            max_count, count = count, 1
        else:
            count = 1

    if count == max_count:
        modes.append(ordered[-1])
    elif count > max_count:
        modes = [ordered[-1]]
        max_count = count

    if max_count == 1 or (len(modes) * max_count == length and max_count != length):
        return []
    return modes


def cumulative_sum(data: Iterable[float]) -> list[float]:
    """Return the running totals of the values."""
    return list(accumulate(_values(data)))