"""Element-wise transforms and entropy."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .core import maximum, total
from .errors import EmptyInputError
from .spread import _divide


def _values(data: Iterable[float]) -> list[float]:
    values = [float(v) for v in data]
    if not values:
        raise EmptyInputError()
    return values


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _log(value: float) -> float:
    if value > 0:
        return math.log(value)
    if value == 0:
        return -math.inf
    return math.nan


def sigmoid(data: Iterable[float]) -> list[float]:
    """Map each value onto the logistic s-shaped curve."""
    return [1 / (1 + _exp(-v)) for v in _values(data)]


def softmax(data: Iterable[float]) -> list[float]:
    """Map the values to probabilities in [0, 1] that sum to one."""
    values = _values(data)
    peak = maximum(values)
    shifted = [_exp(v - peak) for v in values]
    scale = total(shifted)
    return [_divide(s, scale) for s in shifted]


def entropy(data: Iterable[float]) -> float:
    """Return the entropy of the values after normalising them to sum to one."""
    values = _values(data)
    whole = total(values)
    result = 0.0
    for value in values:
        share = _divide(value, whole)
        if share == 0:
            continue
        result += share * _log(share)
    return -result