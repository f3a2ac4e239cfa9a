"""Rounding helpers that round halves away from zero."""

from __future__ import annotations

import math

from .errors import NaNError


def round_half_up(value: float, places: int) -> float:
    """Round ``value`` to ``places`` decimals, halves away from zero.

    Raises NaNError when ``value`` is not a number.
    """
    if math.isnan(value):
        raise NaNError()

    sign = 1.0
    if value < 0:
        sign = -1.0
        value = -value

    precision = math.pow(10, places)
    digit = value * precision
    if math.isinf(digit):
        return digit / precision * sign

    fraction, _ = math.modf(digit)
    rounded = float(math.ceil(digit)) if fraction >= 0.5 else float(math.floor(digit))
    return rounded / precision * sign


def float_to_int(value: float) -> int:
    """Round ``value`` to the nearest whole number and return it as an int."""
    return int(round_half_up(value, 0))