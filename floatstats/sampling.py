"""Random sampling from data."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .errors import BoundsError, EmptyInputError

_rng = random.Random()


def _values(data: Iterable[float]) -> list[float]:
    values = [float(v) for v in data]
    if not values:
        raise EmptyInputError()
    return values


def sample(data: Iterable[float], take: int, replacement: bool) -> list[float]:
    """Draw ``take`` values at random, with or without replacement.

    Without replacement ``take`` may not exceed the number of values.
    """
    values = _values(data)
    if replacement:
        return [_rng.choice(values) for _ in range(take)]
    if 0 <= take <= len(values):
        return _rng.sample(values, take)
    raise BoundsError()


def stable_sample(data: Iterable[float], take: int) -> list[float]:
    """Draw ``take`` values without replacement, keeping their original order."""
    values = _values(data)
    if not 0 <= take <= len(values):
        raise BoundsError()
    chosen = sorted(_rng.sample(range(len(values)), take))
    return [values[i] for i in chosen]