"""Conversion of loosely typed collections into float data."""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Iterator, Mapping
from datetime import timedelta
from typing import Any

from .data import Float64Data


def _nanoseconds(delta: timedelta) -> float:
    whole_seconds = delta.days * 86_400 + delta.seconds
    return float(whole_seconds * 1_000_000_000 + delta.microseconds * 1_000)


def _parse_float(text: str) -> float | None:
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _convert(value: Any) -> float | None:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, timedelta):
        return _nanoseconds(value)
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        return _parse_float(value)
    return None


def _mapping_values(raw: Mapping[Any, Any]) -> Iterator[Any]:
    """Yield the values stored under keys 0 .. len(raw) - 1.

    A missing key counts as zero, except in a mapping of strings, where
    it is left out.
    """
    present = list(raw.values())
    all_strings = bool(present) and all(isinstance(v, str) for v in present)
    for key in range(len(raw)):
        if key in raw:
            yield raw[key]
        elif not all_strings:
            yield 0.0


def load_raw_data(raw: Any) -> Float64Data:
    """Convert a collection of mixed values into Float64Data.

    Accepts any iterable (other than a plain string) or a mapping keyed by
    position. Numbers become floats, booleans become 1.0 or 0.0, strings
    are parsed as floats, and timedeltas become a count of nanoseconds.
    Values that cannot be converted are skipped; anything that is not a
    collection yields empty data.
    """
    if isinstance(raw, str):
        return Float64Data()
    if isinstance(raw, Mapping):
        items: Iterable[Any] = _mapping_values(raw)
    elif isinstance(raw, Iterable):
        items = raw
    else:
        return Float64Data()
    return Float64Data(v for v in map(_convert, items) if v is not None)