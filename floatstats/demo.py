"""Command that prints a tour of the package's statistics."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from typing import Any

from .core import (
    cumulative_sum,
    geometric_mean,
    harmonic_mean,
    maximum,
    mean,
    median,
    minimum,
    mode,
    total,
)
from .data import Float64Data
from .distances import (
    chebyshev_distance,
    euclidean_distance,
    manhattan_distance,
    minkowski_distance,
)
from .load import load_raw_data
from .percentile import (
    Outliers,
    Quartiles,
    inter_quartile_range,
    midhinge,
    percentile,
    percentile_nearest_rank,
    quartile,
    quartile_outliers,
    trimean,
)
from .regression import (
    Coordinate,
    exponential_regression,
    linear_regression,
    logarithmic_regression,
)
from .rounding import round_half_up
from .sampling import sample
from .spread import (
    auto_correlation,
    correlation,
    median_absolute_deviation_population,
    population_variance,
    sample_variance,
    standard_deviation_population,
    standard_deviation_sample,
)
from .transforms import entropy, sigmoid, softmax


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, Coordinate):
        return f"{{{_fmt(value.x)} {_fmt(value.y)}}}"
    if isinstance(value, Quartiles):
        return f"{{{_fmt(value.q1)} {_fmt(value.q2)} {_fmt(value.q3)}}}"
    if isinstance(value, Outliers):
        return f"{{Mild:{_fmt(value.mild)} Extreme:{_fmt(value.extreme)}}}"
    if isinstance(value, list):
        return "[" + " ".join(_fmt(v) for v in value) + "]"
    return str(value)


def _examples() -> Iterator[tuple[str, Any]]:
    loaded = load_raw_data([1, 2, 3, 4, 5])
    yield "min", minimum(loaded)
    yield "max", maximum(loaded)
    yield "sum", total([1.1, 2.2, 3.3])
    yield "cumulative sum", cumulative_sum([1.1, 2.2, 3.3])
    yield "mean", mean([1, 2, 3, 4, 5])
    yield "median", median([1, 2, 3, 4, 5, 6, 7])
    yield "mode", mode([5, 5, 3, 3, 4, 2, 1])
    yield "population variance", population_variance([1, 2, 3, 4, 5])
    yield "sample variance", sample_variance([1, 2, 3, 4, 5])
    yield "median absolute deviation", median_absolute_deviation_population([1, 2, 3])
    yield "population standard deviation", standard_deviation_population([1, 2, 3])
    yield "sample standard deviation", standard_deviation_sample([1, 2, 3])
    yield "percentile", percentile([1, 2, 3, 4, 5], 75)
    yield "nearest rank percentile", percentile_nearest_rank([35, 20, 15, 40, 50], 75)

    series = [Coordinate(1, 2.3), Coordinate(2, 3.3), Coordinate(3, 3.7),
              Coordinate(4, 4.3), Coordinate(5, 5.3)]
    yield "linear regression", linear_regression(series)
    yield "exponential regression", exponential_regression(series)
    yield "logarithmic regression", logarithmic_regression(series)

    yield "sample", sample([0.1, 0.2, 0.3, 0.4], 3, False)
    yield "sample with replacement", sample([0.1, 0.2, 0.3, 0.4], 10, True)

    yield "quartile", quartile([7, 15, 36, 39, 40, 41])
    yield "inter quartile range", inter_quartile_range(
        [102, 104, 105, 107, 108, 109, 110, 112, 115, 116, 118]
    )
    spread_out = [1, 3, 4, 4, 6, 6, 6, 6, 7, 7, 7, 8, 8, 9, 9, 10, 11, 12, 13]
    yield "midhinge", midhinge(spread_out)
    yield "trimean", trimean(spread_out)
    yield "outliers", quartile_outliers([-1000, 1, 3, 4, 4, 6, 6, 6, 6, 7, 8, 15, 18, 100])

    yield "geometric mean", geometric_mean([10, 51.2, 8])
    yield "harmonic mean", harmonic_mean([1, 2, 3, 4, 5])
    yield "round", round_half_up(2.18978102189781, 3)

    x = [2, 3, 4, 5, 6, 7, 8]
    y = [8, 7, 6, 5, 4, 3, 2]
    yield "chebyshev distance", chebyshev_distance(x, y)
    yield "manhattan distance", manhattan_distance(x, y)
    yield "euclidean distance", euclidean_distance(x, y)
    yield "minkowski distance 1", minkowski_distance(x, y, 1)
    yield "minkowski distance 2", minkowski_distance(x, y, 2)
    yield "minkowski distance 99", minkowski_distance(x, y, 99)

    yield "correlation", correlation([1, 2, 3, 4, 5], [1, 2, 3, 5, 6])
    yield "auto correlation", auto_correlation([1, 2, 3, 4, 5], 1)
    yield "sigmoid", sigmoid([3.0, 1.0, 2.1])
    yield "softmax", softmax([3.0, 1.0, 0.2])
    yield "entropy", entropy([1.1, 2.2, 3.3])

    data = Float64Data([1, 2, 3, 4, 4, 5])
    yield "data min", data.min()
    yield "data max", data.max()
    yield "data sum", data.sum()


def main(argv: Sequence[str] | None = None) -> int:
    """Print one labelled line per example statistic."""
    parser = argparse.ArgumentParser(
        prog="floatstats-demo",
        description="Print example results of the statistics functions.",
    )
    parser.parse_args(argv)
    for label, value in _examples():
        print(f"{label}: {_fmt(value)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())