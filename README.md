# floatstats

A small statistics library for sequences of floating-point numbers, with no
dependencies outside the standard library. It covers the everyday
descriptive statistics (sum, min, max, mean, median, mode, variance,
standard deviation), percentiles and quartiles, outlier detection,
correlation, regressions, distance metrics, random sampling and a few
transforms such as sigmoid, softmax and entropy.

Every function accepts any iterable of numbers and converts the values to
floats. Functions never modify what you pass in; anything that needs sorting
works on a copy.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from floatstats.core import median, mean, mode
from floatstats.rounding import round_half_up

data = [1.0, 2.1, 3.2, 4.823, 4.1, 5.8]

m = median(data)
print(m)                      # 3.65
print(round_half_up(m, 0))    # 4.0

print(mean([1, 2, 3, 4, 5]))             # 3.0
print(mode([5, 5, 3, 3, 4, 2, 1]))       # [3.0, 5.0]
```

`mode` returns the most frequent values in ascending order; a single value
is its own mode, and when no value occurs more often than the others the
result is an empty list.

## Modules

| Module | What it offers |
| --- | --- |
| `floatstats.core` | `total`, `minimum`, `maximum`, `mean`, `geometric_mean`, `harmonic_mean`, `median`, `mode`, `cumulative_sum` |
| `floatstats.spread` | `variance`, `population_variance`, `sample_variance`, `covariance`, `covariance_population`, `standard_deviation`, `standard_deviation_population`, `standard_deviation_sample`, `median_absolute_deviation`, `median_absolute_deviation_population`, `correlation`, `pearson`, `auto_correlation` |
| `floatstats.percentile` | `percentile`, `percentile_nearest_rank`, `quartile` (returns `Quartiles` with `q1`, `q2`, `q3`), `inter_quartile_range`, `midhinge`, `trimean`, `quartile_outliers` (returns `Outliers` with `mild` and `extreme`) |
| `floatstats.distances` | `chebyshev_distance`, `euclidean_distance`, `manhattan_distance`, `minkowski_distance` |
| `floatstats.regression` | `Coordinate`, `linear_regression`, `exponential_regression`, `logarithmic_regression` |
| `floatstats.transforms` | `sigmoid`, `softmax`, `entropy` |
| `floatstats.sampling` | `sample` (with or without replacement), `stable_sample` (keeps the original order) |
| `floatstats.rounding` | `round_half_up` (halves round away from zero), `float_to_int` |
| `floatstats.load` | `load_raw_data`: turns mixed input into a `Float64Data` |
| `floatstats.legacy` | short aliases: `var_p`, `var_s`, `std_dev_p`, `std_dev_s`, `lin_reg`, `exp_reg`, `log_reg` |
| `floatstats.data` | `Float64Data`, a list of floats with the statistics as methods |
| `floatstats.errors` | the exception classes |
| `floatstats.demo` | the `floatstats-demo` command |

## More examples

```python
from floatstats.percentile import percentile_nearest_rank, quartile
from floatstats.spread import correlation, sample_variance
from floatstats.distances import euclidean_distance, minkowski_distance

print(percentile_nearest_rank([35, 20, 15, 40, 50], 75))      # 40.0
print(quartile([7, 15, 36, 39, 40, 41]))   # Quartiles(q1=15.0, q2=37.5, q3=40.0)
print(sample_variance([1, 2, 3, 4, 5]))                       # 2.5
print(correlation([1, 2, 3, 4, 5], [1, 2, 3, 5, 6]))          # 0.9912407071619302

x = [2, 3, 4, 5, 6, 7, 8]
y = [8, 7, 6, 5, 4, 3, 2]
print(euclidean_distance(x, y))       # 10.583005244258363
print(minkowski_distance(x, y, 1))    # 24.0
```

`percentile` takes the mean of the two neighbouring values when the rank
falls between them; `percent` must lie in (0, 100] unless the data holds a
single value. `percentile_nearest_rank` accepts `percent` in [0, 100].

Regressions take a sequence of `Coordinate` objects (or `(x, y)` tuples) and
return the fitted points as a list of `Coordinate`:

```python
from floatstats.regression import Coordinate, linear_regression

series = [Coordinate(1, 2.3), Coordinate(2, 3.3), Coordinate(3, 3.7)]
for point in linear_regression(series):
    print(point.x, point.y)
```

`load_raw_data` converts a list, other iterable, or a mapping keyed by
position `0 .. n-1`. Numbers become floats, booleans become `1.0` or `0.0`,
strings are parsed as floats and `timedelta` values become nanoseconds;
values that cannot be converted are skipped.

```python
from floatstats.load import load_raw_data

print(load_raw_data([1.0, "2", True, "shoe"]))   # [1.0, 2.0, 1.0]
```

The `Float64Data` type is a `list` subclass that offers the statistics as
methods:

```python
from floatstats.data import Float64Data

d = Float64Data([1, 2, 3, 4, 4, 5])
print(d.min(), d.max(), d.sum())   # 1.0 5.0 19.0
print(d.median())                  # 3.5
```

Note that `Float64Data.quartile`, `midhinge` and `trimean` take a sequence
argument and compute their result on that argument, not on the data itself.

## Errors

Invalid input raises an exception from `floatstats.errors`:

- `EmptyInputError` – the input sequence is empty
- `SizeError` – two sequences that must match in length do not
- `BoundsError` – a percentile or sample size is out of range
- `NegativeError`, `ZeroError` – the harmonic mean met a negative or zero value
- `NaNError` – rounding was asked to round NaN
- `InfValueError` – a Minkowski distance came out infinite
- `YCoordError` – an exponential regression met a negative y value

All of them derive from `StatsError`, which is itself a `ValueError`.

```python
from floatstats.core import mean
from floatstats.errors import EmptyInputError

try:
    mean([])
except EmptyInputError as exc:
    print(exc)   # Input must not be empty.
```

## Demo

A command that prints one labelled line per example statistic, computed on
fixed sample data:

```
floatstats-demo
```

It takes no options other than `--help`. It does not read data from files or
standard input; to analyse your own data, call the library functions.