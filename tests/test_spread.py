import pytest

from floatstats.errors import EmptyInputError, SizeError
from floatstats.rounding import round_half_up
from floatstats.spread import (
    auto_correlation,
    correlation,
    covariance,
    covariance_population,
    median_absolute_deviation,
    median_absolute_deviation_population,
    pearson,
    population_variance,
    sample_variance,
    standard_deviation,
    standard_deviation_population,
    standard_deviation_sample,
    variance,
)

# Reference readings written as hundred-thousandths past 2.00 (in tens).
_MAVRO_TENS = """
18 17 18 19 18 17 15 14 15 15 17 18 18 19 19 21 20 16 14 13 13 15 15 16 15
14 13 14 15 14 15 16 15 16 19 20 20 21 22 23 24 25 27 26 26 26 27 26 25 24
"""
MAVRO = [float(f"2.00{d}0") for d in _MAVRO_TENS.split()]

# Reference readings written as hundredths above 299.
_MICHELSON_HUNDREDTHS = """
85 74 90 107 93 85 95 98 98 88 100 98 93 65 76 81 100 100 96 96 96 94 96 94
88 80 85 88 90 84 83 79 81 88 88 83 80 79 76 80 88 88 88 86 72 72 62 86
97 95 88 91 85 87 84 84 85 84 84 84 89 81 81 82 80 77 76 74 75 76 91 92
89 86 88 72 84 85 85 78 89 84 78 81 76 81 79 81 82 85 87 87 81 74 81 94
95 80 81 87
"""
MICHELSON = [
    float(f"{299 + v // 100}.{v % 100:02d}")
    for v in map(int, _MICHELSON_HUNDREDTHS.split())
]

NUMACC1 = [10000001, 10000003, 10000002]


def _numacc(first, low, high):
    values = [first]
    for _ in range(500):
        values.extend([low, high])
    return values


NUMACC2 = _numacc(1.2, 1.1, 1.3)
NUMACC3 = _numacc(1000000.2, 1000000.1, 1000000.3)
NUMACC4 = _numacc(10000000.2, 10000000.1, 10000000.3)


def test_variance_is_population_variance():
    assert variance([1, 2, 3]) == population_variance([1, 2, 3])


def test_population_variance():
    assert round_half_up(population_variance([1, 2, 3]), 1) == 0.7
    with pytest.raises(EmptyInputError):
        population_variance([])


def test_sample_variance():
    assert sample_variance([1, 2, 3]) == 1.0
    with pytest.raises(EmptyInputError):
        sample_variance([])


def test_examples_variance():
    assert population_variance([1, 2, 3, 4, 5]) == 2.0
    assert sample_variance([1, 2, 3, 4, 5]) == 2.5


def test_covariance():
    s1 = [1, 2, 3, 4, 5]
    assert covariance(s1, [1, 2, 3, 5, 6]) == 3.2499999999999996
    with pytest.raises(SizeError):
        covariance(s1, [10, -51.2, 8])
    with pytest.raises(EmptyInputError):
        covariance(s1, [])


def test_covariance_population():
    s1 = [1, 2, 3.5, 3.7, 8, 12]
    assert covariance_population(s1, [0.5, 1, 2.1, 3.4, 3.4, 4]) == 4.191666666666666
    with pytest.raises(SizeError):
        covariance_population(s1, [10, -51.2, 8])
    with pytest.raises(EmptyInputError):
        covariance_population(s1, [])


def test_median_absolute_deviation():
    assert round_half_up(median_absolute_deviation([1, 2, 3]), 2) == 1.0
    assert round_half_up(median_absolute_deviation([-2, 0, 4, 5, 7]), 2) == 3.0
    with pytest.raises(EmptyInputError):
        median_absolute_deviation([])


def test_median_absolute_deviation_population_does_not_modify_input():
    data = [3.0, 1.0, 2.0]
    assert median_absolute_deviation_population(data) == 1.0
    assert data == [3.0, 1.0, 2.0]


def test_standard_deviation_is_population():
    assert standard_deviation([1, 2, 3]) == standard_deviation_population([1, 2, 3])


def test_standard_deviation_population():
    assert round_half_up(standard_deviation_population([1, 2, 3]), 2) == 0.82
    assert round_half_up(standard_deviation_population([-1, -2, -3.3]), 2) == 0.94
    assert standard_deviation_population([1, 2, 3]) == 0.816496580927726
    with pytest.raises(EmptyInputError):
        standard_deviation_population([])


def test_standard_deviation_sample():
    assert round_half_up(standard_deviation_sample([1, 2, 3]), 2) == 1.0
    assert round_half_up(standard_deviation_sample([-1, -2, -3.3]), 2) == 1.15
    with pytest.raises(EmptyInputError):
        standard_deviation_sample([])


@pytest.mark.parametrize("func", [correlation, pearson])
def test_correlation_values(func):
    assert func([1, 2, 3, 4, 5], [1, 2, 3, 5, 6]) == 0.9912407071619302
    assert func([0, 0, 0], [0, 0, 0]) == 0.0


@pytest.mark.parametrize("func", [correlation, pearson])
def test_correlation_errors(func):
    with pytest.raises(EmptyInputError):
        func([], [])
    with pytest.raises(SizeError):
        func([1, 2, 3, 4, 5], [10, -51.2, 8])


def test_auto_correlation():
    assert auto_correlation([1, 2, 3, 4, 5], 1) == 0.4
    with pytest.raises(EmptyInputError):
        auto_correlation([], 1)


def test_auto_correlation_without_lags_is_zero():
    assert auto_correlation([1, 2, 3], 0) == 0.0


@pytest.mark.parametrize(
    "data, sdev, sdev_tol, ac, ac_tol",
    [
        (MAVRO, 0.000429123454003053, 1e-13, 0.937989183438248, 1e-13),
        (MICHELSON, 0.0790105478190518, 1e-13, 0.535199668621283, 1e-13),
        (NUMACC1, 1.0, 1e-13, -0.5, 1e-15),
        (NUMACC2, 0.1, 1e-10, -0.999, 1e-10),
        (NUMACC3, 0.1, 1e-9, -0.999, 1e-10),
        (NUMACC4, 0.1, 1e-7, -0.999, 1e-7),
    ],
)
def test_nist_reference_data(data, sdev, sdev_tol, ac, ac_tol):
    assert standard_deviation_sample(data) == pytest.approx(sdev, rel=sdev_tol, abs=0)
    assert auto_correlation(data, 1) == pytest.approx(ac, rel=ac_tol, abs=0)