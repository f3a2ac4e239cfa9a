import pytest

from floatstats.errors import EmptyInputError, YCoordError
from floatstats.regression import (
    Coordinate,
    exponential_regression,
    linear_regression,
    logarithmic_regression,
)
from floatstats.rounding import round_half_up

DATA = [
    Coordinate(1, 2.3),
    Coordinate(2, 3.3),
    Coordinate(3, 3.7),
    Coordinate(4, 4.3),
    Coordinate(5, 5.3),
]


def test_linear_regression():
    result = linear_regression(DATA)
    assert [p.y for p in result] == [
        2.3800000000000026,
        3.0800000000000014,
        3.7800000000000002,
        4.479999999999999,
        5.179999999999998,
    ]
    assert [p.x for p in result] == [1, 2, 3, 4, 5]


def test_linear_regression_three_points():
    result = linear_regression([Coordinate(1, 2.3), Coordinate(2, 3.3), Coordinate(3, 3.7)])
    assert result == [
        Coordinate(1, 2.400000000000001),
        Coordinate(2, 3.1),
        Coordinate(3, 3.7999999999999994),
    ]


def test_linear_regression_accepts_pairs():
    pairs = [(p.x, p.y) for p in DATA]
    assert linear_regression(pairs) == linear_regression(DATA)


def test_exponential_regression():
    result = exponential_regression(DATA)
    rounded = [round_half_up(p.y, 3) for p in result]
    assert rounded == [2.515, 3.032, 3.655, 4.407, 5.313]


def test_exponential_regression_negative_y():
    with pytest.raises(YCoordError):
        exponential_regression([Coordinate(1, -5), Coordinate(4, 25), Coordinate(6, 5)])


def test_logarithmic_regression():
    result = logarithmic_regression(DATA)
    assert [p.y for p in result] == pytest.approx(
        [
            2.1520822363811702,
            3.3305559222492214,
            4.019918836568674,
            4.509029608117273,
            4.888413396683663,
        ],
        rel=1e-12,
    )


@pytest.mark.parametrize(
    "func", [linear_regression, exponential_regression, logarithmic_regression]
)
def test_regression_empty(func):
    with pytest.raises(EmptyInputError):
        func([])