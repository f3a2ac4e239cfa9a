import pytest

from floatstats.distances import (
    chebyshev_distance,
    euclidean_distance,
    manhattan_distance,
    minkowski_distance,
)
from floatstats.errors import EmptyInputError, InfValueError, SizeError

X = [2, 3, 4, 5, 6, 7, 8]
Y = [8, 7, 6, 5, 4, 3, 2]


@pytest.mark.parametrize(
    "func, expected",
    [
        (chebyshev_distance, 6),
        (manhattan_distance, 24),
        (euclidean_distance, 10.583005244258363),
    ],
)
def test_distances(func, expected):
    assert func(X, Y) == expected


@pytest.mark.parametrize("func", [chebyshev_distance, manhattan_distance, euclidean_distance])
def test_distance_empty(func):
    with pytest.raises(EmptyInputError):
        func([], [])


@pytest.mark.parametrize("func", [chebyshev_distance, manhattan_distance, euclidean_distance])
def test_distance_size_mismatch(func):
    with pytest.raises(SizeError):
        func([1, 2, 3], [1, 4])


def test_minkowski_order_one_is_manhattan():
    assert minkowski_distance(X, Y, 1) == 24


def test_minkowski_order_two_is_euclidean():
    assert minkowski_distance(X, Y, 2) == pytest.approx(10.583005244258363, rel=1e-15)


def test_minkowski_high_order_between_chebyshev_and_euclidean():
    distance = minkowski_distance(X, Y, 99)
    assert chebyshev_distance(X, Y) <= distance <= euclidean_distance(X, Y)


def test_minkowski_empty():
    with pytest.raises(EmptyInputError):
        minkowski_distance([], [], 3)


def test_minkowski_size_mismatch():
    with pytest.raises(SizeError):
        minkowski_distance([1, 2, 3], [1, 4], 3)


def test_minkowski_infinite():
    with pytest.raises(InfValueError):
        minkowski_distance([999, 999, 999], [1, 1, 1], 1000)