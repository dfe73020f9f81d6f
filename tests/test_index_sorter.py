"""
Tests for the ascending-time index permutation.
"""
import numpy as np
import pytest

from flowmap import InputShapeError, order


def test_order_sorts_ascending():
    values = [3.5, -1.0, 10.0, 0.0]
    perm = order(values)
    assert perm == [1, 3, 0, 2]
    assert [values[i] for i in perm] == sorted(values)


def test_order_is_stable_for_ties():
    values = [2.0, 1.0, 2.0, 1.0, 2.0]
    assert order(values) == [1, 3, 0, 2, 4]


def test_order_is_permutation():
    values = [5, 3, 5, 1, 9, 3]
    perm = order(values)
    assert sorted(perm) == list(range(len(values)))


def test_order_empty():
    assert order([]) == []


def test_order_accepts_numpy_array():
    assert order(np.array([2.0, 0.0, 1.0])) == [1, 2, 0]


def test_order_rejects_2d_input():
    with pytest.raises(InputShapeError):
        order([[1.0, 2.0], [3.0, 4.0]])
