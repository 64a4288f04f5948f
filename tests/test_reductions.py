# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from densematrix import AxisError, Matrix
from densematrix.reductions import median, std


@pytest.fixture
def A():
    return Matrix([[1, 2], [3, 4]])


def test_whole_matrix_reductions(A):
    assert A.sum() == 10.0
    assert A.average() == 2.5
    assert A.mean() == 2.5
    assert A.median() == 2.5
    assert math.isclose(A.std(), math.sqrt(1.25))


def test_axis_zero_reduces_each_row(A):
    s = A.sum(axis=0)
    assert s.shape == (2, 1)
    assert s == Matrix([[3], [7]])
    assert A.average(axis=0) == Matrix([[1.5], [3.5]])
    assert A.std(axis=0) == Matrix([[0.5], [0.5]])


def test_axis_one_reduces_each_column(A):
    s = A.sum(axis=1)
    assert s.shape == (1, 2)
    assert s == Matrix([[4, 6]])
    assert A.median(axis=1) == Matrix([[2, 3]])


def test_median_odd_and_even():
    assert Matrix([[3, 1, 2]]).median() == 2.0
    assert Matrix([[4, 1, 3, 2]]).median() == 2.5
    M = Matrix([[9, 1], [5, 3], [7, 2]])
    assert M.median(axis=1) == Matrix([[7, 2]])
    assert median(np.array([5.0])) == 5.0


def test_reductions_match_numpy():
    rng = np.random.default_rng(0)
    a = rng.standard_normal((6, 5))
    M = Matrix(a)
    np.testing.assert_allclose(M.std(axis=0).to_numpy().ravel(), a.std(axis=1))
    np.testing.assert_allclose(M.std(axis=1).to_numpy().ravel(), a.std(axis=0))
    np.testing.assert_allclose(M.median(axis=0).to_numpy().ravel(), np.median(a, axis=1))
    assert math.isclose(M.std(), float(a.std()))
    assert math.isclose(std(a.ravel()), float(np.std(a, ddof=0)))


def test_axis_and_scalar_forms_agree():
    rng = np.random.default_rng(1)
    M = Matrix(rng.standard_normal((4, 7)))
    assert math.isclose(M.sum(axis=0).sum(), M.sum())
    assert math.isclose(M.sum(axis=1).sum(), M.sum())
    assert math.isclose(M.average(axis=1).average(), M.average())


@pytest.mark.parametrize("axis", [2, -1, "0", True, 0.0])
def test_invalid_axis(A, axis):
    with pytest.raises(AxisError):
        A.sum(axis=axis)
