# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from densematrix import (
    Matrix,
    NotInvertibleError,
    ShapeMismatchError,
    least_squares,
    project_onto_colspace,
    solve,
)

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def test_solve_random_systems():
    rng = np.random.default_rng(0)

    for i in range(TEST_ITERATIONS):
        n = 6
        A = rng.standard_normal((n, n)) + n * np.eye(n)
        # Generate a random vector x (the true solution)
        x_true = rng.random((n, 1))
        b = A @ x_true

        x = solve(Matrix(A), Matrix(b))
        x_np = np.linalg.solve(A, b)
        logger.debug(f"\n==== Results ====\nOurs:\n{x}\nNumpy:\n{x_np}")
        np.testing.assert_allclose(x.to_numpy(), x_np, rtol=1e-8, atol=1e-12)


def test_solve_errors():
    with pytest.raises(ShapeMismatchError):
        solve(Matrix([[1, 0], [0, 1]]), Matrix([[1], [2], [3]]))
    with pytest.raises(NotInvertibleError):
        solve(Matrix([[1, 2], [2, 4]]), Matrix([[1], [2]]))


def test_projections():
    A = Matrix(
        [
            [1, 0],
            [1, 1],
            [1, 2],
        ]
    )
    b = Matrix(
        [
            [6],
            [0],
            [0],
        ]
    )

    x = least_squares(A, b)
    np.testing.assert_allclose(x.to_numpy(), np.array([[5], [-3]]), atol=1e-10)

    p = project_onto_colspace(A, b)
    np.testing.assert_allclose(
        p.to_numpy(),
        np.array(
            [
                [5],
                [2],
                [-1],
            ]
        ),
        atol=1e-10,
        verbose=True,
    )


def test_least_squares_matches_numpy():
    rng = np.random.default_rng(1)
    for _ in range(TEST_ITERATIONS):
        A = rng.standard_normal((10, 3))
        b = rng.standard_normal((10, 1))
        x = least_squares(Matrix(A), Matrix(b))
        x_np, *_ = np.linalg.lstsq(A, b, rcond=None)
        np.testing.assert_allclose(x.to_numpy(), x_np, rtol=1e-7, atol=1e-10)


def test_least_squares_dependent_columns():
    A = Matrix([[1, 2], [2, 4], [3, 6]])
    with pytest.raises(NotInvertibleError):
        least_squares(A, Matrix([[1], [2], [3]]))
