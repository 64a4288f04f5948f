# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Constructors and stacking helpers
"""

import math

import numpy as np

from .errors import ShapeError, ShapeMismatchError
from .matrix import Matrix
from .utils import ARANGE_TOL, check_dim


def zeros(height: int, width: int) -> Matrix:
    return ones(height, width, 0.0)


def ones(height: int, width: int, value: float = 1.0) -> Matrix:
    """height by width matrix with every entry set to value."""
    height = check_dim(height, "height")
    width = check_dim(width, "width")
    return Matrix(np.full((height, width), float(value)))


def identity(n: int) -> Matrix:
    n = check_dim(n, "n")
    return Matrix(np.eye(n))


def row_vector(values) -> Matrix:
    """1 by n matrix holding values in order."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 1 or arr.size == 0:
        raise ShapeError(f"expected a non-empty flat sequence, got shape {arr.shape}")
    return Matrix(arr.reshape(1, -1))


def column_vector(values) -> Matrix:
    """n by 1 matrix holding values in order."""
    return row_vector(values).transpose()


def arange(start: float, end: float, step: float = 1.0, tol: float = ARANGE_TOL) -> Matrix:
    """
    Row vector start, start + step, ... up to and including end.

    The count of steps is taken as floor((end - start) / step + tol), so an
    end that floating-point drift lands a hair short of is still included.

    Raises
    ------
    ValueError : if step is zero.
    ShapeError : if the range holds no values (e.g. start > end, step > 0).
    """
    if step == 0:
        raise ValueError("arange() step must be non-zero")
    count = int(math.floor((end - start) / step + tol)) + 1
    if count <= 0:
        raise ShapeError(f"arange({start}, {end}, {step}) is empty")
    return row_vector(start + step * np.arange(count))


def hstack(a: Matrix, b: Matrix) -> Matrix:
    """Columns of a followed by columns of b; heights must agree."""
    if a.height != b.height:
        raise ShapeMismatchError(
            f"hstack needs equal heights, got {a.shape} and {b.shape}"
        )
    return Matrix(np.hstack((a.to_numpy(), b.to_numpy())))


def vstack(a: Matrix, b: Matrix) -> Matrix:
    """Rows of a followed by rows of b; widths must agree."""
    if a.width != b.width:
        raise ShapeMismatchError(
            f"vstack needs equal widths, got {a.shape} and {b.shape}"
        )
    return Matrix(np.vstack((a.to_numpy(), b.to_numpy())))
