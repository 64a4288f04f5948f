# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Linear systems on top of Matrix.inv
"""

import logging

from .errors import NotInvertibleError, ShapeMismatchError
from .matrix import Matrix

logger = logging.getLogger(__name__)


def _check_rhs(A: Matrix, b: Matrix) -> None:
    if b.height != A.height:
        raise ShapeMismatchError(
            f"right-hand side has {b.height} rows, A has {A.height}"
        )


def solve(A: Matrix, b: Matrix) -> Matrix:
    """
    Solve A x = b for square, nonsingular A.

    Parameters
    ----------
    A : Matrix  (n, n)
    b : Matrix  (n, k)
        One right-hand side per column.

    Returns
    -------
    x : Matrix  (n, k)

    Raises
    ------
    ShapeMismatchError : b does not have n rows.
    NotInvertibleError : A is non-square or singular.
    """
    _check_rhs(A, b)
    return A.inv() @ b


def least_squares(A: Matrix, b: Matrix) -> Matrix:
    """
    Minimise ‖Ax – b‖₂ through the normal equations AᵀA x = Aᵀb.

    A must have independent columns (so AᵀA is invertible). Returns x with
    shape (A.width, b.width).
    """
    _check_rhs(A, b)
    At = A.transpose()
    try:
        ata_inv = (At @ A).inv()
    except NotInvertibleError as e:
        logger.debug(f"least_squares(): AᵀA of shape {A.width}x{A.width} is singular")
        raise NotInvertibleError("the columns of A are not independent") from e
    return ata_inv @ (At @ b)


def project_onto_colspace(A: Matrix, b: Matrix) -> Matrix:
    """
    Find p = A x, the orthogonal projection of b onto
    the column-space of A.
    """
    return A @ least_squares(A, b)
