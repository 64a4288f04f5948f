# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Tuple

import numpy as np

from .utils import permutation_sign

logger = logging.getLogger(__name__)


def gauss_jordan(A: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Gauss-Jordan elimination with partial pivoting on a square n by n
    matrix A, carried out side by side on A and the identity.

    Parameters
    ----------
    A : np.ndarray               (n, n)
        Square coefficient matrix. It is copied, never modified.

    Returns
    -------
    X   : np.ndarray             (n, n)
        The identity after the same row operations that reduce A to I.
        For a nonsingular A this is A^{-1}; for a singular A it holds
        NaN or inf entries.
    det : float
        Product of the pivots, with the sign flipped once per row swap.
        Exactly 0.0 as soon as a zero pivot column is met.
    """
    W = np.array(A, dtype=float, copy=True)
    n, m = W.shape
    if n != m:
        raise ValueError("Gauss-Jordan elimination requires a square matrix")

    X = np.eye(n)
    perm: List[int] = list(range(n))
    pivot_prod = 1.0
    singular = False

    # A zero pivot divides by zero on purpose: the resulting NaN/inf
    # entries are what callers check for afterwards.
    with np.errstate(divide="ignore", invalid="ignore"):
        for k in range(n):
            # The computation is more stable with the largest magnitude
            # entry at or below the diagonal as the pivot.
            max_row = k + int(np.abs(W[k:, k]).argmax())

            if max_row != k:
                W[[k, max_row]] = W[[max_row, k]]
                X[[k, max_row]] = X[[max_row, k]]
                perm[k], perm[max_row] = perm[max_row], perm[k]
                logger.debug(f"column {k}: swapped rows {k} and {max_row}")

            pivot = W[k, k]
            if pivot == 0.0 and not singular:
                logger.debug(f"column {k}: zero pivot, matrix is singular")
                singular = True
            pivot_prod *= pivot

            # Scale the pivot row so the pivot becomes 1
            W[k] /= pivot
            X[k] /= pivot

            # Clear column k in every other row, above and below
            for j in range(n):
                if j == k:
                    continue
                factor = W[j, k]
                W[j] -= factor * W[k]
                X[j] -= factor * X[k]

    if singular:
        return X, 0.0
    return X, permutation_sign(perm) * float(pivot_prod)
