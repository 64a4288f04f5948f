# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers

from .errors import ShapeError

EPS: float = 1e-12
ARANGE_TOL: float = 1e-10


def permutation_sign(perm: list[int]) -> float:
    """Return +1 or –1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n − #cycles
    return -1.0 if swaps & 1 else 1.0


def is_scalar(value) -> bool:
    """True for real numbers (int, float, numpy scalars)."""
    return isinstance(value, numbers.Real)


def check_dim(value, name: str) -> int:
    """Validate a single matrix dimension and return it as an int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ShapeError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ShapeError(f"{name} must be positive, got {value}")
    return int(value)
