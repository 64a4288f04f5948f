# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Scalar reductions over a flat sequence of values.

`Matrix` uses these for both the whole-matrix form and, one row or column
at a time, for the axis form, so both agree by construction.
"""

import numpy as np


def total(values: np.ndarray) -> float:
    return float(np.sum(values))


def average(values: np.ndarray) -> float:
    return total(values) / len(values)


def median(values: np.ndarray) -> float:
    """
    Middle value of the sorted input; for an even count the mean of the
    two middle values.
    """
    ordered = np.sort(np.asarray(values, dtype=float).ravel())
    n = len(ordered)
    mid = n // 2
    if n % 2 == 0:
        return float((ordered[mid - 1] + ordered[mid]) / 2.0)
    return float(ordered[mid])


def std(values: np.ndarray) -> float:
    """Population standard deviation (divides by N, not N - 1)."""
    values = np.asarray(values, dtype=float)
    mu = average(values)
    return float(np.sqrt(np.sum((values - mu) ** 2) / len(values)))


REDUCTIONS = {
    "sum": total,
    "average": average,
    "median": median,
    "std": std,
}
