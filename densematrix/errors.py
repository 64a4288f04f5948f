# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by densematrix.

Everything derives from `MatrixError`, itself a `ValueError`, so code that
already guards numerical calls with ``except ValueError`` keeps working.
"""


class MatrixError(ValueError):
    """Base class for every error raised by this package."""


class ShapeError(MatrixError):
    """Invalid dimensions or construction input."""


class ShapeMismatchError(ShapeError):
    """Two operands have incompatible shapes for the requested operation."""


class SizeMismatchError(ShapeError):
    """A reshape asked for a different total number of elements."""


class AxisError(MatrixError):
    """Reduction axis is not None, 0 or 1."""


class NotInvertibleError(MatrixError):
    """Matrix is non-square or singular."""


class DivideByZeroError(MatrixError, ZeroDivisionError):
    """Scalar division by exactly zero."""
