# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

A small dense matrix value type: elementwise arithmetic, matrix products,
reshaping, axis reductions, stacking, and inverse/determinant through
Gauss-Jordan elimination with partial pivoting.

Public API
~~~~~~~~~~
- The value type
    - `Matrix`
- Constructors
    - `zeros`, `ones`, `identity`, `arange`, `row_vector`, `column_vector`
- Stacking
    - `hstack`, `vstack`
- Linear systems
    - `solve`, `least_squares`, `project_onto_colspace`
- Errors
    - `MatrixError` and its subclasses

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import densematrix as dm
>>> A = dm.Matrix([[4, 7], [2, 6]])
>>> (A @ A.inv()).allclose(dm.identity(2))
True
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    AxisError,
    DivideByZeroError,
    MatrixError,
    NotInvertibleError,
    ShapeError,
    ShapeMismatchError,
    SizeMismatchError,
)

# ---------------------------------------------------------------------
# Re-export the high-level names users are expected to call.
# Each of these is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .factory import (
    arange,
    column_vector,
    hstack,
    identity,
    ones,
    row_vector,
    vstack,
    zeros,
)
from .matrix import Matrix
from .solvers import least_squares, project_onto_colspace, solve

__all__ = [
    "Matrix",
    "zeros",
    "ones",
    "identity",
    "arange",
    "row_vector",
    "column_vector",
    "hstack",
    "vstack",
    "solve",
    "least_squares",
    "project_onto_colspace",
    "MatrixError",
    "ShapeError",
    "ShapeMismatchError",
    "SizeMismatchError",
    "AxisError",
    "NotInvertibleError",
    "DivideByZeroError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densematrix”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
