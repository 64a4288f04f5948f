# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense real matrix value type
"""

import logging
import numbers
from typing import Callable, List, Optional, Tuple, Union

import numpy as np

from .elimination import gauss_jordan
from .errors import (
    AxisError,
    DivideByZeroError,
    NotInvertibleError,
    ShapeError,
    ShapeMismatchError,
    SizeMismatchError,
)
from .reductions import REDUCTIONS
from .utils import EPS, check_dim, is_scalar

logger = logging.getLogger(__name__)


def _normalize_index(i, n: int, name: str) -> int:
    if isinstance(i, bool) or not isinstance(i, numbers.Integral):
        raise TypeError(f"{name} index must be an integer, got {type(i).__name__}")
    if not -n <= i < n:
        raise IndexError(f"{name} index {i} out of range for size {n}")
    return int(i) % n


class Matrix:
    """
    Rectangular block of float64 values stored row-major.

    Every operation returns a new Matrix backed by its own buffer; the only
    in-place write is element assignment ``m[i, j] = value``. Vectors are
    matrices with a single row or a single column.

    Parameters
    ----------
    values : Matrix | np.ndarray | nested sequence
        Any 2-D rectangular source of real numbers. It is always copied.

    Example
    -------
    >>> A = Matrix([[4, 7], [2, 6]])
    >>> A.shape
    (2, 2)
    >>> A.det()
    10.0
    """

    # Keep numpy from broadcasting over a Matrix when it sits on the right
    # of a numpy scalar; the reflected operators below handle that case.
    __array_ufunc__ = None

    def __init__(self, values) -> None:
        if isinstance(values, Matrix):
            data = values._data.copy()
        else:
            try:
                data = np.array(values, dtype=float)
            except (TypeError, ValueError) as e:
                raise ShapeError(
                    f"cannot build a matrix from {type(values).__name__}: {e}"
                ) from e
        if data.ndim != 2:
            raise ShapeError(f"matrix data must be 2-D, got {data.ndim}-D")
        if data.size == 0:
            raise ShapeError(f"matrix dimensions must be positive, got {data.shape}")
        self._data = np.ascontiguousarray(data)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        # Takes ownership of a freshly allocated 2-D float array.
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def from_buffer(cls, buffer, height: int, width: int) -> "Matrix":
        """
        Build a height by width matrix from a flat row-major buffer.

        Raises
        ------
        ShapeError : if the buffer is not a flat sequence of real numbers
            holding exactly height * width values.
        """
        height = check_dim(height, "height")
        width = check_dim(width, "width")
        try:
            flat = np.array(buffer, dtype=float)
        except (TypeError, ValueError) as e:
            raise ShapeError(
                f"cannot build a matrix from {type(buffer).__name__}: {e}"
            ) from e
        if flat.ndim != 1:
            raise ShapeError(f"buffer must be flat, got {flat.ndim}-D")
        if flat.size != height * width:
            raise ShapeError(
                f"buffer holds {flat.size} values, "
                f"a {height}x{width} matrix needs {height * width}"
            )
        return cls._wrap(flat.reshape(height, width))

    # ------------------------------------------------------------------
    # Shape and raw data
    # ------------------------------------------------------------------
    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def is_vector(self) -> bool:
        return self.height == 1 or self.width == 1

    @property
    def is_square(self) -> bool:
        return self.height == self.width

    def is_same_shape(self, other: "Matrix") -> bool:
        return self.shape == other.shape

    @property
    def data(self) -> np.ndarray:
        """Flat row-major copy of the values."""
        return self._data.flatten()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def tolist(self) -> List[List[float]]:
        return self._data.tolist()

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    # ------------------------------------------------------------------
    # Element, row and column access
    # ------------------------------------------------------------------
    def _index(self, key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                "matrix indices must be a pair m[i, j]; "
                "use get_row(i) or get_column(j) for vectors"
            )
        i, j = key
        return (
            _normalize_index(i, self.height, "row"),
            _normalize_index(j, self.width, "column"),
        )

    def __getitem__(self, key) -> float:
        i, j = self._index(key)
        return float(self._data[i, j])

    def __setitem__(self, key, value) -> None:
        i, j = self._index(key)
        if not is_scalar(value):
            raise TypeError(f"matrix entries must be real numbers, got {type(value).__name__}")
        self._data[i, j] = float(value)

    def get_row(self, i: int) -> "Matrix":
        """Row i as a 1 by width matrix."""
        i = _normalize_index(i, self.height, "row")
        return Matrix._wrap(self._data[i : i + 1, :].copy())

    def get_column(self, j: int) -> "Matrix":
        """Column j as a height by 1 matrix."""
        j = _normalize_index(j, self.width, "column")
        return Matrix._wrap(self._data[:, j : j + 1].copy())

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------
    def _elementwise(self, other, op, name: str):
        if isinstance(other, Matrix):
            if not self.is_same_shape(other):
                raise ShapeMismatchError(
                    f"cannot {name} matrices of shape {self.shape} and {other.shape}"
                )
            return Matrix._wrap(op(self._data, other._data))
        if is_scalar(other):
            return Matrix._wrap(op(self._data, float(other)))
        return NotImplemented

    def _reflected(self, other, op):
        # Only reached with a scalar on the left; Matrix op Matrix never
        # falls through to the reflected method.
        if is_scalar(other):
            return Matrix._wrap(op(float(other), self._data))
        return NotImplemented

    def __add__(self, other):
        return self._elementwise(other, np.add, "add")

    def __radd__(self, other):
        return self._reflected(other, np.add)

    def __sub__(self, other):
        return self._elementwise(other, np.subtract, "subtract")

    def __rsub__(self, other):
        return self._reflected(other, np.subtract)

    def __mul__(self, other):
        """Hadamard (elementwise) product. Use `dot` or `@` for A·B."""
        return self._elementwise(other, np.multiply, "multiply")

    def __rmul__(self, other):
        return self._reflected(other, np.multiply)

    def __truediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        if other == 0:
            raise DivideByZeroError("matrix division by zero")
        return Matrix._wrap(self._data / float(other))

    def __neg__(self) -> "Matrix":
        return Matrix._wrap(-self._data)

    def __pos__(self) -> "Matrix":
        return self.copy()

    def apply(self, func: Callable[[float], float]) -> "Matrix":
        """
        Return func(x) for every entry x. func is called exactly once per
        entry, in row-major order.
        """
        flat = self._data.ravel()
        out = np.fromiter((func(float(x)) for x in flat), dtype=float, count=flat.size)
        return Matrix._wrap(out.reshape(self.shape))

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------
    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def dot(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self·other.

        Each output cell is the running sum of self[i, k] * other[k, j]
        over k; there is no blocking or reordering.

        Raises
        ------
        ShapeMismatchError : if self.width != other.height.
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"dot expects a Matrix, got {type(other).__name__}")
        if self.width != other.height:
            raise ShapeMismatchError(
                f"cannot multiply {self.shape} by {other.shape}: "
                f"inner dimensions {self.width} and {other.height} differ"
            )
        a = self._data.tolist()
        b = other._data.tolist()
        out = np.zeros((self.height, other.width))
        for i in range(self.height):
            for j in range(other.width):
                acc = 0.0
                for k in range(self.width):
                    acc += a[i][k] * b[k][j]
                out[i, j] = acc
        return Matrix._wrap(out)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def inv(self) -> "Matrix":
        """
        Inverse by Gauss-Jordan elimination with partial pivoting.

        Raises
        ------
        NotInvertibleError : if the matrix is not square, or elimination
            leaves NaN/inf entries behind (zero pivot, i.e. singular).

        Only an exactly zero pivot is rejected. A nearly singular matrix,
        e.g. [[1, 2, 3], [4, 5, 6], [7, 8, 9]], meets a tiny nonzero pivot
        from rounding and comes back with huge entries; check det() or the
        residual of A @ A.inv() when that matters.
        """
        if not self.is_square:
            raise NotInvertibleError(
                f"only square matrices have an inverse, got shape {self.shape}"
            )
        X, _det = gauss_jordan(self._data)
        if not np.all(np.isfinite(X)):
            raise NotInvertibleError("matrix is singular")
        return Matrix._wrap(X)

    def det(self) -> float:
        """
        Determinant as the product of the elimination pivots, negated once
        for every row swap. A non-square matrix gives 0.0.
        """
        if not self.is_square:
            logger.warning(f"det(): shape {self.shape} is not square, returning 0.0")
            return 0.0
        _X, d = gauss_jordan(self._data)
        return d

    # ------------------------------------------------------------------
    # Reshaping
    # ------------------------------------------------------------------
    def reshape(self, new_height: int, new_width: int) -> "Matrix":
        """
        Same values in the same row-major order, laid out as
        new_height by new_width: linear index i lands on
        (i // new_width, i % new_width).
        """
        new_height = check_dim(new_height, "height")
        new_width = check_dim(new_width, "width")
        if new_height * new_width != self.size:
            raise SizeMismatchError(
                f"cannot reshape {self.shape} ({self.size} values) "
                f"into ({new_height}, {new_width})"
            )
        return Matrix._wrap(self._data.reshape(new_height, new_width).copy())

    def flatten(self) -> "Matrix":
        return self.reshape(1, self.size)

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------
    def _reduce(self, name: str, axis: Optional[int]) -> Union[float, "Matrix"]:
        func = REDUCTIONS[name]
        if axis is None:
            return func(self._data.ravel())
        if isinstance(axis, numbers.Integral) and not isinstance(axis, bool):
            if axis == 0:
                values = [func(self.get_row(i).data) for i in range(self.height)]
                return Matrix._wrap(np.array(values, dtype=float).reshape(self.height, 1))
            if axis == 1:
                values = [func(self.get_column(j).data) for j in range(self.width)]
                return Matrix._wrap(np.array(values, dtype=float).reshape(1, self.width))
        raise AxisError(f"axis must be None, 0 or 1, got {axis!r}")

    def sum(self, axis: Optional[int] = None) -> Union[float, "Matrix"]:
        """
        Sum of all entries, or with axis=0 one sum per row (height by 1),
        with axis=1 one sum per column (1 by width). The other reductions
        follow the same axis convention.
        """
        return self._reduce("sum", axis)

    def average(self, axis: Optional[int] = None) -> Union[float, "Matrix"]:
        return self._reduce("average", axis)

    mean = average

    def median(self, axis: Optional[int] = None) -> Union[float, "Matrix"]:
        return self._reduce("median", axis)

    def std(self, axis: Optional[int] = None) -> Union[float, "Matrix"]:
        """Population standard deviation (N in the denominator)."""
        return self._reduce("std", axis)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.is_same_shape(other) and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def allclose(self, other: "Matrix", rtol: float = 1e-9, atol: float = EPS) -> bool:
        if not self.is_same_shape(other):
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def describe(self) -> str:
        """Rows in brackets, values separated by spaces, e.g. [[1.0 2.0]\\n [3.0 4.0]]."""
        rows = ["[" + " ".join(repr(float(x)) for x in row) + "]" for row in self._data]
        return "[" + "\n ".join(rows) + "]"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()})"
