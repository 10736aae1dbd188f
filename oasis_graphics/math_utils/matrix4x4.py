################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Row-major 4x4 single-precision transform matrix.

Values are stored as 16 float32 elements, one row after the other:

    row 0 -> indices 0..3
    row 1 -> indices 4..7
    row 2 -> indices 8..11
    row 3 -> indices 12..15

Multiplication represents composition of linear maps. ``A * B`` is the
transform that applies ``A`` first and then ``B``, so the stored product is
the row-major matrix ``B @ A``.

Every public accessor returns a copy of the storage. Buffers handed to a GL
upload call can be modified freely without affecting the matrix.
"""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Sequence
from typing import Union

import numpy as np
from numpy.typing import NDArray

from .validation import IDENTITY_VALUES
from .validation import MATRIX_DTYPE
from .validation import MATRIX_ORDER
from .validation import MATRIX_SIZE
from .validation import ensure_buffer
from .validation import ensure_index


class Matrix4x4:
    """4x4 float32 matrix value type in row-major order."""

    __slots__ = ("_values",)

    def __init__(
        self, values: Optional[Union["Matrix4x4", Sequence[float]]] = None
    ) -> None:
        """Create an identity, buffer-initialized, or copied matrix.

        Args:
            values: None for the identity, another Matrix4x4 to copy, or a
                flat sequence of exactly 16 row-major values

        Raises:
            ValueError: if a buffer does not hold exactly 16 elements
        """
        self._values: NDArray[np.float32]
        if values is None:
            self._values = np.array(IDENTITY_VALUES, dtype=MATRIX_DTYPE)
        elif isinstance(values, Matrix4x4):
            self._values = values._values.copy()
        else:
            self._values = ensure_buffer(values, "values")

    @staticmethod
    def identity() -> "Matrix4x4":
        """Return a new identity matrix."""
        return Matrix4x4()

    def copy(self) -> "Matrix4x4":
        """Return an independent copy of this matrix."""
        return Matrix4x4(self)

    def __copy__(self) -> "Matrix4x4":
        """Return an independent copy of this matrix."""
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "Matrix4x4":
        """Return an independent copy of this matrix."""
        return self.copy()

    ############################################################################
    # Multiplication
    ############################################################################

    def multiply_into(self, rhs: "Matrix4x4") -> None:
        """Compose ``rhs`` after this transform, in place.

        Afterwards this matrix maps x to rhs(self(x)). Element-wise:

            result[i][j] = sum_k rhs[i][k] * self[k][j]

        Each row is summed over k in increasing order with float32 rounding
        after every multiply and add. Rows are accumulated into a new buffer
        from the original values, so ``m.multiply_into(m)`` squares ``m``.
        """
        lhs_mat: NDArray[np.float32] = self._as_square()
        rhs_mat: NDArray[np.float32] = rhs._as_square()
        product: NDArray[np.float32] = np.empty_like(lhs_mat)
        for i in range(MATRIX_ORDER):
            row: NDArray[np.float32] = rhs_mat[i, 0] * lhs_mat[0, :]
            for k in range(1, MATRIX_ORDER):
                row = row + rhs_mat[i, k] * lhs_mat[k, :]
            product[i, :] = row
        self._values = product.reshape(MATRIX_SIZE)

    @staticmethod
    def multiply(lhs: "Matrix4x4", rhs: "Matrix4x4") -> "Matrix4x4":
        """Return the transform applying ``lhs`` first, then ``rhs``."""
        result: Matrix4x4 = lhs.copy()
        result.multiply_into(rhs)
        return result

    def __mul__(self, other: object) -> "Matrix4x4":
        """Compose two transforms, applying this one first."""
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4.multiply(self, other)

    ############################################################################
    # Transpose
    ############################################################################

    def transpose_in_place(self) -> None:
        """Swap each upper-triangle element with its lower-triangle mirror."""
        # flatten() copies, so no element is overwritten before it is read
        self._values = self._as_square().T.flatten()

    @staticmethod
    def transpose(matrix: "Matrix4x4") -> "Matrix4x4":
        """Return the transpose of ``matrix`` without modifying it."""
        result: Matrix4x4 = matrix.copy()
        result.transpose_in_place()
        return result

    ############################################################################
    # Equality
    ############################################################################

    def equals(self, other: "Matrix4x4") -> bool:
        """Return True if all 16 values compare equal under IEEE-754 rules."""
        return bool(np.array_equal(self._values, other._values))

    def __eq__(self, other: object) -> bool:
        """Compare all values under IEEE-754 rules."""
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        """Return the negation of equality."""
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return not self.equals(other)

    def __hash__(self) -> int:
        """Return a hash consistent with equality."""
        # Adding positive zero maps -0.0 to 0.0 so equal matrices hash equally
        normalized: NDArray[np.float32] = self._values + MATRIX_DTYPE(0.0)
        return hash(normalized.tobytes())

    ############################################################################
    # Buffer access
    ############################################################################

    @property
    def values(self) -> tuple[float, ...]:
        """The 16 row-major values as an immutable tuple."""
        return tuple(float(value) for value in self._values)

    def as_array(self) -> NDArray[np.float32]:
        """Return a flat float32 copy of the row-major values.

        Suitable for a GL upload with the transpose flag set, e.g.
        ``glUniformMatrix4fv(location, 1, GL_TRUE, matrix.as_array())``.
        """
        return self._values.copy()

    def to_float_list(self) -> list[float]:
        """Return the row-major values as a new list."""
        return [float(value) for value in self._values]

    def element(self, row: int, col: int) -> float:
        """Return the value at the given row and column."""
        ensure_index(row, "row")
        ensure_index(col, "col")
        return float(self._values[row * MATRIX_ORDER + col])

    def rows(self) -> tuple[tuple[float, ...], ...]:
        """Return the matrix as four row tuples."""
        values: tuple[float, ...] = self.values
        return tuple(
            values[row * MATRIX_ORDER : (row + 1) * MATRIX_ORDER]
            for row in range(MATRIX_ORDER)
        )

    def __array__(
        self, dtype: Any = None, copy: Optional[bool] = None
    ) -> NDArray[Any]:
        """Return a copy of the row-major values for numpy interop."""
        if copy is False:
            raise ValueError("Matrix4x4 cannot be viewed without a copy")
        if dtype is None:
            return self._values.copy()
        return self._values.astype(dtype)

    def __repr__(self) -> str:
        """Return a representation listing the row-major values."""
        return f"Matrix4x4({self.to_float_list()!r})"

    def _as_square(self) -> NDArray[np.float32]:
        return self._values.reshape(MATRIX_ORDER, MATRIX_ORDER)
