################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for 4x4 matrix buffers."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


_LOG: logging.Logger = logging.getLogger(__name__)


# Number of rows and columns in a transform matrix
MATRIX_ORDER: int = 4

# Number of elements in a flat row-major transform buffer
MATRIX_SIZE: int = MATRIX_ORDER * MATRIX_ORDER

# Element type expected by GL matrix upload calls
MATRIX_DTYPE: type[np.float32] = np.float32

IDENTITY_VALUES: tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)  # fmt: skip


def ensure_buffer(values: Sequence[float], name: str) -> NDArray[np.float32]:
    """Return a fresh float32 copy of a flat row-major matrix buffer."""
    array: NDArray[np.float32] = np.array(values, dtype=MATRIX_DTYPE)
    if array.ndim != 1 or array.size != MATRIX_SIZE:
        _LOG.debug("Rejecting %s with shape %s", name, array.shape)
        raise ValueError(f"{name} must be a flat sequence of {MATRIX_SIZE} elements")

    return array


def ensure_index(index: int, name: str) -> int:
    """Return a row or column index after checking it is in range."""
    if not 0 <= index < MATRIX_ORDER:
        raise IndexError(f"{name} must be in [0, {MATRIX_ORDER - 1}], got {index}")

    return index
