################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Matrix math for graphics transform pipelines."""

from __future__ import annotations

from oasis_graphics.math_utils.matrix4x4 import Matrix4x4
from oasis_graphics.math_utils.transforms import compose
from oasis_graphics.math_utils.validation import IDENTITY_VALUES
from oasis_graphics.math_utils.validation import MATRIX_DTYPE
from oasis_graphics.math_utils.validation import MATRIX_ORDER
from oasis_graphics.math_utils.validation import MATRIX_SIZE


__all__ = [
    "IDENTITY_VALUES",
    "MATRIX_DTYPE",
    "MATRIX_ORDER",
    "MATRIX_SIZE",
    "Matrix4x4",
    "compose",
]
