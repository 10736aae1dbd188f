################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Composition of transform chains."""

from __future__ import annotations

import logging

from .matrix4x4 import Matrix4x4


_LOG: logging.Logger = logging.getLogger(__name__)


def compose(*matrices: Matrix4x4) -> Matrix4x4:
    """Return the transform applying each matrix in argument order.

    ``compose(model, view, projection)`` maps x to
    projection(view(model(x))). An empty chain is the identity. The inputs
    are not modified.
    """
    _LOG.debug("Composing %d transforms", len(matrices))

    result: Matrix4x4 = Matrix4x4.identity()
    for matrix in matrices:
        result.multiply_into(matrix)
    return result
