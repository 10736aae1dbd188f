################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for transform chain composition."""

from __future__ import annotations

import numpy as np

from oasis_graphics.math_utils.matrix4x4 import Matrix4x4
from oasis_graphics.math_utils.transforms import compose


# Translation by (1, 2, 3) acting on column vectors
TRANSLATION_VALUES: list[float] = [
    1.0, 0.0, 0.0, 1.0,
    0.0, 1.0, 0.0, 2.0,
    0.0, 0.0, 1.0, 3.0,
    0.0, 0.0, 0.0, 1.0,
]  # fmt: skip

SCALE_VALUES: list[float] = [
    2.0, 0.0, 0.0, 0.0,
    0.0, 2.0, 0.0, 0.0,
    0.0, 0.0, 2.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
]  # fmt: skip


def test_compose_empty_is_identity() -> None:
    """Checks an empty chain is the identity."""
    assert compose() == Matrix4x4.identity()


def test_compose_single() -> None:
    """Checks a single transform is returned unchanged as a new matrix."""
    model: Matrix4x4 = Matrix4x4(TRANSLATION_VALUES)
    result: Matrix4x4 = compose(model)
    assert result == model
    assert result is not model


def test_compose_matches_product() -> None:
    """Checks composition order matches the multiply operator."""
    translate: Matrix4x4 = Matrix4x4(TRANSLATION_VALUES)
    scale: Matrix4x4 = Matrix4x4(SCALE_VALUES)
    assert compose(translate, scale) == translate * scale
    assert compose(scale, translate) == scale * translate
    assert compose(translate, scale) != compose(scale, translate)


def test_compose_translate_then_scale() -> None:
    """Checks translating then scaling doubles the translation."""
    result: Matrix4x4 = compose(
        Matrix4x4(TRANSLATION_VALUES), Matrix4x4(SCALE_VALUES)
    )
    assert [result.element(row, 3) for row in range(4)] == [2.0, 4.0, 6.0, 1.0]

    # Point [1, 1, 1] maps to 2 * (p + t)
    point: np.ndarray = np.array([1.0, 1.0, 1.0, 1.0], dtype=np.float32)
    mapped: np.ndarray = result.as_array().reshape(4, 4) @ point
    assert np.array_equal(mapped, np.array([4.0, 6.0, 8.0, 1.0], dtype=np.float32))


def test_compose_model_view_projection() -> None:
    """Checks a three stage chain equals the grouped product."""
    model: Matrix4x4 = Matrix4x4(TRANSLATION_VALUES)
    view: Matrix4x4 = Matrix4x4(SCALE_VALUES)
    projection: Matrix4x4 = Matrix4x4.transpose(Matrix4x4(TRANSLATION_VALUES))
    result: Matrix4x4 = compose(model, view, projection)
    assert np.allclose(result.as_array(), ((model * view) * projection).as_array())


def test_compose_does_not_mutate_inputs() -> None:
    """Checks inputs are left unchanged."""
    model: Matrix4x4 = Matrix4x4(TRANSLATION_VALUES)
    view: Matrix4x4 = Matrix4x4(SCALE_VALUES)
    compose(model, view)
    assert model.to_float_list() == TRANSLATION_VALUES
    assert view.to_float_list() == SCALE_VALUES
