"""
Define the unit tests for the
:mod:`colour_ffcc.constancy.correction` module.
"""

from __future__ import annotations

import numpy as np
import pytest
from colour.constants import TOLERANCE_ABSOLUTE_TESTS

from colour_ffcc.constancy.common import InvalidImageError
from colour_ffcc.constancy.correction import (
    correction_gains,
    normalise_minimum_maximum,
    white_balance_ffcc,
)

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "TestCorrectionGains",
    "TestNormaliseMinimumMaximum",
    "TestWhiteBalanceFFCC",
]


class TestCorrectionGains:
    """
    Define :func:`colour_ffcc.constancy.correction.correction_gains`
    definition unit tests methods.
    """

    def test_correction_gains(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.correction_gains`
        definition unit tests methods.
        """

        np.testing.assert_allclose(
            correction_gains((0, 0)),
            np.full(3, 1 / np.sqrt(3)),
            atol=TOLERANCE_ABSOLUTE_TESTS,
        )

        # BGR order, the red gain is the smallest for a reddish illuminant.
        np.testing.assert_allclose(
            correction_gains((np.log(2), 0)),
            [2 / 3, 2 / 3, 1 / 3],
            atol=TOLERANCE_ABSOLUTE_TESTS,
        )


class TestNormaliseMinimumMaximum:
    """
    Define :func:`colour_ffcc.constancy.correction.normalise_minimum_maximum`
    definition unit tests methods.
    """

    def test_normalise_minimum_maximum(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.\
normalise_minimum_maximum` definition unit tests methods.
        """

        np.testing.assert_allclose(
            normalise_minimum_maximum([[-2, 0], [2, 6]]),
            [[0, 0.25], [0.5, 1]],
            atol=TOLERANCE_ABSOLUTE_TESTS,
        )

        np.testing.assert_equal(normalise_minimum_maximum(np.full([2, 2], 7)), 0)

    def test_nan_support_normalise_minimum_maximum(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.\
normalise_minimum_maximum` definition nan support.
        """

        np.testing.assert_allclose(
            normalise_minimum_maximum([np.nan, -np.inf, 1, 3, np.inf]),
            [0, 0, 0, 1, 1],
            atol=TOLERANCE_ABSOLUTE_TESTS,
        )

        np.testing.assert_equal(normalise_minimum_maximum([np.nan, np.inf]), [0, 0])


class TestWhiteBalanceFFCC:
    """
    Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
    definition unit tests methods.
    """

    def test_white_balance_ffcc(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
        definition unit tests methods.
        """

        image = np.random.default_rng(11).integers(1, 256, [12, 9, 3], np.uint8)

        image_c = white_balance_ffcc(image, (0.2, -0.3))

        assert image_c.shape == image.shape
        assert image_c.dtype == np.uint8
        assert np.min(image_c) == 0
        assert np.max(image_c) == 255

    def test_neutral_illuminant(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
        definition with a neutral illuminant, i.e., only the min-max
        normalisation is applied.
        """

        image = np.array([[[10, 20, 30], [40, 50, 60]]], dtype=np.uint8)

        np.testing.assert_array_equal(
            white_balance_ffcc(image, (0, 0)),
            [[[0, 51, 102], [153, 204, 255]]],
        )

    def test_colour_cast_removal(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
        definition neutralising the illuminant colour.
        """

        # Grey surfaces under an illuminant with G / R = 2 and G / B = 1.
        image = np.array(
            [[[50, 50, 25], [100, 100, 50], [200, 200, 100]]], dtype=np.float32
        )

        image_c = white_balance_ffcc(image, (np.log(2), 0)).astype(np.int64)

        np.testing.assert_array_equal(image_c[..., 0], image_c[..., 1])
        np.testing.assert_allclose(image_c[..., 0], image_c[..., 2], atol=1)

    def test_constant_image(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
        definition on a constant image.
        """

        np.testing.assert_array_equal(
            white_balance_ffcc(np.full([4, 4, 3], 0.5), (0, 0)), 0
        )

    def test_non_finite(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
        definition on images with non-finite values.
        """

        image = np.array([[[0, 1, 2], [np.nan, np.inf, -np.inf]]])

        np.testing.assert_array_equal(
            white_balance_ffcc(image, (0, 0)), [[[0, 128, 255], [0, 255, 0]]]
        )

    def test_input_not_mutated(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
        definition leaving the input image unchanged.
        """

        image = np.random.default_rng(12).random([6, 6, 3]).astype(np.float32)
        image_c = np.copy(image)

        white_balance_ffcc(image, (0.5, 0.5))

        np.testing.assert_array_equal(image, image_c)

    def test_raise_exception_white_balance_ffcc(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.correction.white_balance_ffcc`
        definition raised exception.
        """

        pytest.raises(InvalidImageError, white_balance_ffcc, np.ones([4, 4]), (0, 0))
        pytest.raises(
            InvalidImageError, white_balance_ffcc, np.ones([4, 4, 2]), (0, 0)
        )
