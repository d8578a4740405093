"""
Define the unit tests for the
:mod:`colour_ffcc.constancy.ffcc` module.
"""

from __future__ import annotations

from unittest.mock import patch

import numpy as np
import pytest
from colour.constants import TOLERANCE_ABSOLUTE_TESTS
from colour.utilities import ColourUsageWarning

from colour_ffcc.constancy.common import InvalidImageError, InvalidModelError
from colour_ffcc.constancy.ffcc import DataFFCC, enhance_ffcc
from colour_ffcc.constancy.model import ModelFFCC

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "TestEnhanceFFCC",
]


def _identity_model() -> ModelFFCC:
    """Return a model with an identity filter and a zero bias."""

    F = np.zeros([256, 256])
    F[0, 0] = 1

    return ModelFFCC(F, np.zeros([256, 256]))


class TestEnhanceFFCC:
    """
    Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition unit
    tests methods.
    """

    def test_enhance_ffcc(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition unit
        tests methods.
        """

        image = np.random.default_rng(13).integers(0, 256, [21, 34, 3], np.uint8)

        image_c = enhance_ffcc(image, _identity_model())

        assert isinstance(image_c, np.ndarray)
        assert image_c.shape == image.shape
        assert image_c.dtype == np.uint8

    def test_additional_data(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition
        additional data.
        """

        # Reddish illuminant: G / R = 1 / 2 and G / B = 1.
        image = np.array(
            [[[20, 20, 40], [40, 40, 80]], [[60, 60, 120], [80, 80, 160]]],
            dtype=np.uint8,
        )

        data = enhance_ffcc(image, _identity_model(), additional_data=True)

        assert isinstance(data, DataFFCC)
        assert data.histogram.shape == (256, 256)
        assert data.response.shape == (256, 256)
        assert data.histogram[46, 90] == 1
        assert data.uv == (-0.6875, 0.0)
        np.testing.assert_allclose(
            np.linalg.norm(data.gains), 1, atol=TOLERANCE_ABSOLUTE_TESTS
        )
        assert data.gains[2] > data.gains[0]

        # The corrected image is neutral.
        image_c = data.image.astype(np.int64)
        np.testing.assert_allclose(image_c[..., 0], image_c[..., 2], atol=2)
        np.testing.assert_array_equal(image_c[..., 0], image_c[..., 1])

    def test_uniform_grey(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition on a
        uniform grey image.
        """

        image = np.full([5, 7, 3], 118, dtype=np.uint8)

        data = enhance_ffcc(image, _identity_model(), additional_data=True)

        assert data.uv == (0.0, 0.0)
        np.testing.assert_allclose(
            data.gains, np.full(3, 1 / np.sqrt(3)), atol=TOLERANCE_ABSOLUTE_TESTS
        )
        assert data.image.shape == image.shape

    def test_determinism(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition
        determinism.
        """

        generator = np.random.default_rng(14)
        model = ModelFFCC(
            generator.normal(size=[256, 256]), generator.normal(size=[256, 256])
        )
        image = generator.integers(0, 65536, [17, 13, 3], np.uint16)

        np.testing.assert_array_equal(
            enhance_ffcc(image, model), enhance_ffcc(image, model)
        )

    def test_methods(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition
        agreement of the discrete Fourier transform methods.
        """

        generator = np.random.default_rng(15)
        model = ModelFFCC(generator.random([256, 256]), generator.random([256, 256]))
        image = generator.random([9, 11, 3])

        data = enhance_ffcc(image, model, additional_data=True)

        for method in ("SciPy", "OpenCV"):
            data_m = enhance_ffcc(image, model, method, additional_data=True)

            assert data_m.uv == data.uv
            np.testing.assert_array_equal(data_m.image, data.image)

    def test_degenerate_input(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition on
        an image without any finite log-chrominance.
        """

        B = np.zeros([256, 256])
        B[100, 120] = 1
        model = ModelFFCC(np.ones([256, 256]), B)

        with pytest.warns(ColourUsageWarning):
            data = enhance_ffcc(
                np.zeros([6, 4, 3], np.uint8), model, additional_data=True
            )

        assert data.uv == (101 / 64 - 1.421875, 121 / 64 - 1.421875)
        np.testing.assert_array_equal(data.image, 0)

    def test_input_not_mutated(self) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition
        leaving the input image unchanged.
        """

        image = np.random.default_rng(17).random([8, 8, 3])
        image_c = np.copy(image)

        enhance_ffcc(image, _identity_model())

        np.testing.assert_array_equal(image, image_c)

    @patch("colour_ffcc.constancy.ffcc.filter_histogram")
    @patch("colour_ffcc.constancy.ffcc.log_chrominance_histogram")
    def test_raise_exception_enhance_ffcc(
        self, mock_histogram, mock_filter_histogram
    ) -> None:
        """
        Define :func:`colour_ffcc.constancy.ffcc.enhance_ffcc` definition
        raised exception, before any computation happens.
        """

        image = np.ones([4, 4, 3])

        with pytest.raises(InvalidModelError):
            enhance_ffcc(image, (np.zeros([256, 256]), np.zeros([256, 256])))

        with pytest.raises(InvalidModelError):
            enhance_ffcc(
                image, ModelFFCC(np.zeros([64, 64]), np.zeros([64, 64]), 64)
            )

        with pytest.raises(InvalidImageError):
            enhance_ffcc(np.ones([4, 4]), _identity_model())

        with pytest.raises(InvalidImageError):
            enhance_ffcc(np.ones([0, 4, 3]), _identity_model())

        mock_histogram.assert_not_called()
        mock_filter_histogram.assert_not_called()
