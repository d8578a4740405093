"""
Common Utilities
================

Define the common utilities objects that don't fall in any specific category.

-   :attr:`colour_ffcc.SETTINGS_FFCC`
-   :class:`colour_ffcc.InvalidModelError`
-   :class:`colour_ffcc.InvalidImageError`
-   :func:`colour_ffcc.constancy.validate_image`
-   :func:`colour_ffcc.constancy.uv_to_bin`
-   :func:`colour_ffcc.constancy.bin_to_uv`

References
----------
-   :cite:`Barron2017` : Barron, J. T., & Tsai, Y.-T. (2017). Fast Fourier
    Color Constancy. 2017 IEEE Conference on Computer Vision and Pattern
    Recognition (CVPR), 6950-6958. doi:10.1109/CVPR.2017.735
"""

from __future__ import annotations

import typing

import numpy as np

if typing.TYPE_CHECKING:
    from colour.hints import ArrayLike, NDArrayFloat, NDArrayInt

from colour.hints import Any, Dict
from colour.utilities import Structure
from colour.utilities.documentation import (
    DocstringDict,
    is_documentation_building,
)

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "DTYPE_FLOAT_DEFAULT",
    "DTYPE_INT_DEFAULT",
    "SETTINGS_FFCC",
    "InvalidModelError",
    "InvalidImageError",
    "validate_image",
    "uv_to_bin",
    "bin_to_uv",
]

DTYPE_FLOAT_DEFAULT: type[np.float64] = np.float64
"""Dtype used for the computations by default."""

DTYPE_INT_DEFAULT: type[np.int64] = np.int64
"""Integer dtype used for the bin indices by default."""

SETTINGS_FFCC: Dict = {
    "uv_0": -1.421875,
    "bin_size": 1 / 64,
    "bin_count": 256,
    "epsilon": 1e-7,
}
if is_documentation_building():  # pragma: no cover
    SETTINGS_FFCC = DocstringDict(SETTINGS_FFCC)
    SETTINGS_FFCC.__doc__ = """
Settings for *Fast Fourier Color Constancy*, they must match the settings
the model was trained with.
"""


class InvalidModelError(ValueError):
    """
    Raise when the *FFCC* model filter or bias is malformed, i.e., not a
    square real matrix of the expected size or holding non-finite values.
    """


class InvalidImageError(ValueError):
    """
    Raise when an image is not a non-empty array with 3 colour channels.
    """


def validate_image(image: ArrayLike) -> np.ndarray:
    """
    Validate that specified image can be processed by the *FFCC* pipeline.

    Parameters
    ----------
    image
        Image with *BGR* channel order to validate.

    Returns
    -------
    :class:`numpy.ndarray`
        Image as an array, unchanged.

    Raises
    ------
    :class:`colour_ffcc.InvalidImageError`
        If the image does not have 3 dimensions, is empty, does not have
        3 channels or is not numeric.

    Examples
    --------
    >>> validate_image(np.ones([4, 6, 3])).shape
    (4, 6, 3)
    >>> validate_image(np.ones([4, 6]))  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    InvalidImageError: ...
    """

    image = np.asarray(image)

    if image.ndim != 3:
        error = (
            f'Image must have 3 dimensions "(height, width, channels)", '
            f'got "{image.shape}"!'
        )

        raise InvalidImageError(error)

    height, width, channels = image.shape

    if height == 0 or width == 0:
        error = f'Image must not be empty, got "{width}x{height}"!'

        raise InvalidImageError(error)

    if channels != 3:
        error = f'Image must have 3 channels, got "{channels}"!'

        raise InvalidImageError(error)

    if not (
        np.issubdtype(image.dtype, np.integer)
        or np.issubdtype(image.dtype, np.floating)
        or image.dtype == np.bool_
    ):
        error = f'Image must have a real numeric dtype, got "{image.dtype}"!'

        raise InvalidImageError(error)

    return image


def uv_to_bin(uv: ArrayLike, **kwargs: Any) -> NDArrayInt:
    """
    Convert specified log-chrominance values to zero-based histogram bin
    indices.

    Values are rounded half-up to the nearest bin and clamped to the grid.

    Parameters
    ----------
    uv
        Log-chrominance values :math:`u` or :math:`v`.

    Other Parameters
    ----------------
    bin_count
        Number of histogram bins per axis.
    bin_size
        Histogram bin size in log-chrominance units.
    uv_0
        Log-chrominance value of the histogram origin.

    Returns
    -------
    :class:`numpy.ndarray`
        Bin indices in domain [0, bin_count - 1].

    Examples
    --------
    >>> int(uv_to_bin(0))
    90
    >>> uv_to_bin([-10, 10])
    array([  0, 255])
    """

    settings = Structure(**SETTINGS_FFCC)
    settings.update(**kwargs)

    uv = np.asarray(uv, dtype=DTYPE_FLOAT_DEFAULT)

    index = np.floor((uv - settings.uv_0) / settings.bin_size + 0.5)

    return np.clip(index, 1, settings.bin_count).astype(DTYPE_INT_DEFAULT) - 1


def bin_to_uv(index: ArrayLike, **kwargs: Any) -> NDArrayFloat:
    """
    Convert specified zero-based histogram bin indices to log-chrominance
    values, i.e., the inverse of :func:`colour_ffcc.constancy.uv_to_bin`.

    Parameters
    ----------
    index
        Zero-based bin indices.

    Other Parameters
    ----------------
    bin_size
        Histogram bin size in log-chrominance units.
    uv_0
        Log-chrominance value of the histogram origin.

    Returns
    -------
    :class:`numpy.ndarray`
        Log-chrominance values.

    Examples
    --------
    >>> float(bin_to_uv(90))
    0.0
    """

    settings = Structure(**SETTINGS_FFCC)
    settings.update(**kwargs)

    index = np.asarray(index, dtype=DTYPE_FLOAT_DEFAULT)

    return (index + 1) * settings.bin_size + settings.uv_0
