"""
White Balance Correction
========================

Define the objects correcting the white balance of an image from an
illuminant estimate:

-   :func:`colour_ffcc.correction_gains`
-   :func:`colour_ffcc.white_balance_ffcc`
"""

from __future__ import annotations

import logging
import typing

import numpy as np

if typing.TYPE_CHECKING:
    from colour.hints import ArrayLike, NDArrayFloat, NDArrayInt

from colour.utilities import as_float_array

from colour_ffcc.constancy.common import validate_image
from colour_ffcc.constancy.estimation import uv_to_illuminant_RGB

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "correction_gains",
    "normalise_minimum_maximum",
    "white_balance_ffcc",
]

LOGGER = logging.getLogger(__name__)


def correction_gains(uv: ArrayLike) -> NDArrayFloat:
    """
    Return the per-channel gains dividing the image channels for specified
    illuminant log-chrominance.

    Parameters
    ----------
    uv
        Illuminant log-chrominance :math:`(u, v)`.

    Returns
    -------
    :class:`numpy.ndarray`
        Gains in *BGR* order, i.e., the image channel order.

    Examples
    --------
    >>> correction_gains([0, 0])  # doctest: +ELLIPSIS
    array([ 0.5773502...,  0.5773502...,  0.5773502...])
    """

    return uv_to_illuminant_RGB(uv)[..., ::-1]


def normalise_minimum_maximum(a: ArrayLike) -> NDArrayFloat:
    """
    Normalise specified array to range [0, 1] using its finite minimum and
    maximum.

    A constant array is mapped to zeros, *NaN* and negative infinity are
    mapped to 0 and positive infinity to 1.

    Parameters
    ----------
    a
        Array to normalise.

    Returns
    -------
    :class:`numpy.ndarray`
        Normalised array.

    Examples
    --------
    >>> normalise_minimum_maximum([2, 4, 6])
    array([ 0. ,  0.5,  1. ])
    >>> normalise_minimum_maximum([3, 3])
    array([ 0.,  0.])
    """

    a = as_float_array(a)

    finite = a[np.isfinite(a)]

    if finite.size == 0:
        return np.zeros_like(a)

    minimum, maximum = np.min(finite), np.max(finite)
    extent = maximum - minimum

    if extent > np.finfo(np.float64).eps:
        a = (a - minimum) / extent
    else:
        a = np.where(np.isfinite(a), 0, a)

    return np.nan_to_num(a, nan=0, posinf=1, neginf=0)


def white_balance_ffcc(image: ArrayLike, uv: ArrayLike) -> NDArrayInt:
    """
    Correct the white balance of specified image for specified illuminant
    log-chrominance.

    The image channels are divided by their respective gain, the result is
    min-max normalised as a whole to range [0, 1] and scaled to 8-bit.

    Parameters
    ----------
    image
        Image with *BGR* channel order to correct.
    uv
        Illuminant log-chrominance :math:`(u, v)`.

    Returns
    -------
    :class:`numpy.ndarray`
        Corrected 8-bit image with *BGR* channel order.

    Raises
    ------
    :class:`colour_ffcc.InvalidImageError`
        If the image is not a non-empty array with 3 channels.

    Notes
    -----
    -   The global normalisation rescales the image brightness and contrast
        in addition to its colour.

    Examples
    --------
    >>> image = np.array([[[0.1, 0.2, 0.4], [0.2, 0.4, 0.8]]])
    >>> white_balance_ffcc(image, [0, 0])
    array([[[  0,  36, 109],
            [ 36, 109, 255]]], dtype=uint8)
    """

    image = validate_image(image)

    gains = correction_gains(uv)

    LOGGER.debug('Correction gains are "(b=%s, g=%s, r=%s)".', *gains)

    image_c = as_float_array(image, np.float32) / as_float_array(gains, np.float32)

    image_c = normalise_minimum_maximum(image_c)

    return np.clip(np.rint(image_c * 255), 0, 255).astype(np.uint8)
