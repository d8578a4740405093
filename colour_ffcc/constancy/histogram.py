"""
Log-Chrominance Histogram
=========================

Define the log-chrominance histogram objects:

-   :func:`colour_ffcc.log_chrominance_histogram`
"""

from __future__ import annotations

import logging
import typing

import numpy as np

if typing.TYPE_CHECKING:
    from colour.hints import ArrayLike, NDArrayFloat

from colour.hints import Any
from colour.utilities import Structure, as_float_array, tsplit, usage_warning

from colour_ffcc.constancy.common import (
    DTYPE_FLOAT_DEFAULT,
    SETTINGS_FFCC,
    uv_to_bin,
    validate_image,
)

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "log_chrominance_histogram",
]

LOGGER = logging.getLogger(__name__)


def log_chrominance_histogram(image: ArrayLike, **kwargs: Any) -> NDArrayFloat:
    """
    Compute the normalised log-chrominance histogram of specified image.

    The process is as follows:

    -   Input image :math:`image` is converted to *float32* and its natural
        logarithm is taken per channel.
    -   Log-chrominance values :math:`u = log(G) - log(R)` and
        :math:`v = log(G) - log(B)` are computed per pixel, pixels with a
        non-finite :math:`u` or :math:`v`, e.g., zero or negative channel
        values, are discarded.
    -   :math:`u` and :math:`v` are binned on the rows and columns of the
        histogram respectively and each contributing pixel increments its
        bin by 1.
    -   The histogram is divided by the greater of its sum and
        :math:`\\epsilon`.

    Parameters
    ----------
    image
        Image with *BGR* channel order to compute the histogram of.

    Other Parameters
    ----------------
    bin_count
        Number of histogram bins per axis.
    bin_size
        Histogram bin size in log-chrominance units.
    epsilon
        Minimum histogram sum used for normalisation.
    uv_0
        Log-chrominance value of the histogram origin.

    Returns
    -------
    :class:`numpy.ndarray`
        Normalised log-chrominance histogram of shape (bin_count, bin_count).

    Raises
    ------
    :class:`colour_ffcc.InvalidImageError`
        If the image is not a non-empty array with 3 channels.

    Warnings
    --------
    A :class:`colour.utilities.ColourUsageWarning` is issued when no pixel
    contributes to the histogram, the histogram is then all zeros.

    References
    ----------
    :cite:`Barron2017`

    Examples
    --------
    >>> image = np.full([4, 4, 3], 0.5)
    >>> histogram = log_chrominance_histogram(image)
    >>> float(histogram[90, 90])
    1.0
    >>> float(np.sum(histogram))
    1.0
    """

    settings = Structure(**SETTINGS_FFCC)
    settings.update(**kwargs)

    image = validate_image(image)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        B, G, R = tsplit(np.log(as_float_array(image, np.float32)))

        u = as_float_array(G - R, DTYPE_FLOAT_DEFAULT)
        v = as_float_array(G - B, DTYPE_FLOAT_DEFAULT)

    finite = np.logical_and(np.isfinite(u), np.isfinite(v))

    rows = uv_to_bin(u[finite], **settings)
    columns = uv_to_bin(v[finite], **settings)

    # Integer counts keep the accumulation independent of the pixel order.
    counts = np.bincount(
        rows * settings.bin_count + columns, minlength=settings.bin_count**2
    )
    counts = np.reshape(counts, (settings.bin_count, settings.bin_count))

    total = int(np.sum(counts))

    LOGGER.debug(
        "Accumulated %s samples out of %s pixels.", total, image.shape[0] * image.shape[1]
    )

    if total == 0:
        usage_warning(
            "No pixel yields a finite log-chrominance, e.g., the image is black "
            "or saturated, the illuminant estimate will be unreliable!"
        )

    return as_float_array(counts, DTYPE_FLOAT_DEFAULT) / max(settings.epsilon, total)
