"""
Fast Fourier Color Constancy
============================

Define the *Fast Fourier Color Constancy* (FFCC) pipeline objects:

-   :class:`colour_ffcc.DataFFCC`
-   :func:`colour_ffcc.enhance_ffcc`

References
----------
-   :cite:`Barron2017` : Barron, J. T., & Tsai, Y.-T. (2017). Fast Fourier
    Color Constancy. 2017 IEEE Conference on Computer Vision and Pattern
    Recognition (CVPR), 6950-6958. doi:10.1109/CVPR.2017.735
"""

from __future__ import annotations

import logging
import typing
from dataclasses import dataclass

if typing.TYPE_CHECKING:
    from colour.hints import (
        ArrayLike,
        Literal,
        NDArrayFloat,
        NDArrayInt,
        Tuple,
    )

from colour.hints import Any
from colour.utilities import MixinDataclassIterable, Structure

from colour_ffcc.constancy.common import (
    SETTINGS_FFCC,
    InvalidModelError,
    validate_image,
)
from colour_ffcc.constancy.correction import correction_gains, white_balance_ffcc
from colour_ffcc.constancy.estimation import estimate_illuminant_uv
from colour_ffcc.constancy.histogram import log_chrominance_histogram
from colour_ffcc.constancy.matching import filter_histogram
from colour_ffcc.constancy.model import ModelFFCC

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "DataFFCC",
    "enhance_ffcc",
]

LOGGER = logging.getLogger(__name__)


@dataclass
class DataFFCC(MixinDataclassIterable):
    """
    Intermediate and final results of the *FFCC* pipeline.

    Parameters
    ----------
    histogram
        Normalised log-chrominance histogram.
    response
        Response map of the filtered histogram.
    uv
        Estimated illuminant log-chrominance :math:`(u, v)`.
    gains
        Correction gains in *BGR* order.
    image
        Corrected 8-bit image with *BGR* channel order.
    """

    histogram: NDArrayFloat
    response: NDArrayFloat
    uv: Tuple[float, float]
    gains: NDArrayFloat
    image: NDArrayInt


@typing.overload
def enhance_ffcc(
    image: ArrayLike,
    model: ModelFFCC,
    method: Literal["NumPy", "SciPy", "OpenCV"] | str = ...,
    additional_data: Literal[True] = True,
    **kwargs: Any,
) -> DataFFCC: ...


@typing.overload
def enhance_ffcc(
    image: ArrayLike,
    model: ModelFFCC,
    method: Literal["NumPy", "SciPy", "OpenCV"] | str = ...,
    *,
    additional_data: Literal[False],
    **kwargs: Any,
) -> NDArrayInt: ...


@typing.overload
def enhance_ffcc(
    image: ArrayLike,
    model: ModelFFCC,
    method: Literal["NumPy", "SciPy", "OpenCV"] | str,
    additional_data: Literal[False],
    **kwargs: Any,
) -> NDArrayInt: ...


def enhance_ffcc(
    image: ArrayLike,
    model: ModelFFCC,
    method: Literal["NumPy", "SciPy", "OpenCV"] | str = "NumPy",
    additional_data: bool = False,
    **kwargs: Any,
) -> DataFFCC | NDArrayInt:
    """
    Correct the white balance of specified image using
    *Fast Fourier Color Constancy*.

    The process is as follows:

    -   The normalised log-chrominance histogram :math:`N` of input image
        :math:`image` is computed.
    -   Histogram :math:`N` is convolved with the model filter :math:`F` and
        offset by the model bias :math:`B` in the frequency domain into the
        response map :math:`P`.
    -   The peak of response map :math:`P` gives the illuminant
        log-chrominance :math:`(u, v)`.
    -   The channels of image :math:`image` are divided by the unit-norm
        illuminant gains, normalised to [0, 1] and scaled to 8-bit.

    Parameters
    ----------
    image
        Image with *BGR* channel order to correct.
    model
        *FFCC* model.
    method
        Discrete Fourier transform implementation.
    additional_data
        Whether to output additional data.

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
    :class:`colour_ffcc.DataFFCC` or :class:`numpy.ndarray`
        Pipeline results or corrected 8-bit image with *BGR* channel order
        only.

    Raises
    ------
    :class:`colour_ffcc.InvalidModelError`
        If the model is not a :class:`colour_ffcc.ModelFFCC` instance or was
        trained with a different bin count.
    :class:`colour_ffcc.InvalidImageError`
        If the image is not a non-empty array with 3 channels.

    References
    ----------
    :cite:`Barron2017`

    Examples
    --------
    >>> import numpy as np
    >>> F = np.zeros([256, 256])
    >>> F[0, 0] = 1
    >>> model = ModelFFCC(F, np.zeros([256, 256]))
    >>> image = np.array([[[32, 64, 128], [64, 128, 255]]], dtype=np.uint8)
    >>> data = enhance_ffcc(image, model, additional_data=True)
    >>> data.uv
    (-0.6875, 0.6875)
    >>> data.image.shape
    (1, 2, 3)
    """

    settings = Structure(**SETTINGS_FFCC)
    settings.update(**kwargs)

    if not isinstance(model, ModelFFCC):
        error = f'Model must be a "ModelFFCC" instance, got "{type(model)}"!'

        raise InvalidModelError(error)

    if model.bin_count != settings.bin_count:
        error = (
            f'Model was trained with "{model.bin_count}" bins but '
            f'"{settings.bin_count}" bins were requested!'
        )

        raise InvalidModelError(error)

    image = validate_image(image)

    LOGGER.debug('Enhancing "%s" image with "%s" method.', image.shape, method)

    histogram = log_chrominance_histogram(image, **settings)
    response = filter_histogram(histogram, model, method)
    uv = estimate_illuminant_uv(response, **settings)
    image_c = white_balance_ffcc(image, uv)

    if additional_data:
        return DataFFCC(histogram, response, uv, correction_gains(uv), image_c)

    return image_c
