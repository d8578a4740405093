"""
Frequency Domain Matching
=========================

Define the objects applying the *Fast Fourier Color Constancy* model to a
log-chrominance histogram in the frequency domain:

-   :attr:`colour_ffcc.FFT_METHODS`
-   :func:`colour_ffcc.filter_histogram`

References
----------
-   :cite:`Barron2017` : Barron, J. T., & Tsai, Y.-T. (2017). Fast Fourier
    Color Constancy. 2017 IEEE Conference on Computer Vision and Pattern
    Recognition (CVPR), 6950-6958. doi:10.1109/CVPR.2017.735
"""

from __future__ import annotations

import logging
import typing

import cv2
import numpy as np
import scipy.fft

if typing.TYPE_CHECKING:
    from colour.hints import ArrayLike, Literal, NDArrayComplex, NDArrayFloat

from colour.utilities import CanonicalMapping, as_float_array, validate_method

from colour_ffcc.constancy.common import DTYPE_FLOAT_DEFAULT, InvalidModelError
from colour_ffcc.constancy.model import ModelFFCC

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "dft_OpenCV",
    "idft_OpenCV",
    "FFT_METHODS",
    "filter_histogram",
]

LOGGER = logging.getLogger(__name__)


def dft_OpenCV(a: ArrayLike) -> NDArrayComplex:
    """
    Compute the 2-dimensional discrete Fourier transform of specified real
    array using *OpenCV*.

    Parameters
    ----------
    a
        Real array to transform.

    Returns
    -------
    :class:`numpy.ndarray`
        Complex spectrum.
    """

    spectrum = cv2.dft(
        as_float_array(a, DTYPE_FLOAT_DEFAULT), flags=cv2.DFT_COMPLEX_OUTPUT
    )

    return spectrum[..., 0] + 1j * spectrum[..., 1]


def idft_OpenCV(a: ArrayLike) -> NDArrayComplex:
    """
    Compute the scaled 2-dimensional inverse discrete Fourier transform of
    specified complex array using *OpenCV*.

    Parameters
    ----------
    a
        Complex spectrum to transform.

    Returns
    -------
    :class:`numpy.ndarray`
        Complex array, scaled by the reciprocal of the element count so that
        it matches :func:`numpy.fft.ifft2`.
    """

    a = np.asarray(a, dtype=np.complex128)

    inverse = cv2.idft(
        np.ascontiguousarray(np.stack([a.real, a.imag], axis=-1)),
        flags=cv2.DFT_SCALE | cv2.DFT_COMPLEX_OUTPUT,
    )

    return inverse[..., 0] + 1j * inverse[..., 1]


FFT_METHODS: CanonicalMapping = CanonicalMapping(
    {
        "NumPy": (np.fft.fft2, np.fft.ifft2),
        "SciPy": (scipy.fft.fft2, scipy.fft.ifft2),
        "OpenCV": (dft_OpenCV, idft_OpenCV),
    }
)
FFT_METHODS.__doc__ = """
Supported 2-dimensional forward and inverse discrete Fourier transform pairs.
"""


def filter_histogram(
    histogram: ArrayLike,
    model: ModelFFCC,
    method: Literal["NumPy", "SciPy", "OpenCV"] | str = "NumPy",
) -> NDArrayFloat:
    """
    Filter specified log-chrominance histogram with specified model in the
    frequency domain and return the response map.

    The response :math:`P` is computed as
    :math:`P = \\Re(\\mathcal{F}^{-1}(\\mathcal{F}(N) \\circ \\mathcal{F}(F)
    + \\mathcal{F}(B) / 2))` where :math:`N` is the histogram, i.e., the
    circular convolution of the histogram with the learned filter plus the
    learned bias.

    Parameters
    ----------
    histogram
        Normalised log-chrominance histogram.
    model
        *FFCC* model.
    method
        Discrete Fourier transform implementation.

    Returns
    -------
    :class:`numpy.ndarray`
        Response map, higher values denote a more likely illuminant
        log-chrominance.

    Raises
    ------
    :class:`colour_ffcc.InvalidModelError`
        If the model is not a :class:`colour_ffcc.ModelFFCC` instance.
    :class:`ValueError`
        If the histogram shape does not match the model shape.

    References
    ----------
    :cite:`Barron2017`

    Examples
    --------
    >>> F = np.zeros([256, 256])
    >>> F[0, 0] = 1
    >>> model = ModelFFCC(F, np.zeros([256, 256]))
    >>> histogram = np.zeros([256, 256])
    >>> histogram[90, 90] = 1
    >>> response = filter_histogram(histogram, model)
    >>> [int(i) for i in np.unravel_index(np.argmax(response), response.shape)]
    [90, 90]
    """

    if not isinstance(model, ModelFFCC):
        error = f'Model must be a "ModelFFCC" instance, got "{type(model)}"!'

        raise InvalidModelError(error)

    histogram = as_float_array(histogram, DTYPE_FLOAT_DEFAULT)

    if histogram.shape != model.F.shape:
        error = (
            f'Histogram shape "{histogram.shape}" does not match the model '
            f'shape "{model.F.shape}"!'
        )

        raise ValueError(error)

    method = validate_method(method, tuple(FFT_METHODS))

    fft, ifft = FFT_METHODS[method]

    # The bias spectrum halving is part of the trained model convention.
    spectrum = fft(histogram) * fft(model.F) + fft(model.B) / 2

    response = as_float_array(np.real(ifft(spectrum)), DTYPE_FLOAT_DEFAULT)

    LOGGER.debug(
        'Filtered histogram with "%s" method, response range is [%s, %s].',
        method,
        np.min(response),
        np.max(response),
    )

    return response
