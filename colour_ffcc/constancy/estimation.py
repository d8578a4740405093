"""
Illuminant Estimation
=====================

Define the objects estimating the illuminant from a response map:

-   :func:`colour_ffcc.estimate_illuminant_uv`
-   :func:`colour_ffcc.uv_to_illuminant_RGB`
"""

from __future__ import annotations

import logging
import typing

import numpy as np

if typing.TYPE_CHECKING:
    from colour.hints import ArrayLike, NDArrayFloat, Tuple

from colour.hints import Any
from colour.utilities import as_float_array, tsplit, tstack

from colour_ffcc.constancy.common import DTYPE_FLOAT_DEFAULT, bin_to_uv

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "estimate_illuminant_uv",
    "uv_to_illuminant_RGB",
]

LOGGER = logging.getLogger(__name__)


def estimate_illuminant_uv(response: ArrayLike, **kwargs: Any) -> Tuple[float, float]:
    """
    Estimate the illuminant log-chrominance from specified response map.

    The response map peak is located, ties resolving to the first occurrence
    in row-major order, and its row and column are converted back to the
    :math:`u` and :math:`v` log-chrominance values respectively.

    Parameters
    ----------
    response
        Response map.

    Other Parameters
    ----------------
    bin_size
        Histogram bin size in log-chrominance units.
    uv_0
        Log-chrominance value of the histogram origin.

    Returns
    -------
    :class:`tuple`
        Illuminant log-chrominance :math:`(u, v)`, i.e., the log-ratios of
        green to red and green to blue.

    Examples
    --------
    >>> response = np.zeros([256, 256])
    >>> response[90, 90] = 1
    >>> estimate_illuminant_uv(response)
    (0.0, 0.0)
    """

    response = as_float_array(response, DTYPE_FLOAT_DEFAULT)

    row, column = np.unravel_index(np.argmax(response), response.shape)

    u = float(bin_to_uv(row, **kwargs))
    v = float(bin_to_uv(column, **kwargs))

    LOGGER.debug(
        'Response peak at "(%s, %s)", illuminant is "(u=%s, v=%s)".',
        row,
        column,
        u,
        v,
    )

    return u, v


def uv_to_illuminant_RGB(uv: ArrayLike) -> NDArrayFloat:
    """
    Convert specified illuminant log-chrominance to a unit-norm *RGB*
    illuminant vector.

    Green is the reference channel:
    :math:`(r, g, b) = (e^{-u}, 1, e^{-v}) / \\sqrt{e^{-2u} + e^{-2v} + 1}`.

    Parameters
    ----------
    uv
        Illuminant log-chrominance :math:`(u, v)`.

    Returns
    -------
    :class:`numpy.ndarray`
        Unit-norm *RGB* illuminant vector.

    Examples
    --------
    >>> uv_to_illuminant_RGB([0, 0])  # doctest: +ELLIPSIS
    array([ 0.5773502...,  0.5773502...,  0.5773502...])
    """

    u, v = tsplit(as_float_array(uv, DTYPE_FLOAT_DEFAULT))

    exp_neg_u = np.exp(-u)
    exp_neg_v = np.exp(-v)
    z = np.sqrt(exp_neg_u**2 + exp_neg_v**2 + 1)

    return tstack([exp_neg_u / z, 1 / z, exp_neg_v / z])
