"""
Plotting
========

Visualization utilities for *Fast Fourier Color Constancy* results.
"""

from __future__ import annotations

import typing

import numpy as np

if typing.TYPE_CHECKING:
    from colour.hints import Any, ArrayLike, Tuple
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

from colour.io import convert_bit_depth
from colour.plotting import plot_image

from colour_ffcc.constancy.correction import normalise_minimum_maximum
from colour_ffcc.constancy.ffcc import DataFFCC

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "plot_ffcc_results",
]


def plot_ffcc_results(
    ffcc_data: DataFFCC,
    image: ArrayLike | None = None,
    **kwargs: Any,
) -> Tuple[Tuple[Figure, Axes], ...]:
    """
    Visualize *Fast Fourier Color Constancy* results.

    Parameters
    ----------
    ffcc_data
        *FFCC* pipeline results.
    image
        Optional original 8-bit image with *BGR* channel order, plotted
        before the corrected image.

    Other Parameters
    ----------------
    kwargs
        {:func:`colour.plotting.artist`, :func:`colour.plotting.render`},
        See the documentation of the previously listed definitions.

    Returns
    -------
    :class:`tuple`
        Current figures and axes of the plotted images.

    Notes
    -----
    -   Generates 3 plots, or 4 if ``image`` is provided: the log-chrominance
        histogram, the response map and the corrected image.

    Examples
    --------
    >>> from colour_ffcc import enhance_ffcc, load_model
    >>> model = load_model("model.json")  # doctest: +SKIP
    >>> import cv2
    >>> image = cv2.imread("image.png")  # doctest: +SKIP
    >>> data = enhance_ffcc(image, model, additional_data=True)  # doctest: +SKIP
    >>> plot_ffcc_results(data, image)  # doctest: +SKIP
    """

    plots = []

    if image is not None:
        plots.append(
            plot_image(
                convert_bit_depth(np.asarray(image)[..., ::-1], "float32"),
                text_kwargs={"text": "Original Image", "color": "white"},
                **kwargs,
            )
        )

    plots.append(
        plot_image(
            np.sqrt(normalise_minimum_maximum(ffcc_data.histogram)),
            imshow_kwargs={"cmap": "magma"},
            text_kwargs={"text": "Log-Chrominance Histogram", "color": "white"},
            **kwargs,
        )
    )

    plots.append(
        plot_image(
            normalise_minimum_maximum(ffcc_data.response),
            imshow_kwargs={"cmap": "viridis"},
            text_kwargs={
                "text": "Response (u={:.4f}, v={:.4f})".format(*ffcc_data.uv),
                "color": "white",
            },
            **kwargs,
        )
    )

    plots.append(
        plot_image(
            convert_bit_depth(ffcc_data.image[..., ::-1], "float32"),
            text_kwargs={"text": "Corrected Image", "color": "white"},
            **kwargs,
        )
    )

    return tuple(plots)
