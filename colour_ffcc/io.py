"""
Input / Output
==============

Define the image input / output objects used at the boundary of the
*FFCC* pipeline, images are exchanged with *BGR* channel order:

-   :attr:`colour_ffcc.io.EXTENSIONS_RAW`
-   :func:`colour_ffcc.io.read_raw_BGR`
-   :func:`colour_ffcc.io.read_image_BGR`
-   :func:`colour_ffcc.io.write_image_BGR`
"""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
from colour.utilities import required

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "EXTENSIONS_RAW",
    "read_raw_BGR",
    "read_image_BGR",
    "write_image_BGR",
]

EXTENSIONS_RAW: tuple = (
    ".arw",
    ".cr2",
    ".cr3",
    ".dng",
    ".nef",
    ".orf",
    ".raf",
    ".rw2",
)
"""Camera RAW file extensions read with *rawpy*."""


@required("rawpy")
def read_raw_BGR(path: str | Path) -> np.ndarray:
    """
    Read a camera RAW image in linear space, demosaiced without white
    balance, gamma or brightness adjustment.

    Parameters
    ----------
    path
        Camera RAW image path.

    Returns
    -------
    :class:`numpy.ndarray`
        16-bit image with *BGR* channel order.
    """

    import rawpy

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'"{path}" image file does not exist!')

    with rawpy.imread(str(path)) as raw:
        image = raw.postprocess(
            gamma=(1, 1),
            no_auto_bright=True,
            use_camera_wb=False,
            user_wb=[1.0, 1.0, 1.0, 1.0],
            output_bps=16,
        )

    return np.ascontiguousarray(image[..., ::-1])


def read_image_BGR(path: str | Path) -> np.ndarray:
    """
    Read an image with *BGR* channel order, preserving its bit depth.

    Camera RAW files are read with :func:`colour_ffcc.io.read_raw_BGR`, other
    files with *OpenCV*.

    Parameters
    ----------
    path
        Image path.

    Returns
    -------
    :class:`numpy.ndarray`
        Image with *BGR* channel order.

    Raises
    ------
    :class:`FileNotFoundError`
        If the image file does not exist.
    :class:`ValueError`
        If the image file cannot be decoded.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'"{path}" image file does not exist!')

    if path.suffix.lower() in EXTENSIONS_RAW:
        return read_raw_BGR(path)

    image = cv2.imread(str(path), cv2.IMREAD_COLOR | cv2.IMREAD_ANYDEPTH)
    if image is None:
        raise ValueError(f'"{path}" image file could not be decoded!')

    return image


def write_image_BGR(image: np.ndarray, path: str | Path) -> Path:
    """
    Write specified image with *BGR* channel order.

    Parameters
    ----------
    image
        Image with *BGR* channel order.
    path
        Image path, its extension selects the format.

    Returns
    -------
    :class:`pathlib.Path`
        Image path.

    Raises
    ------
    :class:`ValueError`
        If the image could not be written.
    """

    path = Path(path)

    if not cv2.imwrite(str(path), image):
        raise ValueError(f'"{path}" image file could not be written!')

    return path
