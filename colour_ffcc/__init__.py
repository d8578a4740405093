"""
Colour - FFCC
=============

*Fast Fourier Color Constancy* for *Python*.

This package estimates the illuminant colour of an image with a model
trained offline and corrects the image white balance accordingly.

Subpackages
-----------
-   constancy : *Fast Fourier Color Constancy* algorithms and utilities.
"""

from __future__ import annotations

import os
import subprocess

import colour
import cv2

from colour_ffcc.utilities import requirements  # noqa: F401

# isort: split

from .constancy import (
    FFT_METHODS,
    SETTINGS_FFCC,
    DataFFCC,
    InvalidImageError,
    InvalidModelError,
    ModelFFCC,
    correction_gains,
    enhance_ffcc,
    estimate_illuminant_uv,
    filter_histogram,
    load_model,
    log_chrominance_histogram,
    plot_ffcc_results,
    save_model,
    uv_to_illuminant_RGB,
    white_balance_ffcc,
)

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "FFT_METHODS",
    "SETTINGS_FFCC",
    "DataFFCC",
    "InvalidImageError",
    "InvalidModelError",
    "ModelFFCC",
    "correction_gains",
    "enhance_ffcc",
    "estimate_illuminant_uv",
    "filter_histogram",
    "load_model",
    "log_chrominance_histogram",
    "plot_ffcc_results",
    "save_model",
    "uv_to_illuminant_RGB",
    "white_balance_ffcc",
]

__application_name__ = "Colour - FFCC"

__version__ = "0.1.0"

try:
    _version = (
        subprocess.check_output(
            ["git", "describe"],  # noqa: S607
            cwd=os.path.dirname(__file__),
            stderr=subprocess.STDOUT,
        )
        .strip()
        .decode("utf-8")
    )
except Exception:  # noqa: BLE001
    _version = __version__

colour.utilities.ANCILLARY_COLOUR_SCIENCE_PACKAGES[  # pyright: ignore
    "colour-ffcc"
] = _version
colour.utilities.ANCILLARY_RUNTIME_PACKAGES["opencv"] = cv2.__version__  # pyright: ignore

del _version
