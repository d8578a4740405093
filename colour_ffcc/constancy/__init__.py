"""
Constancy
=========

*Fast Fourier Color Constancy* algorithms and utilities.

This subpackage provides the log-chrominance histogram computation, the
frequency domain filtering of the histogram with a trained model, the
illuminant estimation and the white balance correction.
"""

from .common import (
    DTYPE_FLOAT_DEFAULT,
    DTYPE_INT_DEFAULT,
    SETTINGS_FFCC,
    InvalidImageError,
    InvalidModelError,
    bin_to_uv,
    uv_to_bin,
    validate_image,
)

# isort: split

from .model import ModelFFCC, load_model, save_model, validate_model_matrix

# isort: split

from .histogram import log_chrominance_histogram
from .matching import FFT_METHODS, dft_OpenCV, filter_histogram, idft_OpenCV
from .estimation import estimate_illuminant_uv, uv_to_illuminant_RGB
from .correction import (
    correction_gains,
    normalise_minimum_maximum,
    white_balance_ffcc,
)

# isort: split

from .ffcc import DataFFCC, enhance_ffcc

# isort: split

from .plotting import plot_ffcc_results

__all__ = [
    "DTYPE_FLOAT_DEFAULT",
    "DTYPE_INT_DEFAULT",
    "SETTINGS_FFCC",
    "InvalidImageError",
    "InvalidModelError",
    "bin_to_uv",
    "uv_to_bin",
    "validate_image",
]
__all__ += [
    "ModelFFCC",
    "load_model",
    "save_model",
    "validate_model_matrix",
]
__all__ += [
    "log_chrominance_histogram",
    "FFT_METHODS",
    "dft_OpenCV",
    "filter_histogram",
    "idft_OpenCV",
    "estimate_illuminant_uv",
    "uv_to_illuminant_RGB",
    "correction_gains",
    "normalise_minimum_maximum",
    "white_balance_ffcc",
]
__all__ += [
    "DataFFCC",
    "enhance_ffcc",
]
__all__ += [
    "plot_ffcc_results",
]
