"""
Model
=====

Define the *Fast Fourier Color Constancy* model objects:

-   :class:`colour_ffcc.ModelFFCC`
-   :func:`colour_ffcc.load_model`
-   :func:`colour_ffcc.save_model`

The model is the pair of the learned filter :math:`F` and bias :math:`B`
produced by offline training, it is loaded once and shared read-only.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass

import numpy as np
import scipy.io
from colour.hints import Any, NDArrayFloat
from colour.utilities import Structure

from colour_ffcc.constancy.common import (
    DTYPE_FLOAT_DEFAULT,
    SETTINGS_FFCC,
    InvalidModelError,
)

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "validate_model_matrix",
    "ModelFFCC",
    "load_model",
    "save_model",
]

LOGGER = logging.getLogger(__name__)


def validate_model_matrix(matrix: Any, name: str, bin_count: int) -> NDArrayFloat:
    """
    Validate and convert specified model matrix to a read-only float array.

    Parameters
    ----------
    matrix
        Model matrix to validate, e.g., a nested list parsed from *JSON*.
    name
        Name of the matrix used in the error messages.
    bin_count
        Expected size of both matrix axes.

    Returns
    -------
    :class:`numpy.ndarray`
        Read-only float array.

    Raises
    ------
    :class:`colour_ffcc.InvalidModelError`
        If the matrix is not numeric, not finite or does not have the
        expected shape.
    """

    try:
        array = np.asarray(matrix)
    except ValueError as exception:
        error = f'Model "{name}" matrix is not a regular array: {exception}'

        raise InvalidModelError(error) from exception

    # Booleans, strings, objects and complex values are not accepted.
    if not (
        np.issubdtype(array.dtype, np.integer)
        or np.issubdtype(array.dtype, np.floating)
    ):
        error = f'Model "{name}" matrix must be real numeric, got "{array.dtype}"!'

        raise InvalidModelError(error)

    array = np.array(array, dtype=DTYPE_FLOAT_DEFAULT)

    if array.shape != (bin_count, bin_count):
        error = (
            f'Model "{name}" matrix must have shape "({bin_count}, {bin_count})", '
            f'got "{array.shape}"!'
        )

        raise InvalidModelError(error)

    if not np.all(np.isfinite(array)):
        error = f'Model "{name}" matrix contains non-finite values!'

        raise InvalidModelError(error)

    array.setflags(write=False)

    return array


@dataclass(frozen=True, eq=False)
class ModelFFCC:
    """
    *Fast Fourier Color Constancy* model.

    Parameters
    ----------
    F
        Learned filter :math:`F` convolved with the log-chrominance histogram.
    B
        Learned bias :math:`B` added to the filtered histogram.
    bin_count
        Number of histogram bins per axis the model was trained with.

    Raises
    ------
    :class:`colour_ffcc.InvalidModelError`
        If :math:`F` or :math:`B` are malformed.

    Notes
    -----
    -   Both matrices are copied into read-only arrays so that a model can be
        shared by concurrent pipeline invocations.

    Examples
    --------
    >>> model = ModelFFCC(np.zeros([256, 256]), np.zeros([256, 256]))
    >>> model.F.shape
    (256, 256)
    >>> model.F.flags.writeable
    False
    """

    F: NDArrayFloat
    B: NDArrayFloat
    bin_count: int = SETTINGS_FFCC["bin_count"]

    def __post_init__(self) -> None:
        """Validate the model matrices and make them read-only."""

        object.__setattr__(
            self, "F", validate_model_matrix(self.F, "F", self.bin_count)
        )
        object.__setattr__(
            self, "B", validate_model_matrix(self.B, "B", self.bin_count)
        )


def _get_field(fields: dict, name: str, path: str) -> Any:
    """Return the model field with specified name, ignoring its case."""

    for key, value in fields.items():
        if key.lower() == name.lower():
            return value

    error = f'"{path}" model file does not define the "{name}" field!'

    raise InvalidModelError(error)


def load_model(path: str | os.PathLike, **kwargs: Any) -> ModelFFCC:
    """
    Load a *Fast Fourier Color Constancy* model from specified file.

    The supported formats are:

    -   *JSON* files with ``f`` and ``b`` fields holding the matrices as
        row-major nested lists.
    -   *NumPy* ``.npz`` archives with ``F`` and ``B`` arrays.
    -   *MATLAB* ``.mat`` files with ``F`` and ``B`` variables.

    Field names are case-insensitive.

    Parameters
    ----------
    path
        Model file path.

    Other Parameters
    ----------------
    bin_count
        Number of histogram bins per axis the model was trained with.

    Returns
    -------
    :class:`colour_ffcc.ModelFFCC`
        Loaded model.

    Raises
    ------
    :class:`FileNotFoundError`
        If the model file does not exist.
    :class:`ValueError`
        If the model file extension is not supported.
    :class:`colour_ffcc.InvalidModelError`
        If the model fields are missing or malformed.

    Examples
    --------
    >>> model = load_model("model.json")  # doctest: +SKIP
    >>> model.F.shape  # doctest: +SKIP
    (256, 256)
    """

    settings = Structure(**SETTINGS_FFCC)
    settings.update(**kwargs)

    path = os.fspath(path)

    if not os.path.exists(path):
        error = f'"{path}" model file does not exist!'

        raise FileNotFoundError(error)

    extension = os.path.splitext(path)[-1].lower()

    if extension == ".json":
        with open(path) as json_file:
            fields = json.load(json_file)
    elif extension == ".npz":
        with np.load(path) as npz_file:
            fields = {key: npz_file[key] for key in npz_file.files}
    elif extension == ".mat":
        fields = {
            key: value
            for key, value in scipy.io.loadmat(path).items()
            if not key.startswith("__")
        }
    else:
        error = f'"{extension}" model file format is not supported!'

        raise ValueError(error)

    if not isinstance(fields, dict):
        error = f'"{path}" model file must define an object with fields!'

        raise InvalidModelError(error)

    model = ModelFFCC(
        _get_field(fields, "F", path),
        _get_field(fields, "B", path),
        settings.bin_count,
    )

    LOGGER.debug('Loaded "%s" model with "%s" bins.', path, model.bin_count)

    return model


def save_model(model: ModelFFCC, path: str | os.PathLike) -> str:
    """
    Save specified *Fast Fourier Color Constancy* model to a *JSON* or
    *NumPy* ``.npz`` file.

    Parameters
    ----------
    model
        Model to save.
    path
        Model file path, its extension selects the format.

    Returns
    -------
    :class:`str`
        Model file path.

    Raises
    ------
    :class:`ValueError`
        If the model file extension is not supported.
    """

    path = os.fspath(path)
    extension = os.path.splitext(path)[-1].lower()

    if extension == ".json":
        with open(path, "w") as json_file:
            json.dump({"f": model.F.tolist(), "b": model.B.tolist()}, json_file)
    elif extension == ".npz":
        np.savez_compressed(path, F=model.F, B=model.B)
    else:
        error = f'"{extension}" model file format is not supported!'

        raise ValueError(error)

    return path
