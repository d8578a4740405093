"""
Requirements Utilities
======================

Register the optional *rawpy* requirement used to read camera RAW files with
:func:`colour.utilities.required`.
"""

from __future__ import annotations

import colour.utilities

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "is_rawpy_installed",
]


def is_rawpy_installed(raise_exception: bool = False) -> bool:
    """
    Return whether *rawpy* is installed, raising an :class:`ImportError`
    pointing to the ``raw`` extra if it is not and ``raise_exception`` is
    *True*.
    """

    try:
        import rawpy  # noqa: F401
    except ImportError as exception:
        if raise_exception:
            error = (
                f'Reading camera RAW files requires "rawpy": "{exception}".\n'
                f'Install it with: "pip install colour-ffcc[raw]".'
            )

            raise ImportError(error) from exception

        return False

    return True


colour.utilities.requirements.REQUIREMENTS_TO_CALLABLE["rawpy"] = (
    is_rawpy_installed
)
