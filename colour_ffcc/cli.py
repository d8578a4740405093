"""
Command Line Interface
======================

Correct the white balance of images with *Fast Fourier Color Constancy*:
every image is read, enhanced with a trained model and written as
``<stem>_ffcc.png`` into the output directory.

Usage::

    colour-ffcc --model model.json --output results IMG_0001.png IMG_0002.CR2
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from colour_ffcc.constancy import (
    FFT_METHODS,
    ModelFFCC,
    enhance_ffcc,
    load_model,
    plot_ffcc_results,
)
from colour_ffcc.io import read_image_BGR, write_image_BGR

__author__ = "Colour Developers"
__copyright__ = "Copyright 2018 Colour Developers"
__license__ = "BSD-3-Clause - https://opensource.org/licenses/BSD-3-Clause"
__maintainer__ = "Colour Developers"
__email__ = "colour-developers@colour-science.org"
__status__ = "Production"

__all__ = [
    "process_image",
    "parse_arguments",
    "main",
]

LOGGER = logging.getLogger(__name__)


def process_image(
    image_path: Path,
    model: ModelFFCC,
    output_dir: Path,
    method: str = "NumPy",
    show: bool = False,
) -> Path | None:
    """
    Enhance specified image and write the result into the output directory.

    Parameters
    ----------
    image_path
        Image path.
    model
        *FFCC* model.
    output_dir
        Directory the enhanced image is written into.
    method
        Discrete Fourier transform implementation.
    show
        Whether to show the pipeline results.

    Returns
    -------
    :class:`pathlib.Path` or :py:data:`None`
        Enhanced image path or *None* if the image could not be processed.
    """

    LOGGER.info('Processing "%s" image...', image_path.name)

    try:
        image = read_image_BGR(image_path)
    except (FileNotFoundError, ImportError, ValueError) as error:
        LOGGER.error('Error reading "%s" image: %s', image_path, error)
        return None

    try:
        data = enhance_ffcc(image, model, method, additional_data=True)
    except ValueError as error:
        LOGGER.error('Error enhancing "%s" image: %s', image_path, error)
        return None

    LOGGER.info(
        "   Illuminant: u=%.4f, v=%.4f, gains (b, g, r)=(%.4f, %.4f, %.4f).",
        *data.uv,
        *data.gains,
    )

    output_path = write_image_BGR(
        data.image, output_dir / f"{image_path.stem}_ffcc.png"
    )
    LOGGER.info('Enhanced image saved to "%s".', output_path)

    if show:
        plot_ffcc_results(data, image)

    return output_path


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse the command line arguments.

    Parameters
    ----------
    argv
        Command line arguments, :attr:`sys.argv` is used if *None*.

    Returns
    -------
    :class:`argparse.Namespace`
        Parsed arguments.
    """

    parser = argparse.ArgumentParser(
        prog="colour-ffcc",
        description="White balance images with Fast Fourier Color Constancy.",
    )
    parser.add_argument("images", nargs="+", type=Path, help="Images to enhance.")
    parser.add_argument(
        "--model",
        "-m",
        type=Path,
        required=True,
        help="FFCC model file (.json, .npz or .mat).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("ffcc_results"),
        help="Directory the enhanced images are written into.",
    )
    parser.add_argument(
        "--method",
        choices=list(FFT_METHODS.keys()),
        default="NumPy",
        help="Discrete Fourier transform implementation.",
    )
    parser.add_argument(
        "--show", action="store_true", help="Show the pipeline results."
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging."
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Enhance the images given on the command line.

    Parameters
    ----------
    argv
        Command line arguments, :attr:`sys.argv` is used if *None*.

    Returns
    -------
    :class:`int`
        Exit status, non-zero if the model could not be loaded or any image
        failed.
    """

    arguments = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if arguments.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        model = load_model(arguments.model)
    except (FileNotFoundError, ValueError) as error:
        LOGGER.error('Error loading "%s" model: %s', arguments.model, error)
        return 1

    arguments.output.mkdir(parents=True, exist_ok=True)

    failures = 0
    for image_path in arguments.images:
        if process_image(
            image_path, model, arguments.output, arguments.method, arguments.show
        ) is None:
            failures += 1

    if failures:
        LOGGER.warning("%s image(s) out of %s failed.", failures, len(arguments.images))

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
