"""Invoke - Maintenance Tasks
===========================
"""

import shutil
from pathlib import Path

from invoke.tasks import task

BASE_DIR = Path(__file__).parent
PACKAGE_DIR = BASE_DIR / "colour_ffcc"
RESULTS_DIR = BASE_DIR / "ffcc_results"


def _remove_matching(pattern: str, directories: bool = True):
    """Remove the files, and optionally directories, matching a pattern."""
    for path in BASE_DIR.rglob(pattern):
        if path.is_dir() and directories:
            print(f"Removing directory: {path}")
            shutil.rmtree(path)
        elif path.is_file():
            print(f"Removing file: {path}")
            path.unlink()


@task
def clean(ctx, bytecode=True, results=False, pytest=True):
    """
    Clean the repository from temporary files and enhanced images.

    Parameters
    ----------
    bytecode : bool
        Remove *.pyc* files and *__pycache__* directories (Default: True).
    results : bool
        Remove the images written by the *colour-ffcc* command
        (Default: False).
    pytest : bool
        Remove the *pytest* cache (Default: True).
    """

    print(">>> Cleaning...")

    if bytecode:
        _remove_matching("__pycache__")
        _remove_matching("*.pyc", directories=False)

    if pytest:
        _remove_matching(".pytest_cache")

    if results:
        if RESULTS_DIR.exists():
            shutil.rmtree(RESULTS_DIR)
            print(f"Removed: {RESULTS_DIR}")
        else:
            print(f'"{RESULTS_DIR}" does not exist, nothing to clean.')

    print(">>> Cleaning done.")


@task
def tests(ctx, doctests=True):
    """
    Run the unit tests, and optionally the doctests, with *pytest*.

    Parameters
    ----------
    doctests : bool
        Also run the examples of the docstrings (Default: True).
    """

    arguments = ["pytest"]
    # "pyproject.toml" enables the doctests through "addopts".
    if not doctests:
        arguments.append("--override-ini=addopts=")
    arguments += ["--ignore=tasks.py", str(PACKAGE_DIR)]

    print(">>> Running tests...")
    ctx.run(" ".join(arguments))


@task
def requirements(ctx):
    """Export *requirements.txt* with *uv*."""

    print(">>> Exporting requirements.txt...")
    ctx.run("uv export --no-hashes --all-extras --no-dev > requirements.txt")
    print(">>> requirements.txt exported.")
